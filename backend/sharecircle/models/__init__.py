from .profile import *
from .post import *
from .like import *
from .comment import *
from .friendship import *
from .shared_post import *
from .message import *

__all__ = [
    "Profile",
    "ProfileBase",
    "ProfileCreate",
    "ProfileUpdate",
    "Post",
    "PostBase",
    "PostCreate",
    "PostUpdate",
    "Like",
    "Comment",
    "CommentBase",
    "CommentCreate",
    "CommentUpdate",
    "FriendEdge",
    "canonical_pair",
    "SharedPost",
    "Message",
]
