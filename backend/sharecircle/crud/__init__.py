from . import comment, friendship, like, post, profile, shared_post, visibility

__all__ = [
    "comment",
    "friendship",
    "like",
    "post",
    "profile",
    "shared_post",
    "visibility",
]
