from .profile import *
from .post import *
from .comment import *
