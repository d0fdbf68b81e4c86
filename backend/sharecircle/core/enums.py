from enum import Enum, unique


@unique
class Visibility(str, Enum):
    PUBLIC = "public"
    FRIENDS = "friends"


@unique
class FriendStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"


@unique
class Relationship(str, Enum):
    """Relationship between the viewer and another profile, seen from the viewer."""

    NONE = "none"
    PENDING_SENT = "pending_sent"
    PENDING_RECEIVED = "pending_received"
    FRIENDS = "friends"
    SELF = "self"
