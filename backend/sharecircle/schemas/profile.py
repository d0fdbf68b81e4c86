from datetime import datetime
from uuid import UUID

from sqlmodel import SQLModel

from sharecircle.core.enums import Relationship
from sharecircle.models.profile import ProfileBase

__all__ = [
    "ProfilePublic",
    "ProfileSummary",
    "ProfileWithFriendStatus",
]


class ProfilePublic(ProfileBase):
    id: UUID
    created_at: datetime


class ProfileSummary(SQLModel):
    id: UUID
    username: str
    display_name: str | None
    avatar_url: str | None


class ProfileWithFriendStatus(ProfilePublic):
    friend_status: Relationship
