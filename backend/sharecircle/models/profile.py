from datetime import datetime
from uuid import UUID

from pydantic import field_validator
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from sharecircle.models.utils import normalize_username, reject_null
from sharecircle.utils import now_utc

__all__ = [
    "ProfileBase",
    "ProfileCreate",
    "ProfileUpdate",
    "Profile",
]


# Shared properties
class ProfileBase(SQLModel):
    username: str = Field(unique=True, index=True, min_length=3, max_length=50)
    display_name: str | None = Field(default=None, max_length=255)
    avatar_url: str | None = Field(default=None, max_length=2048)
    bio: str | None = Field(default=None, max_length=500)


# Properties to receive via API on creation
class ProfileCreate(ProfileBase):
    @field_validator("username")
    @classmethod
    def check_username(cls, value: str) -> str:
        return normalize_username(value)


# Properties to receive via API on update, all are optional
class ProfileUpdate(SQLModel):
    username: str | None = Field(default=None, min_length=3, max_length=50)
    display_name: str | None = Field(default=None, max_length=255)
    avatar_url: str | None = Field(default=None, max_length=2048)
    bio: str | None = Field(default=None, max_length=500)

    @field_validator("username")
    @classmethod
    def check_username(cls, value: str | None) -> str:
        return normalize_username(reject_null(value, "username"))


# The primary key is the identity issued by the authentication provider.
class Profile(ProfileBase, table=True):
    __tablename__ = "profiles"  # type: ignore[assignment]

    id: UUID = Field(primary_key=True)
    created_at: datetime = Field(
        default_factory=now_utc, sa_type=DateTime(timezone=True), nullable=False
    )
