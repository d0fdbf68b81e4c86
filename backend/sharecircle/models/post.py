from datetime import datetime
from uuid import UUID, uuid4

from pydantic import field_validator
from sqlalchemy import DateTime
from sqlalchemy import Enum as SAEnum
from sqlmodel import Column, Field, SQLModel

from sharecircle.core.enums import Visibility
from sharecircle.models.utils import normalize_text, reject_null
from sharecircle.utils import now_utc

__all__ = [
    "PostBase",
    "PostCreate",
    "PostUpdate",
    "Post",
]


class PostBase(SQLModel):
    content: str = Field(min_length=1, max_length=5000)
    image_url: str | None = Field(default=None, max_length=2048)


class PostCreate(PostBase):
    visibility: Visibility = Field(default=Visibility.PUBLIC)

    @field_validator("content")
    @classmethod
    def check_content(cls, value: str) -> str:
        return normalize_text(value)


class PostUpdate(SQLModel):
    content: str | None = Field(default=None, min_length=1, max_length=5000)
    image_url: str | None = Field(default=None, max_length=2048)
    visibility: Visibility | None = Field(default=None)

    @field_validator("content")
    @classmethod
    def check_content(cls, value: str | None) -> str:
        return normalize_text(reject_null(value, "content"))

    @field_validator("visibility")
    @classmethod
    def check_visibility(cls, value: Visibility | None) -> Visibility:
        return reject_null(value, "visibility")


class Post(PostBase, table=True):
    __tablename__ = "posts"  # type: ignore[assignment]

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    author_id: UUID = Field(
        foreign_key="profiles.id",
        index=True,
        nullable=False,
        ondelete="CASCADE",
    )
    visibility: Visibility = Field(
        default=Visibility.PUBLIC,
        sa_column=Column(
            SAEnum(
                Visibility,
                native_enum=False,
                length=16,
                values_callable=lambda enum: [member.value for member in enum],
            ),
            nullable=False,
            index=True,
        ),
    )
    created_at: datetime = Field(
        default_factory=now_utc,
        sa_type=DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    updated_at: datetime = Field(
        default_factory=now_utc, sa_type=DateTime(timezone=True), nullable=False
    )
