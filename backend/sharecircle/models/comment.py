from datetime import datetime
from uuid import UUID, uuid4

from pydantic import field_validator
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from sharecircle.models.utils import normalize_text
from sharecircle.utils import now_utc

__all__ = [
    "CommentBase",
    "CommentCreate",
    "CommentUpdate",
    "Comment",
]


class CommentBase(SQLModel):
    content: str = Field(min_length=1, max_length=2000)

    @field_validator("content")
    @classmethod
    def check_content(cls, value: str) -> str:
        return normalize_text(value)


class CommentCreate(CommentBase):
    pass


class CommentUpdate(CommentBase):
    pass


class Comment(CommentBase, table=True):
    __tablename__ = "comments"  # type: ignore[assignment]

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    post_id: UUID = Field(
        foreign_key="posts.id", index=True, nullable=False, ondelete="CASCADE"
    )
    author_id: UUID = Field(
        foreign_key="profiles.id", index=True, nullable=False, ondelete="CASCADE"
    )
    created_at: datetime = Field(
        default_factory=now_utc,
        sa_type=DateTime(timezone=True),
        nullable=False,
        index=True,
    )
