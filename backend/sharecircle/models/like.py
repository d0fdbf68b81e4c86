from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from sharecircle.utils import now_utc

__all__ = [
    "Like",
]


class Like(SQLModel, table=True):
    __tablename__ = "likes"  # type: ignore[assignment]
    __table_args__ = (
        UniqueConstraint("post_id", "user_id", name="uq_likes_post_user"),
    )

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    post_id: UUID = Field(
        foreign_key="posts.id", index=True, nullable=False, ondelete="CASCADE"
    )
    user_id: UUID = Field(
        foreign_key="profiles.id", index=True, nullable=False, ondelete="CASCADE"
    )
    created_at: datetime = Field(
        default_factory=now_utc, sa_type=DateTime(timezone=True), nullable=False
    )
