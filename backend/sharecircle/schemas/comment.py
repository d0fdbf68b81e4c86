from datetime import datetime
from uuid import UUID

from sqlmodel import SQLModel

from sharecircle.schemas.profile import ProfileSummary

__all__ = [
    "CommentPublic",
]


class CommentPublic(SQLModel):
    id: UUID
    post_id: UUID
    author: ProfileSummary
    content: str
    created_at: datetime
