from datetime import datetime
from uuid import UUID

from sqlmodel import SQLModel

from sharecircle.core.enums import Visibility
from sharecircle.schemas.profile import ProfileSummary

__all__ = [
    "PostPublic",
    "FeedItem",
    "LikeStatus",
    "ShareStatus",
]


class PostPublic(SQLModel):
    id: UUID
    author: ProfileSummary
    content: str
    image_url: str | None
    visibility: Visibility
    created_at: datetime
    updated_at: datetime
    like_count: int
    comment_count: int
    share_count: int
    liked_by_me: bool
    shared_by_me: bool


class FeedItem(PostPublic):
    # Set when this entry comes from someone resharing the post
    shared_by: ProfileSummary | None = None
    shared_at: datetime | None = None


class LikeStatus(SQLModel):
    post_id: UUID
    liked: bool
    like_count: int


class ShareStatus(SQLModel):
    post_id: UUID
    shared: bool
    share_count: int
