from uuid import UUID

from fastapi import APIRouter, Query

from sharecircle.api.deps import CurrentProfile, SessionDep, ViewerId
from sharecircle.core.config import settings
from sharecircle.models.comment import CommentCreate
from sharecircle.models.message import Message
from sharecircle.models.post import PostCreate, PostUpdate
from sharecircle.schemas.comment import CommentPublic
from sharecircle.schemas.post import FeedItem, LikeStatus, PostPublic, ShareStatus
from sharecircle.services import comments as comments_service
from sharecircle.services import likes as likes_service
from sharecircle.services import posts as posts_service
from sharecircle.services import shares as shares_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/feed", response_model=list[FeedItem])
def get_feed(
    session: SessionDep,
    viewer_id: ViewerId,
    limit: int = Query(settings.FEED_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
) -> list[FeedItem]:
    return posts_service.get_feed(
        session=session,
        viewer_id=viewer_id,
        limit=limit,
        offset=offset,
    )


@router.post("/", response_model=PostPublic, status_code=201)
def create_post(
    *, session: SessionDep, current_profile: CurrentProfile, post_in: PostCreate
) -> PostPublic:
    return posts_service.create_post(
        session=session,
        author_id=current_profile.id,
        post_in=post_in,
    )


@router.get("/{post_id}", response_model=PostPublic)
def get_post(session: SessionDep, viewer_id: ViewerId, post_id: UUID) -> PostPublic:
    return posts_service.get_post(session=session, viewer_id=viewer_id, post_id=post_id)


@router.patch("/{post_id}", response_model=PostPublic)
def update_post(
    *,
    session: SessionDep,
    current_profile: CurrentProfile,
    post_id: UUID,
    post_in: PostUpdate,
) -> PostPublic:
    return posts_service.update_post(
        session=session,
        current_user_id=current_profile.id,
        post_id=post_id,
        post_in=post_in,
    )


@router.delete("/{post_id}", response_model=Message)
def delete_post(
    *, session: SessionDep, current_profile: CurrentProfile, post_id: UUID
) -> Message:
    return posts_service.delete_post(
        session=session,
        current_user_id=current_profile.id,
        post_id=post_id,
    )


@router.post("/{post_id}/like/toggle", response_model=LikeStatus)
def toggle_like(
    *, session: SessionDep, current_profile: CurrentProfile, post_id: UUID
) -> LikeStatus:
    return likes_service.toggle_like(
        session=session, current_user_id=current_profile.id, post_id=post_id
    )


@router.put("/{post_id}/like", response_model=LikeStatus)
def like_post(
    *, session: SessionDep, current_profile: CurrentProfile, post_id: UUID
) -> LikeStatus:
    return likes_service.like_post(
        session=session, current_user_id=current_profile.id, post_id=post_id
    )


@router.delete("/{post_id}/like", response_model=LikeStatus)
def unlike_post(
    *, session: SessionDep, current_profile: CurrentProfile, post_id: UUID
) -> LikeStatus:
    return likes_service.unlike_post(
        session=session, current_user_id=current_profile.id, post_id=post_id
    )


@router.post("/{post_id}/share/toggle", response_model=ShareStatus)
def toggle_share(
    *, session: SessionDep, current_profile: CurrentProfile, post_id: UUID
) -> ShareStatus:
    return shares_service.toggle_share(
        session=session, current_user_id=current_profile.id, post_id=post_id
    )


@router.put("/{post_id}/share", response_model=ShareStatus)
def share_post(
    *, session: SessionDep, current_profile: CurrentProfile, post_id: UUID
) -> ShareStatus:
    return shares_service.share_post(
        session=session, current_user_id=current_profile.id, post_id=post_id
    )


@router.delete("/{post_id}/share", response_model=ShareStatus)
def unshare_post(
    *, session: SessionDep, current_profile: CurrentProfile, post_id: UUID
) -> ShareStatus:
    return shares_service.unshare_post(
        session=session, current_user_id=current_profile.id, post_id=post_id
    )


@router.get("/{post_id}/comments", response_model=list[CommentPublic])
def list_comments(
    session: SessionDep, viewer_id: ViewerId, post_id: UUID
) -> list[CommentPublic]:
    return comments_service.list_comments(
        session=session, viewer_id=viewer_id, post_id=post_id
    )


@router.post("/{post_id}/comments", response_model=CommentPublic, status_code=201)
def add_comment(
    *,
    session: SessionDep,
    current_profile: CurrentProfile,
    post_id: UUID,
    comment_in: CommentCreate,
) -> CommentPublic:
    return comments_service.add_comment(
        session=session,
        current_user_id=current_profile.id,
        post_id=post_id,
        comment_in=comment_in,
    )
