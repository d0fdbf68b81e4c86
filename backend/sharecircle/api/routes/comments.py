from uuid import UUID

from fastapi import APIRouter

from sharecircle.api.deps import CurrentProfile, SessionDep
from sharecircle.models.comment import CommentUpdate
from sharecircle.models.message import Message
from sharecircle.schemas.comment import CommentPublic
from sharecircle.services import comments as comments_service

router = APIRouter(prefix="/comments", tags=["comments"])


@router.patch("/{comment_id}", response_model=CommentPublic)
def update_comment(
    *,
    session: SessionDep,
    current_profile: CurrentProfile,
    comment_id: UUID,
    comment_in: CommentUpdate,
) -> CommentPublic:
    return comments_service.update_comment(
        session=session,
        current_user_id=current_profile.id,
        comment_id=comment_id,
        comment_in=comment_in,
    )


@router.delete("/{comment_id}", response_model=Message)
def delete_comment(
    *, session: SessionDep, current_profile: CurrentProfile, comment_id: UUID
) -> Message:
    return comments_service.delete_comment(
        session=session,
        current_user_id=current_profile.id,
        comment_id=comment_id,
    )
