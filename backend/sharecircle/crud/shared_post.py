from uuid import UUID

from sqlalchemy import func
from sqlmodel import Session, select

from sharecircle.models.shared_post import SharedPost


def has_shared(*, session: Session, post_id: UUID, user_id: UUID) -> bool:
    share = session.exec(
        select(SharedPost).where(
            SharedPost.post_id == post_id, SharedPost.user_id == user_id
        )
    ).one_or_none()
    return share is not None


def create_share(*, session: Session, post_id: UUID, user_id: UUID) -> SharedPost:
    """
    Raises:
        IntegrityError: If the user already shared the post.
    """
    share = SharedPost(post_id=post_id, user_id=user_id)
    session.add(share)
    session.flush()
    return share


def delete_share(*, session: Session, post_id: UUID, user_id: UUID) -> SharedPost:
    """
    Raises:
        NoResultFound: If the user has not shared the post.
    """
    share = session.exec(
        select(SharedPost).where(
            SharedPost.post_id == post_id, SharedPost.user_id == user_id
        )
    ).one()
    session.delete(share)
    session.flush()
    return share


def count_shares(*, session: Session, post_id: UUID) -> int:
    return session.exec(
        select(func.count())
        .select_from(SharedPost)
        .where(SharedPost.post_id == post_id)
    ).one()
