from uuid import UUID

from sqlalchemy import func
from sqlmodel import Session, select

from sharecircle.models.like import Like


def has_liked(*, session: Session, post_id: UUID, user_id: UUID) -> bool:
    like = session.exec(
        select(Like).where(Like.post_id == post_id, Like.user_id == user_id)
    ).one_or_none()
    return like is not None


def create_like(*, session: Session, post_id: UUID, user_id: UUID) -> Like:
    """
    Raises:
        IntegrityError: If the user already liked the post.
    """
    like = Like(post_id=post_id, user_id=user_id)
    session.add(like)
    session.flush()
    return like


def delete_like(*, session: Session, post_id: UUID, user_id: UUID) -> Like:
    """
    Raises:
        NoResultFound: If the user has not liked the post.
    """
    like = session.exec(
        select(Like).where(Like.post_id == post_id, Like.user_id == user_id)
    ).one()
    session.delete(like)
    session.flush()
    return like


def count_likes(*, session: Session, post_id: UUID) -> int:
    return session.exec(
        select(func.count()).select_from(Like).where(Like.post_id == post_id)
    ).one()
