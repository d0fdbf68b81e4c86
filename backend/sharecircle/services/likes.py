from uuid import UUID

from psycopg.errors import UniqueViolation
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError
from sqlmodel import Session

from sharecircle.crud import like as like_crud
from sharecircle.exceptions.base import AppError, StoreUnavailableError
from sharecircle.exceptions.post_exceptions import PostAlreadyLikedError
from sharecircle.schemas.post import LikeStatus
from sharecircle.services.posts import get_visible_post_or_raise


def _like_status(*, session: Session, post_id: UUID, liked: bool) -> LikeStatus:
    return LikeStatus(
        post_id=post_id,
        liked=liked,
        like_count=like_crud.count_likes(session=session, post_id=post_id),
    )


def _set_like(
    *,
    session: Session,
    post_id: UUID,
    user_id: UUID,
    liked: bool,
) -> LikeStatus:
    try:
        if liked:
            like_crud.create_like(session=session, post_id=post_id, user_id=user_id)
        else:
            like_crud.delete_like(session=session, post_id=post_id, user_id=user_id)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, UniqueViolation):
            raise PostAlreadyLikedError(post_id, user_id) from e
        raise AppError from e
    except NoResultFound:
        # Removed concurrently; the like is gone either way.
        session.rollback()
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    return _like_status(session=session, post_id=post_id, liked=liked)


def toggle_like(
    *,
    session: Session,
    current_user_id: UUID,
    post_id: UUID,
) -> LikeStatus:
    """
    Like the post if the user has not liked it yet, otherwise remove the
    like. Toggling twice leaves the like set as it was.

    Raises:
        PostNotFoundError: If the post does not exist or is not visible.
        PostAlreadyLikedError: If a concurrent like won the race.
        StoreUnavailableError: If the database cannot be reached.
    """
    get_visible_post_or_raise(
        session=session, post_id=post_id, viewer_id=current_user_id
    )
    try:
        liked = like_crud.has_liked(
            session=session, post_id=post_id, user_id=current_user_id
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    return _set_like(
        session=session, post_id=post_id, user_id=current_user_id, liked=not liked
    )


def like_post(
    *,
    session: Session,
    current_user_id: UUID,
    post_id: UUID,
) -> LikeStatus:
    """
    Like a post. Liking an already liked post changes nothing.
    """
    get_visible_post_or_raise(
        session=session, post_id=post_id, viewer_id=current_user_id
    )
    try:
        if like_crud.has_liked(
            session=session, post_id=post_id, user_id=current_user_id
        ):
            return _like_status(session=session, post_id=post_id, liked=True)
    except OperationalError as e:
        raise StoreUnavailableError from e
    return _set_like(
        session=session, post_id=post_id, user_id=current_user_id, liked=True
    )


def unlike_post(
    *,
    session: Session,
    current_user_id: UUID,
    post_id: UUID,
) -> LikeStatus:
    """
    Remove the user's like from a post. Unliking a post that is not liked
    changes nothing.
    """
    get_visible_post_or_raise(
        session=session, post_id=post_id, viewer_id=current_user_id
    )
    try:
        if not like_crud.has_liked(
            session=session, post_id=post_id, user_id=current_user_id
        ):
            return _like_status(session=session, post_id=post_id, liked=False)
    except OperationalError as e:
        raise StoreUnavailableError from e
    return _set_like(
        session=session, post_id=post_id, user_id=current_user_id, liked=False
    )
