from logging import getLogger
from uuid import UUID

from psycopg.errors import UniqueViolation
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError
from sqlmodel import Session

from sharecircle.crud import shared_post as shared_post_crud
from sharecircle.exceptions.base import AppError, StoreUnavailableError
from sharecircle.exceptions.post_exceptions import PostAlreadySharedError
from sharecircle.schemas.post import ShareStatus
from sharecircle.services.posts import get_visible_post_or_raise

logger = getLogger(__name__)


def _share_status(*, session: Session, post_id: UUID, shared: bool) -> ShareStatus:
    return ShareStatus(
        post_id=post_id,
        shared=shared,
        share_count=shared_post_crud.count_shares(session=session, post_id=post_id),
    )


def _set_share(
    *,
    session: Session,
    post_id: UUID,
    user_id: UUID,
    shared: bool,
) -> ShareStatus:
    try:
        if shared:
            shared_post_crud.create_share(
                session=session, post_id=post_id, user_id=user_id
            )
        else:
            shared_post_crud.delete_share(
                session=session, post_id=post_id, user_id=user_id
            )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, UniqueViolation):
            raise PostAlreadySharedError(post_id, user_id) from e
        raise AppError from e
    except NoResultFound:
        # Unshared concurrently; the share is gone either way.
        session.rollback()
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info(
        "Post %s %s by %s", post_id, "shared" if shared else "unshared", user_id
    )
    return _share_status(session=session, post_id=post_id, shared=shared)


def toggle_share(
    *,
    session: Session,
    current_user_id: UUID,
    post_id: UUID,
) -> ShareStatus:
    """
    Reshare the post if the user has not shared it yet, otherwise unshare
    it. Toggling twice leaves the share set as it was.

    Raises:
        PostNotFoundError: If the post does not exist or is not visible.
        PostAlreadySharedError: If a concurrent share won the race.
        StoreUnavailableError: If the database cannot be reached.
    """
    get_visible_post_or_raise(
        session=session, post_id=post_id, viewer_id=current_user_id
    )
    try:
        shared = shared_post_crud.has_shared(
            session=session, post_id=post_id, user_id=current_user_id
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    return _set_share(
        session=session, post_id=post_id, user_id=current_user_id, shared=not shared
    )


def share_post(
    *,
    session: Session,
    current_user_id: UUID,
    post_id: UUID,
) -> ShareStatus:
    get_visible_post_or_raise(
        session=session, post_id=post_id, viewer_id=current_user_id
    )
    try:
        if shared_post_crud.has_shared(
            session=session, post_id=post_id, user_id=current_user_id
        ):
            return _share_status(session=session, post_id=post_id, shared=True)
    except OperationalError as e:
        raise StoreUnavailableError from e
    return _set_share(
        session=session, post_id=post_id, user_id=current_user_id, shared=True
    )


def unshare_post(
    *,
    session: Session,
    current_user_id: UUID,
    post_id: UUID,
) -> ShareStatus:
    get_visible_post_or_raise(
        session=session, post_id=post_id, viewer_id=current_user_id
    )
    try:
        if not shared_post_crud.has_shared(
            session=session, post_id=post_id, user_id=current_user_id
        ):
            return _share_status(session=session, post_id=post_id, shared=False)
    except OperationalError as e:
        raise StoreUnavailableError from e
    return _set_share(
        session=session, post_id=post_id, user_id=current_user_id, shared=False
    )
