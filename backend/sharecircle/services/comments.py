from logging import getLogger
from uuid import UUID

from psycopg.errors import ForeignKeyViolation
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError
from sqlmodel import Session

from sharecircle.converters import comment as comment_converters
from sharecircle.crud import comment as comment_crud
from sharecircle.exceptions.base import AppError, StoreUnavailableError
from sharecircle.exceptions.comment_exceptions import (
    CommentNotFoundError,
    NotCommentAuthorError,
)
from sharecircle.exceptions.post_exceptions import PostNotFoundError
from sharecircle.models.comment import Comment, CommentCreate, CommentUpdate
from sharecircle.models.message import Message
from sharecircle.schemas.comment import CommentPublic
from sharecircle.services.posts import get_visible_post_or_raise

logger = getLogger(__name__)


def _get_own_comment(
    *,
    session: Session,
    current_user_id: UUID,
    comment_id: UUID,
) -> Comment:
    try:
        comment = comment_crud.get_comment_by_id(
            session=session, comment_id=comment_id
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    if comment is None:
        raise CommentNotFoundError(comment_id)
    if comment.author_id != current_user_id:
        raise NotCommentAuthorError()
    return comment


def add_comment(
    *,
    session: Session,
    current_user_id: UUID,
    post_id: UUID,
    comment_in: CommentCreate,
) -> CommentPublic:
    """
    Comment on a post the acting user can see.

    Raises:
        PostNotFoundError: If the post does not exist or is not visible.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    get_visible_post_or_raise(
        session=session, post_id=post_id, viewer_id=current_user_id
    )
    try:
        comment = comment_crud.create_comment(
            session=session,
            post_id=post_id,
            author_id=current_user_id,
            comment_create=comment_in,
        )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, ForeignKeyViolation):
            raise PostNotFoundError(post_id) from e
        raise AppError from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    return comment_converters.to_public(comment, session=session)


def list_comments(
    *,
    session: Session,
    viewer_id: UUID | None,
    post_id: UUID,
) -> list[CommentPublic]:
    """
    List the comments of a post, oldest first. The post itself must be
    visible to the viewer.
    """
    get_visible_post_or_raise(session=session, post_id=post_id, viewer_id=viewer_id)
    try:
        comments = comment_crud.get_comments_for_post(session=session, post_id=post_id)
        return [
            comment_converters.to_public(comment, session=session)
            for comment in comments
        ]
    except OperationalError as e:
        raise StoreUnavailableError from e


def update_comment(
    *,
    session: Session,
    current_user_id: UUID,
    comment_id: UUID,
    comment_in: CommentUpdate,
) -> CommentPublic:
    """
    Raises:
        CommentNotFoundError: If the comment does not exist.
        NotCommentAuthorError: If the acting user did not write the comment.
    """
    comment = _get_own_comment(
        session=session, current_user_id=current_user_id, comment_id=comment_id
    )
    try:
        comment = comment_crud.update_comment(
            session=session, db_comment=comment, comment_in=comment_in
        )
        session.commit()
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    return comment_converters.to_public(comment, session=session)


def delete_comment(
    *,
    session: Session,
    current_user_id: UUID,
    comment_id: UUID,
) -> Message:
    """
    Raises:
        CommentNotFoundError: If the comment does not exist.
        NotCommentAuthorError: If the acting user did not write the comment.
    """
    _get_own_comment(
        session=session, current_user_id=current_user_id, comment_id=comment_id
    )
    try:
        comment_crud.delete_comment(session=session, comment_id=comment_id)
        session.commit()
    except NoResultFound as e:
        session.rollback()
        raise CommentNotFoundError(comment_id) from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info("Comment %s deleted by %s", comment_id, current_user_id)
    return Message(message="Comment deleted successfully.")
