from logging import getLogger
from uuid import UUID

from psycopg.errors import ForeignKeyViolation
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError
from sqlmodel import Session

from sharecircle.converters import post as post_converters
from sharecircle.crud import post as post_crud
from sharecircle.crud import profile as profile_crud
from sharecircle.exceptions.base import AppError, StoreUnavailableError
from sharecircle.exceptions.post_exceptions import NotPostAuthorError, PostNotFoundError
from sharecircle.exceptions.profile_exceptions import ProfileNotFound
from sharecircle.models.message import Message
from sharecircle.models.post import Post, PostCreate, PostUpdate
from sharecircle.schemas.post import FeedItem, PostPublic
from sharecircle.utils import as_utc

logger = getLogger(__name__)


def get_visible_post_or_raise(
    *,
    session: Session,
    post_id: UUID,
    viewer_id: UUID | None,
) -> Post:
    """
    Fetch a post through the read predicate. A post the viewer may not
    read is indistinguishable from one that does not exist.

    Raises:
        PostNotFoundError: If the post does not exist or is not visible.
        StoreUnavailableError: If the database cannot be reached.
    """
    try:
        post = post_crud.get_visible_post(
            session=session, post_id=post_id, viewer_id=viewer_id
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    if post is None:
        raise PostNotFoundError(post_id)
    return post


def create_post(
    *,
    session: Session,
    author_id: UUID,
    post_in: PostCreate,
) -> PostPublic:
    """
    Create a post authored by the acting user.

    Raises:
        ProfileNotFound: If the author has no profile.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    try:
        post = post_crud.create_post(
            session=session,
            author_id=author_id,
            post_create=post_in,
        )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, ForeignKeyViolation):
            raise ProfileNotFound(author_id) from e
        raise AppError from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    return post_converters.to_public(post, session=session, viewer_id=author_id)


def get_post(
    *,
    session: Session,
    viewer_id: UUID | None,
    post_id: UUID,
) -> PostPublic:
    post = get_visible_post_or_raise(
        session=session, post_id=post_id, viewer_id=viewer_id
    )
    try:
        return post_converters.to_public(post, session=session, viewer_id=viewer_id)
    except OperationalError as e:
        raise StoreUnavailableError from e


def get_feed(
    *,
    session: Session,
    viewer_id: UUID | None,
    limit: int,
    offset: int,
) -> list[FeedItem]:
    """
    Get the viewer's feed: every post the viewer may read, plus an entry
    per share of such a post, newest post first.

    Parameters:
        session (Session): Database session.
        viewer_id (UUID | None): ID of the viewer, None when anonymous.
        limit (int): Maximum number of entries to return.
        offset (int): Offset for pagination.
    Returns:
        list[FeedItem]: Feed entries; shared entries carry `shared_by`.
    Raises:
        StoreUnavailableError: If the database cannot be reached. Nothing
            is returned in that case.
    """
    window = offset + limit
    try:
        posts = post_crud.get_visible_posts(
            session=session, viewer_id=viewer_id, limit=window, offset=0
        )
        shares = post_crud.get_visible_shares(
            session=session, viewer_id=viewer_id, limit=window, offset=0
        )
        entries = [(post, None) for post in posts] + [
            (post, share) for share, post in shares
        ]
        # Stable sort keeps an original ahead of its shares
        entries.sort(key=lambda entry: as_utc(entry[0].created_at), reverse=True)
        return [
            post_converters.to_feed_item(
                post, session=session, viewer_id=viewer_id, share=share
            )
            for post, share in entries[offset:window]
        ]
    except OperationalError as e:
        raise StoreUnavailableError from e


def get_profile_posts(
    *,
    session: Session,
    viewer_id: UUID | None,
    author_id: UUID,
    limit: int,
    offset: int,
) -> list[PostPublic]:
    """
    Get the posts of one author that the viewer may read, newest first.

    Raises:
        ProfileNotFound: If the author does not exist.
        StoreUnavailableError: If the database cannot be reached.
    """
    try:
        if profile_crud.get_profile_by_id(session=session, profile_id=author_id) is None:
            raise ProfileNotFound(author_id)
        posts = post_crud.get_visible_posts(
            session=session,
            viewer_id=viewer_id,
            limit=limit,
            offset=offset,
            author_id=author_id,
        )
        return [
            post_converters.to_public(post, session=session, viewer_id=viewer_id)
            for post in posts
        ]
    except OperationalError as e:
        raise StoreUnavailableError from e


def update_post(
    *,
    session: Session,
    current_user_id: UUID,
    post_id: UUID,
    post_in: PostUpdate,
) -> PostPublic:
    """
    Edit a post. Only its author may do this.

    Raises:
        PostNotFoundError: If the post does not exist or is not visible.
        NotPostAuthorError: If the acting user is not the author.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    post = get_visible_post_or_raise(
        session=session, post_id=post_id, viewer_id=current_user_id
    )
    if post.author_id != current_user_id:
        raise NotPostAuthorError()

    try:
        post = post_crud.update_post(session=session, db_post=post, post_in=post_in)
        session.commit()
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    return post_converters.to_public(post, session=session, viewer_id=current_user_id)


def delete_post(
    *,
    session: Session,
    current_user_id: UUID,
    post_id: UUID,
) -> Message:
    """
    Delete a post together with its likes, comments and shares. Only its
    author may do this.

    Raises:
        PostNotFoundError: If the post does not exist or is not visible.
        NotPostAuthorError: If the acting user is not the author.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    post = get_visible_post_or_raise(
        session=session, post_id=post_id, viewer_id=current_user_id
    )
    if post.author_id != current_user_id:
        raise NotPostAuthorError()

    try:
        post_crud.delete_post(session=session, post_id=post_id)
        session.commit()
    except NoResultFound as e:
        session.rollback()
        raise PostNotFoundError(post_id) from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info("Post %s deleted by %s", post_id, current_user_id)
    return Message(message="Post deleted successfully.")
