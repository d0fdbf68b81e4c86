from logging import getLogger
from uuid import UUID

from psycopg.errors import ForeignKeyViolation, UniqueViolation
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError
from sqlmodel import Session

from sharecircle.converters import profile as profile_converters
from sharecircle.core.enums import FriendStatus, Relationship
from sharecircle.crud import friendship as friendship_crud
from sharecircle.crud import profile as profile_crud
from sharecircle.exceptions.base import AppError, StoreUnavailableError
from sharecircle.exceptions.friends_exceptions import (
    CannotBefriendSelfError,
    FriendRequestAlreadyExistsError,
    FriendRequestNotFoundError,
    FriendshipAlreadyExistsError,
    FriendshipNotFoundError,
    NotRequestRecipientError,
)
from sharecircle.exceptions.profile_exceptions import (
    OneOrMoreProfilesNotFound,
    ProfileNotFound,
)
from sharecircle.models.message import Message
from sharecircle.schemas.profile import ProfilePublic

logger = getLogger(__name__)


def create_friend_request(
    *,
    session: Session,
    requester_id: UUID,
    recipient_id: UUID,
) -> Message:
    """
    Create a friend request from requester to recipient.
    Raises:
        CannotBefriendSelfError: If requester and recipient are the same user.
        FriendRequestAlreadyExistsError: If a pending request exists in either direction.
        FriendshipAlreadyExistsError: If the users are already friends.
        OneOrMoreProfilesNotFound: If one or both profiles do not exist.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    if requester_id == recipient_id:
        raise CannotBefriendSelfError()

    try:
        missing = [
            profile_id
            for profile_id in (requester_id, recipient_id)
            if profile_crud.get_profile_by_id(session=session, profile_id=profile_id)
            is None
        ]
        existing = friendship_crud.get_edge_between(
            session=session,
            user_id=requester_id,
            other_id=recipient_id,
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    if missing:
        raise OneOrMoreProfilesNotFound(missing)
    if existing is not None:
        if existing.status == FriendStatus.ACCEPTED:
            raise FriendshipAlreadyExistsError(requester_id, recipient_id)
        raise FriendRequestAlreadyExistsError(
            existing.requester_id, existing.recipient_id
        )

    try:
        friendship_crud.create_friend_request(
            session=session,
            requester_id=requester_id,
            recipient_id=recipient_id,
        )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, UniqueViolation):
            raise FriendRequestAlreadyExistsError(requester_id, recipient_id) from e
        elif isinstance(e.orig, ForeignKeyViolation):
            raise OneOrMoreProfilesNotFound([requester_id, recipient_id]) from e
        else:
            raise AppError from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info("Friend request %s -> %s created", requester_id, recipient_id)
    return Message(message="Friend request sent successfully.")


def accept_friend_request(
    *,
    session: Session,
    current_user_id: UUID,
    requester_id: UUID,
) -> Message:
    """
    Accept a friend request from requester_id to current_user_id. Only the
    recipient of a pending request can accept it.
    Raises:
        NotRequestRecipientError: If current_user_id sent the pending request.
        FriendshipAlreadyExistsError: If the users are already friends.
        FriendRequestNotFoundError: If the friend request does not exist.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    try:
        edge = friendship_crud.get_edge_between(
            session=session,
            user_id=current_user_id,
            other_id=requester_id,
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    if edge is not None:
        if edge.status == FriendStatus.ACCEPTED:
            raise FriendshipAlreadyExistsError(current_user_id, requester_id)
        if edge.requester_id == current_user_id:
            raise NotRequestRecipientError(current_user_id)

    try:
        friendship_crud.accept_friend_request(
            session=session,
            requester_id=requester_id,
            recipient_id=current_user_id,
        )
        session.commit()
    except NoResultFound as e:
        session.rollback()
        raise FriendRequestNotFoundError(requester_id, current_user_id) from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info("Friend request %s -> %s accepted", requester_id, current_user_id)
    return Message(message="Friend request accepted successfully.")


def decline_friend_request(
    *,
    session: Session,
    current_user: UUID,
    requester_id: UUID,
) -> Message:
    """
    Decline a friend request from requester_id to current_user.
    Raises:
        FriendRequestNotFoundError: If the friend request does not exist.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    try:
        friendship_crud.delete_friend_request(
            session=session,
            requester_id=requester_id,
            recipient_id=current_user,
        )
        session.commit()
    except NoResultFound as e:
        session.rollback()
        raise FriendRequestNotFoundError(requester_id, current_user) from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info("Friend request %s -> %s declined", requester_id, current_user)
    return Message(message="Friend request declined successfully.")


def cancel_friend_request(
    *,
    session: Session,
    current_user: UUID,
    recipient_id: UUID,
) -> Message:
    """
    Cancel a friend request sent by current_user to recipient_id.
    Raises:
        FriendRequestNotFoundError: If the friend request does not exist.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    try:
        friendship_crud.delete_friend_request(
            session=session,
            requester_id=current_user,
            recipient_id=recipient_id,
        )
        session.commit()
    except NoResultFound as e:
        session.rollback()
        raise FriendRequestNotFoundError(current_user, recipient_id) from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info("Friend request %s -> %s cancelled", current_user, recipient_id)
    return Message(message="Friend request cancelled successfully.")


def remove_friend(
    *,
    session: Session,
    current_user: UUID,
    friend_id: UUID,
) -> Message:
    """
    Remove a friend from current_user's friend list. Either side may do this.
    Raises:
        FriendshipNotFoundError: If the friendship does not exist.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    try:
        friendship_crud.delete_friendship(
            session=session,
            user_id=current_user,
            friend_id=friend_id,
        )
        session.commit()
    except NoResultFound as e:
        session.rollback()
        raise FriendshipNotFoundError(current_user, friend_id) from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    logger.info("Friendship %s <-> %s removed", current_user, friend_id)
    return Message(message="Friend removed successfully.")


def get_relationship(
    *,
    session: Session,
    viewer_id: UUID | None,
    other_id: UUID,
) -> Relationship:
    try:
        return friendship_crud.get_relationship(
            session=session,
            viewer_id=viewer_id,
            other_id=other_id,
        )
    except OperationalError as e:
        raise StoreUnavailableError from e


def get_friends(*, session: Session, user_id: UUID) -> list[ProfilePublic]:
    """
    Get the friends of a user.

    Raises:
        ProfileNotFound: If the user has no profile.
        StoreUnavailableError: If the database cannot be reached.
    """
    try:
        if profile_crud.get_profile_by_id(session=session, profile_id=user_id) is None:
            raise ProfileNotFound(user_id)
        friends = friendship_crud.get_friends(session=session, user_id=user_id)
    except OperationalError as e:
        raise StoreUnavailableError from e
    return [profile_converters.to_public(friend) for friend in friends]


def get_incoming_requests(*, session: Session, user_id: UUID) -> list[ProfilePublic]:
    try:
        requesters = friendship_crud.get_incoming_requests(
            session=session, user_id=user_id
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    return [profile_converters.to_public(profile) for profile in requesters]


def get_outgoing_requests(*, session: Session, user_id: UUID) -> list[ProfilePublic]:
    try:
        recipients = friendship_crud.get_outgoing_requests(
            session=session, user_id=user_id
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    return [profile_converters.to_public(profile) for profile in recipients]
