from uuid import UUID

from psycopg.errors import UniqueViolation
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlmodel import Session

from sharecircle.converters import profile as profile_converters
from sharecircle.crud import profile as profile_crud
from sharecircle.exceptions.base import AppError, StoreUnavailableError
from sharecircle.exceptions.profile_exceptions import (
    ProfileAlreadyExistsError,
    ProfileNotFound,
    UsernameAlreadyTakenError,
)
from sharecircle.models.profile import ProfileCreate, ProfileUpdate
from sharecircle.schemas.profile import ProfilePublic, ProfileWithFriendStatus


def create_profile(
    *,
    session: Session,
    profile_id: UUID,
    profile_in: ProfileCreate,
) -> ProfilePublic:
    """
    Provision the profile of an authenticated identity.

    Parameters:
        session (Session): Database session.
        profile_id (UUID): The authenticated identity.
        profile_in (ProfileCreate): Profile data.
    Returns:
        ProfilePublic: The created profile.
    Raises:
        ProfileAlreadyExistsError: If the identity already has a profile.
        UsernameAlreadyTakenError: If the username is in use.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    try:
        existing = profile_crud.get_profile_by_id(session=session, profile_id=profile_id)
        username_owner = profile_crud.get_profile_by_username(
            session=session, username=profile_in.username
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    if existing is not None:
        raise ProfileAlreadyExistsError(profile_id)
    if username_owner is not None:
        raise UsernameAlreadyTakenError(profile_in.username)

    try:
        profile = profile_crud.create_profile(
            session=session,
            profile_id=profile_id,
            profile_create=profile_in,
        )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, UniqueViolation):
            raise UsernameAlreadyTakenError(profile_in.username) from e
        raise AppError from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    return profile_converters.to_public(profile)


def get_me(*, session: Session, current_user_id: UUID) -> ProfilePublic:
    try:
        profile = profile_crud.get_profile_by_id(
            session=session, profile_id=current_user_id
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    if not profile:
        raise ProfileNotFound(current_user_id)
    return profile_converters.to_public(profile)


def get_profile(
    *,
    session: Session,
    viewer_id: UUID | None,
    profile_id: UUID,
) -> ProfileWithFriendStatus:
    """
    Get a profile by its ID. Profiles are readable by everyone.

    Parameters:
        session (Session): Database session.
        viewer_id (UUID | None): ID of the viewer, None when anonymous.
        profile_id (UUID): ID of the profile to retrieve.
    Returns:
        ProfileWithFriendStatus: The profile and the viewer's relationship to it.
    Raises:
        ProfileNotFound: If the profile does not exist.
    """
    try:
        profile = profile_crud.get_profile_by_id(session=session, profile_id=profile_id)
        if not profile:
            raise ProfileNotFound(profile_id)
        return profile_converters.to_with_friend_status(
            profile, session=session, viewer_id=viewer_id
        )
    except OperationalError as e:
        raise StoreUnavailableError from e


def get_profile_by_username(
    *,
    session: Session,
    viewer_id: UUID | None,
    username: str,
) -> ProfileWithFriendStatus:
    try:
        profile = profile_crud.get_profile_by_username(
            session=session, username=username
        )
        if not profile:
            raise ProfileNotFound(username)
        return profile_converters.to_with_friend_status(
            profile, session=session, viewer_id=viewer_id
        )
    except OperationalError as e:
        raise StoreUnavailableError from e


def update_profile(
    *,
    session: Session,
    current_user_id: UUID,
    profile_in: ProfileUpdate,
) -> ProfilePublic:
    """
    Update the caller's own profile.

    Raises:
        ProfileNotFound: If the caller has no profile yet.
        UsernameAlreadyTakenError: If the new username belongs to someone else.
        StoreUnavailableError: If the database cannot be reached.
        AppError: For any other (unexpected) errors.
    """
    try:
        profile = profile_crud.get_profile_by_id(
            session=session, profile_id=current_user_id
        )
        username_owner = (
            profile_crud.get_profile_by_username(
                session=session, username=profile_in.username
            )
            if profile_in.username
            else None
        )
    except OperationalError as e:
        raise StoreUnavailableError from e
    if not profile:
        raise ProfileNotFound(current_user_id)
    if username_owner is not None and username_owner.id != current_user_id:
        raise UsernameAlreadyTakenError(username_owner.username)

    try:
        profile = profile_crud.update_profile(
            session=session,
            db_profile=profile,
            profile_in=profile_in,
        )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if isinstance(e.orig, UniqueViolation):
            raise UsernameAlreadyTakenError(str(profile_in.username)) from e
        raise AppError from e
    except OperationalError as e:
        session.rollback()
        raise StoreUnavailableError from e
    except Exception as e:
        session.rollback()
        raise AppError from e
    return profile_converters.to_public(profile)


def search_profiles(
    *,
    session: Session,
    viewer_id: UUID | None,
    query: str,
    limit: int,
    offset: int,
) -> list[ProfileWithFriendStatus]:
    """
    Search profiles and report the viewer's relationship to each.

    Parameters:
        session (Session): Database session.
        viewer_id (UUID | None): ID of the viewer, None when anonymous.
        query (str): Search string matched against username and display name.
        limit (int): Maximum number of profiles to return.
        offset (int): Offset for pagination.
    Returns:
        list[ProfileWithFriendStatus]: Matching profiles.
    """
    try:
        profiles = profile_crud.search_profiles(
            session=session,
            query=query,
            limit=limit,
            offset=offset,
        )
        return [
            profile_converters.to_with_friend_status(
                profile, session=session, viewer_id=viewer_id
            )
            for profile in profiles
        ]
    except OperationalError as e:
        raise StoreUnavailableError from e
