from uuid import UUID

from sqlalchemy import or_
from sqlmodel import Session, col, select

from sharecircle.models.profile import Profile, ProfileCreate, ProfileUpdate


def get_profile_by_id(*, session: Session, profile_id: UUID) -> Profile | None:
    """
    Get a profile by its ID.

    Parameters:
        session (Session): The database session.
        profile_id (UUID): The ID of the profile to retrieve.
    Returns:
        Profile | None: The profile object if found, otherwise None.
    """
    return session.get(Profile, profile_id)


def get_profile_by_username(*, session: Session, username: str) -> Profile | None:
    """
    Get a profile by its username.

    Parameters:
        session (Session): The database session.
        username (str): The username of the profile to retrieve.
    Returns:
        Profile | None: The profile object if found, otherwise None.
    """
    statement = select(Profile).where(Profile.username == username)
    return session.exec(statement).one_or_none()


def create_profile(
    *,
    session: Session,
    profile_id: UUID,
    profile_create: ProfileCreate,
) -> Profile:
    """
    Create the profile belonging to an authenticated identity.

    Parameters:
        session (Session): The database session.
        profile_id (UUID): The authenticated identity; becomes the primary key.
        profile_create (ProfileCreate): The profile creation data.
    Returns:
        Profile: The created profile object.
    Raises:
        IntegrityError: If the identity already has a profile or the username is taken.
    """
    db_obj = Profile.model_validate(profile_create, update={"id": profile_id})
    session.add(db_obj)
    session.flush()  # Check for unique constraints
    return db_obj


def update_profile(
    *,
    session: Session,
    db_profile: Profile,
    profile_in: ProfileUpdate,
) -> Profile:
    """
    Update an existing profile.

    Parameters:
        db_profile (Profile): The profile object to update.
        profile_in (ProfileUpdate): The profile update data.
    Returns:
        Profile: The updated profile object.
    Raises:
        IntegrityError: If the new username is already taken.
    """
    profile_data = profile_in.model_dump(exclude_unset=True)
    db_profile.sqlmodel_update(profile_data)
    session.add(db_profile)
    session.flush()  # Check for unique constraints
    return db_profile


def _escape_like(value: str) -> str:
    # Wildcards in the query match literally
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_profiles(
    *,
    session: Session,
    query: str,
    limit: int,
    offset: int,
) -> list[Profile]:
    """
    Search profiles by username or display name, case-insensitively.

    Parameters:
        session (Session): The database session.
        query (str): The search string.
        limit (int): The maximum number of profiles to return.
        offset (int): The offset for pagination.
    Returns:
        list[Profile]: Matching profiles ordered by username.
    """
    pattern = f"%{_escape_like(query)}%"
    stmt = (
        select(Profile)
        .where(
            or_(
                col(Profile.username).ilike(pattern, escape="\\"),
                col(Profile.display_name).ilike(pattern, escape="\\"),
            )
        )
        .order_by(col(Profile.username))
        .limit(limit)
        .offset(offset)
    )
    return list(session.exec(stmt).all())
