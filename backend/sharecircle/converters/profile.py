from uuid import UUID

from sqlmodel import Session

from sharecircle.crud import friendship as friendship_crud
from sharecircle.models.profile import Profile
from sharecircle.schemas.profile import (
    ProfilePublic,
    ProfileSummary,
    ProfileWithFriendStatus,
)


def to_public(profile: Profile) -> ProfilePublic:
    Profile.model_validate(profile)
    return ProfilePublic(**profile.model_dump())


def to_summary(profile: Profile) -> ProfileSummary:
    return ProfileSummary(
        id=profile.id,
        username=profile.username,
        display_name=profile.display_name,
        avatar_url=profile.avatar_url,
    )


def to_with_friend_status(
    profile: Profile,
    *,
    session: Session,
    viewer_id: UUID | None,
) -> ProfileWithFriendStatus:
    """
    Converts a Profile object to a ProfileWithFriendStatus object, including
    how the viewer relates to that profile.

    Parameters:
        profile (Profile): The Profile object to convert.
        session (Session): The SQLAlchemy session for database operations.
        viewer_id (UUID | None): The ID of the viewer, None when anonymous.
    Returns:
        ProfileWithFriendStatus: The converted object with relationship details.
    Raises:
        ValidationError: If the profile does not match the expected model.
    """
    Profile.model_validate(profile)
    friend_status = friendship_crud.get_relationship(
        session=session,
        viewer_id=viewer_id,
        other_id=profile.id,
    )
    return ProfileWithFriendStatus(
        **profile.model_dump(),
        friend_status=friend_status,
    )
