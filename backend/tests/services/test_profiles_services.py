from collections.abc import Callable
from uuid import uuid4

import pytest
from sqlmodel import Session

from sharecircle.core.enums import Relationship
from sharecircle.exceptions.profile_exceptions import (
    ProfileAlreadyExistsError,
    ProfileNotFound,
    UsernameAlreadyTakenError,
)
from sharecircle.models.friendship import FriendEdge
from sharecircle.models.profile import Profile, ProfileCreate, ProfileUpdate
from sharecircle.services import profiles as profiles_services


def test_create_profile_success(*, db_transaction: Session):
    identity = uuid4()

    profile = profiles_services.create_profile(
        session=db_transaction,
        profile_id=identity,
        profile_in=ProfileCreate(username="fresh_user", display_name="Fresh"),
    )

    assert profile.id == identity
    assert profiles_services.get_me(
        session=db_transaction, current_user_id=identity
    ) == profile


def test_create_profile_twice(
    *,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
):
    existing = profile_factory()

    with pytest.raises(ProfileAlreadyExistsError):
        profiles_services.create_profile(
            session=db_transaction,
            profile_id=existing.id,
            profile_in=ProfileCreate(username="another_name"),
        )


def test_create_profile_username_taken(
    *,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
):
    profile_factory(username="taken")

    with pytest.raises(UsernameAlreadyTakenError):
        profiles_services.create_profile(
            session=db_transaction,
            profile_id=uuid4(),
            profile_in=ProfileCreate(username="taken"),
        )


def test_update_profile_username_taken(
    *,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
):
    profile_factory(username="taken")
    me = profile_factory(username="mine")

    with pytest.raises(UsernameAlreadyTakenError):
        profiles_services.update_profile(
            session=db_transaction,
            current_user_id=me.id,
            profile_in=ProfileUpdate(username="taken"),
        )

    # Keeping one's own username is not a conflict
    updated = profiles_services.update_profile(
        session=db_transaction,
        current_user_id=me.id,
        profile_in=ProfileUpdate(username="mine", bio="hello"),
    )
    assert updated.bio == "hello"


def test_get_me_without_profile(*, db_transaction: Session):
    with pytest.raises(ProfileNotFound):
        profiles_services.get_me(session=db_transaction, current_user_id=uuid4())


def test_get_profile_reports_relationship(
    *,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
    friend_edge_factory: Callable[..., FriendEdge],
):
    me = profile_factory()
    friend = profile_factory()
    friend_edge_factory(requester_id=me.id, recipient_id=friend.id)

    profile = profiles_services.get_profile(
        session=db_transaction, viewer_id=me.id, profile_id=friend.id
    )
    assert profile.friend_status == Relationship.FRIENDS

    by_username = profiles_services.get_profile_by_username(
        session=db_transaction, viewer_id=None, username=friend.username
    )
    assert by_username.friend_status == Relationship.NONE

    with pytest.raises(ProfileNotFound):
        profiles_services.get_profile_by_username(
            session=db_transaction, viewer_id=None, username="nobody_here"
        )
