from pytest_mock import MockerFixture

from sharecircle.converters import profile as profile_converters
from sharecircle.core.enums import Relationship
from sharecircle.schemas.profile import ProfilePublic, ProfileWithFriendStatus


def test_to_public(*, profile_factory):
    profile = profile_factory.build()

    profile_public = profile_converters.to_public(profile)

    assert isinstance(profile_public, ProfilePublic)
    assert profile_public.username == profile.username


def test_to_with_friend_status(
    *,
    mocker: MockerFixture,
    profile_factory,
):
    profile = profile_factory.build()

    mock_relationship = mocker.patch(
        "sharecircle.crud.friendship.get_relationship",
        return_value=Relationship.PENDING_RECEIVED,
    )
    mock_session = mocker.MagicMock()
    viewer_id = profile_factory.build().id

    profile_with_friend_status = profile_converters.to_with_friend_status(
        profile,
        session=mock_session,
        viewer_id=viewer_id,
    )

    assert isinstance(profile_with_friend_status, ProfileWithFriendStatus)
    assert profile_with_friend_status.friend_status == Relationship.PENDING_RECEIVED
    mock_relationship.assert_called_once_with(
        session=mock_session,
        viewer_id=viewer_id,
        other_id=profile.id,
    )
