from uuid import uuid4

import pytest
from psycopg.errors import ForeignKeyViolation, UniqueViolation
from pytest_mock import MockerFixture
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from sharecircle.core.enums import FriendStatus
from sharecircle.exceptions.base import StoreUnavailableError
from sharecircle.exceptions.friends_exceptions import (
    CannotBefriendSelfError,
    FriendRequestAlreadyExistsError,
    FriendRequestNotFoundError,
    FriendshipAlreadyExistsError,
    FriendshipNotFoundError,
    NotRequestRecipientError,
)
from sharecircle.exceptions.profile_exceptions import OneOrMoreProfilesNotFound
from sharecircle.models.friendship import FriendEdge
from sharecircle.services import friends as friends_services


@pytest.fixture
def no_existing_edge(mocker: MockerFixture):
    mocker.patch("sharecircle.crud.profile.get_profile_by_id")
    return mocker.patch(
        "sharecircle.crud.friendship.get_edge_between", return_value=None
    )


def test_create_friend_request_success(
    mocker: MockerFixture,
    no_existing_edge,
):
    mock_crud = mocker.patch("sharecircle.crud.friendship.create_friend_request")
    mock_session = mocker.MagicMock()

    requester_id = uuid4()
    recipient_id = uuid4()

    result = friends_services.create_friend_request(
        session=mock_session,
        requester_id=requester_id,
        recipient_id=recipient_id,
    )

    mock_crud.assert_called_once_with(
        session=mock_session,
        requester_id=requester_id,
        recipient_id=recipient_id,
    )
    mock_session.commit.assert_called_once()
    assert result.message == "Friend request sent successfully."


@pytest.mark.parametrize(
    "org_exc, expected_exc",
    [
        (UniqueViolation, FriendRequestAlreadyExistsError),
        (ForeignKeyViolation, OneOrMoreProfilesNotFound),
    ],
)
def test_create_friend_failure(
    mocker: MockerFixture,
    no_existing_edge,
    org_exc,
    expected_exc,
):
    mock_crud = mocker.patch("sharecircle.crud.friendship.create_friend_request")
    mock_crud.side_effect = IntegrityError(
        statement="Integrity error", orig=org_exc("Integrity violation"), params=None
    )
    mock_session = mocker.MagicMock()

    with pytest.raises(expected_exc):
        friends_services.create_friend_request(
            session=mock_session,
            requester_id=uuid4(),
            recipient_id=uuid4(),
        )

    mock_session.rollback.assert_called_once()


def test_create_friend_request_to_self(mocker: MockerFixture):
    mock_crud = mocker.patch("sharecircle.crud.friendship.create_friend_request")
    user_id = uuid4()

    with pytest.raises(CannotBefriendSelfError):
        friends_services.create_friend_request(
            session=mocker.MagicMock(),
            requester_id=user_id,
            recipient_id=user_id,
        )

    mock_crud.assert_not_called()


def test_create_friend_request_missing_profile(mocker: MockerFixture):
    mocker.patch("sharecircle.crud.profile.get_profile_by_id", return_value=None)
    mocker.patch("sharecircle.crud.friendship.get_edge_between", return_value=None)
    mock_crud = mocker.patch("sharecircle.crud.friendship.create_friend_request")

    with pytest.raises(OneOrMoreProfilesNotFound):
        friends_services.create_friend_request(
            session=mocker.MagicMock(),
            requester_id=uuid4(),
            recipient_id=uuid4(),
        )

    mock_crud.assert_not_called()


@pytest.mark.parametrize(
    "status, expected_exc",
    [
        (FriendStatus.PENDING, FriendRequestAlreadyExistsError),
        (FriendStatus.ACCEPTED, FriendshipAlreadyExistsError),
    ],
)
def test_create_friend_request_existing_edge(
    mocker: MockerFixture,
    status,
    expected_exc,
):
    requester_id = uuid4()
    recipient_id = uuid4()
    # The reverse direction counts as a duplicate too
    edge = FriendEdge.request(requester_id=recipient_id, recipient_id=requester_id)
    edge.status = status
    mocker.patch("sharecircle.crud.profile.get_profile_by_id")
    mocker.patch("sharecircle.crud.friendship.get_edge_between", return_value=edge)
    mock_crud = mocker.patch("sharecircle.crud.friendship.create_friend_request")

    with pytest.raises(expected_exc):
        friends_services.create_friend_request(
            session=mocker.MagicMock(),
            requester_id=requester_id,
            recipient_id=recipient_id,
        )

    mock_crud.assert_not_called()


def test_create_friend_request_store_unavailable(mocker: MockerFixture):
    mocker.patch(
        "sharecircle.crud.profile.get_profile_by_id",
        side_effect=OperationalError("select", None, Exception("down")),
    )

    with pytest.raises(StoreUnavailableError):
        friends_services.create_friend_request(
            session=mocker.MagicMock(),
            requester_id=uuid4(),
            recipient_id=uuid4(),
        )


def test_accept_friend_request_success(mocker: MockerFixture):
    current_user_id = uuid4()
    requester_id = uuid4()
    mocker.patch(
        "sharecircle.crud.friendship.get_edge_between",
        return_value=FriendEdge.request(
            requester_id=requester_id, recipient_id=current_user_id
        ),
    )
    mock_accept = mocker.patch("sharecircle.crud.friendship.accept_friend_request")
    mock_session = mocker.MagicMock()

    result = friends_services.accept_friend_request(
        session=mock_session,
        current_user_id=current_user_id,
        requester_id=requester_id,
    )

    mock_accept.assert_called_once_with(
        session=mock_session,
        requester_id=requester_id,
        recipient_id=current_user_id,
    )
    mock_session.commit.assert_called_once()
    assert result.message == "Friend request accepted successfully."


def test_accept_friend_request_by_requester(mocker: MockerFixture):
    current_user_id = uuid4()
    other_id = uuid4()
    mocker.patch(
        "sharecircle.crud.friendship.get_edge_between",
        return_value=FriendEdge.request(
            requester_id=current_user_id, recipient_id=other_id
        ),
    )
    mock_accept = mocker.patch("sharecircle.crud.friendship.accept_friend_request")

    with pytest.raises(NotRequestRecipientError):
        friends_services.accept_friend_request(
            session=mocker.MagicMock(),
            current_user_id=current_user_id,
            requester_id=other_id,
        )

    mock_accept.assert_not_called()


def test_accept_friend_request_not_found(mocker: MockerFixture):
    mocker.patch("sharecircle.crud.friendship.get_edge_between", return_value=None)
    mocker.patch(
        "sharecircle.crud.friendship.accept_friend_request",
        side_effect=NoResultFound(),
    )
    mock_session = mocker.MagicMock()

    with pytest.raises(FriendRequestNotFoundError):
        friends_services.accept_friend_request(
            session=mock_session,
            current_user_id=uuid4(),
            requester_id=uuid4(),
        )

    mock_session.rollback.assert_called_once()


def test_decline_friend_request_success(mocker: MockerFixture):
    mock_delete = mocker.patch("sharecircle.crud.friendship.delete_friend_request")
    mock_session = mocker.MagicMock()
    current_user = uuid4()
    requester_id = uuid4()

    result = friends_services.decline_friend_request(
        session=mock_session,
        current_user=current_user,
        requester_id=requester_id,
    )

    mock_delete.assert_called_once_with(
        session=mock_session,
        requester_id=requester_id,
        recipient_id=current_user,
    )
    mock_session.commit.assert_called_once()
    assert result.message == "Friend request declined successfully."


def test_cancel_friend_request_not_found(mocker: MockerFixture):
    mocker.patch(
        "sharecircle.crud.friendship.delete_friend_request",
        side_effect=NoResultFound(),
    )
    mock_session = mocker.MagicMock()

    with pytest.raises(FriendRequestNotFoundError):
        friends_services.cancel_friend_request(
            session=mock_session,
            current_user=uuid4(),
            recipient_id=uuid4(),
        )

    mock_session.rollback.assert_called_once()


def test_remove_friend_success(mocker: MockerFixture):
    mock_delete = mocker.patch("sharecircle.crud.friendship.delete_friendship")
    mock_session = mocker.MagicMock()
    current_user = uuid4()
    friend_id = uuid4()

    result = friends_services.remove_friend(
        session=mock_session,
        current_user=current_user,
        friend_id=friend_id,
    )

    mock_delete.assert_called_once_with(
        session=mock_session,
        user_id=current_user,
        friend_id=friend_id,
    )
    assert result.message == "Friend removed successfully."


def test_remove_friend_not_found(mocker: MockerFixture):
    mocker.patch(
        "sharecircle.crud.friendship.delete_friendship",
        side_effect=NoResultFound(),
    )
    mock_session = mocker.MagicMock()

    with pytest.raises(FriendshipNotFoundError):
        friends_services.remove_friend(
            session=mock_session,
            current_user=uuid4(),
            friend_id=uuid4(),
        )

    mock_session.rollback.assert_called_once()
