from collections.abc import Callable
from uuid import UUID

from fastapi.testclient import TestClient
from sqlmodel import Session

from sharecircle.core.config import settings
from sharecircle.models.profile import Profile

FRIENDS_URL = f"{settings.API_V1_STR}/friends"


def _headers(user_id: UUID) -> dict[str, str]:
    return {settings.IDENTITY_HEADER: str(user_id)}


def test_requester_cannot_accept_own_request(
    client: TestClient,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
):
    requester_id = profile_factory().id
    recipient_id = profile_factory().id
    db_transaction.commit()

    client.post(f"{FRIENDS_URL}/request/{recipient_id}", headers=_headers(requester_id))

    response = client.post(
        f"{FRIENDS_URL}/accept/{recipient_id}", headers=_headers(requester_id)
    )
    assert response.status_code == 403


def test_duplicate_and_reverse_requests_rejected(
    client: TestClient,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
):
    user1_id = profile_factory().id
    user2_id = profile_factory().id
    db_transaction.commit()

    first = client.post(f"{FRIENDS_URL}/request/{user2_id}", headers=_headers(user1_id))
    assert first.status_code == 200

    duplicate = client.post(
        f"{FRIENDS_URL}/request/{user2_id}", headers=_headers(user1_id)
    )
    assert duplicate.status_code == 409

    reverse = client.post(f"{FRIENDS_URL}/request/{user1_id}", headers=_headers(user2_id))
    assert reverse.status_code == 409


def test_request_to_self_rejected(
    client: TestClient,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
):
    user_id = profile_factory().id
    db_transaction.commit()

    response = client.post(f"{FRIENDS_URL}/request/{user_id}", headers=_headers(user_id))
    assert response.status_code == 400


def test_friendship_lifecycle(
    client: TestClient,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
):
    user1_id = profile_factory().id
    user2_id = profile_factory().id
    db_transaction.commit()

    client.post(f"{FRIENDS_URL}/request/{user2_id}", headers=_headers(user1_id))

    outgoing = client.get(
        f"{FRIENDS_URL}/requests/outgoing", headers=_headers(user1_id)
    ).json()
    assert [profile["id"] for profile in outgoing] == [str(user2_id)]
    incoming = client.get(
        f"{FRIENDS_URL}/requests/incoming", headers=_headers(user2_id)
    ).json()
    assert [profile["id"] for profile in incoming] == [str(user1_id)]

    relationship = client.get(
        f"{settings.API_V1_STR}/profiles/{user2_id}", headers=_headers(user1_id)
    ).json()
    assert relationship["friend_status"] == "pending_sent"

    client.post(f"{FRIENDS_URL}/accept/{user1_id}", headers=_headers(user2_id))

    friends = client.get(f"{FRIENDS_URL}/", headers=_headers(user1_id)).json()
    assert [profile["id"] for profile in friends] == [str(user2_id)]

    removed = client.delete(f"{FRIENDS_URL}/{user1_id}", headers=_headers(user2_id))
    assert removed.status_code == 200
    assert client.get(f"{FRIENDS_URL}/", headers=_headers(user1_id)).json() == []

    again = client.delete(f"{FRIENDS_URL}/{user1_id}", headers=_headers(user2_id))
    assert again.status_code == 404


def test_decline_and_cancel(
    client: TestClient,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
):
    user1_id = profile_factory().id
    user2_id = profile_factory().id
    db_transaction.commit()

    client.post(f"{FRIENDS_URL}/request/{user2_id}", headers=_headers(user1_id))
    declined = client.post(
        f"{FRIENDS_URL}/decline/{user1_id}", headers=_headers(user2_id)
    )
    assert declined.status_code == 200

    # Declining clears the way for a fresh request in the other direction
    client.post(f"{FRIENDS_URL}/request/{user1_id}", headers=_headers(user2_id))
    cancelled = client.delete(
        f"{FRIENDS_URL}/cancel/{user1_id}", headers=_headers(user2_id)
    )
    assert cancelled.status_code == 200

    missing = client.delete(
        f"{FRIENDS_URL}/cancel/{user1_id}", headers=_headers(user2_id)
    )
    assert missing.status_code == 404
