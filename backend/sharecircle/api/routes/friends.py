import uuid

from fastapi import APIRouter

from sharecircle.api.deps import (
    CurrentProfile,
    SessionDep,
)
from sharecircle.models.message import Message
from sharecircle.schemas.profile import ProfilePublic
from sharecircle.services import friends as friends_service

router = APIRouter(prefix="/friends", tags=["friends"])


@router.get("/", response_model=list[ProfilePublic])
def get_my_friends(
    session: SessionDep, current_profile: CurrentProfile
) -> list[ProfilePublic]:
    return friends_service.get_friends(session=session, user_id=current_profile.id)


@router.get("/requests/incoming", response_model=list[ProfilePublic])
def get_incoming_requests(
    session: SessionDep, current_profile: CurrentProfile
) -> list[ProfilePublic]:
    return friends_service.get_incoming_requests(
        session=session, user_id=current_profile.id
    )


@router.get("/requests/outgoing", response_model=list[ProfilePublic])
def get_outgoing_requests(
    session: SessionDep, current_profile: CurrentProfile
) -> list[ProfilePublic]:
    return friends_service.get_outgoing_requests(
        session=session, user_id=current_profile.id
    )


@router.post("/request/{recipient_id}")
def send_friend_request(
    *, session: SessionDep, current_profile: CurrentProfile, recipient_id: uuid.UUID
) -> Message:
    return friends_service.create_friend_request(
        session=session,
        requester_id=current_profile.id,
        recipient_id=recipient_id,
    )


@router.post("/accept/{requester_id}")
def accept_friend_request(
    *, session: SessionDep, current_profile: CurrentProfile, requester_id: uuid.UUID
) -> Message:
    return friends_service.accept_friend_request(
        session=session,
        current_user_id=current_profile.id,
        requester_id=requester_id,
    )


@router.post("/decline/{requester_id}")
def decline_friend_request(
    *,
    session: SessionDep,
    current_profile: CurrentProfile,
    requester_id: uuid.UUID,
) -> Message:
    return friends_service.decline_friend_request(
        session=session,
        current_user=current_profile.id,
        requester_id=requester_id,
    )


@router.delete("/cancel/{recipient_id}")
def cancel_friend_request(
    *,
    session: SessionDep,
    current_profile: CurrentProfile,
    recipient_id: uuid.UUID,
) -> Message:
    return friends_service.cancel_friend_request(
        session=session,
        current_user=current_profile.id,
        recipient_id=recipient_id,
    )


@router.delete("/{friend_id}")
def remove_friend(
    *,
    session: SessionDep,
    current_profile: CurrentProfile,
    friend_id: uuid.UUID,
) -> Message:
    return friends_service.remove_friend(
        session=session,
        current_user=current_profile.id,
        friend_id=friend_id,
    )
