from fastapi import APIRouter

from sharecircle.api.deps import CurrentUserId, SessionDep
from sharecircle.models.profile import ProfileCreate, ProfileUpdate
from sharecircle.schemas.profile import ProfilePublic
from sharecircle.services import profiles as profiles_service

router = APIRouter(prefix="/me", tags=["me"])


@router.get("/", response_model=ProfilePublic)
def get_my_profile(session: SessionDep, current_user_id: CurrentUserId) -> ProfilePublic:
    return profiles_service.get_me(session=session, current_user_id=current_user_id)


@router.post("/", response_model=ProfilePublic, status_code=201)
def create_my_profile(
    *, session: SessionDep, current_user_id: CurrentUserId, profile_in: ProfileCreate
) -> ProfilePublic:
    return profiles_service.create_profile(
        session=session,
        profile_id=current_user_id,
        profile_in=profile_in,
    )


@router.patch("/", response_model=ProfilePublic)
def update_my_profile(
    *, session: SessionDep, current_user_id: CurrentUserId, profile_in: ProfileUpdate
) -> ProfilePublic:
    return profiles_service.update_profile(
        session=session,
        current_user_id=current_user_id,
        profile_in=profile_in,
    )
