from uuid import UUID

from fastapi import APIRouter, Query

from sharecircle.api.deps import SessionDep, ViewerId
from sharecircle.core.config import settings
from sharecircle.schemas.post import PostPublic
from sharecircle.schemas.profile import ProfilePublic, ProfileWithFriendStatus
from sharecircle.services import friends as friends_service
from sharecircle.services import posts as posts_service
from sharecircle.services import profiles as profiles_service

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/search", response_model=list[ProfileWithFriendStatus])
def search_profiles(
    *,
    session: SessionDep,
    viewer_id: ViewerId,
    query: str = Query(..., min_length=1),
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=settings.MAX_PAGE_SIZE),
) -> list[ProfileWithFriendStatus]:
    return profiles_service.search_profiles(
        session=session,
        viewer_id=viewer_id,
        query=query,
        offset=offset,
        limit=limit,
    )


@router.get("/by-username/{username}", response_model=ProfileWithFriendStatus)
def get_profile_by_username(
    session: SessionDep, viewer_id: ViewerId, username: str
) -> ProfileWithFriendStatus:
    return profiles_service.get_profile_by_username(
        session=session, viewer_id=viewer_id, username=username
    )


@router.get("/{profile_id}", response_model=ProfileWithFriendStatus)
def get_profile(
    session: SessionDep, viewer_id: ViewerId, profile_id: UUID
) -> ProfileWithFriendStatus:
    return profiles_service.get_profile(
        session=session, viewer_id=viewer_id, profile_id=profile_id
    )


@router.get("/{profile_id}/posts", response_model=list[PostPublic])
def get_profile_posts(
    session: SessionDep,
    viewer_id: ViewerId,
    profile_id: UUID,
    limit: int = Query(settings.FEED_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    offset: int = Query(0, ge=0),
) -> list[PostPublic]:
    return posts_service.get_profile_posts(
        session=session,
        viewer_id=viewer_id,
        author_id=profile_id,
        limit=limit,
        offset=offset,
    )


@router.get("/{profile_id}/friends", response_model=list[ProfilePublic])
def get_profile_friends(session: SessionDep, profile_id: UUID) -> list[ProfilePublic]:
    return friends_service.get_friends(session=session, user_id=profile_id)
