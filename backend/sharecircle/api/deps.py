from collections.abc import Generator
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Request
from sqlmodel import Session

from sharecircle.core.config import settings
from sharecircle.core.db import engine
from sharecircle.crud import profile as profile_crud
from sharecircle.exceptions.base import NotAuthenticatedError
from sharecircle.exceptions.profile_exceptions import ProfileNotFound
from sharecircle.models.profile import Profile


def get_db() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]


def get_viewer_id(request: Request) -> UUID | None:
    """
    Read the identity forwarded by the authentication gateway. A request
    without it is anonymous.
    """
    raw = request.headers.get(settings.IDENTITY_HEADER)
    if raw is None or not raw.strip():
        return None
    try:
        return UUID(raw.strip())
    except ValueError as e:
        raise NotAuthenticatedError("Malformed identity header.") from e


ViewerId = Annotated[UUID | None, Depends(get_viewer_id)]


def get_current_user_id(viewer_id: ViewerId) -> UUID:
    if viewer_id is None:
        raise NotAuthenticatedError()
    return viewer_id


CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]


def get_current_profile(session: SessionDep, current_user_id: CurrentUserId) -> Profile:
    profile = profile_crud.get_profile_by_id(session=session, profile_id=current_user_id)
    if not profile:
        raise ProfileNotFound(current_user_id)
    return profile


CurrentProfile = Annotated[Profile, Depends(get_current_profile)]
