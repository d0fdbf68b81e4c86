from uuid import UUID

from fastapi import status

from .base import AppError


class ProfileNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, profile_id: UUID | str):
        detail = f"Profile {profile_id} not found."
        super().__init__(detail)


class OneOrMoreProfilesNotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, profile_ids: list[UUID]):
        detail = f"One or more profiles not found: {', '.join(str(profile_id) for profile_id in profile_ids)}."
        super().__init__(detail)


class ProfileAlreadyExistsError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, profile_id: UUID):
        detail = f"A profile for user {profile_id} already exists."
        super().__init__(detail)


class UsernameAlreadyTakenError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, username: str):
        detail = f"Username {username} is already taken."
        super().__init__(detail)
