from uuid import UUID

from fastapi import status

from .base import AppError


class PostNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, post_id: UUID):
        detail = f"Post with id {post_id} not found."
        super().__init__(detail)


class NotPostAuthorError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Only the author can modify this post."


class PostAlreadyLikedError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, post_id: UUID, user_id: UUID):
        detail = f"User with id {user_id} has already liked post {post_id}."
        super().__init__(detail)


class PostAlreadySharedError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, post_id: UUID, user_id: UUID):
        detail = f"User with id {user_id} has already shared post {post_id}."
        super().__init__(detail)
