from uuid import UUID

from fastapi import status

from .base import AppError


class FriendRequestNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, requester_id: UUID, recipient_id: UUID):
        detail = f"Friend request not found. User with id {requester_id} has not requested friendship with user {recipient_id}."
        super().__init__(detail)


class FriendshipNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, user_id: UUID, friend_id: UUID):
        detail = f"Friendship not found. User with id {user_id} is not friends with user with id {friend_id}."
        super().__init__(detail)


class FriendshipAlreadyExistsError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, user_id: UUID, friend_id: UUID):
        detail = f"Friendship already exists. User with id {user_id} is already friends with user with id {friend_id}."
        super().__init__(detail)


class FriendRequestAlreadyExistsError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, requester_id: UUID, recipient_id: UUID):
        detail = f"Friend request already exists between user {requester_id} and user {recipient_id}."
        super().__init__(detail)


class NotRequestRecipientError(AppError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, user_id: UUID):
        detail = f"Only the recipient can accept a friend request. User with id {user_id} sent this request."
        super().__init__(detail)


class CannotBefriendSelfError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "You cannot send a friend request to yourself."
