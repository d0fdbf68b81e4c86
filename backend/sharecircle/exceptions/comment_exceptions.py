from uuid import UUID

from fastapi import status

from .base import AppError


class CommentNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, comment_id: UUID):
        detail = f"Comment with id {comment_id} not found."
        super().__init__(detail)


class NotCommentAuthorError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Only the author can modify this comment."
