from typing import Any
from uuid import UUID

from sqlalchemy import and_, exists, or_
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import col, select

from sharecircle.core.enums import FriendStatus, Visibility
from sharecircle.models.friendship import FriendEdge
from sharecircle.models.post import Post


def are_friends_clause(
    *,
    user_id_value: Any,
    other_id_value: Any,
) -> ColumnElement[bool]:
    """
    EXISTS clause that is true when an accepted edge connects the two
    users, in either direction.
    """
    return exists(
        select(FriendEdge.id).where(
            col(FriendEdge.status) == FriendStatus.ACCEPTED,
            or_(
                and_(
                    col(FriendEdge.requester_id) == user_id_value,
                    col(FriendEdge.recipient_id) == other_id_value,
                ),
                and_(
                    col(FriendEdge.requester_id) == other_id_value,
                    col(FriendEdge.recipient_id) == user_id_value,
                ),
            ),
        )
    )


def is_post_visible_to_viewer(
    *,
    viewer_id_value: UUID | None,
) -> ColumnElement[bool]:
    """
    Read predicate for posts. A post is visible when it is public, when the
    viewer wrote it, or when it is friends-only and the viewer is an
    accepted friend of the author. Anonymous viewers only see public posts.
    """
    is_public = col(Post.visibility) == Visibility.PUBLIC
    if viewer_id_value is None:
        return is_public
    return or_(
        is_public,
        col(Post.author_id) == viewer_id_value,
        and_(
            col(Post.visibility) == Visibility.FRIENDS,
            are_friends_clause(
                user_id_value=viewer_id_value,
                other_id_value=Post.author_id,
            ),
        ),
    )
