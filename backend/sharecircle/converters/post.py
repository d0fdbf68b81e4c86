from uuid import UUID

from sqlmodel import Session

from sharecircle.converters import profile as profile_converters
from sharecircle.crud import comment as comment_crud
from sharecircle.crud import like as like_crud
from sharecircle.crud import profile as profile_crud
from sharecircle.crud import shared_post as shared_post_crud
from sharecircle.exceptions.profile_exceptions import ProfileNotFound
from sharecircle.models.post import Post
from sharecircle.models.shared_post import SharedPost
from sharecircle.schemas.post import FeedItem, PostPublic


def to_public(
    post: Post,
    *,
    session: Session,
    viewer_id: UUID | None,
) -> PostPublic:
    """
    Converts a Post object to a PostPublic object, including its author,
    engagement counts and whether the viewer liked or shared it.

    Parameters:
        post (Post): The Post object to convert.
        session (Session): The SQLAlchemy session for database operations.
        viewer_id (UUID | None): The ID of the viewer, None when anonymous.
    Returns:
        PostPublic: The converted object.
    """
    author = profile_crud.get_profile_by_id(session=session, profile_id=post.author_id)
    if author is None:
        raise ProfileNotFound(post.author_id)
    liked_by_me = viewer_id is not None and like_crud.has_liked(
        session=session, post_id=post.id, user_id=viewer_id
    )
    shared_by_me = viewer_id is not None and shared_post_crud.has_shared(
        session=session, post_id=post.id, user_id=viewer_id
    )
    return PostPublic(
        id=post.id,
        author=profile_converters.to_summary(author),
        content=post.content,
        image_url=post.image_url,
        visibility=post.visibility,
        created_at=post.created_at,
        updated_at=post.updated_at,
        like_count=like_crud.count_likes(session=session, post_id=post.id),
        comment_count=comment_crud.count_comments(session=session, post_id=post.id),
        share_count=shared_post_crud.count_shares(session=session, post_id=post.id),
        liked_by_me=liked_by_me,
        shared_by_me=shared_by_me,
    )


def to_feed_item(
    post: Post,
    *,
    session: Session,
    viewer_id: UUID | None,
    share: SharedPost | None = None,
) -> FeedItem:
    post_public = to_public(post, session=session, viewer_id=viewer_id)
    if share is None:
        return FeedItem(**post_public.model_dump())

    sharer = profile_crud.get_profile_by_id(session=session, profile_id=share.user_id)
    if sharer is None:
        raise ProfileNotFound(share.user_id)
    return FeedItem(
        **post_public.model_dump(),
        shared_by=profile_converters.to_summary(sharer),
        shared_at=share.created_at,
    )
