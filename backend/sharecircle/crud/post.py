from uuid import UUID

from sqlmodel import Session, col, select

from sharecircle.crud.visibility import is_post_visible_to_viewer
from sharecircle.models.post import Post, PostCreate, PostUpdate
from sharecircle.models.shared_post import SharedPost
from sharecircle.utils import now_utc


def create_post(
    *,
    session: Session,
    author_id: UUID,
    post_create: PostCreate,
) -> Post:
    """
    Create a new post.

    Parameters:
        session (Session): The database session.
        author_id (UUID): The ID of the authoring profile.
        post_create (PostCreate): The post creation data.
    Returns:
        Post: The created post object.
    Raises:
        IntegrityError: If the author profile does not exist.
    """
    db_obj = Post.model_validate(post_create, update={"author_id": author_id})
    session.add(db_obj)
    session.flush()
    return db_obj


def get_post_by_id(*, session: Session, post_id: UUID) -> Post | None:
    return session.get(Post, post_id)


def get_visible_post(
    *,
    session: Session,
    post_id: UUID,
    viewer_id: UUID | None,
) -> Post | None:
    """
    Get a post by its ID, but only if the viewer is allowed to read it.

    Parameters:
        session (Session): The database session.
        post_id (UUID): The ID of the post.
        viewer_id (UUID | None): The ID of the viewer, None when anonymous.
    Returns:
        Post | None: The post if it exists and is visible, otherwise None.
    """
    stmt = select(Post).where(
        Post.id == post_id,
        is_post_visible_to_viewer(viewer_id_value=viewer_id),
    )
    return session.exec(stmt).one_or_none()


def get_visible_posts(
    *,
    session: Session,
    viewer_id: UUID | None,
    limit: int,
    offset: int,
    author_id: UUID | None = None,
) -> list[Post]:
    """
    Get posts the viewer may read, newest first.

    Parameters:
        session (Session): The database session.
        viewer_id (UUID | None): The ID of the viewer, None when anonymous.
        limit (int): The maximum number of posts to return.
        offset (int): The offset for pagination.
        author_id (UUID | None): Restrict to posts by this author.
    Returns:
        list[Post]: The visible posts.
    """
    stmt = select(Post).where(is_post_visible_to_viewer(viewer_id_value=viewer_id))
    if author_id is not None:
        stmt = stmt.where(Post.author_id == author_id)
    stmt = (
        stmt.order_by(col(Post.created_at).desc(), col(Post.id))
        .limit(limit)
        .offset(offset)
    )
    return list(session.exec(stmt).all())


def get_visible_shares(
    *,
    session: Session,
    viewer_id: UUID | None,
    limit: int,
    offset: int,
) -> list[tuple[SharedPost, Post]]:
    """
    Get shares whose underlying post the viewer may read. The same read
    predicate as for plain posts is applied to the joined post.

    Parameters:
        session (Session): The database session.
        viewer_id (UUID | None): The ID of the viewer, None when anonymous.
        limit (int): The maximum number of shares to return.
        offset (int): The offset for pagination.
    Returns:
        list[tuple[SharedPost, Post]]: Share rows with their post, ordered by
        the post's creation time, newest first.
    """
    stmt = (
        select(SharedPost, Post)
        .join(Post, col(Post.id) == SharedPost.post_id)
        .where(is_post_visible_to_viewer(viewer_id_value=viewer_id))
        .order_by(col(Post.created_at).desc(), col(SharedPost.created_at).desc())
        .limit(limit)
        .offset(offset)
    )
    return [(share, post) for share, post in session.exec(stmt).all()]


def update_post(
    *,
    session: Session,
    db_post: Post,
    post_in: PostUpdate,
) -> Post:
    post_data = post_in.model_dump(exclude_unset=True)
    db_post.sqlmodel_update(post_data, update={"updated_at": now_utc()})
    session.add(db_post)
    session.flush()
    return db_post


def delete_post(*, session: Session, post_id: UUID) -> Post:
    """
    Delete a post. Likes, comments and shares go with it.

    Raises:
        NoResultFound: If the post does not exist.
    """
    post = session.exec(select(Post).where(Post.id == post_id)).one()
    session.delete(post)
    session.flush()
    return post
