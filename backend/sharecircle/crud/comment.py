from uuid import UUID

from sqlalchemy import func
from sqlmodel import Session, col, select

from sharecircle.models.comment import Comment, CommentCreate, CommentUpdate


def create_comment(
    *,
    session: Session,
    post_id: UUID,
    author_id: UUID,
    comment_create: CommentCreate,
) -> Comment:
    """
    Raises:
        IntegrityError: If the post or the author does not exist.
    """
    comment = Comment.model_validate(
        comment_create, update={"post_id": post_id, "author_id": author_id}
    )
    session.add(comment)
    session.flush()
    return comment


def get_comment_by_id(*, session: Session, comment_id: UUID) -> Comment | None:
    return session.get(Comment, comment_id)


def get_comments_for_post(*, session: Session, post_id: UUID) -> list[Comment]:
    stmt = (
        select(Comment)
        .where(Comment.post_id == post_id)
        .order_by(col(Comment.created_at), col(Comment.id))
    )
    return list(session.exec(stmt).all())


def update_comment(
    *,
    session: Session,
    db_comment: Comment,
    comment_in: CommentUpdate,
) -> Comment:
    db_comment.sqlmodel_update(comment_in.model_dump(exclude_unset=True))
    session.add(db_comment)
    session.flush()
    return db_comment


def delete_comment(*, session: Session, comment_id: UUID) -> Comment:
    """
    Raises:
        NoResultFound: If the comment does not exist.
    """
    comment = session.exec(select(Comment).where(Comment.id == comment_id)).one()
    session.delete(comment)
    session.flush()
    return comment


def count_comments(*, session: Session, post_id: UUID) -> int:
    return session.exec(
        select(func.count()).select_from(Comment).where(Comment.post_id == post_id)
    ).one()
