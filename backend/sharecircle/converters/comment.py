from sqlmodel import Session

from sharecircle.converters import profile as profile_converters
from sharecircle.crud import profile as profile_crud
from sharecircle.exceptions.profile_exceptions import ProfileNotFound
from sharecircle.models.comment import Comment
from sharecircle.schemas.comment import CommentPublic


def to_public(comment: Comment, *, session: Session) -> CommentPublic:
    author = profile_crud.get_profile_by_id(
        session=session, profile_id=comment.author_id
    )
    if author is None:
        raise ProfileNotFound(comment.author_id)
    return CommentPublic(
        id=comment.id,
        post_id=comment.post_id,
        author=profile_converters.to_summary(author),
        content=comment.content,
        created_at=comment.created_at,
    )
