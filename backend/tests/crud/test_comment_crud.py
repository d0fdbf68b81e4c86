from collections.abc import Callable

from sqlmodel import Session

from sharecircle.crud import comment as comment_crud
from sharecircle.models.comment import Comment, CommentCreate, CommentUpdate
from sharecircle.models.post import Post
from sharecircle.models.profile import Profile


def test_create_and_list_comments(
    *,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
    post_factory: Callable[..., Post],
    comment_factory: Callable[..., Comment],
):
    author = profile_factory()
    post = post_factory()
    first = comment_factory(post_id=post.id)
    comment_factory()  # on another post

    second = comment_crud.create_comment(
        session=db_transaction,
        post_id=post.id,
        author_id=author.id,
        comment_create=CommentCreate(content=" nice "),
    )

    assert second.content == "nice"
    comments = comment_crud.get_comments_for_post(
        session=db_transaction, post_id=post.id
    )
    assert [comment.id for comment in comments] == [first.id, second.id]
    assert comment_crud.count_comments(session=db_transaction, post_id=post.id) == 2


def test_update_and_delete_comment(
    *,
    db_transaction: Session,
    comment_factory: Callable[..., Comment],
):
    comment = comment_factory(content="before")

    comment_crud.update_comment(
        session=db_transaction,
        db_comment=comment,
        comment_in=CommentUpdate(content="after"),
    )
    assert (
        comment_crud.get_comment_by_id(session=db_transaction, comment_id=comment.id)
        .content
        == "after"
    )

    comment_crud.delete_comment(session=db_transaction, comment_id=comment.id)
    assert (
        comment_crud.get_comment_by_id(session=db_transaction, comment_id=comment.id)
        is None
    )
