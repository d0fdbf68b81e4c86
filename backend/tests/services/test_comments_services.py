from collections.abc import Callable
from uuid import uuid4

import pytest
from sqlmodel import Session

from sharecircle.core.enums import Visibility
from sharecircle.exceptions.comment_exceptions import (
    CommentNotFoundError,
    NotCommentAuthorError,
)
from sharecircle.exceptions.post_exceptions import PostNotFoundError
from sharecircle.models.comment import Comment, CommentCreate, CommentUpdate
from sharecircle.models.post import Post
from sharecircle.models.profile import Profile
from sharecircle.services import comments as comments_services


def test_add_and_list_comments(
    *,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
    post_factory: Callable[..., Post],
):
    commenter = profile_factory()
    post = post_factory()

    created = comments_services.add_comment(
        session=db_transaction,
        current_user_id=commenter.id,
        post_id=post.id,
        comment_in=CommentCreate(content="first!"),
    )

    assert created.author.id == commenter.id
    comments = comments_services.list_comments(
        session=db_transaction, viewer_id=None, post_id=post.id
    )
    assert [comment.id for comment in comments] == [created.id]
    assert comments[0].content == "first!"


def test_comment_on_hidden_post(
    *,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
    post_factory: Callable[..., Post],
):
    stranger = profile_factory()
    post = post_factory(visibility=Visibility.FRIENDS)

    with pytest.raises(PostNotFoundError):
        comments_services.add_comment(
            session=db_transaction,
            current_user_id=stranger.id,
            post_id=post.id,
            comment_in=CommentCreate(content="hi"),
        )
    with pytest.raises(PostNotFoundError):
        comments_services.list_comments(
            session=db_transaction, viewer_id=stranger.id, post_id=post.id
        )


def test_update_comment_by_other_user(
    *,
    db_transaction: Session,
    profile_factory: Callable[..., Profile],
    comment_factory: Callable[..., Comment],
):
    comment = comment_factory(content="mine")
    other = profile_factory()

    with pytest.raises(NotCommentAuthorError):
        comments_services.update_comment(
            session=db_transaction,
            current_user_id=other.id,
            comment_id=comment.id,
            comment_in=CommentUpdate(content="yours"),
        )


def test_update_and_delete_own_comment(
    *,
    db_transaction: Session,
    comment_factory: Callable[..., Comment],
):
    comment = comment_factory(content="draft")

    updated = comments_services.update_comment(
        session=db_transaction,
        current_user_id=comment.author_id,
        comment_id=comment.id,
        comment_in=CommentUpdate(content="final"),
    )
    assert updated.content == "final"

    result = comments_services.delete_comment(
        session=db_transaction,
        current_user_id=comment.author_id,
        comment_id=comment.id,
    )
    assert result.message == "Comment deleted successfully."


def test_delete_missing_comment(*, db_transaction: Session):
    with pytest.raises(CommentNotFoundError):
        comments_services.delete_comment(
            session=db_transaction,
            current_user_id=uuid4(),
            comment_id=uuid4(),
        )
