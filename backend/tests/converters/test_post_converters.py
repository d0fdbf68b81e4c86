from uuid import uuid4

import pytest
from pytest_mock import MockerFixture

from sharecircle.converters import post as post_converters
from sharecircle.exceptions.profile_exceptions import ProfileNotFound
from sharecircle.models.shared_post import SharedPost
from sharecircle.schemas.post import FeedItem, PostPublic


@pytest.fixture
def engagement(mocker: MockerFixture):
    mocker.patch("sharecircle.crud.like.count_likes", return_value=3)
    mocker.patch("sharecircle.crud.comment.count_comments", return_value=2)
    mocker.patch("sharecircle.crud.shared_post.count_shares", return_value=1)
    mocker.patch("sharecircle.crud.like.has_liked", return_value=True)
    mocker.patch("sharecircle.crud.shared_post.has_shared", return_value=False)


def test_to_public(
    *,
    mocker: MockerFixture,
    profile_factory,
    post_factory,
    engagement,
):
    author = profile_factory.build()
    post = post_factory.build(author_id=author.id)
    mocker.patch("sharecircle.crud.profile.get_profile_by_id", return_value=author)

    post_public = post_converters.to_public(
        post, session=mocker.MagicMock(), viewer_id=uuid4()
    )

    assert isinstance(post_public, PostPublic)
    assert post_public.author.username == author.username
    assert post_public.like_count == 3
    assert post_public.comment_count == 2
    assert post_public.share_count == 1
    assert post_public.liked_by_me is True
    assert post_public.shared_by_me is False


def test_to_public_anonymous_viewer(
    *,
    mocker: MockerFixture,
    profile_factory,
    post_factory,
    engagement,
):
    author = profile_factory.build()
    post = post_factory.build(author_id=author.id)
    mocker.patch("sharecircle.crud.profile.get_profile_by_id", return_value=author)

    post_public = post_converters.to_public(
        post, session=mocker.MagicMock(), viewer_id=None
    )

    assert post_public.liked_by_me is False
    assert post_public.shared_by_me is False


def test_to_public_missing_author(
    *,
    mocker: MockerFixture,
    post_factory,
):
    post = post_factory.build(author_id=uuid4())
    mocker.patch("sharecircle.crud.profile.get_profile_by_id", return_value=None)

    with pytest.raises(ProfileNotFound):
        post_converters.to_public(post, session=mocker.MagicMock(), viewer_id=None)


def test_to_feed_item_with_share(
    *,
    mocker: MockerFixture,
    profile_factory,
    post_factory,
    engagement,
):
    author = profile_factory.build()
    sharer = profile_factory.build()
    post = post_factory.build(author_id=author.id)
    share = SharedPost(post_id=post.id, user_id=sharer.id)
    mocker.patch(
        "sharecircle.crud.profile.get_profile_by_id",
        side_effect=lambda session, profile_id: {
            author.id: author,
            sharer.id: sharer,
        }[profile_id],
    )

    feed_item = post_converters.to_feed_item(
        post, session=mocker.MagicMock(), viewer_id=None, share=share
    )

    assert isinstance(feed_item, FeedItem)
    assert feed_item.author.id == author.id
    assert feed_item.shared_by is not None
    assert feed_item.shared_by.id == sharer.id
    assert feed_item.shared_at == share.created_at
