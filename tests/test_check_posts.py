import pytest

from lithograph.exceptions import DateParseError, ExtractionError, LithographError
from lithograph.services.posts_service import PostsService
from scripts.check_posts import check_posts
from tests.conftest import make_post, make_store


def test_check_posts_counts_rendered_posts():
    store = make_store(
        {
            "a.md": make_post(date="2021-01-01"),
            "b.md": make_post(date="2022-01-01"),
        }
    )

    assert check_posts(PostsService(store, skip_malformed=False)) == 2


def test_check_posts_surfaces_malformed_content():
    store = make_store(
        {
            "good.md": make_post(),
            "bad.md": "---\ntitle: Bad\n---\nno metadata",
        }
    )

    with pytest.raises(ExtractionError):
        check_posts(PostsService(store, skip_malformed=False))


def test_check_posts_reports_unquoted_impossible_date_as_content_error():
    store = make_store({"bad.md": make_post(date="2021-02-30")})

    with pytest.raises(LithographError) as exc:
        check_posts(PostsService(store, skip_malformed=False))

    assert isinstance(exc.value, DateParseError)
