from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from lithograph import dependencies as deps
from lithograph.exceptions import DateParseError, ExtractionError
from lithograph.routers import blog
from lithograph.schemas.blog import PostDetail, PostSummary
from lithograph.settings import Settings
from tests.conftest import FAKE_RUNTIME, FakePostsService


def make_app(fake_service: FakePostsService):
    app = FastAPI()
    app.dependency_overrides[deps.get_posts_service] = lambda: fake_service
    app.dependency_overrides[deps.get_runtime_info] = lambda: FAKE_RUNTIME
    app.include_router(blog.router)
    return app


def test_list_posts_renders_summaries_in_order():
    fake_posts = [
        PostSummary(
            date="2022-06-15",
            title="Second",
            slug="second",
            blurb_html="<p>newer <em>post</em></p>",
            tags=["b"],
        ),
        PostSummary(
            date="2021-01-01",
            title="First",
            slug="first",
            blurb_html="<p>older</p>",
            tags=["a"],
        ),
    ]
    client = TestClient(make_app(FakePostsService(list_posts_return=fake_posts)))

    res = client.get("/blog")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/html")
    body = res.text
    assert body.index('href="/blog/second"') < body.index('href="/blog/first"')
    assert "<p>newer <em>post</em></p>" in body
    assert "#b" in body
    assert "<title>Blog - SphericalKat</title>" in body
    assert FAKE_RUNTIME.path in body


def test_list_posts_empty():
    client = TestClient(make_app(FakePostsService()))

    res = client.get("/blog")

    assert res.status_code == 200
    assert "No posts yet." in res.text


def test_get_post_returns_404_when_missing():
    service = FakePostsService(get_post_return=None)
    client = TestClient(make_app(service))

    res = client.get("/blog/missing")

    assert res.status_code == 404
    assert res.json()["detail"] == "Post not found"
    assert service.requested == ["missing"]


def test_get_post_success():
    post = PostDetail(
        slug="hello",
        title="Hello",
        date="2021-01-01",
        tags=["intro"],
        body_html='<h1 id="world">World</h1>\n<script src="https://gist.github.com/x.js"></script>',
    )
    client = TestClient(make_app(FakePostsService(get_post_return=post)))

    res = client.get("/blog/hello")

    assert res.status_code == 200
    assert "<title>Hello</title>" in res.text
    assert '<h1 id="world">World</h1>' in res.text
    assert '<script src="https://gist.github.com/x.js"></script>' in res.text


def test_get_post_escapes_title():
    post = PostDetail(
        slug="xss",
        title="<b>Bold</b>",
        date="2021-01-01",
        tags=[],
        body_html="<p>body</p>",
    )
    client = TestClient(make_app(FakePostsService(get_post_return=post)))

    res = client.get("/blog/xss")

    assert "<title>&lt;b&gt;Bold&lt;/b&gt;</title>" in res.text


def test_list_posts_passes_through_http_exception():
    class BoomService(FakePostsService):
        def list_posts(self):
            raise HTTPException(status_code=418, detail="teapot")

    client = TestClient(make_app(BoomService()))

    res = client.get("/blog")

    assert res.status_code == 418
    assert res.json()["detail"] == "teapot"


def test_list_posts_returns_500_on_malformed_content():
    class BoomService(FakePostsService):
        def list_posts(self):
            raise DateParseError("yesterday", "%Y-%m-%d")

    client = TestClient(make_app(BoomService()))

    res = client.get("/blog")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve posts"


def test_get_post_returns_500_on_malformed_content():
    class BoomService(FakePostsService):
        def get_post(self, slug: str):
            raise ExtractionError("Missing required front matter fields: tags")

    client = TestClient(make_app(BoomService()))

    res = client.get("/blog/any")

    assert res.status_code == 500
    assert res.json()["detail"] == "Failed to retrieve post"


def test_get_post_returns_500_on_unexpected_error():
    class BoomService(FakePostsService):
        def get_post(self, slug: str):
            raise RuntimeError("boom")

    client = TestClient(make_app(BoomService()))

    res = client.get("/blog/any")

    assert res.status_code == 500


def test_footer_uses_configured_site_title():
    post = PostDetail(
        slug="hello",
        title="Hello",
        date="2021-01-01",
        tags=[],
        body_html="<p>body</p>",
    )
    app = make_app(FakePostsService(list_posts_return=[], get_post_return=post))
    app.dependency_overrides[deps.get_settings] = lambda: Settings(SITE_TITLE="Example")
    client = TestClient(app)

    for path in ("/blog", "/blog/hello"):
        res = client.get(path)

        assert res.status_code == 200
        assert "Example</p>" in res.text
        assert "SphericalKat" not in res.text
