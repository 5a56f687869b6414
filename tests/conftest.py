import textwrap

from lithograph.exceptions import NotFound
from lithograph.repos.content_store import ContentStore
from lithograph.schemas.site import RuntimeInfo


def make_post(
    title: str = "Example",
    date: str = "2021-01-01",
    tags: str = "[intro]",
    blurb: str = "hi",
    body: str = "Body text.",
) -> str:
    """Build a post document with a YAML front matter block."""
    return textwrap.dedent(
        f"""\
        ---
        title: {title}
        date: {date}
        tags: {tags}
        blurb: {blurb}
        ---
        """
    ) + body


def make_store(posts: dict[str, str]) -> ContentStore:
    return ContentStore.from_mapping(posts, name="posts")


FAKE_RUNTIME = RuntimeInfo(path="/usr/bin/python3", version="CPython 3.12.0")


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.requested = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        self.requested.append(slug)
        if self._get_post_return is None:
            raise NotFound(f"{slug}.md")
        return self._get_post_return


class FakeRenderer:
    """
    Renderer stand-in that records what it was asked to render.
    """

    def __init__(self):
        self.calls = []

    def render(self, markdown_text, mode=None):
        self.calls.append((markdown_text, mode))
        return f"<rendered>{markdown_text}</rendered>"
