import datetime
import logging
from typing import Dict, List, Optional, Tuple

from lithograph.exceptions import DateParseError, ExtractionError
from lithograph.repos.content_store import ContentStore
from lithograph.schemas.blog import FrontMatter, PostDetail, PostSummary
from lithograph.services.front_matter import FieldType, extract
from lithograph.services.markdown_renderer import MarkdownRenderer, RenderMode
from lithograph.settings import settings

logger = logging.getLogger(__name__)

POST_SUFFIX = ".md"
REQUIRED_FIELDS = ("title", "tags", "date", "blurb")
TYPE_HINTS: Dict[str, FieldType] = {"tags": FieldType.ARRAY}


class PostsService:
    def __init__(
        self,
        store: ContentStore,
        renderer: Optional[MarkdownRenderer] = None,
        date_format: Optional[str] = None,
        skip_malformed: Optional[bool] = None,
    ):
        self.store = store
        self.renderer = renderer or MarkdownRenderer()
        self.date_format = date_format or settings.POST_DATE_FORMAT
        self.skip_malformed = (
            settings.SKIP_MALFORMED_POSTS if skip_malformed is None else skip_malformed
        )

    def list_posts(self) -> List[PostSummary]:
        """Summaries of every post, newest first."""
        dated: List[Tuple[datetime.date, PostSummary]] = []
        for filename in self.store.list():
            if not filename.endswith(POST_SUFFIX):
                continue
            try:
                dated.append(self._summarize(filename))
            except (ExtractionError, DateParseError) as e:
                if not self.skip_malformed:
                    raise
                logger.warning(f"Skipping malformed post {filename}: {e}")

        dated.sort(key=lambda item: item[0], reverse=True)
        return [summary for _, summary in dated]

    def get_post(self, slug: str) -> PostDetail:
        """Render a single post. Raises NotFound for unknown slugs."""
        filename = f"{slug}{POST_SUFFIX}"
        front_matter, body = parse_post(self.store.get(filename))
        parse_date(front_matter.date, self.date_format)

        return PostDetail(
            slug=slug,
            title=front_matter.title,
            date=front_matter.date,
            tags=front_matter.tags,
            body_html=self.renderer.render(body, RenderMode.BODY),
        )

    def _summarize(self, filename: str) -> Tuple[datetime.date, PostSummary]:
        front_matter, _body = parse_post(self.store.get(filename))
        published = parse_date(front_matter.date, self.date_format)
        summary = PostSummary(
            date=front_matter.date,
            title=front_matter.title.replace("'", ""),
            slug=_slug_from_filename(filename),
            blurb_html=self.renderer.render(
                front_matter.blurb.replace('"', ""), RenderMode.BLURB
            ),
            tags=front_matter.tags,
        )
        return published, summary


def parse_post(raw: bytes) -> Tuple[FrontMatter, str]:
    """Extract the required front matter and the markdown body of a post."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExtractionError(f"Post is not valid UTF-8: {e}") from e

    fields, body = extract(text, REQUIRED_FIELDS, TYPE_HINTS)
    return FrontMatter(**{key: fields[key] for key in REQUIRED_FIELDS}), body


def parse_date(value: str, date_format: str) -> datetime.date:
    try:
        return datetime.datetime.strptime(value, date_format).date()
    except ValueError as e:
        raise DateParseError(value, date_format) from e


def _slug_from_filename(filename: str) -> str:
    return filename.removesuffix(POST_SUFFIX)
