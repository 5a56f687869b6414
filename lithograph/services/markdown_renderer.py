import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.front_matter import front_matter_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from lithograph.services.highlighter import highlight_code

logger = logging.getLogger(__name__)

CODE_BLOCK_TYPES = ("fence", "code_block")


class RenderMode(str, Enum):
    BLURB = "blurb"
    BODY = "body"


@dataclass(frozen=True)
class RenderOptions:
    strikethrough: bool = True
    tables: bool = True
    autolink: bool = True
    tasklists: bool = True
    # Headings get an id and a leading permalink <a href="#<id>">
    header_ids: bool = True
    footnotes: bool = False
    description_lists: bool = False
    front_matter: bool = False
    # Raw HTML in posts is passed through untouched so embedded gists work.
    # Posts are written by the site owner, never by visitors.
    unsafe_html: bool = True
    highlight_code: bool = False


def build_parser(options: RenderOptions) -> MarkdownIt:
    md = MarkdownIt(
        "gfm-like",
        {"html": options.unsafe_html, "linkify": options.autolink},
    )
    if not options.strikethrough:
        md.disable("strikethrough")
    if not options.tables:
        md.disable("table")
    if not options.autolink:
        md.disable("linkify")
    if options.tasklists:
        md.use(tasklists_plugin)
    if options.header_ids:
        md.use(
            anchors_plugin,
            min_level=1,
            max_level=6,
            permalink=True,
            permalinkSymbol="",
            permalinkBefore=True,
            permalinkSpace=False,
        )
    if options.footnotes:
        md.use(footnote_plugin)
    if options.description_lists:
        md.use(deflist_plugin)
    if options.front_matter:
        md.use(front_matter_plugin)
    return md


class MarkdownRenderer:
    def __init__(self, options: RenderOptions | None = None):
        self.options = options or RenderOptions()
        self.md = build_parser(self.options)

    def render(self, markdown_text: str, mode: RenderMode = RenderMode.BODY) -> str:
        env: dict = {}
        tokens = self.md.parse(markdown_text, env)
        if self.options.highlight_code:
            walk_tokens(tokens, _highlight_token)
        html = self.md.renderer.render(tokens, self.md.options, env)
        logger.debug(f"Rendered {mode.value} from {len(markdown_text)} to {len(html)} chars")
        return html


def walk_tokens(tokens: List[Token], rewrite: Callable[[Token], Token]) -> None:
    """Depth-first walk replacing each token with ``rewrite(token)`` in place."""
    for idx, token in enumerate(tokens):
        tokens[idx] = rewrite(token)
        if tokens[idx].children:
            walk_tokens(tokens[idx].children, rewrite)


def _highlight_token(token: Token) -> Token:
    if token.type not in CODE_BLOCK_TYPES:
        return token
    lang = token.info.strip().split(maxsplit=1)[0] if token.info.strip() else ""
    highlighted = Token(
        "html_block",
        "",
        0,
        content=highlight_code(token.content, lang),
        map=token.map,
        level=token.level,
        block=True,
    )
    return highlighted
