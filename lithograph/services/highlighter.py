import logging

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

_formatter = HtmlFormatter(cssclass="highlight")


def get_lexer(lang: str):
    """
    Find a lexer by language name, then by file extension, falling back to
    plain text.
    """
    if not lang:
        return TextLexer()
    try:
        return get_lexer_by_name(lang)
    except ClassNotFound:
        pass
    try:
        return get_lexer_for_filename(f"snippet.{lang}")
    except ClassNotFound:
        logger.debug(f"No lexer for {lang!r}, using plain text")
        return TextLexer()


def highlight_code(code: str, lang: str = "") -> str:
    return highlight(code, get_lexer(lang), _formatter)
