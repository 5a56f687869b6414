import logging
from pathlib import PurePosixPath
from typing import Optional, Tuple

from lithograph.exceptions import ContentTypeError
from lithograph.repos.content_store import ContentStore

logger = logging.getLogger(__name__)

FAVICON = "favicon.ico"

CONTENT_TYPES = {
    "css": "text/css; charset=utf-8",
    "js": "text/javascript; charset=utf-8",
    "mjs": "text/javascript; charset=utf-8",
    "map": "application/json",
    "json": "application/json",
    "html": "text/html; charset=utf-8",
    "txt": "text/plain; charset=utf-8",
    "xml": "text/xml; charset=utf-8",
    "pdf": "application/pdf",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "webp": "image/webp",
    "avif": "image/avif",
    "ico": "image/x-icon",
    "woff": "font/woff",
    "woff2": "font/woff2",
    "ttf": "font/ttf",
    "otf": "font/otf",
}


def get_content_type_from_filename(filename: str) -> Optional[str]:
    """
    Determine content type from file extension, None when unknown
    """
    suffix = PurePosixPath(filename).suffix
    if not suffix:
        return None
    return CONTENT_TYPES.get(suffix[1:].lower())


def get_asset(path: str, store: ContentStore) -> Tuple[bytes, str]:
    """
    Look up a static asset and its content type.

    Raises NotFound for missing assets and ContentTypeError when the extension
    is missing or unrecognised.
    """
    data = store.get(path)
    content_type = get_content_type_from_filename(path)
    if content_type is None:
        logger.warning(f"Could not determine content type for asset {path}")
        raise ContentTypeError(f"Could not get content type for {path}")
    return data, content_type
