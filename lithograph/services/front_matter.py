import logging
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler

from lithograph.exceptions import ExtractionError

logger = logging.getLogger(__name__)

FieldValue = Union[str, List[str]]


class FieldType(str, Enum):
    SCALAR = "scalar"
    ARRAY = "array"


class RawYAMLHandler(YAMLHandler):
    """YAML front matter loaded without implicit typing, every scalar stays a string."""

    def load(self, fm, **kwargs):
        return yaml.load(fm, Loader=yaml.BaseLoader)


_handler = RawYAMLHandler()


def extract(
    document_text: str,
    required_fields: Iterable[str],
    type_hints: Optional[Mapping[str, FieldType]] = None,
) -> Tuple[Dict[str, FieldValue], str]:
    """
    Split a document into its leading metadata block and markdown body.

    Scalar fields come back as the raw text written in the block, fields
    hinted as arrays come back as lists of strings. Raises ExtractionError if
    the block cannot be parsed or any required field is absent or empty.
    """
    type_hints = type_hints or {}
    try:
        parsed = frontmatter.loads(document_text, handler=_handler)
    except (yaml.YAMLError, ValueError) as e:
        raise ExtractionError(f"Malformed front matter: {e}") from e

    metadata = parsed.metadata or {}
    missing = [field for field in required_fields if metadata.get(field) in (None, "")]
    if missing:
        raise ExtractionError(f"Missing required front matter fields: {', '.join(missing)}")

    fields: Dict[str, FieldValue] = {}
    for key, value in metadata.items():
        if type_hints.get(key) == FieldType.ARRAY:
            fields[key] = _to_array(value)
        else:
            fields[key] = _to_scalar(value)

    return fields, parsed.content


def _to_array(value) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [_to_scalar(item) for item in value]
    return [_to_scalar(value)]


def _to_scalar(value) -> str:
    if isinstance(value, (list, tuple, dict)):
        raise ExtractionError(f"Expected a scalar value, got {type(value).__name__}")
    return str(value)
