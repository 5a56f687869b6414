import logging
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping

from lithograph.exceptions import NotFound

logger = logging.getLogger(__name__)


class ContentStore:
    """
    Read-only, in-memory bundle of files keyed by their path relative to the
    directory they were loaded from (``/`` separated).
    """

    def __init__(self, files: Mapping[str, bytes], name: str = "content"):
        self._files = MappingProxyType(dict(files))
        self.name = name

    @classmethod
    def from_mapping(cls, files: Mapping[str, bytes | str], name: str = "content"):
        return cls(
            {
                key: value.encode("utf-8") if isinstance(value, str) else value
                for key, value in files.items()
            },
            name=name,
        )

    def list(self) -> List[str]:
        return sorted(self._files)

    def get(self, filename: str) -> bytes:
        try:
            return self._files[filename]
        except KeyError:
            raise NotFound(filename) from None

    def __contains__(self, filename: str) -> bool:
        return filename in self._files

    def __len__(self) -> int:
        return len(self._files)


def load_content_store(directory: Path, pattern: str = "**/*", name: str | None = None) -> ContentStore:
    """Read every file under ``directory`` matching ``pattern`` into a store."""
    directory = Path(directory)
    name = name or directory.name
    if not directory.is_dir():
        logger.warning(f"Content directory {directory} does not exist, {name} store is empty")
        return ContentStore({}, name=name)

    files = {
        path.relative_to(directory).as_posix(): path.read_bytes()
        for path in sorted(directory.glob(pattern))
        if path.is_file()
    }
    logger.info(f"Loaded {len(files)} files into {name} store from {directory}")
    return ContentStore(files, name=name)
