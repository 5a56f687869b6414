import platform
import sys

from pydantic import BaseModel


class RuntimeInfo(BaseModel):
    """Process details shown in the page footer, computed once at startup."""

    path: str
    version: str

    @classmethod
    def current(cls) -> "RuntimeInfo":
        return cls(
            path=sys.executable,
            version=f"{platform.python_implementation()} {platform.python_version()}",
        )
