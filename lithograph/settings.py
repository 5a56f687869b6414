from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Site
    SITE_TITLE: str = "SphericalKat"

    # Content bundles
    POSTS_DIR: Path = PACKAGE_DIR / "posts"
    STATIC_DIR: Path = PACKAGE_DIR / "static"

    # Blog
    POST_DATE_FORMAT: str = "%Y-%m-%d"
    SKIP_MALFORMED_POSTS: bool = False
    HIGHLIGHT_CODE: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    @property
    def blog_title(self) -> str:
        return f"Blog - {self.SITE_TITLE}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
