from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates

from lithograph.repos.content_store import ContentStore
from lithograph.schemas.site import RuntimeInfo
from lithograph.services.markdown_renderer import MarkdownRenderer, RenderOptions
from lithograph.services.posts_service import PostsService
from lithograph.settings import PACKAGE_DIR, Settings, settings

templates = Jinja2Templates(directory=PACKAGE_DIR / "templates")


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_post_store(request: Request) -> ContentStore:
    return request.app.state.posts


def get_static_store(request: Request) -> ContentStore:
    return request.app.state.static


def get_runtime_info(request: Request) -> RuntimeInfo:
    return request.app.state.runtime


def get_renderer(current_settings: Settings = Depends(get_settings)):
    return MarkdownRenderer(RenderOptions(highlight_code=current_settings.HIGHLIGHT_CODE))


def get_posts_service(
    store=Depends(get_post_store),
    renderer=Depends(get_renderer),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(
        store=store,
        renderer=renderer,
        date_format=current_settings.POST_DATE_FORMAT,
        skip_malformed=current_settings.SKIP_MALFORMED_POSTS,
    )
