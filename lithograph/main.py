import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from lithograph.repos.content_store import load_content_store
from lithograph.routers import assets, blog, pages
from lithograph.schemas.site import RuntimeInfo
from lithograph.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.posts = load_content_store(settings.POSTS_DIR, "*.md", name="posts")
    app.state.static = load_content_store(settings.STATIC_DIR, name="static")
    app.state.runtime = RuntimeInfo.current()
    logger.info(
        f"Serving {len(app.state.posts)} posts and {len(app.state.static)} static assets"
    )
    yield


app = FastAPI(title="Lithograph", description="Personal site and blog")
app.router.lifespan_context = lifespan

app.include_router(pages.router)
app.include_router(blog.router)
app.include_router(assets.router)


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
