import datetime
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from lithograph import dependencies as deps
from lithograph.exceptions import NotFound
from lithograph.schemas.site import RuntimeInfo
from lithograph.services.posts_service import PostsService
from lithograph.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/blog", response_class=HTMLResponse)
def list_posts(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    runtime: RuntimeInfo = Depends(deps.get_runtime_info),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Blog index, newest post first."""
    try:
        posts = service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")

    return deps.templates.TemplateResponse(
        request,
        "blog/index.html",
        {
            "title": current_settings.blog_title,
            "site_title": current_settings.SITE_TITLE,
            "year": datetime.date.today().year,
            "posts": posts,
            "runtime": runtime,
        },
    )


@router.get("/blog/{slug}", response_class=HTMLResponse)
def get_post(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    runtime: RuntimeInfo = Depends(deps.get_runtime_info),
    current_settings: Settings = Depends(deps.get_settings),
):
    """A single rendered post."""
    try:
        post = service.get_post(slug)
    except NotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")

    return deps.templates.TemplateResponse(
        request,
        "blog/post.html",
        {
            "title": post.title,
            "site_title": current_settings.SITE_TITLE,
            "year": datetime.date.today().year,
            "post": post,
            "runtime": runtime,
        },
    )
