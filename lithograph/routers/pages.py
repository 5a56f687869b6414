import datetime

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from lithograph import dependencies as deps
from lithograph.repos.content_store import ContentStore
from lithograph.schemas.site import RuntimeInfo
from lithograph.settings import Settings

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    runtime: RuntimeInfo = Depends(deps.get_runtime_info),
    current_settings: Settings = Depends(deps.get_settings),
):
    return deps.templates.TemplateResponse(
        request,
        "index/index.html",
        {
            "title": current_settings.SITE_TITLE,
            "site_title": current_settings.SITE_TITLE,
            "year": datetime.date.today().year,
            "runtime": runtime,
        },
    )


@router.get("/health")
def health(store: ContentStore = Depends(deps.get_post_store)):
    return {"status": "ok", "posts": len(store)}
