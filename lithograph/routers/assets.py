import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from lithograph import dependencies as deps
from lithograph.exceptions import ContentTypeError, NotFound
from lithograph.repos.content_store import ContentStore
from lithograph.services.asset_service import FAVICON, get_asset

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/static/{file_path:path}")
def get_static(file_path: str, store: ContentStore = Depends(deps.get_static_store)):
    """
    Serve a bundled static asset
    """
    try:
        data, content_type = get_asset(file_path, store)
    except NotFound:
        raise HTTPException(status_code=404, detail="Asset not found")
    except ContentTypeError:
        raise HTTPException(status_code=400, detail="Could not get file content type")

    return Response(content=data, media_type=content_type)


@router.get("/favicon.ico")
def get_favicon(store: ContentStore = Depends(deps.get_static_store)):
    try:
        data = store.get(FAVICON)
    except NotFound:
        raise HTTPException(status_code=404, detail="Favicon not found")

    return Response(content=data, media_type="image/x-icon")
