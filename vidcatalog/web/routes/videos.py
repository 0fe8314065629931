"""
Route du catalogue video : GET /videos.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()


@router.get("/videos")
async def list_videos(request: Request) -> JSONResponse:
    """Renvoie les metadonnees des videos stockees, telles que fournies par YouTube."""
    catalog = request.app.state.container.catalog_service()
    records = await catalog.get_catalog()
    return JSONResponse(content=records)
