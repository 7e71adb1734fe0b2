from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from portfolio_backend.config import Settings
from portfolio_backend.dependencies import get_settings

router = APIRouter(tags=["pages"])

INDEX_PAGE = "index.html"
DASHBOARD_PAGE = "submissions.html"


def _page(settings: Settings, filename: str) -> FileResponse:
    path = settings.frontend_dir / filename
    if not path.is_file():
        raise HTTPException(status_code=404, detail=f"Not Found: {filename}")
    return FileResponse(path, media_type="text/html")


@router.get("/", include_in_schema=False)
async def serve_index(settings: Settings = Depends(get_settings)):
    """Main portfolio page"""
    return _page(settings, INDEX_PAGE)


@router.get("/submissions.html", include_in_schema=False)
async def serve_dashboard(settings: Settings = Depends(get_settings)):
    """Submissions dashboard, reads from GET /submissions"""
    return _page(settings, DASHBOARD_PAGE)
