"""Landing page route."""

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

router = APIRouter(tags=["views"])


@router.get("/", include_in_schema=False)
async def index(request: Request):
    """Serve the static landing page."""
    return FileResponse(request.app.state.settings.VIEWS_DIR / "index.html")
