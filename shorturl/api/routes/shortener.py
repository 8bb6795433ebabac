from typing import Optional

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from shorturl.api import schemas
from shorturl.api.dependencies import get_shortener_service, get_submitted_url
from shorturl.db.session import get_db
from shorturl.services.exceptions import InvalidURLError, ShortURLNotFoundError
from shorturl.services.shortener import ShortenedURLService

router = APIRouter(tags=["shortener"])


@router.post(
    "/new",
    response_model=schemas.ShortURLResponse,
    responses={
        200: {"description": "Created or existing mapping, or {\"error\": \"invalid URL\"}"},
    }
)
async def create_short_url(
    url: Optional[str] = Depends(get_submitted_url),
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenedURLService = Depends(get_shortener_service),
):
    try:
        mapping = await shortener_service.create_or_find(db, url)
    except InvalidURLError:
        return JSONResponse(content={"error": schemas.INVALID_URL})
    return schemas.ShortURLResponse(**mapping)


@router.get(
    "/{short_url}",
    response_class=RedirectResponse,
    status_code=status.HTTP_302_FOUND,
    responses={
        200: {"model": schemas.ErrorResponse, "description": "Short url does not exist"},
    }
)
async def redirect_to_original_url(
    short_url: str = Path(..., description="The numeric short url"),
    db: AsyncSession = Depends(get_db),
    shortener_service: ShortenedURLService = Depends(get_shortener_service),
):
    """Redirect to the original URL of a mapping."""
    try:
        original_url = await shortener_service.resolve(db, short_url)
    except ShortURLNotFoundError:
        return JSONResponse(content={"error": schemas.SHORT_URL_NOT_FOUND})
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
