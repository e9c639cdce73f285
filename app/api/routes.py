"""
API routes for the gallery service.

Defines the GET endpoint serving filtered, searched and paginated
gallery items. Uses FastAPI dependency injection for clean
separation from business logic.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_gallery_service
from app.api.schemas import GalleryResponse
from app.core.config import settings
from app.core.logging import get_logger
from app.domain.gallery_service import GalleryService, empty_result
from app.domain.models import GalleryQuery
from app.utils.query_params import parse_positive_int

logger = get_logger(__name__)

router = APIRouter(prefix="/notion", tags=["Gallery"])


@router.get(
    "",
    response_model=GalleryResponse,
    response_model_exclude_unset=True,
    summary="List gallery items",
    description=(
        "Fetches all matching records from the Notion database, then filters, "
        "searches and paginates them. Always answers 200: on failure the body "
        "is an empty result with an `error` message."
    ),
)
async def list_gallery_items(
    page: Optional[str] = Query(None, description="1-based page number (default 1)"),
    limit: Optional[str] = Query(None, description="Items per page (default 12)"),
    category: str = Query("", description="Category to narrow to; 'All' disables"),
    search: str = Query("", description="Case-insensitive text search"),
    service: GalleryService = Depends(get_gallery_service),
) -> GalleryResponse:
    """
    GET /notion — One page of gallery items plus the category list.

    Invalid ``page``/``limit`` values fall back to their defaults.
    """
    try:
        query = GalleryQuery(
            page=parse_positive_int(page, settings.default_page),
            limit=parse_positive_int(limit, settings.default_limit),
            category=category,
            search=search,
        )
        result = await service.query(query)
        return GalleryResponse.from_page(result)

    except Exception as exc:
        logger.error("Notion API error: %s", exc, exc_info=True)
        return GalleryResponse.from_error(empty_result(), str(exc) or "Unknown error")
