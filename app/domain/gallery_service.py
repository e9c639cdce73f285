"""
Gallery service — core business logic.

Runs the gallery query pipeline for one request:

  fetch all records → normalise → sort → search → categories → paginate

Everything happens in memory on a freshly fetched record set; nothing is
cached or persisted between requests.
"""

import math
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from app.core.logging import get_logger
from app.domain.models import (
    GalleryItem,
    GalleryPage,
    GalleryQuery,
    NotionPage,
    Pagination,
)
from app.domain.normalizer import extract_category, normalize_page
from app.domain.stats import StatsProvider
from app.infrastructure.notion.client import MAX_PAGE_SIZE, NotionClient

logger = get_logger(__name__)

ALL_CATEGORIES = "All"
CATEGORY_PROPERTY = "Category"

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def build_category_filter(category: str) -> Optional[dict[str, Any]]:
    """Return the Notion filter for a category, or None for no filtering."""
    if not category or category == ALL_CATEGORIES:
        return None
    return {"property": CATEGORY_PROPERTY, "rich_text": {"contains": category}}


def _created_key(item: GalleryItem) -> tuple[bool, datetime]:
    try:
        created = datetime.fromisoformat(item.created or "")
    except ValueError:
        return False, _OLDEST
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return True, created


def sort_newest_first(items: list[GalleryItem]) -> list[GalleryItem]:
    """Sort by creation time, newest first; undated items go last."""
    return sorted(items, key=_created_key, reverse=True)


def matches_search(item: GalleryItem, search: str) -> bool:
    needle = search.lower()
    return any(
        needle in field.lower()
        for field in (item.title, item.description, item.category, item.author)
    )


def distinct_categories(pages: Iterable[NotionPage]) -> list[str]:
    """Distinct non-empty categories in order of first appearance."""
    seen: dict[str, None] = {}
    for page in pages:
        category = extract_category(page.properties)
        if category:
            seen.setdefault(category, None)
    return list(seen)


def paginate(items: list[GalleryItem], page: int, limit: int) -> tuple[list[GalleryItem], Pagination]:
    total_items = len(items)
    total_pages = math.ceil(total_items / limit)
    start = (page - 1) * limit

    return items[start:start + limit], Pagination(
        current_page=page,
        total_pages=total_pages,
        total_items=total_items,
        items_per_page=limit,
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )


def empty_result() -> GalleryPage:
    """The envelope served when the pipeline fails."""
    return GalleryPage(
        data=[],
        pagination=Pagination(
            current_page=1,
            total_pages=0,
            total_items=0,
            items_per_page=12,
            has_next_page=False,
            has_prev_page=False,
        ),
        categories=[],
    )


class GalleryService:
    """Query, shape and paginate gallery items from a Notion database."""

    def __init__(
        self,
        client: NotionClient,
        database_id: str,
        stats_provider: StatsProvider,
        page_size: int = MAX_PAGE_SIZE,
        max_pages: Optional[int] = None,
    ) -> None:
        self._client = client
        self._database_id = database_id
        self._stats = stats_provider
        self._page_size = page_size
        self._max_pages = max_pages

    async def fetch_pages(self, category: str = "") -> list[NotionPage]:
        """Fetch every record matching the category, across all upstream pages."""
        raw = await self._client.query_all(
            self._database_id,
            filter=build_category_filter(category),
            page_size=self._page_size,
            max_pages=self._max_pages,
        )
        return [NotionPage.from_api(doc) for doc in raw]

    async def query(self, query: GalleryQuery) -> GalleryPage:
        """
        Run the full gallery pipeline for one request.

        Args:
            query: Validated page, limit, category and search parameters.

        Returns:
            The requested slice with pagination metadata and the category list.

        Raises:
            UpstreamError: If any Notion call fails. No partial result is kept.
        """
        logger.info(
            "Gallery query page=%d limit=%d category=%r search=%r",
            query.page,
            query.limit,
            query.category,
            query.search,
        )

        pages = await self.fetch_pages(query.category)
        items = [
            normalize_page(page, index, self._stats)
            for index, page in enumerate(pages)
        ]
        items = sort_newest_first(items)

        if query.search:
            items = [item for item in items if matches_search(item, query.search)]

        data, pagination = paginate(items, query.page, query.limit)

        return GalleryPage(
            data=data,
            pagination=pagination,
            categories=distinct_categories(pages),
        )
