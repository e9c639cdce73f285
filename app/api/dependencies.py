"""
FastAPI dependency injection.

Provides shared instances for use across API endpoints,
ensuring consistent lifecycle management and testability.
"""

from fastapi import Depends

from app.core.config import settings
from app.domain.gallery_service import GalleryService
from app.domain.stats import RandomStatsProvider, StatsProvider
from app.infrastructure.notion.client import NotionClient, get_notion_client

_stats_provider = RandomStatsProvider()


def get_stats_provider() -> StatsProvider:
    """Provide the card statistics generator."""
    return _stats_provider


def get_gallery_service(
    client: NotionClient = Depends(get_notion_client),
    stats_provider: StatsProvider = Depends(get_stats_provider),
) -> GalleryService:
    """
    Provide a GalleryService wired to the shared Notion client.

    Registered as a FastAPI dependency so endpoints receive a fully-wired
    service without coupling to infrastructure details; tests override it.
    """
    return GalleryService(
        client=client,
        database_id=settings.notion_database_id,
        stats_provider=stats_provider,
        page_size=settings.upstream_page_size,
        max_pages=settings.max_upstream_pages,
    )
