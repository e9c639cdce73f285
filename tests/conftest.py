"""
Shared test fixtures for the gallery service test suite.

Provides:
  - Async test client for FastAPI integration tests
  - Mock Notion client fixtures
  - Sample Notion page builders
"""

from typing import Any, AsyncIterator, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.api.dependencies import get_gallery_service
from app.domain.gallery_service import GalleryService
from app.domain.models import ItemStats
from app.main import app


class FixedStatsProvider:
    """Deterministic stats so assertions don't depend on randomness."""

    def generate(self, page):
        return ItemStats(views=12345, downloads=7, rating=4.2)


def make_page(
    page_id: Optional[str] = "page-1",
    title: Optional[str] = None,
    created: Optional[str] = "2024-01-01T00:00:00.000Z",
    category: Optional[str] = None,
    description: Optional[str] = None,
    author: Optional[str] = None,
    link: Optional[str] = None,
    is_free: Optional[bool] = None,
    title_property: str = "Title",
) -> dict[str, Any]:
    """Build a raw Notion page dict shaped like a database query result."""

    def rich_text(value: str) -> dict[str, Any]:
        return {"type": "rich_text", "rich_text": [{"plain_text": value}]}

    properties: dict[str, Any] = {}
    if title is not None:
        properties[title_property] = {"type": "title", "title": [{"plain_text": title}]}
    if category is not None:
        properties["Category"] = rich_text(category)
    if description is not None:
        properties["Description"] = rich_text(description)
    if author is not None:
        properties["Author"] = rich_text(author)
    if link is not None:
        properties["Link"] = {"type": "url", "url": link}
    if is_free is not None:
        properties["IsFree"] = {"type": "checkbox", "checkbox": is_free}

    page: dict[str, Any] = {
        "object": "page",
        "created_time": created,
        "last_edited_time": created,
        "properties": properties,
    }
    if page_id is not None:
        page["id"] = page_id
    return page


@pytest.fixture
def stats_provider():
    return FixedStatsProvider()


@pytest.fixture
def mock_notion_client():
    """
    Provide a mock NotionClient.

    ``query_all`` returns no records unless a test sets ``return_value``.
    """
    client = MagicMock()
    client.query_all = AsyncMock(return_value=[])
    return client


@pytest.fixture
def gallery_service(mock_notion_client, stats_provider):
    return GalleryService(
        client=mock_notion_client,
        database_id="db-123",
        stats_provider=stats_provider,
    )


@pytest.fixture
def sample_pages():
    """Four records across two categories, fetched oldest first."""
    return [
        make_page("p1", "Apollo", "2024-01-01T00:00:00.000Z", "Design", "desc", "Ann"),
        make_page("p2", "Zeus", "2024-03-01T00:00:00.000Z", "Marketing", "desc", "Bob"),
        make_page("p3", "Hera", "2024-02-01T00:00:00.000Z", "Design", "sky goddess", "Cy"),
        make_page("p4", "Ares", "2024-04-01T00:00:00.000Z", " Marketing ", "war", "Dee"),
    ]


@pytest_asyncio.fixture
async def async_client(gallery_service) -> AsyncIterator[AsyncClient]:
    """
    Provide an async HTTP test client for integration tests.

    Overrides the gallery service dependency so no live Notion
    database is required during testing.
    """
    app.dependency_overrides[get_gallery_service] = lambda: gallery_service
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(
            transport=transport, base_url="http://testserver"
        ) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def page_factory():
    """Expose ``make_page`` to tests as a fixture."""
    return make_page
