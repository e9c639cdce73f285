"""
Notion API client for querying the gallery database.

Uses httpx.AsyncClient for non-blocking HTTP requests with connection
pooling and configurable timeouts. One client is shared across the
process: it is built during application startup and closed on shutdown.

Errors are classified as:
  - UpstreamUnavailableError: timeouts, connection failures
  - UpstreamResponseError: any non-2xx answer from Notion
  - MalformedResponseError: a body that is not a query result
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from app.core.config import settings
from app.core.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from app.core.logging import get_logger

logger = get_logger(__name__)

# Notion rejects page_size above this value
MAX_PAGE_SIZE = 100

# Module-level client reference
_client: Optional["NotionClient"] = None


@dataclass
class QueryResult:
    """One page of a Notion database query."""

    results: list[dict[str, Any]] = field(default_factory=list)
    has_more: bool = False
    next_cursor: Optional[str] = None


class NotionClient:
    """Thin async wrapper over the Notion database query endpoint."""

    def __init__(
        self,
        token: str,
        base_url: str = "https://api.notion.com/v1",
        notion_version: str = "2022-06-28",
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._token = token
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout=timeout, connect=10.0),
        )
        self._headers = {
            "Authorization": f"Bearer {token}",
            "Notion-Version": notion_version,
            "Content-Type": "application/json",
        }

    async def aclose(self) -> None:
        await self._http.aclose()

    async def query_database(
        self,
        database_id: str,
        filter: Optional[dict[str, Any]] = None,
        page_size: int = MAX_PAGE_SIZE,
        start_cursor: Optional[str] = None,
    ) -> QueryResult:
        """
        Fetch a single page of records from a Notion database.

        Args:
            database_id: The Notion database to query.
            filter: Optional Notion filter object.
            page_size: Records per page, capped at 100.
            start_cursor: Continuation cursor from the previous page.

        Returns:
            QueryResult with the page's records and continuation state.

        Raises:
            ConfigurationError: If the token or database id is empty.
            UpstreamUnavailableError: For timeouts and connection failures.
            UpstreamResponseError: For non-2xx responses.
            MalformedResponseError: For bodies that are not query results.
        """
        if not self._token:
            raise ConfigurationError("NOTION_TOKEN")
        if not database_id:
            raise ConfigurationError("NOTION_DATABASE_ID")

        body: dict[str, Any] = {"page_size": min(max(page_size, 1), MAX_PAGE_SIZE)}
        if filter:
            body["filter"] = filter
        if start_cursor:
            body["start_cursor"] = start_cursor

        path = f"/databases/{database_id}/query"

        try:
            response = await self._http.post(path, json=body, headers=self._headers)

        except httpx.TimeoutException as exc:
            logger.warning("Timeout querying database=%s: %s", database_id, exc)
            raise UpstreamUnavailableError("Request to Notion timed out") from exc

        except httpx.HTTPError as exc:
            logger.warning("Connection failed for database=%s: %s", database_id, exc)
            raise UpstreamUnavailableError(f"Connection failed: {exc}") from exc

        if response.status_code >= 400:
            raise _response_error(response)

        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedResponseError("Notion returned a non-JSON body") from exc

        return _parse_query_result(payload)

    async def query_all(
        self,
        database_id: str,
        filter: Optional[dict[str, Any]] = None,
        page_size: int = MAX_PAGE_SIZE,
        max_pages: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """
        Page through a database query until Notion reports no more results.

        Each request depends on the cursor returned by the previous one,
        so pages are fetched strictly in sequence. When ``max_pages`` is
        set the loop stops early and the truncated result is returned.
        """
        records: list[dict[str, Any]] = []
        cursor: Optional[str] = None
        pages_fetched = 0

        while True:
            page = await self.query_database(
                database_id,
                filter=filter,
                page_size=page_size,
                start_cursor=cursor,
            )
            records.extend(page.results)
            pages_fetched += 1

            if not page.has_more or not page.next_cursor:
                break

            if max_pages is not None and pages_fetched >= max_pages:
                logger.warning(
                    "Stopped paging database=%s after %d pages (%d records); "
                    "more results are available",
                    database_id,
                    pages_fetched,
                    len(records),
                )
                break

            cursor = page.next_cursor

        logger.info(
            "Fetched %d records from database=%s in %d page(s)",
            len(records),
            database_id,
            pages_fetched,
        )
        return records


def _response_error(response: httpx.Response) -> UpstreamResponseError:
    """Build an UpstreamResponseError from a Notion error object when possible."""
    code = None
    message = f"Notion API returned HTTP {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        code = body.get("code")
        message = body.get("message") or message

    logger.warning(
        "Notion query failed (status=%d, code=%s): %s",
        response.status_code,
        code,
        message,
    )
    return UpstreamResponseError(message, status_code=response.status_code, code=code)


def _parse_query_result(payload: Any) -> QueryResult:
    if not isinstance(payload, dict):
        raise MalformedResponseError("Notion response is not a JSON object")

    results = payload.get("results")
    if not isinstance(results, list):
        raise MalformedResponseError("Notion response is missing 'results'")
    if not all(isinstance(entry, dict) for entry in results):
        raise MalformedResponseError("Notion response contains a non-object result")
    if "has_more" not in payload:
        raise MalformedResponseError("Notion response is missing 'has_more'")

    return QueryResult(
        results=results,
        has_more=bool(payload["has_more"]),
        next_cursor=payload.get("next_cursor"),
    )


def init_notion_client() -> NotionClient:
    """Build the shared Notion client from settings (idempotent)."""
    global _client

    if _client is None:
        _client = NotionClient(
            token=settings.notion_token,
            base_url=settings.notion_api_url,
            notion_version=settings.notion_version,
            timeout=settings.http_timeout,
        )
        if not settings.notion_token or not settings.notion_database_id:
            logger.warning(
                "NOTION_TOKEN or NOTION_DATABASE_ID is not set; "
                "gallery queries will fail until configured"
            )
    return _client


async def close_notion_client() -> None:
    """Gracefully close the shared Notion client."""
    global _client

    if _client is not None:
        await _client.aclose()
        _client = None
        logger.info("Notion client closed")


def get_notion_client() -> NotionClient:
    """
    Return the shared Notion client.

    Falls back to building it on first use when startup hooks did not run
    (for example under a bare ASGI transport).
    """
    if _client is None:
        return init_notion_client()
    return _client
