"""
Unit tests for the Notion API client.

Tests cover:
  - Request shape (headers, body, cursor handling)
  - Following continuation cursors until exhausted
  - Page limit enforcement
  - Error classification
"""

import json

import httpx
import pytest

from app.core.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from app.infrastructure.notion.client import NotionClient, QueryResult


def _client(handler) -> NotionClient:
    http = httpx.AsyncClient(
        base_url="https://api.notion.test/v1",
        transport=httpx.MockTransport(handler),
    )
    return NotionClient(token="secret", http_client=http)


@pytest.mark.asyncio
class TestQueryDatabase:
    """Tests for NotionClient.query_database()."""

    async def test_sends_expected_request(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["headers"] = request.headers
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200,
                json={"results": [{"id": "p1"}], "has_more": True, "next_cursor": "c2"},
            )

        client = _client(handler)
        result = await client.query_database(
            "db-1",
            filter={"property": "Category", "rich_text": {"contains": "Ads"}},
            page_size=500,
        )

        assert isinstance(result, QueryResult)
        assert result.results == [{"id": "p1"}]
        assert result.has_more is True
        assert result.next_cursor == "c2"
        assert seen["path"] == "/v1/databases/db-1/query"
        assert seen["headers"]["authorization"] == "Bearer secret"
        assert seen["headers"]["notion-version"] == "2022-06-28"
        assert seen["body"] == {
            "page_size": 100,
            "filter": {"property": "Category", "rich_text": {"contains": "Ads"}},
        }

    async def test_error_object_becomes_response_error(self):
        def handler(request):
            return httpx.Response(
                401,
                json={"object": "error", "code": "unauthorized", "message": "API token is invalid."},
            )

        with pytest.raises(UpstreamResponseError) as exc_info:
            await _client(handler).query_database("db-1")

        assert exc_info.value.status_code == 401
        assert exc_info.value.code == "unauthorized"
        assert exc_info.value.message == "API token is invalid."

    async def test_non_json_error_body(self):
        def handler(request):
            return httpx.Response(502, text="Bad gateway")

        with pytest.raises(UpstreamResponseError) as exc_info:
            await _client(handler).query_database("db-1")

        assert "502" in exc_info.value.message

    async def test_missing_results_is_malformed(self):
        def handler(request):
            return httpx.Response(200, json={"has_more": False})

        with pytest.raises(MalformedResponseError):
            await _client(handler).query_database("db-1")

    async def test_non_object_result_is_malformed(self):
        def handler(request):
            return httpx.Response(200, json={"results": ["junk"], "has_more": False})

        with pytest.raises(MalformedResponseError):
            await _client(handler).query_database("db-1")

    async def test_connection_failure_is_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("Connection refused")

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await _client(handler).query_database("db-1")

        assert "connection failed" in exc_info.value.message.lower()

    async def test_timeout_is_unavailable(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out")

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await _client(handler).query_database("db-1")

        assert "timed out" in exc_info.value.message.lower()

    async def test_missing_configuration(self):
        client = NotionClient(token="")

        with pytest.raises(ConfigurationError):
            await client.query_database("db-1")

        await client.aclose()


@pytest.mark.asyncio
class TestQueryAll:
    """Tests for NotionClient.query_all()."""

    async def test_follows_cursor_until_exhausted(self):
        cursors = []
        pages = {
            None: {"results": [{"id": "1"}, {"id": "2"}], "has_more": True, "next_cursor": "c2"},
            "c2": {"results": [{"id": "3"}], "has_more": True, "next_cursor": "c3"},
            "c3": {"results": [{"id": "4"}], "has_more": False, "next_cursor": None},
        }

        def handler(request):
            cursor = json.loads(request.content).get("start_cursor")
            cursors.append(cursor)
            return httpx.Response(200, json=pages[cursor])

        records = await _client(handler).query_all("db-1")

        assert [r["id"] for r in records] == ["1", "2", "3", "4"]
        assert cursors == [None, "c2", "c3"]

    async def test_stops_at_max_pages(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(
                200,
                json={"results": [{"id": str(len(calls))}], "has_more": True, "next_cursor": "more"},
            )

        records = await _client(handler).query_all("db-1", max_pages=2)

        assert len(calls) == 2
        assert [r["id"] for r in records] == ["1", "2"]

    async def test_failure_on_later_page_discards_everything(self):
        def handler(request):
            if json.loads(request.content).get("start_cursor"):
                return httpx.Response(500, json={"code": "internal_server_error", "message": "boom"})
            return httpx.Response(
                200, json={"results": [{"id": "1"}], "has_more": True, "next_cursor": "c2"}
            )

        with pytest.raises(UpstreamResponseError):
            await _client(handler).query_all("db-1")

    async def test_has_more_without_cursor_stops(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(
                200,
                json={"results": [{"id": "1"}], "has_more": True, "next_cursor": None},
            )

        records = await _client(handler).query_all("db-1")

        assert len(calls) == 1
        assert [r["id"] for r in records] == ["1"]
