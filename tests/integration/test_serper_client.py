"""Integration tests for the Serper client with mocked HTTP."""

import json

import httpx
import pytest
import respx
from httpx import Response

from serper_mcp.exceptions import (
    EmptyBatchError,
    InvalidURLError,
    SerperAPIError,
    SerperResponseError,
    SerperTransportError,
)
from serper_mcp.models.scrape import ScrapeParams
from serper_mcp.models.search import SearchParams
from serper_mcp.services.serper_client import SerperClient

SEARCH_URL = "https://google.serper.dev/search"
SCRAPE_URL = "https://scrape.serper.dev/"


def _json_body(route) -> object:
    return json.loads(route.calls.last.request.content)


class TestSearch:
    """Tests for single searches."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_success(self, serper_client, sample_search_response):
        route = respx.post(SEARCH_URL).mock(return_value=Response(200, json=sample_search_response))

        result = await serper_client.search(SearchParams(q="python programming", gl="us", hl="en"))

        assert result == sample_search_response
        assert route.called
        request = route.calls.last.request
        assert request.headers["X-API-KEY"] == "test-serper-key"
        assert request.headers["Content-Type"] == "application/json"
        assert _json_body(route) == {"q": "python programming", "gl": "us", "hl": "en"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_sends_expanded_query(self, serper_client, sample_search_response):
        route = respx.post(SEARCH_URL).mock(return_value=Response(200, json=sample_search_response))

        params = SearchParams.model_validate(
            {
                "q": "search  term",
                "site": "github.com",
                "exclude": "draft",
                "or": "tutorial,documentation",
                "tbs": "qdr:m",
            }
        )
        await serper_client.search(params)

        assert _json_body(route) == {
            "q": "search term site:github.com -draft (tutorial OR documentation)",
            "tbs": "qdr:m",
        }

    @pytest.mark.asyncio
    @respx.mock
    async def test_custom_base_url(self, sample_search_response):
        route = respx.post("http://localhost:9000/search").mock(
            return_value=Response(200, json=sample_search_response)
        )
        client = SerperClient(api_key="key", base_url="http://localhost:9000/")

        await client.search(SearchParams(q="python"))

        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_api_error(self, serper_client):
        respx.post(SEARCH_URL).mock(
            return_value=Response(403, text='{"message": "Unauthorized."}')
        )

        with pytest.raises(SerperAPIError) as exc_info:
            await serper_client.search(SearchParams(q="python"))

        err = exc_info.value
        assert err.status_code == 403
        assert err.reason == "Forbidden"
        assert err.body == '{"message": "Unauthorized."}'
        assert "403" in str(err)

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_server_error(self, serper_client):
        respx.post(SEARCH_URL).mock(return_value=Response(500, text="Internal error"))

        with pytest.raises(SerperAPIError, match="500 Internal Server Error - Internal error"):
            await serper_client.search(SearchParams(q="python"))

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_transport_error(self, serper_client):
        respx.post(SEARCH_URL).mock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(SerperTransportError, match="connection refused") as exc_info:
            await serper_client.search(SearchParams(q="python"))

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_invalid_json(self, serper_client):
        respx.post(SEARCH_URL).mock(return_value=Response(200, text="<html>oops</html>"))

        with pytest.raises(SerperResponseError, match="not valid JSON"):
            await serper_client.search(SearchParams(q="python"))

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_undecodable_body(self, serper_client):
        respx.post(SEARCH_URL).mock(return_value=Response(200, content=b"\xff\xfe\xfa"))

        with pytest.raises(SerperResponseError, match="not valid JSON"):
            await serper_client.search(SearchParams(q="python"))

    @pytest.mark.asyncio
    @respx.mock
    async def test_shared_client_is_not_closed(self, sample_search_response):
        respx.post(SEARCH_URL).mock(return_value=Response(200, json=sample_search_response))

        async with httpx.AsyncClient() as http_client:
            client = SerperClient(api_key="key", http_client=http_client)
            await client.search(SearchParams(q="python"))
            assert not http_client.is_closed


class TestBatchSearch:
    """Tests for batch searches."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_batch_success_is_index_aligned(self, serper_client):
        responses = [
            {"searchParameters": {"q": "artificial intelligence"}, "organic": []},
            {"searchParameters": {"q": "machine learning", "gl": "us", "hl": "en"}, "organic": []},
        ]
        route = respx.post(SEARCH_URL).mock(return_value=Response(200, json=responses))

        params_list = [
            SearchParams(q="artificial intelligence"),
            SearchParams(q="machine learning", gl="us", hl="en", site="arxiv.org"),
        ]
        results = await serper_client.batch_search(params_list)

        assert len(results) == len(params_list)
        assert results[0]["searchParameters"]["q"] == "artificial intelligence"
        assert results[1]["searchParameters"]["gl"] == "us"
        assert _json_body(route) == [
            {"q": "artificial intelligence"},
            {"q": "machine learning site:arxiv.org", "gl": "us", "hl": "en"},
        ]

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_batch_makes_no_request(self, serper_client):
        route = respx.post(SEARCH_URL).mock(return_value=Response(200, json=[]))

        with pytest.raises(EmptyBatchError):
            await serper_client.batch_search([])

        assert not route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_batch_length_mismatch(self, serper_client):
        respx.post(SEARCH_URL).mock(return_value=Response(200, json=[{"organic": []}]))

        with pytest.raises(SerperResponseError, match="expected 2 results, got 1"):
            await serper_client.batch_search([SearchParams(q="a"), SearchParams(q="b")])

    @pytest.mark.asyncio
    @respx.mock
    async def test_batch_requires_array_response(self, serper_client):
        respx.post(SEARCH_URL).mock(return_value=Response(200, json={"organic": []}))

        with pytest.raises(SerperResponseError, match="JSON array"):
            await serper_client.batch_search([SearchParams(q="a")])

    @pytest.mark.asyncio
    @respx.mock
    async def test_batch_api_error(self, serper_client):
        respx.post(SEARCH_URL).mock(return_value=Response(429, text="Too many requests"))

        with pytest.raises(SerperAPIError) as exc_info:
            await serper_client.batch_search([SearchParams(q="a")])

        assert exc_info.value.status_code == 429
        assert exc_info.value.operation == "batch_search"


class TestScrape:
    """Tests for scraping."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_scrape_success(self, serper_client, sample_scrape_response):
        route = respx.post(SCRAPE_URL).mock(return_value=Response(200, json=sample_scrape_response))

        result = await serper_client.scrape(
            ScrapeParams(url="https://example.com", include_markdown=True)
        )

        assert result["metadata"]["title"] == "Example Domain"
        assert route.calls.last.request.headers["X-API-KEY"] == "test-serper-key"
        assert _json_body(route) == {"url": "https://example.com", "includeMarkdown": True}

    @pytest.mark.asyncio
    @respx.mock
    async def test_scrape_follows_redirects(self, serper_client, sample_scrape_response):
        respx.post(SCRAPE_URL).mock(
            return_value=Response(307, headers={"Location": "https://scrape.serper.dev/v2"})
        )
        redirected = respx.post("https://scrape.serper.dev/v2").mock(
            return_value=Response(200, json=sample_scrape_response)
        )

        result = await serper_client.scrape(ScrapeParams(url="https://example.com"))

        assert redirected.called
        assert result["text"].startswith("Example Domain")

    @pytest.mark.asyncio
    @respx.mock
    async def test_scrape_empty_url_makes_no_request(self, serper_client):
        route = respx.post(SCRAPE_URL).mock(return_value=Response(200, json={}))

        with pytest.raises(InvalidURLError):
            await serper_client.scrape(ScrapeParams(url=""))

        assert not route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_scrape_api_error(self, serper_client):
        respx.post(SCRAPE_URL).mock(return_value=Response(400, text="Bad URL"))

        with pytest.raises(SerperAPIError, match="400 Bad Request - Bad URL"):
            await serper_client.scrape(ScrapeParams(url="https://example.com"))
