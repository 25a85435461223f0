"""Serper search and scrape API client."""

import time
from typing import Any

import httpx
import structlog

from serper_mcp.config import settings
from serper_mcp.exceptions import (
    EmptyBatchError,
    InvalidURLError,
    SerperAPIError,
    SerperResponseError,
    SerperTransportError,
)
from serper_mcp.models.scrape import ScrapeParams, ScrapeResult
from serper_mcp.models.search import SearchParams, SearchResult, SearchResultBatch

logger = structlog.get_logger(__name__)

SERPER_BASE_URL = "https://google.serper.dev"
SERPER_SCRAPE_URL = "https://scrape.serper.dev"


class SerperClient:
    """
    Client for the Serper API.

    Serper returns structured Google results (organic results, knowledge
    graph, people also ask, related searches) and scrapes single pages.
    Responses are returned as parsed JSON without reshaping.

    https://serper.dev/
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = SERPER_BASE_URL,
        scrape_url: str = SERPER_SCRAPE_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the Serper client.

        Args:
            api_key: Serper API key
            base_url: Base URL of the search API (overridable for testing)
            scrape_url: URL of the scrape endpoint
            http_client: Shared HTTP client (optional)
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._scrape_url = scrape_url
        self._http_client = http_client
        self._owns_client = http_client is None

    @property
    def search_url(self) -> str:
        """Return the search endpoint URL."""
        return f"{self._base_url}/search"

    @property
    def scrape_url(self) -> str:
        """Return the scrape endpoint URL."""
        return self._scrape_url

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(
            timeout=settings.request_timeout,
            verify=settings.get_ssl_context(),
        )

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-API-KEY": self._api_key,
        }

    async def _post(self, operation: str, url: str, payload: Any) -> Any:
        """
        POST a JSON payload and return the parsed JSON response.

        Raises:
            SerperAPIError: On a non-success status
            SerperTransportError: If no response was received
            SerperResponseError: If the body is not valid JSON
        """
        client = self._get_client()
        should_close = self._owns_client and self._http_client is None

        try:
            start_time = time.monotonic()
            try:
                response = await client.post(
                    url,
                    json=payload,
                    headers=self._headers(),
                    follow_redirects=True,
                )
            except httpx.RequestError as e:
                logger.warning("serper_transport_error", operation=operation, error=str(e))
                raise SerperTransportError(operation, str(e) or type(e).__name__) from e

            elapsed_ms = (time.monotonic() - start_time) * 1000

            logger.debug(
                "serper_request",
                operation=operation,
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
            )

            if not response.is_success:
                logger.warning(
                    "serper_api_error",
                    operation=operation,
                    status_code=response.status_code,
                )
                raise SerperAPIError(
                    operation,
                    response.status_code,
                    response.reason_phrase,
                    response.text,
                )

            try:
                return response.json()
            except ValueError as e:
                raise SerperResponseError(operation, f"body is not valid JSON ({e})") from e

        finally:
            if should_close:
                await client.aclose()

    async def search(self, params: SearchParams) -> SearchResult:
        """
        Perform a web search.

        Args:
            params: Search parameters; advanced operators are folded into the query

        Returns:
            Parsed Serper search response
        """
        return await self._post("search", self.search_url, params.to_request_body())

    async def batch_search(self, params_list: list[SearchParams]) -> SearchResultBatch:
        """
        Perform several searches in one request.

        Args:
            params_list: Non-empty list of search parameters

        Returns:
            Search responses, index-aligned with params_list

        Raises:
            EmptyBatchError: If params_list is empty (no request is made)
        """
        if not params_list:
            raise EmptyBatchError()

        payload = [params.to_request_body() for params in params_list]
        data = await self._post("batch_search", self.search_url, payload)

        if not isinstance(data, list):
            raise SerperResponseError("batch_search", "expected a JSON array")
        if len(data) != len(params_list):
            raise SerperResponseError(
                "batch_search",
                f"expected {len(params_list)} results, got {len(data)}",
            )
        return data

    async def scrape(self, params: ScrapeParams) -> ScrapeResult:
        """
        Scrape a web page.

        Args:
            params: Scrape parameters

        Returns:
            Parsed Serper scrape response

        Raises:
            InvalidURLError: If the URL is empty (no request is made)
        """
        if not params.url:
            raise InvalidURLError(params.url)

        return await self._post("scrape", self.scrape_url, params.to_request_body())
