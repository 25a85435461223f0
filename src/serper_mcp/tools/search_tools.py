"""Search tool layer between MCP handlers and the Serper client."""

from typing import Protocol

import structlog

from serper_mcp.exceptions import SearchToolError
from serper_mcp.models.scrape import ScrapeParams, ScrapeResult
from serper_mcp.models.search import SearchParams, SearchResult, SearchResultBatch

logger = structlog.get_logger(__name__)


class SearchClient(Protocol):
    """Client operations the tool layer forwards to."""

    async def search(self, params: SearchParams) -> SearchResult: ...

    async def batch_search(self, params_list: list[SearchParams]) -> SearchResultBatch: ...

    async def scrape(self, params: ScrapeParams) -> ScrapeResult: ...


class SerperSearchTools:
    """
    Search tools exposed by the MCP server.

    Forwards each call unchanged to the client. Failures are re-raised as
    SearchToolError naming the operation (and query, for search).
    """

    def __init__(self, client: SearchClient) -> None:
        self._client = client

    async def search(self, params: SearchParams) -> SearchResult:
        """Execute a web search query."""
        try:
            return await self._client.search(params)
        except Exception as e:
            logger.warning("search_failed", query=params.q[:50], error=str(e))
            raise SearchToolError(
                "search",
                f'SearchTool: failed to search for "{params.q}". {e}',
                query=params.q,
            ) from e

    async def batch_search(self, params_list: list[SearchParams]) -> SearchResultBatch:
        """Execute several web search queries in one request."""
        try:
            return await self._client.batch_search(params_list)
        except Exception as e:
            logger.warning("batch_search_failed", count=len(params_list), error=str(e))
            raise SearchToolError(
                "batch_search",
                f"SearchTool: failed to batch search {len(params_list)} queries. {e}",
            ) from e

    async def scrape(self, params: ScrapeParams) -> ScrapeResult:
        """Execute a web scrape operation."""
        try:
            return await self._client.scrape(params)
        except Exception as e:
            logger.warning("scrape_failed", url=params.url, error=str(e))
            raise SearchToolError(
                "scrape",
                f"SearchTool: failed to scrape {params.url}. {e}",
            ) from e
