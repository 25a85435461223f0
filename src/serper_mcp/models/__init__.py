"""Pydantic models for Serper MCP."""

from serper_mcp.models.scrape import ScrapeParams, ScrapeResult
from serper_mcp.models.search import (
    SearchParams,
    SearchParamsBatch,
    SearchResult,
    SearchResultBatch,
    TimeRange,
)

__all__ = [
    "SearchParams",
    "SearchParamsBatch",
    "SearchResult",
    "SearchResultBatch",
    "TimeRange",
    "ScrapeParams",
    "ScrapeResult",
]
