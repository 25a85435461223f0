"""Utility modules for Serper MCP."""

from serper_mcp.utils.query_builder import build_advanced_query, normalize_whitespace
from serper_mcp.utils.query_validator import (
    MAX_QUERY_LENGTH,
    quick_validate,
    sanitize_query,
    validate_search_params,
)

__all__ = [
    "build_advanced_query",
    "normalize_whitespace",
    "MAX_QUERY_LENGTH",
    "quick_validate",
    "sanitize_query",
    "validate_search_params",
]
