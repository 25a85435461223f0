"""Search query sanitization and validation."""

import re
from dataclasses import dataclass
from typing import Any

from serper_mcp.exceptions import ValidationError

MAX_QUERY_LENGTH = 500

_WHITESPACE = re.compile(r"\s+")
_REPEATED_DOUBLE_QUOTES = re.compile(r'"{2,}')
_REPEATED_SINGLE_QUOTES = re.compile(r"'{2,}")
_DISALLOWED_CHARS = re.compile(r"[^\w\s\-\"'@.:/]")
_EDGE_QUOTES = re.compile(r"^[\"']|[\"']$")


@dataclass
class QuickValidation:
    """Outcome of a non-raising query check."""

    valid: bool
    error: str | None = None
    sanitized: str | None = None


def sanitize_query(query: Any) -> str:
    """
    Sanitize a search query to prevent formatting issues.

    Raises:
        ValidationError: If query is not a non-empty string
    """
    if not query or not isinstance(query, str):
        raise ValidationError("q", "Query must be a non-empty string")

    query = _WHITESPACE.sub(" ", query.strip())
    query = _REPEATED_DOUBLE_QUOTES.sub('"', query)
    query = _REPEATED_SINGLE_QUOTES.sub("'", query)
    query = _DISALLOWED_CHARS.sub("", query)
    query = _EDGE_QUOTES.sub("", query)
    return query.strip()


def validate_search_params(params: Any, field: str = "q") -> None:
    """
    Validate the query of a search request before it is sent upstream.

    Args:
        params: SearchParams instance or a mapping with a ``q`` key
        field: Field name reported in validation errors

    Raises:
        ValidationError: If the query is missing, empty after sanitization
            or longer than MAX_QUERY_LENGTH
    """
    query = params.get("q") if isinstance(params, dict) else getattr(params, "q", None)

    if not query or not isinstance(query, str):
        raise ValidationError(field, 'Query parameter "q" is required and must be a string')

    sanitized = sanitize_query(query)
    if not sanitized:
        raise ValidationError(field, "Query cannot be empty after sanitization")

    if len(sanitized) > MAX_QUERY_LENGTH:
        raise ValidationError(field, f"Query is too long (max {MAX_QUERY_LENGTH} characters)")


def quick_validate(query: Any) -> QuickValidation:
    """Check a query without raising."""
    try:
        sanitized = sanitize_query(query)
    except ValidationError as e:
        return QuickValidation(valid=False, error=e.message)
    return QuickValidation(valid=True, sanitized=sanitized)
