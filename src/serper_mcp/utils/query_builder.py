"""Google advanced-operator query building."""

import re
from collections.abc import Mapping
from typing import Any

_WHITESPACE = re.compile(r"\s+")

# (field, prefix) in the order operators are appended to the query
_PREFIX_OPERATORS = (
    ("site", "site:"),
    ("filetype", "filetype:"),
    ("inurl", "inurl:"),
    ("intitle", "intitle:"),
    ("related", "related:"),
    ("cache", "cache:"),
    ("before", "before:"),
    ("after", "after:"),
)


def _get(params: Any, field: str) -> Any:
    if isinstance(params, Mapping):
        value = params.get(field)
        if value is None and field == "or_":
            value = params.get("or")
        return value
    return getattr(params, field, None)


def _split_terms(value: str) -> list[str]:
    return [term.strip() for term in value.split(",") if term.strip()]


def normalize_whitespace(text: str) -> str:
    """Trim ``text`` and collapse internal whitespace runs to one space."""
    return _WHITESPACE.sub(" ", text).strip()


def _scalar(params: Any, field: str) -> str:
    return normalize_whitespace(_get(params, field) or "")


def build_advanced_query(params: Any) -> str:
    """
    Expand a search request into a single Google query string.

    Operators are appended after the normalized base query in a fixed order:
    site, filetype, inurl, intitle, related, cache, before, after, exact
    phrase, excluded terms, OR group. Missing or empty fields add nothing and
    values are whitespace-normalized but otherwise passed through verbatim.

    Args:
        params: SearchParams instance or a mapping with the same keys
            (``or`` or ``or_`` for the OR terms)

    Returns:
        The composed query string, with no leading/trailing whitespace
    """
    parts: list[str] = []

    base = normalize_whitespace(_get(params, "q") or "")
    if base:
        parts.append(base)

    for field, prefix in _PREFIX_OPERATORS:
        value = _scalar(params, field)
        if value:
            parts.append(f"{prefix}{value}")

    exact = _scalar(params, "exact")
    if exact:
        parts.append(f'"{exact}"')

    exclude = _get(params, "exclude")
    if exclude:
        parts.extend(f"-{term}" for term in _split_terms(exclude))

    or_terms = _split_terms(_get(params, "or_") or "")
    if or_terms:
        parts.append(f"({' OR '.join(or_terms)})")

    return " ".join(parts)
