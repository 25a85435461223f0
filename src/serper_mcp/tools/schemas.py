"""Static tool descriptors advertised by the MCP server."""

from typing import Any

import mcp.types as types

GOOGLE_SEARCH = "google_search"
BATCH_GOOGLE_SEARCH = "batch_google_search"
SCRAPE = "scrape"

SEARCH_REQUIRED_FIELDS = ("q", "gl", "hl")

SEARCH_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "q": {
            "type": "string",
            "description": "Search query string",
        },
        "gl": {
            "type": "string",
            "description": (
                "Region code for search results in ISO 3166-1 alpha-2 format (e.g., 'us')"
            ),
        },
        "hl": {
            "type": "string",
            "description": "Language code for search results in ISO 639-1 format (e.g., 'en')",
        },
        "location": {
            "type": "string",
            "description": (
                "Optional location for search results "
                "(e.g., 'SoHo, New York, United States', 'California, United States')"
            ),
        },
        "num": {
            "type": "number",
            "description": "Number of results to return (default: 10)",
        },
        "tbs": {
            "type": "string",
            "enum": ["qdr:h", "qdr:d", "qdr:w", "qdr:m", "qdr:y"],
            "description": (
                "Time-based search filter ('qdr:h' for past hour, 'qdr:d' for past day, "
                "'qdr:w' for past week, 'qdr:m' for past month, 'qdr:y' for past year)"
            ),
        },
        "page": {
            "type": "number",
            "description": "Page number of results to return (default: 1)",
        },
        "autocorrect": {
            "type": "boolean",
            "description": "Whether to autocorrect spelling in query",
        },
        "site": {
            "type": "string",
            "description": "Limit results to a specific domain (e.g., 'github.com')",
        },
        "filetype": {
            "type": "string",
            "description": "Limit results to a file type (e.g., 'pdf', 'doc')",
        },
        "inurl": {
            "type": "string",
            "description": "Search for pages with a word in the URL",
        },
        "intitle": {
            "type": "string",
            "description": "Search for pages with a word in the title",
        },
        "related": {
            "type": "string",
            "description": "Find similar websites (e.g., 'github.com')",
        },
        "cache": {
            "type": "string",
            "description": "View Google's cached version of a URL",
        },
        "before": {
            "type": "string",
            "description": "Date before in YYYY-MM-DD format",
        },
        "after": {
            "type": "string",
            "description": "Date after in YYYY-MM-DD format",
        },
        "exact": {
            "type": "string",
            "description": "Exact phrase match",
        },
        "exclude": {
            "type": "string",
            "description": "Terms to exclude from results, comma-separated",
        },
        "or": {
            "type": "string",
            "description": "Alternative terms, comma-separated",
        },
    },
    "required": list(SEARCH_REQUIRED_FIELDS),
}

BATCH_SEARCH_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "queries": {
            "type": "array",
            "description": "Search requests to run in one batch",
            "items": SEARCH_INPUT_SCHEMA,
            "minItems": 1,
        },
    },
    "required": ["queries"],
}

SCRAPE_INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "url": {
            "type": "string",
            "description": "The URL of the webpage to scrape.",
        },
        "includeMarkdown": {
            "type": "boolean",
            "description": "Whether to include markdown content.",
            "default": False,
        },
    },
    "required": ["url"],
}

TOOLS: tuple[types.Tool, ...] = (
    types.Tool(
        name=GOOGLE_SEARCH,
        description=(
            "Tool to perform web searches via Serper API and retrieve rich results. "
            "It is able to retrieve organic search results, people also ask, "
            "related searches, and knowledge graph."
        ),
        inputSchema=SEARCH_INPUT_SCHEMA,
    ),
    types.Tool(
        name=BATCH_GOOGLE_SEARCH,
        description=(
            "Tool to perform batch web searches via Serper API and retrieve rich results. "
            "It is able to retrieve organic search results, people also ask, "
            "related searches, and knowledge graph for each query."
        ),
        inputSchema=BATCH_SEARCH_INPUT_SCHEMA,
    ),
    types.Tool(
        name=SCRAPE,
        description=(
            "Tool to scrape a webpage and retrieve the text and, optionally, the markdown "
            "content. It will retrieve also the JSON-LD metadata and the head metadata."
        ),
        inputSchema=SCRAPE_INPUT_SCHEMA,
    ),
)
