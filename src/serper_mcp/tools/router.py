"""Dispatch of MCP tool and prompt requests."""

import json
from collections.abc import Awaitable, Callable
from typing import Any

import mcp.types as types
import pydantic
import structlog

from serper_mcp.exceptions import EmptyBatchError, ToolNotFoundError, ValidationError
from serper_mcp.models.scrape import ScrapeParams
from serper_mcp.models.search import SearchParams
from serper_mcp.prompts.library import PromptLibrary
from serper_mcp.tools.schemas import (
    BATCH_GOOGLE_SEARCH,
    GOOGLE_SEARCH,
    SCRAPE,
    SEARCH_REQUIRED_FIELDS,
    TOOLS,
)
from serper_mcp.tools.search_tools import SerperSearchTools
from serper_mcp.utils.query_validator import validate_search_params

logger = structlog.get_logger(__name__)

ModelT = type[pydantic.BaseModel]


def _decode(model: ModelT, arguments: dict[str, Any], prefix: str = "") -> Any:
    """Validate raw tool arguments into a model, raising our ValidationError."""
    try:
        return model.model_validate(arguments)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "arguments"
        raise ValidationError(f"{prefix}{field}", error["msg"]) from e


def _require(arguments: dict[str, Any], fields: tuple[str, ...], prefix: str = "") -> None:
    missing = [f for f in fields if arguments.get(f) in (None, "")]
    if missing:
        raise ValidationError(
            f"{prefix}{missing[0]}", f"Missing required fields: {', '.join(missing)}"
        )


def _text_result(result: Any) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=json.dumps(result, indent=2))]


class RequestRouter:
    """
    Routes MCP list/call requests to the tool layer and prompt library.

    Arguments arrive as untyped maps; each tool checks its required fields
    and decodes them into a typed model before anything is sent upstream.
    """

    def __init__(self, tools: SerperSearchTools, prompts: PromptLibrary) -> None:
        self._tools = tools
        self._prompts = prompts
        self._handlers: dict[str, Callable[[dict[str, Any]], Awaitable[Any]]] = {
            GOOGLE_SEARCH: self._google_search,
            BATCH_GOOGLE_SEARCH: self._batch_google_search,
            SCRAPE: self._scrape,
        }

    # ─── Tools ───────────────────────────────────────────────────

    def list_tools(self) -> list[types.Tool]:
        """Return descriptors for every available tool."""
        return list(TOOLS)

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        """
        Invoke a tool by name.

        Returns:
            A single text content block holding the JSON result

        Raises:
            ToolNotFoundError: If no tool has this name
            ValidationError: If the arguments are missing or malformed
            SearchToolError: If the upstream call fails
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise ToolNotFoundError(name)

        logger.info("tool_called", tool=name)
        result = await handler(arguments or {})
        return _text_result(result)

    async def _google_search(self, arguments: dict[str, Any]) -> Any:
        params = self._decode_search(arguments)
        return await self._tools.search(params)

    async def _batch_google_search(self, arguments: dict[str, Any]) -> Any:
        queries = arguments.get("queries")
        if not isinstance(queries, list):
            raise ValidationError("queries", "A list of search requests is required")
        if not queries:
            raise EmptyBatchError()

        params_list = []
        for i, item in enumerate(queries):
            if not isinstance(item, dict):
                raise ValidationError(f"queries[{i}]", "Each search request must be an object")
            params_list.append(self._decode_search(item, prefix=f"queries[{i}]."))
        return await self._tools.batch_search(params_list)

    async def _scrape(self, arguments: dict[str, Any]) -> Any:
        _require(arguments, ("url",))
        params = _decode(ScrapeParams, arguments)
        return await self._tools.scrape(params)

    @staticmethod
    def _decode_search(arguments: dict[str, Any], prefix: str = "") -> SearchParams:
        _require(arguments, SEARCH_REQUIRED_FIELDS, prefix)
        params = _decode(SearchParams, arguments, prefix)
        validate_search_params(params, field=f"{prefix}q")
        return params

    # ─── Prompts ─────────────────────────────────────────────────

    def list_prompts(self) -> list[types.Prompt]:
        """Return descriptors for every available prompt."""
        return self._prompts.list_prompts()

    def get_prompt(self, name: str, arguments: dict[str, Any] | None) -> types.GetPromptResult:
        """Render a prompt by name."""
        logger.info("prompt_requested", prompt=name)
        return self._prompts.get_prompt(name, arguments)
