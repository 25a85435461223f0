"""Handler registration for the MCP server."""

from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server


def register_all_handlers(server: Server) -> None:
    """
    Register the tool and prompt handlers with the MCP server.

    Each handler resolves the RequestRouter from the lifespan context of the
    current request.

    Args:
        server: Low-level MCP server instance
    """

    def router() -> Any:
        return server.request_context.lifespan_context.router

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return router().list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        return await router().call_tool(name, arguments)

    @server.list_prompts()
    async def list_prompts() -> list[types.Prompt]:
        return router().list_prompts()

    @server.get_prompt()
    async def get_prompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
        return router().get_prompt(name, arguments)
