"""
MCP server with tool and prompt handlers registered.

Runs over stdio by default, or mounted in the Starlette app for
Streamable HTTP (stateless, one server run per request).
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from serper_mcp.config import settings
from serper_mcp.prompts import PromptLibrary
from serper_mcp.services import SerperClient
from serper_mcp.tools import register_all_handlers
from serper_mcp.tools.router import RequestRouter
from serper_mcp.tools.search_tools import SerperSearchTools

logger = structlog.get_logger(__name__)

SERVER_NAME = "Serper MCP Server"
SERVER_VERSION = "0.1.0"


@dataclass
class AppContext:
    """Shared application resources available to all handlers."""

    http_client: httpx.AsyncClient
    client: SerperClient
    router: RequestRouter


def create_http_client() -> httpx.AsyncClient:
    """Create the HTTP client shared by all upstream calls."""
    return httpx.AsyncClient(
        limits=httpx.Limits(
            max_connections=settings.max_connections,
            max_keepalive_connections=settings.max_keepalive_connections,
        ),
        timeout=settings.request_timeout,
        verify=settings.get_ssl_context(),
        http2=True,
        follow_redirects=True,
    )


def create_router(client: SerperClient) -> RequestRouter:
    """Wire the tool layer and prompt library behind a router."""
    return RequestRouter(SerperSearchTools(client), PromptLibrary())


@asynccontextmanager
async def app_lifespan(_server: Server) -> AsyncIterator[AppContext]:
    """
    Manage server lifecycle.

    Raises:
        ConfigurationError: If SERPER_API_KEY is not set
    """
    api_key = settings.require_api_key()

    http_client = create_http_client()
    client = SerperClient(
        api_key=api_key,
        base_url=settings.base_url,
        scrape_url=settings.scrape_url,
        http_client=http_client,
    )

    logger.debug("serper_client_initialized", base_url=settings.base_url)

    try:
        yield AppContext(
            http_client=http_client,
            client=client,
            router=create_router(client),
        )
    finally:
        await http_client.aclose()


async def run_stdio() -> None:
    """Serve MCP requests over stdin/stdout until the client disconnects."""
    logger.info("starting_mcp_server", server_name=SERVER_NAME, transport="stdio")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
    logger.info("shutting_down_mcp_server")


server: Server = Server(SERVER_NAME, version=SERVER_VERSION, lifespan=app_lifespan)

register_all_handlers(server)
