"""
Starlette ASGI application with the MCP server mounted.

Used when SERPER_TRANSPORT=http for multi-client access via Streamable HTTP.
"""

import contextlib
from collections.abc import AsyncIterator

import structlog
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route
from starlette.types import Receive, Scope, Send

from serper_mcp.config import settings
from serper_mcp.prompts import PROMPTS
from serper_mcp.server import SERVER_NAME, SERVER_VERSION, server
from serper_mcp.tools.schemas import TOOLS
from serper_mcp.utils.health import HealthChecker

logger = structlog.get_logger(__name__)

# stateless=True allows multiple concurrent clients
# json_response=True for structured responses
session_manager = StreamableHTTPSessionManager(
    app=server,
    json_response=True,
    stateless=True,
)


async def handle_mcp(scope: Scope, receive: Receive, send: Send) -> None:
    """Forward MCP traffic to the session manager."""
    await session_manager.handle_request(scope, receive, send)


@contextlib.asynccontextmanager
async def lifespan(_app: Starlette) -> AsyncIterator[None]:
    """Run the MCP session manager for the lifetime of the app."""
    logger.info(
        "starting_http_server",
        host=settings.host,
        port=settings.port,
        debug=settings.debug,
    )

    async with session_manager.run():
        yield

    logger.info("http_server_shutdown")


async def health_check(_request: Request) -> JSONResponse:
    """
    Kubernetes-compatible health check endpoint.

    Returns 200 if healthy, 503 if unhealthy.
    """
    checker = HealthChecker()
    status = await checker.check_all()

    http_status = 200 if status["healthy"] else 503
    return JSONResponse(status, status_code=http_status)


async def readiness_check(_request: Request) -> JSONResponse:
    """Readiness probe - 200 once the API key is configured, 503 otherwise."""
    checker = HealthChecker()
    status = await checker.check_readiness()

    http_status = 200 if status["ready"] else 503
    return JSONResponse(status, status_code=http_status)


async def liveness_check(_request: Request) -> JSONResponse:
    """Liveness probe - always 200 while the process is serving."""
    checker = HealthChecker()
    status = await checker.check_liveness()

    return JSONResponse(status, status_code=200)


async def root(_request: Request) -> JSONResponse:
    """Root endpoint with server information."""
    return JSONResponse(
        {
            "name": SERVER_NAME,
            "version": SERVER_VERSION,
            "description": "MCP server for Serper web search and scraping",
            "endpoints": {
                "mcp": "/mcp",
                "health": "/health",
                "ready": "/ready",
                "alive": "/alive",
            },
            "tools": [tool.name for tool in TOOLS],
            "prompts": list(PROMPTS),
        }
    )


middleware = [
    Middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Mcp-Session-Id"],  # Required for MCP sessions
    ),
]

app = Starlette(
    debug=settings.debug,
    routes=[
        Route("/", root, methods=["GET"]),
        Route("/health", health_check, methods=["GET"]),
        Route("/ready", readiness_check, methods=["GET"]),
        Route("/alive", liveness_check, methods=["GET"]),
        # MCP endpoint - Streamable HTTP
        Mount("/mcp", app=handle_mcp),
    ],
    middleware=middleware,
    lifespan=lifespan,
)
