"""Entrypoint: python -m serper_mcp."""

import logging
import sys

import anyio
import structlog
import uvicorn

from serper_mcp.config import settings
from serper_mcp.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


def configure_logging() -> None:
    """
    Configure structlog.

    Logs go to stderr; stdout is reserved for the stdio MCP transport.
    """
    level = logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.INFO)
    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def main() -> None:
    """Validate configuration and serve over the configured transport."""
    configure_logging()

    try:
        settings.require_api_key()
    except ConfigurationError as e:
        logger.error("configuration_error", setting=e.setting, error=e.message)
        sys.exit(1)

    if settings.transport == "http":
        uvicorn.run(
            "serper_mcp.app:app",
            host=settings.host,
            port=settings.port,
            reload=settings.debug,
            log_level=settings.log_level.lower(),
            access_log=settings.debug,
        )
        return

    from serper_mcp.server import run_stdio

    anyio.run(run_stdio)


if __name__ == "__main__":
    main()
