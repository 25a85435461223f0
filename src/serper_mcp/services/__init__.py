"""Upstream API clients."""

from serper_mcp.services.serper_client import SerperClient

__all__ = ["SerperClient"]
