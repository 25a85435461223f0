"""MCP tools for Serper MCP."""

from serper_mcp.tools.registration import register_all_handlers

__all__ = ["register_all_handlers"]
