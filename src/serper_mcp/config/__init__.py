"""Configuration for Serper MCP."""

from serper_mcp.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
