"""MCP server exposing Serper web search and scraping."""

__version__ = "0.1.0"
