"""Prompt templates for Serper MCP."""

from serper_mcp.prompts.library import PROMPTS, PromptLibrary

__all__ = ["PROMPTS", "PromptLibrary"]
