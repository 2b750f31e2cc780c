"""Tool registration modules for the esindexer MCP server."""

from .indexing import register_indexing_tools

__all__ = ["register_indexing_tools"]
