"""esindexer MCP server entrypoint using FastMCP.

Exposes document indexing as MCP tools.
Run with:
  - esindexer-mcp
  - or: python -m esindexer.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

from typing import Optional

from fastmcp import FastMCP

from esindexer.config import Settings, load_settings
from esindexer.indexers.elasticsearch import ElasticSearchIndexer
from esindexer.indexers.factory import build_indexer
from esindexer.logging_setup import configure_logging, get_logger
from esindexer.mcp.tools import register_indexing_tools

logger = get_logger(__name__)


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.indexer: Optional[ElasticSearchIndexer] = None

    def init_indexer(self) -> None:
        """Initialize the indexer from configuration."""
        self.indexer = build_indexer(self.settings)


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("esindexer MCP Server")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

def main() -> None:
    """Initialize state and run the MCP server."""
    global _state
    settings = load_settings()
    configure_logging(settings.app.log_level, json_logs=settings.app.json_logs)
    _state = AppState(settings)
    _state.init_indexer()
    register_indexing_tools(mcp, get_state=lambda: _state)
    es = settings.elasticsearch
    logger.info("server.start", transport=settings.app.transport, es_host=es.host, es_port=es.port)
    # Choose transport based on configuration: stdio (default), http, or sse
    transport = settings.app.transport
    if transport in ("http", "sse"):
        mcp.run(transport=transport, host=settings.app.host, port=settings.app.port)
    else:
        mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
