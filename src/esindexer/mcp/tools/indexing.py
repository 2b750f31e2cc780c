"""Indexing tools for FastMCP.

Expose document indexing into Elasticsearch to MCP clients.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from fastmcp import FastMCP

from esindexer.documents.document import Document, Timestamp
from esindexer.indexers.elasticsearch import ElasticSearchIndexer
from esindexer.indexers.factory import build_indexer


def register_indexing_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register indexing tools on the given FastMCP instance.

    Uses state.indexer when present, else builds one from state.settings.
    """

    def _get_indexer(state_obj: Any) -> ElasticSearchIndexer:
        indexer = getattr(state_obj, "indexer", None)
        if indexer is not None:
            return indexer
        settings = getattr(state_obj, "settings", None)
        if settings is None:
            raise RuntimeError(
                "Indexer is not configured. Set ESINDEXER_ELASTICSEARCH__HOST and ESINDEXER_ELASTICSEARCH__PORT."
            )
        return build_indexer(settings)

    @mcp.tool
    def es_doc_url(index: str, doc_type: str, doc_id: str) -> str:
        """Return the URL a document would be posted to, without sending anything."""
        return _get_indexer(get_state()).doc_url(index, doc_type, doc_id)

    @mcp.tool
    async def es_index_document(
        index: str,
        doc_type: str,
        doc_id: str,
        title: str,
        body: str,
        *,
        created_at: Optional[datetime] = None,
        modified_at: Optional[datetime] = None,
        force_create: bool = False,
    ) -> Dict[str, Any]:
        """Index a document into Elasticsearch.

        Parameters
        ----------
        index: str
            Index name (e.g., "trumpet").
        doc_type: str
            Document type name (e.g., "doc").
        doc_id: str
            Document identifier.
        title, body: str
            Document content.
        created_at, modified_at: datetime | None
            ISO-8601 instants. Missing values default to now (UTC); a missing
            modified_at defaults to created_at.
        force_create: bool
            Reserved; passed through to the indexer.

        Returns a dict with id, index, type and created.
        """
        indexer = _get_indexer(get_state())
        created = created_at or datetime.now(timezone.utc)
        doc = Document(
            title=title,
            body=body,
            timestamp=Timestamp(created_at=created, modified_at=modified_at or created),
        )
        # The indexer blocks on HTTP; keep it off the event loop.
        resp = await asyncio.to_thread(indexer.index, index, doc_type, doc_id, force_create, doc)
        return resp.to_dict()
