"""Build indexers from settings."""

from __future__ import annotations

from esindexer.config import Settings
from esindexer.indexers.elasticsearch import ElasticSearchIndexer
from esindexer.transport.httpx_poster import HttpxPoster


def build_indexer(settings: Settings) -> ElasticSearchIndexer:
    """Create an `ElasticSearchIndexer` posting through httpx."""
    cfg = settings.elasticsearch
    return ElasticSearchIndexer(cfg.host, cfg.port, HttpxPoster(timeout=cfg.timeout))
