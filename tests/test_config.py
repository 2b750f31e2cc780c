import pytest

from esindexer.config import Settings, load_settings
from esindexer.exceptions import ConfigError
from esindexer.indexers.elasticsearch import ElasticSearchIndexer
from esindexer.indexers.factory import build_indexer
from esindexer.transport.httpx_poster import HttpxPoster


def test_defaults_point_at_local_elasticsearch() -> None:
    settings = Settings()
    assert settings.elasticsearch.host == "127.0.0.1"
    assert settings.elasticsearch.port == "9200"
    assert settings.app.transport == "stdio"


def test_load_settings_reads_nested_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ESINDEXER_ELASTICSEARCH__HOST", "search.internal")
    monkeypatch.setenv("ESINDEXER_ELASTICSEARCH__PORT", "9201")
    monkeypatch.setenv("ESINDEXER_ELASTICSEARCH__TIMEOUT", "2.5")

    settings = load_settings()

    assert settings.elasticsearch.host == "search.internal"
    assert settings.elasticsearch.port == "9201"
    assert settings.elasticsearch.timeout == 2.5


def test_load_settings_wraps_validation_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ESINDEXER_ELASTICSEARCH__TIMEOUT", "not-a-number")
    with pytest.raises(ConfigError):
        load_settings()


def test_build_indexer_uses_settings() -> None:
    settings = Settings()
    settings.elasticsearch.host = "es"
    settings.elasticsearch.port = "1234"
    settings.elasticsearch.timeout = 7.0

    indexer = build_indexer(settings)

    assert isinstance(indexer, ElasticSearchIndexer)
    assert isinstance(indexer.poster, HttpxPoster)
    assert indexer.poster.timeout == 7.0
    assert indexer.doc_url("i", "t", "1") == "http://es:1234/i/t/1"
