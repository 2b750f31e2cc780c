import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from esindexer.documents.document import Document, Timestamp
from esindexer.indexers.elasticsearch import serialize_document


def test_document_wire_shape() -> None:
    doc = Document(
        title="Hello",
        body="World",
        timestamp=Timestamp(
            created_at=datetime(2020, 1, 1, tzinfo=timezone.utc),
            modified_at=datetime(2020, 1, 2, tzinfo=timezone.utc),
        ),
    )
    payload = json.loads(serialize_document(doc))

    assert payload["title"] == "Hello"
    assert payload["body"] == "World"
    assert payload["timestamp"]["created_at"].startswith("2020-01-01T00:00:00")
    assert payload["timestamp"]["modified_at"].startswith("2020-01-02T00:00:00")
    assert Document.model_validate(payload) == doc


def test_document_now_stamps_both_instants() -> None:
    before = datetime.now(timezone.utc)
    doc = Document.now("t", "b")
    assert doc.timestamp.created_at == doc.timestamp.modified_at
    assert doc.timestamp.created_at >= before
    assert doc.timestamp.created_at.tzinfo is not None


def test_document_is_immutable() -> None:
    doc = Document.now("t", "b")
    with pytest.raises(ValidationError):
        doc.title = "changed"  # type: ignore[misc]
