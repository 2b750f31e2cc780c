"""Elasticsearch document indexer.

Serializes a payload to JSON, posts it to
``http://{host}:{port}/{index}/{type}/{id}`` through a pluggable `Poster`,
and turns the HTTP status into an `IndexResponse`.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict

from pydantic_core import PydanticSerializationError, to_jsonable_python

from esindexer.exceptions import SerializationError
from esindexer.logging_setup import get_logger
from esindexer.transport.base_poster import Poster

logger = get_logger(__name__)

# Elasticsearch answers 201 for a new document and 200 when it replaced one.
CREATED_STATUS = 201


@dataclass(frozen=True, slots=True)
class IndexResponse:
    """Normalized outcome of a successful index request."""

    id: str = ""
    index: str = ""
    type: str = ""
    created: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def created_from_status(status_code: int) -> bool:
    """Return True only when the status says a new document was created."""
    return status_code == CREATED_STATUS


def serialize_document(document: Any) -> bytes:
    """Serialize `document` to its JSON wire form.

    Accepts pydantic models, dataclasses, mappings, sequences and scalars.
    Raises `SerializationError` if the payload has no strict JSON
    representation (unknown types, circular containers, NaN or infinity).
    """
    try:
        data = to_jsonable_python(document)
        return json.dumps(data, allow_nan=False, ensure_ascii=False, separators=(",", ":")).encode()
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise SerializationError(
            f"Cannot serialize payload of type {type(document).__name__} to JSON: {exc}"
        ) from exc


class ElasticSearchIndexer:
    """Indexes documents into Elasticsearch over plain HTTP.

    Holds no per-call state; concurrent `index` calls are safe as long as the
    poster is.
    """

    def __init__(self, host: str, port: str, poster: Poster) -> None:
        self.host = host
        self.port = port
        self.poster = poster

    def doc_url(self, index_name: str, type_name: str, document_id: str) -> str:
        """Return the URL of a document. Segments are interpolated as-is."""
        return f"http://{self.host}:{self.port}/{index_name}/{type_name}/{document_id}"

    def index(
        self,
        index_name: str,
        type_name: str,
        document_id: str,
        force_create: bool,
        document: Any,
    ) -> IndexResponse:
        """Index `document` under index/type/id.

        Parameters
        ----------
        index_name, type_name, document_id: str
            Target resource; not validated or escaped.
        force_create: bool
            Reserved. Accepted and logged, but does not change the request.
        document: Any
            Any JSON-serializable payload, typically a `Document`.

        Raises
        ------
        SerializationError
            If `document` cannot be serialized. The poster is not called.
        Exception
            Whatever the poster raises, re-raised as the same object.
        """
        try:
            body = serialize_document(document)
        except SerializationError as exc:
            logger.warning(
                "index.serialization_error", index=index_name, id=document_id, error=str(exc)
            )
            raise

        url = self.doc_url(index_name, type_name, document_id)
        logger.debug("index.request", url=url, force_create=force_create, size=len(body))
        try:
            result = self.poster.post(url, body)
        except Exception as exc:
            logger.warning("index.transport_error", url=url, error=repr(exc))
            raise

        created = created_from_status(result.status_code)
        logger.info("index.response", url=url, status_code=result.status_code, created=created)
        return IndexResponse(id=document_id, index=index_name, type=type_name, created=created)
