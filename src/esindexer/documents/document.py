"""Document model sent to the search engine.

The field names and the nesting of the timestamp pair form the JSON body that
Elasticsearch stores, so they must stay stable.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class Timestamp(BaseModel):
    """Creation and modification instants of a document."""

    model_config = ConfigDict(frozen=True)

    created_at: datetime
    modified_at: datetime


class Document(BaseModel):
    """A titled body of text with its timestamps.

    Identity (index, type, id) is supplied at index time and is not stored here.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    timestamp: Timestamp

    @classmethod
    def now(cls, title: str, body: str) -> Document:
        """Build a document whose created/modified instants are the current UTC time."""
        stamp = datetime.now(timezone.utc)
        return cls(title=title, body=body, timestamp=Timestamp(created_at=stamp, modified_at=stamp))
