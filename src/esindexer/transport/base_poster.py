"""Transport capability used by indexers.

An indexer only needs to "post a body to a URL". Anything satisfying the
`Poster` protocol can be plugged in, which keeps the HTTP layer swappable
(e.g. a recording stub in tests).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class PostResult:
    """Outcome of a completed HTTP round trip.

    Attributes
    ----------
    status_code: int
        Numeric HTTP status, e.g. 201.
    status: str
        Status line text, e.g. "201 Created".
    body: bytes
        Raw response body; not interpreted by indexers.
    """

    status_code: int
    status: str = ""
    body: bytes = b""


@runtime_checkable
class Poster(Protocol):
    """Minimal protocol for HTTP transports."""

    def post(self, url: str, body: bytes) -> PostResult:
        """POST `body` to `url`.

        Implementations return a `PostResult` for every response the server
        sends back (whatever its status) and raise when the request cannot be
        completed at all.
        """
        ...
