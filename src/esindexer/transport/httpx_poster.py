"""httpx-backed implementation of the `Poster` protocol."""

from __future__ import annotations

import httpx

from esindexer.transport.base_poster import PostResult


class HttpxPoster:
    """Posts JSON bodies with a short-lived `httpx.Client` per request."""

    def __init__(self, *, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.timeout,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )

    def post(self, url: str, body: bytes) -> PostResult:
        # Non-2xx responses are results, not errors; only transport failures raise.
        with self._client() as client:
            resp = client.post(url, content=body)
            return PostResult(
                status_code=resp.status_code,
                status=f"{resp.status_code} {resp.reason_phrase}".strip(),
                body=resp.content,
            )
