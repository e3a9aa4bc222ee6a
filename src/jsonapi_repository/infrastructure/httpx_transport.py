"""httpx adapter: implements the Transport port."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import httpx

from jsonapi_repository.domain.entities import TransportResponse
from jsonapi_repository.domain.exceptions import TransportError

logger = logging.getLogger(__name__)

JSON_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

Headers = Mapping[str, str] | None


class HttpxTransport:
    """Concrete ``Transport`` backed by a synchronous :class:`httpx.Client`.

    Every request expects and sends JSON; every status code comes back as a
    response, only connection-level failures raise.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def get(
        self,
        uri: str,
        query: Sequence[tuple[str, str]] | None = None,
        *,
        headers: Headers = None,
    ) -> TransportResponse:
        return self._send("GET", uri, headers, params=list(query) if query else None)

    def post(self, uri: str, body: Any = None, *, headers: Headers = None) -> TransportResponse:
        return self._send("POST", uri, headers, json=body)

    def put(self, uri: str, body: Any = None, *, headers: Headers = None) -> TransportResponse:
        return self._send("PUT", uri, headers, json=body)

    def patch(self, uri: str, body: Any = None, *, headers: Headers = None) -> TransportResponse:
        return self._send("PATCH", uri, headers, json=body)

    def delete(self, uri: str, *, headers: Headers = None) -> TransportResponse:
        return self._send("DELETE", uri, headers)

    def close(self) -> None:
        """Release underlying HTTP resources."""
        self._client.close()

    def _send(
        self,
        method: str,
        uri: str,
        headers: Headers,
        *,
        params: list[tuple[str, str]] | None = None,
        json: Any = None,
    ) -> TransportResponse:
        """Perform one request with error translation."""
        try:
            resp = self._client.request(
                method,
                uri,
                headers={**JSON_HEADERS, **(headers or {})},
                params=params,
                json=json,
            )
        except httpx.HTTPError as exc:
            logger.error("Transport failure on %s %s: %s", method, uri, exc)
            raise TransportError(f"Network error on {method} {uri}: {exc}") from exc

        return TransportResponse(
            status_code=resp.status_code,
            body=_decode_body(resp),
            headers=dict(resp.headers),
        )


def _decode_body(resp: httpx.Response) -> Any:
    """Decoded JSON body, or ``None`` for empty / non-JSON content."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        logger.debug("Non-JSON body (HTTP %s), returning None", resp.status_code)
        return None
