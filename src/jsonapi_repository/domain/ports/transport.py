"""Port: HTTP transport, defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from jsonapi_repository.domain.entities import TransportResponse

Headers = Mapping[str, str] | None


class Transport(Protocol):
    """Abstract contract for issuing one JSON request/response exchange.

    *headers* are the repository's default headers, layered over the
    transport's JSON content negotiation.  Implementations raise
    :class:`~jsonapi_repository.domain.exceptions.TransportError` when the
    exchange cannot be completed; any HTTP status is a response.
    """

    def get(
        self,
        uri: str,
        query: Sequence[tuple[str, str]] | None = None,
        *,
        headers: Headers = None,
    ) -> TransportResponse:
        """Issue a GET with already-encoded query pairs."""
        ...

    def post(self, uri: str, body: Any = None, *, headers: Headers = None) -> TransportResponse:
        """Issue a POST with a JSON-encoded body."""
        ...

    def put(self, uri: str, body: Any = None, *, headers: Headers = None) -> TransportResponse:
        """Issue a PUT with a JSON-encoded body."""
        ...

    def patch(self, uri: str, body: Any = None, *, headers: Headers = None) -> TransportResponse:
        """Issue a PATCH with a JSON-encoded body."""
        ...

    def delete(self, uri: str, *, headers: Headers = None) -> TransportResponse:
        """Issue a DELETE without a body."""
        ...
