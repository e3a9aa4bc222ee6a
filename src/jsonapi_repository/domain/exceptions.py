"""Domain exception hierarchy.

Transport and API failures raise these; JSON:API validation payloads
(``{"errors": [...]}``) are never raised and reach the caller as data.
"""

from __future__ import annotations

from typing import Any


class JsonApiRepositoryError(Exception):
    """Base exception for the entire library."""


# ── Configuration ───────────────────────────────────────────────────────────


class RepositoryConfigurationError(JsonApiRepositoryError):
    """The repository cannot be built from the supplied options."""


# ── Exchange errors ─────────────────────────────────────────────────────────


class TransportError(JsonApiRepositoryError):
    """The HTTP exchange could not be completed (DNS, connection, timeout)."""


class ApiError(JsonApiRepositoryError):
    """Non-2xx response whose body is not a JSON:API ``errors`` document.

    ``upstream_trace`` holds the server-side stack trace exactly as the
    server sent it, or ``None`` when the body carried no ``trace`` member.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        upstream_trace: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.upstream_trace = upstream_trace

    def __str__(self) -> str:
        return f"HTTP {self.status_code}: {self.message}"


# ── Payload errors ──────────────────────────────────────────────────────────


class DeserializationError(JsonApiRepositoryError):
    """The response document is not a well-formed JSON:API document."""
