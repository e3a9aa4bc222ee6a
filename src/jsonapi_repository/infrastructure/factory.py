"""Repository wiring: builds a ready-to-use repository from settings."""

from __future__ import annotations

from typing import Mapping

import httpx

from jsonapi_repository.domain.exceptions import RepositoryConfigurationError
from jsonapi_repository.domain.value_objects import RepositoryConfig
from jsonapi_repository.infrastructure.config import Settings, get_settings
from jsonapi_repository.infrastructure.httpx_transport import HttpxTransport
from jsonapi_repository.services.repository import JsonApiRepository


def get_repository(
    uri: str | None = None,
    headers: Mapping[str, str] | None = None,
    *,
    entity_response: bool | None = None,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> JsonApiRepository:
    """Build a :class:`JsonApiRepository` for *uri*.

    Arguments left as ``None`` fall back to :class:`Settings`.  Explicit
    *headers* are layered over the settings' default headers.  When no
    *client* is given a new :class:`httpx.Client` with the configured
    timeout is created; the caller owns it through the returned repository's
    transport.
    """
    settings = settings or get_settings()

    base_uri = uri or settings.base_uri
    if not base_uri:
        raise RepositoryConfigurationError(
            "No repository URI given. Pass one or set JSONAPI_BASE_URI."
        )

    merged_headers = {**settings.default_headers(), **(headers or {})}
    http_client = client or httpx.Client(timeout=httpx.Timeout(settings.timeout_seconds))
    transport = HttpxTransport(http_client)

    config = RepositoryConfig(
        base_uri=base_uri,
        headers=merged_headers or None,
        full_response=settings.full_response,
        entity_response=(
            settings.entity_response if entity_response is None else entity_response
        ),
    )
    return JsonApiRepository(transport, config)
