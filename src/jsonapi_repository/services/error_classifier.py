"""Error classifier: decides whether a response is returned or raised."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jsonapi_repository.domain.entities import Outcome, TransportResponse
from jsonapi_repository.domain.exceptions import ApiError

logger = logging.getLogger(__name__)


def _has_errors_member(body: Any) -> bool:
    return isinstance(body, Mapping) and "errors" in body


def classify(response: TransportResponse) -> Outcome:
    """2xx, or any status with an ``errors`` body, passes; everything else raises."""
    if response.is_success or _has_errors_member(response.body):
        return Outcome.PASS
    return Outcome.RAISE


def build_api_error(response: TransportResponse) -> ApiError:
    """Build the :class:`ApiError` for a response classified as ``RAISE``."""
    body = response.body if isinstance(response.body, Mapping) else {}
    message = body.get("message") or f"HTTP {response.status_code}"
    return ApiError(
        status_code=response.status_code,
        message=str(message),
        upstream_trace=body.get("trace"),
    )


def ensure_passable(response: TransportResponse) -> TransportResponse:
    """Return *response* unchanged, or raise :class:`ApiError`."""
    if classify(response) is Outcome.PASS:
        return response

    error = build_api_error(response)
    logger.warning("Upstream returned %s: %s", error.status_code, error.message)
    raise error
