"""Response resolver: picks the output shape of a classified response.

States are derived from the repository config for every call:

* ``RAW``: ``full_response`` set: the :class:`TransportResponse` itself.
* ``DOCUMENT``: the decoded JSON:API document.
* ``ENTITY``: ``entity_response`` set: flattened entity view(s), or the
  untouched body when the document has no ``data`` member.

Classification always runs first and may raise before any of the above.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jsonapi_repository.domain.entities import Resolved, ResponseMode, TransportResponse
from jsonapi_repository.domain.exceptions import RepositoryConfigurationError
from jsonapi_repository.domain.ports.deserializer import Deserializer
from jsonapi_repository.domain.value_objects import RepositoryConfig
from jsonapi_repository.services.entity_flattener import flatten, flatten_all
from jsonapi_repository.services.error_classifier import ensure_passable

logger = logging.getLogger(__name__)


def _has_data_member(body: Any) -> bool:
    return isinstance(body, Mapping) and "data" in body


def resolve_entity(body: Any, deserializer: Deserializer) -> Any:
    """Deserialize and flatten *body*; bodies without ``data`` pass through."""
    if not _has_data_member(body):
        return body

    result = deserializer.deserialize(body)
    if result is None:
        return None
    if isinstance(result, Mapping) and "id" in result:
        return flatten(result)
    return flatten_all(result)


def resolve(response: TransportResponse, config: RepositoryConfig) -> Resolved:
    """Classify *response* and resolve it according to *config*."""
    ensure_passable(response)

    mode = config.mode
    if mode is ResponseMode.RAW:
        return Resolved(mode, response)
    if mode is ResponseMode.DOCUMENT:
        return Resolved(mode, response.body)

    if config.deserializer is None:
        raise RepositoryConfigurationError("Entity responses need a deserializer.")

    value = resolve_entity(response.body, config.deserializer)
    logger.debug("Resolved %s response as entity view", response.status_code)
    return Resolved(mode, value)
