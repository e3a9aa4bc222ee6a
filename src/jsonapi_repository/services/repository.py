"""JSON:API repository: the public entry point of the library.

Each operation performs exactly one request/response exchange:

    query builder → request dispatcher → error classifier → response resolver

The repository itself is immutable.  Fluent configuration methods
(:meth:`JsonApiRepository.as_entity`, :meth:`JsonApiRepository.with_include`,
...) return a new repository that shares the same transport, so a configured
instance can be handed to several callers without one call chain changing
another's output shape.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from jsonapi_repository.domain.entities import Resolved, ResponseMode
from jsonapi_repository.domain.ports.deserializer import Deserializer
from jsonapi_repository.domain.ports.transport import Transport
from jsonapi_repository.domain.value_objects import RepositoryConfig
from jsonapi_repository.services.jsonapi_deserializer import JsonApiDeserializer
from jsonapi_repository.services.query_builder import build_query
from jsonapi_repository.services.request_dispatcher import RequestDispatcher, Verb
from jsonapi_repository.services.response_resolver import resolve

logger = logging.getLogger(__name__)

Identifier = str | int


class JsonApiRepository:
    """Create/read/update/delete/restore over one JSON:API resource collection.

    Parameters
    ----------
    transport:
        Adapter performing the HTTP exchange (see :class:`Transport`).
    config:
        Base URI, include list, response-mode flags and deserializer.  When
        the config has no deserializer the standard JSON:API one is used.
    """

    def __init__(self, transport: Transport, config: RepositoryConfig) -> None:
        if config.deserializer is None:
            config = config.with_deserializer(JsonApiDeserializer())
        self._transport = transport
        self._config = config
        self._dispatcher = RequestDispatcher(transport)

    @property
    def config(self) -> RepositoryConfig:
        return self._config

    # ── Fluent configuration ────────────────────────────────────────────

    def _derive(self, config: RepositoryConfig) -> JsonApiRepository:
        return type(self)(self._transport, config)

    def with_include(self, include: str | Sequence[str] | None) -> JsonApiRepository:
        """Request related resources: ``"author,comments"`` or ``["author"]``."""
        return self._derive(self._config.with_include(include))

    def with_headers(self, headers: Mapping[str, str] | None) -> JsonApiRepository:
        return self._derive(self._config.with_headers(headers))

    def with_full_response(self, enabled: bool = True) -> JsonApiRepository:
        """Return the whole :class:`TransportResponse` instead of its body."""
        return self._derive(self._config.with_full_response(enabled))

    def as_entity(self) -> JsonApiRepository:
        """Return flattened entity views instead of JSON:API documents."""
        return self._derive(self._config.as_entity())

    def as_json_api(self) -> JsonApiRepository:
        return self._derive(self._config.as_json_api())

    def with_deserializer(self, deserializer: Deserializer) -> JsonApiRepository:
        return self._derive(self._config.with_deserializer(deserializer))

    # ── Reads ───────────────────────────────────────────────────────────

    def find(self, identifier: Identifier | Sequence[Identifier]) -> Any:
        """Fetch one resource by id; a list of ids becomes an ``id`` filter."""
        if isinstance(identifier, (list, tuple)):
            return self.find_by({"id": list(identifier)})

        return self._call(Verb.FIND, self._config.resource_uri(identifier), build_query(None))

    def find_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str] | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        """Fetch the resources matching *criteria*.

        ``order_by`` maps field names to ``"asc"``/``"desc"``; list values in
        *criteria* are sent as one comma-separated filter value.
        """
        return self._find_by(Verb.FIND_BY, criteria, order_by, limit, offset).value

    def find_one_by(
        self,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str] | None = None,
    ) -> Any:
        """Fetch the first resource matching *criteria* (``page[limit]=1``)."""
        resolved = self._find_by(Verb.FIND_ONE_BY, criteria, order_by, 1, None)
        return _first_of(resolved)

    def find_all(self, order_by: Mapping[str, str] | None = None) -> Any:
        return self._find_by(Verb.FIND_ALL, {}, order_by, None, None).value

    # ── Writes ──────────────────────────────────────────────────────────

    def create(self, params: Mapping[str, Any]) -> Any:
        return self._call(Verb.CREATE, self._config.resource_uri(), params)

    def update(self, identifier: Identifier, params: Mapping[str, Any]) -> Any:
        """Replace the resource with ``PUT {base}/{id}``."""
        return self._call(Verb.UPDATE, self._config.resource_uri(identifier), params)

    def patch(self, identifier: Identifier, params: Mapping[str, Any]) -> Any:
        """Partially update the resource with ``PATCH {base}/{id}``."""
        return self._call(Verb.PATCH, self._config.resource_uri(identifier), params)

    def delete(self, identifier: Identifier) -> Any:
        return self._call(Verb.DELETE, self._config.resource_uri(identifier))

    def restore(self, identifier: Identifier) -> Any:
        """Undo a soft delete with ``PUT {base}/{id}/restore``."""
        return self._call(Verb.RESTORE, self._config.resource_uri(identifier, "restore"))

    # ── Internals ───────────────────────────────────────────────────────

    def _find_by(
        self,
        verb: Verb,
        criteria: Mapping[str, Any],
        order_by: Mapping[str, str] | None,
        limit: int | None,
        offset: int | None,
    ) -> Resolved:
        query = build_query(criteria, order_by, limit, offset)
        return self._exchange(verb, self._config.resource_uri(), query)

    def _call(self, verb: Verb, uri: str, params: Any = None) -> Any:
        return self._exchange(verb, uri, params).value

    def _exchange(self, verb: Verb, uri: str, params: Any) -> Resolved:
        config = self._config
        response = self._dispatcher.dispatch(
            verb, uri, params, include=config.include, headers=config.headers
        )
        return resolve(response, config)


def _first_of(resolved: Resolved) -> Any:
    """Narrow a ``find_by`` result to its first resource.

    Validation payloads and RAW envelopes are returned untouched.  An empty
    collection yields ``{"data": []}`` in document mode and ``None`` in
    entity mode.
    """
    value = resolved.value

    if resolved.mode is ResponseMode.RAW:
        return value

    if resolved.mode is ResponseMode.DOCUMENT:
        if not isinstance(value, Mapping) or "errors" in value or "data" not in value:
            return value
        data = value["data"]
        if isinstance(data, list):
            return {"data": data[0] if data else data}
        return {"data": data}

    if isinstance(value, list):
        return value[0] if value else None
    return value
