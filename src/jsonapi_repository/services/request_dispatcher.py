"""Request dispatcher: logical repository verb → HTTP exchange.

The verb set is closed: each :class:`Verb` maps to exactly one HTTP method
and body policy, and unknown verbs cannot be expressed.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping, Sequence

from jsonapi_repository.domain.entities import QueryParams, TransportResponse
from jsonapi_repository.domain.ports.transport import Transport
from jsonapi_repository.services.query_builder import render_query

logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class Verb(str, Enum):
    """Repository operation, tagged with the HTTP method it travels as."""

    FIND = "find"
    FIND_BY = "find_by"
    FIND_ONE_BY = "find_one_by"
    FIND_ALL = "find_all"
    CREATE = "create"
    UPDATE = "update"
    PATCH = "patch"
    DELETE = "delete"
    RESTORE = "restore"

    @property
    def method(self) -> HttpMethod:
        return _VERB_METHODS[self]

    @property
    def sends_body(self) -> bool:
        return self in (Verb.CREATE, Verb.UPDATE, Verb.PATCH)


_VERB_METHODS: dict[Verb, HttpMethod] = {
    Verb.FIND: HttpMethod.GET,
    Verb.FIND_BY: HttpMethod.GET,
    Verb.FIND_ONE_BY: HttpMethod.GET,
    Verb.FIND_ALL: HttpMethod.GET,
    Verb.CREATE: HttpMethod.POST,
    Verb.UPDATE: HttpMethod.PUT,
    Verb.PATCH: HttpMethod.PATCH,
    Verb.DELETE: HttpMethod.DELETE,
    Verb.RESTORE: HttpMethod.PUT,
}


class RequestDispatcher:
    """Issues one request per call through the injected :class:`Transport`.

    Transport failures propagate as
    :class:`~jsonapi_repository.domain.exceptions.TransportError`; nothing
    is retried here.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def dispatch(
        self,
        verb: Verb,
        uri: str,
        params: QueryParams | Mapping[str, Any] | None = None,
        include: Sequence[str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> TransportResponse:
        """Send *verb* to *uri*.

        Read verbs take :class:`QueryParams` (plus the include list); write
        verbs take the JSON body mapping.  ``include`` is never sent on writes.
        """
        method = verb.method
        logger.debug("%s %s (%s)", method.value, uri, verb.value)

        if method is HttpMethod.GET:
            query = params if isinstance(params, QueryParams) else None
            return self._transport.get(uri, render_query(query, include), headers=headers)

        if method is HttpMethod.DELETE:
            return self._transport.delete(uri, headers=headers)

        body = params if verb.sends_body else None
        if method is HttpMethod.POST:
            return self._transport.post(uri, body, headers=headers)
        if method is HttpMethod.PATCH:
            return self._transport.patch(uri, body, headers=headers)
        return self._transport.put(uri, body, headers=headers)
