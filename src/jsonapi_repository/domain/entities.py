"""Domain entities: pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

EntityView = dict[str, Any]


class ResponseMode(str, Enum):
    """Output shape a repository call resolves to."""

    RAW = "raw"
    DOCUMENT = "document"
    ENTITY = "entity"


class Outcome(str, Enum):
    """Error classification of a single response."""

    PASS = "pass"
    RAISE = "raise"


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """One HTTP exchange as seen by the pipeline (status + decoded JSON body)."""

    status_code: int
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return str(self.status_code).startswith("2")


@dataclass(frozen=True, slots=True)
class QueryParams:
    """JSON:API query parameters for a single read request."""

    filter: Mapping[str, Any] | None = None
    sort: tuple[str, ...] | None = None
    page_limit: int | None = None
    page_offset: int | None = None

    @property
    def page(self) -> dict[str, int] | None:
        page: dict[str, int] = {}
        if self.page_limit is not None:
            page["limit"] = self.page_limit
        if self.page_offset is not None:
            page["offset"] = self.page_offset
        return page or None

    def to_mapping(self, include: tuple[str, ...] | None = None) -> dict[str, Any]:
        """Return the nested parameter map, with ``include`` merged in first."""
        query: dict[str, Any] = {}
        if include:
            query["include"] = ",".join(include)
        if self.filter:
            query["filter"] = dict(self.filter)
        if self.sort:
            query["sort"] = ",".join(self.sort)
        page = self.page
        if page:
            query["page"] = page
        return query


@dataclass(frozen=True, slots=True)
class Resolved:
    """A response after classification, tagged with the shape it resolved to.

    ``value`` is a :class:`TransportResponse` for ``RAW``, the JSON:API
    document for ``DOCUMENT``, and an entity view, a list of entity views, or
    the untouched body (no ``data`` member) for ``ENTITY``.
    """

    mode: ResponseMode
    value: Any
