"""Query builder: repository read arguments → JSON:API query parameters.

Produces ``filter[field]=v1,v2``, ``sort=a,-b``, ``page[limit]=n``,
``page[offset]=n`` and ``include=r1,r2``.  List-valued filters are joined
with ``,``; a value that itself contains a comma will not survive the round
trip, and nothing here tries to escape it.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from jsonapi_repository.domain.entities import QueryParams

_ASCENDING = "asc"


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _filter_value(value: Any) -> Any:
    """Join list values with ``,``; scalars are left for :func:`encode_query`."""
    if isinstance(value, (list, tuple)):
        return ",".join(_scalar(v) for v in value if v is not None)
    return value


def build_sort(order_by: Mapping[str, str]) -> tuple[str, ...]:
    """``{"name": "asc", "created_at": "desc"}`` → ``("name", "-created_at")``.

    Only a case-insensitive ``"asc"`` sorts ascending; any other direction
    string sorts descending.
    """
    return tuple(
        name if str(direction).lower() == _ASCENDING else f"-{name}"
        for name, direction in order_by.items()
    )


def build_query(
    criteria: Mapping[str, Any] | None,
    order_by: Mapping[str, str] | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> QueryParams:
    """Build the query parameters for a ``find_by`` style request."""
    filters = (
        {field: _filter_value(value) for field, value in criteria.items()}
        if criteria
        else None
    )
    sort = build_sort(order_by) if order_by else None
    return QueryParams(filter=filters, sort=sort, page_limit=limit, page_offset=offset)


def encode_query(params: Mapping[str, Any], prefix: str = "") -> list[tuple[str, str]]:
    """Flatten a nested parameter map into bracket-notation pairs.

    ``{"filter": {"role": "a,b"}, "page": {"limit": 10}}`` →
    ``[("filter[role]", "a,b"), ("page[limit]", "10")]``.  ``None`` values
    are skipped; booleans are sent as ``1`` / ``0``.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if value is None:
            continue
        if isinstance(value, Mapping):
            pairs.extend(encode_query(value, name))
        else:
            pairs.append((name, _scalar(value)))
    return pairs


def render_query(
    params: QueryParams | None,
    include: Sequence[str] | None = None,
) -> list[tuple[str, str]]:
    """Encode *params* plus the repository include list for a GET request."""
    query = (params or QueryParams()).to_mapping(tuple(include) if include else None)
    return encode_query(query)
