"""Port: JSON:API deserializer, pluggable per repository instance."""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class Deserializer(Protocol):
    """Turns a JSON:API document into resource mapping(s).

    A single resource must come back as a mapping carrying an ``id`` key;
    a collection as a list of such mappings; a ``null`` primary data as ``None``.
    """

    def deserialize(
        self, document: Mapping[str, Any]
    ) -> dict[str, Any] | list[dict[str, Any]] | None:
        ...
