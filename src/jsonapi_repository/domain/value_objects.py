"""Value objects: self-validating domain primitives."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from jsonapi_repository.domain.entities import ResponseMode
from jsonapi_repository.domain.exceptions import RepositoryConfigurationError
from jsonapi_repository.domain.ports.deserializer import Deserializer


def parse_include(value: str | Sequence[str] | None) -> tuple[str, ...] | None:
    """Normalise an include list given as ``"a,b"`` or ``["a", "b"]``.

    Blank entries are dropped; order is kept.
    """
    if value is None:
        return None
    parts = value.split(",") if isinstance(value, str) else list(value)
    cleaned = tuple(p.strip() for p in parts if p and p.strip())
    return cleaned or None


@dataclass(frozen=True, slots=True)
class RepositoryConfig:
    """Immutable configuration of one repository.

    Every ``with_*`` / ``as_*`` method returns a new config, so a config
    captured at dispatch time cannot change under an in-flight call.
    """

    base_uri: str
    headers: Mapping[str, str] | None = None
    include: tuple[str, ...] | None = None
    full_response: bool = False
    entity_response: bool = False
    deserializer: Deserializer | None = None

    def __post_init__(self) -> None:
        if not self.base_uri or not self.base_uri.strip():
            raise RepositoryConfigurationError("Repository base URI must not be empty.")

    # ── Derived values ──────────────────────────────────────────────────

    @property
    def mode(self) -> ResponseMode:
        if self.full_response:
            return ResponseMode.RAW
        if self.entity_response:
            return ResponseMode.ENTITY
        return ResponseMode.DOCUMENT

    def resource_uri(self, *segments: Any) -> str:
        """Join *segments* onto the base URI: ``{base}/{id}/restore``."""
        uri = self.base_uri.rstrip("/")
        for segment in segments:
            uri = f"{uri}/{segment}"
        return uri

    # ── Fluent configuration ────────────────────────────────────────────

    def with_include(self, include: str | Sequence[str] | None) -> RepositoryConfig:
        return dataclasses.replace(self, include=parse_include(include))

    def with_headers(self, headers: Mapping[str, str] | None) -> RepositoryConfig:
        return dataclasses.replace(self, headers=dict(headers) if headers else None)

    def with_full_response(self, enabled: bool = True) -> RepositoryConfig:
        return dataclasses.replace(self, full_response=enabled)

    def as_entity(self) -> RepositoryConfig:
        return dataclasses.replace(self, entity_response=True)

    def as_json_api(self) -> RepositoryConfig:
        return dataclasses.replace(self, entity_response=False)

    def with_deserializer(self, deserializer: Deserializer) -> RepositoryConfig:
        return dataclasses.replace(self, deserializer=deserializer)
