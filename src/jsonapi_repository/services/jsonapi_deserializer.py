"""Default JSON:API deserializer.

Validates the document with pydantic and returns plain resource mappings
(``id``, ``type``, ``attributes``, ``relationships``).  Relationship linkage
that points at a resource present in ``included`` is replaced by that
resource (one level deep); unresolved linkage is kept as the bare
``{"type", "id"}`` identifier.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from jsonapi_repository.domain.exceptions import DeserializationError


class ResourceObject(BaseModel):
    """A single JSON:API resource object."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    type: str
    attributes: dict[str, Any] | None = None
    relationships: dict[str, Any] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v


class JsonApiDocument(BaseModel):
    """Top-level JSON:API document (``data`` or ``errors`` plus ``meta``)."""

    model_config = ConfigDict(extra="allow")

    data: ResourceObject | list[ResourceObject] | None = None
    included: list[ResourceObject] = []
    errors: list[dict[str, Any]] | None = None
    meta: dict[str, Any] | None = None


_Key = tuple[str, str]


class JsonApiDeserializer:
    """Concrete ``Deserializer`` for standard JSON:API documents."""

    def deserialize(
        self, document: Mapping[str, Any]
    ) -> dict[str, Any] | list[dict[str, Any]] | None:
        try:
            parsed = JsonApiDocument.model_validate(document)
        except ValidationError as exc:
            raise DeserializationError(f"Malformed JSON:API document: {exc}") from exc

        included = {
            (res.type, res.id): res for res in parsed.included if res.id is not None
        }

        if parsed.data is None:
            return None
        if isinstance(parsed.data, list):
            return [self._resource(res, included) for res in parsed.data]
        return self._resource(parsed.data, included)

    # ── Internals ───────────────────────────────────────────────────────

    def _resource(
        self,
        resource: ResourceObject,
        included: Mapping[_Key, ResourceObject],
        *,
        resolve: bool = True,
    ) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": resource.id,
            "type": resource.type,
            "attributes": dict(resource.attributes or {}),
        }
        if resource.relationships:
            result["relationships"] = {
                name: self._relationship(rel, included) if resolve else rel
                for name, rel in resource.relationships.items()
            }
        return result

    def _relationship(self, relationship: Any, included: Mapping[_Key, ResourceObject]) -> Any:
        if not isinstance(relationship, Mapping) or "data" not in relationship:
            return relationship

        linkage = relationship["data"]
        if isinstance(linkage, list):
            return [self._linked(item, included) for item in linkage]
        if linkage is None:
            return None
        return self._linked(linkage, included)

    def _linked(self, identifier: Any, included: Mapping[_Key, ResourceObject]) -> Any:
        if not isinstance(identifier, Mapping):
            return identifier
        key = (str(identifier.get("type")), str(identifier.get("id")))
        target = included.get(key)
        if target is None:
            return dict(identifier)
        # Nested relationships stay as raw linkage to avoid cycles.
        return self._resource(target, included, resolve=False)
