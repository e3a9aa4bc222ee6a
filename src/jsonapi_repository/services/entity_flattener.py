"""Entity flattener: resource object → flat entity view."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from jsonapi_repository.domain.entities import EntityView


def flatten(resource: Mapping[str, Any]) -> EntityView:
    """Merge ``id``, ``attributes`` and non-empty ``relationships`` into one dict.

    ``id`` comes first and always holds the resource identifier, even when
    an attribute is also called ``id``.  Non-empty relationships are nested
    under ``relationships`` and replace an attribute of the same name.
    """
    attributes = resource.get("attributes") or {}
    relationships = resource.get("relationships") or {}

    entity: EntityView = {"id": resource.get("id")}
    entity.update((key, value) for key, value in attributes.items() if key != "id")
    if relationships:
        entity["relationships"] = dict(relationships)
    return entity


def flatten_all(resources: Iterable[Mapping[str, Any]]) -> list[EntityView]:
    """Flatten each resource independently, preserving order."""
    return [flatten(resource) for resource in resources]
