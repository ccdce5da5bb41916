"""Base contract for CRUD-capable data sources."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, TypeVar

Entity = dict[str, Any]
EntityT = TypeVar("EntityT", bound=Mapping[str, Any])


def new_entity_id() -> str:
    return str(uuid.uuid4())


def build_entity(entity_id: str, data: Mapping[str, Any]) -> Entity:
    """Return ``data`` as a fresh record carrying ``entity_id``.

    A caller supplied ``id`` in ``data`` never wins over ``entity_id``.
    """

    record = {key: value for key, value in data.items() if key != "id"}
    record["id"] = entity_id
    return record


def merge_entity(existing: Mapping[str, Any], changes: Mapping[str, Any]) -> Entity:
    merged = dict(existing)
    merged.update({key: value for key, value in changes.items() if key != "id"})
    return merged


class DataSource(ABC, Generic[EntityT]):
    """Asynchronous CRUD access to a collection of entities.

    Every entity has a string ``id`` assigned by the source on ``create``.
    """

    name: str = "datasource"

    @abstractmethod
    async def fetch(self) -> list[EntityT]:
        """Return a snapshot of all entities in insertion order."""

    @abstractmethod
    async def fetch_one(self, entity_id: str) -> EntityT | None:
        """Return the entity with ``entity_id`` or ``None`` when absent."""

    @abstractmethod
    async def create(self, data: Mapping[str, Any]) -> EntityT:
        """Store a new entity built from ``data`` and return it with its id."""

    @abstractmethod
    async def update(self, entity_id: str, data: Mapping[str, Any]) -> EntityT:
        """Merge ``data`` onto an existing entity and return the result.

        Raises:
            NotFoundError: no entity has ``entity_id``.
        """

    @abstractmethod
    async def delete(self, entity_id: str) -> None:
        """Remove the entity with ``entity_id``. Missing ids are ignored."""


__all__ = [
    "DataSource",
    "Entity",
    "EntityT",
    "build_entity",
    "merge_entity",
    "new_entity_id",
]
