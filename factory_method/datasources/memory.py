"""Data source backed by a list owned by the instance."""

from __future__ import annotations

import copy
import logging
from typing import Any, Mapping

from ..errors import NotFoundError
from .base import DataSource, Entity, build_entity, merge_entity, new_entity_id
from .config import MemoryDataSourceConfig

_LOGGER = logging.getLogger(__name__)


class MemoryDataSource(DataSource[Entity]):
    name = "memory"

    def __init__(self, config: MemoryDataSourceConfig | None = None) -> None:
        self._config = config or MemoryDataSourceConfig()
        self._items: list[Entity] = []

    def _index_of(self, entity_id: str) -> int:
        for index, item in enumerate(self._items):
            if item["id"] == entity_id:
                return index
        return -1

    async def fetch(self) -> list[Entity]:
        _LOGGER.info(
            "Reading from memory (%d items)",
            len(self._items),
            extra={"event": "datasource.memory.fetch", "count": len(self._items)},
        )
        return copy.deepcopy(self._items)

    async def fetch_one(self, entity_id: str) -> Entity | None:
        index = self._index_of(entity_id)
        return copy.deepcopy(self._items[index]) if index >= 0 else None

    async def create(self, data: Mapping[str, Any]) -> Entity:
        item = build_entity(new_entity_id(), copy.deepcopy(dict(data)))
        self._items.append(item)
        _LOGGER.info("Created in memory", extra={"event": "datasource.memory.create", "id": item["id"]})
        return copy.deepcopy(item)

    async def update(self, entity_id: str, data: Mapping[str, Any]) -> Entity:
        index = self._index_of(entity_id)
        if index < 0:
            raise NotFoundError(entity_id, source=self.name)
        self._items[index] = merge_entity(self._items[index], copy.deepcopy(dict(data)))
        _LOGGER.info("Updated in memory", extra={"event": "datasource.memory.update", "id": entity_id})
        return copy.deepcopy(self._items[index])

    async def delete(self, entity_id: str) -> None:
        self._items = [item for item in self._items if item["id"] != entity_id]
        _LOGGER.info("Deleted from memory", extra={"event": "datasource.memory.delete", "id": entity_id})


__all__ = ["MemoryDataSource"]
