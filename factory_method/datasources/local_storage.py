"""Data source persisted as one JSON blob in a keyed storage medium."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from ..errors import NotFoundError
from ..storage import InMemoryKeyValueStorage, KeyValueStorage
from .base import DataSource, Entity, build_entity, merge_entity, new_entity_id
from .config import LocalStorageDataSourceConfig

_LOGGER = logging.getLogger(__name__)


class LocalStorageDataSource(DataSource[Entity]):
    """Keeps the whole collection serialised under ``config.key``.

    Each mutation decodes the blob, changes the list and writes the full list
    back. The cycle is not atomic: a writer sharing the medium between the read
    and the write of another caller loses its change.
    """

    name = "localstorage"

    def __init__(self, config: LocalStorageDataSourceConfig) -> None:
        self._config = config
        self._storage: KeyValueStorage = (
            config.storage if config.storage is not None else InMemoryKeyValueStorage()
        )

    @property
    def key(self) -> str:
        return self._config.key

    @property
    def storage(self) -> KeyValueStorage:
        return self._storage

    def _read(self) -> list[Entity]:
        raw = self._storage.get(self.key)
        if not raw:
            return []
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"Storage key '{self.key}' does not hold a list")
        return data

    def _write(self, items: list[Entity]) -> None:
        self._storage.set(self.key, json.dumps(items, ensure_ascii=False))

    async def fetch(self) -> list[Entity]:
        _LOGGER.info(
            "Reading from storage: %s",
            self.key,
            extra={"event": "datasource.localstorage.fetch", "key": self.key},
        )
        return self._read()

    async def fetch_one(self, entity_id: str) -> Entity | None:
        for item in self._read():
            if item.get("id") == entity_id:
                return item
        return None

    async def create(self, data: Mapping[str, Any]) -> Entity:
        items = self._read()
        item = build_entity(new_entity_id(), data)
        items.append(item)
        self._write(items)
        _LOGGER.info(
            "Created in storage: %s",
            self.key,
            extra={"event": "datasource.localstorage.create", "key": self.key, "id": item["id"]},
        )
        return dict(item)

    async def update(self, entity_id: str, data: Mapping[str, Any]) -> Entity:
        items = self._read()
        for index, item in enumerate(items):
            if item.get("id") == entity_id:
                break
        else:
            raise NotFoundError(entity_id, source=self.name)

        updated = merge_entity(items[index], data)
        items[index] = updated
        self._write(items)
        _LOGGER.info(
            "Updated in storage: %s",
            self.key,
            extra={"event": "datasource.localstorage.update", "key": self.key, "id": entity_id},
        )
        return dict(updated)

    async def delete(self, entity_id: str) -> None:
        items = [item for item in self._read() if item.get("id") != entity_id]
        self._write(items)
        _LOGGER.info(
            "Deleted from storage: %s",
            self.key,
            extra={"event": "datasource.localstorage.delete", "key": self.key, "id": entity_id},
        )


__all__ = ["LocalStorageDataSource"]
