"""Fetcher reading a JSON blob from a keyed storage medium."""

from __future__ import annotations

import json
import logging
from typing import Any

from ..errors import NotFoundError
from ..storage import InMemoryKeyValueStorage, KeyValueStorage
from .base import DataFetcher

_LOGGER = logging.getLogger(__name__)


class LocalDataFetcher(DataFetcher[Any]):
    def __init__(self, key: str, storage: KeyValueStorage | None = None) -> None:
        self._key = key
        self._storage = storage if storage is not None else InMemoryKeyValueStorage()

    @property
    def key(self) -> str:
        return self._key

    async def fetch(self) -> Any:
        raw = self._storage.get(self._key)
        if raw is None:
            raise NotFoundError(self._key, source="local")
        _LOGGER.info(
            "Fetched from local storage: %s",
            self._key,
            extra={"event": "fetcher.local.fetch", "key": self._key},
        )
        return json.loads(raw)

    def cache(self, data: Any) -> None:
        self._storage.set(self._key, json.dumps(data, ensure_ascii=False))
        _LOGGER.info(
            "Saved to local storage: %s",
            self._key,
            extra={"event": "fetcher.local.cache", "key": self._key},
        )

    def clear(self) -> None:
        self._storage.delete(self._key)
        _LOGGER.info(
            "Removed from local storage: %s",
            self._key,
            extra={"event": "fetcher.local.clear", "key": self._key},
        )


__all__ = ["LocalDataFetcher"]
