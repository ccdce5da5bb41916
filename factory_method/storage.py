"""Keyed-blob storage medium used by the local-storage variants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator


class KeyValueStorage(ABC):
    """String-keyed store of serialised blobs, modelled on browser localStorage."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the blob stored under ``key`` or ``None``."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous blob."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""

    @abstractmethod
    def keys(self) -> Iterator[str]:
        """Iterate over the stored keys."""


class InMemoryKeyValueStorage(KeyValueStorage):
    """Process-local medium. Share one instance to share data between sources."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._blobs: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self._blobs[key] = value

    def delete(self, key: str) -> None:
        self._blobs.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self._blobs))


__all__ = ["InMemoryKeyValueStorage", "KeyValueStorage"]
