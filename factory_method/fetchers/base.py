"""Base contract for cached data fetchers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

DataT = TypeVar("DataT")


class DataFetcher(ABC, Generic[DataT]):
    """Fetches one piece of data and keeps it in a cache."""

    @abstractmethod
    async def fetch(self) -> DataT:
        """Return the data, from the cache when one is present."""

    @abstractmethod
    def cache(self, data: DataT) -> None:
        """Replace the cached data."""

    @abstractmethod
    def clear(self) -> None:
        """Drop the cached data."""
