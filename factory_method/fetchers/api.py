"""Fetcher for a (simulated) HTTP API with an in-process cache."""

from __future__ import annotations

import logging
from typing import Any

from ..remote import log_request, prepare_request
from .base import DataFetcher

_LOGGER = logging.getLogger(__name__)


class ApiDataFetcher(DataFetcher[Any]):
    def __init__(self, url: str) -> None:
        self._url = url
        self._cached: Any | None = None

    @property
    def url(self) -> str:
        return self._url

    async def fetch(self) -> Any:
        if self._cached is not None:
            _LOGGER.info(
                "Returning cached data from %s",
                self._url,
                extra={"event": "fetcher.api.cache_hit", "url": self._url},
            )
            return self._cached

        prepared = prepare_request("GET", self._url)
        log_request(_LOGGER, prepared, event="fetcher.api.get")
        self._cached = {"message": f"Data from {self._url}"}
        return self._cached

    def cache(self, data: Any) -> None:
        self._cached = data
        _LOGGER.info("Data cached for %s", self._url, extra={"event": "fetcher.api.cache"})

    def clear(self) -> None:
        self._cached = None
        _LOGGER.info("Cache cleared for %s", self._url, extra={"event": "fetcher.api.clear"})


__all__ = ["ApiDataFetcher"]
