"""Stand-in for a REST backend: requests are prepared and logged, never sent."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..remote import join_url, log_request, prepare_request
from .base import DataSource, Entity, build_entity, new_entity_id
from .config import RestDataSourceConfig

_LOGGER = logging.getLogger(__name__)


class RestDataSource(DataSource[Entity]):
    """Placeholder REST client.

    Reads return nothing. Writes echo the payload back with an id, so
    ``update`` on an id the server has never seen still returns a record
    instead of raising ``NotFoundError``.
    """

    name = "rest"

    def __init__(self, config: RestDataSourceConfig) -> None:
        self._config = config

    @property
    def collection_url(self) -> str:
        return join_url(self._config.base_url, self._config.endpoint)

    def _item_url(self, entity_id: str) -> str:
        return join_url(self._config.base_url, self._config.endpoint, entity_id)

    def _send(self, method: str, url: str, payload: Mapping[str, Any] | None = None) -> None:
        prepared = prepare_request(method, url, json=payload)
        log_request(_LOGGER, prepared, event=f"datasource.rest.{method.lower()}", payload=payload)

    async def fetch(self) -> list[Entity]:
        self._send("GET", self.collection_url)
        return []

    async def fetch_one(self, entity_id: str) -> Entity | None:
        self._send("GET", self._item_url(entity_id))
        return None

    async def create(self, data: Mapping[str, Any]) -> Entity:
        self._send("POST", self.collection_url, data)
        return build_entity(new_entity_id(), data)

    async def update(self, entity_id: str, data: Mapping[str, Any]) -> Entity:
        self._send("PUT", self._item_url(entity_id), data)
        return build_entity(entity_id, data)

    async def delete(self, entity_id: str) -> None:
        self._send("DELETE", self._item_url(entity_id))


__all__ = ["RestDataSource"]
