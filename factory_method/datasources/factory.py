"""Factory method for data sources."""

from __future__ import annotations

from typing import Any, Mapping, assert_never

from ..errors import UnknownVariantError
from .base import DataSource, Entity
from .config import (
    DATA_SOURCE_TYPES,
    DataSourceConfig,
    LocalStorageDataSourceConfig,
    MemoryDataSourceConfig,
    RestDataSourceConfig,
    config_from_mapping,
)
from .local_storage import LocalStorageDataSource
from .memory import MemoryDataSource
from .rest import RestDataSource

CONFIG_TYPES: dict[str, type] = {
    RestDataSourceConfig.type: RestDataSourceConfig,
    LocalStorageDataSourceConfig.type: LocalStorageDataSourceConfig,
    MemoryDataSourceConfig.type: MemoryDataSourceConfig,
}

if set(CONFIG_TYPES) != set(DATA_SOURCE_TYPES):
    raise TypeError(
        f"data source configs {sorted(CONFIG_TYPES)} do not match types {sorted(DATA_SOURCE_TYPES)}"
    )


def create_data_source(config: DataSourceConfig | Mapping[str, Any]) -> DataSource[Entity]:
    """Build the data source selected by ``config``.

    ``config`` is one of the tagged config dataclasses or a mapping with a
    ``type`` key. The config is validated before anything is constructed.

    Raises:
        UnknownVariantError: the type is outside ``DATA_SOURCE_TYPES``.
        ConfigError: a required field is missing or invalid.
    """

    if isinstance(config, Mapping):
        config = config_from_mapping(config)
    elif not isinstance(config, tuple(CONFIG_TYPES.values())):
        tag = getattr(config, "type", type(config).__name__)
        raise UnknownVariantError(tag, family="data source", supported=DATA_SOURCE_TYPES)
    else:
        config.validate()

    if isinstance(config, RestDataSourceConfig):
        return RestDataSource(config)
    elif isinstance(config, LocalStorageDataSourceConfig):
        return LocalStorageDataSource(config)
    elif isinstance(config, MemoryDataSourceConfig):
        return MemoryDataSource(config)
    else:
        assert_never(config)


__all__ = ["CONFIG_TYPES", "create_data_source"]
