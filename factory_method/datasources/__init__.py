"""Data source product family."""

from __future__ import annotations

from .base import DataSource, Entity, new_entity_id
from .config import (
    DATA_SOURCE_TYPES,
    DataSourceConfig,
    DataSourceType,
    LocalStorageDataSourceConfig,
    MemoryDataSourceConfig,
    RestDataSourceConfig,
    config_from_mapping,
)
from .factory import create_data_source
from .local_storage import LocalStorageDataSource
from .memory import MemoryDataSource
from .rest import RestDataSource

__all__ = [
    "DATA_SOURCE_TYPES",
    "DataSource",
    "DataSourceConfig",
    "DataSourceType",
    "Entity",
    "LocalStorageDataSource",
    "LocalStorageDataSourceConfig",
    "MemoryDataSource",
    "MemoryDataSourceConfig",
    "RestDataSource",
    "RestDataSourceConfig",
    "config_from_mapping",
    "create_data_source",
    "new_entity_id",
]
