"""Tests for data source dispatch and config validation."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from factory_method.datasources import (
    DATA_SOURCE_TYPES,
    DataSource,
    LocalStorageDataSource,
    LocalStorageDataSourceConfig,
    MemoryDataSource,
    MemoryDataSourceConfig,
    RestDataSource,
    RestDataSourceConfig,
    config_from_mapping,
    create_data_source,
)
from factory_method.datasources.factory import CONFIG_TYPES
from factory_method.errors import ConfigError, UnknownVariantError
from factory_method.storage import InMemoryKeyValueStorage

_VALID: dict[str, dict[str, Any]] = {
    "rest": {"type": "rest", "base_url": "https://api.example.com", "endpoint": "users"},
    "localstorage": {"type": "localstorage", "key": "users"},
    "memory": {"type": "memory"},
}

_OPERATIONS = ("fetch", "fetch_one", "create", "update", "delete")


def test_config_types_cover_every_tag() -> None:
    assert set(CONFIG_TYPES) == set(DATA_SOURCE_TYPES) == set(_VALID)


@pytest.mark.parametrize("tag", DATA_SOURCE_TYPES)
def test_every_tag_builds_a_complete_data_source(tag: str) -> None:
    source = create_data_source(_VALID[tag])

    assert isinstance(source, DataSource)
    for operation in _OPERATIONS:
        assert callable(getattr(source, operation))


def test_dataclass_configs_select_matching_variant() -> None:
    assert isinstance(
        create_data_source(RestDataSourceConfig(base_url="https://api.example.com", endpoint="users")),
        RestDataSource,
    )
    assert isinstance(create_data_source(LocalStorageDataSourceConfig(key="users")), LocalStorageDataSource)
    assert isinstance(create_data_source(MemoryDataSourceConfig()), MemoryDataSource)


@pytest.mark.parametrize("tag", ["graphql", "", None, 42])
def test_unknown_tag_carries_exact_value(tag: object) -> None:
    with pytest.raises(UnknownVariantError) as excinfo:
        create_data_source({"type": tag})

    assert excinfo.value.tag == tag
    assert excinfo.value.supported == DATA_SOURCE_TYPES


def test_mapping_tag_ignores_case_and_whitespace() -> None:
    source = create_data_source({**_VALID["rest"], "type": " REST "})

    assert isinstance(source, RestDataSource)


def test_unrecognised_config_object_is_rejected() -> None:
    class GraphQLConfig:
        type = "graphql"

    with pytest.raises(UnknownVariantError) as excinfo:
        create_data_source(GraphQLConfig())  # type: ignore[arg-type]

    assert excinfo.value.tag == "graphql"


@pytest.mark.parametrize(
    ("tag", "missing"),
    [("rest", "base_url"), ("rest", "endpoint"), ("localstorage", "key")],
)
def test_missing_field_is_config_error_without_side_effects(
    tag: str, missing: str, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG)
    config = {k: v for k, v in _VALID[tag].items() if k != missing}

    with pytest.raises(ConfigError) as excinfo:
        create_data_source(config)

    assert excinfo.value.tag == tag
    assert excinfo.value.field == missing
    assert not [r for r in caplog.records if r.name.startswith("factory_method.datasources")]


def test_blank_dataclass_field_is_config_error() -> None:
    with pytest.raises(ConfigError) as excinfo:
        create_data_source(RestDataSourceConfig(base_url="https://api.example.com", endpoint=" "))

    assert excinfo.value.field == "endpoint"


def test_relative_base_url_is_config_error() -> None:
    with pytest.raises(ConfigError, match="absolute"):
        create_data_source({"type": "rest", "base_url": "api.example.com", "endpoint": "users"})


def test_storage_must_be_a_key_value_storage() -> None:
    with pytest.raises(ConfigError) as excinfo:
        create_data_source({"type": "localstorage", "key": "users", "storage": {}})

    assert excinfo.value.field == "storage"


@pytest.mark.parametrize(
    ("config", "field"),
    [
        ({"type": "memory", "base_url": "https://api.example.com", "endpoint": "users"}, "base_url"),
        ({"type": "memory", "key": "users"}, "key"),
        ({**_VALID["rest"], "key": "users"}, "key"),
        ({**_VALID["localstorage"], "endpoint": "users"}, "endpoint"),
    ],
)
def test_field_of_another_type_is_config_error(config: dict[str, Any], field: str) -> None:
    with pytest.raises(ConfigError, match="is not valid for this type") as excinfo:
        create_data_source(config)

    assert excinfo.value.tag == config["type"]
    assert excinfo.value.field == field


def test_injected_storage_is_used_unless_config_has_its_own() -> None:
    shared = InMemoryKeyValueStorage()
    own = InMemoryKeyValueStorage()

    injected = config_from_mapping(_VALID["localstorage"], storage=shared)
    explicit = config_from_mapping({**_VALID["localstorage"], "storage": own}, storage=shared)

    assert isinstance(injected, LocalStorageDataSourceConfig)
    assert injected.storage is shared
    assert isinstance(explicit, LocalStorageDataSourceConfig)
    assert explicit.storage is own


def test_each_dispatch_builds_a_new_instance() -> None:
    assert create_data_source(_VALID["memory"]) is not create_data_source(_VALID["memory"])
