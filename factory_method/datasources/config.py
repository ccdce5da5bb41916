"""Tagged configuration records for the data source variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal, Mapping, Union, get_args

from ..errors import ConfigError, UnknownVariantError
from ..remote import is_absolute_http_url
from ..storage import KeyValueStorage

DataSourceType = Literal["rest", "localstorage", "memory"]
DATA_SOURCE_TYPES: tuple[str, ...] = get_args(DataSourceType)


def _require_text(tag: str, field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(tag, field)
    return value.strip()


@dataclass(frozen=True, slots=True)
class RestDataSourceConfig:
    type: ClassVar[Literal["rest"]] = "rest"

    base_url: str
    endpoint: str

    def validate(self) -> None:
        _require_text(self.type, "base_url", self.base_url)
        if not is_absolute_http_url(self.base_url):
            raise ConfigError(self.type, "base_url", reason="must be an absolute http(s) URL")
        _require_text(self.type, "endpoint", self.endpoint)


@dataclass(frozen=True, slots=True)
class LocalStorageDataSourceConfig:
    type: ClassVar[Literal["localstorage"]] = "localstorage"

    key: str
    storage: KeyValueStorage | None = None

    def validate(self) -> None:
        _require_text(self.type, "key", self.key)
        if self.storage is not None and not isinstance(self.storage, KeyValueStorage):
            raise ConfigError(self.type, "storage", reason="must be a KeyValueStorage")


@dataclass(frozen=True, slots=True)
class MemoryDataSourceConfig:
    type: ClassVar[Literal["memory"]] = "memory"

    def validate(self) -> None:
        return None


DataSourceConfig = Union[
    RestDataSourceConfig,
    LocalStorageDataSourceConfig,
    MemoryDataSourceConfig,
]


_FIELDS: dict[str, frozenset[str]] = {
    "rest": frozenset({"base_url", "endpoint"}),
    "localstorage": frozenset({"key", "storage"}),
    "memory": frozenset(),
}


def config_from_mapping(
    data: Mapping[str, Any], *, storage: KeyValueStorage | None = None
) -> DataSourceConfig:
    """Build the tagged config described by ``data``.

    ``data["type"]`` selects the variant; the remaining keys are that variant's
    fields; a key belonging to another type is a ``ConfigError``.
    ``storage`` is injected into local-storage configs that do not
    carry their own.
    """

    tag = data.get("type")
    normalized = tag.strip().lower() if isinstance(tag, str) else tag
    if not isinstance(normalized, str) or normalized not in _FIELDS:
        raise UnknownVariantError(tag, family="data source", supported=DATA_SOURCE_TYPES)
    for key in data:
        if key != "type" and key not in _FIELDS[normalized]:
            raise ConfigError(normalized, str(key), reason="is not valid for this type")

    config: DataSourceConfig
    if normalized == "rest":
        config = RestDataSourceConfig(
            base_url=_require_text("rest", "base_url", data.get("base_url")),
            endpoint=_require_text("rest", "endpoint", data.get("endpoint")),
        )
    elif normalized == "localstorage":
        config = LocalStorageDataSourceConfig(
            key=_require_text("localstorage", "key", data.get("key")),
            storage=data.get("storage", storage),
        )
    else:
        config = MemoryDataSourceConfig()

    config.validate()
    return config


__all__ = [
    "DATA_SOURCE_TYPES",
    "DataSourceConfig",
    "DataSourceType",
    "LocalStorageDataSourceConfig",
    "MemoryDataSourceConfig",
    "RestDataSourceConfig",
    "config_from_mapping",
]
