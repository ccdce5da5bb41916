"""Factory method for data fetchers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, get_args

from ..errors import ConfigError
from ..registry import VariantRegistry
from ..remote import is_absolute_http_url
from ..storage import KeyValueStorage
from .api import ApiDataFetcher
from .base import DataFetcher
from .local import LocalDataFetcher

FetcherType = Literal["api", "local"]
FETCHER_TYPES: tuple[str, ...] = get_args(FetcherType)


@dataclass(frozen=True, slots=True)
class ApiFetcherConfig:
    url: str


@dataclass(frozen=True, slots=True)
class LocalFetcherConfig:
    key: str
    storage: KeyValueStorage | None = None


@dataclass(frozen=True, slots=True)
class FetcherConfig:
    """Per-type options; only the section for the requested type is read."""

    api: ApiFetcherConfig | None = None
    local: LocalFetcherConfig | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FetcherConfig":
        """Build a config from a flat table such as ``{"type": "api", "url": ...}``."""

        tag = str(data.get("type", "")).strip().lower()
        if tag == "api":
            return cls(api=ApiFetcherConfig(url=data.get("url", "")))
        if tag == "local":
            return cls(local=LocalFetcherConfig(key=data.get("key", ""), storage=data.get("storage")))
        return cls()


def _build_api(config: FetcherConfig) -> DataFetcher[Any]:
    if config.api is None or not config.api.url:
        raise ConfigError("api", "url", reason="is required (API URL required)")
    if not is_absolute_http_url(config.api.url):
        raise ConfigError("api", "url", reason="must be an absolute http(s) URL")
    return ApiDataFetcher(config.api.url)


def _build_local(config: FetcherConfig) -> DataFetcher[Any]:
    if config.local is None or not isinstance(config.local.key, str) or not config.local.key.strip():
        raise ConfigError("local", "key", reason="is required (local storage key required)")
    return LocalDataFetcher(config.local.key, config.local.storage)


_REGISTRY: VariantRegistry[DataFetcher[Any]] = VariantRegistry(
    "fetcher",
    {"api": _build_api, "local": _build_local},
    expected=FETCHER_TYPES,
)


def create_data_fetcher(fetcher_type: str, config: FetcherConfig) -> DataFetcher[Any]:
    """Return the fetcher for ``fetcher_type`` configured from its section of ``config``.

    Raises:
        UnknownVariantError: the type is not one of ``FETCHER_TYPES``.
        ConfigError: the type's section is missing or incomplete.
    """

    return _REGISTRY.create(fetcher_type, config)


__all__ = [
    "ApiFetcherConfig",
    "FETCHER_TYPES",
    "FetcherConfig",
    "FetcherType",
    "LocalFetcherConfig",
    "create_data_fetcher",
]
