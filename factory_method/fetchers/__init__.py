"""Data fetcher product family."""

from __future__ import annotations

from .api import ApiDataFetcher
from .base import DataFetcher
from .factory import (
    FETCHER_TYPES,
    ApiFetcherConfig,
    FetcherConfig,
    FetcherType,
    LocalFetcherConfig,
    create_data_fetcher,
)
from .local import LocalDataFetcher

__all__ = [
    "ApiDataFetcher",
    "ApiFetcherConfig",
    "DataFetcher",
    "FETCHER_TYPES",
    "FetcherConfig",
    "FetcherType",
    "LocalDataFetcher",
    "LocalFetcherConfig",
    "create_data_fetcher",
]
