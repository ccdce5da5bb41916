"""Factory Method lessons: notifications, data fetchers and data sources."""

from .errors import ConfigError, FactoryMethodError, NotFoundError, UnknownVariantError

__all__ = [
    "ConfigError",
    "FactoryMethodError",
    "NotFoundError",
    "UnknownVariantError",
]

__version__ = "0.1.0"
