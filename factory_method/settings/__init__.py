"""Settings package exports."""

from .loader import CONFIG_ENV_VAR, AppConfig, LoggingSettings, VariantSettings, load_config

__all__ = [
    "AppConfig",
    "CONFIG_ENV_VAR",
    "LoggingSettings",
    "VariantSettings",
    "load_config",
]
