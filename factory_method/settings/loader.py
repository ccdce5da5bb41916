"""Helpers for loading the demo configuration."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from ..errors import ConfigError

CONFIG_ENV_VAR = "FACTORY_METHOD_CONFIG"

_DEFAULT_NOTIFICATIONS: tuple[dict[str, Any], ...] = (
    {"type": "email", "to": "user@example.com", "subject": "Welcome"},
    {"type": "sms", "phone_number": "+1234567890"},
    {"type": "push", "device_id": "device-123", "title": "New Message"},
    {"type": "slack", "channel": "general"},
)

_DEFAULT_FETCHERS: tuple[dict[str, Any], ...] = (
    {"type": "api", "url": "https://api.example.com/users"},
    {"type": "local", "key": "users"},
)

_DEFAULT_DATASOURCES: tuple[dict[str, Any], ...] = (
    {"type": "memory"},
    {"type": "localstorage", "key": "users"},
    {"type": "rest", "base_url": "https://api.example.com", "endpoint": "users"},
)


@dataclass(slots=True)
class LoggingSettings:
    level: str = "INFO"
    structured: bool = False


@dataclass(slots=True)
class VariantSettings:
    """One ``[[section]]`` table: the variant tag plus its own fields."""

    type: str
    options: dict[str, Any] = field(default_factory=dict)

    def as_mapping(self) -> dict[str, Any]:
        data = dict(self.options)
        data["type"] = self.type
        return data


@dataclass(slots=True)
class AppConfig:
    logging: LoggingSettings
    notifications: list[VariantSettings]
    fetchers: list[VariantSettings]
    datasources: list[VariantSettings]
    source: Path | None = None


def _config_path(explicit: str | os.PathLike[str] | None = None) -> Path | None:
    if explicit:
        return Path(explicit)
    env_value = os.environ.get(CONFIG_ENV_VAR)
    return Path(env_value) if env_value else None


def _load_toml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("rb") as fp:
        return tomllib.load(fp)


def _build_variants(section: str, raw: Any, defaults: Iterable[dict[str, Any]]) -> list[VariantSettings]:
    if raw is None:
        raw = [dict(item) for item in defaults]
    if not isinstance(raw, list):
        raise ConfigError(section, section, reason="must be an array of tables")

    variants: list[VariantSettings] = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ConfigError(section, f"{section}[{index}]", reason="must be a table")
        tag = item.get("type")
        if not isinstance(tag, str) or not tag.strip():
            raise ConfigError(section, f"{section}[{index}].type")
        options = {k: v for k, v in item.items() if k != "type"}
        variants.append(VariantSettings(type=tag.strip(), options=options))
    return variants


def _build_logging(raw: Any) -> LoggingSettings:
    if raw is None:
        return LoggingSettings()
    if not isinstance(raw, dict):
        raise ConfigError("logging", "logging", reason="must be a table")
    level = raw.get("level", "INFO")
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.strip().upper()), int):
        raise ConfigError("logging", "level", reason="must be a level name")
    return LoggingSettings(level=level.strip().upper(), structured=bool(raw.get("structured", False)))


def load_config(config_path: str | os.PathLike[str] | None = None) -> AppConfig:
    """Load the demo configuration.

    The file is taken from ``config_path``, then ``$FACTORY_METHOD_CONFIG``.
    With neither, built-in defaults are returned. Sections missing from the
    file also fall back to their defaults.
    """

    path = _config_path(config_path)
    data = _load_toml(path) if path is not None else {}

    return AppConfig(
        logging=_build_logging(data.get("logging")),
        notifications=_build_variants("notifications", data.get("notifications"), _DEFAULT_NOTIFICATIONS),
        fetchers=_build_variants("fetchers", data.get("fetchers"), _DEFAULT_FETCHERS),
        datasources=_build_variants("datasources", data.get("datasources"), _DEFAULT_DATASOURCES),
        source=path,
    )


__all__ = [
    "AppConfig",
    "CONFIG_ENV_VAR",
    "LoggingSettings",
    "VariantSettings",
    "load_config",
]
