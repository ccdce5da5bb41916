"""Exception types raised by the factories and their products."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping


class FactoryMethodError(RuntimeError):
    """Base class for every error raised by this package."""

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = dict(details or {})

    def __str__(self) -> str:
        base = super().__str__()
        if not self.details:
            return base
        try:
            detail_repr = json.dumps(self.details, ensure_ascii=False, sort_keys=True)
        except TypeError:
            detail_repr = str(self.details)
        return f"{base} | details: {detail_repr}"


class UnknownVariantError(FactoryMethodError, ValueError):
    """Raised when a factory receives a tag outside its closed set."""

    def __init__(self, tag: object, *, family: str, supported: Iterable[str] = ()) -> None:
        self.tag = tag
        self.family = family
        self.supported = tuple(supported)
        super().__init__(
            f"Unknown {family} type: {tag}",
            details={"supported": list(self.supported)} if self.supported else None,
        )


class ConfigError(FactoryMethodError, ValueError):
    """Raised when a recognised tag comes with a missing or invalid field."""

    def __init__(self, tag: str, field: str, *, reason: str = "is required") -> None:
        self.tag = tag
        self.field = field
        super().__init__(f"{tag}: '{field}' {reason}", details={"type": tag, "field": field})


class NotFoundError(FactoryMethodError, LookupError):
    """Raised when an identity-keyed operation targets a missing record."""

    def __init__(self, entity_id: str, *, source: str | None = None) -> None:
        self.entity_id = entity_id
        self.source = source
        super().__init__(
            f"Item {entity_id} not found",
            details={"source": source} if source else None,
        )


__all__ = [
    "ConfigError",
    "FactoryMethodError",
    "NotFoundError",
    "UnknownVariantError",
]
