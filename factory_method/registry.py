"""Registry-backed factory shared by the product families."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Mapping, TypeVar

from .errors import UnknownVariantError

ProductT = TypeVar("ProductT")


class VariantRegistry(Generic[ProductT]):
    """Map a closed set of tags to product builders.

    Lookups are case-insensitive. When ``expected`` is given the builders must
    cover it exactly, so a tag added to the family without a builder fails as
    soon as the registry is built (normally at import time).
    """

    def __init__(
        self,
        family: str,
        builders: Mapping[str, Callable[..., ProductT]],
        *,
        expected: Iterable[str] | None = None,
    ) -> None:
        self._family = family
        self._builders = {key.strip().lower(): value for key, value in builders.items()}
        if expected is not None:
            wanted = {tag.strip().lower() for tag in expected}
            missing = sorted(wanted - self._builders.keys())
            extra = sorted(self._builders.keys() - wanted)
            if missing or extra:
                raise TypeError(
                    f"{family} registry out of sync: missing builders {missing}, unexpected {extra}"
                )

    @property
    def family(self) -> str:
        return self._family

    def tags(self) -> tuple[str, ...]:
        return tuple(self._builders)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and tag.strip().lower() in self._builders

    def builder_for(self, tag: str) -> Callable[..., ProductT]:
        key = tag.strip().lower() if isinstance(tag, str) else tag
        try:
            return self._builders[key]
        except (KeyError, TypeError) as exc:
            raise UnknownVariantError(tag, family=self._family, supported=self.tags()) from exc

    def create(self, tag: str, *args: object, **kwargs: object) -> ProductT:
        return self.builder_for(tag)(*args, **kwargs)


__all__ = ["VariantRegistry"]
