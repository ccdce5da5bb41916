"""Runnable lessons: each demo drives one product family through its factory."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from ..datasources import DataSource, config_from_mapping, create_data_source
from ..errors import FactoryMethodError, NotFoundError
from ..fetchers import FetcherConfig, create_data_fetcher
from ..notifications import send_notification
from ..settings import VariantSettings
from ..storage import InMemoryKeyValueStorage, KeyValueStorage
from ..utils.logging import get_logger

LOGGER = get_logger(__name__)

Writer = Callable[[str], None]

UNKNOWN_NOTIFICATION = "telegram"
UNKNOWN_DATASOURCE = "graphql"

SAMPLE_USERS: tuple[dict[str, str], ...] = (
    {"name": "Alice", "email": "alice@example.com"},
    {"name": "Bob", "email": "bob@example.com"},
)


def run_notifications(
    variants: Sequence[VariantSettings], *, message: str = "Welcome to our app!", write: Writer = print
) -> int:
    """Send ``message`` through every configured channel, then through an unknown one.

    Returns the number of channels that delivered.
    """

    write("=== Notification Factory Demo ===")
    delivered = 0
    for variant in variants:
        if send_notification(variant.type, message, variant.options or None):
            delivered += 1
    if not send_notification(UNKNOWN_NOTIFICATION, message):
        write(f"'{UNKNOWN_NOTIFICATION}' rejected by the factory")
    write(f"Delivered through {delivered} of {len(variants)} channels")
    return delivered


async def run_fetchers(
    variants: Sequence[VariantSettings],
    *,
    storage: KeyValueStorage | None = None,
    write: Writer = print,
) -> int:
    write("=== Data Fetcher Factory Demo ===")
    if storage is None:
        storage = InMemoryKeyValueStorage()
    completed = 0
    for variant in variants:
        mapping = variant.as_mapping()
        if variant.type.lower() == "local":
            mapping.setdefault("storage", storage)
        try:
            fetcher = create_data_fetcher(variant.type, FetcherConfig.from_mapping(mapping))
        except FactoryMethodError as exc:
            LOGGER.error(str(exc), extra={"event": "demo.fetcher.rejected", "type": variant.type})
            continue

        try:
            data = await fetcher.fetch()
        except NotFoundError as exc:
            LOGGER.warning(str(exc), extra={"event": "demo.fetcher.empty", "type": variant.type})
            fetcher.cache({"id": 1, "name": "John Doe"})
            data = await fetcher.fetch()
        await fetcher.fetch()
        write(f"{variant.type}: {data}")
        fetcher.clear()
        completed += 1
    return completed


async def exercise_data_source(source: DataSource[Any], *, write: Writer = print) -> list[dict[str, Any]]:
    """Walk one data source through every CRUD operation."""

    created = [await source.create(user) for user in SAMPLE_USERS]
    users = await source.fetch()
    write(f"Users: {', '.join(str(user.get('name')) for user in users) or '<none>'}")

    first = created[0]
    renamed = await source.update(first["id"], {"name": f"{first['name']} Smith"})
    write(f"Updated: {renamed.get('name')}")

    await source.delete(created[-1]["id"])
    await source.delete(created[-1]["id"])

    try:
        await source.update("missing-id", {"name": "X"})
    except NotFoundError as exc:
        LOGGER.error(str(exc), extra={"event": "demo.datasource.not_found"})
    else:
        write("update('missing-id') returned a synthesized record")

    return await source.fetch()


async def run_datasources(
    variants: Sequence[VariantSettings],
    *,
    storage: KeyValueStorage | None = None,
    write: Writer = print,
) -> int:
    write("=== DataSource Factory Demo ===")
    if storage is None:
        storage = InMemoryKeyValueStorage()
    completed = 0
    for variant in [*variants, VariantSettings(type=UNKNOWN_DATASOURCE)]:
        write(f"--- {variant.type} ---")
        try:
            source = create_data_source(config_from_mapping(variant.as_mapping(), storage=storage))
        except FactoryMethodError as exc:
            LOGGER.error(str(exc), extra={"event": "demo.datasource.rejected", "type": variant.type})
            continue
        remaining = await exercise_data_source(source, write=write)
        write(f"Remaining: {len(remaining)}")
        completed += 1
    return completed


__all__ = [
    "SAMPLE_USERS",
    "UNKNOWN_DATASOURCE",
    "UNKNOWN_NOTIFICATION",
    "exercise_data_source",
    "run_datasources",
    "run_fetchers",
    "run_notifications",
]
