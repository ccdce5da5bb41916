"""Behavioural tests for the data source variants."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest

from factory_method.datasources import DataSource, LocalStorageDataSourceConfig, create_data_source
from factory_method.errors import NotFoundError
from factory_method.storage import InMemoryKeyValueStorage

_REST = {"type": "rest", "base_url": "https://api.example.com", "endpoint": "users"}


@pytest.fixture(params=["memory", "localstorage"])
def stateful_source(request: pytest.FixtureRequest) -> DataSource[Any]:
    if request.param == "memory":
        return create_data_source({"type": "memory"})
    return create_data_source({"type": "localstorage", "key": "users"})


@pytest.mark.asyncio
async def test_create_then_fetch_one_returns_equal_record(stateful_source: DataSource[Any]) -> None:
    created = await stateful_source.create({"name": "Alice", "email": "alice@example.com"})

    assert isinstance(created["id"], str) and created["id"]
    assert await stateful_source.fetch_one(created["id"]) == created


@pytest.mark.asyncio
async def test_fetch_keeps_creation_order(stateful_source: DataSource[Any]) -> None:
    alice = await stateful_source.create({"name": "Alice"})
    bob = await stateful_source.create({"name": "Bob"})

    users = await stateful_source.fetch()

    assert alice["id"] != bob["id"]
    assert [user["name"] for user in users] == ["Alice", "Bob"]
    assert users == [alice, bob]


@pytest.mark.asyncio
async def test_fetch_on_empty_source_is_empty(stateful_source: DataSource[Any]) -> None:
    assert await stateful_source.fetch() == []
    assert await stateful_source.fetch_one("nope") is None


@pytest.mark.asyncio
async def test_caller_supplied_id_is_ignored(stateful_source: DataSource[Any]) -> None:
    created = await stateful_source.create({"id": "mine", "name": "Alice"})

    assert created["id"] != "mine"
    updated = await stateful_source.update(created["id"], {"id": "other", "name": "Al"})
    assert updated["id"] == created["id"]


@pytest.mark.asyncio
async def test_update_merges_fields(stateful_source: DataSource[Any]) -> None:
    created = await stateful_source.create({"name": "Alice", "email": "alice@example.com"})

    updated = await stateful_source.update(created["id"], {"email": "a@example.org", "role": "admin"})

    assert updated == {
        "id": created["id"],
        "name": "Alice",
        "email": "a@example.org",
        "role": "admin",
    }
    assert await stateful_source.fetch_one(created["id"]) == updated


@pytest.mark.asyncio
async def test_update_missing_id_raises_not_found(stateful_source: DataSource[Any]) -> None:
    await stateful_source.create({"name": "Alice"})

    with pytest.raises(NotFoundError) as excinfo:
        await stateful_source.update("missing-id", {"name": "X"})

    assert excinfo.value.entity_id == "missing-id"
    # The instance is still usable after the failure.
    assert len(await stateful_source.fetch()) == 1


@pytest.mark.asyncio
async def test_delete_is_idempotent(stateful_source: DataSource[Any]) -> None:
    alice = await stateful_source.create({"name": "Alice"})
    bob = await stateful_source.create({"name": "Bob"})

    await stateful_source.delete(alice["id"])
    assert await stateful_source.fetch_one(alice["id"]) is None
    await stateful_source.delete(alice["id"])
    await stateful_source.delete("never-existed")

    assert await stateful_source.fetch_one(alice["id"]) is None
    assert await stateful_source.fetch() == [bob]


@pytest.mark.asyncio
async def test_fetch_returns_snapshot(stateful_source: DataSource[Any]) -> None:
    created = await stateful_source.create({"name": "Alice"})

    snapshot = await stateful_source.fetch()
    snapshot[0]["name"] = "Mallory"
    snapshot.clear()
    created["name"] = "Eve"

    assert [user["name"] for user in await stateful_source.fetch()] == ["Alice"]


@pytest.mark.asyncio
async def test_snapshots_do_not_share_nested_values(stateful_source: DataSource[Any]) -> None:
    tags = ["admin"]
    created = await stateful_source.create({"name": "Alice", "tags": tags})

    tags.append("from-input")
    created["tags"].append("from-create")
    (await stateful_source.fetch())[0]["tags"].append("from-fetch")
    (await stateful_source.fetch_one(created["id"]))["tags"].append("from-fetch-one")
    updated = await stateful_source.update(created["id"], {"tags": ["admin", "ops"]})
    updated["tags"].clear()

    assert (await stateful_source.fetch_one(created["id"]))["tags"] == ["admin", "ops"]


@pytest.mark.asyncio
async def test_memory_instances_do_not_share_state() -> None:
    first = create_data_source({"type": "memory"})
    second = create_data_source({"type": "memory"})

    await first.create({"name": "Alice"})

    assert await second.fetch() == []


@pytest.mark.asyncio
async def test_localstorage_writes_whole_collection_as_json() -> None:
    storage = InMemoryKeyValueStorage()
    source = create_data_source(LocalStorageDataSourceConfig(key="users", storage=storage))

    alice = await source.create({"name": "Alice"})
    bob = await source.create({"name": "Bob"})

    assert json.loads(storage.get("users") or "[]") == [alice, bob]
    assert list(storage.keys()) == ["users"]


@pytest.mark.asyncio
async def test_localstorage_shared_medium_is_visible_to_fresh_instance() -> None:
    storage = InMemoryKeyValueStorage()
    writer = create_data_source({"type": "localstorage", "key": "users", "storage": storage})
    await writer.create({"name": "Charlie", "email": "charlie@example.com"})

    reader = create_data_source({"type": "localstorage", "key": "users", "storage": storage})
    other_key = create_data_source({"type": "localstorage", "key": "admins", "storage": storage})
    unshared = create_data_source({"type": "localstorage", "key": "users"})

    assert [user["name"] for user in await reader.fetch()] == ["Charlie"]
    assert await other_key.fetch() == []
    assert await unshared.fetch() == []


class _InterleavingStorage(InMemoryKeyValueStorage):
    """Runs ``on_first_read`` right after the first ``get`` returns."""

    def __init__(self) -> None:
        super().__init__()
        self.on_first_read: Any = None

    def get(self, key: str) -> str | None:
        value = super().get(key)
        hook, self.on_first_read = self.on_first_read, None
        if hook is not None:
            hook()
        return value


@pytest.mark.asyncio
async def test_localstorage_read_modify_write_is_not_atomic() -> None:
    storage = _InterleavingStorage()
    source = create_data_source({"type": "localstorage", "key": "users", "storage": storage})

    def concurrent_writer() -> None:
        storage.set("users", json.dumps([{"id": "intruder", "name": "Mallory"}]))

    storage.on_first_read = concurrent_writer
    await source.create({"name": "Alice"})

    # The write that landed between our read and our write is lost.
    assert [user["name"] for user in await source.fetch()] == ["Alice"]


@pytest.mark.asyncio
async def test_localstorage_rejects_non_list_blob() -> None:
    storage = InMemoryKeyValueStorage({"users": json.dumps({"id": "x"})})
    source = create_data_source({"type": "localstorage", "key": "users", "storage": storage})

    with pytest.raises(ValueError, match="does not hold a list"):
        await source.fetch()


@pytest.mark.asyncio
async def test_rest_stub_returns_placeholders(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    source = create_data_source(_REST)

    assert await source.fetch() == []
    assert await source.fetch_one("abc") is None
    created = await source.create({"name": "Dave", "email": "dave@example.com"})
    await source.delete(created["id"])

    assert created["name"] == "Dave" and created["id"]
    requests_logged = [(r.method, r.url) for r in caplog.records if hasattr(r, "method")]
    assert requests_logged == [
        ("GET", "https://api.example.com/users"),
        ("GET", "https://api.example.com/users/abc"),
        ("POST", "https://api.example.com/users"),
        ("DELETE", f"https://api.example.com/users/{created['id']}"),
    ]


@pytest.mark.asyncio
async def test_update_on_missing_id_diverges_between_variants() -> None:
    memory = create_data_source({"type": "memory"})
    local = create_data_source({"type": "localstorage", "key": "users"})
    rest = create_data_source(_REST)

    for source in (memory, local):
        with pytest.raises(NotFoundError):
            await source.update("missing-id", {"name": "X"})

    synthesized = await rest.update("missing-id", {"name": "X"})
    assert synthesized == {"id": "missing-id", "name": "X"}
