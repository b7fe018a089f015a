import pytest

from fingerprint_dashboard.models.schemas import AccessLogEntry
from fingerprint_dashboard.services.log_store import LogStore


def entry(device_id="D1", name="Alice", ts=1000, granted=True):
    return AccessLogEntry(
        deviceId=device_id, userName=name, granted=granted, timestamp=ts, receivedAt=ts
    )


def test_append_assigns_ids_and_puts_newest_first():
    store = LogStore(capacity=10)
    first = store.append(entry(name="first"))
    second = store.append(entry(name="second"))

    assert first != second
    logs, total = store.query()
    assert [e.userName for e in logs] == ["second", "first"]
    assert total == 2


def test_append_keeps_existing_id():
    store = LogStore(capacity=10)
    e = entry()
    e.id = 42
    assert store.append(e) == 42


def test_capacity_keeps_most_recent_entries():
    store = LogStore(capacity=500, default_limit=50, max_limit=1000)
    for i in range(501):
        store.append(entry(name=f"user-{i}", ts=i))

    assert len(store) == 500
    logs, total = store.query(limit=1000)
    names = [e.userName for e in logs]
    assert total == 500
    assert "user-0" not in names
    assert names[0] == "user-500"
    assert names[-1] == "user-1"


def test_query_filters_by_device_and_limit():
    store = LogStore(capacity=100, default_limit=50, max_limit=100)
    for i in range(30):
        store.append(entry(device_id="D1" if i % 2 else "D2", ts=i))

    logs, total = store.query(device_id="D1", limit=5)
    assert len(logs) == 5
    assert total == 15
    assert all(e.deviceId == "D1" for e in logs)


def test_query_default_and_max_limit():
    store = LogStore(capacity=500, default_limit=50, max_limit=100)
    for i in range(300):
        store.append(entry(ts=i))

    assert len(store.query()[0]) == 50
    assert len(store.query(limit=1000)[0]) == 100
    assert len(store.query(limit=3)[0]) == 3


def test_append_then_query_one_returns_that_entry():
    store = LogStore(capacity=5)
    store.append(entry(device_id="D1", name="old"))
    store.append(entry(device_id="D2", name="other"))
    new_id = store.append(entry(device_id="D1", name="new"))

    logs, _ = store.query(device_id="D1", limit=1)
    assert [e.id for e in logs] == [new_id]


def test_entries_since():
    store = LogStore(capacity=10)
    store.append(entry(ts=100))
    store.append(entry(ts=200))
    store.append(entry(ts=300))

    assert [e.timestamp for e in store.entries_since(200)] == [300, 200]


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        LogStore(capacity=0)


def test_entries_since_filters_on_receive_time():
    store = LogStore(capacity=10)
    store.append(AccessLogEntry(deviceId="D1", userName="A", granted=True, timestamp=42, receivedAt=5000))
    store.append(AccessLogEntry(deviceId="D1", userName="B", granted=True, timestamp=9000, receivedAt=100))

    assert [e.userName for e in store.entries_since(1000)] == ["A"]
