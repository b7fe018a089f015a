from fastapi.testclient import TestClient

from fingerprint_dashboard.main import create_app
from fingerprint_dashboard.models.schemas import AccessLogEntry
from fingerprint_dashboard.services.log_archive import LogArchive


def test_disabled_archive_is_a_no_op():
    archive = LogArchive.from_url("")
    assert not archive.enabled
    assert archive.health() == "disabled"
    archive.record("access", AccessLogEntry(deviceId="D1", userName="A", granted=True, timestamp=1, receivedAt=1))
    assert archive.count() == 0


def test_archive_writes_rows(tmp_path):
    archive = LogArchive.from_url(f"sqlite:///{tmp_path / 'archive.db'}")
    entry = AccessLogEntry(id=3, deviceId="D1", userName="A", granted=True, timestamp=1, receivedAt=2)
    archive.record("access", entry)

    assert archive.health() == "ok"
    assert archive.count("access") == 1
    row = archive.db.fetch_one("SELECT entry_id, device_id, received_at FROM log_archive")
    assert (row["entry_id"], row["device_id"], row["received_at"]) == (3, "D1", 2)
    archive.close()


def test_archive_failure_is_swallowed(tmp_path):
    archive = LogArchive.from_url(f"sqlite:///{tmp_path / 'archive.db'}")
    archive.db.execute_query("DROP TABLE log_archive")

    archive.record("event", AccessLogEntry(deviceId="D1", userName="A", granted=True, timestamp=1, receivedAt=1))
    archive.close()


def test_ingested_logs_reach_archive(settings, tmp_path):
    settings.ARCHIVE_DB_URL = f"sqlite:///{tmp_path / 'archive.db'}"
    app = create_app(settings)

    with TestClient(app) as client:
        client.post("/logs/access", json={"deviceId": "D1", "userName": "A", "granted": True})
        client.post("/logs/event", json={"deviceId": "D1", "action": "boot"})
        client.post("/logs/enrollment", json={"deviceId": "D1", "status": "started"})
        assert client.get("/health").json()["archive"] == "ok"

        archive = app.state.archive
        assert archive.count() == 3
        assert archive.count("event") == 1


def test_unreachable_archive_does_not_block_startup(settings, tmp_path):
    settings.ARCHIVE_DB_URL = f"sqlite:///{tmp_path / 'missing_dir' / 'archive.db'}"
    app = create_app(settings)

    with TestClient(app) as client:
        resp = client.post("/logs/access", json={"deviceId": "D1", "userName": "A", "granted": True})
        assert resp.status_code == 200
        assert client.get("/logs/access").json()["total"] == 1

        body = client.get("/health").json()
        assert body["status"] == "OK"
        assert body["archive"] == "error"
