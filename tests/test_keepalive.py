import asyncio

import pytest
from fastapi.testclient import TestClient

from mandram.config import settings
from mandram.main import app
from mandram.modules.keepalive.schemas import KeepaliveResult
from mandram.modules.keepalive.scheduler import keepalive_loop, run_keepalive_once
from mandram.modules.keepalive.service import KeepaliveService
from mandram.scripts import heartbeat


def test_write_ping_upserts_single_marker_row(empty_supabase):
    service = KeepaliveService(lambda: empty_supabase)

    first = service.ping("write")
    second = service.ping("write")

    assert first.success and second.success
    assert first.status == "Supabase kept active"
    assert first.timestamp
    rows = empty_supabase.tables["keepalive"]
    assert len(rows) == 1
    assert rows[0]["id"] == 1


def test_read_ping_returns_data(fake_supabase):
    result = KeepaliveService(lambda: fake_supabase).ping("read")

    assert result.success
    assert result.message == "Supabase heartbeat successful"
    assert result.data == [{"id": "e1"}]


def test_ping_failure_is_reported_not_raised(failing_supabase):
    result = KeepaliveService(lambda: failing_supabase).ping("write")

    assert not result.success
    assert "keepalive" in result.error


def test_keepalive_route_success(make_client, empty_supabase):
    client = make_client(empty_supabase)

    response = client.get("/api/keepalive")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert "timestamp" in body


def test_keepalive_route_read_mode(make_client, fake_supabase):
    client = make_client(fake_supabase)

    body = client.get("/api/keepalive", params={"mode": "read"}).json()

    assert body["success"] is True
    assert body["data"] == [{"id": "e1"}]


def test_keepalive_route_failure_is_500(make_client, failing_supabase):
    client = make_client(failing_supabase)

    response = client.get("/api/keepalive")

    assert response.status_code == 500
    assert response.json()["success"] is False


def test_keepalive_without_credentials_is_500(unconfigured_supabase):
    client = TestClient(app)

    response = client.get("/api/keepalive")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Missing Supabase env variables"}


def test_data_route_without_credentials_is_500(unconfigured_supabase):
    client = TestClient(app)

    response = client.get("/api/events")

    assert response.status_code == 500
    assert response.json()["error"] == "Missing Supabase env variables"


def test_scheduler_runs_one_ping(empty_supabase):
    result = asyncio.run(run_keepalive_once(KeepaliveService(lambda: empty_supabase)))

    assert result.success
    assert empty_supabase.executed == ["keepalive"]


def test_heartbeat_script_exit_code(unconfigured_supabase):
    assert heartbeat.main(["--mode", "read"]) == 1


def test_keepalive_route_rejects_unknown_mode(make_client, empty_supabase):
    client = make_client(empty_supabase)

    response = client.get("/api/keepalive", params={"mode": "delete"})

    assert response.status_code == 422
    assert empty_supabase.executed == []


def test_startup_starts_and_shutdown_clears_keepalive_task(monkeypatch, unconfigured_supabase):
    monkeypatch.setattr(settings, "keepalive_interval_seconds", 3600)

    with TestClient(app) as client:
        task = app.state.keepalive_task
        assert task is not None
        assert not task.done()
        assert client.get("/health").status_code == 200

    assert app.state.keepalive_task is None


def test_no_keepalive_task_when_interval_is_zero(monkeypatch, unconfigured_supabase):
    monkeypatch.setattr(settings, "keepalive_interval_seconds", 0)

    with TestClient(app):
        assert app.state.keepalive_task is None


class FlakyService:
    """Raises on the first ping, then succeeds."""

    def __init__(self):
        self.calls = 0
        self.recovered = asyncio.Event()
        self.loop = asyncio.get_running_loop()

    def ping(self, mode):
        self.calls += 1
        if self.calls == 1:
            raise RuntimeError("connection reset")
        self.loop.call_soon_threadsafe(self.recovered.set)
        return KeepaliveResult(success=True, timestamp="2026-01-01T00:00:00Z")


@pytest.mark.asyncio
async def test_keepalive_loop_survives_failed_ping():
    service = FlakyService()
    task = asyncio.create_task(keepalive_loop(0, service))

    await asyncio.wait_for(service.recovered.wait(), timeout=5)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert service.calls >= 2
