"""Tests for API health endpoint behavior.

These tests validate that the liveness probe always answers 200 and reports
cached database connectivity.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from papers_api.api.application import create_api_application
from papers_api.config import AppSettings


class _StorageConnectionStub:
    """Test double exposing a fixed connectivity flag."""

    def __init__(self, connected: bool):
        self.connected = connected
        self.is_connected_calls = 0

    def db_connect(self) -> None:
        self.connected = True

    def db_is_connected(self) -> bool:
        self.is_connected_calls += 1
        return self.connected

    def db_disconnect(self) -> None:
        self.connected = False


class _BrokenStorageConnection(_StorageConnectionStub):
    """Test double whose connectivity read faults."""

    def db_is_connected(self) -> bool:
        raise RuntimeError("connectivity read failed")


class _RepositoryProviderStub:
    """Minimal provider stub for API factory dependency injection."""

    def db_initialize(self) -> None:
        return None

    def db_get_paper_repository(self):
        raise RuntimeError("not used by health tests")

    def db_close(self) -> None:
        return None


def _build_client(storage_connection) -> TestClient:
    application = create_api_application(
        AppSettings(environment_name="test"),
        storage_connection,
        _RepositoryProviderStub(),
    )
    return TestClient(application)


def test_api_health_reports_connected_database() -> None:
    """Return HTTP 200 with `connected` when the storage link is open."""

    response = _build_client(_StorageConnectionStub(connected=True)).get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["database"] == "connected"


def test_api_health_stays_ok_when_database_is_disconnected() -> None:
    """Return HTTP 200 with `disconnected`; connectivity never changes the status code."""

    response = _build_client(_StorageConnectionStub(connected=False)).get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "timestamp": response.json()["timestamp"],
        "database": "disconnected",
    }


def test_api_health_reflects_current_state_on_every_call() -> None:
    """Compose a fresh status per request instead of caching the first answer."""

    storage_connection = _StorageConnectionStub(connected=True)
    client = _build_client(storage_connection)

    first_response = client.get("/health")
    storage_connection.connected = False
    second_response = client.get("/health")

    assert first_response.json()["database"] == "connected"
    assert second_response.json()["database"] == "disconnected"
    assert storage_connection.is_connected_calls == 2


def test_api_health_timestamp_is_current_utc_iso8601() -> None:
    """Render an ISO-8601 UTC timestamp within one second of wall-clock time."""

    client = _build_client(_StorageConnectionStub(connected=True))

    before = datetime.now(timezone.utc)
    timestamp_text = client.get("/health").json()["timestamp"]

    assert timestamp_text.endswith("Z")
    parsed_timestamp = datetime.fromisoformat(timestamp_text.replace("Z", "+00:00"))
    assert parsed_timestamp.tzinfo is not None
    assert abs((parsed_timestamp - before).total_seconds()) <= 1.0
    assert parsed_timestamp <= datetime.now(timezone.utc)


def test_api_health_does_not_mask_connectivity_read_faults() -> None:
    """Let a faulting connectivity read propagate to the runtime."""

    client = _build_client(_BrokenStorageConnection(connected=True))

    with pytest.raises(RuntimeError, match="connectivity read failed"):
        client.get("/health")
