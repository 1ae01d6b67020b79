"""Tests for health status composition."""

from datetime import datetime, timedelta, timezone

from papers_api.domain import HealthStatus, ServiceState, domain_build_health_status


def test_domain_health_status_maps_connectivity() -> None:
    """Map the connectivity flag onto the database field."""

    assert domain_build_health_status(database_connected=True).database == "connected"
    assert domain_build_health_status(database_connected=False).database == "disconnected"
    assert domain_build_health_status(database_connected=False).status == "ok"


def test_domain_health_payload_renders_utc_milliseconds() -> None:
    """Render timestamps as UTC ISO-8601 with millisecond precision and `Z`."""

    local_time = datetime(2026, 10, 18, 15, 4, 5, 123456, tzinfo=timezone(timedelta(hours=2)))

    payload = HealthStatus(status="ok", timestamp=local_time, database="connected").to_payload()

    assert payload == {"status": "ok", "timestamp": "2026-10-18T13:04:05.123Z", "database": "connected"}


def test_domain_service_state_values() -> None:
    """Expose stable lifecycle phase names."""

    assert [state.value for state in ServiceState] == ["initializing", "serving", "shutting_down", "terminated"]
