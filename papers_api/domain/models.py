"""Typed domain models shared across runtime layers.

This module provides simple data contracts for the health surface and the
process lifecycle.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class ServiceState(str, Enum):
    """Process-wide lifecycle phase.

    Transitions: initializing -> serving -> shutting_down -> terminated, or
    initializing -> terminated when startup fails.
    """

    INITIALIZING = "initializing"
    SERVING = "serving"
    SHUTTING_DOWN = "shutting_down"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by the liveness surface.

    Attributes:
        status: Process status text, always `ok` while the process answers.
        timestamp: UTC instant the status was composed.
        database: Storage connectivity, `connected` or `disconnected`.
    """

    status: str
    timestamp: datetime
    database: str

    def to_payload(self) -> dict[str, str]:
        """Render the health status as a JSON-compatible payload.

        Returns:
            dict[str, str]: Payload with an ISO-8601 millisecond UTC timestamp.
        """

        rendered_timestamp = self.timestamp.astimezone(timezone.utc).isoformat(timespec="milliseconds")
        return {
            "status": self.status,
            "timestamp": rendered_timestamp.replace("+00:00", "Z"),
            "database": self.database,
        }


def domain_build_health_status(database_connected: bool, now: datetime | None = None) -> HealthStatus:
    """Compose a fresh health status from the current storage connectivity.

    Args:
        database_connected: Cached connectivity flag of the storage connection.
        now: Optional timestamp override, defaults to current UTC time.

    Returns:
        HealthStatus: Liveness status for one response.
    """

    return HealthStatus(
        status="ok",
        timestamp=now or datetime.now(timezone.utc),
        database="connected" if database_connected else "disconnected",
    )
