"""Typed interfaces for runtime-layer lifecycle responsibilities."""

from dataclasses import dataclass
from typing import Protocol

from papers_api.db import RepositoryProviderPort, StorageConnectionPort
from papers_api.domain import ServiceState


class HttpServerStartupError(RuntimeError):
    """Raised when the HTTP listener cannot be started or bound."""


@dataclass
class ServiceContext:
    """Process-wide handles and lifecycle phase.

    Built once at startup and shared by the HTTP layer and the orchestrator.

    Attributes:
        storage_connection: Process-owned storage link.
        repository_provider: Owner of typed repositories.
        state: Current lifecycle phase.
    """

    storage_connection: StorageConnectionPort
    repository_provider: RepositoryProviderPort
    state: ServiceState = ServiceState.INITIALIZING


@dataclass(frozen=True)
class ShutdownPolicy:
    """Shutdown behaviour knobs.

    Attributes:
        drain_in_flight_requests: Stop the listener and wait for in-flight requests before closing storage.
        close_timeout_seconds: Optional upper bound for repository close; None waits indefinitely.
    """

    drain_in_flight_requests: bool = False
    close_timeout_seconds: float | None = None


class HttpServerPort(Protocol):
    """Port definition for the HTTP listener driven by the orchestrator."""

    async def http_serve(self) -> None:
        """Bind the listener and serve until stopped.

        Raises:
            HttpServerStartupError: Raised when the listener cannot be bound.
        """

    def http_request_stop(self, force: bool) -> None:
        """Ask the listener to stop.

        Args:
            force: Skip waiting for in-flight requests when True.
        """
