"""Runtime package for process lifecycle orchestration."""

from papers_api.domain import ServiceState

from .interfaces import HttpServerPort, HttpServerStartupError, ServiceContext, ShutdownPolicy
from .orchestrator import (
    EXIT_CODE_GRACEFUL,
    EXIT_CODE_STARTUP_FAILURE,
    ServiceLifecycleOrchestrator,
)
from .server import UvicornHttpServer

__all__ = [
    "EXIT_CODE_GRACEFUL",
    "EXIT_CODE_STARTUP_FAILURE",
    "HttpServerPort",
    "HttpServerStartupError",
    "ServiceContext",
    "ServiceLifecycleOrchestrator",
    "ServiceState",
    "ShutdownPolicy",
    "UvicornHttpServer",
]
