"""Uvicorn-backed HTTP listener whose signals are owned by the orchestrator."""

import contextlib
from collections.abc import Iterator

import uvicorn
from fastapi import FastAPI

from .interfaces import HttpServerPort, HttpServerStartupError


class _OrchestratedUvicornServer(uvicorn.Server):
    """Uvicorn server that leaves SIGINT/SIGTERM to the lifecycle orchestrator."""

    @contextlib.contextmanager
    def capture_signals(self) -> Iterator[None]:
        yield

    def install_signal_handlers(self) -> None:
        return None


class UvicornHttpServer(HttpServerPort):
    """HTTP listener running a FastAPI application on uvicorn."""

    def __init__(self, application: FastAPI, host: str, port: int):
        """Initialize listener configuration without binding.

        Args:
            application: Application to serve.
            host: Interface to bind.
            port: TCP port to bind.

        Raises:
            ValueError: Raised when application is None.
        """

        if application is None:
            raise ValueError("application must not be None")
        config = uvicorn.Config(
            application,
            host=host,
            port=port,
            lifespan="off",
            log_config=None,
            access_log=False,
        )
        self._server = _OrchestratedUvicornServer(config=config)

    async def http_serve(self) -> None:
        """Bind and serve until stopped.

        Raises:
            HttpServerStartupError: Raised when uvicorn aborts startup.
        """

        try:
            await self._server.serve()
        except SystemExit as error:
            raise HttpServerStartupError(f"HTTP listener failed to start (exit status {error.code})") from error
        if not self._server.started:
            raise HttpServerStartupError("HTTP listener stopped before it started serving")

    def http_request_stop(self, force: bool) -> None:
        """Signal uvicorn to leave its main loop.

        Args:
            force: Skip connection draining when True.
        """

        if force:
            self._server.force_exit = True
        self._server.should_exit = True
