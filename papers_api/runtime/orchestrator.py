"""Lifecycle orchestrator for ordered startup and signal-driven shutdown.

Startup is strictly sequential: storage connect, repository initialization,
then HTTP bind. Any startup failure is terminal. Shutdown runs once per
process, no matter how many termination signals arrive.
"""

from __future__ import annotations

import asyncio
import signal
import threading
from collections.abc import Callable

from papers_api.domain import ServiceState
from papers_api.observability import observability_get_logger

from .interfaces import HttpServerPort, ServiceContext, ShutdownPolicy

EXIT_CODE_GRACEFUL = 0
EXIT_CODE_STARTUP_FAILURE = 1

DEFAULT_SHUTDOWN_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)

logger = observability_get_logger(__name__)


class ServiceLifecycleOrchestrator:
    """Owns the service state machine and drives collaborators through it."""

    def __init__(
        self,
        context: ServiceContext,
        server_factory: Callable[[], HttpServerPort],
        shutdown_policy: ShutdownPolicy | None = None,
        shutdown_signals: tuple[signal.Signals, ...] = DEFAULT_SHUTDOWN_SIGNALS,
    ):
        """Initialize orchestrator.

        Args:
            context: Service context holding collaborators and lifecycle state.
            server_factory: Builds the HTTP listener once startup has succeeded.
            shutdown_policy: Drain and close-timeout policy, defaults to fast shutdown.
            shutdown_signals: Signals that trigger the shutdown protocol.

        Raises:
            ValueError: Raised when context or server_factory is None.
        """

        if context is None:
            raise ValueError("context must not be None")
        if server_factory is None:
            raise ValueError("server_factory must not be None")
        self._context = context
        self._server_factory = server_factory
        self._shutdown_policy = shutdown_policy or ShutdownPolicy()
        self._shutdown_signals = shutdown_signals
        self._shutdown_requested: asyncio.Event | None = None
        self._shutdown_signal: signal.Signals | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def state(self) -> ServiceState:
        """Return the current lifecycle phase."""

        return self._context.state

    def lifecycle_request_shutdown(self, received_signal: signal.Signals | None = None) -> None:
        """Request the shutdown protocol. Only the first request has an effect.

        Args:
            received_signal: Signal that triggered the request, if any.
        """

        if self._shutdown_requested is None:
            raise RuntimeError("shutdown requested before lifecycle_run() started")
        signal_name = received_signal.name if received_signal is not None else None
        if self._shutdown_requested.is_set():
            logger.warning("duplicate shutdown request ignored", signal=signal_name, state=self.state.value)
            return
        self._shutdown_signal = received_signal
        logger.info("shutdown requested", signal=signal_name, state=self.state.value)
        self._shutdown_requested.set()

    async def lifecycle_run(self) -> int:
        """Run startup, serve until a shutdown request, then shut down.

        Returns:
            int: Process exit status, 0 on graceful shutdown and 1 on startup failure.
        """

        self._loop = asyncio.get_running_loop()
        self._shutdown_requested = asyncio.Event()
        self._lifecycle_install_signal_handlers()
        try:
            return await self._lifecycle_run_phases()
        finally:
            self._lifecycle_remove_signal_handlers()

    async def _lifecycle_run_phases(self) -> int:
        if not await self._lifecycle_startup():
            self._context.state = ServiceState.TERMINATED
            return EXIT_CODE_STARTUP_FAILURE

        if self._shutdown_requested.is_set():
            logger.info("shutdown requested during startup, listener not started")
            await self._lifecycle_shutdown(server=None, server_task=None)
            return EXIT_CODE_GRACEFUL

        server = self._server_factory()
        self._context.state = ServiceState.SERVING
        server_task = asyncio.create_task(server.http_serve(), name="http-server")
        shutdown_task = asyncio.create_task(self._shutdown_requested.wait(), name="shutdown-wait")
        await asyncio.wait({server_task, shutdown_task}, return_when=asyncio.FIRST_COMPLETED)

        if not self._shutdown_requested.is_set():
            shutdown_task.cancel()
            server_error = server_task.exception()
            logger.error(
                "HTTP listener stopped unexpectedly",
                error=str(server_error) if server_error else None,
                error_type=type(server_error).__name__ if server_error else None,
            )
            await self._lifecycle_shutdown(server=None, server_task=None)
            return EXIT_CODE_STARTUP_FAILURE

        await self._lifecycle_shutdown(server=server, server_task=server_task)
        return EXIT_CODE_GRACEFUL

    async def _lifecycle_startup(self) -> bool:
        logger.info("service starting", state=self.state.value)
        try:
            await asyncio.to_thread(self._context.storage_connection.db_connect)
        except Exception as error:  # pylint: disable=broad-exception-caught
            logger.error("failed to start server: storage connection failed", error=str(error), exc_info=True)
            return False

        try:
            await asyncio.to_thread(self._context.repository_provider.db_initialize)
        except Exception as error:  # pylint: disable=broad-exception-caught
            logger.error("failed to start server: repository initialization failed", error=str(error), exc_info=True)
            return False

        logger.info("database connected successfully")
        return True

    async def _lifecycle_shutdown(
        self,
        server: HttpServerPort | None,
        server_task: asyncio.Task | None,
    ) -> None:
        self._context.state = ServiceState.SHUTTING_DOWN
        logger.info(
            "shutting down gracefully",
            signal=self._shutdown_signal.name if self._shutdown_signal is not None else None,
            drain=self._shutdown_policy.drain_in_flight_requests,
        )

        if server is not None and server_task is not None and self._shutdown_policy.drain_in_flight_requests:
            server.http_request_stop(force=False)
            await self._lifecycle_await_server(server_task)
            server_task = None

        try:
            await asyncio.wait_for(
                self._lifecycle_call_detached(self._context.repository_provider.db_close),
                timeout=self._shutdown_policy.close_timeout_seconds,
            )
            logger.info("repositories closed")
        except asyncio.TimeoutError:
            logger.error("repository close timed out", timeout_seconds=self._shutdown_policy.close_timeout_seconds)
        except Exception as error:  # pylint: disable=broad-exception-caught
            logger.error("repository close failed", error=str(error), exc_info=True)

        if server is not None and server_task is not None:
            server.http_request_stop(force=True)
            await self._lifecycle_await_server(server_task)

        self._context.state = ServiceState.TERMINATED
        logger.info("service terminated")

    async def _lifecycle_call_detached(self, blocking_call: Callable[[], None]) -> None:
        """Run a blocking call on a daemon thread that never blocks interpreter exit."""

        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()

        def _resolve(error: BaseException | None) -> None:
            if future.done():
                return
            if error is None:
                future.set_result(None)
            else:
                future.set_exception(error)

        def _target() -> None:
            outcome: BaseException | None = None
            try:
                blocking_call()
            except Exception as error:  # pylint: disable=broad-exception-caught
                outcome = error
            if not loop.is_closed():
                loop.call_soon_threadsafe(_resolve, outcome)

        threading.Thread(target=_target, name="repository-close", daemon=True).start()
        await future

    async def _lifecycle_await_server(self, server_task: asyncio.Task) -> None:
        try:
            await server_task
        except Exception as error:  # pylint: disable=broad-exception-caught
            logger.warning("HTTP listener exited with error during shutdown", error=str(error))

    def _lifecycle_install_signal_handlers(self) -> None:
        for shutdown_signal in self._shutdown_signals:
            try:
                self._loop.add_signal_handler(shutdown_signal, self.lifecycle_request_shutdown, shutdown_signal)
            except NotImplementedError:
                signal.signal(shutdown_signal, self._lifecycle_handle_signal_threadsafe)

    def _lifecycle_handle_signal_threadsafe(self, signal_number: int, _frame) -> None:
        self._loop.call_soon_threadsafe(self.lifecycle_request_shutdown, signal.Signals(signal_number))

    def _lifecycle_remove_signal_handlers(self) -> None:
        for shutdown_signal in self._shutdown_signals:
            try:
                self._loop.remove_signal_handler(shutdown_signal)
            except NotImplementedError:
                signal.signal(shutdown_signal, signal.SIG_DFL)
