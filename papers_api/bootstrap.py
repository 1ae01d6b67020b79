"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from papers_api.api import create_api_application
from papers_api.config import AppSettings, config_load_settings
from papers_api.db import SQLAlchemyRepositoryProvider, SQLAlchemyStorageConnection
from papers_api.observability import observability_get_logger
from papers_api.runtime import (
    ServiceContext,
    ServiceLifecycleOrchestrator,
    ShutdownPolicy,
    UvicornHttpServer,
)

logger = observability_get_logger(__name__)


def bootstrap_create_service_context(settings: AppSettings) -> ServiceContext:
    """Build the process-wide service context without connecting anything.

    Args:
        settings: Validated runtime settings.

    Returns:
        ServiceContext: Context in the `initializing` phase.
    """

    storage_connection = SQLAlchemyStorageConnection(
        database_url=settings.database_url,
        connect_timeout_seconds=settings.database_connect_timeout_seconds,
    )
    repository_provider = SQLAlchemyRepositoryProvider(storage_connection=storage_connection)
    return ServiceContext(storage_connection=storage_connection, repository_provider=repository_provider)


def bootstrap_create_application(settings: AppSettings, context: ServiceContext) -> FastAPI:
    """Assemble the HTTP application on top of the service context.

    Args:
        settings: Validated runtime settings.
        context: Service context whose collaborators back the routes.

    Returns:
        FastAPI: Fully composed FastAPI application instance.
    """

    return create_api_application(
        settings=settings,
        storage_connection=context.storage_connection,
        repository_provider=context.repository_provider,
    )


def bootstrap_create_orchestrator(settings: AppSettings | None = None) -> ServiceLifecycleOrchestrator:
    """Build the lifecycle orchestrator for the API runtime.

    Args:
        settings: Optional pre-loaded settings; loaded from the environment when omitted.

    Returns:
        ServiceLifecycleOrchestrator: Orchestrator ready to run.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    context = bootstrap_create_service_context(resolved_settings)

    def _server_factory() -> UvicornHttpServer:
        application = bootstrap_create_application(resolved_settings, context)
        base_url = f"http://localhost:{resolved_settings.application_port}"
        logger.info(
            "server starting",
            url=base_url,
            health_check=f"{base_url}/health",
            papers_api=f"{base_url}/api/papers",
            database=context.storage_connection.db_connection_label(),
        )
        return UvicornHttpServer(
            application=application,
            host=resolved_settings.application_host,
            port=resolved_settings.application_port,
        )

    return ServiceLifecycleOrchestrator(
        context=context,
        server_factory=_server_factory,
        shutdown_policy=ShutdownPolicy(
            drain_in_flight_requests=resolved_settings.shutdown_drain_enabled,
            close_timeout_seconds=resolved_settings.shutdown_close_timeout_seconds,
        ),
    )
