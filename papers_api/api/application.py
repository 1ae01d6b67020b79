"""FastAPI application factory for the papers service.

This module composes routers and middleware on top of collaborators that the
lifecycle orchestrator has already connected and initialized.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from papers_api.config import AppSettings
from papers_api.db import RepositoryProviderPort, StorageConnectionPort

from .middleware import api_install_middleware
from .routers import api_create_health_router, api_create_papers_router


def create_api_application(
    settings: AppSettings,
    storage_connection: StorageConnectionPort,
    repository_provider: RepositoryProviderPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for middleware policy.
        storage_connection: Storage link reported by the health endpoint.
        repository_provider: Provider used by the papers endpoint.

    Returns:
        FastAPI: Framework application instance.

    Raises:
        ValueError: Raised when a collaborator is missing.
    """
    application = FastAPI(title="Papers API")

    api_install_middleware(application)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(api_create_health_router(storage_connection=storage_connection))
    application.include_router(api_create_papers_router(repository_provider=repository_provider))

    return application
