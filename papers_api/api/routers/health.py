"""Health endpoint router composition for process liveness."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from papers_api.db import StorageConnectionPort
from papers_api.domain import domain_build_health_status


def api_create_health_router(storage_connection: StorageConnectionPort) -> APIRouter:
    """Create liveness router reporting cached storage connectivity.

    Args:
        storage_connection: Storage link whose cached state is reported.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when storage_connection is invalid.
    """

    if storage_connection is None:
        raise ValueError("storage_connection must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return process liveness with database connectivity.

        The status code is 200 regardless of connectivity; this is a liveness
        probe, not a readiness gate.

        Returns:
            JSONResponse: Health payload for operational checks.
        """

        health_status = domain_build_health_status(database_connected=storage_connection.db_is_connected())
        return JSONResponse(content=health_status.to_payload(), status_code=status.HTTP_200_OK)

    return router
