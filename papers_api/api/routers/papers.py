"""Papers API router composition for bounded paper listing."""

from fastapi import APIRouter, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from papers_api.db import RepositoryProviderPort
from papers_api.observability import observability_get_logger

PAPERS_LIST_LIMIT = 10

logger = observability_get_logger(__name__)


def api_create_papers_router(repository_provider: RepositoryProviderPort) -> APIRouter:
    """Create papers router exposing the bounded listing endpoint.

    Args:
        repository_provider: Provider owning the paper repository.

    Returns:
        APIRouter: Router exposing `/api/papers` endpoint.

    Raises:
        ValueError: Raised when repository_provider is invalid.
    """

    if repository_provider is None:
        raise ValueError("repository_provider must not be None")

    router = APIRouter(prefix="/api", tags=["papers"])

    @router.get("/papers")
    def api_paper_list() -> JSONResponse:
        """List the newest papers up to a fixed limit.

        Returns:
            JSONResponse: Success envelope with data and count, or error envelope with HTTP 500.
        """

        try:
            paper_repository = repository_provider.db_get_paper_repository()
            papers = list(paper_repository.db_paper_find_all(PAPERS_LIST_LIMIT))
        except Exception as error:  # pylint: disable=broad-exception-caught
            logger.warning("paper listing failed", error=str(error), error_type=type(error).__name__)
            payload = {
                "status": "error",
                "message": str(error) or "Unknown error",
            }
            return JSONResponse(content=payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

        payload = {
            "status": "success",
            "data": jsonable_encoder(papers),
            "count": len(papers),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
