"""API router package for endpoint composition."""

from .health import api_create_health_router
from .papers import PAPERS_LIST_LIMIT, api_create_papers_router

__all__ = ["PAPERS_LIST_LIMIT", "api_create_health_router", "api_create_papers_router"]
