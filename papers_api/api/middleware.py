"""HTTP middleware for security headers and request logging."""

import time
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request

from papers_api.observability import observability_get_logger

SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": "default-src 'self'; frame-ancestors 'self'; object-src 'none'",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
}

REQUEST_ID_HEADER = "X-Request-ID"

logger = observability_get_logger("papers_api.access")


def api_install_middleware(application: FastAPI) -> None:
    """Register security-header and request-logging middleware.

    Args:
        application: Application receiving the middleware.

    Returns:
        None: Middleware is registered as a side effect.
    """

    @application.middleware("http")
    async def api_security_headers_middleware(request: Request, call_next):
        response = await call_next(request)
        for header_name, header_value in SECURITY_HEADERS.items():
            response.headers.setdefault(header_name, header_value)
        return response

    @application.middleware("http")
    async def api_request_logging_middleware(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        structlog.contextvars.bind_contextvars(request_id=request_id)
        started_at = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                "request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                client_host=request.client.host if request.client else None,
                duration_ms=round((time.perf_counter() - started_at) * 1000, 2),
            )
            return response
        except Exception as error:
            logger.error(
                "request failed",
                method=request.method,
                path=request.url.path,
                error=str(error),
                error_type=type(error).__name__,
            )
            raise
        finally:
            structlog.contextvars.clear_contextvars()
