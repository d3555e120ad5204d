"""
Request logging middleware with structured logging.

Logs one line when a request arrives and one when it completes, with
method, path, client address, status code and duration.
"""
import time
from typing import Set
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from agent_hub.infrastructure.observability.logging import get_logger


logger = get_logger(__name__)


# Health check paths to skip logging (reduce noise)
HEALTH_CHECK_PATHS: Set[str] = {
    "/health",
}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for structured request/response logging.

    - Logs request method, path, client address, status code and duration
    - Logs 5xx responses at error level and 4xx at warning level
    - Skips health check endpoints
    - Adds an X-Process-Time header (milliseconds)
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.perf_counter()

        if request.url.path in HEALTH_CHECK_PATHS:
            return await call_next(request)

        log_context = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
        }

        logger.info("Request received", **log_context)

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            logger.error(
                "Request failed with exception",
                **log_context,
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=duration_ms,
            )
            raise

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        response_context = {
            **log_context,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        }

        if response.status_code >= 500:
            logger.error("Request completed with server error", **response_context)
        elif response.status_code >= 400:
            logger.warning("Request completed with client error", **response_context)
        else:
            logger.info("Request completed", **response_context)

        response.headers["X-Process-Time"] = str(duration_ms)
        return response
