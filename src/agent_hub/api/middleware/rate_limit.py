# src/agent_hub/api/middleware/rate_limit.py
"""
Rate limiting using slowapi.

Every request under the API prefix draws on one fixed-window budget per
client address (100 requests per 15 minutes by default). The check runs in
middleware, before routing and body validation, so malformed bodies and
unknown /api paths count too and an exhausted client always gets 429.
Paths outside the prefix, such as /health, are never limited.

Each application builds its own Limiter from the settings it was created
with, so two apps in one process never share counters.

Usage:
    app = FastAPI()
    setup_rate_limiting(app, settings)
"""
import math
import time

from fastapi import FastAPI, Request
from limits import RateLimitItem, parse
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from agent_hub.api.middleware.errors import app_error_response
from agent_hub.config.settings import Settings
from agent_hub.domain.exceptions import RateLimited
from agent_hub.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

# Scope name shared by every API route, so they draw on one budget
API_SCOPE = "api"


def get_ip_key(request: Request) -> str:
    """
    Rate limit key based on client IP address.

    Args:
        request: FastAPI request object

    Returns:
        Rate limit key string
    """
    ip = get_remote_address(request)
    return f"ip:{ip}"


def create_rate_limiter() -> Limiter:
    """
    Create and configure a rate limiter.

    Returns:
        Limiter using in-memory fixed-window counters
    """
    return Limiter(
        key_func=get_ip_key,
        default_limits=[],  # No default limits - the middleware applies the API budget
        storage_uri="memory://",
        strategy="fixed-window",
        headers_enabled=False,
    )


def is_api_path(path: str, api_prefix: str) -> bool:
    return path == api_prefix or path.startswith(f"{api_prefix}/")


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Enforce the shared API budget before routing.

    Args:
        app: ASGI application
        limiter: Limiter owning this application's counters
        limit: Parsed limit, e.g. parse("100/15 minutes")
        api_prefix: Only paths under this prefix are limited
    """

    def __init__(self, app, limiter: Limiter, limit: RateLimitItem, api_prefix: str):
        super().__init__(app)
        self.limiter = limiter
        self.limit = limit
        self.api_prefix = api_prefix

    async def dispatch(self, request: Request, call_next) -> Response:
        if not self.limiter.enabled or not is_api_path(request.url.path, self.api_prefix):
            return await call_next(request)

        key = get_ip_key(request)
        if self.limiter.limiter.hit(self.limit, key, API_SCOPE):
            return await call_next(request)

        return self._reject(request, key)

    def _reject(self, request: Request, key: str) -> Response:
        """Render the RateLimited envelope; Retry-After is the time left in the window."""
        reset_time, _ = self.limiter.limiter.get_window_stats(self.limit, key, API_SCOPE)
        retry_after = max(1, math.ceil(reset_time - time.time()))
        logger.warning(
            "Rate limit exceeded",
            key=key,
            path=request.url.path,
            limit=str(self.limit),
        )
        response = app_error_response(
            request,
            RateLimited(
                retry_after=retry_after,
                details={"limit": str(self.limit)},
            ),
        )
        response.headers["Retry-After"] = str(retry_after)
        return response


def setup_rate_limiting(app: FastAPI, settings: Settings) -> Limiter:
    """
    Build this application's limiter and install the rate limit middleware.

    Args:
        app: FastAPI application instance
        settings: Application settings (limit string, prefix, on/off switch)

    Returns:
        The limiter, also stored on app.state.limiter
    """
    limiter = create_rate_limiter()
    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter

    app.add_middleware(
        RateLimitMiddleware,
        limiter=limiter,
        limit=parse(settings.rate_limit_api),
        api_prefix=settings.api_prefix,
    )

    if settings.rate_limit_enabled:
        logger.info("Rate limiting enabled", limit=settings.rate_limit_api, scope=API_SCOPE)
    else:
        logger.info("Rate limiting is disabled")
    return limiter
