"""
Request ID tracking middleware.

Gives every request a unique identifier for log correlation and echoes it
back in the `X-Request-ID` response header.
"""
import uuid
from contextvars import ContextVar
from typing import Any, Optional
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
import structlog

# Context variable for request ID (accessible outside the request object)
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def is_valid_uuid(value: str) -> bool:
    """
    Validate if a string is a valid UUID4.

    Args:
        value: String to validate

    Returns:
        True if valid UUID4, False otherwise
    """
    try:
        uuid_obj = uuid.UUID(value, version=4)
        return str(uuid_obj) == value and uuid_obj.version == 4
    except (ValueError, AttributeError):
        return False


def get_request_id() -> Optional[str]:
    """Get current request ID from context, if any."""
    return request_id_var.get(None)


def add_request_id_to_log(
    logger: Any, method_name: str, event_dict: dict
) -> dict:
    """
    Structlog processor adding the current request ID to log entries.

    Args:
        logger: Logger instance
        method_name: Name of the log method
        event_dict: Log event dictionary

    Returns:
        Event dictionary with request_id when one is set
    """
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request ID tracking.

    - Accepts an incoming X-Request-ID header when it is a valid UUID4
    - Generates a fresh UUID4 otherwise
    - Stores the ID in request.state and a context variable
    - Adds X-Request-ID to the response headers
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER)

        if request_id and not is_valid_uuid(request_id):
            logger.warning(
                "Invalid X-Request-ID received, generating new one",
                invalid_id=request_id,
            )
            request_id = None

        if not request_id:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
