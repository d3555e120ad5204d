"""
Error handling for the FastAPI application.

Every failure leaves the service in the same envelope:

    {"success": false, "code": "...", "error": "...", "message": "..."}

Validation failures replace `message` with the full list of violated
fields under `errors`. Handlers are registered for:
- AppError subclasses raised by the request pipeline
- FastAPI request validation errors (converted to ValidationError)
- Starlette HTTP exceptions, so unmatched routes become EndpointNotFound
- Any other exception, converted to InternalError

Usage:
    from fastapi import FastAPI
    from agent_hub.api.middleware.errors import register_error_handlers

    app = FastAPI()
    register_error_handlers(app, settings)
"""

import uuid
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from agent_hub.api.middleware.request_id import REQUEST_ID_HEADER
from agent_hub.api.schemas.errors import ErrorResponse
from agent_hub.config.settings import Settings
from agent_hub.domain.exceptions import (
    AppError,
    EndpointNotFound,
    HTTPError,
    InternalError,
    ValidationError,
)
from agent_hub.domain.validation import field_errors_from_pydantic
from agent_hub.infrastructure.observability.logging import get_logger


logger = get_logger(__name__)


def _get_request_id(request: Request) -> str:
    """
    Extract or generate request ID for error tracking.

    Args:
        request: FastAPI Request object

    Returns:
        Request ID string
    """
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        return request_id

    request_id = request.headers.get(REQUEST_ID_HEADER)
    if request_id:
        return request_id

    return str(uuid.uuid4())


def _log_error(
    request: Request,
    error: Exception,
    status_code: int,
    request_id: str,
) -> None:
    """
    Log error with request context.

    5xx errors are logged with traceback, everything else at info level.
    """
    log_context: dict[str, Any] = {
        "request_id": request_id,
        "path": request.url.path,
        "method": request.method,
        "status_code": status_code,
        "error_type": type(error).__name__,
    }

    if status_code >= 500:
        logger.error("Server error", error=str(error), exc_info=error, **log_context)
    else:
        logger.info("Client error", error=str(error), **log_context)


def _create_error_response(
    exc: AppError,
    request_id: str,
    message: Optional[str] = None,
) -> JSONResponse:
    """
    Create the standardized error envelope for an AppError.

    Args:
        exc: Error to render
        request_id: Request ID for tracing
        message: Overrides the error's suggested action as the detail message

    Returns:
        JSONResponse with the error's status code
    """
    body = ErrorResponse(
        code=exc.error_code,
        error=exc.message,
        message=message or exc.suggested_action,
    )
    if isinstance(exc, ValidationError):
        body.message = None
        body.errors = exc.field_errors

    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(mode="json", exclude_none=True),
        headers={REQUEST_ID_HEADER: request_id},
    )


def app_error_response(request: Request, exc: AppError, message: Optional[str] = None) -> JSONResponse:
    """Log an AppError and render its envelope."""
    request_id = _get_request_id(request)
    _log_error(request, exc, exc.status_code, request_id)
    return _create_error_response(exc, request_id, message)


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """
    Register all error handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
        settings: Settings deciding whether 500 responses include details
    """

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return app_error_response(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Convert FastAPI body/path validation failures into ValidationError."""
        error = ValidationError(field_errors=field_errors_from_pydantic(exc.errors()))
        logger.info(
            "Validation error",
            path=request.url.path,
            method=request.method,
            fields=error.fields,
        )
        return _create_error_response(error, _get_request_id(request))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """
        Handle HTTP exceptions raised by routing.

        Unmatched paths and unsupported methods both answer 404.
        """
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return _create_error_response(
                EndpointNotFound(),
                _get_request_id(request),
                message=f"Route {request.method} {request.url.path} does not exist",
            )

        response = app_error_response(
            request,
            HTTPError(status_code=exc.status_code, message=str(exc.detail)),
        )
        response.headers.update(getattr(exc, "headers", None) or {})
        return response

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle all unhandled exceptions.

        Outside development environments the message is generic so no
        internal detail leaks to clients.
        """
        request_id = _get_request_id(request)
        _log_error(request, exc, status.HTTP_500_INTERNAL_SERVER_ERROR, request_id)

        message = str(exc) if settings.is_development else "Something went wrong"
        return _create_error_response(InternalError(), request_id, message=message)
