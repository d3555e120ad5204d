"""
Exception hierarchy for the agent hub.

All exceptions inherit from AppError which provides:
- error_code: Machine-readable error code (from ErrorCode enum)
- status_code: HTTP status code for API responses
- message: Human-readable error message
- details: Optional dictionary with additional context
- suggested_action: Optional user-friendly suggestion for resolution

Usage:
    from agent_hub.domain.exceptions import AgentNotFound, ValidationError

    raise AgentNotFound(details={"agent_id": agent_id})

    raise ValidationError(field_errors=[
        FieldError(field="behavior", message="Must be at least 10 characters"),
    ])
"""

from typing import Any, Optional
from agent_hub.api.schemas.errors import ErrorCode, FieldError


class AppError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        error_code: Machine-readable error code (from ErrorCode enum)
        status_code: HTTP status code (default: 500)
        message: Human-readable error message
        details: Optional dictionary with additional error context
        suggested_action: Optional user-friendly suggestion for resolution
    """

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    status_code: int = 500
    default_message: str = "An unexpected error occurred"
    default_suggested_action: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        suggested_action: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        self.suggested_action = suggested_action or self.default_suggested_action
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"error_code={self.error_code.value}, "
            f"status_code={self.status_code}, "
            f"message={self.message!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for serialization.

        Returns:
            Dictionary with error information
        """
        result = {
            "error_code": self.error_code.value,
            "message": self.message,
        }

        if self.details:
            result["details"] = self.details

        if self.suggested_action:
            result["suggested_action"] = self.suggested_action

        return result


# ========================================
# Validation Errors (400)
# ========================================


class ValidationError(AppError):
    """
    Request validation failed.

    Carries every violated field, never just the first one.
    """

    status_code = 400
    error_code = ErrorCode.VALIDATION_ERROR
    default_message = "Request validation failed"
    default_suggested_action = "Please check your input and try again"

    def __init__(
        self,
        message: Optional[str] = None,
        field_errors: Optional[list[FieldError]] = None,
        details: Optional[dict[str, Any]] = None,
        suggested_action: Optional[str] = None,
    ):
        self.field_errors = list(field_errors or [])
        super().__init__(message, details, suggested_action)

    @property
    def fields(self) -> list[str]:
        """Names of the violated fields, in reporting order."""
        return [error.field for error in self.field_errors]

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = [error.model_dump(exclude_none=True) for error in self.field_errors]
        return result


# ========================================
# Resource Errors (404)
# ========================================


class NotFound(AppError):
    """Resource not found."""

    status_code = 404
    error_code = ErrorCode.NOT_FOUND
    default_message = "Resource not found"
    default_suggested_action = "Please check the resource ID and try again"


class AgentNotFound(NotFound):
    """Agent not found."""

    error_code = ErrorCode.AGENT_NOT_FOUND
    default_message = "Agent not found"
    default_suggested_action = "Please verify the agent ID is correct or create a new agent"


class SessionNotFound(NotFound):
    """Chat session not found."""

    error_code = ErrorCode.SESSION_NOT_FOUND
    default_message = "Chat session not found"
    default_suggested_action = "Please verify the session ID or start a new chat session"


class EndpointNotFound(NotFound):
    """No route matches the request."""

    error_code = ErrorCode.ENDPOINT_NOT_FOUND
    default_message = "Endpoint not found"


class HTTPError(AppError):
    """
    Request rejected by the HTTP layer with a status not covered above.

    The status code comes from the rejection; 5xx statuses are reported as
    INTERNAL_ERROR, everything else as HTTP_ERROR.
    """

    error_code = ErrorCode.HTTP_ERROR
    default_message = "Request could not be processed"

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.status_code = status_code
        if status_code >= 500:
            self.error_code = ErrorCode.INTERNAL_ERROR
        super().__init__(message, details)


# ========================================
# Rate Limiting Errors (429)
# ========================================


class RateLimited(AppError):
    """Rate limit exceeded."""

    status_code = 429
    error_code = ErrorCode.RATE_LIMITED
    default_message = "Too many requests, please try again later"
    default_suggested_action = "You have made too many requests. Please wait before trying again"

    def __init__(
        self,
        message: Optional[str] = None,
        retry_after: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
        suggested_action: Optional[str] = None,
    ):
        self.retry_after = retry_after
        super().__init__(message, details, suggested_action)


# ========================================
# Server Errors (500)
# ========================================


class InternalError(AppError):
    """Unexpected failure inside the request pipeline."""

    status_code = 500
    error_code = ErrorCode.INTERNAL_ERROR
    default_message = "Internal server error"
    default_suggested_action = "Something went wrong"
