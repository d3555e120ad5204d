"""Error response schemas and error codes."""

from enum import Enum
from typing import Any, Literal
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """
    Standard error codes for API responses.

    Use these codes consistently across the API for better error handling.
    """

    # ===== Validation Errors (400) =====
    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Input validation failed (400)"""

    # ===== Not Found Errors (404) =====
    NOT_FOUND = "NOT_FOUND"
    """Resource not found (404)"""

    ENDPOINT_NOT_FOUND = "ENDPOINT_NOT_FOUND"
    """API endpoint not found (404)"""

    AGENT_NOT_FOUND = "AGENT_NOT_FOUND"
    """Agent not found (404)"""

    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    """Chat session not found (404)"""

    # ===== Other HTTP Errors =====
    HTTP_ERROR = "HTTP_ERROR"
    """Request rejected by the HTTP layer with another 4xx status"""

    # ===== Rate Limiting (429) =====
    RATE_LIMITED = "RATE_LIMITED"
    """Rate limit exceeded (429)"""

    # ===== Server Errors (500) =====
    INTERNAL_ERROR = "INTERNAL_ERROR"
    """Internal server error (500)"""


class FieldError(BaseModel):
    """
    Detailed error information for a specific field.

    Used in validation errors to provide field-level error details.
    """

    field: str = Field(
        ...,
        description="Field name or path (e.g., 'behavior', 'settings.temperature')",
        examples=["name", "behavior", "model"]
    )
    message: str = Field(
        ...,
        description="Human-readable error message for this field",
        examples=[
            "This field is required",
            "Must be at least 10 characters",
        ]
    )
    code: str | None = Field(
        default=None,
        description="Optional machine-readable error code for this field",
        examples=["MISSING", "STRING_TOO_SHORT", "ENUM"]
    )
    value: Any | None = Field(
        default=None,
        description="The invalid value that was provided",
        examples=["short", "gpt-2"]
    )


class ErrorResponse(BaseModel):
    """
    Standard error envelope.

    Example Response:
        ```json
        {
            "success": false,
            "code": "AGENT_NOT_FOUND",
            "error": "Agent not found",
            "message": "Please verify the agent ID is correct or create a new agent"
        }
        ```

    Validation failures carry the full list of violated fields in `errors`
    instead of a single message.
    """

    success: Literal[False] = Field(
        default=False,
        description="Indicates failed response"
    )
    code: ErrorCode = Field(
        ...,
        description="Machine-readable error code"
    )
    error: str = Field(
        ...,
        description="Short human-readable error title"
    )
    message: str | None = Field(
        default=None,
        description="Longer explanation or suggested action"
    )
    errors: list[FieldError] | None = Field(
        default=None,
        description="Field-level validation errors"
    )
