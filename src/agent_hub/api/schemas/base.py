"""Base response schemas for API standardization."""

from typing import Generic, Literal, Optional, TypeVar

from pydantic import Field

from agent_hub.domain.models import DomainModel


# Type variable for generic response data
T = TypeVar("T")


class SuccessResponse(DomainModel, Generic[T]):
    """
    Standard success response wrapper.

    Example Response:
        ```json
        {
            "success": true,
            "message": "Agent created successfully",
            "data": {
                "id": "agent_1718000000000_k3j9x0q2a",
                "name": "Helper"
            }
        }
        ```
    """

    success: Literal[True] = Field(
        default=True,
        description="Indicates successful response"
    )
    message: Optional[str] = Field(
        default=None,
        description="Optional human-readable status message"
    )
    data: T = Field(
        ...,
        description="Response data payload"
    )


class ListResponse(DomainModel, Generic[T]):
    """
    Success response for collections, with the item count alongside.

    Example Response:
        ```json
        {
            "success": true,
            "data": [{"id": "agent_1", "name": "Helper"}],
            "total": 1
        }
        ```
    """

    success: Literal[True] = Field(
        default=True,
        description="Indicates successful response"
    )
    data: list[T] = Field(
        default_factory=list,
        description="List of items"
    )
    total: int = Field(
        ...,
        ge=0,
        description="Number of items"
    )
