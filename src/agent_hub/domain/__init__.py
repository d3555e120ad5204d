"""Domain layer: entities, validation rules and the exception hierarchy."""

from agent_hub.domain.exceptions import (
    AppError,
    ValidationError,
    NotFound,
    AgentNotFound,
    SessionNotFound,
    EndpointNotFound,
    HTTPError,
    RateLimited,
    InternalError,
)
from agent_hub.domain.models import (
    Agent,
    AgentDraft,
    AgentSettings,
    AgentStatus,
    AgentSummary,
    ChatMessageRequest,
    ChatSession,
    Message,
    MessageRole,
    ModelId,
    PromptRequest,
    SessionStatus,
)

__all__ = [
    "AppError",
    "ValidationError",
    "NotFound",
    "AgentNotFound",
    "SessionNotFound",
    "EndpointNotFound",
    "HTTPError",
    "RateLimited",
    "InternalError",
    "Agent",
    "AgentDraft",
    "AgentSettings",
    "AgentStatus",
    "AgentSummary",
    "ChatMessageRequest",
    "ChatSession",
    "Message",
    "MessageRole",
    "ModelId",
    "PromptRequest",
    "SessionStatus",
]
