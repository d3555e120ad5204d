"""
Domain entities for the agent hub.

Agents and chat sessions are plain pydantic models owned by the entity
store. JSON field names are camelCase on the wire (`createdAt`,
`agentId`, ...) while Python attributes stay snake_case.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base model with camelCase aliases for serialization."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ModelId(str, Enum):
    """Models an agent may be configured with."""
    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"
    CLAUDE_3_SONNET = "claude-3-sonnet"


class AgentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class SessionStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class MessageRole(str, Enum):
    USER = "user"
    AGENT = "agent"


# ============================================================================
# Agents
# ============================================================================


class AgentSettings(DomainModel):
    """Generation settings attached to every agent."""
    temperature: float = 0.7
    max_tokens: int = 2000
    streaming: bool = False


class AgentDraft(DomainModel):
    """Validated input for creating an agent."""

    name: str = Field(
        ...,
        min_length=1,
        description="Display name of the agent",
        examples=["Support Assistant"],
    )
    behavior: str = Field(
        ...,
        min_length=10,
        description="Behavior description that frames every response",
        examples=["Answers billing questions politely and concisely"],
    )
    model: ModelId = Field(
        ...,
        description="Model backing the agent",
        examples=["gpt-4o"],
    )
    description: Optional[str] = Field(
        None,
        description="Optional free-form description",
    )


class AgentSummary(DomainModel):
    """Public projection of an agent used in listings."""
    id: str
    name: str
    description: str
    model: ModelId
    created_at: datetime
    status: AgentStatus


class Agent(DomainModel):
    """A named configuration that frames simulated response generation."""

    id: str
    name: str
    description: str = ""
    behavior: str
    model: ModelId
    created_at: datetime = Field(default_factory=utcnow)
    status: AgentStatus = AgentStatus.ACTIVE
    skills: list[str] = Field(default_factory=list)
    settings: AgentSettings = Field(default_factory=AgentSettings)

    @classmethod
    def from_draft(cls, agent_id: str, draft: AgentDraft) -> "Agent":
        return cls(
            id=agent_id,
            name=draft.name,
            description=draft.description or "",
            behavior=draft.behavior,
            model=draft.model,
        )

    def summary(self) -> AgentSummary:
        return AgentSummary(
            id=self.id,
            name=self.name,
            description=self.description,
            model=self.model,
            created_at=self.created_at,
            status=self.status,
        )


# ============================================================================
# Chat sessions
# ============================================================================


class Message(DomainModel):
    """A single entry of a chat history."""
    role: MessageRole
    text: str
    timestamp: datetime = Field(default_factory=utcnow)
    token_count: Optional[int] = None


class ChatSession(DomainModel):
    """An append-only conversation bound to one agent."""
    id: str
    agent_id: str
    history: list[Message] = Field(default_factory=list)
    started_at: datetime = Field(default_factory=utcnow)
    status: SessionStatus = SessionStatus.ACTIVE


# ============================================================================
# Request payloads
# ============================================================================


class PromptRequest(DomainModel):
    """One-shot prompt sent to an agent."""

    message: str = Field(
        ...,
        min_length=1,
        description="The message to send to the agent",
        examples=["What can you help me with?"],
    )
    context: Optional[Any] = Field(
        None,
        description="Optional context forwarded to the inference backend",
    )


class ChatMessageRequest(DomainModel):
    """Message sent within a chat session."""

    message: str = Field(
        ...,
        min_length=1,
        description="The message to append to the conversation",
        examples=["Hello!"],
    )
