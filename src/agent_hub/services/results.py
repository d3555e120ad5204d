"""Shapes returned by the request pipeline."""
from datetime import datetime
from typing import Optional

from pydantic import Field

from agent_hub.domain.models import (
    AgentSummary,
    DomainModel,
    Message,
    ModelId,
    utcnow,
)


class AgentList(DomainModel):
    items: list[AgentSummary]
    total: int


class AgentCreated(DomainModel):
    id: str
    name: str
    description: str
    model: ModelId
    created_at: datetime


class PromptResult(DomainModel):
    agent_id: str
    message: str
    response: str
    model: ModelId
    token_count: int
    latency_ms: int
    timestamp: datetime = Field(default_factory=utcnow)


class AgentRef(DomainModel):
    name: str
    model: ModelId


class ChatStarted(DomainModel):
    session_id: str
    agent_id: str
    agent: AgentRef


class ChatReply(DomainModel):
    session_id: str
    response: str
    history: list[Message]
    token_count: int


class MemoryUsage(DomainModel):
    """Resident/virtual memory of the serving process, in bytes."""
    rss: int
    vms: int
    percent: Optional[float] = None


class SystemStatus(DomainModel):
    version: str
    status: str = "operational"
    active_agents: int
    chat_sessions: int
    uptime_seconds: float
    memory: MemoryUsage
    timestamp: datetime = Field(default_factory=utcnow)
