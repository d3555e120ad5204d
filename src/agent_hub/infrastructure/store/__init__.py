"""In-memory entity store and identifier generators."""

from agent_hub.infrastructure.store.ids import SequentialIdGenerator, TimestampIdGenerator
from agent_hub.infrastructure.store.memory import AgentListing, EntityStore

__all__ = [
    "AgentListing",
    "EntityStore",
    "SequentialIdGenerator",
    "TimestampIdGenerator",
]
