"""
In-memory entity store for agents and chat sessions.

The store exclusively owns every record. Callers only ever receive copies
(or summaries), so nothing outside the store can mutate an agent or a
history behind its back. State lives for the lifetime of the process.

Concurrency model:
    Every request runs as its own asyncio task. Plain inserts and lookups
    never await, so they are atomic with respect to other tasks. A chat
    exchange (append user message, call inference, append agent message)
    does await, so each session has its own asyncio.Lock which the pipeline
    holds for the whole exchange.
"""
import asyncio
from typing import Any, Iterator, Optional

from agent_hub.domain.exceptions import AgentNotFound, InternalError, SessionNotFound
from agent_hub.domain.models import (
    Agent,
    AgentDraft,
    AgentSummary,
    ChatSession,
    Message,
)
from agent_hub.domain.validation import validate_payload
from agent_hub.infrastructure.observability.logging import get_logger
from agent_hub.infrastructure.store.ids import TimestampIdGenerator
from agent_hub.interfaces import IIdGenerator

logger = get_logger(__name__)

AGENT_PREFIX = "agent"
SESSION_PREFIX = "chat"

# Attempts at drawing an unused id before giving up
MAX_ID_ATTEMPTS = 5


class AgentListing:
    """
    Lazy, restartable view over the agents in a store.

    Each iteration walks a snapshot of the agents taken when iteration
    starts and yields summaries; internal fields never leave the store.
    Ordering is not guaranteed.
    """

    def __init__(self, agents: dict[str, Agent]):
        self._agents = agents

    def __iter__(self) -> Iterator[AgentSummary]:
        for agent in list(self._agents.values()):
            yield agent.summary()

    def __len__(self) -> int:
        return len(self._agents)


class EntityStore:
    """
    Owner of all agent and chat session records.

    Example:
        >>> store = EntityStore()
        >>> agent = store.create_agent({
        ...     "name": "Helper",
        ...     "behavior": "Answers questions briefly",
        ...     "model": "gpt-4o",
        ... })
        >>> session = store.create_session(agent.id)
        >>> store.append_message(session.id, Message(role="user", text="Hi"))
    """

    def __init__(self, id_generator: Optional[IIdGenerator] = None):
        self._ids = id_generator or TimestampIdGenerator()
        self._agents: dict[str, Agent] = {}
        self._sessions: dict[str, ChatSession] = {}
        self._session_locks: dict[str, asyncio.Lock] = {}

    def _new_id(self, prefix: str, taken: dict[str, Any]) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._ids.new_id(prefix)
            if candidate not in taken:
                return candidate
            logger.warning("Generated id collided with an existing record", id=candidate)
        raise InternalError(
            "Could not generate a unique identifier",
            details={"prefix": prefix},
        )

    # ========================================================================
    # Agents
    # ========================================================================

    def create_agent(self, fields: Any) -> Agent:
        """
        Validate `fields` and store a new agent.

        Args:
            fields: Mapping (or AgentDraft) with name, behavior, model, description

        Returns:
            Copy of the stored agent

        Raises:
            ValidationError: If any field violates its rules; nothing is stored
        """
        draft = validate_payload(AgentDraft, fields)
        agent = Agent.from_draft(self._new_id(AGENT_PREFIX, self._agents), draft)
        self._agents[agent.id] = agent
        return agent.model_copy(deep=True)

    def get_agent(self, agent_id: str) -> Agent:
        agent = self._agents.get(agent_id)
        if agent is None:
            raise AgentNotFound(details={"agent_id": agent_id})
        return agent.model_copy(deep=True)

    def list_agents(self) -> AgentListing:
        return AgentListing(self._agents)

    @property
    def agent_count(self) -> int:
        return len(self._agents)

    # ========================================================================
    # Chat sessions
    # ========================================================================

    def create_session(self, agent_id: str) -> ChatSession:
        """
        Start an empty chat session bound to an existing agent.

        Raises:
            AgentNotFound: If no agent has this id
        """
        if agent_id not in self._agents:
            raise AgentNotFound(details={"agent_id": agent_id})

        session = ChatSession(
            id=self._new_id(SESSION_PREFIX, self._sessions),
            agent_id=agent_id,
        )
        self._sessions[session.id] = session
        self._session_locks[session.id] = asyncio.Lock()
        return session.model_copy(deep=True)

    def _session(self, session_id: str) -> ChatSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(details={"session_id": session_id})
        return session

    def get_session(self, session_id: str) -> ChatSession:
        return self._session(session_id).model_copy(deep=True)

    def session_lock(self, session_id: str) -> asyncio.Lock:
        """
        Lock serializing mutations of one session.

        Raises:
            SessionNotFound: If no session has this id
        """
        self._session(session_id)
        return self._session_locks[session_id]

    def history(self, session_id: str) -> list[Message]:
        """Copy of the full history of a session, in arrival order."""
        return [message.model_copy() for message in self._session(session_id).history]

    def append_message(
        self,
        session_id: str,
        message: Message,
        tail: Optional[int] = None,
    ) -> list[Message]:
        """
        Append a message to a session's history.

        Args:
            session_id: Target session
            message: Message to append
            tail: Number of trailing messages to return (all when None)

        Returns:
            Copies of the last `tail` messages after the append

        Raises:
            SessionNotFound: If no session has this id
        """
        history = self._session(session_id).history
        history.append(message.model_copy())
        view = history[-tail:] if tail else history
        return [entry.model_copy() for entry in view]

    @property
    def session_count(self) -> int:
        return len(self._sessions)
