"""
Request pipeline.

One method per API capability. Each follows the same sequence:

    validate -> resolve referenced entities -> mutate the store
             -> optionally call the inference gateway -> shape the result

Failures are raised as AppError subclasses (ValidationError, AgentNotFound,
SessionNotFound, ...) and turned into response envelopes by the API error
handlers. Validation always runs before any store mutation, so a rejected
request never leaves a partial write behind.
"""
import time
from typing import Any, Optional

import psutil

from agent_hub.config.settings import Settings
from agent_hub.domain.catalog import ModelDescriptor, list_models
from agent_hub.domain.models import (
    AgentStatus,
    ChatMessageRequest,
    Message,
    MessageRole,
    PromptRequest,
)
from agent_hub.domain.validation import validate_payload
from agent_hub.infrastructure.observability.logging import get_logger
from agent_hub.infrastructure.store import EntityStore
from agent_hub.interfaces import IInferenceGateway
from agent_hub.services.results import (
    AgentCreated,
    AgentList,
    AgentRef,
    ChatReply,
    ChatStarted,
    MemoryUsage,
    PromptResult,
    SystemStatus,
)

logger = get_logger(__name__)


class RequestPipeline:
    """
    Orchestrates validation, store access and inference per endpoint.

    Args:
        store: Entity store owning agents and sessions
        gateway: Inference backend used for prompts and chat replies
        settings: Application settings (history window, version)
    """

    def __init__(
        self,
        store: EntityStore,
        gateway: IInferenceGateway,
        settings: Settings,
    ):
        self.store = store
        self.gateway = gateway
        self.settings = settings
        self._process: Optional[psutil.Process] = None

    # ========================================================================
    # Agents
    # ========================================================================

    def list_agents(self) -> AgentList:
        items = list(self.store.list_agents())
        return AgentList(items=items, total=len(items))

    def create_agent(self, payload: Any) -> AgentCreated:
        agent = self.store.create_agent(payload)
        logger.info("Agent created", agent_id=agent.id, model=agent.model.value)
        return AgentCreated(
            id=agent.id,
            name=agent.name,
            description=agent.description,
            model=agent.model,
            created_at=agent.created_at,
        )

    async def prompt_agent(self, agent_id: str, payload: Any) -> PromptResult:
        """
        Run a stateless prompt against an agent.

        Nothing is recorded in the store; the exchange is not part of any
        chat history.
        """
        request = validate_payload(PromptRequest, payload)
        agent = self.store.get_agent(agent_id)

        result = await self.gateway.generate(agent, request.message, request.context)
        logger.info(
            "Prompt completed",
            agent_id=agent_id,
            gateway=self.gateway.name,
            token_count=result.token_count,
        )

        return PromptResult(
            agent_id=agent_id,
            message=request.message,
            response=result.content,
            model=agent.model,
            token_count=result.token_count,
            latency_ms=result.latency_ms,
        )

    # ========================================================================
    # Chat sessions
    # ========================================================================

    def start_chat(self, agent_id: str) -> ChatStarted:
        session = self.store.create_session(agent_id)
        agent = self.store.get_agent(agent_id)
        logger.info("Chat session started", session_id=session.id, agent_id=agent_id)
        return ChatStarted(
            session_id=session.id,
            agent_id=agent_id,
            agent=AgentRef(name=agent.name, model=agent.model),
        )

    async def send_message(self, session_id: str, payload: Any) -> ChatReply:
        """
        Append a user message, generate the agent's reply and append it too.

        The session lock is held for the whole exchange, so concurrent sends
        to the same session are applied one after another and each user
        message is immediately followed by its reply.

        Returns:
            The reply plus the trailing `chat_history_window` messages; the
            store keeps the complete history.
        """
        request = validate_payload(ChatMessageRequest, payload)
        lock = self.store.session_lock(session_id)

        async with lock:
            session = self.store.get_session(session_id)
            agent = self.store.get_agent(session.agent_id)

            self.store.append_message(
                session_id,
                Message(role=MessageRole.USER, text=request.message),
            )
            context = self.store.history(session_id)

            result = await self.gateway.generate(agent, request.message, context)

            window = self.store.append_message(
                session_id,
                Message(
                    role=MessageRole.AGENT,
                    text=result.content,
                    token_count=result.token_count,
                ),
                tail=self.settings.chat_history_window,
            )

        logger.info(
            "Chat message processed",
            session_id=session_id,
            agent_id=agent.id,
            history_length=len(context) + 1,
            token_count=result.token_count,
        )

        return ChatReply(
            session_id=session_id,
            response=result.content,
            history=window,
            token_count=result.token_count,
        )

    # ========================================================================
    # System
    # ========================================================================

    def list_models(self) -> list[ModelDescriptor]:
        return list_models()

    def _current_process(self) -> psutil.Process:
        if self._process is None:
            self._process = psutil.Process()
        return self._process

    def _uptime_seconds(self) -> float:
        """Seconds since the serving process started."""
        return round(max(0.0, time.time() - self._current_process().create_time()), 3)

    def _memory_usage(self) -> MemoryUsage:
        process = self._current_process()
        info = process.memory_info()
        return MemoryUsage(
            rss=info.rss,
            vms=info.vms,
            percent=round(process.memory_percent(), 2),
        )

    def system_status(self) -> SystemStatus:
        active_agents = sum(
            1 for summary in self.store.list_agents()
            if summary.status == AgentStatus.ACTIVE
        )
        return SystemStatus(
            version=self.settings.app_version,
            active_agents=active_agents,
            chat_sessions=self.store.session_count,
            uptime_seconds=self._uptime_seconds(),
            memory=self._memory_usage(),
        )
