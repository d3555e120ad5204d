# src/agent_hub/interfaces/inference.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any
from dataclasses import dataclass

from agent_hub.domain.models import Agent


@dataclass(frozen=True)
class InferenceResult:
    """Standard output from any inference backend."""
    content: str
    token_count: int
    latency_ms: int


class IInferenceGateway(ABC):
    """
    Interface for the backend that produces agent responses.

    Implement this interface to plug in a real model provider; the request
    pipeline and entity store only ever talk to this contract.

    Example:
        class OpenAIGateway(IInferenceGateway):
            async def generate(self, agent, message, context=None) -> InferenceResult:
                # Call the provider here
                ...
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier for logging."""
        pass

    @abstractmethod
    async def generate(
        self,
        agent: Agent,
        message: str,
        context: Any | None = None,
    ) -> InferenceResult:
        """
        Produce a response for `message` in the voice of `agent`.

        Args:
            agent: Agent whose behavior and model frame the response
            message: The user's message
            context: Free-form context; for chat sessions, the full history

        Returns:
            Generated content with token count and latency
        """
        pass
