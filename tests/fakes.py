"""Test doubles for the inference gateway."""
import asyncio
from collections import defaultdict
from typing import Any

from agent_hub.domain.models import Agent
from agent_hub.interfaces import IInferenceGateway, InferenceResult


class StaticGateway(IInferenceGateway):
    """
    Answers immediately with a predictable reply and records every call.

    Args:
        delay: Seconds to sleep before answering (0 still yields to the loop)
        token_count: Token count reported for every reply
    """

    def __init__(self, delay: float = 0.0, token_count: int = 42):
        self.delay = delay
        self.token_count = token_count
        self.calls: list[tuple[str, str, Any]] = []
        self.in_flight: dict[str, int] = defaultdict(int)
        self.max_in_flight: dict[str, int] = defaultdict(int)

    @property
    def name(self) -> str:
        return "static"

    async def generate(self, agent: Agent, message: str, context: Any | None = None) -> InferenceResult:
        self.calls.append((agent.id, message, context))
        self.in_flight[agent.id] += 1
        self.max_in_flight[agent.id] = max(self.max_in_flight[agent.id], self.in_flight[agent.id])
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight[agent.id] -= 1
        return InferenceResult(
            content=f"{agent.name} says: {message}",
            token_count=self.token_count,
            latency_ms=int(self.delay * 1000),
        )


class FailingGateway(IInferenceGateway):
    """Raises on every call, to exercise the generic error handler."""

    def __init__(self, error: Exception):
        self.error = error

    @property
    def name(self) -> str:
        return "failing"

    async def generate(self, agent: Agent, message: str, context: Any | None = None) -> InferenceResult:
        raise self.error
