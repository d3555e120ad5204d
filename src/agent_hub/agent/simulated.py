"""
Simulated inference backend.

Stands in for a real model provider: waits a random, bounded amount of time
and answers from a handful of templates built around the agent's name,
behavior and model. Swap it for a real IInferenceGateway implementation to
talk to an actual provider.
"""
import asyncio
import random
from datetime import datetime
from typing import Any, Optional

from agent_hub.domain.models import Agent
from agent_hub.interfaces import IInferenceGateway, InferenceResult

RESPONSE_TEMPLATES = (
    'As {name}, I understand your question about "{message}". Based on my defined behavior, '
    '"{behavior}", I can help you with this.',
    'Processing your request with the {model} model. Here is my analysis of "{message}".',
    "Great question. Based on my configuration and experience, I can tell you that...",
    'Interesting point. Let me look at "{message}" from my perspective as {name}.',
)

MIN_TOKENS = 100
MAX_TOKENS = 600
MIN_LATENCY_MS = 500
MAX_LATENCY_MS = 3500


class SimulatedInferenceGateway(IInferenceGateway):
    """
    Fake model backend with random latency.

    Args:
        min_delay: Lower bound of the simulated wait, in seconds
        max_delay: Upper bound of the simulated wait, in seconds
        rng: Random source, injectable for reproducible output
    """

    def __init__(
        self,
        min_delay: float = 1.0,
        max_delay: float = 3.0,
        rng: Optional[random.Random] = None,
    ):
        if min_delay < 0 or max_delay < min_delay:
            raise ValueError("Simulated delay bounds must satisfy 0 <= min_delay <= max_delay")
        self.min_delay = min_delay
        self.max_delay = max_delay
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return "simulated"

    async def generate(
        self,
        agent: Agent,
        message: str,
        context: Any | None = None,
    ) -> InferenceResult:
        delay = self._rng.uniform(self.min_delay, self.max_delay)
        if delay > 0:
            await asyncio.sleep(delay)

        template = self._rng.choice(RESPONSE_TEMPLATES)
        content = template.format(
            name=agent.name,
            behavior=agent.behavior,
            model=agent.model.value,
            message=message,
        )
        generated_at = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        return InferenceResult(
            content=f"{content} (Simulated response generated at {generated_at})",
            token_count=self._rng.randrange(MIN_TOKENS, MAX_TOKENS),
            latency_ms=self._rng.randrange(MIN_LATENCY_MS, MAX_LATENCY_MS),
        )
