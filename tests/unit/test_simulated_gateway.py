"""Unit tests for the simulated inference gateway."""

import random
from unittest.mock import AsyncMock, patch

import pytest

from agent_hub.agent.simulated import (
    MAX_LATENCY_MS,
    MAX_TOKENS,
    MIN_LATENCY_MS,
    MIN_TOKENS,
    SimulatedInferenceGateway,
)
from agent_hub.domain.models import Agent, ModelId


@pytest.fixture
def agent() -> Agent:
    return Agent(
        id="agent_1",
        name="Helper",
        behavior="Answers questions briefly",
        model=ModelId.CLAUDE_3_SONNET,
    )


@pytest.mark.unit
class TestSimulatedInferenceGateway:
    """Test the stand-in inference backend."""

    async def test_result_within_bounds(self, agent):
        gateway = SimulatedInferenceGateway(min_delay=0, max_delay=0, rng=random.Random(7))

        for _ in range(20):
            result = await gateway.generate(agent, "What is new?")
            assert MIN_TOKENS <= result.token_count < MAX_TOKENS
            assert MIN_LATENCY_MS <= result.latency_ms < MAX_LATENCY_MS
            assert "(Simulated response generated at " in result.content

    async def test_sleeps_within_configured_range(self, agent):
        gateway = SimulatedInferenceGateway(min_delay=1.0, max_delay=3.0)

        with patch("agent_hub.agent.simulated.asyncio.sleep", new_callable=AsyncMock) as sleep:
            await gateway.generate(agent, "Hello")

        sleep.assert_awaited_once()
        delay = sleep.await_args.args[0]
        assert 1.0 <= delay <= 3.0

    async def test_zero_delay_does_not_sleep(self, agent):
        gateway = SimulatedInferenceGateway(min_delay=0, max_delay=0)

        with patch("agent_hub.agent.simulated.asyncio.sleep", new_callable=AsyncMock) as sleep:
            await gateway.generate(agent, "Hello")

        sleep.assert_not_awaited()

    async def test_same_seed_same_output(self, agent):
        first = SimulatedInferenceGateway(0, 0, rng=random.Random(3))
        second = SimulatedInferenceGateway(0, 0, rng=random.Random(3))

        a = await first.generate(agent, "Hello")
        b = await second.generate(agent, "Hello")

        assert (a.token_count, a.latency_ms) == (b.token_count, b.latency_ms)

    def test_invalid_bounds_rejected(self):
        with pytest.raises(ValueError):
            SimulatedInferenceGateway(min_delay=2.0, max_delay=1.0)
        with pytest.raises(ValueError):
            SimulatedInferenceGateway(min_delay=-1.0, max_delay=1.0)

    def test_name(self):
        assert SimulatedInferenceGateway(0, 0).name == "simulated"
