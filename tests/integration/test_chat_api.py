"""Integration tests for chat routes."""

import asyncio

import pytest
from httpx import AsyncClient


async def _start_session(client: AsyncClient, agent_payload: dict) -> str:
    agent_id = (await client.post("/api/agents", json=agent_payload)).json()["data"]["id"]
    return (await client.post(f"/api/agents/{agent_id}/chat/start")).json()["data"]["sessionId"]


@pytest.mark.integration
class TestSendMessage:
    """Test POST /api/chat/{session_id}/message."""

    async def test_round_trip(self, async_client: AsyncClient, agent_payload):
        session_id = await _start_session(async_client, agent_payload)

        response = await async_client.post(f"/api/chat/{session_id}/message", json={"message": "Hello"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["sessionId"] == session_id
        assert data["response"] == "Support Assistant says: Hello"
        assert data["tokenCount"] == 42
        assert [entry["role"] for entry in data["history"]] == ["user", "agent"]
        assert data["history"][0]["text"] == "Hello"
        assert "tokenCount" not in data["history"][0]
        assert data["history"][1]["tokenCount"] == 42

    async def test_unknown_session(self, async_client: AsyncClient, store):
        response = await async_client.post("/api/chat/chat_missing/message", json={"message": "Hello"})

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "SESSION_NOT_FOUND"
        assert body["error"] == "Chat session not found"
        assert store.session_count == 0
        assert store.agent_count == 0

    async def test_empty_message(self, async_client: AsyncClient, agent_payload, store):
        session_id = await _start_session(async_client, agent_payload)

        response = await async_client.post(f"/api/chat/{session_id}/message", json={"message": ""})

        assert response.status_code == 400
        assert store.history(session_id) == []

    async def test_history_window(self, async_client: AsyncClient, agent_payload, store):
        session_id = await _start_session(async_client, agent_payload)

        for i in range(8):
            response = await async_client.post(
                f"/api/chat/{session_id}/message",
                json={"message": f"message {i}"},
            )

        history = response.json()["data"]["history"]
        assert len(history) == 10
        assert history[0]["text"] == "message 3"
        assert history[-2]["text"] == "message 7"
        assert history[-1]["role"] == "agent"
        assert len(store.history(session_id)) == 16

    async def test_concurrent_messages_both_recorded(self, async_client: AsyncClient, agent_payload, store, gateway):
        gateway.delay = 0.01
        session_id = await _start_session(async_client, agent_payload)

        responses = await asyncio.gather(
            async_client.post(f"/api/chat/{session_id}/message", json={"message": "alpha"}),
            async_client.post(f"/api/chat/{session_id}/message", json={"message": "beta"}),
        )

        assert all(response.status_code == 200 for response in responses)
        texts = [message.text for message in store.history(session_id)]
        assert texts.count("alpha") == 1
        assert texts.count("beta") == 1
        assert len(texts) == 4
