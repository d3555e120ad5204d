# tests/conftest.py
"""
Shared fixtures for all tests.

This module provides:
- Test settings (quiet logging, no simulated latency)
- An entity store with deterministic ids
- A static inference gateway that answers instantly
- The FastAPI app and an async HTTP client bound to it
"""

from typing import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from agent_hub.api.app import create_app
from agent_hub.config.settings import Settings
from agent_hub.infrastructure.store import EntityStore, SequentialIdGenerator
from agent_hub.services import RequestPipeline
from tests.fakes import StaticGateway


# ============================================================================
# Settings and Configuration
# ============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """
    Test settings with overrides for the test environment.

    No simulated latency and ERROR-level logging to reduce noise.
    """
    return Settings(
        app_name="Agent Hub Test",
        app_version="1.0.0-test",
        environment="local",
        debug=True,
        port=8001,
        rate_limit_enabled=True,
        rate_limit_api="100/15 minutes",
        inference_min_delay=0.0,
        inference_max_delay=0.0,
        log_level=40,
        log_format="console",
    )


# ============================================================================
# Core collaborators
# ============================================================================

@pytest.fixture
def store() -> EntityStore:
    """Entity store producing ids like agent_1, chat_2."""
    return EntityStore(id_generator=SequentialIdGenerator())


@pytest.fixture
def gateway() -> StaticGateway:
    return StaticGateway()


@pytest.fixture
def pipeline(store: EntityStore, gateway: StaticGateway, test_settings: Settings) -> RequestPipeline:
    return RequestPipeline(store=store, gateway=gateway, settings=test_settings)


@pytest.fixture
def agent_payload() -> dict:
    """Valid body for creating an agent."""
    return {
        "name": "Support Assistant",
        "behavior": "Answers billing questions politely and concisely",
        "model": "gpt-4o",
        "description": "First-line support",
    }


# ============================================================================
# FastAPI Application and Client
# ============================================================================

@pytest.fixture
def app(test_settings: Settings, store: EntityStore, gateway: StaticGateway) -> FastAPI:
    """
    Create FastAPI application for testing.

    The store and gateway fixtures are injected, so tests can inspect
    server-side state directly.
    """
    return create_app(settings=test_settings, store=store, gateway=gateway)


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Async HTTP client for testing FastAPI endpoints.

    Unhandled exceptions are rendered by the app's error handlers instead
    of being re-raised into the test.

    Usage:
        async def test_endpoint(async_client):
            response = await async_client.get("/api/agents")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
