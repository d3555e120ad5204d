"""Integration tests for the shared API rate limit."""

import pytest
from httpx import ASGITransport, AsyncClient

from agent_hub.api.app import create_app
from agent_hub.api.middleware.rate_limit import is_api_path

API_LIMIT = 100


def _client_for(app) -> AsyncClient:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    return AsyncClient(transport=transport, base_url="http://test")


async def _use_up_budget(client: AsyncClient, count: int = API_LIMIT) -> None:
    for _ in range(count):
        assert (await client.get("/api/models")).status_code == 200


@pytest.mark.integration
class TestApiRateLimit:
    """One fixed-window budget per client across every /api request."""

    async def test_request_over_budget_rejected(self, async_client: AsyncClient):
        await _use_up_budget(async_client)

        response = await async_client.get("/api/models")

        assert response.status_code == 429
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "RATE_LIMITED"
        assert body["error"] == "Too many requests, please try again later"
        assert 0 < int(response.headers["Retry-After"]) <= 15 * 60
        assert "X-Request-ID" in response.headers

    async def test_budget_shared_across_routes(self, async_client: AsyncClient):
        for i in range(API_LIMIT):
            path = "/api/models" if i % 2 else "/api/agents"
            assert (await async_client.get(path)).status_code == 200

        assert (await async_client.get("/api/status")).status_code == 429
        assert (await async_client.post("/api/agents/agent_1/chat/start")).status_code == 429

    async def test_exhausted_budget_wins_over_validation_and_routing(self, async_client: AsyncClient):
        await _use_up_budget(async_client)

        invalid = await async_client.post("/api/agents", json={"name": ""})
        unknown = await async_client.get("/api/nope")

        assert invalid.status_code == 429
        assert unknown.status_code == 429
        assert invalid.json()["code"] == unknown.json()["code"] == "RATE_LIMITED"

    async def test_rejected_requests_count_against_budget(self, async_client: AsyncClient):
        for _ in range(API_LIMIT // 2):
            assert (await async_client.post("/api/agents", json={"name": ""})).status_code == 400
        for _ in range(API_LIMIT // 2):
            assert (await async_client.get("/api/nope")).status_code == 404

        assert (await async_client.get("/api/models")).status_code == 429

    async def test_health_not_limited(self, async_client: AsyncClient):
        await _use_up_budget(async_client)

        assert (await async_client.get("/api/models")).status_code == 429
        assert (await async_client.get("/health")).status_code == 200

    async def test_limit_taken_from_injected_settings(self, test_settings):
        settings = test_settings.model_copy(update={"rate_limit_api": "2/minute"})

        async with _client_for(create_app(settings=settings)) as client:
            statuses = [(await client.get("/api/models")).status_code for _ in range(5)]

        assert statuses == [200, 200, 429, 429, 429]

    async def test_apps_do_not_share_counters(self, test_settings):
        settings = test_settings.model_copy(update={"rate_limit_api": "1/minute"})
        first = create_app(settings=settings)
        second = create_app(settings=settings)

        async with _client_for(first) as client:
            assert (await client.get("/api/models")).status_code == 200
            assert (await client.get("/api/models")).status_code == 429

        async with _client_for(second) as client:
            assert (await client.get("/api/models")).status_code == 200

    async def test_limiting_can_be_disabled(self, test_settings):
        settings = test_settings.model_copy(update={"rate_limit_enabled": False})

        async with _client_for(create_app(settings=settings)) as client:
            for _ in range(API_LIMIT + 5):
                assert (await client.get("/api/models")).status_code == 200

    async def test_disabling_one_app_leaves_others_limited(self, test_settings):
        disabled = test_settings.model_copy(update={"rate_limit_enabled": False})
        limited = test_settings.model_copy(update={"rate_limit_api": "1/minute"})
        create_app(settings=disabled)

        async with _client_for(create_app(settings=limited)) as client:
            assert (await client.get("/api/models")).status_code == 200
            assert (await client.get("/api/models")).status_code == 429


@pytest.mark.unit
class TestApiPathMatching:
    def test_prefix_and_children_match(self):
        assert is_api_path("/api", "/api")
        assert is_api_path("/api/agents", "/api")

    def test_other_paths_do_not_match(self):
        assert not is_api_path("/health", "/api")
        assert not is_api_path("/apiary", "/api")
