# src/agent_hub/api/app.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from agent_hub.agent import SimulatedInferenceGateway
from agent_hub.config.settings import Settings, get_settings
from agent_hub.api.middleware.request_id import RequestIDMiddleware
from agent_hub.api.middleware.logging import RequestLoggingMiddleware
from agent_hub.api.middleware.errors import register_error_handlers
from agent_hub.api.middleware.rate_limit import setup_rate_limiting
from agent_hub.api.routes import health
from agent_hub.api.router import router as api_router
from agent_hub.infrastructure.observability.logging import configure_logging, get_logger
from agent_hub.infrastructure.store import EntityStore
from agent_hub.interfaces import IIdGenerator, IInferenceGateway
from agent_hub.services import RequestPipeline

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    settings: Settings = app.state.settings
    logger.info(
        "Agent Hub API started",
        url=f"http://localhost:{settings.port}",
        status_url=f"http://localhost:{settings.port}{settings.api_prefix}/status",
        environment=settings.environment,
        gateway=app.state.pipeline.gateway.name,
    )

    yield

    store: EntityStore = app.state.store
    logger.info(
        "Agent Hub API stopped",
        agents=store.agent_count,
        chat_sessions=store.session_count,
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[EntityStore] = None,
    gateway: Optional[IInferenceGateway] = None,
    id_generator: Optional[IIdGenerator] = None,
) -> FastAPI:
    """
    Application factory.

    Every collaborator can be injected; anything omitted is built from
    settings. The entity store lives on `app.state` for the lifetime of
    the application.

    Args:
        settings: Application settings (defaults to get_settings())
        store: Entity store (defaults to a fresh in-memory store)
        gateway: Inference backend (defaults to the simulated gateway)
        id_generator: Id source for a freshly built store
    """
    settings = settings or get_settings()
    configure_logging(settings)

    store = store or EntityStore(id_generator=id_generator)
    gateway = gateway or SimulatedInferenceGateway(
        min_delay=settings.inference_min_delay,
        max_delay=settings.inference_max_delay,
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
# Agent Hub API

In-memory registry of AI agents and their chat sessions.

## Features

- **Agents**: create agents with a behavior and a model, list them, prompt them
- **Chat sessions**: start a conversation with an agent and exchange messages
- **Models**: catalog of the supported models
- **Status**: counts, uptime and memory usage

## Rate Limits

All routes under the API prefix share one budget per client address:
100 requests per 15 minutes by default.
        """,
        docs_url="/docs" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Health",
                "description": "Liveness probe. Not rate limited.",
            },
            {
                "name": "Agents",
                "description": "Create, list and prompt agents, and start chat sessions.",
            },
            {
                "name": "Chat",
                "description": "Send messages within a chat session.",
            },
            {
                "name": "System",
                "description": "Model catalog and system status.",
            },
        ],
    )

    app.state.settings = settings
    app.state.store = store
    app.state.pipeline = RequestPipeline(store=store, gateway=gateway, settings=settings)

    # Middleware (added in reverse order of execution)
    # Rate limiting runs innermost, right before routing and body validation
    setup_rate_limiting(app, settings)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Error handlers
    register_error_handlers(app, settings)

    # ============================================================================
    # Routes
    # ============================================================================

    # Health routes (outside the API prefix, never rate limited)
    app.include_router(health.router, tags=["Health"])

    # API routes
    app.include_router(api_router, prefix=settings.api_prefix)

    return app
