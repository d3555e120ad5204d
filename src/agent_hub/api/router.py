"""
API router aggregator.

Mounted at the configured API prefix (`/api` by default):
    - /agents - Agent registry, prompts and chat session start
    - /chat   - Messages within chat sessions
    - /models, /status - Model catalog and system status

Every route included here draws on the shared API rate limit.
"""

from fastapi import APIRouter

from agent_hub.api.routes import agents, chat, system


router = APIRouter()

router.include_router(
    agents.router,
    prefix="/agents",
    tags=["Agents"]
)

router.include_router(
    chat.router,
    prefix="/chat",
    tags=["Chat"]
)

router.include_router(
    system.router,
    tags=["System"]
)


__all__ = ["router"]
