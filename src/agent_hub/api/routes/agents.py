# src/agent_hub/api/routes/agents.py
from fastapi import APIRouter, status

from agent_hub.api.dependencies import Pipeline
from agent_hub.api.schemas.base import ListResponse, SuccessResponse
from agent_hub.api.schemas.errors import ErrorResponse
from agent_hub.domain.models import AgentDraft, AgentSummary, PromptRequest
from agent_hub.services.results import AgentCreated, ChatStarted, PromptResult

router = APIRouter()


@router.get(
    "",
    response_model=ListResponse[AgentSummary],
    response_model_exclude_none=True,
    summary="List agents",
    description="List every registered agent. Behavior and settings are never included.",
    responses={429: {"model": ErrorResponse, "description": "Rate limit exceeded"}},
)
async def list_agents(pipeline: Pipeline):
    listing = pipeline.list_agents()
    return ListResponse[AgentSummary](data=listing.items, total=listing.total)


@router.post(
    "",
    response_model=SuccessResponse[AgentCreated],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create an agent",
    description="""
    Register a new agent.

    **Example Request:**
    ```json
    {
        "name": "Support Assistant",
        "behavior": "Answers billing questions politely",
        "model": "gpt-4o",
        "description": "First-line support"
    }
    ```
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid agent fields"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    },
)
async def create_agent(payload: AgentDraft, pipeline: Pipeline):
    created = pipeline.create_agent(payload)
    return SuccessResponse[AgentCreated](
        message="Agent created successfully",
        data=created,
    )


@router.post(
    "/{agent_id}/prompt",
    response_model=SuccessResponse[PromptResult],
    response_model_exclude_none=True,
    summary="Prompt an agent",
    description="Send a one-off message to an agent. Nothing is stored.",
    responses={
        400: {"model": ErrorResponse, "description": "Empty message"},
        404: {"model": ErrorResponse, "description": "Agent not found"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    },
)
async def prompt_agent(
    agent_id: str,
    payload: PromptRequest,
    pipeline: Pipeline,
):
    result = await pipeline.prompt_agent(agent_id, payload)
    return SuccessResponse[PromptResult](data=result)


@router.post(
    "/{agent_id}/chat/start",
    response_model=SuccessResponse[ChatStarted],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Start a chat session",
    responses={
        404: {"model": ErrorResponse, "description": "Agent not found"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    },
)
async def start_chat(agent_id: str, pipeline: Pipeline):
    started = pipeline.start_chat(agent_id)
    return SuccessResponse[ChatStarted](
        message="Chat session started",
        data=started,
    )
