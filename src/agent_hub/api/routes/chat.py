# src/agent_hub/api/routes/chat.py
from fastapi import APIRouter

from agent_hub.api.dependencies import Pipeline
from agent_hub.api.schemas.base import SuccessResponse
from agent_hub.api.schemas.errors import ErrorResponse
from agent_hub.domain.models import ChatMessageRequest
from agent_hub.services.results import ChatReply

router = APIRouter()


@router.post(
    "/{session_id}/message",
    response_model=SuccessResponse[ChatReply],
    response_model_exclude_none=True,
    summary="Send a chat message",
    description="""
    Append a message to a chat session and return the agent's reply.

    The response carries only the last 10 messages of the conversation;
    the full history is kept on the server.
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Empty message"},
        404: {"model": ErrorResponse, "description": "Chat session not found"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    },
)
async def send_message(
    session_id: str,
    payload: ChatMessageRequest,
    pipeline: Pipeline,
):
    reply = await pipeline.send_message(session_id, payload)
    return SuccessResponse[ChatReply](data=reply)
