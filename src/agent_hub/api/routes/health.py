"""Liveness endpoint for orchestrator probes. Not rate limited."""
from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from agent_hub.domain.models import utcnow

router = APIRouter()


class LivenessResponse(BaseModel):
    """Liveness probe response."""
    status: str = Field("alive", description="Liveness status")
    timestamp: datetime = Field(default_factory=utcnow)


@router.get(
    "/health",
    response_model=LivenessResponse,
    summary="Liveness probe",
)
async def liveness() -> LivenessResponse:
    return LivenessResponse()
