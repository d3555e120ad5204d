# src/agent_hub/api/routes/system.py
"""Model catalog and system status."""
from fastapi import APIRouter

from agent_hub.api.dependencies import Pipeline
from agent_hub.api.schemas.base import SuccessResponse
from agent_hub.domain.catalog import ModelDescriptor
from agent_hub.services.results import SystemStatus

router = APIRouter()


@router.get(
    "/models",
    response_model=SuccessResponse[list[ModelDescriptor]],
    response_model_exclude_none=True,
    summary="List available models",
)
async def list_models(pipeline: Pipeline):
    return SuccessResponse[list[ModelDescriptor]](data=pipeline.list_models())


@router.get(
    "/status",
    response_model=SuccessResponse[SystemStatus],
    response_model_exclude_none=True,
    summary="System status",
    description="Agent and session counts, uptime and memory usage of the serving process.",
)
async def system_status(pipeline: Pipeline):
    return SuccessResponse[SystemStatus](data=pipeline.system_status())
