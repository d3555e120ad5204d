# src/agent_hub/api/dependencies.py
from typing import Annotated
from fastapi import Depends, Request

from agent_hub.services import RequestPipeline


def get_pipeline(request: Request) -> RequestPipeline:
    """Request pipeline owned by the running application."""
    return request.app.state.pipeline


# Type alias for clean injection
Pipeline = Annotated[RequestPipeline, Depends(get_pipeline)]
