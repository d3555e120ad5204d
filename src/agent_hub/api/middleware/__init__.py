"""FastAPI middleware components."""

from agent_hub.api.middleware.request_id import (
    RequestIDMiddleware,
    add_request_id_to_log,
)

__all__ = [
    "RequestIDMiddleware",
    "add_request_id_to_log",
]
