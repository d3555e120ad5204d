# src/agent_hub/interfaces/__init__.py
from .inference import IInferenceGateway, InferenceResult
from .identifiers import IIdGenerator

__all__ = [
    "IInferenceGateway",
    "InferenceResult",
    "IIdGenerator",
]
