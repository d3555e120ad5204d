from agent_hub.services.pipeline import RequestPipeline

__all__ = ["RequestPipeline"]
