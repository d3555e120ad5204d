from agent_hub.agent.simulated import SimulatedInferenceGateway

__all__ = ["SimulatedInferenceGateway"]
