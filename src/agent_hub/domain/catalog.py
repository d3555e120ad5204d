"""Static catalog of the models an agent can be configured with."""
from agent_hub.domain.models import DomainModel, ModelId


class ModelDescriptor(DomainModel):
    id: ModelId
    name: str
    provider: str
    description: str
    cost_per_token: float


MODEL_CATALOG: tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        id=ModelId.GPT_4O,
        name="GPT-4 Optimized",
        provider="OpenAI",
        description="Most capable model for complex tasks",
        cost_per_token=0.00003,
    ),
    ModelDescriptor(
        id=ModelId.GPT_4O_MINI,
        name="GPT-4 Mini",
        provider="OpenAI",
        description="Smaller variant tuned for speed",
        cost_per_token=0.00001,
    ),
    ModelDescriptor(
        id=ModelId.CLAUDE_3_SONNET,
        name="Claude 3 Sonnet",
        provider="Anthropic",
        description="Strong at analysis and reasoning",
        cost_per_token=0.00002,
    ),
)


def list_models() -> list[ModelDescriptor]:
    return list(MODEL_CATALOG)
