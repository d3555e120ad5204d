from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment.

    Every value can be overridden with an environment variable of the same
    name (case-insensitive) or from a local `.env` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Agent Hub"
    app_version: str = "1.0.0"
    environment: Literal["local", "dev", "staging", "prod"] = "local"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    api_prefix: str = "/api"

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit_api: str = "100/15 minutes"  # shared by every route under api_prefix

    # Chat
    chat_history_window: int = 10  # messages returned by send-message

    # Simulated inference latency, in seconds
    inference_min_delay: float = 1.0
    inference_max_delay: float = 3.0

    # Observability
    log_level: int = 20  # INFO by default (DEBUG=10, INFO=20, WARNING=30, ERROR=40)
    log_format: Literal["json", "console"] = "json"

    @property
    def is_production(self) -> bool:
        return self.environment == "prod"

    @property
    def is_development(self) -> bool:
        return self.environment in ("local", "dev")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
