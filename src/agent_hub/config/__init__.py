"""Configuration management for the agent hub."""

from agent_hub.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
