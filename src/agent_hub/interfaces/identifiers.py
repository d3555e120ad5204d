# src/agent_hub/interfaces/identifiers.py
from __future__ import annotations
from abc import ABC, abstractmethod


class IIdGenerator(ABC):
    """
    Source of opaque, collision-resistant identifiers.

    The entity store asks for a fresh id per record and never interprets
    it. Tests inject a deterministic implementation.
    """

    @abstractmethod
    def new_id(self, prefix: str) -> str:
        """
        Return a new identifier.

        Args:
            prefix: Entity kind, e.g. "agent" or "chat"
        """
        pass
