"""Identifier generators for the entity store."""
import itertools
import secrets
import string
import time

from agent_hub.interfaces import IIdGenerator

_ALPHABET = string.ascii_lowercase + string.digits


class TimestampIdGenerator(IIdGenerator):
    """
    Produces ids like `agent_1718000000000_k3j9x0q2a`.

    Millisecond timestamp plus a random suffix drawn from `secrets`.
    """

    def __init__(self, suffix_length: int = 9):
        self.suffix_length = suffix_length

    def new_id(self, prefix: str) -> str:
        millis = int(time.time() * 1000)
        suffix = "".join(secrets.choice(_ALPHABET) for _ in range(self.suffix_length))
        return f"{prefix}_{millis}_{suffix}"


class SequentialIdGenerator(IIdGenerator):
    """Deterministic ids (`agent_1`, `chat_2`, ...) for tests and local runs."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def new_id(self, prefix: str) -> str:
        return f"{prefix}_{next(self._counter)}"
