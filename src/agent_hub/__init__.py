"""Agent Hub: in-memory agent registry and chat sessions over HTTP/JSON."""

__version__ = "1.0.0"
