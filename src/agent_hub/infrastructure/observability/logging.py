"""
Structured logging configuration.

Use `get_logger(__name__)` from this module rather than print().
"""
from typing import Optional
import structlog
from agent_hub.config.settings import Settings, get_settings
from agent_hub.api.middleware.request_id import add_request_id_to_log


def console_renderer_with_colors():
    """Console renderer with colors for development."""
    return structlog.dev.ConsoleRenderer(
        colors=True,
        pad_event_to=25,
        exception_formatter=structlog.dev.plain_traceback,
    )


def json_renderer():
    """JSON renderer for production."""
    return structlog.processors.JSONRenderer()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structured logging.

    Sets up:
    - Context variable merging (for bound context)
    - Request ID tracking
    - Log level and ISO timestamps
    - Exception formatting
    - JSON output for production or colored console for development

    Args:
        settings: Settings to read level and format from (defaults to get_settings())
    """
    settings = settings or get_settings()

    if settings.log_format == "json":
        renderer = json_renderer()
    else:
        renderer = console_renderer_with_colors()

    processors = [
        structlog.contextvars.merge_contextvars,
        add_request_id_to_log,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Get a logger instance with structured logging support.

    Usage:
        >>> from agent_hub.infrastructure.observability.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("agent created", agent_id="agent_123")
    """
    return structlog.get_logger(name)
