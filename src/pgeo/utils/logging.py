"""Structured logging configuration using structlog.

Provides correlation IDs for tracing a console session and the facade
operation being evaluated, with configurable output formats (JSON for
machine consumption, colored console for humans).
"""

import logging
import sys
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from pgeo.config import settings

# Context variables for correlation IDs
_session_id: ContextVar[str | None] = ContextVar("session_id", default=None)
_operation: ContextVar[str | None] = ContextVar("operation", default=None)


def set_correlation_context(
    session_id: str | None = None,
    operation: str | None = None,
) -> None:
    """Set correlation IDs for the current context.

    Args:
        session_id: Identifier of the interactive console session
        operation: Name of the facade operation being evaluated
    """
    if session_id is not None:
        _session_id.set(session_id)
    if operation is not None:
        _operation.set(operation)


def clear_correlation_context() -> None:
    """Clear all correlation context variables."""
    _session_id.set(None)
    _operation.set(None)


@contextmanager
def operation_context(operation: str) -> Iterator[None]:
    """Bind ``operation`` for the duration of a block, restoring the previous value."""
    token = _operation.set(operation)
    try:
        yield
    finally:
        _operation.reset(token)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add correlation IDs to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    session_id = _session_id.get()
    operation = _operation.get()

    if session_id is not None:
        event_dict["session_id"] = session_id
    if operation is not None:
        event_dict["operation"] = operation

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    # Shared processors for all output formats
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging to match; force replaces handlers left by
    # an earlier call so the level and stream always take effect.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
