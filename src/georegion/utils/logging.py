"""Structured logging configuration using structlog.

Every geometry operation runs under a short-lived operation context
(operation name and projection zone) so that log lines emitted deep inside
the projector or the planar kernel can be traced back to the call that
triggered them. Output is JSON for production or colored console for dev.
"""

import logging
import sys
from collections.abc import Iterator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from georegion.config import settings

# Context variables for the running operation
_operation: ContextVar[str | None] = ContextVar("operation", default=None)
_zone: ContextVar[int | None] = ContextVar("zone", default=None)


def set_operation_context(
    operation: str | None = None,
    zone: int | None = None,
) -> None:
    """Set operation context for the current execution context.

    Args:
        operation: Name of the running operation (e.g. "region.union").
        zone: UTM zone the operation projects into.
    """
    if operation is not None:
        _operation.set(operation)
    if zone is not None:
        _zone.set(zone)


def clear_operation_context() -> None:
    """Clear all operation context variables."""
    _operation.set(None)
    _zone.set(None)


def _add_operation_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add operation context to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    operation = _operation.get()
    zone = _zone.get()

    if operation is not None:
        event_dict["operation"] = operation
    if zone is not None:
        event_dict["zone"] = zone

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

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_operation_context,
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
        cache_logger_on_first_use=False,
    )

    # Configure stdlib logging to match
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
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


@contextmanager
def operation_context(operation: str, zone: int | None = None) -> Iterator[None]:
    """Scope operation context to a block, restoring the outer context after.

    Nested operations (a circle containment test that builds a region and
    then tests it) report the innermost operation and fall back cleanly.
    """
    op_token = _operation.set(operation)
    zone_token = _zone.set(zone)
    try:
        yield
    finally:
        _zone.reset(zone_token)
        _operation.reset(op_token)


def configure_default_logging() -> None:
    """Route events through stdlib logging until configure_logging is called.

    Applied on import when the host application has not configured structlog
    itself. Events below the stdlib logger's effective level (WARNING unless
    the host says otherwise) are dropped instead of printed.
    """
    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            _add_operation_context,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


configure_default_logging()
