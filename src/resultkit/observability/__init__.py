"""Observability module for resultkit.

Structured logging via structlog: configure_logging, get_logger, and the
context helpers bind_context / unbind_context / clear_context.
"""

from resultkit.observability.logging import (
    LoggingConfig,
    LogMode,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

__all__ = [
    "LogMode",
    "LoggingConfig",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "unbind_context",
]
