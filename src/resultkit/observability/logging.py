"""Structured logging configuration for resultkit.

resultkit logs through structlog. Importing the package never configures
logging; applications opt in with configure_logging(), or get_logger() does
it with defaults on first use.

Two modes are supported:
- dev: human-readable console output
- prod: one JSON object per line

Events emitted by the core (debug level, only once configure_logging() has
run, so an application that never opts in sees no output):
- result.escalation.raised: an escalation combinator is about to raise
- result.exception.intercepted: catching()/recover_catching() turned an
  exception into an Err

Event naming convention: dot.notation, domain.entity.verb_past_tense.

Usage:
    from resultkit.observability import configure_logging, get_logger, LoggingConfig

    configure_logging(LoggingConfig(mode=LogMode.PROD, log_level="DEBUG"))
    log = get_logger()
    log.info("payment.charge.recovered", attempt=2)
"""

from __future__ import annotations

from enum import Enum
from functools import partialmethod
import logging
from logging.handlers import TimedRotatingFileHandler
import os
from pathlib import Path
import sys
from typing import Any

from pydantic import BaseModel, Field
import structlog

LOGGER_NAME = "resultkit"
LOG_FILE_NAME = "resultkit.log"


class LogMode(str, Enum):
    """Logging output mode."""

    DEV = "dev"
    PROD = "prod"


class LoggingConfig(BaseModel):
    """Configuration for structured logging.

    Attributes:
        mode: Output mode (dev for human-readable, prod for JSON).
        log_level: Minimum log level to output.
        log_dir: Directory for log files. Defaults to ~/.resultkit/logs/.
        max_log_days: Number of days to retain log files. Defaults to 7.
        enable_file_logging: Whether to also write JSON lines to a file.
    """

    mode: LogMode = Field(default=LogMode.DEV)
    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default_factory=lambda: Path.home() / ".resultkit" / "logs")
    max_log_days: int = Field(default=7, ge=1, le=365)
    enable_file_logging: bool = Field(default=False)

    model_config = {"frozen": True}


_configured: bool = False
_current_config: LoggingConfig | None = None
_console_logging_enabled: bool = True

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _get_mode_from_env() -> LogMode:
    """Read RESULTKIT_LOG_MODE; anything other than "prod" means dev."""
    env_mode = os.environ.get("RESULTKIT_LOG_MODE", "dev").lower()
    if env_mode == "prod":
        return LogMode.PROD
    return LogMode.DEV


def _get_log_level(level_str: str) -> int:
    """Convert a level name to its logging constant, defaulting to INFO."""
    return _LEVELS.get(level_str.upper(), logging.INFO)


def _setup_file_handler(config: LoggingConfig) -> TimedRotatingFileHandler | None:
    """Create the daily-rotating file handler, or None if file logging is off."""
    if not config.enable_file_logging:
        return None

    config.log_dir.mkdir(parents=True, exist_ok=True)

    handler = TimedRotatingFileHandler(
        filename=str(config.log_dir / LOG_FILE_NAME),
        when="midnight",
        interval=1,
        backupCount=config.max_log_days,
        encoding="utf-8",
        utc=True,
    )
    # structlog has already rendered the line
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(_get_log_level(config.log_level))
    return handler


def _get_processors(mode: LogMode) -> list[Any]:
    """Build the structlog processor chain for the given mode."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if mode == LogMode.DEV:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.JSONRenderer())
    return processors


def set_console_logging(enabled: bool) -> None:
    """Enable or disable console (stderr) log output."""
    global _console_logging_enabled
    _console_logging_enabled = enabled


class _StderrFileLogger:
    """Writes rendered lines to stderr and, optionally, a file handler."""

    def __init__(self, file_handler: TimedRotatingFileHandler | None = None) -> None:
        self._file_handler = file_handler

    def _log(self, message: str, level: int = logging.INFO) -> None:
        if _console_logging_enabled:
            print(message, file=sys.stderr)

        if self._file_handler is not None:
            record = logging.LogRecord(
                name=LOGGER_NAME,
                level=level,
                pathname="",
                lineno=0,
                msg=message,
                args=(),
                exc_info=None,
            )
            self._file_handler.emit(record)

    msg = partialmethod(_log, level=logging.INFO)
    debug = partialmethod(_log, level=logging.DEBUG)
    info = partialmethod(_log, level=logging.INFO)
    warning = partialmethod(_log, level=logging.WARNING)
    warn = warning
    error = partialmethod(_log, level=logging.ERROR)
    exception = error
    critical = partialmethod(_log, level=logging.CRITICAL)
    fatal = critical


class _StderrFileLoggerFactory:
    """structlog logger factory producing _StderrFileLogger instances."""

    def __init__(self, file_handler: TimedRotatingFileHandler | None = None) -> None:
        self._file_handler = file_handler

    def __call__(self, *_args: Any) -> _StderrFileLogger:
        return _StderrFileLogger(self._file_handler)


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure structlog for resultkit.

    Sets up the processor chain, the renderer for the chosen mode, level
    filtering, and the optional rotating file handler. The file handler is
    attached to the "resultkit" stdlib logger only; the root logger is left
    alone.

    Args:
        config: Logging configuration. If None, uses defaults with the mode
            taken from the RESULTKIT_LOG_MODE environment variable.

    Example:
        configure_logging(LoggingConfig(mode=LogMode.PROD, max_log_days=14))
    """
    global _configured, _current_config

    if config is None:
        config = LoggingConfig(mode=_get_mode_from_env())

    _current_config = config
    log_level = _get_log_level(config.log_level)

    stdlib_logger = logging.getLogger(LOGGER_NAME)
    stdlib_logger.setLevel(log_level)
    for handler in stdlib_logger.handlers[:]:
        stdlib_logger.removeHandler(handler)
        handler.close()

    file_handler = _setup_file_handler(config)
    if file_handler is not None:
        stdlib_logger.addHandler(file_handler)

    structlog.configure(
        processors=_get_processors(config.mode),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_StderrFileLoggerFactory(file_handler),
        # module-level proxies in the core must follow reconfiguration
        cache_logger_on_first_use=False,
    )

    _configured = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger, configuring logging with defaults if needed.

    Args:
        name: Optional logger name.

    Returns:
        A bound structlog logger.
    """
    if not _configured:
        configure_logging()

    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables included in every subsequent log entry.

    Example:
        bind_context(request_id="req_123")
        log.info("order.lookup.failed")  # includes request_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove context variables from the logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


def get_current_config() -> LoggingConfig | None:
    """Return the active LoggingConfig, or None if not configured."""
    return _current_config


def is_configured() -> bool:
    """Check if configure_logging has been called."""
    return _configured


def reset_logging() -> None:
    """Reset logging state to unconfigured.

    Clears bound context, detaches the file handler and restores structlog
    defaults. Mainly for tests.
    """
    global _configured, _current_config
    _configured = False
    _current_config = None
    structlog.contextvars.clear_contextvars()
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    for handler in stdlib_logger.handlers[:]:
        stdlib_logger.removeHandler(handler)
        handler.close()
    structlog.reset_defaults()
