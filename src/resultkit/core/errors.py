"""Error hierarchy for resultkit.

This module defines the exceptions resultkit itself raises. Ordinary failures
travel as ``Err`` values; these exceptions only appear when a caller crosses
from the encoded channel into the raised one (wrong-variant access, explicit
escalation) or when configuration cannot be loaded.

Exception Hierarchy:
    ResultError (base)
    ├── UnwrapError     - Payload accessed on the wrong variant
    ├── EscalatedError  - Non-exception failure payload raised by escalation
    └── ConfigError     - Configuration file issues
"""

from typing import Any


class ResultError(Exception):
    """Base exception for all resultkit errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dict with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable error description.
            details: Optional dict with additional context about the error.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class UnwrapError(ResultError, ValueError):
    """Raised when a payload is read from the wrong variant.

    Also a ValueError, so callers written against ``unwrap()`` raising
    ValueError keep working.
    """


class EscalatedError(ResultError):
    """A failure payload that was escalated but is not itself an exception.

    Escalation combinators raise exception payloads directly. Anything else
    is wrapped in this class so it can be raised.

    Attributes:
        error: The original failure payload.
    """

    def __init__(self, error: Any, details: dict[str, Any] | None = None) -> None:
        """Initialize escalated error.

        Args:
            error: The failure payload being escalated.
            details: Optional dict with additional context.
        """
        super().__init__(str(error), details)
        self.error = error


class ConfigError(ResultError):
    """Error from configuration operations.

    Raised when configuration loading, parsing, or validation fails.

    Attributes:
        config_key: The configuration key that caused the error.
        config_file: Path to the config file if applicable.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        config_file: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize config error.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            config_file: Path to the config file if applicable.
            details: Optional dict with additional context.
        """
        super().__init__(message, details)
        self.config_key = config_key
        self.config_file = config_file
