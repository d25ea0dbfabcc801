"""resultkit core module - the Result type, its combinators, and errors."""

from resultkit.core.errors import (
    ConfigError,
    EscalatedError,
    ResultError,
    UnwrapError,
)
from resultkit.core.types import Err, Ok, Result, catching

__all__ = [
    # Types
    "Result",
    "Ok",
    "Err",
    "catching",
    # Errors
    "ResultError",
    "UnwrapError",
    "EscalatedError",
    "ConfigError",
]
