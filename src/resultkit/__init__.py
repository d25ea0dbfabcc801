"""resultkit - Result type with recovery and escalation combinators.

A Result is exactly one of Ok(value) or Err(error). Failures travel as
values; combinators recover from them or, when a caller decides a failure
is unrecoverable, raise them.

Example:
    from resultkit import Err, Ok

    Err("timeout").recover_if(lambda e: e == "timeout", lambda e: "cached")
    # Ok('cached')

    Err(PermissionError("denied")).raise_if(lambda e: isinstance(e, PermissionError))
    # raises PermissionError("denied")
"""

from resultkit.core.errors import (
    ConfigError,
    EscalatedError,
    ResultError,
    UnwrapError,
)
from resultkit.core.types import Err, Ok, Result, catching

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Result",
    "Ok",
    "Err",
    "catching",
    "ResultError",
    "UnwrapError",
    "EscalatedError",
    "ConfigError",
]
