"""Core types for resultkit - the Result type and its combinators.

This module provides:
- Result[T, E]: A value that is either a success (Ok) or a failure (Err)
- Recovery combinators that turn an Err into an Ok or into another Err
- Escalation combinators that turn an Err into a raised exception
- Ok/Err factories and catching() for wrapping calls that may raise

Failures normally travel as Err values. Exceptions appear only where a caller
asks for them (or_else_raise, raise_if, raise_unless) or where a user
callback raises inside a combinator that does not intercept.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn, cast

import structlog

from resultkit.core.errors import EscalatedError, UnwrapError
from resultkit.observability.logging import is_configured

log = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class Result[T, E]:
    """A type that represents either success (Ok) or failure (Err).

    Usage:
        # Construction
        ok_result: Result[int, str] = Result.ok(42)
        err_result: Result[int, str] = Result.err("something went wrong")

        # Inspection
        if result.is_ok:
            process(result.value)
        else:
            handle_error(result.error)

        # Recovery
        result.recover(lambda e: 0)
        result.recover_if(lambda e: e == "timeout", lambda e: cached)

        # Escalation
        result.raise_if(lambda e: isinstance(e, PermissionError))
    """

    _value: T | None
    _error: E | None
    _is_ok: bool

    def __post_init__(self) -> None:
        if self._is_ok and self._error is not None:
            msg = "Ok result cannot carry an error"
            raise ValueError(msg)
        if not self._is_ok and self._value is not None:
            msg = "Err result cannot carry a value"
            raise ValueError(msg)

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        """Create a successful Result containing the given value.

        Args:
            value: The success value to wrap.

        Returns:
            A Result in the Ok state.
        """
        return cls(_value=value, _error=None, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        """Create a failed Result containing the given error.

        Args:
            error: The error value to wrap.

        Returns:
            A Result in the Err state.
        """
        return cls(_value=None, _error=error, _is_ok=False)

    @property
    def is_ok(self) -> bool:
        """Return True if this Result is Ok (success)."""
        return self._is_ok

    @property
    def is_err(self) -> bool:
        """Return True if this Result is Err (failure)."""
        return not self._is_ok

    def __repr__(self) -> str:
        """Return 'Ok(value)' for success, 'Err(error)' for failure."""
        if self._is_ok:
            return f"Ok({self._value!r})"
        return f"Err({self._error!r})"

    @property
    def value(self) -> T:
        """Return the Ok value.

        Raises:
            UnwrapError: If this Result is Err.
        """
        if not self._is_ok:
            msg = "Cannot access value on Err result"
            raise UnwrapError(msg)
        return cast(T, self._value)

    @property
    def error(self) -> E:
        """Return the Err value.

        Raises:
            UnwrapError: If this Result is Ok.
        """
        if self._is_ok:
            msg = "Cannot access error on Ok result"
            raise UnwrapError(msg)
        return cast(E, self._error)

    def unwrap(self) -> T:
        """Return the Ok value or raise UnwrapError if Err.

        Raises:
            UnwrapError: If this Result is Err, with the error as the message.
        """
        if self._is_ok:
            return cast(T, self._value)
        raise UnwrapError(str(self._error))

    def unwrap_err(self) -> E:
        """Return the Err value or raise UnwrapError if Ok."""
        if not self._is_ok:
            return cast(E, self._error)
        raise UnwrapError(f"Called unwrap_err() on Ok value: {self._value!r}")

    def unwrap_or(self, default: T) -> T:
        """Return the Ok value or the provided default if Err."""
        if self._is_ok:
            return cast(T, self._value)
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        """Return the Ok value or compute one from the error."""
        if self._is_ok:
            return cast(T, self._value)
        return fn(cast(E, self._error))

    def map[U](self, fn: Callable[[T], U]) -> "Result[U, E]":
        """Transform the Ok value using the given function.

        Args:
            fn: Function to apply to the Ok value.

        Returns:
            Ok(fn(value)) if Ok, otherwise the original error.
        """
        if self._is_ok:
            return Result.ok(fn(cast(T, self._value)))
        return Result.err(cast(E, self._error))

    def map_err[F](self, fn: Callable[[E], F]) -> "Result[T, F]":
        """Transform the Err value using the given function.

        Args:
            fn: Function to apply to the Err value.

        Returns:
            Err(fn(error)) if Err, otherwise the original value.
        """
        if self._is_ok:
            return Result.ok(cast(T, self._value))
        return Result.err(fn(cast(E, self._error)))

    def and_then[U](self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain Result-producing operations (flatMap/bind).

        Example:
            def divide(a: int, b: int) -> Result[int, str]:
                if b == 0:
                    return Result.err("division by zero")
                return Result.ok(a // b)

            result = Result.ok(10).and_then(lambda x: divide(x, 2))
            # Returns Ok(5)
        """
        if self._is_ok:
            return fn(cast(T, self._value))
        return Result.err(cast(E, self._error))

    def fold[U](self, on_ok: Callable[[T], U], on_err: Callable[[E], U]) -> U:
        """Collapse both variants into a single value."""
        if self._is_ok:
            return on_ok(cast(T, self._value))
        return on_err(cast(E, self._error))

    # ------------------------------------------------------------------
    # Recovery
    # ------------------------------------------------------------------

    def or_[F](self, fallback: "Result[T, F]") -> "Result[T, F]":
        """Return this Result if Ok, otherwise the given fallback.

        The fallback is evaluated by the caller before the call. Use
        or_else() when it is expensive to build.

        Args:
            fallback: Result returned in place of an Err.

        Returns:
            This Result if Ok, otherwise fallback unchanged.
        """
        if self._is_ok:
            return cast("Result[T, F]", self)
        return fallback

    def or_else[F](self, fn: Callable[[E], "Result[T, F]"]) -> "Result[T, F]":
        """Return this Result if Ok, otherwise the Result built from the error.

        fn is only called for Err. Exceptions raised by fn propagate.

        Args:
            fn: Function that takes the Err value and returns a new Result.

        Returns:
            This Result if Ok, otherwise fn(error).
        """
        if self._is_ok:
            return cast("Result[T, F]", self)
        return fn(cast(E, self._error))

    def recover(self, fn: Callable[[E], T]) -> "Result[T, E]":
        """Turn an Err into an Ok using fn(error).

        Exceptions raised by fn propagate; use recover_catching() when the
        transform itself may fail.

        Args:
            fn: Function that maps the Err value to a success value.

        Returns:
            This Result if Ok, otherwise Ok(fn(error)).
        """
        if self._is_ok:
            return self
        return Result.ok(fn(cast(E, self._error)))

    def recover_catching(self, fn: Callable[[E], T]) -> "Result[T, Exception]":
        """Turn an Err into an Ok, capturing a failing transform as a new Err.

        If fn raises, the exception becomes the error of the returned Result
        instead of propagating. MemoryError and exceptions outside the
        Exception hierarchy (KeyboardInterrupt, SystemExit) still propagate.

        Args:
            fn: Function that maps the Err value to a success value.

        Returns:
            This Result if Ok, Ok(fn(error)) if fn returns, or Err(exc) if
            fn raised exc.
        """
        if self._is_ok:
            return cast("Result[T, Exception]", self)
        return catching(fn, cast(E, self._error))

    def recover_if(
        self, predicate: Callable[[E], bool], fn: Callable[[E], T]
    ) -> "Result[T, E]":
        """Recover only the errors that match predicate.

        Args:
            predicate: Test applied to the Err value.
            fn: Function that maps a matching Err value to a success value.

        Returns:
            Ok(fn(error)) if Err and predicate(error) is true, otherwise
            this Result unchanged.
        """
        if self._is_ok:
            return self
        error = cast(E, self._error)
        if predicate(error):
            return Result.ok(fn(error))
        return self

    def recover_unless(
        self, predicate: Callable[[E], bool], fn: Callable[[E], T]
    ) -> "Result[T, E]":
        """Recover every error except those that match predicate.

        Args:
            predicate: Test applied to the Err value.
            fn: Function that maps a non-matching Err value to a success value.

        Returns:
            Ok(fn(error)) if Err and predicate(error) is false, otherwise
            this Result unchanged.
        """
        if self._is_ok:
            return self
        error = cast(E, self._error)
        if not predicate(error):
            return Result.ok(fn(error))
        return self

    # ------------------------------------------------------------------
    # Escalation
    # ------------------------------------------------------------------

    def or_else_raise(self) -> "Result[T, E]":
        """Return this Result if Ok, otherwise raise its error.

        Raises:
            BaseException: The error itself when it is an exception instance.
            EscalatedError: Wrapping the error when it is any other value.
        """
        if self._is_ok:
            return self
        self._escalate()

    def raise_if(self, predicate: Callable[[E], bool]) -> "Result[T, E]":
        """Raise the error if this Result is Err and predicate(error) is true.

        The predicate is never called for Ok.

        Raises:
            BaseException: The error itself when it is an exception instance.
            EscalatedError: Wrapping the error when it is any other value.
        """
        if self._is_ok:
            return self
        if predicate(cast(E, self._error)):
            self._escalate()
        return self

    def raise_unless(self, predicate: Callable[[E], bool]) -> "Result[T, E]":
        """Raise the error if this Result is Err and predicate(error) is false.

        The predicate is never called for Ok.

        Raises:
            BaseException: The error itself when it is an exception instance.
            EscalatedError: Wrapping the error when it is any other value.
        """
        if self._is_ok:
            return self
        if not predicate(cast(E, self._error)):
            self._escalate()
        return self

    def _escalate(self) -> NoReturn:
        error = self._error
        if is_configured():
            log.debug("result.escalation.raised", error_type=type(error).__name__)
        if isinstance(error, BaseException):
            raise error
        raise EscalatedError(error)


def Ok[T](value: T) -> Result[T, Any]:  # noqa: N802
    """Construct the Ok variant (success)."""
    return Result.ok(value)


def Err[E](error: E) -> Result[Any, E]:  # noqa: N802
    """Construct the Err variant (failure)."""
    return Result.err(error)


def catching[R](fn: Callable[..., R], *args: Any, **kwargs: Any) -> Result[R, Exception]:
    """Call fn and capture its outcome as a Result.

    Exactly one call is wrapped. Any Exception it raises is returned as Err,
    except MemoryError, which propagates along with non-Exception signals
    such as KeyboardInterrupt and SystemExit.

    Example:
        >>> catching(int, "42")
        Ok(42)
        >>> catching(int, "forty-two").is_err
        True

    Args:
        fn: Callable to invoke.
        *args: Positional arguments for fn.
        **kwargs: Keyword arguments for fn.

    Returns:
        Ok(return value) or Err(raised exception).
    """
    try:
        value = fn(*args, **kwargs)
    except MemoryError:
        raise
    except Exception as exc:
        if is_configured():
            log.debug("result.exception.intercepted", exception_type=type(exc).__name__)
        return Result.err(exc)
    return Result.ok(value)
