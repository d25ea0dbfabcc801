"""Unit tests for the escalation combinators on resultkit.core.types.Result."""

from collections.abc import Iterator
from typing import Any

import pytest
import structlog

from resultkit.core.errors import EscalatedError, ResultError
from resultkit.core.types import Err, Ok, Result, catching
from resultkit.observability.logging import (
    LoggingConfig,
    configure_logging,
    reset_logging,
)


class Unreachable(Exception):
    """Raised by predicates that must never be called."""


def _never(_: Any) -> bool:
    raise Unreachable


class TestEscalationOnOk:
    """Escalation combinators pass Ok through without evaluating predicates."""

    def test_or_else_raise_returns_ok(self) -> None:
        """or_else_raise() returns the Ok unchanged."""
        result: Result[int, Exception] = Ok(5000)

        assert result.or_else_raise() is result

    def test_raise_if_returns_ok(self) -> None:
        """raise_if() returns Ok even when the predicate would be true."""
        assert Ok(200).raise_if(lambda _: True) == Ok(200)

    def test_raise_unless_returns_ok(self) -> None:
        """raise_unless() returns Ok even when the predicate would be false."""
        assert Ok(500).raise_unless(lambda _: False) == Ok(500)

    @pytest.mark.parametrize("method", ["raise_if", "raise_unless"])
    def test_predicate_never_called(self, method: str) -> None:
        """The predicate is short-circuited for Ok."""
        result: Result[int, str] = Ok(1)

        assert getattr(result, method)(_never) is result


class TestOrElseRaise:
    """Test Result.or_else_raise()."""

    def test_raises_exception_payload_itself(self) -> None:
        """An exception payload is raised as the very same object."""
        error = RuntimeError("or else throw")

        with pytest.raises(RuntimeError, match="or else throw") as exc_info:
            Err(error).or_else_raise()

        assert exc_info.value is error

    def test_wraps_plain_payload(self) -> None:
        """A non-exception payload is raised inside EscalatedError."""
        with pytest.raises(EscalatedError, match="quota exceeded") as exc_info:
            Err("quota exceeded").or_else_raise()

        assert exc_info.value.error == "quota exceeded"
        assert exc_info.value.message == "quota exceeded"
        assert isinstance(exc_info.value, ResultError)

    def test_wraps_structured_payload(self) -> None:
        """The description of a wrapped payload is str(payload)."""
        with pytest.raises(EscalatedError) as exc_info:
            Err(4000).or_else_raise()

        assert str(exc_info.value) == "4000"
        assert exc_info.value.error == 4000


class TestRaiseIf:
    """Test Result.raise_if(predicate)."""

    def test_returns_err_if_predicate_does_not_match(self) -> None:
        """A false predicate leaves the Err in place."""
        error = RuntimeError("throw if")
        result: Result[int, RuntimeError] = Err(error)

        assert result.raise_if(lambda _: False) is result
        assert result.raise_if(lambda _: False) == Err(error)

    def test_raises_if_predicate_matches(self) -> None:
        """A true predicate raises the error."""
        error = RuntimeError("throw if")

        with pytest.raises(RuntimeError, match="throw if") as exc_info:
            Err(error).raise_if(lambda _: True)

        assert exc_info.value is error

    def test_predicate_receives_error(self) -> None:
        """The predicate is called with the Err payload."""
        seen: list[Any] = []

        Err("payload").raise_if(lambda e: seen.append(e) or False)

        assert seen == ["payload"]

    def test_selective_escalation(self) -> None:
        """Only errors of the selected kind are raised."""
        results: list[Result[int, Exception]] = [
            Err(TimeoutError("slow")),
            Err(PermissionError("denied")),
        ]

        kept = results[0].raise_if(lambda e: isinstance(e, PermissionError))
        assert kept.is_err

        with pytest.raises(PermissionError, match="denied"):
            results[1].raise_if(lambda e: isinstance(e, PermissionError))


class TestRaiseUnless:
    """Test Result.raise_unless(predicate)."""

    def test_returns_err_if_predicate_matches(self) -> None:
        """A true predicate leaves the Err in place."""
        error = RuntimeError("example")

        assert Err(error).raise_unless(lambda _: True) == Err(error)

    def test_raises_if_predicate_does_not_match(self) -> None:
        """A false predicate raises the error."""
        error = RuntimeError("throw unless")

        with pytest.raises(RuntimeError, match="throw unless"):
            Err(error).raise_unless(lambda _: False)

    def test_wraps_plain_payload(self) -> None:
        """Non-exception payloads are wrapped when raised."""
        with pytest.raises(EscalatedError, match="not found"):
            Err("not found").raise_unless(lambda e: e == "retry")


class TestEscalationLogging:
    """Escalation and interception emit debug events."""

    @pytest.fixture(autouse=True)
    def debug_logging(self) -> Iterator[None]:
        reset_logging()
        configure_logging(LoggingConfig(log_level="DEBUG", enable_file_logging=False))
        yield
        reset_logging()

    def test_escalation_is_logged(self, capsys: Any) -> None:
        """Raising from an Err logs result.escalation.raised."""
        with pytest.raises(ValueError):
            Err(ValueError("bad")).or_else_raise()

        captured = capsys.readouterr()
        assert "result.escalation.raised" in captured.err
        assert "ValueError" in captured.err

    def test_interception_is_logged(self, capsys: Any) -> None:
        """recover_catching logs the intercepted exception type."""

        def explode(_: Any) -> int:
            raise LookupError("gone")

        Err(1).recover_catching(explode)

        captured = capsys.readouterr()
        assert "result.exception.intercepted" in captured.err
        assert "LookupError" in captured.err

    def test_no_event_without_escalation(self, capsys: Any) -> None:
        """Passing an Ok through emits nothing."""
        Ok(1).or_else_raise()

        captured = capsys.readouterr()
        assert "result.escalation.raised" not in captured.err


class TestUnconfiguredLogging:
    """The core stays silent until the application configures logging."""

    @pytest.fixture(autouse=True)
    def unconfigured(self) -> Iterator[None]:
        reset_logging()
        structlog.reset_defaults()
        yield
        reset_logging()

    def test_escalation_writes_nothing(self, capsys: Any) -> None:
        """or_else_raise() on an Err produces no stdout or stderr output."""
        with pytest.raises(EscalatedError):
            Err("quota exceeded").or_else_raise()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_interception_writes_nothing(self, capsys: Any) -> None:
        """catching() on a raising call produces no stdout or stderr output."""
        assert catching(int, "x").is_err

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_events_follow_reconfiguration(self, capsys: Any) -> None:
        """The core logger picks up a later level change."""
        configure_logging(LoggingConfig(log_level="INFO"))
        catching(int, "x")
        assert "result.exception.intercepted" not in capsys.readouterr().err

        configure_logging(LoggingConfig(log_level="DEBUG"))
        catching(int, "x")
        assert "result.exception.intercepted" in capsys.readouterr().err
