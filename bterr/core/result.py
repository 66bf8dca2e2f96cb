"""Result type with report-on-failure unwrapping.

Ok/Err mirror Rust's Result<T, E>. A wrapped error travels through them like
any other error value; at a terminal boundary, unwrap_or_report() and
expect_or_report() print the error's captured backtrace before panicking.

Usage:
    def read_config(path: Path) -> Result[str, BacktraceError[OSError]]:
        try:
            return Ok(path.read_text())
        except OSError as e:
            return Err(BacktraceError.from_error(e))

    text = read_config(path).expect_or_report("cannot start without config")

    # Or with pattern matching
    match read_config(path):
        case Ok(text):
            ...
        case Err(error):
            print(error.render())
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn, TypeGuard

from .report import default_console, panic, require_traced, write_report

if TYPE_CHECKING:
    from bterr.output.console import ConsoleProtocol

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "unwrap_or_report",
    "expect_or_report",
]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raises ValueError since this is Ok."""
        raise ValueError(f"called unwrap_err on Ok: {self.value!r}")

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[..., object]) -> Ok[T]:
        return self

    def flat_map[R](self, f: Callable[[T], R]) -> R:
        """Applies a function that returns a Result."""
        return f(self.value)

    def unwrap_or_report(self, *, console: ConsoleProtocol | None = None) -> T:
        """Returns the value. Writes nothing."""
        return self.value

    def expect_or_report(
        self, message: str, *, console: ConsoleProtocol | None = None
    ) -> T:
        """Returns the value. Writes nothing."""
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Represents a failed result containing an error.

    Attributes:
        error: The error value.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises ValueError with the error.

        This does not print a backtrace; use unwrap_or_report() for that.
        """
        raise ValueError(f"called unwrap on Err: {self.error}")

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[..., object]) -> Err[E]:
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        return Err(f(self.error))

    def flat_map(self, f: Callable[..., object]) -> Err[E]:
        return self

    def unwrap_or_report(self, *, console: ConsoleProtocol | None = None) -> NoReturn:
        """Report the wrapped error and its backtrace, then panic.

        Args:
            console: Where to write the report. Defaults to stderr.

        Raises:
            Panic: Always, after the report has been written. The reason is
                the inner error's description. If writing fails, Panic is
                still raised, with the write error as its context.
            TypeError: If the error is not a backtrace wrapper.
        """
        error = require_traced(self.error)
        try:
            write_report(error, console or default_console())
        finally:
            panic(error.description, error)

    def expect_or_report(
        self, message: str, *, console: ConsoleProtocol | None = None
    ) -> NoReturn:
        """Like unwrap_or_report(), but write message first.

        The message is written verbatim, even when empty, followed by a
        blank line and the report. The panic reason is "message: description".
        """
        error = require_traced(self.error)
        try:
            write_report(error, console or default_console(), message)
        finally:
            panic(f"{message}: {error.description}", error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Type guard that checks if a Result is Ok."""
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard that checks if a Result is Err."""
    return isinstance(result, Err)


def unwrap_or_report[T, E](
    result: Result[T, E], *, console: ConsoleProtocol | None = None
) -> T:
    """Function form of Ok/Err.unwrap_or_report()."""
    return result.unwrap_or_report(console=console)


def expect_or_report[T, E](
    result: Result[T, E], message: str, *, console: ConsoleProtocol | None = None
) -> T:
    """Function form of Ok/Err.expect_or_report()."""
    return result.expect_or_report(message, console=console)
