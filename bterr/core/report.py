"""Report-then-terminate primitives.

write_report() renders a wrapped error to a console and flushes it.
panic() raises Panic. The result operations call them in that order, so the
report is always complete before unwinding begins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from .trace import TracedError

if TYPE_CHECKING:
    from bterr.output.console import ConsoleProtocol

__all__ = ["Panic", "default_console", "panic", "require_traced", "write_report"]


class Panic(BaseException):
    """Raised after a wrapped error has been reported.

    Derives from BaseException so `except Exception` handlers do not
    swallow it.

    Attributes:
        reason: Termination message.
        error: The wrapped error that was reported.
    """

    def __init__(self, reason: str, error: TracedError) -> None:
        super().__init__(reason)
        self.reason = reason
        self.error = error

    def __str__(self) -> str:
        return self.reason

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.reason, self.error))


def default_console() -> ConsoleProtocol:
    """Console writing to standard error."""
    from bterr.output.console import RichConsole

    return RichConsole(stderr=True)


def require_traced(error: object) -> TracedError:
    if not isinstance(error, TracedError):
        raise TypeError(
            f"expected BacktraceError or DynBacktraceError, got {type(error).__name__}"
        )
    return error


def write_report(
    error: TracedError,
    console: ConsoleProtocol,
    message: str | None = None,
) -> None:
    """Write the optional message line, then the rendered error, then flush."""
    if message is not None:
        console.print(message)
        console.newline()
    console.print(error.render())
    console.flush()


def panic(reason: str, error: TracedError) -> NoReturn:
    """Terminate the current execution path."""
    raise Panic(reason, error) from error.inner
