"""Error wrapper that captures a backtrace on conversion.

Usage:
    type FileError = BacktraceError[OSError]

    def open_file(path: Path) -> Result[int, FileError]:
        try:
            return Ok(path.stat().st_size)
        except OSError as e:
            return Err(BacktraceError.from_error(e))

    size = open_file(Path("/does-not-exist.nope")).unwrap_or_report()

The trace is taken inside from_error(), so it points at open_file() rather
than at the place the result is finally unwrapped.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Self

from .config import DiagnosticSettings
from .trace import CapturedTrace, capture, describe_error, format_report

__all__ = ["BacktraceError"]


class BacktraceError[E: Exception](Exception):
    """An error of type E plus the stack at the point it was wrapped.

    Attributes:
        inner: The wrapped error.
        trace: Stack snapshot taken when inner was converted.
    """

    __slots__ = ("_inner", "_trace")

    def __init__(self, inner: E, trace: CapturedTrace) -> None:
        super().__init__(inner)
        self._inner = inner
        self._trace = trace
        self.__cause__ = inner

    @classmethod
    def from_error(cls, inner: E, *, settings: DiagnosticSettings | None = None) -> Self:
        """Wrap an error, capturing the current stack.

        Args:
            inner: The error to wrap. A BacktraceError is returned as is.
            settings: Diagnostic settings override (defaults to environment).

        Returns:
            The wrapper.

        Raises:
            TypeError: If inner is not an exception.
        """
        if isinstance(inner, cls):
            return inner
        if not isinstance(inner, Exception):
            raise TypeError(f"cannot wrap non-exception {type(inner).__name__!r}")
        return cls(inner, capture(settings))

    @classmethod
    def converter(
        cls, error_type: type[E], *, settings: DiagnosticSettings | None = None
    ) -> Callable[[E], BacktraceError[E]]:
        """Build a conversion function that only accepts error_type."""

        def convert(inner: E) -> BacktraceError[E]:
            if not isinstance(inner, error_type):
                raise TypeError(
                    f"expected {error_type.__name__}, got {type(inner).__name__}"
                )
            return cls.from_error(inner, settings=settings)

        return convert

    @property
    def inner(self) -> E:
        return self._inner

    @property
    def trace(self) -> CapturedTrace:
        return self._trace

    @property
    def description(self) -> str:
        return describe_error(self._inner)

    def source(self) -> E:
        return self._inner

    def backtrace(self) -> CapturedTrace:
        return self._trace

    def render(self) -> str:
        """Inner description, blank line, then the captured stack."""
        return format_report(self.description, self._trace)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return self.render()

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._inner, self._trace))
