"""Type-erased backtrace wrapper.

DynBacktraceError accepts any exception, which makes it a catch-all failure
type for module boundaries that do not want to enumerate concrete errors.
"""

from __future__ import annotations

from typing import Any

from .config import DiagnosticSettings
from .trace import CapturedTrace, capture, describe_error, format_report

__all__ = ["DynBacktraceError"]


class DynBacktraceError(Exception):
    """Any exception plus the stack at the point it was wrapped."""

    __slots__ = ("_inner", "_trace")

    def __init__(self, inner: Exception, trace: CapturedTrace) -> None:
        super().__init__(inner)
        self._inner = inner
        self._trace = trace
        self.__cause__ = inner

    @classmethod
    def from_error(
        cls, inner: Exception, *, settings: DiagnosticSettings | None = None
    ) -> DynBacktraceError:
        """Wrap any exception, capturing the current stack.

        A DynBacktraceError is returned unchanged. Raises TypeError for
        values that are not exceptions.
        """
        if isinstance(inner, DynBacktraceError):
            return inner
        if not isinstance(inner, Exception):
            raise TypeError(f"cannot wrap non-exception {type(inner).__name__!r}")
        return cls(inner, capture(settings))

    @property
    def inner(self) -> Exception:
        return self._inner

    @property
    def trace(self) -> CapturedTrace:
        return self._trace

    @property
    def description(self) -> str:
        return describe_error(self._inner)

    def source(self) -> Exception:
        return self._inner

    def backtrace(self) -> CapturedTrace:
        return self._trace

    def downcast[E: Exception](self, error_type: type[E]) -> E | None:
        """Return the inner error if it is an error_type, else None."""
        if isinstance(self._inner, error_type):
            return self._inner
        return None

    def render(self) -> str:
        return format_report(self.description, self._trace)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return self.render()

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._inner, self._trace))
