"""Stack snapshots.

A CapturedTrace records the call stack at the moment an error is wrapped.
Capture only reads filename, line number and function name off each live
frame; nothing is resolved or formatted until the trace is rendered.
"""

from __future__ import annotations

import sys as _sys
from dataclasses import dataclass
from enum import Enum, auto
from types import FrameType
from typing import Protocol, runtime_checkable

from .config import BACKTRACE_ENV_VAR, DiagnosticSettings, diagnostic_settings

__all__ = [
    "TraceStatus",
    "Frame",
    "CapturedTrace",
    "capture",
    "format_report",
    "describe_error",
    "TracedError",
]

# Frames from these modules are wrapper plumbing, never the error's origin.
_INTERNAL_MODULE_PREFIX = "bterr.core."


class TraceStatus(Enum):
    """Outcome of a capture attempt."""

    CAPTURED = auto()
    DISABLED = auto()
    UNSUPPORTED = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Frame:
    """One call site."""

    filename: str
    lineno: int
    function: str

    @classmethod
    def from_frame(cls, frame: FrameType) -> Frame:
        code = frame.f_code
        return cls(
            filename=code.co_filename,
            lineno=frame.f_lineno,
            function=code.co_qualname,
        )

    def __str__(self) -> str:
        return f"{self.function} at {self.filename}:{self.lineno}"


@dataclass(frozen=True, slots=True)
class CapturedTrace:
    """An immutable stack snapshot, innermost frame first.

    Attributes:
        status: Whether frames were collected, and if not, why.
        frames: Collected frames; empty unless status is CAPTURED.
    """

    status: TraceStatus
    frames: tuple[Frame, ...] = ()

    def __post_init__(self) -> None:
        if self.frames and self.status != TraceStatus.CAPTURED:
            raise ValueError(f"{self.status} trace cannot carry frames")

    @classmethod
    def disabled(cls) -> CapturedTrace:
        return cls(TraceStatus.DISABLED)

    @classmethod
    def unsupported(cls) -> CapturedTrace:
        return cls(TraceStatus.UNSUPPORTED)

    @property
    def is_captured(self) -> bool:
        return self.status == TraceStatus.CAPTURED

    def lines(self) -> list[str]:
        """Render to text lines: one per frame, or a single placeholder."""
        match self.status:
            case TraceStatus.DISABLED:
                return [f"<backtrace disabled; set {BACKTRACE_ENV_VAR}=1 to capture>"]
            case TraceStatus.UNSUPPORTED:
                return ["<backtrace unsupported on this runtime>"]
        if not self.frames:
            return ["<backtrace empty>"]
        width = len(str(len(self.frames) - 1))
        return [f"{i:>{width}}: {frame}" for i, frame in enumerate(self.frames)]

    def __str__(self) -> str:
        return "\n".join(self.lines())


def _is_internal(frame: FrameType) -> bool:
    name = frame.f_globals.get("__name__", "")
    return isinstance(name, str) and name.startswith(_INTERNAL_MODULE_PREFIX)


def capture(settings: DiagnosticSettings | None = None) -> CapturedTrace:
    """Snapshot the current stack.

    Leading frames that belong to this package's wrapper machinery are
    dropped, so the first frame is the code that asked for the conversion.

    Args:
        settings: Diagnostic settings to honor. Defaults to the process-wide
            settings read from the environment.

    Returns:
        A CapturedTrace. Never raises.
    """
    if settings is None:
        settings = diagnostic_settings()
    if not settings.enabled:
        return CapturedTrace.disabled()
    if not settings.capture_supported:
        return CapturedTrace.unsupported()

    frame: FrameType | None = _sys._getframe(1)
    while frame is not None and _is_internal(frame):
        frame = frame.f_back

    frames: list[Frame] = []
    while frame is not None:
        frames.append(Frame.from_frame(frame))
        frame = frame.f_back
    return CapturedTrace(TraceStatus.CAPTURED, tuple(frames))


def describe_error(error: BaseException) -> str:
    """Text description of an error, falling back to its type name."""
    text = str(error)
    return text if text else type(error).__name__


def format_report(description: str, trace: CapturedTrace) -> str:
    """Description line, blank separator, then the trace lines."""
    return "\n".join([description, "", *trace.lines()])


@runtime_checkable
class TracedError(Protocol):
    """What the report operations need from a wrapped error."""

    @property
    def inner(self) -> BaseException: ...

    @property
    def trace(self) -> CapturedTrace: ...

    @property
    def description(self) -> str: ...

    def render(self) -> str: ...
