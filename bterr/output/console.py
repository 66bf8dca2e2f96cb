"""Console output abstraction.

This module provides a protocol for console output that can be implemented
by different backends (Rich, mock for testing). Error reports go through it,
so tests can inspect exactly what would have been written to stderr.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()  # Green, positive message
    ERROR = auto()  # Red, error message
    WARNING = auto()  # Yellow, warning message
    DIM = auto()  # Dimmed/muted text

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output.

    Implementations must write each call's text verbatim (no markup
    interpretation, no wrapping) so multi-line reports keep their layout.
    """

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...

    def warning(self, message: str) -> None:
        """Print a warning message."""
        ...

    def newline(self) -> None:
        """Print an empty line."""
        ...

    def flush(self) -> None:
        """Push everything written so far to the underlying stream."""
        ...


class RichConsole:
    """Console implementation using Rich library.

    Args:
        stderr: Write to standard error instead of standard output.
    """

    def __init__(self, *, stderr: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console(stderr=stderr)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.WARNING: "yellow",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if not rich_style:
            # Written raw: Rich expands tabs and strips control characters.
            self._console.file.write(message + "\n")
            return
        self._console.print(
            message,
            style=rich_style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def error(self, message: str) -> None:
        self.print(f"error: {message}", Style.ERROR)

    def warning(self, message: str) -> None:
        self.print(f"warning: {message}", Style.WARNING)

    def newline(self) -> None:
        self._console.file.write("\n")

    def flush(self) -> None:
        self._console.file.flush()


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing.

    Use this in tests to verify what would have been printed without
    actually printing anything.
    """

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)
    flushes: int = 0

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    def flush(self) -> None:
        self.flushes += 1

    # Test helper methods

    def clear(self) -> None:
        """Clear all captured output."""
        self.outputs.clear()
        self.flushes = 0

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """Get all output as a single newline-separated string."""
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        """Check if any error was printed."""
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
