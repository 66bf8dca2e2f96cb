"""Exit codes for the bterr CLI.

The numeric values are process exit codes and should remain stable:
- 0: Success
- 101: Panic (a wrapped error was reported and execution terminated)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    PANIC = 101

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")
