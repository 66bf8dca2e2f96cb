"""Diagnostic toggle.

Backtrace capture is controlled by a single environment variable. The
process-wide settings are computed on first use and cached; code that needs
different settings (tests, mostly) passes a DiagnosticSettings explicitly.
"""

from __future__ import annotations

import os as _os
import sys as _sys
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

__all__ = [
    "BACKTRACE_ENV_VAR",
    "DiagnosticSettings",
    "capture_supported",
    "diagnostic_settings",
    "is_enabled_value",
]

BACKTRACE_ENV_VAR = "BTERR_BACKTRACE"

_OFF_VALUES = frozenset({"", "0", "off", "false", "no"})


def is_enabled_value(value: str | None) -> bool:
    """Interpret a raw toggle value (None means unset)."""
    if value is None:
        return False
    return value.strip().lower() not in _OFF_VALUES


def capture_supported() -> bool:
    """Check whether this interpreter exposes live stack frames."""
    return hasattr(_sys, "_getframe")


@dataclass(frozen=True, slots=True)
class DiagnosticSettings:
    """Whether backtraces are captured, and whether they can be.

    Attributes:
        enabled: The toggle is on.
        capture_supported: The runtime can walk its own stack.
        raw_value: The toggle value as read, None when unset.
    """

    enabled: bool = False
    capture_supported: bool = True
    raw_value: str | None = None

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> DiagnosticSettings:
        raw = environ.get(BACKTRACE_ENV_VAR)
        return cls(
            enabled=is_enabled_value(raw),
            capture_supported=capture_supported(),
            raw_value=raw,
        )


@lru_cache(maxsize=1)
def diagnostic_settings() -> DiagnosticSettings:
    """Read the toggle from the process environment (cached)."""
    return DiagnosticSettings.from_environ(_os.environ)
