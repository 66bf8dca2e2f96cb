"""Status command - show whether backtraces will be captured."""

from __future__ import annotations

from bterr.cli.context import build_context
from bterr.core.config import BACKTRACE_ENV_VAR
from bterr.core.trace import TraceStatus, capture
from bterr.output.console import Style


def status() -> None:
    """Show the backtrace toggle and what a capture would produce."""
    ctx = build_context()
    settings = ctx.settings
    console = ctx.console

    raw = settings.raw_value if settings.raw_value is not None else "(unset)"
    console.print(f"{BACKTRACE_ENV_VAR}: {raw}", Style.DIM)
    console.print(f"enabled: {_yes_no(settings.enabled)}")
    console.print(f"supported: {_yes_no(settings.capture_supported)}")

    if settings.enabled and not settings.capture_supported:
        console.warning("this runtime cannot walk its stack; errors will carry no frames")

    trace_status = capture(settings).status
    style = Style.SUCCESS if trace_status == TraceStatus.CAPTURED else Style.WARNING
    console.print(f"trace: {trace_status}", style)


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"
