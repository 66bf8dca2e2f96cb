"""Demo command - wrap a real I/O error and report it."""

from __future__ import annotations

from pathlib import Path

import typer

from bterr.cli.context import build_context
from bterr.core.config import DiagnosticSettings
from bterr.core.errors import ErrorCode
from bterr.core.report import Panic
from bterr.core.result import Err, Ok, Result
from bterr.core.wrapper import BacktraceError
from bterr.output.console import Style

DEFAULT_PATH = Path("/does-not-exist.nope")

type FileError = BacktraceError[OSError]


def open_file(path: Path, settings: DiagnosticSettings) -> Result[int, FileError]:
    to_io_error = BacktraceError.converter(OSError, settings=settings)
    try:
        return Ok(len(path.read_bytes()))
    except OSError as e:
        return Err(to_io_error(e))


def do_stuff(path: Path, settings: DiagnosticSettings) -> Result[int, FileError]:
    return open_file(path, settings)


def demo(
    path: Path = typer.Argument(DEFAULT_PATH, help="File to read."),
    message: str | None = typer.Option(
        None,
        "--message",
        "-m",
        help="Report with this message (expect_or_report) instead of unwrap_or_report.",
    ),
) -> None:
    """Read a file; on failure print the error's backtrace and panic."""
    ctx = build_context()
    result = do_stuff(path, ctx.settings)

    try:
        if message is None:
            size = result.unwrap_or_report(console=ctx.report_console)
        else:
            size = result.expect_or_report(message, console=ctx.report_console)
    except Panic as p:
        ctx.console.error(f"panicked: {p.reason}")
        raise typer.Exit(code=int(ErrorCode.PANIC))

    ctx.console.print(f"read {size} bytes from {path}", Style.SUCCESS)
