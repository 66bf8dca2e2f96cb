from __future__ import annotations

from dataclasses import dataclass

from bterr.core.config import DiagnosticSettings, diagnostic_settings
from bterr.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    settings: DiagnosticSettings
    console: ConsoleProtocol
    report_console: ConsoleProtocol


def build_context() -> CLIContext:
    return CLIContext(
        settings=diagnostic_settings(),
        console=RichConsole(),
        report_console=RichConsole(stderr=True),
    )
