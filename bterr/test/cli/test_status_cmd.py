from __future__ import annotations

import pytest

from bterr.cli.context import CLIContext
from bterr.core.config import DiagnosticSettings
from bterr.output.console import MockConsole, Style


def _run(monkeypatch: pytest.MonkeyPatch, settings: DiagnosticSettings) -> MockConsole:
    import bterr.cli.commands.status as status_cmd

    console = MockConsole()
    ctx = CLIContext(settings=settings, console=console, report_console=MockConsole())
    monkeypatch.setattr(status_cmd, "build_context", lambda: ctx)
    status_cmd.status()
    return console


def test_status_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    console = _run(monkeypatch, DiagnosticSettings(enabled=False, capture_supported=True))

    assert console.messages == [
        "BTERR_BACKTRACE: (unset)",
        "enabled: no",
        "supported: yes",
        "trace: disabled",
    ]
    assert not console.find("warning:")
    assert console.outputs[-1].style == Style.WARNING


def test_status_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    console = _run(
        monkeypatch, DiagnosticSettings(enabled=True, capture_supported=True, raw_value="full")
    )

    assert console.messages[0] == "BTERR_BACKTRACE: full"
    assert console.messages[-1] == "trace: captured"
    assert console.outputs[-1].style == Style.SUCCESS


def test_status_unsupported(monkeypatch: pytest.MonkeyPatch) -> None:
    console = _run(
        monkeypatch, DiagnosticSettings(enabled=True, capture_supported=False, raw_value="1")
    )

    assert "supported: no" in console.messages
    assert [o.message for o in console.outputs if o.style == Style.WARNING] == [
        "warning: this runtime cannot walk its stack; errors will carry no frames",
        "trace: unsupported",
    ]
    assert console.messages[-1] == "trace: unsupported"
