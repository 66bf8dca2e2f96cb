"""Tests for bterr.core.trace module."""

from __future__ import annotations

import pytest

from bterr.core.config import DiagnosticSettings
from bterr.core.trace import (
    CapturedTrace,
    Frame,
    TraceStatus,
    capture,
    describe_error,
    format_report,
)

ON = DiagnosticSettings(enabled=True, capture_supported=True, raw_value="1")
OFF = DiagnosticSettings(enabled=False, capture_supported=True)


def _snapshot() -> CapturedTrace:
    return capture(ON)


class TestCapture:
    """Tests for capture()."""

    def test_disabled(self) -> None:
        trace = capture(OFF)
        assert trace.status == TraceStatus.DISABLED
        assert trace.frames == ()

    def test_disabled_wins_over_unsupported(self) -> None:
        trace = capture(DiagnosticSettings(enabled=False, capture_supported=False))
        assert trace.status == TraceStatus.DISABLED

    def test_unsupported(self) -> None:
        trace = capture(DiagnosticSettings(enabled=True, capture_supported=False))
        assert trace.status == TraceStatus.UNSUPPORTED
        assert trace.frames == ()

    def test_innermost_first(self) -> None:
        trace = _snapshot()
        assert trace.is_captured
        assert trace.frames[0].function == "_snapshot"
        assert trace.frames[1].function == "TestCapture.test_innermost_first"

    def test_uses_process_settings_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import bterr.core.trace as trace_mod

        monkeypatch.setattr(trace_mod, "diagnostic_settings", lambda: OFF)
        assert capture().status == TraceStatus.DISABLED

    def test_immutable(self) -> None:
        trace = _snapshot()
        with pytest.raises(AttributeError):
            trace.status = TraceStatus.DISABLED  # type: ignore[misc]


class TestLines:
    """Tests for CapturedTrace.lines()."""

    def test_frame_lines_are_numbered(self) -> None:
        frames = tuple(Frame(f"/src/m{i}.py", i + 1, f"f{i}") for i in range(11))
        lines = CapturedTrace(TraceStatus.CAPTURED, frames).lines()
        assert lines[0] == " 0: f0 at /src/m0.py:1"
        assert lines[10] == "10: f10 at /src/m10.py:11"

    def test_disabled_placeholder(self) -> None:
        assert CapturedTrace.disabled().lines() == [
            "<backtrace disabled; set BTERR_BACKTRACE=1 to capture>"
        ]

    def test_unsupported_placeholder(self) -> None:
        assert str(CapturedTrace.unsupported()) == "<backtrace unsupported on this runtime>"

    def test_captured_without_frames_is_never_silent(self) -> None:
        assert CapturedTrace(TraceStatus.CAPTURED).lines() == ["<backtrace empty>"]


class TestFormatting:
    def test_format_report(self) -> None:
        trace = CapturedTrace(TraceStatus.CAPTURED, (Frame("/a.py", 3, "main"),))
        assert format_report("boom", trace) == "boom\n\n0: main at /a.py:3"

    def test_describe_error(self) -> None:
        assert describe_error(ValueError("bad")) == "bad"
        assert describe_error(ValueError()) == "ValueError"

    def test_status_str(self) -> None:
        assert str(TraceStatus.CAPTURED) == "captured"
        assert str(TraceStatus.DISABLED) == "disabled"
        assert str(TraceStatus.UNSUPPORTED) == "unsupported"


class TestInvariants:
    """Only a captured trace carries frames."""

    @pytest.mark.parametrize("status", [TraceStatus.DISABLED, TraceStatus.UNSUPPORTED])
    def test_frames_rejected_without_capture(self, status: TraceStatus) -> None:
        with pytest.raises(ValueError, match="cannot carry frames"):
            CapturedTrace(status, (Frame("/a.py", 1, "main"),))

    def test_captured_with_frames_allowed(self) -> None:
        trace = CapturedTrace(TraceStatus.CAPTURED, (Frame("/a.py", 1, "main"),))
        assert trace.is_captured
