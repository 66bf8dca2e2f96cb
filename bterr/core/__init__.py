"""Backtrace-capturing error wrappers and result reporting."""

from .config import BACKTRACE_ENV_VAR, DiagnosticSettings, diagnostic_settings
from .dyn import DynBacktraceError
from .errors import ErrorCode
from .report import Panic, panic, write_report
from .result import Err, Ok, Result, expect_or_report, is_err, is_ok, unwrap_or_report
from .trace import CapturedTrace, Frame, TracedError, TraceStatus, capture
from .wrapper import BacktraceError

__all__ = [
    # config
    "BACKTRACE_ENV_VAR",
    "DiagnosticSettings",
    "diagnostic_settings",
    # trace
    "CapturedTrace",
    "Frame",
    "TraceStatus",
    "TracedError",
    "capture",
    # wrappers
    "BacktraceError",
    "DynBacktraceError",
    # report
    "Panic",
    "panic",
    "write_report",
    # result
    "Err",
    "Ok",
    "Result",
    "expect_or_report",
    "is_err",
    "is_ok",
    "unwrap_or_report",
    # errors
    "ErrorCode",
]
