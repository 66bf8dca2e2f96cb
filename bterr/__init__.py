"""Error wrappers that capture a backtrace where the error is produced."""

from bterr.core import (
    BacktraceError,
    CapturedTrace,
    DynBacktraceError,
    Err,
    Ok,
    Panic,
    Result,
    TraceStatus,
    expect_or_report,
    unwrap_or_report,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BacktraceError",
    "CapturedTrace",
    "DynBacktraceError",
    "Err",
    "Ok",
    "Panic",
    "Result",
    "TraceStatus",
    "expect_or_report",
    "unwrap_or_report",
]
