"""External process execution for tmclangs."""

from .runner import ProcessInterruptedError, ProcessResult, ProcessRunner, ProcessRunnerError

__all__ = [
    "ProcessRunner",
    "ProcessResult",
    "ProcessRunnerError",
    "ProcessInterruptedError",
]
