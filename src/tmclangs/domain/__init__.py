"""Result model for tmclangs."""

from .results import (
    LOG_STDERR,
    LOG_STDOUT,
    STATUS_CODE_ERROR,
    STATUS_CODE_SUCCESS,
    CompileResult,
    ExerciseDesc,
    RunResult,
    RunStatus,
    TestDesc,
    TestResult,
)
from .validation import ValidationError, ValidationResult

__all__ = [
    "LOG_STDOUT",
    "LOG_STDERR",
    "STATUS_CODE_SUCCESS",
    "STATUS_CODE_ERROR",
    "CompileResult",
    "ExerciseDesc",
    "RunResult",
    "RunStatus",
    "TestDesc",
    "TestResult",
    "ValidationError",
    "ValidationResult",
]
