"""
tmclangs - exercise build-and-test orchestrator.

Detects which toolchain an exercise directory uses, builds it, runs its
hidden tests and reports structured per-test results and style violations.
"""

from .domain import (
    CompileResult,
    ExerciseDesc,
    RunResult,
    RunStatus,
    TestDesc,
    TestResult,
    ValidationError,
    ValidationResult,
)
from .plugins import ScannerError, TestRunnerError
from .project_type import NoLanguagePluginFoundError, ProjectType
from .task_executor import TaskExecutor

__version__ = "0.1.0"

__all__ = [
    "CompileResult",
    "ExerciseDesc",
    "RunResult",
    "RunStatus",
    "TestDesc",
    "TestResult",
    "ValidationError",
    "ValidationResult",
    "ScannerError",
    "TestRunnerError",
    "NoLanguagePluginFoundError",
    "ProjectType",
    "TaskExecutor",
]
