"""
Result model shared by every toolchain plugin.

This module defines the immutable value types produced by the build/test
pipeline:
- CompileResult: outcome of a build-tool invocation
- TestDesc / ExerciseDesc: scan-time description of what could run
- TestResult / RunResult: per-test outcomes and the overall verdict
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

LOG_STDOUT = "stdout"
LOG_STDERR = "stderr"

STATUS_CODE_SUCCESS = 0
STATUS_CODE_ERROR = 1


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class CompileResult:
    """Outcome of a build-tool invocation."""

    status_code: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        """True when the build tool reported no failure."""
        return self.status_code == STATUS_CODE_SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "stdout": _decode(self.stdout),
            "stderr": _decode(self.stderr),
        }


@dataclass(frozen=True)
class TestDesc:
    """A test case found by static scanning, before anything is run."""

    __test__ = False  # keep pytest from collecting this class

    name: str
    points: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "points": list(self.points)}


@dataclass(frozen=True)
class ExerciseDesc:
    """Description of an exercise: its name and the tests it contains.

    An ExerciseDesc with no tests means "recognized, but nothing to run".
    Plugins return None instead when the directory is not a test project.
    """

    name: str
    tests: Tuple[TestDesc, ...] = ()

    def test_names(self) -> Tuple[str, ...]:
        """Names of all tests in scan order."""
        return tuple(test.name for test in self.tests)

    def find_test(self, name: str) -> Optional[TestDesc]:
        """Look up a test descriptor by name."""
        for test in self.tests:
            if test.name == name:
                return test
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "tests": [t.to_dict() for t in self.tests]}


@dataclass(frozen=True)
class TestResult:
    """Outcome of a single test case.

    Attributes:
        name: Test name, matching the scan-time TestDesc name
        successful: Whether the test passed
        message: Failure message, if any
        points: Point labels awarded when the test passes
        exception: Stack trace lines reported by the test executor
        error: The test did not complete (crash, runner timeout), as opposed
            to failing an assertion
    """

    __test__ = False

    name: str
    successful: bool
    message: Optional[str] = None
    points: Tuple[str, ...] = ()
    exception: Tuple[str, ...] = ()
    error: bool = False

    def __post_init__(self):
        if self.error and self.successful:
            raise ValueError(f"Test {self.name!r} cannot be both successful and errored")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "successful": self.successful,
            "message": self.message,
            "points": list(self.points),
            "exception": list(self.exception),
            "error": self.error,
        }


class RunStatus(str, Enum):
    """Terminal status of a test run."""

    PASSED = "PASSED"
    FAILED = "FAILED"
    ERROR = "ERROR"
    COMPILE_FAILED = "COMPILE_FAILED"


@dataclass(frozen=True)
class RunResult:
    """Overall outcome of a build-and-test run."""

    status: RunStatus
    test_results: Tuple[TestResult, ...] = ()
    logs: Dict[str, bytes] = field(default_factory=dict)

    def __post_init__(self):
        if self.status == RunStatus.COMPILE_FAILED and self.test_results:
            raise ValueError("A COMPILE_FAILED run cannot carry test results")
        if self.status == RunStatus.PASSED and not all(
            result.successful for result in self.test_results
        ):
            raise ValueError("A PASSED run cannot contain failing tests")

    @classmethod
    def compile_failed(cls, compile_result: CompileResult) -> "RunResult":
        """Build the short-circuit result for a failed compilation."""
        return cls(
            status=RunStatus.COMPILE_FAILED,
            test_results=(),
            logs={LOG_STDOUT: compile_result.stdout, LOG_STDERR: compile_result.stderr},
        )

    @classmethod
    def from_test_results(
        cls,
        results: Iterable[TestResult],
        logs: Optional[Dict[str, bytes]] = None,
    ) -> "RunResult":
        """Derive the overall status from per-test outcomes."""
        results = tuple(results)
        if any(result.error for result in results):
            status = RunStatus.ERROR
        elif all(result.successful for result in results):
            status = RunStatus.PASSED
        else:
            status = RunStatus.FAILED
        return cls(status=status, test_results=results, logs=dict(logs or {}))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "testResults": [r.to_dict() for r in self.test_results],
            "logs": {key: _decode(value) for key, value in self.logs.items()},
        }
