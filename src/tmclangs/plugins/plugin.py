"""Abstract base classes for toolchain plugins.

This module defines the capability set every build ecosystem implements, so
the dispatcher can treat exercises written with different toolchains
uniformly.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Tuple

from ..domain import CompileResult, ExerciseDesc, RunResult, TestResult, ValidationResult
from ..process import ProcessRunner
from . import stubs
from .pipeline import TestExecution, TestPipeline


class ILanguagePlugin(ABC):
    """Interface for toolchain plugins.

    One implementation exists per supported build ecosystem (Ant, Maven,
    Make, ...).
    """

    @abstractmethod
    def get_language_name(self) -> str:
        """Get the identifier of this toolchain (e.g. "apache-ant")."""
        pass

    @abstractmethod
    def is_exercise_type_correct(self, path: Path) -> bool:
        """Check whether the directory is an exercise of this toolchain."""
        pass

    @abstractmethod
    def build(self, path: Path) -> CompileResult:
        """Compile the exercise, including its tests.

        Returns:
            CompileResult with status code 0 on success, 1 on any build
            failure, carrying the captured output either way

        Raises:
            ProcessRunnerError: If the build tool cannot be started
        """
        pass

    @abstractmethod
    def scan_exercise(self, path: Path, exercise_name: str) -> Optional[ExerciseDesc]:
        """Statically describe the tests of an exercise.

        Returns:
            ExerciseDesc, or None if the directory holds no test project

        Raises:
            ScannerError: If test sources exist but cannot be read
        """
        pass

    @abstractmethod
    def run_tests(self, path: Path) -> RunResult:
        """Build the exercise and run its tests.

        Raises:
            ScannerError: If the built project has no describable tests
            TestRunnerError: If the tests could not be run or read
        """
        pass

    @abstractmethod
    def check_code_style(self, path: Path) -> Optional[ValidationResult]:
        """Check code style.

        Returns:
            ValidationResult, or None when style checking does not apply
        """
        pass

    @abstractmethod
    def prepare_stub(self, path: Path) -> None:
        """Rewrite the exercise into the version handed out to students."""
        pass

    @abstractmethod
    def prepare_solution(self, path: Path) -> None:
        """Rewrite the exercise into the model solution."""
        pass


class AbstractLanguagePlugin(ILanguagePlugin):
    """Base class wiring concrete leaf actions into the shared pipeline.

    Subclasses implement build(), scan_exercise(), execute_tests() and
    parse_results(); run_tests() and stub/solution preparation are shared.
    """

    SOURCE_SUFFIXES: Tuple[str, ...] = ()

    def __init__(self, runner: Optional[ProcessRunner] = None):
        """Initialize plugin.

        Args:
            runner: Process runner used for every external command
        """
        self.runner = runner or ProcessRunner()

    @abstractmethod
    def execute_tests(self, path: Path, exercise: ExerciseDesc) -> TestExecution:
        """Run the test executor and report where it wrote its results.

        Raises:
            ProcessRunnerError: If the executor cannot be run
            TestRunnerError: If the executor cannot be prepared
        """
        pass

    @abstractmethod
    def parse_results(self, result_file: Path, exercise: ExerciseDesc) -> List[TestResult]:
        """Read the executor's result artifact.

        Raises:
            ResultParseError: If the artifact is missing or malformed
        """
        pass

    def run_tests(self, path: Path) -> RunResult:
        pipeline = TestPipeline(
            build=self.build,
            scan=self.scan_exercise,
            execute=self.execute_tests,
            parse=self.parse_results,
        )
        return pipeline.run(Path(path))

    def prepare_stub(self, path: Path) -> None:
        stubs.prepare_stub(Path(path), self.SOURCE_SUFFIXES)

    def prepare_solution(self, path: Path) -> None:
        stubs.prepare_solution(Path(path), self.SOURCE_SUFFIXES)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
