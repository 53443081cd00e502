"""
Compile -> scan -> run pipeline shared by every toolchain plugin.

The pipeline is written once and parameterized by four leaf actions, so each
plugin gets identical short-circuit and error behavior:

    START -> BUILDING -> BUILD_FAILED                      (terminal)
                      -> BUILD_OK -> SCANNING -> SCAN_FAILED (terminal)
                                             -> TESTS_DESCRIBED -> RUNNING
                                                -> RUN_FAILED     (terminal)
                                                -> RESULTS_READY  (terminal)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from ..domain import CompileResult, ExerciseDesc, LOG_STDERR, LOG_STDOUT, RunResult, TestResult
from ..process import ProcessResult, ProcessRunnerError
from .errors import ResultParseError, ScannerError, TestRunnerError
from .result_order import order_by_exercise

logger = logging.getLogger(__name__)


class PipelineState(str, Enum):
    START = "START"
    BUILDING = "BUILDING"
    BUILD_FAILED = "BUILD_FAILED"
    BUILD_OK = "BUILD_OK"
    SCANNING = "SCANNING"
    SCAN_FAILED = "SCAN_FAILED"
    TESTS_DESCRIBED = "TESTS_DESCRIBED"
    RUNNING = "RUNNING"
    RUN_FAILED = "RUN_FAILED"
    RESULTS_READY = "RESULTS_READY"


@dataclass(frozen=True)
class TestExecution:
    """What a test executor left behind: its result file and its output."""

    __test__ = False

    result_file: Path
    process: ProcessResult


BuildStep = Callable[[Path], CompileResult]
ScanStep = Callable[[Path, str], Optional[ExerciseDesc]]
ExecuteStep = Callable[[Path, ExerciseDesc], TestExecution]
ParseStep = Callable[[Path, ExerciseDesc], List[TestResult]]


class TestPipeline:
    """Runs one build-and-test pass over an exercise directory.

    A pipeline instance is meant for a single run; `state` records where the
    run ended up.

    Example usage:
        pipeline = TestPipeline(plugin.build, plugin.scan_exercise,
                                plugin.execute_tests, plugin.parse_results)
        result = pipeline.run(Path("exercise"))
    """

    __test__ = False

    def __init__(
        self,
        build: BuildStep,
        scan: ScanStep,
        execute: ExecuteStep,
        parse: ParseStep,
    ):
        self._build = build
        self._scan = scan
        self._execute = execute
        self._parse = parse
        self.state = PipelineState.START

    def run(self, path: Path, exercise_name: Optional[str] = None) -> RunResult:
        """Build the exercise and, if that succeeds, run its tests.

        Args:
            path: Exercise directory
            exercise_name: Name for the scanned exercise (defaults to the
                directory name)

        Returns:
            RunResult. COMPILE_FAILED when the build failed.

        Raises:
            ScannerError: If the build succeeded but no tests can be described
            TestRunnerError: If the executor could not run or its result
                artifact is missing or corrupt
        """
        path = Path(path)
        if exercise_name is None:
            exercise_name = path.resolve().name

        self.state = PipelineState.BUILDING
        compile_result = self._build(path)
        if not compile_result.success:
            self.state = PipelineState.BUILD_FAILED
            logger.info(f"Build failed for {path}, skipping tests")
            return RunResult.compile_failed(compile_result)
        self.state = PipelineState.BUILD_OK

        self.state = PipelineState.SCANNING
        try:
            exercise = self._scan(path, exercise_name)
        except ScannerError:
            self.state = PipelineState.SCAN_FAILED
            raise
        if exercise is None:
            self.state = PipelineState.SCAN_FAILED
            logger.error(f"Unable to run tests for {path}: no tests could be found")
            raise ScannerError(f"Project at {path} was built but contains no recognizable tests")
        self.state = PipelineState.TESTS_DESCRIBED

        self.state = PipelineState.RUNNING
        try:
            execution = self._execute(path, exercise)
            results = self._parse(execution.result_file, exercise)
        except TestRunnerError:
            self.state = PipelineState.RUN_FAILED
            raise
        except ProcessRunnerError as e:
            self.state = PipelineState.RUN_FAILED
            logger.error(f"Failed to run tests for {path}: {e}")
            raise TestRunnerError(f"Failed to run tests for {path}: {e}") from e
        except ResultParseError as e:
            self.state = PipelineState.RUN_FAILED
            logger.error(f"Failed to read test results for {path}: {e}")
            raise TestRunnerError(f"Failed to read test results for {path}: {e}") from e

        self.state = PipelineState.RESULTS_READY
        logs = {LOG_STDOUT: execution.process.stdout, LOG_STDERR: execution.process.stderr}
        return RunResult.from_test_results(order_by_exercise(results, exercise), logs)
