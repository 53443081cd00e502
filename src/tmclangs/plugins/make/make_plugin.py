"""Plugin for C exercises built with make and tested with Check."""

import logging
from pathlib import Path
from typing import List, Optional

from ...config import LangsSettings, load_settings
from ...domain import (
    STATUS_CODE_ERROR,
    STATUS_CODE_SUCCESS,
    CompileResult,
    ExerciseDesc,
    TestResult,
    ValidationResult,
)
from ...process import ProcessRunner
from ..pipeline import TestExecution
from ..plugin import AbstractLanguagePlugin
from .check_result_parser import CheckResultParser
from .check_scanner import CheckTestScanner

logger = logging.getLogger(__name__)

BUILD_FILE = Path("Makefile")
TEST_DIR = Path("test")
TEST_BINARY = TEST_DIR / "test"
RESULT_FILE = TEST_DIR / "tmc_test_results.xml"


class MakePlugin(AbstractLanguagePlugin):
    """Make exercises: Makefile at the root, Check tests under test/.

    `make test` compiles test/test; running that binary from test/ writes
    tmc_test_results.xml next to it.
    """

    SOURCE_SUFFIXES = (".c", ".h")

    def __init__(
        self,
        settings: Optional[LangsSettings] = None,
        runner: Optional[ProcessRunner] = None,
    ):
        super().__init__(runner)
        self.settings = settings or load_settings()
        self.scanner = CheckTestScanner()
        self.result_parser = CheckResultParser()

    def get_language_name(self) -> str:
        return "make"

    def is_exercise_type_correct(self, path: Path) -> bool:
        return (Path(path) / BUILD_FILE).is_file()

    def build(self, path: Path) -> CompileResult:
        path = Path(path)
        logger.info(f"Building project at {path}")
        process = self.runner.run([self.settings.make_executable, "test"], cwd=path)

        if process.success:
            logger.info(f"Successfully built project at {path}")
            return CompileResult(STATUS_CODE_SUCCESS, process.stdout, process.stderr)

        logger.info(f"Error building project at {path} (exit code {process.exit_code})")
        return CompileResult(STATUS_CODE_ERROR, process.stdout, process.stderr)

    def scan_exercise(self, path: Path, exercise_name: str) -> Optional[ExerciseDesc]:
        path = Path(path)
        if not self.is_exercise_type_correct(path) or not (path / TEST_DIR).is_dir():
            return None
        tests = self.scanner.scan(path / TEST_DIR)
        return ExerciseDesc(name=exercise_name, tests=tuple(tests))

    def execute_tests(self, path: Path, exercise: ExerciseDesc) -> TestExecution:
        path = Path(path).resolve()
        logger.info(f"Running tests for project at {path}")

        result_file = path / RESULT_FILE
        if result_file.exists():
            result_file.unlink()

        process = self.runner.run([str(path / TEST_BINARY)], cwd=path / TEST_DIR)
        return TestExecution(result_file=result_file, process=process)

    def parse_results(self, result_file: Path, exercise: ExerciseDesc) -> List[TestResult]:
        return self.result_parser.parse(result_file, exercise)

    def check_code_style(self, path: Path) -> Optional[ValidationResult]:
        # No style checker exists for C exercises
        return None
