"""Shared behavior of the Java toolchain plugins.

Ant and Maven exercises differ only in how they are built and where their
classes end up. Scanning, running the JUnit test runner, reading its results
and checking code style are the same for both and live here.
"""

import logging
from abc import abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

from ...config import LangsSettings, load_settings
from ...domain import (
    STATUS_CODE_ERROR,
    STATUS_CODE_SUCCESS,
    CompileResult,
    ExerciseDesc,
    TestResult,
    ValidationResult,
)
from ...packages import Cache, DownloadError, ensure_jar
from ...process import ProcessRunner
from ...style import CheckstyleRunner
from ..errors import TestRunnerError
from ..pipeline import TestExecution
from ..plugin import AbstractLanguagePlugin
from .classpath import ClassPath
from .result_parser import JavaResultParser
from .runner_args import TestRunnerArgumentBuilder
from .test_scanner import JavaTestScanner

logger = logging.getLogger(__name__)


class AbstractJavaPlugin(AbstractLanguagePlugin):
    """Base class for Java plugins.

    Subclasses define TEST_DIR and STYLE_SOURCE_DIR and implement
    is_exercise_type_correct(), build() and get_project_class_path().
    """

    SOURCE_SUFFIXES = (".java",)
    RESULT_FILE = Path(".tmc_test_results.json")
    TEST_DIR = Path("test")
    STYLE_SOURCE_DIR = Path("src")

    def __init__(
        self,
        settings: Optional[LangsSettings] = None,
        runner: Optional[ProcessRunner] = None,
        cache: Optional[Cache] = None,
        checkstyle: Optional[CheckstyleRunner] = None,
    ):
        """Initialize Java plugin.

        Args:
            settings: Tool locations (loaded from the environment if None)
            runner: Process runner for the build tool and the test runner
            cache: Cache for the JUnit runner jar
            checkstyle: Style checker (created from settings if None)
        """
        super().__init__(runner)
        self.settings = settings or load_settings()
        self.cache = cache or Cache(self.settings.cache_dir)
        self.checkstyle = checkstyle or CheckstyleRunner(self.settings, self.runner, self.cache)
        self.scanner = JavaTestScanner()
        self.result_parser = JavaResultParser()

    @abstractmethod
    def get_project_class_path(self, path: Path) -> ClassPath:
        """Classpath holding the compiled exercise and its libraries."""
        pass

    def _compile(self, argv: Sequence[str], path: Path) -> CompileResult:
        logger.info(f"Building project at {path}")
        process = self.runner.run(argv, cwd=path)

        if process.success:
            logger.info(f"Successfully built project at {path}")
            return CompileResult(STATUS_CODE_SUCCESS, process.stdout, process.stderr)

        logger.info(f"Error building project at {path} (exit code {process.exit_code})")
        return CompileResult(STATUS_CODE_ERROR, process.stdout, process.stderr)

    def scan_exercise(self, path: Path, exercise_name: str) -> Optional[ExerciseDesc]:
        path = Path(path)
        if not self.is_exercise_type_correct(path):
            return None

        test_dir = path / self.TEST_DIR
        if not test_dir.is_dir():
            logger.info(f"No test directory {self.TEST_DIR} in {path}")
            return None

        tests = self.scanner.scan(test_dir)
        return ExerciseDesc(name=exercise_name, tests=tuple(tests))

    def get_test_class_path(self, path: Path) -> ClassPath:
        """Project classpath plus the JUnit test runner."""
        classpath = self.get_project_class_path(path)
        try:
            runner_jar = ensure_jar(
                self.settings.junit_runner_jar, self.settings.junit_runner_url, self.cache
            )
        except DownloadError as e:
            raise TestRunnerError(
                f"JUnit test runner is not available: {e}. Set [java] junit_runner_jar "
                "or junit_runner_url in the settings file, or TMC_LANGS_JUNIT_RUNNER_JAR "
                "in the environment"
            ) from e
        classpath.add(runner_jar)
        return classpath

    def execute_tests(self, path: Path, exercise: ExerciseDesc) -> TestExecution:
        path = Path(path).resolve()
        logger.info(f"Running tests for project at {path}")

        result_file = path / self.RESULT_FILE
        if result_file.exists():
            result_file.unlink()

        builder = TestRunnerArgumentBuilder(
            java_executable=self.settings.java_executable,
            test_dir=path / self.TEST_DIR,
            result_file=result_file,
            classpath=self.get_test_class_path(path),
            exercise=exercise,
            default_locale=self.settings.default_locale,
        )
        process = self.runner.run(builder.get_arguments(), cwd=path)

        logger.info(f"Successfully ran tests for project at {path}")
        return TestExecution(result_file=result_file, process=process)

    def parse_results(self, result_file: Path, exercise: ExerciseDesc) -> List[TestResult]:
        return self.result_parser.parse(result_file, exercise)

    def check_code_style(self, path: Path) -> Optional[ValidationResult]:
        path = Path(path)
        return self.checkstyle.check(path, path / self.STYLE_SOURCE_DIR)
