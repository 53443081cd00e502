"""Argument vector for the JUnit test runner process."""

from pathlib import Path
from typing import List

from ...domain import ExerciseDesc, TestDesc
from .classpath import ClassPath

TEST_RUNNER_MAIN_CLASS = "fi.helsinki.cs.tmc.testrunner.Main"


def test_method_argument(test: TestDesc) -> str:
    """Format a test as the runner expects it: Class.method{point1,point2}."""
    class_name, _, method_name = test.name.rpartition(" ")
    return f"{class_name}.{method_name}{{{','.join(test.points)}}}"


class TestRunnerArgumentBuilder:
    """Builds the java command line that runs an exercise's tests.

    Example usage:
        builder = TestRunnerArgumentBuilder(
            java_executable="java",
            test_dir=project / "test",
            result_file=project / ".tmc_test_results.json",
            classpath=classpath,
            exercise=exercise,
        )
        argv = builder.get_arguments()
    """

    __test__ = False

    def __init__(
        self,
        java_executable: str,
        test_dir: Path,
        result_file: Path,
        classpath: ClassPath,
        exercise: ExerciseDesc,
        default_locale: str = "en",
    ):
        self.java_executable = java_executable
        self.test_dir = Path(test_dir)
        self.result_file = Path(result_file)
        self.classpath = classpath
        self.exercise = exercise
        self.default_locale = default_locale

    def get_arguments(self) -> List[str]:
        argv = [
            self.java_executable,
            f"-Dtmc.test_class_dir={self.test_dir}",
            f"-Dtmc.results_file={self.result_file}",
            f"-Dfi.helsinki.cs.tmc.edutestutils.defaultLocale={self.default_locale}",
            "-cp",
            str(self.classpath),
            TEST_RUNNER_MAIN_CLASS,
        ]
        argv.extend(test_method_argument(test) for test in self.exercise.tests)
        return argv
