"""Entry point for all exercise operations.

Every operation detects the exercise's project type and forwards to the
matching plugin; adding a toolchain never touches this module.
"""

from pathlib import Path
from typing import Optional

from .domain import ExerciseDesc, RunResult, ValidationResult
from .plugins import ILanguagePlugin
from .project_type import ProjectType


class TaskExecutor:
    """Routes exercise operations to the plugin owning the directory.

    Example usage:
        executor = TaskExecutor()
        result = executor.run_tests(Path("exercise"))
        print(result.status)
    """

    def __init__(self, project_types: Optional[ProjectType] = None):
        self.project_types = project_types or ProjectType.default()

    def get_language_plugin(self, path: Path) -> ILanguagePlugin:
        """Raises NoLanguagePluginFoundError if no plugin recognizes path."""
        return self.project_types.detect(Path(path))

    def is_exercise_root_directory(self, path: Path) -> bool:
        return self.project_types.is_exercise_root_directory(Path(path))

    def run_check_code_style(self, path: Path) -> Optional[ValidationResult]:
        return self.get_language_plugin(path).check_code_style(Path(path))

    def run_tests(self, path: Path) -> RunResult:
        return self.get_language_plugin(path).run_tests(Path(path))

    def scan_exercise(self, path: Path, exercise_name: str) -> Optional[ExerciseDesc]:
        return self.get_language_plugin(path).scan_exercise(Path(path), exercise_name)

    def prepare_stub(self, path: Path) -> None:
        self.get_language_plugin(path).prepare_stub(Path(path))

    def prepare_solution(self, path: Path) -> None:
        self.get_language_plugin(path).prepare_solution(Path(path))
