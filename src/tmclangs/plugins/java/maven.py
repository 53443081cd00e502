"""Plugin for Java exercises built with Apache Maven."""

import logging
import os
from pathlib import Path

from ...domain import CompileResult
from ..errors import TestRunnerError
from .classpath import ClassPath
from .java_plugin import AbstractJavaPlugin

logger = logging.getLogger(__name__)

BUILD_FILE = Path("pom.xml")
DEPENDENCY_CLASSPATH_FILE = Path("target") / "mvn_classpath.txt"


class MavenPlugin(AbstractJavaPlugin):
    """Maven exercises: pom.xml at the root, standard Maven directory layout."""

    TEST_DIR = Path("src") / "test"
    STYLE_SOURCE_DIR = Path("src") / "main" / "java"

    def get_language_name(self) -> str:
        return "apache-maven"

    def is_exercise_type_correct(self, path: Path) -> bool:
        return (Path(path) / BUILD_FILE).is_file()

    def build(self, path: Path) -> CompileResult:
        argv = [
            self.settings.maven_executable,
            "--batch-mode",
            "clean",
            "compile",
            "test-compile",
        ]
        return self._compile(argv, Path(path))

    def get_project_class_path(self, path: Path) -> ClassPath:
        path = Path(path).resolve()
        classpath = ClassPath(path / "target" / "classes", path / "target" / "test-classes")

        output_file = path / DEPENDENCY_CLASSPATH_FILE
        argv = [
            self.settings.maven_executable,
            "--batch-mode",
            "dependency:build-classpath",
            f"-Dmdep.outputFile={output_file}",
        ]
        process = self.runner.run(argv, cwd=path)
        if not process.success or not output_file.is_file():
            stderr = process.stderr.decode("utf-8", errors="replace").strip()
            raise TestRunnerError(f"Failed to resolve Maven dependency classpath for {path}: {stderr}")

        dependencies = output_file.read_text(encoding="utf-8").strip()
        for entry in dependencies.split(os.pathsep):
            if entry:
                classpath.add(Path(entry))

        logger.debug(f"Maven classpath for {path}: {classpath}")
        return classpath
