"""Plugin for Java exercises built with Apache Ant."""

from pathlib import Path

from ...domain import CompileResult
from .classpath import ClassPath
from .java_plugin import AbstractJavaPlugin

BUILD_FILE = Path("build.xml")
COMPILE_TEST_TARGET = "compile-test"


class AntPlugin(AbstractJavaPlugin):
    """Ant exercises: build.xml at the root, tests under test/.

    Layout:
        build.xml
        lib/            # third-party jars
        src/            # student sources
        test/           # hidden tests
        build/classes, build/test/classes   # compiler output
    """

    TEST_DIR = Path("test")
    STYLE_SOURCE_DIR = Path("src")

    def get_language_name(self) -> str:
        return "apache-ant"

    def is_exercise_type_correct(self, path: Path) -> bool:
        return (Path(path) / BUILD_FILE).is_file()

    def build(self, path: Path) -> CompileResult:
        path = Path(path)
        argv = [
            self.settings.ant_executable,
            "-f",
            str(BUILD_FILE),
            "-Djavac.fork=true",
            COMPILE_TEST_TARGET,
        ]
        return self._compile(argv, path)

    def get_project_class_path(self, path: Path) -> ClassPath:
        path = Path(path).resolve()
        classpath = ClassPath(path)
        classpath.add_dir_and_contents(path / "lib")
        classpath.add(path / "build" / "test" / "classes")
        classpath.add(path / "build" / "classes")
        return classpath
