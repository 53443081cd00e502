"""Integration tests that call real build tools.

Run with: pytest --full
"""

import shutil

import pytest

from tmclangs.config import LangsSettings
from tmclangs.domain import RunStatus
from tmclangs.process import ProcessRunner, ProcessRunnerError
from tmclangs.project_type import ProjectType
from tmclangs.task_executor import TaskExecutor

pytestmark = pytest.mark.integration


@pytest.fixture
def executor(tmp_path):
    settings = LangsSettings(cache_dir=tmp_path / "cache")
    return TaskExecutor(ProjectType.default(settings=settings, runner=ProcessRunner()))


@pytest.mark.skipif(shutil.which("make") is None, reason="make not installed")
class TestMakeToolchain:
    """Real make runs."""

    def test_broken_build_is_compile_failed(self, executor, tmp_path):
        project = tmp_path / "broken"
        (project / "test").mkdir(parents=True)
        (project / "Makefile").write_text("test:\n\t@echo compiling\n\t@echo 'lib.c:1: error' >&2\n\t@false\n")

        result = executor.run_tests(project)

        assert result.status == RunStatus.COMPILE_FAILED
        assert result.test_results == ()
        assert b"compiling" in result.logs["stdout"]
        assert b"lib.c:1: error" in result.logs["stderr"]


class TestProcessRunner:
    """Real process spawning."""

    def test_missing_executable(self, tmp_path):
        with pytest.raises(ProcessRunnerError):
            ProcessRunner().run(["tmc-langs-no-such-tool"], cwd=tmp_path)

    @pytest.mark.skipif(shutil.which("sh") is None, reason="sh not available")
    def test_streams_kept_apart(self, tmp_path):
        result = ProcessRunner().run(["sh", "-c", "echo out; echo err >&2; exit 3"], cwd=tmp_path)

        assert result.exit_code == 3
        assert result.stdout == b"out\n"
        assert result.stderr == b"err\n"
