"""Unit tests for the Ant plugin."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from tmclangs.config import LangsSettings
from tmclangs.domain import RunStatus, ValidationResult
from tmclangs.plugins import AntPlugin, TestRunnerError
from tmclangs.process import ProcessResult
from tmclangs.style import CheckstyleRunner

ANT_TESTS = (
    "CalculatorTest addsPositiveNumbers",
    "CalculatorTest addsNegativeNumbers",
    "CalculatorTest addsZero",
)


class TestAntPlugin:
    """Test cases for AntPlugin."""

    def test_language_name(self, settings, mock_runner):
        assert AntPlugin(settings=settings, runner=mock_runner).get_language_name() == "apache-ant"

    def test_detects_build_xml(self, ant_project, tmp_path, settings, mock_runner):
        plugin = AntPlugin(settings=settings, runner=mock_runner)
        assert plugin.is_exercise_type_correct(ant_project)
        assert not plugin.is_exercise_type_correct(tmp_path)

    def test_build_invokes_ant(self, ant_project, settings, mock_runner):
        plugin = AntPlugin(settings=settings, runner=mock_runner)

        result = plugin.build(ant_project)

        assert result.success
        mock_runner.run.assert_called_once_with(
            ["ant", "-f", "build.xml", "-Djavac.fork=true", "compile-test"], cwd=ant_project
        )

    def test_build_failure_keeps_output(self, ant_project, settings, mock_runner):
        mock_runner.run.return_value = ProcessResult(1, b"BUILD FAILED", b"Calculator.java:4: error")
        plugin = AntPlugin(settings=settings, runner=mock_runner)

        result = plugin.build(ant_project)

        assert result.status_code == 1
        assert result.stdout == b"BUILD FAILED"
        assert result.stderr == b"Calculator.java:4: error"

    def test_scan_exercise(self, ant_project, settings, mock_runner):
        plugin = AntPlugin(settings=settings, runner=mock_runner)

        desc = plugin.scan_exercise(ant_project, "calculator")

        assert desc.name == "calculator"
        assert desc.test_names() == ANT_TESTS
        assert [t.points for t in desc.tests] == [("1.1",), ("1.2",), ("1.3",)]

    def test_scan_without_test_dir_is_none(self, ant_project, settings, mock_runner):
        for source in (ant_project / "test").iterdir():
            source.unlink()
        (ant_project / "test").rmdir()

        plugin = AntPlugin(settings=settings, runner=mock_runner)

        assert plugin.scan_exercise(ant_project, "calculator") is None

    def test_scan_of_other_project_is_none(self, make_project, settings, mock_runner):
        plugin = AntPlugin(settings=settings, runner=mock_runner)
        assert plugin.scan_exercise(make_project, "c-lib") is None

    def test_run_tests_all_passing(self, ant_project, settings, java_runner_writing, record):
        points = {"addsPositiveNumbers": "1.1", "addsNegativeNumbers": "1.2", "addsZero": "1.3"}
        runner = java_runner_writing(
            [record(name, "PASSED", [points[name.split()[1]]]) for name in ANT_TESTS]
        )
        plugin = AntPlugin(settings=settings, runner=runner)

        result = plugin.run_tests(ant_project)

        assert result.status == RunStatus.PASSED
        assert [r.name for r in result.test_results] == list(ANT_TESTS)
        assert [r.points for r in result.test_results] == [("1.1",), ("1.2",), ("1.3",)]
        assert result.logs["stdout"] == b"runner output"

    def test_run_tests_one_failing(self, ant_project, settings, java_runner_writing, record):
        runner = java_runner_writing(
            [
                record(ANT_TESTS[0], "PASSED", ["1.1"]),
                record(ANT_TESTS[1], "FAILED", ["1.2"], "expected:<-3> but was:<0>"),
                record(ANT_TESTS[2], "PASSED", ["1.3"]),
            ]
        )
        plugin = AntPlugin(settings=settings, runner=runner)

        result = plugin.run_tests(ant_project)

        assert result.status == RunStatus.FAILED
        failing = [r for r in result.test_results if not r.successful]
        assert len(failing) == 1
        assert failing[0].name == ANT_TESTS[1]
        assert failing[0].message == "expected:<-3> but was:<0>"

    def test_run_tests_compile_failure(self, ant_project, settings, java_runner_writing):
        runner = java_runner_writing([], build_exit_code=1)
        plugin = AntPlugin(settings=settings, runner=runner)

        result = plugin.run_tests(ant_project)

        assert result.status == RunStatus.COMPILE_FAILED
        assert result.test_results == ()
        assert result.logs["stdout"] == b"BUILD"
        assert runner.run.call_count == 1

    def test_runner_invocation(self, ant_project, settings, java_runner_writing, record):
        runner = java_runner_writing([record(name) for name in ANT_TESTS])
        plugin = AntPlugin(settings=settings, runner=runner)

        plugin.run_tests(ant_project)

        argv = runner.run.call_args_list[1][0][0]
        project = ant_project.resolve()
        assert argv[0] == "java"
        assert f"-Dtmc.test_class_dir={project / 'test'}" in argv
        classpath = argv[argv.index("-cp") + 1]
        assert str(project / "lib" / "junit-4.13.jar") in classpath
        assert str(settings.junit_runner_jar) in classpath
        assert argv[-3:] == [
            "CalculatorTest.addsPositiveNumbers{1.1}",
            "CalculatorTest.addsNegativeNumbers{1.2}",
            "CalculatorTest.addsZero{1.3}",
        ]
        assert runner.run.call_args_list[1][1]["cwd"] == project

    def test_missing_result_file_is_runner_error(self, ant_project, settings, mock_runner):
        plugin = AntPlugin(settings=settings, runner=mock_runner)

        with pytest.raises(TestRunnerError, match="Result file not found"):
            plugin.run_tests(ant_project)

    def test_stale_result_file_removed(self, ant_project, settings, mock_runner):
        stale = ant_project / ".tmc_test_results.json"
        stale.write_text("[]")
        plugin = AntPlugin(settings=settings, runner=mock_runner)

        with pytest.raises(TestRunnerError):
            plugin.run_tests(ant_project)

        assert not stale.exists()

    def test_missing_runner_jar_is_runner_error(self, ant_project, tmp_path, mock_runner):
        settings = LangsSettings(junit_runner_jar=tmp_path / "absent.jar", cache_dir=tmp_path / "cache")
        plugin = AntPlugin(settings=settings, runner=mock_runner)

        with pytest.raises(TestRunnerError, match="JUnit test runner"):
            plugin.run_tests(ant_project)

    def test_unconfigured_runner_names_the_settings(self, ant_project, tmp_path, mock_runner):
        settings = LangsSettings(cache_dir=tmp_path / "cache")
        plugin = AntPlugin(settings=settings, runner=mock_runner)

        with pytest.raises(TestRunnerError) as exc_info:
            plugin.run_tests(ant_project)

        message = str(exc_info.value)
        assert "No jar path or download URL configured" in message
        assert "junit_runner_jar" in message
        assert "TMC_LANGS_JUNIT_RUNNER_JAR" in message

    def test_project_class_path(self, ant_project, settings, mock_runner):
        project = ant_project.resolve()
        classpath = AntPlugin(settings=settings, runner=mock_runner).get_project_class_path(ant_project)

        assert classpath.paths == [
            project,
            project / "lib",
            project / "lib" / "junit-4.13.jar",
            project / "build" / "test" / "classes",
            project / "build" / "classes",
        ]

    def test_check_code_style_uses_src(self, ant_project, settings, mock_runner):
        checkstyle = Mock(spec=CheckstyleRunner)
        checkstyle.check.return_value = ValidationResult()
        plugin = AntPlugin(settings=settings, runner=mock_runner, checkstyle=checkstyle)

        result = plugin.check_code_style(ant_project)

        assert result.validation_errors == {}
        checkstyle.check.assert_called_once_with(Path(ant_project), ant_project / "src")

    def test_prepare_stub(self, ant_project, settings, mock_runner):
        plugin = AntPlugin(settings=settings, runner=mock_runner)

        plugin.prepare_stub(ant_project)

        source = (ant_project / "src" / "Calculator.java").read_text()
        assert "return 0;" in source
        assert "a + b" not in source
