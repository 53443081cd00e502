"""Shared fixtures: exercise directories, settings and a mocked process runner."""

import json
from pathlib import Path
from unittest.mock import Mock

import pytest

from tmclangs.config import LangsSettings
from tmclangs.process import ProcessResult, ProcessRunner

CALCULATOR_SOURCE = """\
public class Calculator {
    public int add(int a, int b) {
        // BEGIN SOLUTION
        return a + b;
        // END SOLUTION
        // STUB: return 0;
    }
}
"""

CALCULATOR_TEST_SOURCE = """\
import fi.helsinki.cs.tmc.edutestutils.Points;
import org.junit.Test;
import static org.junit.Assert.*;

public class CalculatorTest {

    @Test
    @Points("1.1")
    public void addsPositiveNumbers() {
        assertEquals(3, new Calculator().add(1, 2));
    }

    @Test
    @Points("1.2")
    public void addsNegativeNumbers() {
        assertEquals(-3, new Calculator().add(-1, -2));
    }

    /* @Test
       public void commentedOut() {} */

    @Test
    @Points("1.3")
    public void addsZero() {
        assertEquals(1, new Calculator().add(1, 0));
    }

    private int helper() {
        return 0;
    }
}
"""

CHECK_TEST_SOURCE = """\
#include <check.h>
#include "tmc-check.h"
#include "../src/lib.h"

START_TEST(test_addition)
{
    fail_unless(add(1, 2) == 3, "Expected 3");
}
END_TEST

START_TEST(test_subtraction)
{
    fail_unless(sub(3, 2) == 1, "Expected 1");
}
END_TEST

int main(int argc, const char *argv[])
{
    Suite *s = suite_create("Lib");
    tmc_register_test(s, test_addition, "2.1");
    tmc_register_test(s, test_subtraction, "2.2 2.3");
    // tmc_register_test(s, test_disabled, "2.4");
    return tmc_run_tests(argc, argv, s);
}
"""


def ok(stdout: bytes = b"", stderr: bytes = b"", exit_code: int = 0) -> ProcessResult:
    return ProcessResult(exit_code=exit_code, stdout=stdout, stderr=stderr)


def runner_record(name: str, status: str = "PASSED", points=None, message=None) -> dict:
    class_name, method_name = name.split(" ")
    record = {
        "className": class_name,
        "methodName": method_name,
        "status": status,
        "pointNames": points or [],
    }
    if message is not None:
        record["message"] = message
    return record


def argv_option(argv, prefix: str) -> str:
    for arg in argv:
        if arg.startswith(prefix):
            return arg[len(prefix):]
    raise AssertionError(f"{prefix} not in {argv}")


@pytest.fixture
def ant_project(tmp_path) -> Path:
    """Ant exercise with three tests, one point each."""
    project = tmp_path / "calculator"
    (project / "src").mkdir(parents=True)
    (project / "test").mkdir()
    (project / "lib").mkdir()
    (project / "build.xml").write_text('<project name="calculator" default="compile-test"/>\n')
    (project / "src" / "Calculator.java").write_text(CALCULATOR_SOURCE)
    (project / "test" / "CalculatorTest.java").write_text(CALCULATOR_TEST_SOURCE)
    (project / "lib" / "junit-4.13.jar").write_bytes(b"PK")
    return project


@pytest.fixture
def maven_project(tmp_path) -> Path:
    """Maven exercise with the standard directory layout."""
    project = tmp_path / "maven-calculator"
    main_dir = project / "src" / "main" / "java"
    test_dir = project / "src" / "test" / "java"
    main_dir.mkdir(parents=True)
    test_dir.mkdir(parents=True)
    (project / "pom.xml").write_text("<project/>\n")
    (main_dir / "Calculator.java").write_text(CALCULATOR_SOURCE)
    (test_dir / "CalculatorTest.java").write_text(CALCULATOR_TEST_SOURCE)
    return project


@pytest.fixture
def make_project(tmp_path) -> Path:
    """C exercise built with make and tested with Check."""
    project = tmp_path / "c-lib"
    (project / "src").mkdir(parents=True)
    (project / "test").mkdir()
    (project / "Makefile").write_text("test:\n\t$(CC) -o test/test test/test_source.c src/lib.c -lcheck\n")
    (project / "src" / "lib.c").write_text("int add(int a, int b) { return a + b; }\n")
    (project / "test" / "test_source.c").write_text(CHECK_TEST_SOURCE)
    return project


@pytest.fixture
def settings(tmp_path) -> LangsSettings:
    """Settings pointing at local jars so nothing is downloaded."""
    jars = tmp_path / "jars"
    jars.mkdir()
    runner_jar = jars / "tmc-junit-runner.jar"
    checkstyle_jar = jars / "checkstyle-all.jar"
    runner_jar.write_bytes(b"PK")
    checkstyle_jar.write_bytes(b"PK")
    return LangsSettings(
        junit_runner_jar=runner_jar,
        checkstyle_jar=checkstyle_jar,
        cache_dir=tmp_path / "cache",
    )


@pytest.fixture
def mock_runner() -> Mock:
    """Process runner whose run() returns success unless configured otherwise."""
    runner = Mock(spec=ProcessRunner)
    runner.run = Mock(return_value=ok())
    return runner


@pytest.fixture
def java_runner_writing(mock_runner):
    """Configure mock_runner to answer the JUnit runner with given records.

    Usage:
        java_runner_writing([runner_record("CalculatorTest addsZero")])
    """

    def configure(records, build_exit_code: int = 0):
        def run(argv, cwd, env=None):
            if any(str(arg).startswith("-Dtmc.results_file=") for arg in argv):
                result_file = Path(argv_option(argv, "-Dtmc.results_file="))
                result_file.write_text(json.dumps(records))
                return ok(stdout=b"runner output")
            return ok(stdout=b"BUILD", exit_code=build_exit_code)

        mock_runner.run.side_effect = run
        return mock_runner

    return configure


@pytest.fixture
def record():
    """Factory for JUnit runner result records."""
    return runner_record
