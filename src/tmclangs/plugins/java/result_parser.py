"""
Parser for the JUnit test runner's result file.

The runner writes a JSON array with one record per test method:

    [
      {
        "className": "CalculatorTest",
        "methodName": "addsNumbers",
        "pointNames": ["1.1", "1.2"],
        "status": "FAILED",
        "message": "expected:<3> but was:<4>",
        "exception": {
          "className": "java.lang.AssertionError",
          "message": "expected:<3> but was:<4>",
          "stackTrace": [
            {"declaringClass": "CalculatorTest", "methodName": "addsNumbers",
             "fileName": "CalculatorTest.java", "lineNumber": 12}
          ]
        }
      }
    ]

Status is PASSED, FAILED, or RUNNING/NOT_STARTED when the runner died before
the test finished.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from ...domain import ExerciseDesc, TestResult
from ..errors import ResultParseError

PASSED = "PASSED"
FAILED = "FAILED"
INCOMPLETE_STATUSES = {"RUNNING", "NOT_STARTED"}

REQUIRED_FIELDS = ("className", "methodName", "status")


def _format_stack_trace(exception: Dict[str, Any]) -> Tuple[str, ...]:
    """Render the runner's exception record as Java-style stack trace lines.

    Raises:
        ResultParseError: If the stack trace is not a list of frame objects
    """
    lines = []
    header = str(exception.get("className") or "")
    if exception.get("message"):
        header = f"{header}: {exception['message']}"
    if header:
        lines.append(header)

    frames = exception.get("stackTrace") or []
    if not isinstance(frames, list):
        raise ResultParseError(f"stackTrace is not a list: {frames!r}")
    for frame in frames:
        if not isinstance(frame, dict):
            raise ResultParseError(f"Malformed stack frame: {frame!r}")
        location = frame.get("fileName") or "Unknown Source"
        line_number = frame.get("lineNumber")
        if isinstance(line_number, int) and line_number >= 0:
            location = f"{location}:{line_number}"
        lines.append(f"at {frame.get('declaringClass', '')}.{frame.get('methodName', '')}({location})")

    cause = exception.get("cause")
    if isinstance(cause, dict):
        cause_lines = _format_stack_trace(cause)
        if cause_lines:
            lines.append(f"Caused by: {cause_lines[0]}")
            lines.extend(cause_lines[1:])

    return tuple(lines)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


class JavaResultParser:
    """Converts the runner's JSON result file into TestResults."""

    def parse(self, result_file: Path, exercise: ExerciseDesc) -> List[TestResult]:
        """Parse a result file.

        Args:
            result_file: JSON file written by the test runner
            exercise: Scan-time description, used to fill in missing points

        Returns:
            TestResults in file order

        Raises:
            ResultParseError: If the file is missing, truncated or malformed
        """
        result_file = Path(result_file)
        try:
            text = result_file.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ResultParseError(f"Result file not found: {result_file}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ResultParseError(f"Failed to read {result_file}: {e}") from e

        try:
            records = json.loads(text)
        except json.JSONDecodeError as e:
            raise ResultParseError(f"Invalid JSON in {result_file}: {e}") from e

        if not isinstance(records, list):
            raise ResultParseError(f"Expected a list of test results in {result_file}")

        return [self._parse_record(record, exercise, result_file) for record in records]

    def _parse_record(self, record: Any, exercise: ExerciseDesc, result_file: Path) -> TestResult:
        if not isinstance(record, dict):
            raise ResultParseError(f"Malformed test result in {result_file}: {record!r}")
        missing = [name for name in REQUIRED_FIELDS if name not in record]
        if missing:
            raise ResultParseError(
                f"Test result in {result_file} is missing {', '.join(missing)}: {record!r}"
            )
        not_strings = [name for name in REQUIRED_FIELDS if not isinstance(record[name], str)]
        if not_strings:
            raise ResultParseError(
                f"Test result in {result_file} has non-string {', '.join(not_strings)}: {record!r}"
            )

        name = f"{record['className']} {record['methodName']}"
        status = record["status"]
        if status not in (PASSED, FAILED) and status not in INCOMPLETE_STATUSES:
            raise ResultParseError(f"Unknown status {status!r} for {name} in {result_file}")

        points = record.get("pointNames")
        if points is None:
            desc = exercise.find_test(name)
            points = desc.points if desc else ()
        elif not _is_string_list(points):
            raise ResultParseError(f"pointNames of {name} in {result_file} is not a list of strings")

        message = record.get("message")
        if message is not None and not isinstance(message, str):
            raise ResultParseError(f"message of {name} in {result_file} is not a string")

        exception = record.get("exception")
        if exception is None:
            stack_trace: Tuple[str, ...] = ()
        elif isinstance(exception, dict):
            try:
                stack_trace = _format_stack_trace(exception)
            except ResultParseError as e:
                raise ResultParseError(f"Malformed exception of {name} in {result_file}: {e}") from e
        else:
            raise ResultParseError(f"exception of {name} in {result_file} is not an object")

        incomplete = status in INCOMPLETE_STATUSES
        if incomplete and not message:
            message = f"Test did not finish (status {status})"

        return TestResult(
            name=name,
            successful=status == PASSED,
            message=message,
            points=tuple(points),
            exception=stack_trace,
            error=incomplete,
        )
