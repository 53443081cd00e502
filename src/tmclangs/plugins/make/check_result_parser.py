"""
Parser for Check's XML test log.

    <testsuites xmlns="http://check.sourceforge.net/ns">
      <suite>
        <title>tests</title>
        <test result="failure">
          <path>.</path>
          <fn>test_source.c:12</fn>
          <id>test_addition</id>
          <iteration>0</iteration>
          <description>Core</description>
          <message>Expected 3, got 4</message>
        </test>
      </suite>
    </testsuites>

result is "success", "failure" (assertion failed) or "error" (the test
crashed or timed out).
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional

from ...domain import ExerciseDesc, TestResult
from ..errors import ResultParseError

RESULT_SUCCESS = "success"
RESULT_FAILURE = "failure"
RESULT_ERROR = "error"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    for child in element:
        if _local_name(child.tag) == name:
            return (child.text or "").strip()
    return None


class CheckResultParser:
    """Converts a Check XML log into TestResults.

    Check does not record point labels, so they are taken from the
    scan-time exercise description by test name.
    """

    def parse(self, result_file: Path, exercise: ExerciseDesc) -> List[TestResult]:
        """Parse a Check XML log.

        Raises:
            ResultParseError: If the file is missing or malformed
        """
        result_file = Path(result_file)
        if not result_file.is_file():
            raise ResultParseError(f"Result file not found: {result_file}")

        try:
            root = ET.parse(result_file).getroot()
        except ET.ParseError as e:
            raise ResultParseError(f"Malformed XML in {result_file}: {e}") from e

        if _local_name(root.tag) != "testsuites":
            raise ResultParseError(f"{result_file} is not a Check test log")

        results = []
        for element in root.iter():
            if _local_name(element.tag) != "test":
                continue
            results.append(self._parse_test(element, exercise, result_file))
        return results

    def _parse_test(self, element: ET.Element, exercise: ExerciseDesc, result_file: Path) -> TestResult:
        name = _child_text(element, "id")
        if not name:
            raise ResultParseError(f"Test without <id> in {result_file}")

        outcome = element.get("result")
        if outcome not in (RESULT_SUCCESS, RESULT_FAILURE, RESULT_ERROR):
            raise ResultParseError(f"Unknown result {outcome!r} for {name} in {result_file}")

        desc = exercise.find_test(name)
        successful = outcome == RESULT_SUCCESS
        message = None if successful else _child_text(element, "message")
        location = _child_text(element, "fn")

        return TestResult(
            name=name,
            successful=successful,
            message=message,
            points=desc.points if desc else (),
            exception=(location,) if location and not successful else (),
            error=outcome == RESULT_ERROR,
        )
