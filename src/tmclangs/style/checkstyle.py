"""
Checkstyle integration.

Runs Checkstyle over a project's main source directory and converts its XML
report into a ValidationResult:

    <checkstyle version="10.12.5">
      <file name="/exercise/src/Main.java">
        <error line="3" column="5" severity="warning"
               message="Missing a Javadoc comment."
               source="com.puppycrawl.tools.checkstyle.checks.javadoc.MissingJavadocMethodCheck"/>
      </file>
    </checkstyle>
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

from ..config import LangsSettings
from ..domain import ValidationError, ValidationResult
from ..packages import Cache, DownloadError, ensure_jar
from ..process import ProcessInterruptedError, ProcessRunner, ProcessRunnerError

logger = logging.getLogger(__name__)


class StyleCheckError(Exception):
    """Raised when the style checker cannot run or its report is unreadable."""

    pass


def _int_attr(element: ET.Element, name: str) -> int:
    try:
        return int(element.get(name, "0"))
    except ValueError:
        return 0


def parse_checkstyle_report(report: str) -> ValidationResult:
    """Parse a Checkstyle XML report.

    Files without errors are left out, so a clean report yields an empty
    mapping.

    Raises:
        StyleCheckError: If the report is not a Checkstyle XML document
    """
    start = report.find("<checkstyle")
    end = report.rfind("</checkstyle>")
    if start < 0:
        raise StyleCheckError("Checkstyle produced no XML report")
    if end < 0:
        # A report with no files can be a single self-closing element
        document = report[start:].strip()
    else:
        document = report[start:end + len("</checkstyle>")]

    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise StyleCheckError(f"Malformed Checkstyle report: {e}") from e

    result = ValidationResult()
    for file_element in root.iter("file"):
        source_file = Path(file_element.get("name", ""))
        for error_element in file_element.iter("error"):
            result.add_error(
                source_file,
                ValidationError(
                    line=_int_attr(error_element, "line"),
                    column=_int_attr(error_element, "column"),
                    message=error_element.get("message", ""),
                    source_name=error_element.get("source", ""),
                ),
            )
    return result


class CheckstyleRunner:
    """Runs Checkstyle for Java plugins.

    Example usage:
        checker = CheckstyleRunner(settings)
        result = checker.check(project_dir, project_dir / "src" / "main" / "java")
        if result is None:
            print("Style checking does not apply")
    """

    def __init__(
        self,
        settings: LangsSettings,
        runner: Optional[ProcessRunner] = None,
        cache: Optional[Cache] = None,
    ):
        self.settings = settings
        self.runner = runner or ProcessRunner()
        self.cache = cache or Cache(settings.cache_dir)

    def check(self, project_path: Path, source_dir: Path) -> Optional[ValidationResult]:
        """Check the sources in source_dir.

        Args:
            project_path: Exercise directory (working directory for the tool)
            source_dir: Directory of main sources to check

        Returns:
            ValidationResult, or None if source_dir does not exist

        Raises:
            StyleCheckError: If Checkstyle cannot be run or its report is
                unreadable
            ProcessInterruptedError: If the wait on Checkstyle is interrupted
        """
        source_dir = Path(source_dir)
        if not source_dir.is_dir():
            logger.info(f"No {source_dir} in {project_path}, style checking does not apply")
            return None

        try:
            jar = ensure_jar(self.settings.checkstyle_jar, self.settings.checkstyle_url, self.cache)
        except DownloadError as e:
            raise StyleCheckError(f"Checkstyle is not available: {e}") from e

        argv = [
            self.settings.java_executable,
            "-jar",
            str(jar),
            "-c",
            self.settings.checkstyle_config,
            "-f",
            "xml",
            str(source_dir),
        ]

        logger.info(f"Checking code style of {project_path}")
        try:
            process = self.runner.run(argv, cwd=Path(project_path))
        except ProcessInterruptedError:
            raise
        except ProcessRunnerError as e:
            raise StyleCheckError(f"Failed to run Checkstyle: {e}") from e

        # Checkstyle exits with the number of violations, so the exit code
        # alone does not tell a failed run from a dirty project.
        report = process.stdout.decode("utf-8", errors="replace")
        try:
            result = parse_checkstyle_report(report)
        except StyleCheckError as e:
            stderr = process.stderr.decode("utf-8", errors="replace").strip()
            raise StyleCheckError(f"{e} (exit code {process.exit_code}): {stderr}") from e

        logger.info(f"Found {result.error_count} style violations in {project_path}")
        return result
