"""CLI utility functions for tmc-langs.

This module provides common utilities used across CLI commands including:
- JSON output to a file or stdout
- Error handling and formatting
- Exercise path validation
"""

import json
import sys
from pathlib import Path
from typing import Any, Optional


class JsonOutput:
    """Writes command results as JSON."""

    @staticmethod
    def write(data: Any, output_path: Optional[Path] = None) -> None:
        """Write data as JSON to output_path, or to stdout when it is None.

        Args:
            data: JSON-serializable value
            output_path: Destination file
        """
        text = json.dumps(data, indent=2, ensure_ascii=False)
        if output_path is None:
            sys.stdout.write(text + "\n")
            sys.stdout.flush()
        else:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text + "\n", encoding="utf-8")


class ErrorFormatter:
    """Formats and displays error messages on stderr with ANSI color codes."""

    # ANSI color codes
    RED = "\033[1;31m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        """Print formatted error message.

        Args:
            title: Error title (e.g., "No plugin found", "Test run failed")
            message: Error message details
        """
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}", file=sys.stderr)
        print(message, file=sys.stderr)

    @staticmethod
    def print_warning(message: str) -> None:
        print(f"{ErrorFormatter.YELLOW}✗ {message}{ErrorFormatter.RESET}", file=sys.stderr)

    @staticmethod
    def handle_error(title: str, error: Exception) -> None:
        """Report an expected failure and exit with status 1."""
        ErrorFormatter.print_error(title, str(error))
        sys.exit(1)

    @staticmethod
    def handle_keyboard_interrupt() -> None:
        """Handle KeyboardInterrupt with standard formatting."""
        ErrorFormatter.print_warning("Interrupted")
        sys.exit(130)  # Standard exit code for SIGINT

    @staticmethod
    def handle_unexpected_error(error: Exception, verbose: bool = False) -> None:
        """Handle unexpected errors with standard formatting.

        Args:
            error: The exception to handle
            verbose: Whether to print traceback
        """
        message = f"{type(error).__name__}: {error}"
        ErrorFormatter.print_error("Unexpected error", message)

        if verbose:
            import traceback

            print("Traceback:", file=sys.stderr)
            print(traceback.format_exc(), file=sys.stderr)

        sys.exit(1)


class PathValidator:
    """Validates exercise paths."""

    @staticmethod
    def validate_exercise_dir(exercise_path: Path) -> None:
        """Validate that the exercise path exists and is a directory.

        Raises:
            SystemExit: If path doesn't exist or isn't a directory
        """
        if not exercise_path.exists():
            ErrorFormatter.print_error("Error", f"Path does not exist: {exercise_path}")
            sys.exit(2)
        if not exercise_path.is_dir():
            ErrorFormatter.print_error("Error", f"Path is not a directory: {exercise_path}")
            sys.exit(2)
