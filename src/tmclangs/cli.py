"""
Command-line interface for tmclangs.

This module provides the `tmc-langs` CLI tool. Every command takes an
exercise directory and prints its result as JSON (or writes it to --output).
"""

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from tmclangs import __version__
from tmclangs.cli_utils import ErrorFormatter, JsonOutput, PathValidator
from tmclangs.config import ConfigError, load_settings
from tmclangs.logging_config import setup_logging
from tmclangs.packages import DownloadError
from tmclangs.plugins import ScannerError, StubPreparationError, TestRunnerError
from tmclangs.process import ProcessInterruptedError, ProcessRunnerError
from tmclangs.project_type import NoLanguagePluginFoundError, ProjectType
from tmclangs.style import StyleCheckError
from tmclangs.task_executor import TaskExecutor


@dataclass
class CommandArgs:
    """Arguments shared by all commands."""

    exercise_path: Path
    output_path: Optional[Path] = None
    exercise_name: Optional[str] = None
    config_path: Optional[Path] = None
    verbose: bool = False


def create_executor(args: CommandArgs) -> TaskExecutor:
    settings = load_settings(args.config_path)
    return TaskExecutor(ProjectType.default(settings=settings))


def detect_command(args: CommandArgs) -> None:
    """Print the name of the plugin that owns the exercise.

    Examples:
        tmc-langs detect exercises/calculator
    """
    plugin = create_executor(args).get_language_plugin(args.exercise_path)
    JsonOutput.write({"languagePlugin": plugin.get_language_name()}, args.output_path)


def is_exercise_root_command(args: CommandArgs) -> None:
    """Print whether any plugin recognizes the directory."""
    is_root = create_executor(args).is_exercise_root_directory(args.exercise_path)
    JsonOutput.write({"isExerciseRoot": is_root}, args.output_path)


def checkstyle_command(args: CommandArgs) -> None:
    """Print style violations, or null when style checking does not apply.

    Examples:
        tmc-langs checkstyle exercises/calculator -o style.json
    """
    result = create_executor(args).run_check_code_style(args.exercise_path)
    JsonOutput.write(result.to_dict() if result is not None else None, args.output_path)


def run_tests_command(args: CommandArgs) -> None:
    """Build the exercise, run its tests and print the run result.

    Examples:
        tmc-langs run-tests exercises/calculator
        tmc-langs run-tests exercises/calculator -o results.json
    """
    result = create_executor(args).run_tests(args.exercise_path)
    JsonOutput.write(result.to_dict(), args.output_path)


def scan_exercise_command(args: CommandArgs) -> None:
    """Print the statically scanned tests, or null when none are found.

    Examples:
        tmc-langs scan-exercise exercises/calculator --name calculator
    """
    name = args.exercise_name or args.exercise_path.resolve().name
    desc = create_executor(args).scan_exercise(args.exercise_path, name)
    JsonOutput.write(desc.to_dict() if desc is not None else None, args.output_path)


def prepare_stub_command(args: CommandArgs) -> None:
    """Rewrite the exercise in place into the student stub."""
    create_executor(args).prepare_stub(args.exercise_path)


def prepare_solution_command(args: CommandArgs) -> None:
    """Rewrite the exercise in place into the model solution."""
    create_executor(args).prepare_solution(args.exercise_path)


COMMANDS: Dict[str, Callable[[CommandArgs], None]] = {
    "detect": detect_command,
    "is-exercise-root": is_exercise_root_command,
    "checkstyle": checkstyle_command,
    "run-tests": run_tests_command,
    "scan-exercise": scan_exercise_command,
    "prepare-stub": prepare_stub_command,
    "prepare-solution": prepare_solution_command,
}

COMMAND_HELP = {
    "detect": "Detect the toolchain of an exercise",
    "is-exercise-root": "Check whether a directory is an exercise",
    "checkstyle": "Check code style of an exercise",
    "run-tests": "Build an exercise and run its tests",
    "scan-exercise": "List the tests of an exercise without running them",
    "prepare-stub": "Turn an exercise into the student stub (in place)",
    "prepare-solution": "Turn an exercise into the model solution (in place)",
}


def _was_interrupted(error: Optional[BaseException]) -> bool:
    """True if error is, or was caused by, an interrupted child process."""
    while error is not None:
        if isinstance(error, ProcessInterruptedError):
            return True
        error = error.__cause__
    return False


def run_command(command: str, args: CommandArgs) -> None:
    """Run a command, mapping failures to exit codes."""
    try:
        COMMANDS[command](args)
    except ProcessInterruptedError:
        ErrorFormatter.handle_keyboard_interrupt()
    except NoLanguagePluginFoundError as e:
        ErrorFormatter.handle_error("No language plugin found", e)
    except ScannerError as e:
        ErrorFormatter.handle_error("Failed to scan tests", e)
    except TestRunnerError as e:
        if _was_interrupted(e):
            ErrorFormatter.handle_keyboard_interrupt()
        ErrorFormatter.handle_error("Failed to run tests", e)
    except StyleCheckError as e:
        if _was_interrupted(e):
            ErrorFormatter.handle_keyboard_interrupt()
        ErrorFormatter.handle_error("Failed to check code style", e)
    except StubPreparationError as e:
        ErrorFormatter.handle_error("Failed to prepare exercise", e)
    except (ConfigError, DownloadError) as e:
        ErrorFormatter.handle_error("Configuration error", e)
    except ProcessRunnerError as e:
        ErrorFormatter.handle_error("Failed to run external tool", e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, args.verbose)


CONFIG_EPILOG = """\
Java exercises need the JUnit test runner jar. Set one of:
  [java] junit_runner_jar = /path/to/tmc-junit-runner.jar
  [java] junit_runner_url = <download URL>   (cached under cache_dir)
in the settings INI, or TMC_LANGS_JUNIT_RUNNER_JAR / TMC_LANGS_JUNIT_RUNNER_URL
in the environment.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmc-langs",
        description="tmc-langs - build and test programming exercises",
        epilog=CONFIG_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tmc-langs {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for command, help_text in COMMAND_HELP.items():
        command_parser = subparsers.add_parser(command, help=help_text)
        command_parser.add_argument(
            "exercise_path",
            nargs="?",
            type=Path,
            default=Path.cwd(),
            help="Exercise directory (default: current directory)",
        )
        command_parser.add_argument(
            "-o",
            "--output",
            type=Path,
            default=None,
            help="Write JSON output to this file instead of stdout",
        )
        command_parser.add_argument(
            "--config",
            type=Path,
            default=None,
            help="Settings INI file (default: $TMC_LANGS_CONFIG)",
        )
        command_parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show debug logging",
        )
        if command == "scan-exercise":
            command_parser.add_argument(
                "-n",
                "--name",
                default=None,
                help="Exercise name (default: directory name)",
            )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """tmc-langs - build and test programming exercises."""
    parser = build_parser()
    parsed_args: Any = parser.parse_args(argv)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    PathValidator.validate_exercise_dir(parsed_args.exercise_path)
    setup_logging(parsed_args.verbose)

    args = CommandArgs(
        exercise_path=parsed_args.exercise_path,
        output_path=parsed_args.output,
        exercise_name=getattr(parsed_args, "name", None),
        config_path=parsed_args.config,
        verbose=parsed_args.verbose,
    )
    run_command(parsed_args.command, args)


if __name__ == "__main__":
    main()
