"""Process Runner.

This module spawns external tools (build tools, test executors, style
checkers) and waits for them synchronously.

Design:
    - Wraps subprocess.Popen with a fixed argument vector and working directory
    - Captures stdout and stderr separately, as bytes, never interleaved
    - Imposes no timeout; the caller owns that policy
    - An interrupt while waiting surfaces as ProcessInterruptedError and the
      child is left for the OS to reap
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Sequence

logger = logging.getLogger(__name__)


class ProcessRunnerError(Exception):
    """Raised when an external process cannot be run to completion."""

    pass


class ProcessInterruptedError(ProcessRunnerError):
    """Raised when the wait on a child process is interrupted."""

    pass


@dataclass(frozen=True)
class ProcessResult:
    """Exit code and captured output of a finished process."""

    exit_code: int
    stdout: bytes
    stderr: bytes

    @property
    def success(self) -> bool:
        return self.exit_code == 0


class ProcessRunner:
    """Runs external commands and blocks until they finish.

    Example usage:
        runner = ProcessRunner()
        result = runner.run(["ant", "compile-test"], cwd=Path("exercise"))
        if result.exit_code != 0:
            print(result.stderr.decode())
    """

    def __init__(self, env: Optional[Dict[str, str]] = None):
        """Initialize process runner.

        Args:
            env: Extra environment variables applied to every command
        """
        self.env = dict(env or {})

    def run(
        self,
        argv: Sequence[str],
        cwd: Path,
        env: Optional[Dict[str, str]] = None,
    ) -> ProcessResult:
        """Run a command to completion.

        Args:
            argv: Program and arguments; no shell is involved
            cwd: Working directory for the child process
            env: Extra environment variables for this command only

        Returns:
            ProcessResult with exit code and captured output

        Raises:
            ProcessRunnerError: If the process cannot be started
            ProcessInterruptedError: If the wait is interrupted
        """
        cmd = [str(arg) for arg in argv]
        if not cmd:
            raise ProcessRunnerError("Cannot run an empty command")

        child_env = os.environ.copy()
        child_env.update(self.env)
        if env:
            child_env.update(env)

        logger.debug(f"Running {' '.join(cmd)} in {cwd}")

        try:
            process = subprocess.Popen(
                cmd,
                cwd=str(cwd),
                env=child_env,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            raise ProcessRunnerError(f"Failed to start {cmd[0]}: {e}") from e

        try:
            stdout, stderr = process.communicate()
        except KeyboardInterrupt as ke:
            raise ProcessInterruptedError(
                f"Interrupted while waiting for {cmd[0]} (pid {process.pid})"
            ) from ke

        logger.info(f"{Path(cmd[0]).name} exited with code {process.returncode}")

        return ProcessResult(
            exit_code=process.returncode,
            stdout=stdout or b"",
            stderr=stderr or b"",
        )
