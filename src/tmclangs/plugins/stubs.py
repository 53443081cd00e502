"""
Stub and solution preparation.

Exercise templates contain both the model solution and the code handed out to
students, separated by marker comments:

    // BEGIN SOLUTION
    return a + b;
    // END SOLUTION
    // STUB: return 0;

A file containing `// SOLUTION FILE` exists only in the solution.

prepare_stub() rewrites sources into what students receive; prepare_solution()
rewrites them into the clean model solution. Both work in place.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .errors import StubPreparationError

logger = logging.getLogger(__name__)

BEGIN_SOLUTION = re.compile(r"^\s*//\s*BEGIN SOLUTION\s*$")
END_SOLUTION = re.compile(r"^\s*//\s*END SOLUTION\s*$")
SOLUTION_FILE = re.compile(r"^\s*//\s*SOLUTION FILE\s*$")
STUB_LINE = re.compile(r"^(\s*)//\s*STUB:\s?(.*)$")

EXCLUDED_DIRS = {"build", "target", "nbproject", "__pycache__", "node_modules"}


def iter_source_files(root: Path, suffixes: Iterable[str]) -> Iterator[Path]:
    """Yield source files below root, skipping build output and hidden dirs."""
    suffixes = tuple(suffixes)
    for path in sorted(Path(root).rglob("*")):
        relative_parts = path.relative_to(root).parts[:-1]
        if any(part in EXCLUDED_DIRS or part.startswith(".") for part in relative_parts):
            continue
        if path.is_file() and path.suffix in suffixes:
            yield path


def _filter_lines(lines: List[str], keep_solution: bool, source: Path) -> List[str]:
    output = []
    in_solution = False

    for number, line in enumerate(lines, start=1):
        if BEGIN_SOLUTION.match(line):
            if in_solution:
                raise StubPreparationError(f"{source}:{number}: nested BEGIN SOLUTION")
            in_solution = True
            continue
        if END_SOLUTION.match(line):
            if not in_solution:
                raise StubPreparationError(f"{source}:{number}: END SOLUTION without BEGIN SOLUTION")
            in_solution = False
            continue
        if SOLUTION_FILE.match(line):
            continue

        stub = STUB_LINE.match(line)
        if stub:
            if not keep_solution:
                newline = "\n" if line.endswith("\n") else ""
                output.append(stub.group(1) + stub.group(2).rstrip("\r\n") + newline)
            continue

        if in_solution and not keep_solution:
            continue
        output.append(line)

    if in_solution:
        raise StubPreparationError(f"{source}: BEGIN SOLUTION is never closed")

    return output


def _rewrite(path: Path, keep_solution: bool) -> Optional[Path]:
    text = path.read_text(encoding="utf-8")
    lines = text.splitlines(keepends=True)

    if not keep_solution and any(SOLUTION_FILE.match(line) for line in lines):
        path.unlink()
        logger.debug(f"Removed solution file {path}")
        return None

    filtered = "".join(_filter_lines(lines, keep_solution, path))
    if filtered != text:
        path.write_text(filtered, encoding="utf-8")
        logger.debug(f"Rewrote {path}")
    return path


def prepare_stub(root: Path, suffixes: Iterable[str]) -> None:
    """Turn the sources below root into the student stub, in place.

    Raises:
        StubPreparationError: If solution markers are unbalanced
    """
    logger.info(f"Preparing stub at {root}")
    for path in list(iter_source_files(root, suffixes)):
        _rewrite(path, keep_solution=False)


def prepare_solution(root: Path, suffixes: Iterable[str]) -> None:
    """Turn the sources below root into the clean model solution, in place.

    Raises:
        StubPreparationError: If solution markers are unbalanced
    """
    logger.info(f"Preparing solution at {root}")
    for path in list(iter_source_files(root, suffixes)):
        _rewrite(path, keep_solution=True)
