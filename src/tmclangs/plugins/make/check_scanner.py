"""Static scanner for Check-based C test sources.

Tests are registered with the tmc-check helper:

    tmc_register_test(s, test_addition, "1.1 1.2");

which yields the test "test_addition" with points ["1.1", "1.2"].
"""

import re
from pathlib import Path
from typing import List

from ...domain import TestDesc
from ..errors import ScannerError
from ..source_text import strip_comments

_REGISTER_TEST = re.compile(
    r"\btmc_register_test\s*\(\s*[^,()]+\s*,\s*(\w+)\s*,\s*\"((?:\\.|[^\"\\])*)\"\s*\)"
)


class CheckTestScanner:
    """Scans test/*.c for tmc_register_test() calls."""

    def scan(self, test_dir: Path) -> List[TestDesc]:
        """Scan the C sources directly in test_dir, in sorted file order.

        Raises:
            ScannerError: If a test source cannot be read or decoded
        """
        tests: List[TestDesc] = []
        seen = set()

        for source_file in sorted(Path(test_dir).glob("*.c")):
            try:
                source = source_file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise ScannerError(f"Failed to read test source {source_file}: {e}") from e

            for match in _REGISTER_TEST.finditer(strip_comments(source)):
                name = match.group(1)
                if name in seen:
                    continue
                seen.add(name)
                tests.append(TestDesc(name=name, points=tuple(match.group(2).split())))

        return tests
