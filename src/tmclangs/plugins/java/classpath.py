"""Java runtime classpath assembly."""

import os
from pathlib import Path
from typing import Iterator, List


class ClassPath:
    """Ordered, de-duplicated list of classpath entries.

    Example usage:
        classpath = ClassPath(project_dir)
        classpath.add_dir_and_contents(project_dir / "lib")
        classpath.add(project_dir / "build" / "classes")
        argv = ["java", "-cp", str(classpath), ...]
    """

    def __init__(self, *paths: Path):
        self._paths: List[Path] = []
        for path in paths:
            self.add(path)

    def add(self, path: Path) -> None:
        path = Path(path)
        if path not in self._paths:
            self._paths.append(path)

    def extend(self, paths) -> None:
        for path in paths:
            self.add(path)

    def add_dir_and_contents(self, directory: Path) -> None:
        """Add a directory and every jar below it (sorted)."""
        directory = Path(directory)
        self.add(directory)
        if directory.is_dir():
            for jar in sorted(directory.rglob("*.jar")):
                self.add(jar)

    @property
    def paths(self) -> List[Path]:
        return list(self._paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __str__(self) -> str:
        return os.pathsep.join(str(path) for path in self._paths)
