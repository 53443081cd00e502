"""Unit tests for classpath assembly."""

import os
from pathlib import Path

from tmclangs.plugins.java import ClassPath


class TestClassPath:
    """Test cases for ClassPath."""

    def test_entries_are_ordered_and_unique(self):
        classpath = ClassPath(Path("a"), Path("b"))
        classpath.add(Path("a"))
        classpath.extend([Path("c"), Path("b")])

        assert classpath.paths == [Path("a"), Path("b"), Path("c")]
        assert len(classpath) == 3

    def test_str_joins_with_path_separator(self):
        classpath = ClassPath(Path("a"), Path("b"))
        assert str(classpath) == f"a{os.pathsep}b"

    def test_add_dir_and_contents(self, tmp_path):
        lib = tmp_path / "lib"
        (lib / "nested").mkdir(parents=True)
        (lib / "z.jar").write_bytes(b"")
        (lib / "nested" / "a.jar").write_bytes(b"")
        (lib / "notes.txt").write_text("")

        classpath = ClassPath()
        classpath.add_dir_and_contents(lib)

        assert list(classpath) == [lib, lib / "nested" / "a.jar", lib / "z.jar"]

    def test_add_missing_dir_adds_only_the_dir(self, tmp_path):
        classpath = ClassPath()
        classpath.add_dir_and_contents(tmp_path / "lib")
        assert classpath.paths == [tmp_path / "lib"]
