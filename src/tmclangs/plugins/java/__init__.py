"""Java toolchain plugins (Apache Ant and Apache Maven)."""

from .ant import AntPlugin
from .classpath import ClassPath
from .java_plugin import AbstractJavaPlugin
from .maven import MavenPlugin
from .result_parser import JavaResultParser
from .runner_args import TestRunnerArgumentBuilder
from .test_scanner import JavaTestScanner

__all__ = [
    "AbstractJavaPlugin",
    "AntPlugin",
    "MavenPlugin",
    "ClassPath",
    "JavaResultParser",
    "JavaTestScanner",
    "TestRunnerArgumentBuilder",
]
