"""Toolchain plugins and the shared build/test pipeline."""

from .errors import ResultParseError, ScannerError, StubPreparationError, TestRunnerError
from .java import AntPlugin, MavenPlugin
from .make import MakePlugin
from .pipeline import PipelineState, TestExecution, TestPipeline
from .plugin import AbstractLanguagePlugin, ILanguagePlugin

__all__ = [
    "ILanguagePlugin",
    "AbstractLanguagePlugin",
    "AntPlugin",
    "MavenPlugin",
    "MakePlugin",
    "PipelineState",
    "TestExecution",
    "TestPipeline",
    "ScannerError",
    "TestRunnerError",
    "ResultParseError",
    "StubPreparationError",
]
