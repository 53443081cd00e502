"""Exceptions raised by toolchain plugins."""


class ScannerError(Exception):
    """Raised when a built project's tests cannot be statically described."""

    pass


class TestRunnerError(Exception):
    """Raised when tests could not be executed or their results not read.

    A normal test failure is not an error; it is a successful run with a
    FAILED status.
    """

    __test__ = False

    pass


class ResultParseError(Exception):
    """Raised when a result artifact is missing, truncated or malformed."""

    pass


class StubPreparationError(Exception):
    """Raised when stub or solution markers in a source file are unbalanced."""

    pass
