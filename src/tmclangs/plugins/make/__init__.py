"""C toolchain plugin (make + Check)."""

from .check_result_parser import CheckResultParser
from .check_scanner import CheckTestScanner
from .make_plugin import MakePlugin

__all__ = ["CheckResultParser", "CheckTestScanner", "MakePlugin"]
