"""Code-style checking collaborators."""

from .checkstyle import CheckstyleRunner, StyleCheckError, parse_checkstyle_report

__all__ = ["CheckstyleRunner", "StyleCheckError", "parse_checkstyle_report"]
