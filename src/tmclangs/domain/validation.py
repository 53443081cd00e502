"""Code-style validation results."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List


@dataclass(frozen=True)
class ValidationError:
    """A single style rule violation.

    Attributes:
        line: 1-based line number (0 when the tool reports none)
        column: 1-based column number (0 when the tool reports none)
        message: Human readable description
        source_name: Identifier of the rule that produced the violation
    """

    line: int
    column: int
    message: str
    source_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line": self.line,
            "column": self.column,
            "message": self.message,
            "sourceName": self.source_name,
        }


@dataclass
class ValidationResult:
    """Style violations grouped by source file.

    Only files with at least one violation are present, so a clean project
    has an empty mapping. "Not applicable" is expressed by the absence of a
    ValidationResult altogether.
    """

    validation_errors: Dict[Path, List[ValidationError]] = field(default_factory=dict)
    strategy: str = "FAIL"

    def add_error(self, source_file: Path, error: ValidationError) -> None:
        self.validation_errors.setdefault(Path(source_file), []).append(error)

    @property
    def error_count(self) -> int:
        return sum(len(errors) for errors in self.validation_errors.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strategy": self.strategy,
            "validationErrors": {
                str(path): [error.to_dict() for error in errors]
                for path, errors in self.validation_errors.items()
            },
        }
