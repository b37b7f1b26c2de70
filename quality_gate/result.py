"""Core result data structures for the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import QualityGateError
from .severity import Severity

SEVERITY_ORDER: Sequence[Severity] = (
    Severity.ERROR,
    Severity.WARNING,
)


@dataclass(frozen=True)
class Violation:
    """A single rule breach at a specific source location."""

    rule_name: str
    message: str
    file_path: str
    line: int
    severity: Severity
    column: Optional[int] = None

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.column is not None and self.column < 1:
            raise ValueError(f"column must be >= 1, got {self.column}")

    @property
    def location(self) -> str:
        if self.column is None:
            return f"{self.file_path}:{self.line}"
        return f"{self.file_path}:{self.line}:{self.column}"

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {
            "ruleName": self.rule_name,
            "message": self.message,
            "filePath": self.file_path,
            "line": self.line,
        }
        if self.column is not None:
            data["column"] = self.column
        data["severity"] = self.severity.value
        return data


class DiagnosticKind(str, Enum):
    DISCOVERY = "discovery"
    READ = "read"
    RULE = "rule"
    PARSE = "parse"


@dataclass(frozen=True)
class Diagnostic:
    """Something the engine could not analyse. Never counted as a violation."""

    kind: DiagnosticKind
    path: str
    message: str
    rule_name: Optional[str] = None

    @classmethod
    def from_error(cls, error: QualityGateError) -> "Diagnostic":
        return cls(
            kind=DiagnosticKind(getattr(error, "kind")),
            path=str(getattr(error, "path")),
            message=str(error),
            rule_name=getattr(error, "rule_name", None),
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "kind": self.kind.value,
            "path": self.path,
            "message": self.message,
            "ruleName": self.rule_name,
        }


@dataclass
class Summary:
    """Aggregate violation counts by severity."""

    error: int = 0
    warning: int = 0

    def increment(self, severity: Severity) -> None:
        attr = severity.value
        setattr(self, attr, getattr(self, attr) + 1)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value)) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value) for severity in SEVERITY_ORDER)

    @classmethod
    def of(cls, violations: Sequence[Violation]) -> "Summary":
        summary = cls()
        for violation in violations:
            summary.increment(violation.severity)
        return summary


@dataclass
class RunResult:
    """Bundle the ordered violations of one run with its diagnostics."""

    violations: List[Violation] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    files: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations

    @property
    def summary(self) -> Summary:
        return Summary.of(self.violations)

    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> Dict[str, object]:
        return {
            "violations": [violation.to_dict() for violation in self.violations],
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
            "files": list(self.files),
            "passed": self.passed,
        }


def format_summary_table(violations: Sequence[Violation]) -> str:
    """Create a human-readable severity table for console output."""

    summary = Summary.of(violations)
    lines: List[str] = []
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in summary.as_rows():
        lines.append(f"{severity:<10} | {count:>5}")
    lines.append("-" * len(header))
    lines.append(f"{'total':<10} | {summary.total:>5}")
    return "\n".join(lines)
