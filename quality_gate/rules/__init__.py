"""Rule contract for the engine."""

from __future__ import annotations

from typing import List, Protocol

from quality_gate.result import Violation
from quality_gate.severity import Severity


class Rule(Protocol):
    """Protocol implemented by all rules.

    ``analyze`` must not perform I/O or keep state between calls: the runner
    invokes one instance concurrently on different files.
    """

    name: str
    severity: Severity

    def analyze(self, source: str, file_path: str) -> List[Violation]:
        """Return the violations found in ``source``, in document order."""
