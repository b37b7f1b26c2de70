"""Human-readable report on the terminal."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from quality_gate.result import Violation, format_summary_table

PASSED_MESSAGE = "Quality gate passed!"
RULE = "-" * 72


class ConsoleReporter:
    """Print a pass message, or a failure summary plus one line per violation.

    Violation lines (``<file>:<line>:<column> <message>``) go to the error
    stream so they can be separated from the summary in CI logs.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self._out = out
        self._err = err

    def report(self, violations: Sequence[Violation]) -> None:
        out = self._out or sys.stdout
        err = self._err or sys.stderr

        if not violations:
            print(PASSED_MESSAGE, file=out)
            print(RULE, file=out)
            return

        print(RULE, file=out)
        print(f"QUALITY GATE FAILED! Found {len(violations)} violation(s)", file=out)
        print(format_summary_table(violations), file=out)
        print("", file=out)
        print("Violations:", file=out)
        for violation in violations:
            print(f"{violation.location} {violation.message}", file=err)
