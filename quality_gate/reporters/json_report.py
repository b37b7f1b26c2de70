"""Structured report written to a JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from quality_gate.result import Violation

from .console import PASSED_MESSAGE

DEFAULT_OUTPUT_FILE = "violations.json"


class JsonReporter:
    """Write the violation array, indented by four spaces, to ``output_file``."""

    def __init__(self, output_file: str = DEFAULT_OUTPUT_FILE) -> None:
        self.output_file = output_file

    def report(self, violations: Sequence[Violation]) -> None:
        payload = json.dumps([violation.to_dict() for violation in violations], indent=4)
        output_path = Path(self.output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload, encoding="utf-8")
        if not violations:
            print(PASSED_MESSAGE)
        print(f"JSON report generated to {self.output_file}")
