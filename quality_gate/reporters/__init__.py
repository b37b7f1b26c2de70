"""Reporter contract and the registry of built-in sinks."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Protocol, Sequence

from quality_gate.errors import ReporterNotFound
from quality_gate.result import Violation

from .console import PASSED_MESSAGE, ConsoleReporter
from .json_report import DEFAULT_OUTPUT_FILE, JsonReporter


class Reporter(Protocol):
    """Sink for the aggregate violation list of a run."""

    def report(self, violations: Sequence[Violation]) -> None: ...


ReporterFactory = Callable[[str], Reporter]

AVAILABLE_REPORTERS: Dict[str, ReporterFactory] = {
    "console": lambda output_file: ConsoleReporter(),
    "json": lambda output_file: JsonReporter(output_file),
}


def build_reporter(name: str, output_file: str = DEFAULT_OUTPUT_FILE) -> Reporter:
    factory = AVAILABLE_REPORTERS.get(name)
    if factory is None:
        raise ReporterNotFound(name)
    return factory(output_file)


def build_reporters(names: Iterable[str], output_file: str = DEFAULT_OUTPUT_FILE) -> List[Reporter]:
    return [build_reporter(name, output_file) for name in names]


__all__ = [
    "AVAILABLE_REPORTERS",
    "ConsoleReporter",
    "DEFAULT_OUTPUT_FILE",
    "JsonReporter",
    "PASSED_MESSAGE",
    "Reporter",
    "build_reporter",
    "build_reporters",
]
