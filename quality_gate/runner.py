"""Run a rule set over every discovered file and merge the results."""

from __future__ import annotations

import os
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .analyzer import Analyzer
from .errors import ConfigurationError, DiscoveryError, ReadError, RuleExecutionError
from .logging import get_logger
from .result import Diagnostic, RunResult, Violation
from .rules import Rule
from .utils import read_source_file
from .walker import FileWalker


@dataclass(frozen=True)
class FileOutcome:
    """Violations and diagnostics produced by one file's unit of work."""

    path: str
    violations: List[Violation]
    diagnostics: List[Diagnostic]


class Runner:
    """Orchestrate discovery and analysis on a bounded thread pool.

    Each discovered file is one independent unit of work. Units may finish
    in any order, but the merged violation list is always ordered by
    discovery: one contiguous block per file.
    """

    def __init__(
        self,
        walker: Optional[FileWalker] = None,
        max_workers: Optional[int] = None,
        encoding: str = "utf-8",
    ) -> None:
        if max_workers is not None and max_workers < 1:
            raise ConfigurationError("max_workers must be a positive integer")
        self.walker = walker or FileWalker()
        self.max_workers = max_workers
        self.encoding = encoding

    def run(self, root: Union[str, "os.PathLike[str]"], rules: Sequence[Rule]) -> RunResult:
        log = get_logger()
        log.info("Running quality gates on: %s", os.fspath(root))

        result = RunResult()
        files = self.walker.walk(root, on_error=lambda exc: self._record(result, exc))
        result.files = list(files)
        analyzer = Analyzer(rules)

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="quality-gate") as executor:
            futures: List[Future] = [executor.submit(self._analyze_path, analyzer, path) for path in files]
            outcomes = [future.result() for future in futures]

        for outcome in outcomes:
            result.violations.extend(outcome.violations)
            result.diagnostics.extend(outcome.diagnostics)
            for diagnostic in outcome.diagnostics:
                log.warning("%s", diagnostic.message)

        log.info(
            "Checked %d file(s): %d violation(s), %d diagnostic(s)",
            len(files),
            len(result.violations),
            len(result.diagnostics),
        )
        return result

    def _record(self, result: RunResult, error: DiscoveryError) -> None:
        get_logger().warning("Skipping subtree: %s", error)
        result.diagnostics.append(Diagnostic.from_error(error))

    def _analyze_path(self, analyzer: Analyzer, path: str) -> FileOutcome:
        get_logger().debug("Checking file: %s", path)
        try:
            source = read_source_file(path, encoding=self.encoding)
        except ReadError as exc:
            return FileOutcome(path, [], [Diagnostic.from_error(exc)])

        diagnostics: List[Diagnostic] = []

        def isolate(rule: Rule, exc: Exception) -> None:
            if not isinstance(exc, RuleExecutionError):
                get_logger().debug("Rule %s raised on %s", rule.name, path, exc_info=exc)
                exc = RuleExecutionError(rule.name, path, f"{type(exc).__name__}: {exc}")
            diagnostics.append(Diagnostic.from_error(exc))

        violations = analyzer.analyze_file(source, path, on_error=isolate)
        return FileOutcome(path, violations, diagnostics)
