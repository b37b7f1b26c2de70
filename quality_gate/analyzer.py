"""Apply an ordered rule set to one source file."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

from .logging import get_logger
from .result import Violation
from .rules import Rule

RuleErrorHandler = Callable[[Rule, Exception], None]


class Analyzer:
    """Hold an immutable, ordered rule set and apply it to single files.

    The analyzer keeps no per-file state, so one instance is shared by every
    worker thread of a run.
    """

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules: Tuple[Rule, ...] = tuple(rules)
        get_logger().info("Rules to run: %s", ", ".join(rule.name for rule in self._rules) or "(none)")

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def analyze_file(self, source: str, file_path: str, on_error: Optional[RuleErrorHandler] = None) -> List[Violation]:
        """Concatenate each rule's violations, in rule-set order.

        A failing rule propagates its exception unless ``on_error`` is given,
        in which case the handler receives the rule and the exception and the
        remaining rules still run. The failing rule contributes nothing.
        """

        violations: List[Violation] = []
        for rule in self._rules:
            if on_error is None:
                violations.extend(rule.analyze(source, file_path))
                continue
            try:
                violations.extend(rule.analyze(source, file_path))
            except Exception as exc:  # pylint: disable=broad-except
                on_error(rule, exc)
        return violations
