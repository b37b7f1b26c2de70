import pytest

from quality_gate.analyzer import Analyzer
from quality_gate.result import Violation
from quality_gate.rules.no_any import NoAnyRule
from quality_gate.rules.no_eval import NoEvalRule
from quality_gate.severity import Severity


class StaticRule:
    """Emit one violation per configured line, whatever the source."""

    severity = Severity.ERROR

    def __init__(self, name, lines):
        self.name = name
        self._lines = lines

    def analyze(self, source, file_path):
        return [
            Violation(
                rule_name=self.name,
                message=f"{self.name}#{index}",
                file_path=file_path,
                line=line,
                severity=self.severity,
            )
            for index, line in enumerate(self._lines, start=1)
        ]


class ExplodingRule:
    name = "exploding"
    severity = Severity.ERROR

    def analyze(self, source, file_path):
        raise RuntimeError("boom")


@pytest.mark.parametrize("source", ["", "const x: any = 1;", "\n\n\n", "function ( {"])
def test_empty_rule_set_reports_nothing(source):
    assert Analyzer([]).analyze_file(source, "a.ts") == []


def test_violations_follow_rule_order_then_rule_output_order():
    analyzer = Analyzer([StaticRule("A", [5, 1]), StaticRule("B", [3])])

    violations = analyzer.analyze_file("irrelevant", "a.ts")

    assert [v.message for v in violations] == ["A#1", "A#2", "B#1"]


def test_file_path_is_passed_through_unchanged():
    violations = Analyzer([StaticRule("A", [1])]).analyze_file("", "./weird/../path.ts")

    assert violations[0].file_path == "./weird/../path.ts"


def test_repeated_analysis_is_identical():
    analyzer = Analyzer([NoAnyRule(), NoEvalRule()])
    source = 'let a: any = eval("1");\nfunction f(x: any) { return eval(x); }\n'

    first = analyzer.analyze_file(source, "a.ts")
    second = analyzer.analyze_file(source, "a.ts")

    assert first == second
    assert [v.rule_name for v in first] == ["noAny", "noAny", "noEval", "noEval"]


def test_rule_failures_propagate_by_default():
    analyzer = Analyzer([StaticRule("A", [1]), ExplodingRule()])

    with pytest.raises(RuntimeError, match="boom"):
        analyzer.analyze_file("", "a.ts")


def test_error_handler_isolates_failing_rule():
    failures = []
    analyzer = Analyzer([ExplodingRule(), StaticRule("B", [2])])

    violations = analyzer.analyze_file("", "a.ts", on_error=lambda rule, exc: failures.append((rule.name, str(exc))))

    assert [v.rule_name for v in violations] == ["B"]
    assert failures == [("exploding", "boom")]


def test_rule_set_is_frozen_at_construction():
    rules = [StaticRule("A", [1])]
    analyzer = Analyzer(rules)
    rules.append(StaticRule("B", [1]))

    assert [rule.name for rule in analyzer.rules] == ["A"]
    assert isinstance(analyzer.rules, tuple)
