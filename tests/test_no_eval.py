import pytest

from quality_gate.errors import ParseError
from quality_gate.rules.no_eval import NoEvalRule


def run_rule(source, file_path="src/example.ts"):
    return NoEvalRule().analyze(source, file_path)


def test_direct_eval_call_is_reported():
    violations = run_rule('eval("1 + 1");')

    assert len(violations) == 1
    violation = violations[0]
    assert (violation.line, violation.column) == (1, 1)
    assert violation.rule_name == "noEval"
    assert violation.message == "Usage of eval() is forbidden"


def test_eval_position_inside_expression():
    violations = run_rule("const result = eval(code);")

    assert [(v.line, v.column) for v in violations] == [(1, 16)]


def test_nested_eval_is_reported_once():
    violations = run_rule('foo(eval("a"));')

    assert [(v.line, v.column) for v in violations] == [(1, 5)]


def test_eval_calls_reported_in_document_order():
    source = 'eval("a");\nconst x = 1;\n  eval("b");\n'

    assert [(v.line, v.column) for v in run_rule(source)] == [(1, 1), (3, 3)]


@pytest.mark.parametrize(
    "source",
    [
        'obj.eval("x");',
        'window.eval("y");',
        'evaluate("z");',
        "const eval2 = 1;",
        'const text = "eval(1)";',
    ],
)
def test_non_forbidden_calls_are_ignored(source):
    assert run_rule(source) == []


def test_unparseable_source_raises_parse_error():
    with pytest.raises(ParseError):
        run_rule("function ( {", "src/broken.ts")
