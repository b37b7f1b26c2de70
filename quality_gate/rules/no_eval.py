"""Forbid direct calls to ``eval``."""

from __future__ import annotations

from quality_gate.severity import Severity
from quality_gate.syntax import SyntaxNode

from .base import NodeRule


class NoEvalRule(NodeRule):
    """Flag ``eval(...)`` calls. Member calls such as ``obj.eval()`` are left alone."""

    name = "noEval"
    severity = Severity.ERROR
    message = "Usage of eval() is forbidden"

    def matches(self, node: SyntaxNode) -> bool:
        if node.kind != "call_expression":
            return False
        children = node.children
        if not children:
            return False
        callee = children[0]
        return callee.kind == "identifier" and callee.text == "eval"
