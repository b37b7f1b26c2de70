"""Forbid the ``any`` type in TypeScript sources."""

from __future__ import annotations

from quality_gate.severity import Severity
from quality_gate.syntax import SyntaxNode

from .base import NodeRule


class NoAnyRule(NodeRule):
    """Flag every ``any`` type annotation, assertion or type argument."""

    name = "noAny"
    severity = Severity.ERROR
    message = 'Usage of "any" is forbidden'

    def matches(self, node: SyntaxNode) -> bool:
        return node.kind == "predefined_type" and node.text == "any"
