"""Shared traversal for rules that flag individual syntax nodes."""

from __future__ import annotations

from typing import List, Optional

from quality_gate.errors import ParseError
from quality_gate.position import PositionMapper
from quality_gate.result import Violation
from quality_gate.severity import Severity
from quality_gate.syntax import AstProvider, SyntaxNode, walk_preorder


class NodeRule:
    """Walk the syntax tree and emit one violation per matching node.

    Subclasses set ``name``, ``severity`` and ``message`` and implement
    :meth:`matches`.
    """

    name = ""
    severity = Severity.ERROR
    message = ""

    def __init__(self, provider: Optional[AstProvider] = None) -> None:
        if provider is None:
            from quality_gate.syntax.typescript import TypeScriptProvider

            provider = TypeScriptProvider()
        self._provider = provider

    def matches(self, node: SyntaxNode) -> bool:
        raise NotImplementedError

    def analyze(self, source: str, file_path: str) -> List[Violation]:
        root = self._provider.parse(source, file_path)
        if root.has_error:
            raise ParseError(self.name, file_path)

        mapper = PositionMapper(source)
        violations: List[Violation] = []
        for node in walk_preorder(root):
            if not self.matches(node):
                continue
            line, column = mapper.offset_to_line_column(node.start_offset)
            violations.append(
                Violation(
                    rule_name=self.name,
                    message=self.message,
                    file_path=file_path,
                    line=line,
                    column=column,
                    severity=self.severity,
                )
            )
        return violations

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
