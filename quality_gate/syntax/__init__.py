"""Contract for the external parser that builds the syntax tree rules inspect."""

from __future__ import annotations

from typing import Iterator, Protocol, Sequence


class SyntaxNode(Protocol):
    """One node of a parsed file. The engine reads nodes, it never mutates them."""

    @property
    def kind(self) -> str: ...

    @property
    def start_offset(self) -> int:
        """Character offset of the node's first character in the source."""

    @property
    def children(self) -> Sequence["SyntaxNode"]:
        """Child nodes in document order."""

    @property
    def text(self) -> str: ...

    @property
    def has_error(self) -> bool:
        """True when the parser had to recover from invalid syntax below this node."""


class AstProvider(Protocol):
    def parse(self, source: str, file_path: str) -> SyntaxNode: ...


def walk_preorder(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield every node once, depth-first, parents before children."""

    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


__all__ = ["AstProvider", "SyntaxNode", "walk_preorder"]
