"""TypeScript syntax trees built with tree-sitter."""

from __future__ import annotations

from typing import Tuple

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

TYPESCRIPT = Language(tree_sitter_typescript.language_typescript())
TSX = Language(tree_sitter_typescript.language_tsx())


class _Offsets:
    """Translate tree-sitter byte offsets into character offsets."""

    __slots__ = ("_data", "_ascii")

    def __init__(self, data: bytes, ascii_only: bool) -> None:
        self._data = data
        self._ascii = ascii_only

    def to_char(self, byte_offset: int) -> int:
        if self._ascii:
            return byte_offset
        return len(self._data[:byte_offset].decode("utf-8", errors="replace"))


class TreeSitterNode:
    """Adapt a tree-sitter node to the :class:`~quality_gate.syntax.SyntaxNode` contract."""

    __slots__ = ("_node", "_offsets")

    def __init__(self, node: Node, offsets: _Offsets) -> None:
        self._node = node
        self._offsets = offsets

    @property
    def kind(self) -> str:
        return self._node.type

    @property
    def start_offset(self) -> int:
        return self._offsets.to_char(self._node.start_byte)

    @property
    def children(self) -> Tuple["TreeSitterNode", ...]:
        return tuple(TreeSitterNode(child, self._offsets) for child in self._node.children)

    @property
    def text(self) -> str:
        raw = self._node.text
        return raw.decode("utf-8", errors="replace") if raw is not None else ""

    @property
    def has_error(self) -> bool:
        return self._node.has_error

    def __repr__(self) -> str:
        return f"TreeSitterNode(kind={self.kind!r}, start_offset={self.start_offset})"


class TypeScriptProvider:
    """Parse ``.ts`` sources with the TypeScript grammar and ``.tsx`` with TSX.

    A fresh parser is created per call; parsers are not shared between threads.
    """

    def parse(self, source: str, file_path: str) -> TreeSitterNode:
        language = TSX if str(file_path).lower().endswith(".tsx") else TYPESCRIPT
        data = source.encode("utf-8")
        tree = Parser(language).parse(data)
        return TreeSitterNode(tree.root_node, _Offsets(data, source.isascii()))
