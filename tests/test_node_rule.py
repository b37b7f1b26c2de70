from dataclasses import dataclass, field
from typing import List

import pytest

from quality_gate.errors import ParseError
from quality_gate.rules.base import NodeRule
from quality_gate.severity import Severity
from quality_gate.syntax import walk_preorder


@dataclass
class FakeNode:
    kind: str
    start_offset: int
    children: List["FakeNode"] = field(default_factory=list)
    text: str = ""
    has_error: bool = False


class FakeProvider:
    def __init__(self, root):
        self.root = root
        self.calls = []

    def parse(self, source, file_path):
        self.calls.append(file_path)
        return self.root


class MarkerRule(NodeRule):
    name = "noMarker"
    severity = Severity.WARNING
    message = "marker found"

    def matches(self, node):
        return node.kind == "marker"


def build_tree():
    # program
    #   stmt (0)  -> marker (4)
    #   stmt (10) -> inner (10) -> marker (14)
    #   marker (20)
    return FakeNode(
        "program",
        0,
        [
            FakeNode("stmt", 0, [FakeNode("marker", 4)]),
            FakeNode("stmt", 10, [FakeNode("inner", 10, [FakeNode("marker", 14)])]),
            FakeNode("marker", 20),
        ],
    )


def test_walk_preorder_visits_each_node_once_in_document_order():
    kinds_offsets = [(node.kind, node.start_offset) for node in walk_preorder(build_tree())]

    assert kinds_offsets == [
        ("program", 0),
        ("stmt", 0),
        ("marker", 4),
        ("stmt", 10),
        ("inner", 10),
        ("marker", 14),
        ("marker", 20),
    ]


def test_walk_preorder_handles_very_deep_trees():
    root = FakeNode("leaf", 0)
    for _ in range(5000):
        root = FakeNode("wrap", 0, [root])

    assert sum(1 for _ in walk_preorder(root)) == 5001


def test_node_rule_maps_offsets_and_keeps_document_order():
    source = "abc\nmarker\r\nxyz  marker\nmarker"
    provider = FakeProvider(build_tree())

    violations = MarkerRule(provider).analyze(source, "virtual/file.src")

    assert [(v.line, v.column) for v in violations] == [(2, 1), (3, 3), (3, 9)]
    assert {v.rule_name for v in violations} == {"noMarker"}
    assert {v.severity for v in violations} == {Severity.WARNING}
    assert {v.file_path for v in violations} == {"virtual/file.src"}
    assert provider.calls == ["virtual/file.src"]


def test_node_rule_returns_empty_list_when_nothing_matches():
    provider = FakeProvider(FakeNode("program", 0, [FakeNode("stmt", 0)]))

    assert MarkerRule(provider).analyze("stmt", "a.src") == []


def test_node_rule_raises_parse_error_for_broken_tree():
    provider = FakeProvider(FakeNode("program", 0, [FakeNode("marker", 0)], has_error=True))

    with pytest.raises(ParseError) as excinfo:
        MarkerRule(provider).analyze("marker ???", "broken.src")

    assert excinfo.value.rule_name == "noMarker"
    assert excinfo.value.path == "broken.src"
