"""Tests for manifest_core.document and block plain conversion."""

from manifest_core.blocks import Block, BlockKind, CaseBranch, IfBranch, ResourceGroup
from manifest_core.document import Document, Unit, UnitKind


def _doc():
    doc = Document()
    doc.add(Unit("base", UnitKind.Class, [Block(BlockKind.Arguments, {})]))
    doc.add(Unit("web01", UnitKind.Node, [Block(BlockKind.Includes, ["base"])], parent="default"))
    return doc


class TestDocumentAccess:
    def test_getitem_returns_blocks(self):
        assert _doc()["web01"] == [Block(BlockKind.Includes, ["base"])]

    def test_contains_len_iter(self):
        doc = _doc()
        assert "base" in doc
        assert len(doc) == 2
        assert list(doc) == ["base", "web01"]

    def test_items(self):
        assert [name for name, _ in _doc().items()] == ["base", "web01"]

    def test_classes_and_nodes(self):
        doc = _doc()
        assert list(doc.classes) == ["base"]
        assert list(doc.nodes) == ["web01"]

    def test_add_replaces_same_name(self):
        doc = _doc()
        doc.add(Unit("base", UnitKind.Class, []))
        assert doc["base"] == []
        assert list(doc) == ["base", "web01"]


class TestToDict:
    def test_flat(self):
        assert _doc().to_dict() == {
            "base": [{"arguments": {}}],
            "web01": [{"includes": ["base"]}],
        }

    def test_grouped(self):
        assert _doc().to_dict(grouped=True) == {
            "classes": {"base": {"parent": None, "blocks": [{"arguments": {}}]}},
            "nodes": {"web01": {"parent": "default", "blocks": [{"includes": ["base"]}]}},
        }

    def test_resources(self):
        block = Block(BlockKind.Resources, [
            ResourceGroup("file", [("/a", {"mode": "644"}), ("/b", {})]),
            ResourceGroup("service", [("ntp", {"ensure": "running"})]),
        ])
        assert block.to_dict() == {"resources": [
            {"file": {"/a": {"mode": "644"}, "/b": {}}},
            {"service": {"ntp": {"ensure": "running"}}},
        ]}

    def test_repeated_title_keeps_last(self):
        group = ResourceGroup("file", [("/a", {"mode": "644"}), ("/a", {"mode": "600"})])
        assert group.titles == ["/a", "/a"]
        assert group.to_dict() == {"file": {"/a": {"mode": "600"}}}

    def test_plain_form_does_not_share_lists(self):
        block = Block(BlockKind.Variables, {"pkgs": ["vim"]})
        out = block.to_dict()
        out["variables"]["pkgs"].append("git")
        assert block.payload == {"pkgs": ["vim"]}

    def test_overrides(self):
        block = Block(BlockKind.ResourceOverrides, {'File["/a"]': {"mode": "600"}})
        assert block.to_dict() == {"resource_overrides": {'File["/a"]': {"mode": "600"}}}

    def test_case(self):
        block = Block(BlockKind.Case, CaseBranch("$x", [
            ("a, b", [Block(BlockKind.Variables, {"y": "1"})]),
            ("default", []),
        ]))
        assert block.to_dict() == {"case": {"$x": {
            "a, b": [{"variables": {"y": "1"}}],
            "default": [],
        }}}

    def test_if_with_else(self):
        block = Block(BlockKind.If, IfBranch(
            '$x == "1"',
            [Block(BlockKind.Includes, ["one"])],
            [Block(BlockKind.Includes, ["two"])],
        ))
        assert block.to_dict() == {
            "if": {'$x == "1"': [{"includes": ["one"]}]},
            "else": [{"includes": ["two"]}],
        }

    def test_if_without_else(self):
        block = Block(BlockKind.If, IfBranch("$x", []))
        assert block.to_dict() == {"if": {"$x": []}}
