"""Tests for manifest_core.assembler."""

from manifest_core import IncludePolicy, TransformOptions, transform
from manifest_core.assembler import assemble_class, assemble_node, class_arguments
from manifest_core.blocks import Block, BlockKind
from manifest_core.document import UnitKind
from manifest_core.nodes import (
    Array,
    Boolean,
    Concat,
    Function,
    HostClass,
    Name,
    NodeDefinition,
    Number,
    Parameter,
    String,
    VarDef,
    Variable,
)


# ---------------------------------------------------------------------------
# Classes
# ---------------------------------------------------------------------------

class TestAssembleClass:
    def test_empty_class(self):
        assert assemble_class(HostClass("empty", code=[])) == [Block(BlockKind.Arguments, {})]

    def test_none_body(self):
        assert assemble_class(HostClass("empty")) == [Block(BlockKind.Arguments, {})]

    def test_arguments_first_and_once(self):
        klass = HostClass(
            "ntp",
            [Parameter("servers")],
            [VarDef("a", String("1")), Function("include", [Name("base")])],
        )
        blocks = assemble_class(klass)
        assert [b.kind for b in blocks] == [
            BlockKind.Arguments, BlockKind.Variables, BlockKind.Includes,
        ]

    def test_body_variables_not_merged_into_arguments(self):
        klass = HostClass("x", [Parameter("a")], [VarDef("a", String("1"))])
        blocks = assemble_class(klass)
        assert blocks[0].payload == {"a": ""}
        assert blocks[1].payload == {"a": "1"}


class TestClassArguments:
    def test_default_text(self):
        klass = HostClass("web", [
            Parameter("port", Number("80")),
            Parameter("name", String("web", quote="'")),
            Parameter("ensure"),
            Parameter("enabled", Boolean(True)),
            Parameter("root", Concat([String("/srv/"), Variable("name")])),
            Parameter("fqdn", Variable("::fqdn")),
            Parameter("pkgs", Array([String("a"), String("b")])),
        ])
        assert class_arguments(klass) == {
            "port": "80",
            "name": '"web"',
            "ensure": "",
            "enabled": "true",
            "root": '"/srv/${name}"',
            "fqdn": "$::fqdn",
            "pkgs": '["a", "b"]',
        }

    def test_order_kept(self):
        klass = HostClass("c", [Parameter("z"), Parameter("a"), Parameter("m")])
        assert list(class_arguments(klass)) == ["z", "a", "m"]


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

class TestAssembleNode:
    def test_no_arguments_block(self):
        node = NodeDefinition("web01", [VarDef("role", String("web"))])
        assert assemble_node(node) == [Block(BlockKind.Variables, {"role": "web"})]

    def test_none_body(self):
        assert assemble_node(NodeDefinition("web01")) == []


# ---------------------------------------------------------------------------
# transform
# ---------------------------------------------------------------------------

class TestTransform:
    def _definitions(self):
        return [
            HostClass("", code=[VarDef("top", String("1"))]),
            HostClass("base", code=[Function("include", [Name("ntp")])]),
            NodeDefinition("web01", [Function("include", [Name("base")])]),
            HostClass("base::web", code=[], parent="base"),
        ]

    def test_discovery_order(self):
        doc = transform(self._definitions())
        assert list(doc) == ["base", "web01", "base::web"]

    def test_top_scope_skipped(self):
        assert "" not in transform(self._definitions())

    def test_unit_metadata(self):
        doc = transform(self._definitions())
        assert doc.units["base"].kind == UnitKind.Class
        assert doc.units["web01"].kind == UnitKind.Node
        assert doc.units["base::web"].parent == "base"
        assert doc.units["base"].parent is None

    def test_only_nodes(self):
        doc = transform(self._definitions(), TransformOptions(classes=False))
        assert list(doc) == ["web01"]

    def test_only_classes(self):
        doc = transform(self._definitions(), TransformOptions(nodes=False))
        assert list(doc) == ["base", "base::web"]

    def test_options_reach_nested_statements(self):
        node = NodeDefinition("db01", [
            Function("include", [Name("a")]),
            Function("include", [Name("b")]),
        ])
        doc = transform([node], TransformOptions(include_policy=IncludePolicy.ALWAYS_NEW))
        assert len(doc["db01"]) == 2

    def test_unknown_definition_skipped(self):
        doc = transform([object(), NodeDefinition("n")])
        assert list(doc) == ["n"]
