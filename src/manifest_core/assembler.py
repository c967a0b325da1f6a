"""Assembler: class / node definitions → Document."""

from __future__ import annotations

import logging

from .blocks import Block, BlockKind, BlockList
from .classifier import classify
from .config import DEFAULT_OPTIONS, TransformOptions
from .document import Document, Unit, UnitKind
from .nodes import Concat, HostClass, NodeDefinition, String
from .renderer import render

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def transform(definitions, options: TransformOptions | None = None) -> Document:
    """Assemble a Document from parsed class and node definitions."""
    options = options or DEFAULT_OPTIONS
    doc = Document()

    for definition in definitions:
        if isinstance(definition, HostClass):
            if not options.classes:
                continue
            # The anonymous top-scope class has no name of its own.
            if definition.name == "":
                logger.debug("skipping top-scope class")
                continue
            blocks = assemble_class(definition, options)
            doc.add(Unit(definition.name, UnitKind.Class, blocks, definition.parent))
        elif isinstance(definition, NodeDefinition):
            if not options.nodes:
                continue
            blocks = assemble_node(definition, options)
            doc.add(Unit(definition.name, UnitKind.Node, blocks, definition.parent))
        else:
            logger.debug("skipping definition %s", type(definition).__name__)

    return doc


# ---------------------------------------------------------------------------
# Per-unit assembly
# ---------------------------------------------------------------------------

def assemble_class(klass: HostClass, options: TransformOptions | None = None) -> BlockList:
    """Arguments Block first (always), then the class body."""
    blocks: BlockList = [Block(BlockKind.Arguments, class_arguments(klass))]
    _traverse(klass.code, blocks, options)
    logger.debug("class %s: %d block(s)", klass.name, len(blocks))
    return blocks


def assemble_node(node: NodeDefinition, options: TransformOptions | None = None) -> BlockList:
    blocks: BlockList = []
    _traverse(node.code, blocks, options)
    logger.debug("node %s: %d block(s)", node.name, len(blocks))
    return blocks


def class_arguments(klass: HostClass) -> dict[str, str]:
    """Map parameter names to their default-expression text.

    String defaults keep one layer of double quotes so that ``'80'``
    stays distinguishable from the bare number ``80``.  Parameters
    without a default map to ``""``.
    """
    args: dict[str, str] = {}
    for param in klass.arguments or ():
        default = param.default
        if default is None:
            args[param.name] = ""
        elif isinstance(default, (String, Concat)):
            args[param.name] = f'"{render(default)}"'
        else:
            args[param.name] = str(default)
    return args


def _traverse(code, blocks: BlockList, options: TransformOptions | None) -> None:
    for stmt in code or ():
        classify(stmt, blocks, options)
