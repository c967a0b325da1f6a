"""Statement classifier & block builder.

Each statement is classified by its ``StatementKind`` and its
contribution is merged into the tail of the target Block List when the
tail has the same kind, or appended as a new Block otherwise::

    $a = 1            ─┐ variables {a, b}
    $b = 2            ─┘
    file { '/x': }    ─┐ resources [file: {/x, /y}, service: {s}]
    file { '/y': }     │
    service { 's': }  ─┘
    $c = 3            ── variables {c}
"""

from __future__ import annotations

import logging

from .blocks import (
    Block,
    BlockKind,
    BlockList,
    Params,
    copy_params,
    open_block,
    resource_group,
)
from .config import DEFAULT_OPTIONS, IncludePolicy, TransformOptions
from .errors import StructuralError
from .nodes import (
    Array,
    Function,
    Resource,
    ResourceDefaults,
    ResourceOverride,
    ResourceParam,
    StatementKind,
    VarDef,
)
from .renderer import render, render_list, render_value

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def build_body(statements, options: TransformOptions | None = None) -> BlockList:
    """Traverse *statements* into a fresh Block List."""
    blocks: BlockList = []
    for stmt in statements or ():
        classify(stmt, blocks, options)
    return blocks


def classify(statement, blocks: BlockList, options: TransformOptions | None = None) -> None:
    """Append or merge *statement*'s contribution into *blocks*."""
    options = options or DEFAULT_OPTIONS
    kind = statement_kind(statement)

    if kind is None:
        logger.debug("skipping unsupported statement %s", type(statement).__name__)
        return

    if kind == StatementKind.VariableAssignment:
        _add_variable(statement, blocks)
    elif kind == StatementKind.ResourceDeclaration:
        _add_resource(statement, blocks, options)
    elif kind == StatementKind.ResourceOverride:
        _add_override(statement, blocks)
    elif kind == StatementKind.ResourceDefaults:
        _add_defaults(statement, blocks)
    elif kind == StatementKind.CaseStatement:
        from .branches import build_case
        blocks.append(build_case(statement, options))
    elif kind == StatementKind.IfStatement:
        from .branches import build_if
        blocks.append(build_if(statement, options))
    elif kind == StatementKind.DirectiveCall:
        _add_directive(statement, blocks, options)


def statement_kind(statement) -> StatementKind | None:
    kind = getattr(statement, "kind", None)
    return kind if isinstance(kind, StatementKind) else None


# ---------------------------------------------------------------------------
# Per-kind contributions
# ---------------------------------------------------------------------------

def _add_variable(stmt: VarDef, blocks: BlockList) -> None:
    block = open_block(blocks, BlockKind.Variables, dict)
    block.payload[str(stmt.name)] = render_value(stmt.value)


def _add_resource(stmt: Resource, blocks: BlockList, options: TransformOptions) -> None:
    if stmt.instances is None:
        raise StructuralError(f"resource {stmt.type_name!r} has no instance list", stmt)

    type_name = str(stmt.type_name)
    if options.class_resources_as_includes and type_name.lower() == "class":
        titles = [t for inst in stmt.instances for t in resource_titles(inst.title)]
        _append_includes(titles, blocks, options)
        return

    block = open_block(blocks, BlockKind.Resources, list)
    group = resource_group(block.payload, type_name)
    for inst in stmt.instances:
        params = render_params(inst.parameters, stmt)
        # Titles sharing one body each get their own copy of the mapping.
        for title in resource_titles(inst.title):
            group.instances.append((title, copy_params(params)))


def _add_override(stmt: ResourceOverride, blocks: BlockList) -> None:
    block = open_block(blocks, BlockKind.ResourceOverrides, dict)
    block.payload[str(stmt.target)] = render_params(stmt.parameters, stmt)


def _add_defaults(stmt: ResourceDefaults, blocks: BlockList) -> None:
    block = open_block(blocks, BlockKind.ResourceDefaults, dict)
    block.payload[str(stmt.type_name)] = render_params(stmt.parameters, stmt)


def _add_directive(stmt: Function, blocks: BlockList, options: TransformOptions) -> None:
    if stmt.name != "include":
        logger.debug("ignoring directive %s()", stmt.name)
        return

    names: list[str] = []
    for arg in stmt.arguments or ():
        if isinstance(arg, Array):
            names.extend(render_list(arg))
        else:
            names.append(render(arg))
    _append_includes(names, blocks, options)


def _append_includes(names: list[str], blocks: BlockList, options: TransformOptions) -> None:
    if not names:
        return
    if options.include_policy == IncludePolicy.ALWAYS_NEW:
        blocks.append(Block(BlockKind.Includes, list(names)))
        return
    block = open_block(blocks, BlockKind.Includes, list)
    block.payload.extend(names)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def render_params(parameters: list[ResourceParam] | None, owner=None) -> Params:
    """Render a ``name => value`` list into an ordered mapping."""
    if parameters is None:
        raise StructuralError("statement has no parameter list", owner)
    return {str(p.name): render_value(p.value) for p in parameters}


def resource_titles(title) -> list[str]:
    """Resolve an instance title (single node or array) to title strings."""
    if title is None:
        raise StructuralError("resource instance has no title")
    if isinstance(title, Array):
        return render_list(title)
    return [render(title)]
