"""Branch reconstructor: case/when and if/else bodies → nested Block Lists."""

from __future__ import annotations

from .blocks import Block, BlockKind, CaseBranch, IfBranch
from .classifier import build_body
from .config import TransformOptions
from .errors import StructuralError
from .nodes import CaseStatement, Default, IfStatement
from .renderer import render, render_condition


def build_case(stmt: CaseStatement, options: TransformOptions) -> Block:
    """Build a Case Block; every option body becomes its own Block List."""
    branch = CaseBranch(subject=render(stmt.subject))
    for option in stmt.options or ():
        label = case_label(option.values)
        branch.options.append((label, build_body(option.statements, options)))
    return Block(BlockKind.Case, branch)


def case_label(values) -> str:
    """Join the rendered match values of one option with ``", "``."""
    if values is None:
        raise StructuralError("case option has no match values")
    parts = []
    for value in values:
        if isinstance(value, Default):
            parts.append(str(value))
        else:
            parts.append(render(value))
    return ", ".join(parts)


def build_if(stmt: IfStatement, options: TransformOptions) -> Block:
    """Build an If Block.

    The else list is only attached when the else clause has statements;
    ``elsif`` arrives as an else holding a single nested IfStatement and
    therefore ends up as an If Block inside the else list.
    """
    branch = IfBranch(
        condition=render_condition(stmt.condition),
        then=build_body(stmt.statements, options),
    )
    if stmt.else_statements:
        branch.else_ = build_body(stmt.else_statements, options)
    return Block(BlockKind.If, branch)
