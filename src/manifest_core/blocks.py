"""Block model: the building pieces of a unit's Block List."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .renderer import Value


# ---------------------------------------------------------------------------
# BlockKind
# ---------------------------------------------------------------------------

class BlockKind(Enum):
    Arguments = "arguments"
    Variables = "variables"
    Resources = "resources"
    ResourceOverrides = "resource_overrides"
    ResourceDefaults = "resource_defaults"
    Case = "case"
    If = "if"
    Includes = "includes"

    @property
    def key(self) -> str:
        return self.value


# Kinds that open a fresh Block for every statement.
UNMERGEABLE = frozenset({BlockKind.Case, BlockKind.If})


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------

Params = dict[str, Value]


def copy_params(params: Params) -> Params:
    """Copy a parameter mapping, list values included."""
    return {k: list(v) if isinstance(v, list) else v for k, v in params.items()}


@dataclass(slots=True)
class ResourceGroup:
    """Consecutive instances of one resource type."""
    type_name: str
    instances: list[tuple[str, Params]] = field(default_factory=list)

    @property
    def titles(self) -> list[str]:
        return [title for title, _ in self.instances]

    def to_dict(self) -> dict[str, Any]:
        """``{type: {title: params}}``.

        A title declared twice in one group keeps the parameters of its
        last declaration; the manifest language rejects such duplicates.
        """
        return {self.type_name: {title: copy_params(params) for title, params in self.instances}}


@dataclass(slots=True)
class CaseBranch:
    subject: str
    options: list[tuple[str, BlockList]] = field(default_factory=list)

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.options]

    def to_dict(self) -> dict[str, Any]:
        return {
            self.subject: {
                label: [b.to_dict() for b in body] for label, body in self.options
            }
        }


@dataclass(slots=True)
class IfBranch:
    condition: str
    then: BlockList = field(default_factory=list)
    else_: BlockList | None = None

    def to_dict(self) -> dict[str, Any]:
        return {self.condition: [b.to_dict() for b in self.then]}


Payload = Union[Params, dict[str, Params], list[ResourceGroup], list[str], CaseBranch, IfBranch]


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Block:
    kind: BlockKind
    payload: Payload

    def to_dict(self) -> dict[str, Any]:
        """Plain-container form, keyed by the block kind."""
        kind = self.kind
        payload = self.payload

        if kind == BlockKind.Resources:
            return {kind.key: [group.to_dict() for group in payload]}
        if kind == BlockKind.Case:
            return {kind.key: payload.to_dict()}
        if kind == BlockKind.If:
            out: dict[str, Any] = {kind.key: payload.to_dict()}
            if payload.else_ is not None:
                out["else"] = [b.to_dict() for b in payload.else_]
            return out
        if kind in (BlockKind.ResourceOverrides, BlockKind.ResourceDefaults):
            return {kind.key: {target: copy_params(params) for target, params in payload.items()}}
        if kind == BlockKind.Includes:
            return {kind.key: list(payload)}
        # Arguments / Variables
        return {kind.key: copy_params(payload)}


BlockList = list[Block]


# ---------------------------------------------------------------------------
# Tail merging
# ---------------------------------------------------------------------------

def tail_of_kind(blocks: BlockList, kind: BlockKind) -> Block | None:
    """Return the last Block when it has *kind* and may be merged into."""
    if not blocks or kind in UNMERGEABLE:
        return None
    last = blocks[-1]
    return last if last.kind == kind else None


def open_block(blocks: BlockList, kind: BlockKind, factory) -> Block:
    """Peek-and-merge: reuse the tail Block of *kind* or append a new one.

    *factory* builds the empty payload for a freshly opened Block.
    """
    block = tail_of_kind(blocks, kind)
    if block is None:
        block = Block(kind, factory())
        blocks.append(block)
    return block


def resource_group(groups: list[ResourceGroup], type_name: str) -> ResourceGroup:
    """Same peek-and-merge rule, one level down inside a Resources payload."""
    if groups and groups[-1].type_name == type_name:
        return groups[-1]
    group = ResourceGroup(type_name)
    groups.append(group)
    return group
