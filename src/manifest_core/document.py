"""Document — the final output of manifest_core transformation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from .blocks import BlockList


class UnitKind(Enum):
    Class = "classes"
    Node = "nodes"


@dataclass
class Unit:
    """One class or node definition and its Block List."""

    name: str
    kind: UnitKind
    blocks: BlockList = field(default_factory=list)
    parent: str | None = None


@dataclass
class Document:
    """Ordered units, in the order they were discovered."""

    units: dict[str, Unit] = field(default_factory=dict)

    # -- Mapping-style access ---------------------------------------------

    def __getitem__(self, name: str) -> BlockList:
        return self.units[name].blocks

    def __contains__(self, name: object) -> bool:
        return name in self.units

    def __iter__(self) -> Iterator[str]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def items(self) -> Iterator[tuple[str, BlockList]]:
        for name, unit in self.units.items():
            yield name, unit.blocks

    @property
    def classes(self) -> dict[str, Unit]:
        return {n: u for n, u in self.units.items() if u.kind == UnitKind.Class}

    @property
    def nodes(self) -> dict[str, Unit]:
        return {n: u for n, u in self.units.items() if u.kind == UnitKind.Node}

    # -- Construction -----------------------------------------------------

    def add(self, unit: Unit) -> None:
        """Register *unit*; a later unit with the same name replaces it."""
        self.units[unit.name] = unit

    # -- Plain conversion -------------------------------------------------

    def to_dict(self, grouped: bool = False) -> dict[str, Any]:
        """Convert to plain dicts / lists for an external serializer.

        - ``grouped=False`` → ``{unit: [block, ...]}``
        - ``grouped=True``  → ``{"classes": {...}, "nodes": {...}}`` with
          each unit as ``{"parent": ..., "blocks": [...]}``
        """
        if not grouped:
            return {
                name: [b.to_dict() for b in unit.blocks]
                for name, unit in self.units.items()
            }

        out: dict[str, Any] = {kind.value: {} for kind in UnitKind}
        for name, unit in self.units.items():
            out[unit.kind.value][name] = {
                "parent": unit.parent,
                "blocks": [b.to_dict() for b in unit.blocks],
            }
        return out
