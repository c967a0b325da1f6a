"""AST node contract consumed by manifest_core.

These dataclasses describe the shape of the tree handed over by the
manifest parser (or an adapter sitting on top of it).  Value nodes carry a
*default text form* through ``__str__``, which is what the renderer falls
back to for anything it does not special-case.  Statement nodes declare
their ``kind`` so the classifier can dispatch on a closed enumeration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Union


# ---------------------------------------------------------------------------
# StatementKind
# ---------------------------------------------------------------------------

class StatementKind(Enum):
    VariableAssignment = auto()
    ResourceDeclaration = auto()
    ResourceOverride = auto()
    ResourceDefaults = auto()
    CaseStatement = auto()
    IfStatement = auto()
    DirectiveCall = auto()


# ---------------------------------------------------------------------------
# Leaf values
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Name:
    """Bare word (unquoted class names, resource types, keywords)."""
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class String:
    """Quoted string literal without interpolation."""
    value: str
    quote: str = '"'

    def __str__(self) -> str:
        return f"{self.quote}{self.value}{self.quote}"


@dataclass(slots=True)
class Number:
    value: str

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True)
class Boolean:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(slots=True)
class Undef:
    def __str__(self) -> str:
        return "undef"


@dataclass(slots=True)
class Default:
    """The ``default`` catch-all used by case and selector options."""

    def __str__(self) -> str:
        return "default"


@dataclass(slots=True)
class Variable:
    name: str  # without the leading $

    def __str__(self) -> str:
        return f"${self.name}"


@dataclass(slots=True)
class Regex:
    value: str

    def __str__(self) -> str:
        return f"/{self.value}/"


# ---------------------------------------------------------------------------
# Compound values
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Concat:
    """Double-quoted string with interpolated fragments."""
    fragments: list[ValueNode] = field(default_factory=list)

    def __str__(self) -> str:
        parts = []
        for frag in self.fragments:
            if isinstance(frag, String):
                parts.append(frag.value)
            else:
                parts.append(str(frag))
        return '"' + "".join(parts) + '"'


@dataclass(slots=True)
class Array:
    items: list[ValueNode] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(i) for i in self.items) + "]"


@dataclass(slots=True)
class Hash:
    pairs: list[tuple[ValueNode, ValueNode]] = field(default_factory=list)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k} => {v}" for k, v in self.pairs) + "}"


@dataclass(slots=True)
class ResourceReference:
    """``File['/etc/motd']`` style reference."""
    type_name: str
    titles: list[ValueNode] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.type_name}[" + ", ".join(str(t) for t in self.titles) + "]"


@dataclass(slots=True)
class AccessExpression:
    """``$hash['key']`` / ``$array[0]``."""
    target: ValueNode
    keys: list[ValueNode] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.target}[" + ", ".join(str(k) for k in self.keys) + "]"


@dataclass(slots=True)
class BinaryExpression:
    """Comparison, boolean, arithmetic and match operators."""
    left: ValueNode
    operator: str
    right: ValueNode

    def __str__(self) -> str:
        return f"{self.left} {self.operator} {self.right}"


@dataclass(slots=True)
class Not:
    value: ValueNode

    def __str__(self) -> str:
        return f"!{self.value}"


@dataclass(slots=True)
class FunctionCall:
    """Function call used as a value (rvalue form)."""
    name: str
    arguments: list[ValueNode] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.name}(" + ", ".join(str(a) for a in self.arguments) + ")"


ValueNode = Union[
    Name, String, Number, Boolean, Undef, Default, Variable, Regex,
    Concat, Array, Hash, ResourceReference, AccessExpression,
    BinaryExpression, Not, FunctionCall,
]


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VarDef:
    kind: ClassVar[StatementKind] = StatementKind.VariableAssignment

    name: str
    value: ValueNode | None = None


@dataclass(slots=True)
class ResourceParam:
    name: str
    value: ValueNode | None


@dataclass(slots=True)
class ResourceInstance:
    """One ``title: param => value, ...`` body.  *title* may be an Array."""
    title: ValueNode
    parameters: list[ResourceParam] | None = field(default_factory=list)


@dataclass(slots=True)
class Resource:
    kind: ClassVar[StatementKind] = StatementKind.ResourceDeclaration

    type_name: str
    instances: list[ResourceInstance] | None = field(default_factory=list)


@dataclass(slots=True)
class ResourceOverride:
    kind: ClassVar[StatementKind] = StatementKind.ResourceOverride

    target: ValueNode
    parameters: list[ResourceParam] | None = field(default_factory=list)


@dataclass(slots=True)
class ResourceDefaults:
    kind: ClassVar[StatementKind] = StatementKind.ResourceDefaults

    type_name: str
    parameters: list[ResourceParam] | None = field(default_factory=list)


@dataclass(slots=True)
class CaseOption:
    values: list[ValueNode]
    statements: list[Statement] = field(default_factory=list)


@dataclass(slots=True)
class CaseStatement:
    kind: ClassVar[StatementKind] = StatementKind.CaseStatement

    subject: ValueNode
    options: list[CaseOption] = field(default_factory=list)


@dataclass(slots=True)
class IfStatement:
    kind: ClassVar[StatementKind] = StatementKind.IfStatement

    condition: ValueNode
    statements: list[Statement] = field(default_factory=list)
    else_statements: list[Statement] | None = None


@dataclass(slots=True)
class Function:
    """Function called as a statement (``include foo``, ``notice(...)``)."""
    kind: ClassVar[StatementKind] = StatementKind.DirectiveCall

    name: str
    arguments: list[ValueNode] = field(default_factory=list)


Statement = Union[
    VarDef, Resource, ResourceOverride, ResourceDefaults,
    CaseStatement, IfStatement, Function,
]


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Parameter:
    name: str
    default: ValueNode | None = None


@dataclass(slots=True)
class HostClass:
    name: str
    arguments: list[Parameter] = field(default_factory=list)
    code: list[Statement] | None = None
    parent: str | None = None


@dataclass(slots=True)
class NodeDefinition:
    name: str
    code: list[Statement] | None = None
    parent: str | None = None


Definition = Union[HostClass, NodeDefinition]
