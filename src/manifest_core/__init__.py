"""manifest_core — semantic outline of manifest class and node definitions."""

from .assembler import assemble_class, assemble_node, transform
from .blocks import Block, BlockKind, BlockList, CaseBranch, IfBranch, ResourceGroup
from .classifier import build_body, classify
from .config import IncludePolicy, TransformOptions
from .document import Document, Unit, UnitKind
from .errors import ManifestCoreError, StructuralError
from .renderer import render, render_condition, render_list, render_value, strip_quotes

__all__ = [
    "transform",
    "assemble_class",
    "assemble_node",
    "build_body",
    "classify",
    "render",
    "render_list",
    "render_value",
    "render_condition",
    "strip_quotes",
    "Block",
    "BlockKind",
    "BlockList",
    "CaseBranch",
    "IfBranch",
    "ResourceGroup",
    "Document",
    "Unit",
    "UnitKind",
    "IncludePolicy",
    "TransformOptions",
    "ManifestCoreError",
    "StructuralError",
]
