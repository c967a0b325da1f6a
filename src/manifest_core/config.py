"""Transformation options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IncludePolicy(Enum):
    """How consecutive ``include`` calls are grouped."""

    MERGE_ADJACENT = "merge_adjacent"   # same adjacency rule as other kinds
    ALWAYS_NEW = "always_new"           # one Includes block per call


@dataclass(frozen=True)
class TransformOptions:
    """Options the driver hands to ``transform``.

    Reading them from a config file stays with the driver.
    """

    include_policy: IncludePolicy = IncludePolicy.MERGE_ADJACENT
    classes: bool = True
    nodes: bool = True
    class_resources_as_includes: bool = False


DEFAULT_OPTIONS = TransformOptions()
