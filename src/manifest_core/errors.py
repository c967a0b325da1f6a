"""Exception hierarchy for manifest_core."""

from __future__ import annotations


class ManifestCoreError(Exception):
    """Base class for every error raised by manifest_core."""


class StructuralError(ManifestCoreError):
    """The AST violates the parser contract (e.g. a missing instance list)."""

    def __init__(self, message: str, statement: object = None) -> None:
        super().__init__(message)
        self.statement = statement
