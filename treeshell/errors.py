"""Exception hierarchy for treeshell.

User mistakes (missing names, duplicates) are reported as statuses, not
exceptions. Only defects in the engine's own bookkeeping and malformed
command lines are raised.
"""

from __future__ import annotations


class TreeShellError(Exception):
    """Base exception for all treeshell errors."""


class StructuralCorruptionError(TreeShellError, AssertionError):
    """Raised when the hierarchy index and entity store disagree."""


class CommandSyntaxError(TreeShellError, ValueError):
    """Raised when a shell command line cannot be parsed."""


__all__ = [
    "TreeShellError",
    "StructuralCorruptionError",
    "CommandSyntaxError",
]
