"""treeshell: an in-memory folder/file tree driven by shell-like commands."""

from __future__ import annotations

from .history import HistoryLog, OperationKind
from .search import GrepEngine, GrepOptions
from .shell import Shell
from .storage import StorageEngine

__all__ = [
    "GrepEngine",
    "GrepOptions",
    "HistoryLog",
    "OperationKind",
    "Shell",
    "StorageEngine",
]
