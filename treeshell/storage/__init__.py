"""In-memory folder/file hierarchy engine.

This package contains the non-UI core:
- tagged folder/file records and operation outcomes
- monotonic id allocation
- the entity store and the hierarchy index
- the working-directory cursor
- the storage engine composing all of the above
"""

from __future__ import annotations

from .cursor import Cursor
from .engine import DEFAULT_BASE_NAME, ROOT_ID, StorageEngine
from .hierarchy import HierarchyIndex
from .ids import IdAllocator
from .store import EntityStore
from .types import (
    Entity,
    EntryKind,
    File,
    Folder,
    Outcome,
    Status,
    TreeRow,
    is_valid_name,
    split_filename,
    tree_prefix,
)

__all__ = [
    "Cursor",
    "DEFAULT_BASE_NAME",
    "ROOT_ID",
    "StorageEngine",
    "HierarchyIndex",
    "IdAllocator",
    "EntityStore",
    "Entity",
    "EntryKind",
    "File",
    "Folder",
    "Outcome",
    "Status",
    "TreeRow",
    "is_valid_name",
    "split_filename",
    "tree_prefix",
]
