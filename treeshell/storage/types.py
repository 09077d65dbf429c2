"""Domain datatypes for the in-memory folder/file hierarchy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

TREE_INDENT_MARKER = "  |"
TREE_ROW_MARKER = "- "


class EntryKind(Enum):
    """Kind tag carried next to every id in the hierarchy index."""

    FOLDER = "folder"
    FILE = "file"


class Status(Enum):
    """Result status of an engine operation."""

    OK = "ok"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_NAME = "invalid_name"


def split_filename(filename: str) -> tuple[str, str]:
    """Split ``filename`` at the first dot into ``(name, extension)``.

    ``a.b.c`` gives ``("a", "b.c")``; a name without a dot keeps the whole
    string as name and an empty extension.
    """
    name, dot, extension = filename.partition(".")
    if not dot:
        return filename, ""
    return name, extension


def is_valid_name(name: str) -> bool:
    """Return whether ``name`` is usable as a file or folder name."""
    if not name or not name.strip():
        return False
    if "/" in name:
        return False
    return name not in {".", ".."}


@dataclass(frozen=True)
class Folder:
    """Folder record; ``name`` is unique only among sibling folders."""

    id: str
    name: str
    parent_id: str

    @property
    def kind(self) -> EntryKind:
        return EntryKind.FOLDER

    @property
    def display_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class File:
    """File record holding an in-memory text body.

    ``folder_id`` is a back-reference only; containment lives in the
    hierarchy index.
    """

    id: str
    name: str
    extension: str
    folder_id: str
    content: str = ""

    @classmethod
    def create(cls, file_id: str, filename: str, folder_id: str) -> File:
        name, extension = split_filename(filename)
        return cls(id=file_id, name=name, extension=extension, folder_id=folder_id)

    @property
    def kind(self) -> EntryKind:
        return EntryKind.FILE

    @property
    def file_name(self) -> str:
        """Full file name, ``name.extension`` or bare ``name``."""
        if not self.extension:
            return self.name
        return f"{self.name}.{self.extension}"

    @property
    def display_name(self) -> str:
        return self.file_name


Entity = Folder | File


@dataclass(frozen=True)
class Outcome:
    """Structured result of a create/remove/navigate/write operation."""

    status: Status
    target: str = ""
    entry: Entity | None = None
    removed: tuple[Entity, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


def tree_prefix(depth: int) -> str:
    """Return the depth marker printed before a tree row."""
    return TREE_INDENT_MARKER * max(0, depth) + TREE_ROW_MARKER


@dataclass(frozen=True)
class TreeRow:
    """One pre-order row of a folder tree."""

    depth: int
    entry: Entity

    @property
    def prefix(self) -> str:
        return tree_prefix(self.depth)

    @property
    def is_folder(self) -> bool:
        return isinstance(self.entry, Folder)


__all__ = [
    "EntryKind",
    "Status",
    "Folder",
    "File",
    "Entity",
    "Outcome",
    "TreeRow",
    "split_filename",
    "is_valid_name",
    "tree_prefix",
    "TREE_INDENT_MARKER",
    "TREE_ROW_MARKER",
]
