"""Command history: a bounded log of executed shell commands.

The storage engine never writes here; the shell appends one entry after each
command it runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

MAX_HISTORY_ENTRIES = 1000


class OperationKind(Enum):
    CREATE_FILE = "CREATE_FILE"
    WRITE_FILE = "WRITE_FILE"
    REMOVE_FILE = "REMOVE_FILE"
    SHOW_FILE = "SHOW_FILE"
    CREATE_FOLDER = "CREATE_FOLDER"
    REMOVE_FOLDER = "REMOVE_FOLDER"
    SHOW_TREE = "SHOW_TREE"
    LIST_ITEMS = "LIST_ITEMS"
    CHANGE_DIR = "CHANGE_DIR"
    SHOW_PATH = "SHOW_PATH"
    GREP = "GREP"
    GREP_FILE = "GREP_FILE"
    GREP_RECURSIVE = "GREP_RECURSIVE"
    GREP_OPTIONS = "GREP_OPTIONS"
    GREP_HELP = "GREP_HELP"


@dataclass(frozen=True)
class HistoryEntry:
    """One executed command and the working path after it ran."""

    id: int
    command: str
    operation: OperationKind
    target: str
    path: str
    timestamp: datetime


class HistoryLog:
    """Append-only command log keeping at most ``max_entries`` entries.

    Oldest entries are evicted first. Entry ids keep counting across
    evictions and clears.
    """

    def __init__(self, max_entries: int = MAX_HISTORY_ENTRIES) -> None:
        self.max_entries = max(1, max_entries)
        self._entries: list[HistoryEntry] = []
        self._next_id = 1

    def add(
        self,
        command: str,
        operation: OperationKind,
        target: str,
        path: str,
        timestamp: datetime | None = None,
    ) -> HistoryEntry:
        entry = HistoryEntry(
            id=self._next_id,
            command=command,
            operation=operation,
            target=target,
            path=path,
            timestamp=timestamp or datetime.now(timezone.utc),
        )
        self._next_id += 1
        self._entries.append(entry)
        overflow = len(self._entries) - self.max_entries
        if overflow > 0:
            del self._entries[:overflow]
        return entry

    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def recent(self, count: int) -> list[HistoryEntry]:
        if count <= 0:
            return []
        return self._entries[-count:]

    def last(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = [
    "MAX_HISTORY_ENTRIES",
    "OperationKind",
    "HistoryEntry",
    "HistoryLog",
]
