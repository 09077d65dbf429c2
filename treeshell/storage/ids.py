"""Monotonic id allocation for folder (``F<n>``) and file (``f<n>``) ids."""

from __future__ import annotations

from itertools import count

FOLDER_ID_PREFIX = "F"
FILE_ID_PREFIX = "f"


class IdAllocator:
    """Issue ids that are never reused for the lifetime of the allocator.

    Counters are independent of how many entities are currently alive, so
    deleting entities never frees an id for reissue.
    """

    def __init__(self, first_folder: int = 0, first_file: int = 0) -> None:
        self._folder_counter = count(first_folder)
        self._file_counter = count(first_file)

    def next_folder_id(self) -> str:
        return f"{FOLDER_ID_PREFIX}{next(self._folder_counter)}"

    def next_file_id(self) -> str:
        return f"{FILE_ID_PREFIX}{next(self._file_counter)}"


__all__ = ["IdAllocator", "FOLDER_ID_PREFIX", "FILE_ID_PREFIX"]
