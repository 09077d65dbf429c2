"""Working-directory cursor: a stack of folder ids below the base folder."""

from __future__ import annotations


class Cursor:
    """Stack of entered folder ids.

    The base folder is implicit and never pushed, so popping at the base
    folder is a no-op and depth never goes negative.
    """

    def __init__(self, base_id: str) -> None:
        self.base_id = base_id
        self._stack: list[str] = []

    def push(self, folder_id: str) -> None:
        self._stack.append(folder_id)

    def pop(self) -> bool:
        """Leave the current folder; return ``False`` when already at base."""
        if not self._stack:
            return False
        self._stack.pop()
        return True

    def peek(self) -> str:
        return self._stack[-1] if self._stack else self.base_id

    def is_empty(self) -> bool:
        return not self._stack

    @property
    def depth(self) -> int:
        return len(self._stack)

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self._stack)

    def restore(self, snapshot: tuple[str, ...]) -> None:
        self._stack = list(snapshot)


__all__ = ["Cursor"]
