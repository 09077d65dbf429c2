"""Hierarchy index: parent folder id to ordered, kind-tagged child ids."""

from __future__ import annotations

from .types import EntryKind


class HierarchyIndex:
    """Adjacency mapping traversed by the recursive engine algorithms.

    Only folders with at least one child keep an entry; children stay in
    insertion order.
    """

    def __init__(self) -> None:
        self._children: dict[str, dict[str, EntryKind]] = {}

    def attach(self, parent_id: str, child_id: str, kind: EntryKind) -> None:
        self._children.setdefault(parent_id, {})[child_id] = kind

    def detach(self, parent_id: str, child_id: str) -> bool:
        """Remove one child link, pruning the parent entry once it is empty."""
        entry = self._children.get(parent_id)
        if entry is None or child_id not in entry:
            return False
        del entry[child_id]
        if not entry:
            del self._children[parent_id]
        return True

    def drop(self, parent_id: str) -> None:
        self._children.pop(parent_id, None)

    def children(self, parent_id: str) -> list[tuple[str, EntryKind]]:
        return list(self._children.get(parent_id, {}).items())

    def child_ids(self, parent_id: str, kind: EntryKind) -> list[str]:
        return [child_id for child_id, child_kind in self.children(parent_id) if child_kind is kind]

    def has_entry(self, parent_id: str) -> bool:
        return parent_id in self._children

    def parent_ids(self) -> list[str]:
        return list(self._children)

    def references(self, entity_id: str) -> bool:
        """Return whether ``entity_id`` appears as a key or as any child."""
        if entity_id in self._children:
            return True
        return any(entity_id in entry for entry in self._children.values())


__all__ = ["HierarchyIndex"]
