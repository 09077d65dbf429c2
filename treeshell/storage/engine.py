"""Storage engine: the single mutating core of the simulated file system.

Composes the id allocator, entity store, hierarchy index and cursor. Every
user-triggerable miss (unknown name, duplicate name, unusable name) comes back
as an ``Outcome`` status; only index/store disagreement raises.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..errors import StructuralCorruptionError
from .cursor import Cursor
from .hierarchy import HierarchyIndex
from .ids import IdAllocator
from .store import EntityStore
from .types import Entity, EntryKind, File, Folder, Outcome, Status, TreeRow, is_valid_name

logger = logging.getLogger(__name__)

ROOT_ID = "F0"
DEFAULT_BASE_NAME = "BaseFolder"
PARENT_DIRECTORY = ".."
CURRENT_DIRECTORY = "."
PATH_SEPARATOR = "/"


class StorageEngine:
    """Folder/file hierarchy with a working-directory cursor.

    ``ROOT_ID`` is a synthetic super-root with no store record. The first real
    folder is the base working folder and the cursor starts there.
    """

    def __init__(self, base_name: str = DEFAULT_BASE_NAME) -> None:
        self.ids = IdAllocator()
        self.store = EntityStore()
        self.index = HierarchyIndex()

        root_id = self.ids.next_folder_id()
        assert root_id == ROOT_ID
        base = Folder(id=self.ids.next_folder_id(), name=base_name, parent_id=ROOT_ID)
        self.store.add(base)
        self.index.attach(ROOT_ID, base.id, EntryKind.FOLDER)
        self.base_folder_id = base.id
        self.cursor = Cursor(base.id)

    # -- lookups -----------------------------------------------------------

    def _require(self, entity_id: str) -> Entity:
        entity = self.store.get(entity_id)
        if entity is None:
            raise StructuralCorruptionError(f"index references {entity_id!r} but the store has no such record")
        return entity

    def _children(self, folder_id: str) -> list[Entity]:
        return [self._require(child_id) for child_id, _kind in self.index.children(folder_id)]

    def _find_child(self, folder_id: str, name: str, kind: EntryKind) -> Entity | None:
        for child_id in self.index.child_ids(folder_id, kind):
            child = self._require(child_id)
            if child.display_name == name:
                return child
        return None

    def folder_exists(self, folder_id: str) -> bool:
        return self.store.get_folder(folder_id) is not None

    def file_exists(self, file_id: str) -> bool:
        return self.store.get_file(file_id) is not None

    def get_folder(self, folder_id: str) -> Folder | None:
        return self.store.get_folder(folder_id)

    def get_file(self, file_id: str) -> File | None:
        return self.store.get_file(file_id)

    def get_content(self, file_id: str) -> str | None:
        file = self.store.get_file(file_id)
        return file.content if file is not None else None

    def file_ids_in(self, folder_id: str) -> list[str]:
        return self.index.child_ids(folder_id, EntryKind.FILE)

    def folder_ids_in(self, folder_id: str) -> list[str]:
        return self.index.child_ids(folder_id, EntryKind.FOLDER)

    def find_file_id(self, name: str, folder_id: str | None = None) -> str | None:
        """Resolve a file id by exact file name within one folder."""
        found = self._find_child(folder_id or self.current_folder_id(), name, EntryKind.FILE)
        return found.id if found is not None else None

    def find_folder_id(self, name: str, folder_id: str | None = None) -> str | None:
        found = self._find_child(folder_id or self.current_folder_id(), name, EntryKind.FOLDER)
        return found.id if found is not None else None

    # -- paths -------------------------------------------------------------

    def current_folder_id(self) -> str:
        return self.cursor.peek()

    def path_of(self, folder_id: str) -> str:
        """Return the ``/``-joined folder names from just below base to ``folder_id``.

        The base folder itself (and the super-root) map to the empty string.
        """
        names: list[str] = []
        seen: set[str] = set()
        folder = self.store.get_folder(folder_id)
        while folder is not None and folder.id != self.base_folder_id:
            if folder.id in seen:
                raise StructuralCorruptionError(f"parent chain of {folder_id!r} loops at {folder.id!r}")
            seen.add(folder.id)
            names.append(folder.name)
            parent = self.store.get_folder(folder.parent_id)
            if parent is None:
                raise StructuralCorruptionError(f"folder {folder.id!r} has unknown parent {folder.parent_id!r}")
            folder = parent
        return PATH_SEPARATOR.join(reversed(names))

    def current_path(self) -> str:
        return self.path_of(self.current_folder_id())

    def file_path(self, file_id: str) -> str:
        """Return the full path of a file, its folder path joined with its name."""
        file = self.store.get_file(file_id)
        if file is None:
            return ""
        folder_path = self.path_of(file.folder_id)
        if not folder_path:
            return file.file_name
        return f"{folder_path}{PATH_SEPARATOR}{file.file_name}"

    # -- creation ----------------------------------------------------------

    def create_file(self, name: str, folder_id: str | None = None) -> Outcome:
        folder_id = folder_id or self.current_folder_id()
        if not is_valid_name(name):
            return Outcome(Status.INVALID_NAME, target=name)
        if not self.folder_exists(folder_id):
            logger.info("create_file: no folder %s", folder_id)
            return Outcome(Status.NOT_FOUND, target=folder_id)
        existing = self._find_child(folder_id, name, EntryKind.FILE)
        if existing is not None:
            logger.info("create_file: %s already exists in %s", name, folder_id)
            return Outcome(Status.ALREADY_EXISTS, target=name, entry=existing)

        file = File.create(self.ids.next_file_id(), name, folder_id)
        self.store.add(file)
        self.index.attach(folder_id, file.id, EntryKind.FILE)
        logger.debug("created file %s (%s) in %s", file.file_name, file.id, folder_id)
        return Outcome(Status.OK, target=name, entry=file)

    def create_folder(self, name: str, parent_id: str | None = None) -> Outcome:
        parent_id = parent_id or self.current_folder_id()
        if not is_valid_name(name):
            return Outcome(Status.INVALID_NAME, target=name)
        if not self.folder_exists(parent_id):
            logger.info("create_folder: no folder %s", parent_id)
            return Outcome(Status.NOT_FOUND, target=parent_id)
        existing = self._find_child(parent_id, name, EntryKind.FOLDER)
        if existing is not None:
            logger.info("create_folder: %s already exists in %s", name, parent_id)
            return Outcome(Status.ALREADY_EXISTS, target=name, entry=existing)

        folder = Folder(id=self.ids.next_folder_id(), name=name, parent_id=parent_id)
        self.store.add(folder)
        self.index.attach(parent_id, folder.id, EntryKind.FOLDER)
        logger.debug("created folder %s (%s) in %s", name, folder.id, parent_id)
        return Outcome(Status.OK, target=name, entry=folder)

    # -- mutation in the working folder -------------------------------------

    def set_content(self, file_name: str, content: str) -> Outcome:
        """Overwrite the body of ``file_name`` in the current folder."""
        found = self._find_child(self.current_folder_id(), file_name, EntryKind.FILE)
        if found is None:
            logger.info("set_content: no file %s", file_name)
            return Outcome(Status.NOT_FOUND, target=file_name)
        assert isinstance(found, File)
        updated = replace(found, content=content)
        self.store.replace_file(updated)
        logger.debug("wrote %d chars to %s", len(content), found.id)
        return Outcome(Status.OK, target=file_name, entry=updated)

    def remove_file(self, file_name: str) -> Outcome:
        folder_id = self.current_folder_id()
        found = self._find_child(folder_id, file_name, EntryKind.FILE)
        if found is None:
            logger.info("remove_file: no file %s", file_name)
            return Outcome(Status.NOT_FOUND, target=file_name)
        self.store.remove(found.id)
        self.index.detach(folder_id, found.id)
        logger.debug("removed file %s (%s)", file_name, found.id)
        return Outcome(Status.OK, target=file_name, entry=found, removed=(found,))

    def remove_folder(self, folder_name: str) -> Outcome:
        """Recursively delete the named child folder of the current folder.

        ``removed`` lists every deleted entity, each folder after its contents.
        """
        found = self._find_child(self.current_folder_id(), folder_name, EntryKind.FOLDER)
        if found is None:
            logger.info("remove_folder: no folder %s", folder_name)
            return Outcome(Status.NOT_FOUND, target=folder_name)
        assert isinstance(found, Folder)
        self.index.detach(found.parent_id, found.id)
        removed: list[Entity] = []
        self._remove_subtree(found.id, removed)
        logger.debug("removed folder %s (%s) with %d entities", folder_name, found.id, len(removed))
        return Outcome(Status.OK, target=folder_name, entry=found, removed=tuple(removed))

    def _remove_subtree(self, folder_id: str, removed: list[Entity]) -> None:
        # Post-order walk over (folder, unvisited children) pairs.
        stack = [(folder_id, iter(self.index.children(folder_id)))]
        while stack:
            current_id, pending = stack[-1]
            for child_id, kind in pending:
                if kind is EntryKind.FOLDER:
                    stack.append((child_id, iter(self.index.children(child_id))))
                    break
                removed.append(self._require(child_id))
                self.store.remove(child_id)
            else:
                stack.pop()
                removed.append(self._require(current_id))
                self.store.remove(current_id)
                self.index.drop(current_id)

    # -- navigation ----------------------------------------------------------

    def change_directory(self, path: str) -> Outcome:
        """Move the cursor along ``/``-separated components.

        A leading ``/`` starts from the base folder. ``..`` pops (a no-op at the
        base folder); any other component must be a child folder of the folder
        reached so far. On failure the cursor is left where it was.
        """
        absolute = path.startswith(PATH_SEPARATOR)
        components = [part for part in path.split(PATH_SEPARATOR) if part]
        if not components and not absolute:
            return Outcome(Status.NOT_FOUND, target=path)

        saved = self.cursor.snapshot()
        if absolute:
            self.cursor.restore(())
        for component in components:
            if component == CURRENT_DIRECTORY:
                continue
            if component == PARENT_DIRECTORY:
                self.cursor.pop()
                continue
            found = self._find_child(self.current_folder_id(), component, EntryKind.FOLDER)
            if found is None:
                self.cursor.restore(saved)
                logger.info("change_directory: no folder %s", component)
                return Outcome(Status.NOT_FOUND, target=component)
            self.cursor.push(found.id)

        current = self._require(self.current_folder_id())
        logger.debug("cursor now at %s (depth %d)", current.id, self.cursor.depth)
        return Outcome(Status.OK, target=path, entry=current)

    # -- listing -------------------------------------------------------------

    def list_children(self, folder_id: str | None = None) -> list[Entity]:
        """Return direct children of a folder in insertion order."""
        return self._children(folder_id or self.current_folder_id())

    def print_tree(self, folder_id: str | None = None) -> list[TreeRow]:
        """Return depth-first pre-order rows starting at ``folder_id`` (depth 0)."""
        start = folder_id or self.current_folder_id()
        if not self.folder_exists(start):
            return []
        rows: list[TreeRow] = []
        stack = [(start, 0)]
        while stack:
            entity_id, depth = stack.pop()
            rows.append(TreeRow(depth=depth, entry=self._require(entity_id)))
            children = self.index.children(entity_id)
            stack.extend((child_id, depth + 1) for child_id, _kind in reversed(children))
        return rows


__all__ = [
    "StorageEngine",
    "ROOT_ID",
    "DEFAULT_BASE_NAME",
    "PARENT_DIRECTORY",
    "PATH_SEPARATOR",
]
