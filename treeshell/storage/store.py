"""Entity store: the id-keyed table owning every folder and file record."""

from __future__ import annotations

from collections.abc import Iterator

from .types import Entity, File, Folder


class EntityStore:
    """Owns all ``Folder`` and ``File`` records keyed by id.

    Deleting an entity drops its table entry; nothing else holds the record.
    """

    def __init__(self) -> None:
        self._folders: dict[str, Folder] = {}
        self._files: dict[str, File] = {}

    def add(self, entity: Entity) -> None:
        if isinstance(entity, Folder):
            self._folders[entity.id] = entity
        else:
            self._files[entity.id] = entity

    def replace_file(self, file: File) -> None:
        if file.id not in self._files:
            raise KeyError(file.id)
        self._files[file.id] = file

    def get(self, entity_id: str) -> Entity | None:
        folder = self._folders.get(entity_id)
        if folder is not None:
            return folder
        return self._files.get(entity_id)

    def get_folder(self, folder_id: str) -> Folder | None:
        return self._folders.get(folder_id)

    def get_file(self, file_id: str) -> File | None:
        return self._files.get(file_id)

    def remove(self, entity_id: str) -> Entity | None:
        removed = self._folders.pop(entity_id, None)
        if removed is not None:
            return removed
        return self._files.pop(entity_id, None)

    def folders(self) -> Iterator[Folder]:
        return iter(tuple(self._folders.values()))

    def files(self) -> Iterator[File]:
        return iter(tuple(self._files.values()))

    @property
    def folder_count(self) -> int:
        return len(self._folders)

    @property
    def file_count(self) -> int:
        return len(self._files)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._folders or entity_id in self._files

    def __len__(self) -> int:
        return len(self._folders) + len(self._files)


__all__ = ["EntityStore"]
