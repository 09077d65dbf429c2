"""Line search over the file bodies held by a storage engine.

Patterns are tried as regular expressions first and fall back to a literal
substring test. Results are structured records; rendering lives elsewhere.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..storage import File, Status, StorageEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrepOptions:
    case_insensitive: bool = False
    recursive: bool = False
    show_line_numbers: bool = True
    show_file_path: bool = True
    count_only: bool = False
    invert_match: bool = False
    target_file: str | None = None
    target_folder: str | None = None  # folder id; defaults to the working folder


@dataclass(frozen=True)
class GrepMatch:
    file_name: str
    file_path: str
    line_number: int  # 1-based
    line: str
    file_id: str


@dataclass(frozen=True)
class GrepReport:
    pattern: str
    options: GrepOptions
    matches: tuple[GrepMatch, ...] = ()
    status: Status = Status.OK
    target: str = ""

    @property
    def count(self) -> int:
        return len(self.matches)


def split_lines(content: str) -> list[str]:
    """Split a file body on newline characters only; empty content has no lines.

    A trailing newline does not start another line and a carriage return before
    each break is dropped. Form feeds and Unicode line separators stay in the line.
    """
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class LineMatcher:
    """Pattern test shared by every line of one search.

    The pattern is compiled as a regular expression once; when it does not
    compile, each line gets a literal substring test instead.
    """

    def __init__(self, pattern: str, case_insensitive: bool = False, invert_match: bool = False) -> None:
        self.pattern = pattern
        self.case_insensitive = case_insensitive
        self.invert_match = invert_match
        self.regex: re.Pattern[str] | None
        try:
            self.regex = re.compile(pattern, re.IGNORECASE if case_insensitive else 0)
        except re.error as exc:
            logger.debug("pattern %r is not a regex (%s); using literal match", pattern, exc)
            self.regex = None
        self._needle = pattern.lower() if case_insensitive else pattern

    def matches(self, line: str) -> bool:
        if self.regex is not None:
            found = self.regex.search(line) is not None
        else:
            haystack = line.lower() if self.case_insensitive else line
            found = self._needle in haystack
        return not found if self.invert_match else found


class GrepEngine:
    """Read-only line search over file bodies held by a ``StorageEngine``."""

    def __init__(self, engine: StorageEngine) -> None:
        self.engine = engine

    def search(self, pattern: str, options: GrepOptions | None = None) -> GrepReport:
        """Search one file or a folder (optionally recursively) for ``pattern``.

        Matches come back in traversal order: a folder's files in insertion
        order, then each subfolder depth-first when ``recursive`` is set.
        """
        options = options or GrepOptions()
        matcher = LineMatcher(pattern, options.case_insensitive, options.invert_match)
        folder_id = options.target_folder or self.engine.current_folder_id()
        if not self.engine.folder_exists(folder_id):
            return GrepReport(pattern, options, status=Status.NOT_FOUND, target=folder_id)

        results: list[GrepMatch] = []
        if options.target_file:
            file_id = self.engine.find_file_id(options.target_file, folder_id)
            if file_id is None:
                return GrepReport(pattern, options, status=Status.NOT_FOUND, target=options.target_file)
            self._search_file(file_id, matcher, results)
            return GrepReport(pattern, options, tuple(results), target=options.target_file)

        self._search_folder(folder_id, matcher, options.recursive, results)
        logger.debug("grep %r in %s: %d matches", pattern, folder_id, len(results))
        return GrepReport(pattern, options, tuple(results), target=folder_id)

    def _search_file(self, file_id: str, matcher: LineMatcher, results: list[GrepMatch]) -> None:
        file: File | None = self.engine.get_file(file_id)
        if file is None or not file.content:
            return
        file_path = self.engine.file_path(file_id)
        for line_number, line in enumerate(split_lines(file.content), start=1):
            if matcher.matches(line):
                results.append(
                    GrepMatch(
                        file_name=file.file_name,
                        file_path=file_path,
                        line_number=line_number,
                        line=line,
                        file_id=file_id,
                    )
                )

    def _search_folder(
        self,
        folder_id: str,
        matcher: LineMatcher,
        recursive: bool,
        results: list[GrepMatch],
    ) -> None:
        stack = [folder_id]
        while stack:
            current_id = stack.pop()
            for file_id in self.engine.file_ids_in(current_id):
                self._search_file(file_id, matcher, results)
            if recursive:
                stack.extend(reversed(self.engine.folder_ids_in(current_id)))


__all__ = [
    "GrepOptions",
    "GrepMatch",
    "GrepReport",
    "GrepEngine",
    "LineMatcher",
    "split_lines",
]
