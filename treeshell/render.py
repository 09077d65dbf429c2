"""Presentation of engine results as terminal lines.

Rendering helpers here are side-effect free: they take structured outcomes,
listings, tree rows, grep reports and history entries and return text lines.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .history import HistoryEntry
from .search import GrepReport
from .storage import Entity, Folder, Outcome, Status, TreeRow
from .ui_theme import DEFAULT_THEME, UITheme

HISTORY_RULE_WIDTH = 90

HELP_COMMANDS: tuple[tuple[str, str], ...] = (
    ("mkdir <name>", "create a folder in the current folder"),
    ("rmdir <name>", "remove a folder and everything in it"),
    ("cd <path>", "change folder (.. goes up, a/b descends, / is the base)"),
    ("ls", "list the current folder"),
    ("pwd", "print the current path"),
    ("touch <file>", "create an empty file"),
    ("write <file> <text>", "replace a file's content (\\n starts a new line)"),
    ("cat <file>", "print a file's content"),
    ("rm <file>", "remove a file"),
    ("tree", "print the current folder as a tree"),
    ("grep [-ircvnh] <pattern> [file]", "search file contents (grep --help)"),
    ("history [count | -c]", "show or clear command history"),
    ("theme <name>", "switch and remember the colour theme"),
    ("exit", "leave the shell"),
)

GREP_HELP_COMMANDS: tuple[tuple[str, str], ...] = (
    ("grep <pattern>", "search pattern in current directory"),
    ("grep <pattern> <filename>", "search pattern in specific file"),
    ("grep -i <pattern>", "case-insensitive search"),
    ("grep -r <pattern>", "recursive search in subdirectories"),
    ("grep -c <pattern>", "count matches only"),
    ("grep -v <pattern>", "invert match (show non-matching lines)"),
    ("grep -n <pattern>", "show line numbers (default)"),
    ("grep -h <pattern>", "hide file path headers"),
    ("grep --help", "show this help"),
)


def _paint(color: str, text: str, theme: UITheme) -> str:
    if not color:
        return text
    return f"{color}{text}{theme.reset}"


def _ok(text: str, theme: UITheme) -> list[str]:
    return [_paint(theme.message_ok, text, theme)]


def _error(text: str, theme: UITheme) -> list[str]:
    return [_paint(theme.message_error, text, theme)]


def format_prompt(path: str, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    return f"{_paint(active_theme.prompt_path, '/' + path, active_theme)}> "


def format_entry_name(entry: Entity, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    if isinstance(entry, Folder):
        return _paint(active_theme.tree_dir, entry.display_name, active_theme)
    return _paint(active_theme.tree_file, entry.display_name, active_theme)


def _format_removed(removed: Iterable[Entity]) -> list[str]:
    lines: list[str] = []
    for entity in removed:
        kind = "Folder" if isinstance(entity, Folder) else "File"
        lines.append(f"{kind} id - {entity.id} and name - {entity.display_name} removed successfully!")
    return lines


def format_outcome(verb: str, outcome: Outcome, theme: UITheme | None = None) -> list[str]:
    """Render the result of ``mkdir``/``touch``/``write``/``rm``/``rmdir``/``cd``."""
    active_theme = theme or DEFAULT_THEME
    status = outcome.status
    target = outcome.target
    if status is Status.INVALID_NAME:
        return _error(f"Invalid name: {target!r}", active_theme)

    if verb == "mkdir":
        if status is Status.ALREADY_EXISTS:
            return _error("Folder name already exists! Change the name of the folder.", active_theme)
        if status is Status.NOT_FOUND:
            return _error(f"Folder does not exist: {target}", active_theme)
        assert outcome.entry is not None
        return _ok(f"New folder created! Name = {target} id = {outcome.entry.id}", active_theme)

    if verb == "touch":
        if status is Status.ALREADY_EXISTS:
            return _error("File name already exists! Change the name of the file.", active_theme)
        if status is Status.NOT_FOUND:
            return _error(f"Folder does not exist: {target}", active_theme)
        entry = outcome.entry
        assert entry is not None and not isinstance(entry, Folder)
        return _ok(
            f"File created! File name = {entry.file_name}, id = {entry.id}, in folder id - {entry.folder_id}",
            active_theme,
        )

    if verb == "write":
        if status is Status.NOT_FOUND:
            return _error(f"No file named {target} in the current folder.", active_theme)
        return _ok(f"Content written to {target}.", active_theme)

    if verb == "rm":
        if status is Status.NOT_FOUND:
            return _error(f"No file named {target} in the current folder.", active_theme)
        return _ok("File removed successfully!", active_theme)

    if verb == "rmdir":
        if status is Status.NOT_FOUND:
            return _error(f"No folder named {target} in the current folder.", active_theme)
        return _format_removed(outcome.removed) + _ok("Folder removed successfully!", active_theme)

    if verb == "cd":
        if status is Status.NOT_FOUND:
            return _error(f"Wrong folder name, no folder exists with name {target}", active_theme)
        return []

    if status is Status.OK:
        return []
    return _error(f"{status.value.replace('_', ' ')}: {target}", active_theme)


def format_listing(entries: Sequence[Entity], theme: UITheme | None = None) -> list[str]:
    """One name per child in insertion order; no sorting, no type markers."""
    return [format_entry_name(entry, theme) for entry in entries]


def format_tree(rows: Sequence[TreeRow], theme: UITheme | None = None) -> list[str]:
    active_theme = theme or DEFAULT_THEME
    return [
        f"{_paint(active_theme.tree_marker, row.prefix, active_theme)}{format_entry_name(row.entry, active_theme)}"
        for row in rows
    ]


def format_grep_report(report: GrepReport, theme: UITheme | None = None) -> list[str]:
    """Render grep results grouped by file, or just the count.

    A file header is printed before the first hit of each file; consecutive
    groups are separated by a blank line.
    """
    active_theme = theme or DEFAULT_THEME
    options = report.options
    if report.status is Status.NOT_FOUND:
        if options.target_file and report.target == options.target_file:
            return _error(f"File not found: {report.target}", active_theme)
        return _error(f"Folder not found: {report.target}", active_theme)

    if options.target_file:
        lines = [f'Searching for pattern: "{report.pattern}" in file: {options.target_file}']
    else:
        lines = [f'Searching for pattern: "{report.pattern}" in current directory...']

    if not report.matches:
        lines.append("No matches found.")
        return lines

    if options.count_only:
        lines.append(f"Total matches: {_paint(active_theme.grep_count, str(report.count), active_theme)}")
        return lines

    current_file_id: str | None = None
    for match in report.matches:
        if options.show_file_path and match.file_id != current_file_id:
            if current_file_id is not None:
                lines.append("")
            lines.append(_paint(active_theme.grep_header, f"=== {match.file_path} ===", active_theme))
            current_file_id = match.file_id
        if options.show_line_numbers:
            number = _paint(active_theme.grep_line_number, f"{match.line_number}:", active_theme)
            lines.append(f"{number} {match.line}")
        else:
            lines.append(match.line)
    return lines


def format_history_entry(entry: HistoryEntry) -> str:
    timestamp = entry.timestamp.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return (
        f"{entry.id:>4}  {timestamp}  {entry.operation.value:<12}  "
        f"{entry.target:<20}  {entry.path or '/'}  {entry.command}"
    )


def format_history(
    entries: Sequence[HistoryEntry],
    title: str = "Command History:",
    theme: UITheme | None = None,
) -> list[str]:
    active_theme = theme or DEFAULT_THEME
    if not entries:
        return ["No history available."]
    header = f"{'ID':>4}  {'Timestamp':<19}  {'Operation':<12}  {'Target':<20}  {'Path':<15}  Command"
    lines = [
        _paint(active_theme.help_heading, title, active_theme),
        "-" * len(title),
        header,
        "-" * HISTORY_RULE_WIDTH,
    ]
    lines.extend(format_history_entry(entry) for entry in entries)
    return lines


def _format_help_table(title: str, rows: Sequence[tuple[str, str]], theme: UITheme) -> list[str]:
    width = max(len(usage) for usage, _ in rows)
    lines = [_paint(theme.help_heading, title, theme)]
    for usage, description in rows:
        key = _paint(theme.help_key, usage.ljust(width), theme)
        lines.append(f"  {key}  {_paint(theme.help_dim, description, theme)}")
    return lines


def format_help(theme: UITheme | None = None) -> list[str]:
    return _format_help_table("Available commands:", HELP_COMMANDS, theme or DEFAULT_THEME)


def format_grep_help(theme: UITheme | None = None) -> list[str]:
    active_theme = theme or DEFAULT_THEME
    lines = _format_help_table("GREP - Search for patterns in files", GREP_HELP_COMMANDS, active_theme)
    lines.append("")
    lines.append("Options can be combined: grep -ir <pattern>")
    lines.append("Patterns are regular expressions; invalid ones match literally.")
    return lines


__all__ = [
    "format_prompt",
    "format_entry_name",
    "format_outcome",
    "format_listing",
    "format_tree",
    "format_grep_report",
    "format_history_entry",
    "format_history",
    "format_help",
    "format_grep_help",
]
