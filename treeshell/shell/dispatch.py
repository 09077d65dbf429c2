"""Shell dispatcher: runs one command line against a storage engine.

Each verb handler calls into the engine or grep engine, renders the structured
result, and names the history record the command leaves behind.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..config import DEFAULT_STYLE, save_theme_name
from ..errors import CommandSyntaxError
from ..highlight import colorize_content
from ..history import HistoryLog, OperationKind
from ..render import (
    format_grep_help,
    format_grep_report,
    format_help,
    format_history,
    format_listing,
    format_outcome,
    format_prompt,
    format_tree,
)
from ..search import GrepEngine
from ..storage import StorageEngine
from ..ui_theme import UITheme, available_theme_names, normalize_theme_name, resolve_theme
from .commands import Command, parse_command_line, parse_grep_args, parse_write_args

logger = logging.getLogger(__name__)

EXIT_VERBS = frozenset({"exit", "quit"})
HISTORY_CLEAR_FLAG = "-c"


@dataclass(frozen=True)
class ShellReply:
    lines: tuple[str, ...] = ()
    exit: bool = False


@dataclass(frozen=True)
class _Handled:
    lines: list[str]
    operation: OperationKind | None = None
    target: str = ""


class Shell:
    """Line-oriented front end over one ``StorageEngine`` instance.

    The engine, grep engine and history log are owned by the caller and
    passed in, so several shells never share hidden state.
    """

    def __init__(
        self,
        engine: StorageEngine | None = None,
        history: HistoryLog | None = None,
        theme_name: str | None = None,
        style: str = DEFAULT_STYLE,
        no_color: bool = False,
    ) -> None:
        self.engine = engine or StorageEngine()
        self.grep = GrepEngine(self.engine)
        self.history = history if history is not None else HistoryLog()
        self.style = style
        self.no_color = no_color
        self.theme_name = normalize_theme_name(theme_name)
        self.theme: UITheme = resolve_theme(self.theme_name, no_color=no_color)
        self._handlers: dict[str, Callable[[Command], _Handled]] = {
            "mkdir": self._mkdir,
            "rmdir": self._rmdir,
            "cd": self._cd,
            "ls": self._ls,
            "pwd": self._pwd,
            "touch": self._touch,
            "write": self._write,
            "cat": self._cat,
            "rm": self._rm,
            "tree": self._tree,
            "grep": self._grep,
            "history": self._history,
            "help": self._help,
            "theme": self._theme,
        }

    def prompt(self) -> str:
        return format_prompt(self.engine.current_path(), self.theme)

    def execute(self, line: str) -> ShellReply:
        """Run one input line and return the lines to print."""
        try:
            command = parse_command_line(line)
        except CommandSyntaxError as exc:
            return ShellReply(lines=(str(exc),))
        if command is None:
            return ShellReply()
        if command.verb in EXIT_VERBS:
            return ShellReply(exit=True)

        handler = self._handlers.get(command.verb)
        if handler is None:
            return ShellReply(lines=(f"Wrong command! Unknown command: {command.verb} (try help)",))

        logger.debug("executing %r", command.text)
        try:
            handled = handler(command)
        except CommandSyntaxError as exc:
            return ShellReply(lines=(str(exc),))

        if handled.operation is not None:
            self.history.add(command.text, handled.operation, handled.target, self.engine.current_path())
        return ShellReply(lines=tuple(handled.lines))

    # -- argument helpers ----------------------------------------------------

    @staticmethod
    def _single_arg(command: Command, what: str) -> str:
        if len(command.args) != 1:
            raise CommandSyntaxError(f"usage: {command.verb} <{what}>")
        return command.args[0]

    @staticmethod
    def _no_args(command: Command) -> None:
        if command.args:
            raise CommandSyntaxError(f"usage: {command.verb}")

    # -- folder verbs ----------------------------------------------------------

    def _mkdir(self, command: Command) -> _Handled:
        name = self._single_arg(command, "folder name")
        outcome = self.engine.create_folder(name, self.engine.current_folder_id())
        return _Handled(format_outcome("mkdir", outcome, self.theme), OperationKind.CREATE_FOLDER, name)

    def _rmdir(self, command: Command) -> _Handled:
        name = self._single_arg(command, "folder name")
        outcome = self.engine.remove_folder(name)
        return _Handled(format_outcome("rmdir", outcome, self.theme), OperationKind.REMOVE_FOLDER, name)

    def _cd(self, command: Command) -> _Handled:
        path = self._single_arg(command, "folder")
        outcome = self.engine.change_directory(path)
        return _Handled(format_outcome("cd", outcome, self.theme), OperationKind.CHANGE_DIR, path)

    def _ls(self, command: Command) -> _Handled:
        self._no_args(command)
        entries = self.engine.list_children(self.engine.current_folder_id())
        return _Handled(format_listing(entries, self.theme), OperationKind.LIST_ITEMS)

    def _pwd(self, command: Command) -> _Handled:
        self._no_args(command)
        return _Handled([f"/{self.engine.current_path()}"], OperationKind.SHOW_PATH)

    def _tree(self, command: Command) -> _Handled:
        self._no_args(command)
        rows = self.engine.print_tree(self.engine.current_folder_id())
        return _Handled(format_tree(rows, self.theme), OperationKind.SHOW_TREE)

    # -- file verbs --------------------------------------------------------------

    def _touch(self, command: Command) -> _Handled:
        name = self._single_arg(command, "file name")
        outcome = self.engine.create_file(name, self.engine.current_folder_id())
        return _Handled(format_outcome("touch", outcome, self.theme), OperationKind.CREATE_FILE, name)

    def _write(self, command: Command) -> _Handled:
        name, content = parse_write_args(command.rest)
        outcome = self.engine.set_content(name, content)
        return _Handled(format_outcome("write", outcome, self.theme), OperationKind.WRITE_FILE, name)

    def _cat(self, command: Command) -> _Handled:
        name = self._single_arg(command, "file name")
        file_id = self.engine.find_file_id(name, self.engine.current_folder_id())
        if file_id is None:
            return _Handled([f"No file named {name} in the current folder."], OperationKind.SHOW_FILE, name)
        content = self.engine.get_content(file_id) or ""
        rendered = colorize_content(content, name, self.style, no_color=self.no_color)
        return _Handled(rendered.splitlines(), OperationKind.SHOW_FILE, name)

    def _rm(self, command: Command) -> _Handled:
        name = self._single_arg(command, "file name")
        outcome = self.engine.remove_file(name)
        return _Handled(format_outcome("rm", outcome, self.theme), OperationKind.REMOVE_FILE, name)

    # -- search and bookkeeping ----------------------------------------------------

    def _grep(self, command: Command) -> _Handled:
        request = parse_grep_args(command.args)
        if request.show_help:
            return _Handled(format_grep_help(self.theme), request.operation)
        report = self.grep.search(request.pattern, request.options)
        return _Handled(format_grep_report(report, self.theme), request.operation, request.history_target)

    def _history(self, command: Command) -> _Handled:
        if not command.args:
            return _Handled(format_history(self.history.entries(), theme=self.theme))
        arg = self._single_arg(command, "count")
        if arg == HISTORY_CLEAR_FLAG:
            self.history.clear()
            return _Handled(["History cleared successfully."])
        try:
            count = int(arg)
        except ValueError:
            count = 0
        if count <= 0:
            return _Handled(["Invalid count. Please specify a positive number."])
        title = f"Recent Command History (last {count} commands):"
        return _Handled(format_history(self.history.recent(count), title=title, theme=self.theme))

    def _help(self, command: Command) -> _Handled:
        return _Handled(format_help(self.theme))

    def _theme(self, command: Command) -> _Handled:
        names = available_theme_names()
        if not command.args:
            return _Handled([f"Current theme: {self.theme_name}", f"Available themes: {', '.join(names)}"])
        name = self._single_arg(command, "theme name").lower()
        if name not in names:
            return _Handled([f"Unknown theme: {name} (available: {', '.join(names)})"])
        self.theme_name = name
        self.theme = resolve_theme(name, no_color=self.no_color)
        if not save_theme_name(name):
            return _Handled([f"Theme set to {name} (not saved)."])
        return _Handled([f"Theme set to {name}."])


__all__ = ["Shell", "ShellReply"]
