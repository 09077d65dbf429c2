"""Command-line parsing for the interactive shell.

Turns raw input lines into ``Command`` values and grep argument lists into
``GrepRequest`` values. Malformed input raises ``CommandSyntaxError``.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, replace

from ..errors import CommandSyntaxError
from ..history import OperationKind
from ..search import GrepOptions

_FLAG_FIELDS: dict[str, tuple[str, bool]] = {
    "i": ("case_insensitive", True),
    "r": ("recursive", True),
    "c": ("count_only", True),
    "v": ("invert_match", True),
    "n": ("show_line_numbers", True),
    "h": ("show_file_path", False),
}
GREP_FLAGS = "".join(_FLAG_FIELDS)
FREE_TEXT_VERBS = frozenset({"write"})
NEWLINE_ESCAPE = "\\n"


@dataclass(frozen=True)
class Command:
    """One parsed input line.

    ``rest`` is the raw text after the verb, kept for verbs such as ``write``
    that take free text.
    """

    verb: str
    args: tuple[str, ...]
    text: str
    rest: str = ""


@dataclass(frozen=True)
class GrepRequest:
    pattern: str
    options: GrepOptions
    flags: str = ""
    show_help: bool = False

    @property
    def operation(self) -> OperationKind:
        if self.show_help:
            return OperationKind.GREP_HELP
        if self.options.target_file:
            return OperationKind.GREP_FILE
        if self.flags == "r":
            return OperationKind.GREP_RECURSIVE
        if self.flags:
            return OperationKind.GREP_OPTIONS
        return OperationKind.GREP

    @property
    def history_target(self) -> str:
        if self.show_help:
            return ""
        return self.options.target_file or self.pattern


def _split(text: str) -> list[str]:
    try:
        return shlex.split(text)
    except ValueError as exc:
        raise CommandSyntaxError(f"cannot parse command: {exc}") from exc


def parse_command_line(line: str) -> Command | None:
    """Parse one input line; blank lines and ``#`` comments give ``None``."""
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    verb, *remainder = text.split(None, 1)
    rest = remainder[0] if remainder else ""
    verb = verb.lower()
    args = () if verb in FREE_TEXT_VERBS else tuple(_split(rest))
    return Command(verb=verb, args=args, text=text, rest=rest)


def parse_write_args(rest: str) -> tuple[str, str]:
    """Split ``write`` arguments into a (possibly quoted) file name and free text.

    The literal two-character sequence ``\\n`` in the text becomes a newline.
    """
    lexer = shlex.shlex(rest, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = ""
    try:
        name = lexer.get_token()
    except ValueError as exc:
        raise CommandSyntaxError(f"cannot parse command: {exc}") from exc
    if not name:
        raise CommandSyntaxError("write: missing file name")
    content = lexer.instream.read()
    return name, content.replace(NEWLINE_ESCAPE, "\n")


def _apply_flag(options: GrepOptions, flag: str) -> GrepOptions:
    if flag not in _FLAG_FIELDS:
        raise CommandSyntaxError(f"grep: unknown option -{flag}")
    field_name, value = _FLAG_FIELDS[flag]
    return replace(options, **{field_name: value})


def parse_grep_args(args: tuple[str, ...] | list[str]) -> GrepRequest:
    """Parse ``grep`` arguments: combined short flags, a pattern, an optional file."""
    options = GrepOptions()
    flags = ""
    positionals: list[str] = []
    options_done = False
    for token in args:
        if not options_done and token == "--help":
            return GrepRequest(pattern="", options=options, show_help=True)
        if not options_done and token == "--":
            options_done = True
            continue
        if not options_done and not positionals and token.startswith("-") and len(token) > 1:
            for flag in token[1:]:
                options = _apply_flag(options, flag)
                if flag not in flags:
                    flags += flag
            continue
        positionals.append(token)

    if not positionals:
        raise CommandSyntaxError("grep: missing pattern (see grep --help)")
    if len(positionals) > 2:
        raise CommandSyntaxError("grep: expected a pattern and at most one file name")
    if len(positionals) == 2:
        options = replace(options, target_file=positionals[1])
    return GrepRequest(pattern=positionals[0], options=options, flags=flags)


__all__ = [
    "Command",
    "GrepRequest",
    "GREP_FLAGS",
    "parse_command_line",
    "parse_write_args",
    "parse_grep_args",
]
