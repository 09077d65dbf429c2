"""Command-line front door for treeshell.

Parses CLI options, builds a fresh engine and shell, then either runs the
commands given with ``-c`` or reads commands from stdin until EOF or ``exit``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from .config import load_history_size, load_style_name, load_theme_name
from .history import HistoryLog
from .render import format_help
from .shell import Shell
from .storage import StorageEngine
from .ui_theme import available_theme_names

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treeshell",
        description="Shell-like commands over an in-memory folder and file tree.",
    )
    parser.add_argument(
        "-c",
        "--command",
        dest="commands",
        action="append",
        default=None,
        metavar="LINE",
        help="Run LINE and exit (repeatable; commands run in order on one tree).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name used by cat.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--history-size",
        type=_positive_int,
        default=None,
        help="Maximum number of history entries kept.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Log level for diagnostics written to stderr.",
    )
    return parser


def run_commands(shell: Shell, lines: list[str], output: TextIO) -> None:
    for line in lines:
        reply = shell.execute(line)
        for text in reply.lines:
            output.write(text + "\n")
        if reply.exit:
            return


def run_repl(shell: Shell, input_stream: TextIO, output: TextIO, show_prompt: bool = True) -> None:
    """Read and execute commands until EOF or an exit command."""
    while True:
        if show_prompt:
            output.write(shell.prompt())
            output.flush()
        line = input_stream.readline()
        if not line:
            if show_prompt:
                output.write("\n")
            return
        reply = shell.execute(line)
        for text in reply.lines:
            output.write(text + "\n")
        if reply.exit:
            return


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the shell.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used. With no
    ``-c`` commands the shell reads stdin, showing a prompt only on a TTY.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT, stream=sys.stderr)

    interactive = args.commands is None and sys.stdin.isatty()
    no_color = args.no_color or not sys.stdout.isatty()
    shell = Shell(
        engine=StorageEngine(),
        history=HistoryLog(args.history_size or load_history_size()),
        theme_name=args.theme or load_theme_name(),
        style=args.style or load_style_name(),
        no_color=no_color,
    )

    if args.commands is not None:
        run_commands(shell, args.commands, sys.stdout)
        return

    if interactive:
        for text in format_help(shell.theme):
            sys.stdout.write(text + "\n")
    try:
        run_repl(shell, sys.stdin, sys.stdout, show_prompt=interactive)
    except KeyboardInterrupt:
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
