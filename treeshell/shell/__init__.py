"""Interactive command layer over the storage engine.

Parses shell-like command lines, dispatches them to the engine and the grep
engine, renders results and records command history.
"""

from __future__ import annotations

from .commands import Command, GrepRequest, parse_command_line, parse_grep_args, parse_write_args
from .dispatch import Shell, ShellReply

__all__ = [
    "Command",
    "GrepRequest",
    "Shell",
    "ShellReply",
    "parse_command_line",
    "parse_grep_args",
    "parse_write_args",
]
