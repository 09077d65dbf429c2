"""File-body sanitization and syntax highlighting for ``cat``.

Pygments picks a lexer from the file name and falls back to plain text.
Terminal control bytes are neutralized before anything is printed.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_STYLE

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


@lru_cache(maxsize=None)
def normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> TerminalFormatter:
    return TerminalFormatter(style=style)


def lexer_for(file_name: str, source: str) -> Lexer:
    try:
        return get_lexer_for_filename(file_name, source)
    except ClassNotFound:
        return TextLexer()


def colorize_content(source: str, file_name: str, style: str = DEFAULT_STYLE, *, no_color: bool = False) -> str:
    """Return ``source`` ready for the terminal, highlighted unless ``no_color``."""
    clean = sanitize_terminal_text(source)
    if no_color or not clean:
        return clean
    formatter = _formatter_for_style(normalize_style(style))
    rendered = pygments_highlight(clean, lexer_for(file_name, clean), formatter)
    # Pygments always terminates output with a newline.
    if not clean.endswith("\n") and rendered.endswith("\n"):
        rendered = rendered[:-1]
    return rendered


__all__ = [
    "sanitize_terminal_text",
    "normalize_style",
    "lexer_for",
    "colorize_content",
]
