"""UI theme definitions and selection helpers.

Themes are ANSI palettes for shell output (listings, trees, grep hits, help).
Syntax highlighting style for ``cat`` remains a separate Pygments setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    prompt_path: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    grep_header: str
    grep_line_number: str
    grep_count: str
    message_ok: str
    message_error: str
    help_heading: str
    help_key: str
    help_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    prompt_path="\033[1;38;5;81m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    grep_header="\033[1;38;5;214m",
    grep_line_number="\033[38;5;42m",
    grep_count="\033[1;38;5;229m",
    message_ok="\033[38;5;42m",
    message_error="\033[38;5;203m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    prompt_path="\033[1;38;5;45m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;153m",
    grep_header="\033[1;38;5;117m",
    grep_line_number="\033[38;5;73m",
    grep_count="\033[1;38;5;45m",
    message_ok="\033[38;5;84m",
    message_error="\033[38;5;209m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    prompt_path="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    grep_header="",
    grep_line_number="",
    grep_count="",
    message_ok="",
    message_error="",
    help_heading="",
    help_key="",
    help_dim="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
