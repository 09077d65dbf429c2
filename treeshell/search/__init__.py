"""Search package exports.

Line-oriented pattern search over the in-memory file bodies.
"""

from __future__ import annotations

from .grep import GrepEngine, GrepMatch, GrepOptions, GrepReport, LineMatcher, split_lines

__all__ = [
    "GrepEngine",
    "GrepMatch",
    "GrepOptions",
    "GrepReport",
    "LineMatcher",
    "split_lines",
]
