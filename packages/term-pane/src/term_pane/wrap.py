"""Width-driven line wrapping."""
from __future__ import annotations

from .utils import char_width


def wrap_line(line: str, width: int) -> list[str]:
    """
    Wrap a logical line into visual lines of at most `width` columns.

    Wrapping is purely column-driven: no word boundaries, no whitespace
    trimming. A character wider than `width` on its own still gets a
    visual line of its own. Always returns at least one line, and
    width 0 yields a single empty line.
    """
    if width <= 0:
        return [""]

    result: list[str] = []
    current: list[str] = []
    current_width = 0

    for ch in line:
        w = char_width(ch)
        if current_width + w > width and current:
            result.append("".join(current))
            current = []
            current_width = 0
        current.append(ch)
        current_width += w

    result.append("".join(current))
    return result
