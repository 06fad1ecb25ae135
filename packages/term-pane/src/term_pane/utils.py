"""
Terminal display-width utilities.

Provides:
- char_width(): terminal column width of a single character
- visible_width(): terminal column width of a string
- truncate_to_width(): cut a plain string to a display width
- pad_to_width(): right-pad a plain string to a display width
"""
from __future__ import annotations

from wcwidth import wcwidth as _wcwidth

# ─────────────────────────────────────────────────────────────────────────────
# Width cache
# ─────────────────────────────────────────────────────────────────────────────
_WIDTH_CACHE_SIZE = 512
_width_cache: dict[str, int] = {}
_width_cache_order: list[str] = []


def char_width(ch: str) -> int:
    """
    Column width of one character: 0, 1 or 2.
    Control and unmeasurable characters count as zero columns.
    """
    w = _wcwidth(ch)
    if w < 0:
        return 0
    return w


def visible_width(s: str) -> int:
    """Calculate the terminal column width of a string."""
    if not s:
        return 0

    # Fast path: pure ASCII printable
    if all(0x20 <= ord(c) <= 0x7e for c in s):
        return len(s)

    cached = _width_cache.get(s)
    if cached is not None:
        return cached

    width = sum(char_width(c) for c in s)

    if len(_width_cache) >= _WIDTH_CACHE_SIZE:
        oldest = _width_cache_order.pop(0) if _width_cache_order else next(iter(_width_cache))
        _width_cache.pop(oldest, None)
    _width_cache[s] = width
    _width_cache_order.append(s)

    return width


def truncate_to_width(text: str, max_width: int, ellipsis: str = "...") -> str:
    """
    Truncate text to fit within max_width display columns.
    The ellipsis is appended only when something was cut and it fits.
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    ellipsis_width = visible_width(ellipsis)
    if ellipsis_width > max_width:
        ellipsis = ""
        ellipsis_width = 0
    target = max_width - ellipsis_width

    result: list[str] = []
    current = 0
    for ch in text:
        w = char_width(ch)
        if current + w > target:
            break
        result.append(ch)
        current += w
    return "".join(result) + ellipsis


def pad_to_width(text: str, width: int) -> str:
    """Right-pad text with spaces up to width display columns."""
    return text + " " * max(0, width - visible_width(text))
