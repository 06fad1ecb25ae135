"""
Frame — an in-memory cell buffer for one render pass.

Provides:
- Rect: a rectangular region of cells
- Frame: draw text clipped to a rect, draw bordered blocks, place the
  cursor, and serialize rows for the terminal
"""
from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass

from .utils import char_width

logger = logging.getLogger(__name__)

# Placeholder for the right half of a double-width glyph
_WIDE_TAIL = ""


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self) -> Rect:
        """The area inside a one-cell border."""
        return Rect(
            x=self.x + 1,
            y=self.y + 1,
            width=max(0, self.width - 2),
            height=max(0, self.height - 2),
        )

    def split_bottom(self, rows: int) -> tuple[Rect, Rect]:
        """Split off `rows` rows at the bottom. Returns (top, bottom)."""
        rows = max(0, min(rows, self.height))
        top = Rect(self.x, self.y, self.width, self.height - rows)
        bottom = Rect(self.x, self.y + self.height - rows, self.width, rows)
        return top, bottom


class Frame:
    """
    Cell buffer of a fixed size. Each cell holds the text painted there:
    one glyph plus any zero-width marks attached to it.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._cells: list[list[str]] = [[" "] * self.width for _ in range(self.height)]
        self._raw_lines: dict[int, str] = {}
        self._cursor: tuple[int, int] | None = None

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    @property
    def cursor(self) -> tuple[int, int] | None:
        return self._cursor

    def set_cursor(self, x: int, y: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cursor = (x, y)
        else:
            logger.debug("Cursor (%d, %d) outside %dx%d frame", x, y, self.width, self.height)
            self._cursor = None

    def hide_cursor(self) -> None:
        self._cursor = None

    def draw_text(self, rect: Rect, lines: list[str]) -> None:
        """Paint lines top-to-bottom starting at rect's top-left, clipped to rect."""
        clip = self._clip(rect)
        for i, line in enumerate(lines):
            y = rect.y + i
            if y >= clip.bottom:
                break
            if y < clip.y:
                continue
            self._draw_line(line, rect.x, y, clip)

    def _draw_line(self, line: str, x: int, y: int, clip: Rect) -> None:
        row = self._cells[y]
        self._raw_lines.pop(y, None)
        col = x
        last = -1
        for ch in line:
            w = char_width(ch)
            if w == 0:
                if unicodedata.category(ch) == "Cc":
                    continue
                # Zero-width marks join the glyph before them
                if last >= 0:
                    row[last] += ch
                continue
            if col + w > clip.right:
                break
            if col >= clip.x:
                self._put(row, col, ch, w)
                last = col
            col += w

    def _put(self, row: list[str], col: int, ch: str, w: int) -> None:
        # Never leave half of a wide glyph behind
        if row[col] == _WIDE_TAIL and col > 0:
            row[col - 1] = " "
        end = col + w
        if end < len(row) and row[end] == _WIDE_TAIL:
            row[end] = " "
        row[col] = ch
        if w == 2:
            row[col + 1] = _WIDE_TAIL

    def draw_block(self, rect: Rect, title: str = "") -> None:
        """Draw a box border around rect with an optional title on the top edge."""
        if rect.width < 2 or rect.height < 2:
            return
        horizontal = "─" * (rect.width - 2)
        top = "┌" + horizontal + "┐"
        if title:
            top = "┌" + (title + horizontal)[: rect.width - 2] + "┐"
        self.draw_text(Rect(rect.x, rect.y, rect.width, 1), [top])
        for y in range(rect.y + 1, rect.bottom - 1):
            self.draw_text(Rect(rect.x, y, 1, 1), ["│"])
            self.draw_text(Rect(rect.right - 1, y, 1, 1), ["│"])
        self.draw_text(Rect(rect.x, rect.bottom - 1, rect.width, 1), ["└" + horizontal + "┘"])

    def set_line(self, row: int, text: str) -> None:
        """
        Replace a whole row with pre-rendered text (may carry SGR styling).
        The caller is responsible for its width.
        """
        if 0 <= row < self.height:
            self._raw_lines[row] = text

    def to_lines(self) -> list[str]:
        lines: list[str] = []
        for y, row in enumerate(self._cells):
            raw = self._raw_lines.get(y)
            lines.append(raw if raw is not None else "".join(row))
        return lines

    def _clip(self, rect: Rect) -> Rect:
        x = max(0, rect.x)
        y = max(0, rect.y)
        right = min(self.width, rect.right)
        bottom = min(self.height, rect.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))
