"""
Viewport layout: wrap the output history plus the live input line and
select the visual lines that fit, biased toward the bottom.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .wrap import wrap_line


@dataclass(frozen=True)
class Layout:
    visible_lines: list[str]
    scroll_offset: int
    # Index of the first visual line of the input, within all visual lines
    input_line_start: int
    total_lines: int

    @property
    def input_line_count(self) -> int:
        return self.total_lines - self.input_line_start


def compute_layout(
    output_lines: Iterable[str],
    input_line: str,
    width: int,
    viewport_height: int,
) -> Layout:
    """
    Lay out output history followed by the input line (prompt + typed text).

    scroll_offset is recomputed from scratch on every call as
    max(0, total - viewport_height), and visible_lines never holds more
    than viewport_height entries.
    """
    height = max(0, viewport_height)

    visual_lines: list[str] = []
    for line in output_lines:
        visual_lines.extend(wrap_line(line, width))

    input_line_start = len(visual_lines)
    visual_lines.extend(wrap_line(input_line, width))

    total = len(visual_lines)
    scroll_offset = max(0, total - height)

    return Layout(
        visible_lines=visual_lines[scroll_offset:scroll_offset + height],
        scroll_offset=scroll_offset,
        input_line_start=input_line_start,
        total_lines=total,
    )
