"""
Cursor mapping: logical character offset in the input buffer to a
viewport-relative cell.

locate_cursor() exposes the unclamped arithmetic so callers can apply
their own origin; map_cursor() is the clamped form that answers
"where do I draw the cursor, if anywhere".
"""
from __future__ import annotations

from dataclasses import dataclass

from .utils import visible_width


@dataclass(frozen=True)
class CursorLocation:
    # Display column from the start of the prompt, before wrapping
    display_column: int
    row_within_input: int
    column: int
    absolute_row: int
    # May be negative or >= viewport_height when scrolled out of view
    row_in_viewport: int
    viewport_height: int
    width: int

    @property
    def visible(self) -> bool:
        return (
            self.width > 0
            and 0 <= self.row_in_viewport < self.viewport_height
            and 0 <= self.column < self.width
        )

    def to_screen(self, origin_x: int, origin_y: int) -> tuple[int, int] | None:
        """Translate to absolute (x, y) cells, or None when not visible."""
        if not self.visible:
            return None
        return origin_x + self.column, origin_y + self.row_in_viewport


def locate_cursor(
    prompt_width: int,
    input_text: str,
    cursor_char_offset: int,
    width: int,
    input_line_start: int,
    scroll_offset: int,
    viewport_height: int,
) -> CursorLocation:
    """
    Compute the cursor's wrapped position without clamping to the viewport.
    Out-of-range offsets are clamped to the input's bounds.
    """
    offset = max(0, min(cursor_char_offset, len(input_text)))
    display_column = prompt_width + visible_width(input_text[:offset])

    if width > 0:
        row_within_input, column = divmod(display_column, width)
    else:
        row_within_input, column = 0, 0

    absolute_row = input_line_start + row_within_input
    return CursorLocation(
        display_column=display_column,
        row_within_input=row_within_input,
        column=column,
        absolute_row=absolute_row,
        row_in_viewport=absolute_row - scroll_offset,
        viewport_height=max(0, viewport_height),
        width=width,
    )


def map_cursor(
    prompt_width: int,
    input_text: str,
    cursor_char_offset: int,
    width: int,
    input_line_start: int,
    scroll_offset: int,
    viewport_height: int,
) -> tuple[int, int] | None:
    """Return the viewport-relative (column, row) of the cursor, or None if hidden."""
    location = locate_cursor(
        prompt_width,
        input_text,
        cursor_char_offset,
        width,
        input_line_start,
        scroll_offset,
        viewport_height,
    )
    return location.to_screen(0, 0)
