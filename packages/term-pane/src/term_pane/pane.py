"""
Terminal pane — the drawing entry point.

Lays out the output history and the live input line inside a bordered
block, paints the visible lines, and places the text cursor when it is
on screen.
"""
from __future__ import annotations

from .cursor import CursorLocation, locate_cursor
from .frame import Frame, Rect
from .layout import compute_layout
from .state import AppState
from .status_bar import StatusBarTheme, render_status_bar
from .utils import visible_width

PANE_TITLE = " Terminal "


def render_terminal(frame: Frame, area: Rect, state: AppState) -> CursorLocation | None:
    """
    Render the terminal pane into `area`.

    Returns the cursor location within the inner area, or None when the
    pane has no room for text. The frame cursor is only set when the
    location is visible.
    """
    frame.draw_block(area, PANE_TITLE)
    inner = area.inner()
    if inner.width <= 0 or inner.height <= 0:
        return None

    prompt = state.prompt()
    layout = compute_layout(state.output, prompt + state.input, inner.width, inner.height)
    frame.draw_text(inner, layout.visible_lines)

    location = locate_cursor(
        prompt_width=visible_width(prompt),
        input_text=state.input,
        cursor_char_offset=state.cursor_pos,
        width=inner.width,
        input_line_start=layout.input_line_start,
        scroll_offset=layout.scroll_offset,
        viewport_height=inner.height,
    )
    screen = location.to_screen(inner.x, inner.y)
    if screen is not None:
        frame.set_cursor(*screen)
    return location


def render_status_bar_into(
    frame: Frame,
    area: Rect,
    state: AppState,
    theme: StatusBarTheme | None = None,
) -> None:
    """Paint the status bar on the first row of `area`."""
    if area.height <= 0 or area.width <= 0:
        return
    frame.set_line(area.y, render_status_bar(state, area.width, theme))
