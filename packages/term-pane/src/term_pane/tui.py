"""
TUI — render loop for the terminal pane.

Each render pass takes a fresh AppState snapshot, paints it into a Frame
the size of the terminal and writes only the rows that changed since
the previous pass.
"""
from __future__ import annotations

import asyncio
import logging
import os
from typing import Callable

from .frame import Frame
from .pane import render_status_bar_into, render_terminal
from .state import AppState
from .status_bar import StatusBarTheme
from .terminal import Terminal

logger = logging.getLogger(__name__)

StateProvider = Callable[[], AppState]
InputHandler = Callable[[str], None]

_SYNC_BEGIN = "\x1b[?2026h"
_SYNC_END = "\x1b[?2026l"


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default) == "1"


class TUI:
    """
    Drives rendering of the terminal pane on an asyncio event loop.

    Input handling is not done here: raw input is passed to `on_input`,
    which is expected to update the application state and call
    request_render().
    """

    def __init__(
        self,
        terminal: Terminal,
        get_state: StateProvider,
        theme: StatusBarTheme | None = None,
        show_status_bar: bool | None = None,
        show_hardware_cursor: bool | None = None,
    ) -> None:
        self.terminal = terminal
        self._get_state = get_state
        self._theme = theme

        env_status = _env_flag("TERM_PANE_STATUS_BAR", "1")
        self._show_status_bar = show_status_bar if show_status_bar is not None else env_status
        env_cursor = _env_flag("TERM_PANE_HARDWARE_CURSOR", "1")
        self._show_hardware_cursor = show_hardware_cursor if show_hardware_cursor is not None else env_cursor

        self.on_input: InputHandler | None = None

        self._previous_lines: list[str] = []
        self._previous_size: tuple[int, int] = (0, 0)
        self._render_requested = False
        self._full_redraw_count = 0
        self._stopped = False
        self._main_loop: asyncio.AbstractEventLoop | None = None

    @property
    def stopped(self) -> bool:
        return self._stopped

    @property
    def full_redraws(self) -> int:
        return self._full_redraw_count

    def start(self) -> None:
        self._stopped = False
        # Remember the loop so request_render() can be called from the
        # terminal's reader thread.
        try:
            self._main_loop = asyncio.get_running_loop()
        except RuntimeError:
            self._main_loop = None
        self.terminal.start(self._handle_input, lambda: self.request_render(force=True))
        self.terminal.hide_cursor()
        self.request_render()

    def stop(self) -> None:
        self._stopped = True
        self.terminal.show_cursor()
        self.terminal.stop()

    def _handle_input(self, data: str) -> None:
        if self.on_input:
            self.on_input(data)

    def request_render(self, force: bool = False) -> None:
        if force:
            self._previous_lines = []
            self._previous_size = (0, 0)
        if self._render_requested:
            return
        self._render_requested = True

        loop = self._main_loop
        if loop is not None and loop.is_running():
            try:
                running = asyncio.get_running_loop()
            except RuntimeError:
                running = None
            if running is loop:
                loop.call_soon(self._render_tick)
            else:
                loop.call_soon_threadsafe(self._render_tick)
            return

        try:
            cur = asyncio.get_running_loop()
        except RuntimeError:
            cur = None
        if cur is not None:
            cur.call_soon(self._render_tick)
            return

        # Synchronous fallback
        self._render_requested = False
        try:
            self._do_render()
        except Exception:
            logger.exception("Synchronous _do_render fallback failed")
            raise

    def _render_tick(self) -> None:
        self._render_requested = False
        try:
            self._do_render()
        except Exception:
            logger.exception("_do_render raised an exception")
            raise

    def render_frame(self, width: int, height: int) -> Frame:
        """Paint the current state into a new frame of the given size."""
        state = self._get_state()
        frame = Frame(width, height)
        pane_area = frame.area
        if self._show_status_bar and height > 1:
            pane_area, status_area = frame.area.split_bottom(1)
            render_status_bar_into(frame, status_area, state, self._theme)
        render_terminal(frame, pane_area, state)
        return frame

    def _do_render(self) -> None:
        if self._stopped:
            return

        width = self.terminal.columns
        height = self.terminal.rows
        frame = self.render_frame(width, height)
        new_lines = frame.to_lines()

        size_changed = self._previous_size != (width, height)
        buf = _SYNC_BEGIN
        if size_changed or not self._previous_lines:
            self._full_redraw_count += 1
            buf += "\x1b[2J"
            changed = range(len(new_lines))
        else:
            changed = [
                i for i, line in enumerate(new_lines)
                if i >= len(self._previous_lines) or self._previous_lines[i] != line
            ]

        for row in changed:
            buf += f"\x1b[{row + 1};1H\x1b[2K" + new_lines[row] + "\x1b[0m"
        buf += _SYNC_END
        self.terminal.write(buf)

        self._position_hardware_cursor(frame.cursor)
        self._previous_lines = new_lines
        self._previous_size = (width, height)

    def _position_hardware_cursor(self, cursor: tuple[int, int] | None) -> None:
        if cursor is None or not self._show_hardware_cursor:
            self.terminal.hide_cursor()
            return
        x, y = cursor
        self.terminal.move_to(y, x)
        self.terminal.show_cursor()
