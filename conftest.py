"""
Root conftest.py — shared fixtures for the term_pane test suite.

Fixtures:
  mock_terminal  — in-memory Terminal that records writes and cursor moves
  make_state     — factory for AppState snapshots rooted in a fixed directory
"""
from __future__ import annotations

from pathlib import Path

import pytest

from term_pane.state import AppMode, AppState
from term_pane.terminal import Terminal


# ---------------------------------------------------------------------------
# Mock terminal
# ---------------------------------------------------------------------------

class MockTerminal(Terminal):
    """Terminal that keeps everything in memory."""

    def __init__(self, columns: int = 40, rows: int = 10) -> None:
        self._columns = columns
        self._rows = rows
        self._output: list[str] = []
        self.cursor_visible = False
        self.cursor_at: tuple[int, int] | None = None
        self.on_input = None
        self.on_resize = None
        self.started = False

    def start(self, on_input, on_resize) -> None:
        self.on_input = on_input
        self.on_resize = on_resize
        self.started = True

    def stop(self) -> None:
        self.started = False

    def write(self, data: str) -> None:
        self._output.append(data)

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    def resize(self, columns: int, rows: int) -> None:
        self._columns = columns
        self._rows = rows

    def move_to(self, row: int, col: int) -> None:
        self.cursor_at = (row, col)

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.cursor_visible = True

    def clear_screen(self) -> None:
        self._output.append("\x1b[2J\x1b[H")

    def set_title(self, title: str) -> None:
        pass

    def get_output(self) -> str:
        return "".join(self._output)

    def clear_output(self) -> None:
        self._output.clear()


@pytest.fixture
def mock_terminal() -> MockTerminal:
    return MockTerminal()


# ---------------------------------------------------------------------------
# State snapshots
# ---------------------------------------------------------------------------

@pytest.fixture
def make_state():
    """Build snapshots in a directory outside $HOME so the prompt is predictable."""

    def _make(
        output=(),
        input: str = "",
        cursor_pos: int | None = None,
        mode: AppMode = AppMode.NORMAL,
        current_dir: Path = Path("/srv"),
    ) -> AppState:
        return AppState.snapshot(
            output,
            input=input,
            cursor_pos=len(input) if cursor_pos is None else cursor_pos,
            current_dir=current_dir,
            mode=mode,
        )

    return _make
