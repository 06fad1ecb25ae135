"""
Terminal abstraction.

Provides:
- Terminal: abstract base class (interface)
- ProcessTerminal: real terminal using sys.stdin/sys.stdout + raw mode
"""
from __future__ import annotations

import codecs
import logging
import os
import signal
import sys
import threading
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Terminal ABC
# ─────────────────────────────────────────────────────────────────────────────

class Terminal(ABC):
    """Minimal terminal interface used by the TUI render loop."""

    @abstractmethod
    def start(
        self,
        on_input: Callable[[str], None],
        on_resize: Callable[[], None],
    ) -> None:
        """Start the terminal with input and resize handlers."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the terminal and restore state."""

    @abstractmethod
    def write(self, data: str) -> None:
        """Write output to the terminal."""

    @property
    @abstractmethod
    def columns(self) -> int:
        """Terminal width in columns."""

    @property
    @abstractmethod
    def rows(self) -> int:
        """Terminal height in rows."""

    @abstractmethod
    def move_to(self, row: int, col: int) -> None:
        """Move the cursor to a 0-based (row, col) cell."""

    @abstractmethod
    def hide_cursor(self) -> None:
        """Hide the cursor."""

    @abstractmethod
    def show_cursor(self) -> None:
        """Show the cursor."""

    @abstractmethod
    def clear_screen(self) -> None:
        """Clear entire screen and move cursor to (0,0)."""

    @abstractmethod
    def set_title(self, title: str) -> None:
        """Set terminal window title."""


# ─────────────────────────────────────────────────────────────────────────────
# ProcessTerminal
# ─────────────────────────────────────────────────────────────────────────────

class ProcessTerminal(Terminal):
    """
    Real terminal using sys.stdin/sys.stdout.
    Enables raw mode and the alternate screen, and reports resizes via SIGWINCH.
    """

    def __init__(self) -> None:
        self._input_handler: Callable[[str], None] | None = None
        self._resize_handler: Callable[[], None] | None = None
        self._write_log_path = os.environ.get("TERM_PANE_WRITE_LOG", "")
        self._old_termios: list | None = None
        self._prev_sigwinch: object | None = None
        self._reading = False
        self._read_thread: threading.Thread | None = None

    def start(
        self,
        on_input: Callable[[str], None],
        on_resize: Callable[[], None],
    ) -> None:
        self._input_handler = on_input
        self._resize_handler = on_resize

        self._enable_raw_mode()

        # Alternate screen buffer
        self.write("\x1b[?1049h")

        if hasattr(signal, "SIGWINCH"):
            try:
                self._prev_sigwinch = signal.signal(signal.SIGWINCH, lambda *_: on_resize())
            except ValueError:
                # Not on the main thread
                logger.debug("Could not install SIGWINCH handler", exc_info=True)

        self._start_reader()

    def _enable_raw_mode(self) -> None:
        """Put stdin in raw mode (no echo, no line buffering)."""
        try:
            import termios
            import tty
        except ImportError:
            logger.debug("termios unavailable; staying in cooked mode")
            return
        try:
            fd = sys.stdin.fileno()
            self._old_termios = termios.tcgetattr(fd)
            tty.setraw(fd)
        except (OSError, ValueError, termios.error):
            logger.debug("stdin is not a tty; raw mode not enabled", exc_info=True)

    def _disable_raw_mode(self) -> None:
        if self._old_termios is None:
            return
        import termios
        try:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._old_termios)
        except (OSError, ValueError, termios.error):
            logger.debug("Failed to restore terminal attributes", exc_info=True)
        self._old_termios = None

    def _start_reader(self) -> None:
        """Read stdin on a background thread and forward decoded text."""
        import select

        try:
            fd = sys.stdin.fileno()
        except (OSError, ValueError):
            logger.debug("stdin has no file descriptor; input disabled")
            return

        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._reading = True

        def _read_loop() -> None:
            while self._reading:
                try:
                    r, _, _ = select.select([fd], [], [], 0.05)
                    if not r:
                        continue
                    data = os.read(fd, 1024)
                except (OSError, ValueError):
                    break
                if not data:
                    break
                text = decoder.decode(data)
                handler = self._input_handler
                if text and handler:
                    handler(text)

        t = threading.Thread(target=_read_loop, daemon=True)
        t.start()
        self._read_thread = t

    def stop(self) -> None:
        """Leave the alternate screen, remove handlers, restore raw mode."""
        self._reading = False
        self.write("\x1b[?25h\x1b[?1049l")

        self._input_handler = None
        self._resize_handler = None

        if self._prev_sigwinch is not None:
            try:
                signal.signal(signal.SIGWINCH, self._prev_sigwinch)
            except ValueError:
                logger.debug("Could not restore SIGWINCH handler", exc_info=True)
            self._prev_sigwinch = None

        self._disable_raw_mode()

    def write(self, data: str) -> None:
        sys.stdout.write(data)
        sys.stdout.flush()
        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                logger.warning("Cannot append to write log %s", self._write_log_path)
                self._write_log_path = ""

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size().columns
        except OSError:
            return int(os.environ.get("COLUMNS", "80"))

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size().lines
        except OSError:
            return int(os.environ.get("LINES", "24"))

    def move_to(self, row: int, col: int) -> None:
        self.write(f"\x1b[{row + 1};{col + 1}H")

    def hide_cursor(self) -> None:
        self.write("\x1b[?25l")

    def show_cursor(self) -> None:
        self.write("\x1b[?25h")

    def clear_screen(self) -> None:
        self.write("\x1b[2J\x1b[H")

    def set_title(self, title: str) -> None:
        self.write(f"\x1b]0;{title}\x07")
