"""
term_pane — scrollable, line-wrapped terminal pane with cursor mapping.
"""
from .cursor import CursorLocation, locate_cursor, map_cursor
from .frame import Frame, Rect
from .layout import Layout, compute_layout
from .pane import PANE_TITLE, render_status_bar_into, render_terminal
from .state import AppMode, AppState, display_dir
from .status_bar import PLAIN_THEME, StatusBarTheme, mode_label, render_status_bar
from .terminal import ProcessTerminal, Terminal
from .tui import TUI
from .utils import char_width, pad_to_width, truncate_to_width, visible_width
from .wrap import wrap_line

__all__ = [
    # cursor
    "CursorLocation",
    "locate_cursor",
    "map_cursor",
    # frame
    "Frame",
    "Rect",
    # layout
    "Layout",
    "compute_layout",
    # pane
    "PANE_TITLE",
    "render_status_bar_into",
    "render_terminal",
    # state
    "AppMode",
    "AppState",
    "display_dir",
    # status bar
    "PLAIN_THEME",
    "StatusBarTheme",
    "mode_label",
    "render_status_bar",
    # terminal
    "ProcessTerminal",
    "Terminal",
    # tui
    "TUI",
    # utils
    "char_width",
    "pad_to_width",
    "truncate_to_width",
    "visible_width",
    # wrap
    "wrap_line",
]
