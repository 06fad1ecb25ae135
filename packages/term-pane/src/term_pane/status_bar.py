"""Status bar — one row showing the current mode and working directory."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .state import AppMode, AppState
from .utils import pad_to_width, truncate_to_width, visible_width


def _black_on_cyan(text: str) -> str:
    return f"\x1b[30;46m{text}\x1b[0m"


def _gray(text: str) -> str:
    return f"\x1b[37m{text}\x1b[0m"


@dataclass
class StatusBarTheme:
    mode: Callable[[str], str] = field(default=_black_on_cyan)
    directory: Callable[[str], str] = field(default=_gray)


PLAIN_THEME = StatusBarTheme(mode=lambda x: x, directory=lambda x: x)


def mode_label(mode: AppMode) -> str:
    match mode:
        case AppMode.NORMAL:
            return "NORMAL"
        case AppMode.NAVIGATION_LIST:
            return "NAV"
        case AppMode.SHORTCUT_SELECTION:
            return "GOTO"


def render_status_bar(
    state: AppState,
    width: int,
    theme: StatusBarTheme | None = None,
) -> str:
    """
    Render the status bar as a single styled line exactly `width` columns wide.
    Truncation happens on the plain text, before styles are applied.
    """
    if width <= 0:
        return ""
    theme = theme or StatusBarTheme()

    badge = truncate_to_width(f" {mode_label(state.mode)} ", width, "")
    remaining = width - visible_width(badge)
    if remaining <= 0:
        return theme.mode(badge)

    directory = truncate_to_width(" " + str(state.current_dir), remaining, "…")
    return theme.mode(badge) + theme.directory(pad_to_width(directory, remaining))
