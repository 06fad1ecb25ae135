"""Read-only application-state snapshot consumed by the renderer."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable


class AppMode(Enum):
    NORMAL = "normal"
    NAVIGATION_LIST = "navigation_list"
    SHORTCUT_SELECTION = "shortcut_selection"


def display_dir(path: Path) -> str:
    """Render a directory for the prompt, abbreviating the home directory to ~."""
    try:
        home = Path.home()
    except RuntimeError:
        return str(path)
    if path == home:
        return "~"
    try:
        return str(Path("~") / path.relative_to(home))
    except ValueError:
        return str(path)


@dataclass(frozen=True)
class AppState:
    """
    Immutable view of the application state for one render pass.
    The input handler owns the live state and hands a fresh snapshot to
    the renderer each frame.
    """
    output: tuple[str, ...] = ()
    input: str = ""
    # Character index into `input`, not a byte offset
    cursor_pos: int = 0
    current_dir: Path = field(default_factory=Path.cwd)
    mode: AppMode = AppMode.NORMAL
    prompt_symbol: str = ">"

    @classmethod
    def snapshot(
        cls,
        output: Iterable[str],
        input: str = "",
        cursor_pos: int = 0,
        current_dir: Path | None = None,
        mode: AppMode = AppMode.NORMAL,
        prompt_symbol: str = ">",
    ) -> AppState:
        return cls(
            output=tuple(output),
            input=input,
            cursor_pos=cursor_pos,
            current_dir=current_dir if current_dir is not None else Path.cwd(),
            mode=mode,
            prompt_symbol=prompt_symbol,
        )

    def prompt(self) -> str:
        return f"{display_dir(self.current_dir)} {self.prompt_symbol} "
