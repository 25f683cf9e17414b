"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from tictac.core.enums import Mark


def _default_symbols() -> dict[Mark, str]:
    return {Mark.X: "X", Mark.O: "O"}


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    window_title: str = "Tic-Tac-Toe"
    start_tab: str = "game"  # "game" | "products"
    log_level: str = "WARNING"

    # Board
    mark_symbols: dict[Mark, str] = field(default_factory=_default_symbols)
    board_theme: str = "light"  # "light" | "dark"
    highlight_winning_line: bool = True
