"""Read-model types handed to the display layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

from tictac.core.enums import Mark


@dataclass(frozen=True, slots=True)
class Win:
    """The current snapshot has a completed line for *mark*."""

    mark: Mark
    kind: ClassVar[Literal["win"]] = "win"


@dataclass(frozen=True, slots=True)
class Draw:
    """The current snapshot is full with no completed line."""

    kind: ClassVar[Literal["draw"]] = "draw"


@dataclass(frozen=True, slots=True)
class Next:
    """Game in progress; *mark* plays the next move."""

    mark: Mark
    kind: ClassVar[Literal["next"]] = "next"


Status = Win | Draw | Next


def status_text(status: Status, symbols: dict[Mark, str] | None = None) -> str:
    """Human-readable status line, e.g. ``"Next player: X"``.

    *symbols* overrides how each mark is spelled.
    """
    if isinstance(status, Draw):
        return "Draw"
    symbol = (symbols or {}).get(status.mark, status.mark.symbol)
    if isinstance(status, Win):
        return f"Winner: {symbol}"
    return f"Next player: {symbol}"


@dataclass(frozen=True, slots=True)
class Moment:
    """One jump target in the history list."""

    index: int
    is_current: bool

    @property
    def label(self) -> str:
        if self.index == 0:
            return "Go to game start"
        return f"Go to move #{self.index}"
