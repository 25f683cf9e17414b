"""Core enumerations for the tic-tac-toe domain."""

from __future__ import annotations

from enum import IntEnum


class Mark(IntEnum):
    """Content of a single cell."""

    EMPTY = 0
    X = 1
    O = 2  # noqa: E741

    @property
    def symbol(self) -> str:
        return "" if self is Mark.EMPTY else self.name

    def __str__(self) -> str:
        return self.symbol or "."


class OutcomeKind(IntEnum):
    """Result of evaluating a board."""

    IN_PROGRESS = 0
    WIN = 1
    DRAW = 2
