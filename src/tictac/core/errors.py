"""Domain errors raised by the history store and the game controller."""

from __future__ import annotations


class GameError(Exception):
    """Base class for every rejected game operation.

    A failed operation never changes game state.
    """

    #: True when a well-behaved display adapter can never trigger the error.
    is_caller_bug: bool = False


class InvalidCell(GameError):
    """Cell index outside the nine board positions."""

    is_caller_bug = True

    def __init__(self, cell_index: object) -> None:
        super().__init__(f"cell index {cell_index!r} is not in 0..8")
        self.cell_index = cell_index


class CellOccupied(GameError):
    """Move onto a cell that already holds a mark."""

    def __init__(self, cell_index: int) -> None:
        super().__init__(f"cell {cell_index} is already occupied")
        self.cell_index = cell_index


class GameOver(GameError):
    """Move attempted on a board that is already won or drawn."""

    def __init__(self, cell_index: int) -> None:
        super().__init__(f"game is over, move to cell {cell_index} rejected")
        self.cell_index = cell_index


class IndexOutOfRange(GameError):
    """Jump target outside the recorded history."""

    is_caller_bug = True

    def __init__(self, index: object, length: int) -> None:
        super().__init__(f"history index {index!r} is not in 0..{length - 1}")
        self.index = index
        self.length = length
