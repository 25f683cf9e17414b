"""Core domain layer — pure tic-tac-toe logic with zero external dependencies.

Quick start::

    from tictac.core import Snapshot, evaluate, turn_for

    board = Snapshot.from_string("XXX/OO./...")
    evaluate(board).winner   # Mark.X
    turn_for(5)              # Mark.O
"""

from tictac.core.board import BOARD_SIZE, CELL_COUNT, Snapshot
from tictac.core.enums import Mark, OutcomeKind
from tictac.core.errors import (
    CellOccupied,
    GameError,
    GameOver,
    IndexOutOfRange,
    InvalidCell,
)
from tictac.core.rules import WINNING_LINES, Outcome, evaluate, turn_for

__all__ = [
    # Enums
    "Mark",
    "OutcomeKind",
    # Board
    "BOARD_SIZE",
    "CELL_COUNT",
    "Snapshot",
    # Rules
    "WINNING_LINES",
    "Outcome",
    "evaluate",
    "turn_for",
    # Errors
    "CellOccupied",
    "GameError",
    "GameOver",
    "IndexOutOfRange",
    "InvalidCell",
]
