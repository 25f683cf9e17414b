"""Outcome evaluation and turn derivation.

Both are pure functions of their input: nothing about the winner or the
side to move is ever stored.
"""

from __future__ import annotations

from dataclasses import dataclass

from tictac.core.board import Snapshot
from tictac.core.enums import Mark, OutcomeKind

Line = tuple[int, int, int]

# Enumeration order is the tie-break when both marks complete a line.
WINNING_LINES: tuple[Line, ...] = (
    # rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True, slots=True)
class Outcome:
    """Evaluation result for a single snapshot."""

    kind: OutcomeKind
    winner: Mark | None = None
    winning_line: Line | None = None

    @property
    def is_in_progress(self) -> bool:
        return self.kind == OutcomeKind.IN_PROGRESS

    @property
    def is_win(self) -> bool:
        return self.kind == OutcomeKind.WIN

    @property
    def is_draw(self) -> bool:
        return self.kind == OutcomeKind.DRAW


IN_PROGRESS = Outcome(OutcomeKind.IN_PROGRESS)
DRAW = Outcome(OutcomeKind.DRAW)


def evaluate(snapshot: Snapshot) -> Outcome:
    """Win for the first completed line, else draw on a full board."""
    for line in WINNING_LINES:
        a, b, c = line
        mark = snapshot[a]
        if mark is not Mark.EMPTY and mark is snapshot[b] and mark is snapshot[c]:
            return Outcome(OutcomeKind.WIN, mark, line)
    if snapshot.is_full:
        return DRAW
    return IN_PROGRESS


def turn_for(index: int) -> Mark:
    """Mark placed by the move made from history position *index*.

    X always moves first and the players strictly alternate.
    """
    if index < 0:
        raise ValueError(f"history index must be non-negative, got {index}")
    return Mark.X if index % 2 == 0 else Mark.O
