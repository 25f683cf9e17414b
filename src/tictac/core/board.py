"""Snapshot — one immutable 3×3 board configuration."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from tictac.core.enums import Mark

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

_CHAR_TO_MARK: dict[str, Mark] = {
    ".": Mark.EMPTY,
    "-": Mark.EMPTY,
    " ": Mark.EMPTY,
    "X": Mark.X,
    "O": Mark.O,
}


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Nine cells in row-major order, index 0 is the top-left corner.

    Never mutated: :meth:`with_mark` returns a new snapshot.
    """

    cells: tuple[Mark, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise ValueError(
                f"snapshot needs {CELL_COUNT} cells, got {len(self.cells)}"
            )
        object.__setattr__(self, "cells", tuple(Mark(c) for c in self.cells))

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def empty(cls) -> Snapshot:
        return cls((Mark.EMPTY,) * CELL_COUNT)

    @classmethod
    def from_string(cls, text: str) -> Snapshot:
        """Parse the compact form, e.g. ``"XO..X...O"`` (``/`` separators allowed)."""
        chars = [ch for ch in text.upper() if ch != "/"]
        try:
            return cls(tuple(_CHAR_TO_MARK[ch] for ch in chars))
        except KeyError as exc:
            raise ValueError(f"invalid cell character {exc.args[0]!r}") from None

    def with_mark(self, index: int, mark: Mark) -> Snapshot:
        """Copy of this snapshot with *mark* placed at *index*."""
        cells = list(self.cells)
        cells[index] = mark
        return Snapshot(tuple(cells))

    # ── Queries ──────────────────────────────────────────────────────────

    def __getitem__(self, index: int) -> Mark:
        return self.cells[index]

    def __iter__(self) -> Iterator[Mark]:
        return iter(self.cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def __str__(self) -> str:
        return "".join(str(c) for c in self.cells)

    @property
    def is_full(self) -> bool:
        return Mark.EMPTY not in self.cells
