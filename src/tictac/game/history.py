"""HistoryStore — the timeline of board snapshots and the viewing index."""

from __future__ import annotations

import logging

from tictac.core.board import CELL_COUNT, Snapshot
from tictac.core.enums import Mark
from tictac.core.errors import CellOccupied, GameOver, IndexOutOfRange, InvalidCell
from tictac.core.rules import evaluate, turn_for

_LOGGER = logging.getLogger(__name__)


class HistoryStore:
    """Owns the ordered snapshots reached so far and the current index.

    Index 0 is always the empty board, so the history is never empty.
    Moving from an earlier index discards everything after it: the old
    future is dropped, not kept as a branch.

    Not thread-safe: :meth:`apply_move` is a read-modify-write on
    ``(history, current_index)``.
    """

    __slots__ = ("_history", "_current_index")

    def __init__(self) -> None:
        self._history: list[Snapshot] = [Snapshot.empty()]
        self._current_index = 0

    # ── Read model ───────────────────────────────────────────────────────

    def current(self) -> Snapshot:
        return self._history[self._current_index]

    def history_length(self) -> int:
        return len(self._history)

    def current_index_value(self) -> int:
        return self._current_index

    def snapshots(self) -> tuple[Snapshot, ...]:
        """Read-only view of the live timeline."""
        return tuple(self._history)

    @property
    def is_at_tail(self) -> bool:
        return self._current_index == len(self._history) - 1

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_move(self, cell_index: int) -> Snapshot:
        """Place the next mark on *cell_index* and return the new snapshot.

        Raises:
            InvalidCell: *cell_index* is not one of the nine positions.
            CellOccupied: the cell already holds a mark.
            GameOver: the current snapshot is already won or drawn.
        """
        if (
            not isinstance(cell_index, int)
            or isinstance(cell_index, bool)
            or not 0 <= cell_index < CELL_COUNT
        ):
            raise InvalidCell(cell_index)

        snapshot = self.current()
        if snapshot[cell_index] is not Mark.EMPTY:
            raise CellOccupied(cell_index)
        if not evaluate(snapshot).is_in_progress:
            raise GameOver(cell_index)

        mark = turn_for(self._current_index)
        new_snapshot = snapshot.with_mark(cell_index, mark)

        keep = self._current_index + 1
        if keep < len(self._history):
            _LOGGER.debug(
                "Discarding %d future snapshot(s) after index %d",
                len(self._history) - keep,
                self._current_index,
            )
            del self._history[keep:]

        self._history.append(new_snapshot)
        self._current_index = len(self._history) - 1
        _LOGGER.debug(
            "%s -> cell %d (index %d): %s",
            mark.symbol,
            cell_index,
            self._current_index,
            new_snapshot,
        )
        return new_snapshot

    def jump_to(self, index: int) -> None:
        """Move the viewing index without altering the stored history.

        Raises:
            IndexOutOfRange: *index* is outside ``[0, history_length() - 1]``.
        """
        if (
            not isinstance(index, int)
            or isinstance(index, bool)
            or not 0 <= index < len(self._history)
        ):
            raise IndexOutOfRange(index, len(self._history))
        self._current_index = index
        _LOGGER.debug("Viewing index %d of %d", index, len(self._history) - 1)

    def reset(self) -> None:
        """Drop the whole timeline and start from the empty board."""
        self._history = [Snapshot.empty()]
        self._current_index = 0
