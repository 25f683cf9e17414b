"""Tests for HistoryStore."""

import pytest

from tictac.core.board import Snapshot
from tictac.core.enums import Mark
from tictac.core.errors import CellOccupied, GameOver, IndexOutOfRange, InvalidCell
from tictac.game.history import HistoryStore


def _played(*cells: int) -> HistoryStore:
    store = HistoryStore()
    for cell in cells:
        store.apply_move(cell)
    return store


class TestInitialState:
    def test_single_empty_snapshot(self) -> None:
        store = HistoryStore()
        assert store.history_length() == 1
        assert store.current_index_value() == 0
        assert store.current() == Snapshot.empty()
        assert store.is_at_tail


class TestApplyMove:
    def test_places_marks_alternately(self) -> None:
        store = _played(4, 0)
        assert store.current()[4] is Mark.X
        assert store.current()[0] is Mark.O

    def test_returns_new_snapshot_and_advances(self) -> None:
        store = HistoryStore()
        snap = store.apply_move(8)
        assert snap is store.current()
        assert store.history_length() == 2
        assert store.current_index_value() == 1

    def test_each_step_changes_one_cell(self) -> None:
        store = _played(0, 4, 1, 7)
        snaps = store.snapshots()
        for before, after in zip(snaps, snaps[1:]):
            changed = [i for i in range(9) if before[i] is not after[i]]
            assert len(changed) == 1
            assert before[changed[0]] is Mark.EMPTY

    def test_snapshots_are_not_mutated(self) -> None:
        store = HistoryStore()
        first = store.current()
        store.apply_move(0)
        assert first == Snapshot.empty()

    @pytest.mark.parametrize("cell", [-1, 9, 100])
    def test_out_of_range_cell(self, cell: int) -> None:
        store = HistoryStore()
        with pytest.raises(InvalidCell) as info:
            store.apply_move(cell)
        assert info.value.cell_index == cell
        assert store.history_length() == 1

    @pytest.mark.parametrize("cell", ["0", 1.0, None, True])
    def test_non_int_cell(self, cell: object) -> None:
        store = HistoryStore()
        with pytest.raises(InvalidCell):
            store.apply_move(cell)  # type: ignore[arg-type]

    def test_occupied_cell(self) -> None:
        store = _played(0)
        before = store.snapshots()
        with pytest.raises(CellOccupied):
            store.apply_move(0)
        assert store.snapshots() == before
        assert store.current_index_value() == 1

    def test_move_after_win(self) -> None:
        store = _played(0, 4, 1, 7, 2)
        with pytest.raises(GameOver):
            store.apply_move(3)
        assert store.history_length() == 6

    def test_occupied_checked_before_game_over(self) -> None:
        store = _played(0, 4, 1, 7, 2)
        with pytest.raises(CellOccupied):
            store.apply_move(0)

    def test_move_after_draw(self) -> None:
        # X O X / X O O / O X X
        # A drawn board is always full, so occupancy rejects every cell.
        store = _played(0, 1, 2, 4, 3, 5, 7, 6, 8)
        before = store.snapshots()
        assert store.current().is_full
        with pytest.raises(CellOccupied):
            store.apply_move(0)
        assert store.snapshots() == before
        assert store.current_index_value() == 9


class TestJumpTo:
    def test_jump_keeps_history(self) -> None:
        store = _played(0, 4, 1)
        before = store.snapshots()
        store.jump_to(1)
        assert store.current_index_value() == 1
        assert store.snapshots() == before
        assert not store.is_at_tail

    def test_repeated_view_is_idempotent(self) -> None:
        store = _played(0, 4, 1)
        store.jump_to(2)
        first = store.current()
        for _ in range(3):
            store.jump_to(2)
            assert store.current() == first
        assert store.history_length() == 4

    @pytest.mark.parametrize("index", [-1, 4, 99])
    def test_out_of_range(self, index: int) -> None:
        store = _played(0, 4, 1)
        with pytest.raises(IndexOutOfRange) as info:
            store.jump_to(index)
        assert info.value.index == index
        assert store.current_index_value() == 3

    def test_jump_to_start(self) -> None:
        store = _played(0, 4)
        store.jump_to(0)
        assert store.current() == Snapshot.empty()


class TestTruncation:
    def test_move_from_past_discards_future(self) -> None:
        store = _played(0, 4, 1, 7, 2)
        before = store.snapshots()
        k = 2
        store.jump_to(k)
        store.apply_move(8)
        assert store.history_length() == k + 2
        assert store.snapshots()[: k + 1] == before[: k + 1]
        assert store.current_index_value() == k + 1
        assert store.is_at_tail

    def test_mark_placed_follows_viewed_index(self) -> None:
        store = _played(0, 4, 1)
        store.jump_to(1)
        store.apply_move(8)
        assert store.current()[8] is Mark.O

    def test_discarded_future_is_not_restored(self) -> None:
        store = _played(0, 4, 1)
        old_tail = store.current()
        store.jump_to(0)
        store.apply_move(5)
        assert old_tail not in store.snapshots()

    def test_rejected_move_does_not_truncate(self) -> None:
        store = _played(0, 4, 1, 7)
        store.jump_to(1)
        with pytest.raises(CellOccupied):
            store.apply_move(0)
        assert store.history_length() == 5
        assert store.current_index_value() == 1

    def test_rewind_finished_game_and_replay(self) -> None:
        store = _played(0, 4, 1, 7, 2)
        store.jump_to(4)
        store.apply_move(3)
        assert store.history_length() == 6
        assert store.current()[2] is Mark.EMPTY
        assert store.current()[3] is Mark.X

    def test_rewind_drawn_game_and_replay(self) -> None:
        store = _played(0, 1, 2, 4, 3, 5, 7, 6, 8)
        store.jump_to(8)
        store.apply_move(8)
        assert store.history_length() == 10
        assert store.current()[8] is Mark.X
        store.jump_to(6)
        store.apply_move(8)
        assert store.history_length() == 8
        assert store.current()[8] is Mark.X
        assert store.current()[7] is Mark.EMPTY


class TestReset:
    def test_reset_returns_to_start(self) -> None:
        store = _played(0, 4, 1)
        store.reset()
        assert store.history_length() == 1
        assert store.current_index_value() == 0
        assert store.current() == Snapshot.empty()
