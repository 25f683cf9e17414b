"""Tests for outcome evaluation and turn derivation."""

import pytest

from tictac.core.board import Snapshot
from tictac.core.enums import Mark, OutcomeKind
from tictac.core.rules import WINNING_LINES, evaluate, turn_for


def _line_board(line: tuple[int, int, int], mark: Mark) -> Snapshot:
    """Board with *mark* on *line* and the opponent on a few unrelated cells."""
    snap = Snapshot.empty()
    for index in line:
        snap = snap.with_mark(index, mark)
    free = [i for i in range(9) if i not in line]
    for index in free[:2]:
        snap = snap.with_mark(index, Mark.O if mark is Mark.X else Mark.X)
    return snap


class TestWinningLines:
    def test_eight_distinct_lines(self) -> None:
        assert len(WINNING_LINES) == 8
        assert len(set(WINNING_LINES)) == 8

    def test_right_column_present(self) -> None:
        assert (2, 5, 8) in WINNING_LINES

    @pytest.mark.parametrize("line", WINNING_LINES)
    @pytest.mark.parametrize("mark", [Mark.X, Mark.O])
    def test_every_line_wins(self, line: tuple[int, int, int], mark: Mark) -> None:
        outcome = evaluate(_line_board(line, mark))
        assert outcome.kind == OutcomeKind.WIN
        assert outcome.winner is mark
        assert outcome.winning_line == line


class TestEvaluate:
    def test_empty_board_in_progress(self) -> None:
        outcome = evaluate(Snapshot.empty())
        assert outcome.is_in_progress
        assert outcome.winner is None
        assert outcome.winning_line is None

    def test_partial_board_without_line_in_progress(self) -> None:
        assert evaluate(Snapshot.from_string("XO.X.O...")).is_in_progress

    def test_full_board_without_line_is_draw(self) -> None:
        # X O X
        # X O O
        # O X X
        outcome = evaluate(Snapshot.from_string("XOXXOOOXX"))
        assert outcome.is_draw
        assert outcome.winner is None

    def test_win_on_full_board_beats_draw(self) -> None:
        # X X X
        # O O X
        # X O O
        outcome = evaluate(Snapshot.from_string("XXXOOXXOO"))
        assert outcome.is_win
        assert outcome.winner is Mark.X

    def test_two_lines_same_mark_reports_first(self) -> None:
        outcome = evaluate(Snapshot.from_string("XXX/X../X.."))
        assert outcome.winner is Mark.X
        assert outcome.winning_line == (0, 1, 2)

    def test_both_marks_winning_uses_enumeration_order(self) -> None:
        # Unreachable by play: O completes row 1, X completes row 2.
        outcome = evaluate(Snapshot.from_string("OOO/XXX/..."))
        assert outcome.winner is Mark.O
        outcome = evaluate(Snapshot.from_string("XXX/OOO/..."))
        assert outcome.winner is Mark.X

    def test_evaluate_is_pure(self) -> None:
        snap = Snapshot.from_string("XO.......")
        assert evaluate(snap) == evaluate(snap)
        assert str(snap) == "XO......."


class TestTurnFor:
    def test_first_two(self) -> None:
        assert turn_for(0) is Mark.X
        assert turn_for(1) is Mark.O

    def test_strict_alternation(self) -> None:
        for n in range(20):
            assert turn_for(n) is not turn_for(n + 1)
            assert turn_for(n) is turn_for(n + 2)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            turn_for(-1)


class TestMark:
    def test_symbols(self) -> None:
        assert Mark.X.symbol == "X"
        assert Mark.EMPTY.symbol == ""
        assert str(Mark.EMPTY) == "."
