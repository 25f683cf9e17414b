"""GameController — the single owner of a game's history.

Coordinates: HistoryStore, outcome evaluation, turn derivation.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from tictac.core.board import Snapshot
from tictac.core.rules import Outcome, evaluate, turn_for
from tictac.game.history import HistoryStore
from tictac.game.interfaces import IGameController
from tictac.game.status import Draw, Moment, Next, Status, Win

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Snapshot, int], None]  # new snapshot, its index
JumpCallback = Callable[[int], None]  # index now viewed
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_jump: list[JumpCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Player-facing surface: play a move, view a past moment, read status.

    Turn and outcome are never stored; :meth:`status` recomputes them from
    the snapshot being viewed.  Errors from the history store
    (:class:`~tictac.core.errors.GameError` subclasses) propagate unchanged
    and leave the state untouched.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  Wrap in :class:`SynchronizedGameController` to
    share one game between threads.
    """

    __slots__ = ("_history", "_events")

    def __init__(self) -> None:
        self._history = HistoryStore()
        self._events = GameEvents()

    @property
    def events(self) -> GameEvents:
        return self._events

    # ── Commands ─────────────────────────────────────────────────────────

    def move(self, cell_index: int) -> Snapshot:
        snapshot = self._history.apply_move(cell_index)
        self._emit_move(snapshot, self._history.current_index_value())
        return snapshot

    def view_moment(self, index: int) -> None:
        self._history.jump_to(index)
        self._emit_jump(index)

    def new_game(self) -> None:
        self._history.reset()
        for cb in self._events.on_reset:
            cb()

    # ── Read model ───────────────────────────────────────────────────────

    def current(self) -> Snapshot:
        return self._history.current()

    def history_length(self) -> int:
        return self._history.history_length()

    def current_index_value(self) -> int:
        return self._history.current_index_value()

    def snapshots(self) -> tuple[Snapshot, ...]:
        return self._history.snapshots()

    def outcome(self) -> Outcome:
        return evaluate(self._history.current())

    def status(self) -> Status:
        outcome = self.outcome()
        if outcome.is_win:
            assert outcome.winner is not None
            return Win(outcome.winner)
        if outcome.is_draw:
            return Draw()
        return Next(turn_for(self._history.current_index_value()))

    def moments(self) -> list[Moment]:
        """Jump targets for every snapshot on the live timeline."""
        current = self._history.current_index_value()
        return [
            Moment(index=i, is_current=i == current)
            for i in range(self._history.history_length())
        ]

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, snapshot: Snapshot, index: int) -> None:
        for cb in self._events.on_move:
            cb(snapshot, index)

    def _emit_jump(self, index: int) -> None:
        for cb in self._events.on_jump:
            cb(index)


class SynchronizedGameController(IGameController):
    """Serialises every operation on a wrapped :class:`GameController`.

    Accepted anywhere an :class:`IGameController` is, including the UI.

    Event handlers run while the lock is held; they may call back into the
    same wrapper (the lock is re-entrant) but must not block on other
    threads using it.
    """

    __slots__ = ("_inner", "_lock")

    def __init__(self, inner: GameController | None = None) -> None:
        self._inner = inner if inner is not None else GameController()
        self._lock = threading.RLock()

    @property
    def events(self) -> GameEvents:
        return self._inner.events

    def move(self, cell_index: int) -> Snapshot:
        with self._lock:
            return self._inner.move(cell_index)

    def view_moment(self, index: int) -> None:
        with self._lock:
            self._inner.view_moment(index)

    def new_game(self) -> None:
        with self._lock:
            self._inner.new_game()

    def current(self) -> Snapshot:
        with self._lock:
            return self._inner.current()

    def history_length(self) -> int:
        with self._lock:
            return self._inner.history_length()

    def current_index_value(self) -> int:
        with self._lock:
            return self._inner.current_index_value()

    def snapshots(self) -> tuple[Snapshot, ...]:
        with self._lock:
            return self._inner.snapshots()

    def outcome(self) -> Outcome:
        with self._lock:
            return self._inner.outcome()

    def status(self) -> Status:
        with self._lock:
            return self._inner.status()

    def moments(self) -> list[Moment]:
        with self._lock:
            return self._inner.moments()
