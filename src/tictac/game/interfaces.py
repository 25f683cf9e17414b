"""Abstract interface for the game layer.

The display layer depends on this ABC, so it accepts either the plain
controller or its synchronized wrapper.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictac.core.board import Snapshot
    from tictac.core.rules import Outcome
    from tictac.game.controller import GameEvents
    from tictac.game.status import Moment, Status


class IGameController(ABC):
    """Interface for the single owner of a game's history."""

    @property
    @abstractmethod
    def events(self) -> GameEvents: ...

    @abstractmethod
    def move(self, cell_index: int) -> Snapshot:
        """Play the next mark on *cell_index*; raises a ``GameError`` on rejection."""

    @abstractmethod
    def view_moment(self, index: int) -> None:
        """Jump to history position *index* without altering history."""

    @abstractmethod
    def new_game(self) -> None:
        """Discard the history and start from the empty board."""

    @abstractmethod
    def current(self) -> Snapshot: ...

    @abstractmethod
    def history_length(self) -> int: ...

    @abstractmethod
    def current_index_value(self) -> int: ...

    @abstractmethod
    def snapshots(self) -> tuple[Snapshot, ...]: ...

    @abstractmethod
    def outcome(self) -> Outcome: ...

    @abstractmethod
    def status(self) -> Status: ...

    @abstractmethod
    def moments(self) -> list[Moment]: ...
