"""Game management layer — history store, controller, read model.

Quick start::

    from tictac.game import GameController

    ctrl = GameController()
    for cell in (0, 4, 1, 7, 2):
        ctrl.move(cell)
    ctrl.status()          # Win(mark=Mark.X)
    ctrl.view_moment(2)    # time travel, history untouched
"""

from tictac.game.controller import (
    GameController,
    GameEvents,
    SynchronizedGameController,
)
from tictac.game.history import HistoryStore
from tictac.game.interfaces import IGameController
from tictac.game.status import Draw, Moment, Next, Status, Win, status_text

__all__ = [
    # Read model
    "Draw",
    "Moment",
    "Next",
    "Status",
    "Win",
    "status_text",
    # Interfaces
    "IGameController",
    # Concrete
    "GameController",
    "GameEvents",
    "HistoryStore",
    "SynchronizedGameController",
]
