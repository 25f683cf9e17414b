"""GameWidget — board, status line and history list around one controller."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from tictac.config import AppSettings
from tictac.core.board import Snapshot
from tictac.core.errors import GameError
from tictac.game.controller import GameController
from tictac.game.interfaces import IGameController
from tictac.game.status import status_text
from tictac.ui.board.board_widget import BoardWidget
from tictac.ui.panels.history_panel import HistoryPanel
from tictac.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class GameWidget(QWidget):
    """Forwards clicks to the controller and re-renders from its read model.

    Holds no game state of its own: everything shown is pulled from the
    controller after each event.
    """

    def __init__(
        self,
        controller: IGameController | None = None,
        settings: AppSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or AppSettings()
        self._controller = controller if controller is not None else GameController()
        self._setup_ui()

        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_jump.append(self._on_game_jump)
        events.on_reset.append(self.refresh)

        self.refresh()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(12)

        left = QVBoxLayout()
        self._status = QLabel()
        self._status.setFont(QFont("Helvetica Neue", 13, QFont.Weight.Bold))
        left.addWidget(self._status)

        theme = (
            BoardTheme.dark()
            if self._settings.board_theme == "dark"
            else BoardTheme.default()
        )
        self._board = BoardWidget(theme=theme, symbols=self._settings.mark_symbols)
        self._board.cell_clicked.connect(self._on_cell_clicked)
        left.addWidget(self._board, 0, Qt.AlignmentFlag.AlignTop)
        left.addStretch(1)
        layout.addLayout(left)

        self._history_panel = HistoryPanel()
        self._history_panel.moment_clicked.connect(self._on_moment_clicked)
        layout.addWidget(self._history_panel, 1)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> IGameController:
        return self._controller

    @property
    def board(self) -> BoardWidget:
        return self._board

    @property
    def history_panel(self) -> HistoryPanel:
        return self._history_panel

    def status_line(self) -> str:
        return self._status.text()

    # ── User intents ─────────────────────────────────────────────────────

    def _on_cell_clicked(self, cell_index: int) -> None:
        try:
            self._controller.move(cell_index)
        except GameError as exc:
            self._report(exc)

    def _on_moment_clicked(self, index: int) -> None:
        try:
            self._controller.view_moment(index)
        except GameError as exc:
            self._report(exc)

    def _report(self, exc: GameError) -> None:
        if exc.is_caller_bug:
            _LOGGER.error("Rejected game operation: %s", exc)
        else:
            _LOGGER.debug("Click ignored: %s", exc)

    # ── Rendering ────────────────────────────────────────────────────────

    def _on_game_move(self, _snapshot: Snapshot, _index: int) -> None:
        self.refresh()

    def _on_game_jump(self, _index: int) -> None:
        self.refresh()

    def refresh(self) -> None:
        """Re-render board, status and history from the controller."""
        outcome = self._controller.outcome()
        line = outcome.winning_line if self._settings.highlight_winning_line else None
        self._board.set_snapshot(self._controller.current(), line)
        self._status.setText(
            status_text(self._controller.status(), self._settings.mark_symbols)
        )
        self._history_panel.set_moments(self._controller.moments())
