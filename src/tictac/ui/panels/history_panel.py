"""HistoryPanel — list of "Go to move #n" buttons for time travel."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from tictac.game.status import Moment

_BUTTON_STYLE = """
    QToolButton {
        background: transparent;
        color: #d4d4d4;
        border: 1px solid transparent;
        border-radius: 4px;
        padding: 2px 8px;
        text-align: left;
        font-size: 13px;
    }
    QToolButton:hover {
        background: #3c3c3c;
        border-color: #555;
    }
    QToolButton[activeMoment="true"] {
        background: #264f78;
        border-color: #3b79b7;
        color: #f0f6ff;
    }
"""


class HistoryPanel(QWidget):
    """Displays one jump button per snapshot on the live timeline."""

    moment_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._moments: list[Moment] = []
        self._buttons: dict[int, QToolButton] = {}
        self._active_index: int | None = None
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("History")
        self._header.setFont(QFont("Helvetica Neue", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    @property
    def active_index(self) -> int | None:
        return self._active_index

    def button(self, index: int) -> QToolButton:
        return self._buttons[index]

    def button_count(self) -> int:
        return len(self._buttons)

    def set_moments(self, moments: list[Moment]) -> None:
        """Show *moments*; only the active marker moves if the timeline is unchanged."""
        same_timeline = [m.index for m in moments] == [m.index for m in self._moments]
        self._moments = list(moments)
        if same_timeline and self._buttons:
            current = next((m.index for m in moments if m.is_current), None)
            self._set_active_index(current)
            return
        self._rebuild_list()

    def _create_button(self, moment: Moment) -> QToolButton:
        btn = QToolButton()
        btn.setText(moment.label)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        btn.setProperty("activeMoment", False)
        btn.setStyleSheet(_BUTTON_STYLE)
        btn.clicked.connect(
            lambda _checked=False, index=moment.index: self._on_moment_clicked(index)
        )
        return btn

    def _set_active_index(self, index: int | None) -> None:
        self._active_index = index
        for moment_index, btn in self._buttons.items():
            btn.setProperty("activeMoment", moment_index == index)
            style = btn.style()
            if style is not None:
                style.unpolish(btn)
                style.polish(btn)
            btn.update()

    def _on_moment_clicked(self, index: int) -> None:
        self.moment_clicked.emit(index)

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._buttons.clear()
        active: int | None = None
        for moment in self._moments:
            btn = self._create_button(moment)
            item = QListWidgetItem()
            item.setSizeHint(btn.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, btn)
            self._buttons[moment.index] = btn
            if moment.is_current:
                active = moment.index
        self._set_active_index(active)
        self._list.scrollToBottom()
