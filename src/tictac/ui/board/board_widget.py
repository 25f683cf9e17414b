"""BoardWidget — 3×3 grid of square buttons.

Pure display: renders a snapshot and forwards clicks as cell indices.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from tictac.core.board import BOARD_SIZE, CELL_COUNT, Snapshot
from tictac.core.enums import Mark
from tictac.core.rules import Line
from tictac.ui.styles.theme import BoardTheme, square_style

SQUARE_SIZE = 64


class SquareButton(QPushButton):
    """One board cell showing its mark's symbol."""

    def __init__(self, index: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.index = index
        self.setFixedSize(SQUARE_SIZE, SQUARE_SIZE)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

    def set_value(self, text: str, style: str) -> None:
        self.setText(text)
        self.setStyleSheet(style)


class BoardWidget(QWidget):
    """Displays a :class:`Snapshot`.

    Signals:
        cell_clicked(int): index of the clicked square.
    """

    cell_clicked = pyqtSignal(int)

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        theme: BoardTheme | None = None,
        symbols: dict[Mark, str] | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = theme or BoardTheme.default()
        self._symbols = dict(symbols) if symbols else {Mark.X: "X", Mark.O: "O"}
        self._snapshot = Snapshot.empty()
        self._winning_line: Line | None = None
        self._squares: list[SquareButton] = []
        self._setup_ui()
        self._refresh()

    def _setup_ui(self) -> None:
        layout = QGridLayout(self)
        layout.setSpacing(0)
        layout.setContentsMargins(4, 4, 4, 4)
        for index in range(CELL_COUNT):
            square = SquareButton(index)
            square.clicked.connect(
                lambda _checked=False, cell=index: self.cell_clicked.emit(cell)
            )
            row, col = divmod(index, BOARD_SIZE)
            layout.addWidget(square, row, col)
            self._squares.append(square)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def squares(self) -> list[SquareButton]:
        return list(self._squares)

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def set_snapshot(self, snapshot: Snapshot, winning_line: Line | None = None) -> None:
        self._snapshot = snapshot
        self._winning_line = winning_line
        self._refresh()

    def square_text(self, index: int) -> str:
        return self._squares[index].text()

    def is_highlighted(self, index: int) -> bool:
        return self._winning_line is not None and index in self._winning_line

    # ── Rendering ────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        for index, square in enumerate(self._squares):
            mark = self._snapshot[index]
            color = self._theme.mark_o if mark is Mark.O else self._theme.mark_x
            square.set_value(
                self._symbols.get(mark, ""),
                square_style(
                    self._theme,
                    winning=self.is_highlighted(index),
                    text_color=color,
                ),
            )
