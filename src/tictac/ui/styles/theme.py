"""Visual theme constants and QSS styles for the tutorial app."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the 3×3 board."""

    square: QColor
    square_border: QColor
    mark_x: QColor
    mark_o: QColor
    winning_square: QColor  # cells of the completed line

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            square=QColor(255, 255, 255),
            square_border=QColor(153, 153, 153),
            mark_x=QColor(34, 34, 34),
            mark_o=QColor(38, 79, 120),
            winning_square=QColor(155, 199, 0, 140),  # green
        )

    @classmethod
    def dark(cls) -> BoardTheme:
        return cls(
            square=QColor(43, 43, 43),
            square_border=QColor(85, 85, 85),
            mark_x=QColor(224, 224, 224),
            mark_o=QColor(59, 121, 183),
            winning_square=QColor(155, 199, 0, 105),
        )


def square_style(
    theme: BoardTheme,
    *,
    winning: bool = False,
    text_color: QColor | None = None,
) -> str:
    """QSS for a single board square."""
    background = theme.winning_square if winning else theme.square
    color = text_color if text_color is not None else theme.mark_x
    return f"""
        QPushButton {{
            background: {background.name(QColor.NameFormat.HexArgb)};
            color: {color.name()};
            border: 1px solid {theme.square_border.name()};
            border-radius: 0px;
            font-size: 24px;
            font-weight: bold;
            padding: 0px;
        }}
    """


# ── Application-wide stylesheet ──────────────────────────────────────────────

APP_STYLE = """
QMainWindow, QWidget {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QListWidget, QTableWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-size: 13px;
}

QHeaderView::section {
    background: #3c3c3c;
    color: #e0e0e0;
    border: none;
    padding: 4px;
}

QLineEdit {
    background: #1e1e1e;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 4px 6px;
}

QCheckBox {
    color: #e0e0e0;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}

QTabWidget::pane {
    border: 1px solid #3c3c3c;
}
QTabBar::tab {
    background: #2b2b2b;
    color: #e0e0e0;
    padding: 6px 14px;
}
QTabBar::tab:selected {
    background: #3c3c3c;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
