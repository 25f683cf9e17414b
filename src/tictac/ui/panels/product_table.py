"""ProductTableWidget — search bar plus a category-grouped product table."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QFont
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QCheckBox,
    QHeaderView,
    QLineEdit,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from tictac.catalog.products import CategoryRow, Product, ProductRow, filter_rows

_OUT_OF_STOCK = QColor(220, 60, 60)


class ProductTableWidget(QWidget):
    """Filterable product table; rows are recomputed on every filter change."""

    def __init__(
        self,
        products: Iterable[Product],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._products: tuple[Product, ...] = tuple(products)
        self._setup_ui()
        self._rebuild_table()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        self._search = QLineEdit()
        self._search.setPlaceholderText("Search...")
        self._search.textChanged.connect(lambda _text: self._rebuild_table())
        layout.addWidget(self._search)

        self._in_stock = QCheckBox("Only show products in stock")
        self._in_stock.toggled.connect(lambda _checked: self._rebuild_table())
        layout.addWidget(self._in_stock)

        self._table = QTableWidget(0, 2)
        self._table.setHorizontalHeaderLabels(["Name", "Price"])
        self._table.verticalHeader().setVisible(False)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self._table.horizontalHeader().setSectionResizeMode(
            QHeaderView.ResizeMode.Stretch
        )
        layout.addWidget(self._table)

    # ── Filter state ─────────────────────────────────────────────────────

    @property
    def filter_text(self) -> str:
        return self._search.text()

    def set_filter_text(self, text: str) -> None:
        self._search.setText(text)

    @property
    def in_stock_only(self) -> bool:
        return self._in_stock.isChecked()

    def set_in_stock_only(self, enabled: bool) -> None:
        self._in_stock.setChecked(enabled)

    def set_products(self, products: Iterable[Product]) -> None:
        self._products = tuple(products)
        self._rebuild_table()

    # ── Table access (for tests and accessibility) ───────────────────────

    def row_count(self) -> int:
        return self._table.rowCount()

    def row_texts(self) -> list[tuple[str, ...]]:
        """Visible rows as text: ``(category,)`` headings or ``(name, price)``."""
        texts: list[tuple[str, ...]] = []
        for row in range(self._table.rowCount()):
            name = self._table.item(row, 0)
            price = self._table.item(row, 1)
            if price is None:
                texts.append((name.text() if name else "",))
            else:
                texts.append((name.text() if name else "", price.text()))
        return texts

    def name_color(self, row: int) -> QColor:
        item = self._table.item(row, 0)
        return item.foreground().color() if item is not None else QColor()

    # ── Rendering ────────────────────────────────────────────────────────

    def _rebuild_table(self) -> None:
        rows = filter_rows(self._products, self.filter_text, self.in_stock_only)
        self._table.clearSpans()
        self._table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            if isinstance(row, CategoryRow):
                item = QTableWidgetItem(row.category)
                font = QFont()
                font.setBold(True)
                item.setFont(font)
                item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                self._table.setItem(r, 0, item)
                self._table.takeItem(r, 1)
                self._table.setSpan(r, 0, 1, 2)
            elif isinstance(row, ProductRow):
                name_item = QTableWidgetItem(row.product.name)
                if not row.product.stocked:
                    name_item.setForeground(QBrush(_OUT_OF_STOCK))
                self._table.setItem(r, 0, name_item)
                self._table.setItem(r, 1, QTableWidgetItem(row.product.price))
