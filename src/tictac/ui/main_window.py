"""MainWindow — tabbed host for the game and the product listing."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMainWindow, QTabWidget, QWidget

from tictac.catalog.products import SAMPLE_PRODUCTS
from tictac.config import AppSettings
from tictac.game.controller import GameController
from tictac.game.interfaces import IGameController
from tictac.ui.game_widget import GameWidget
from tictac.ui.panels.product_table import ProductTableWidget

_TAB_INDEX = {"game": 0, "products": 1}


class MainWindow(QMainWindow):
    """Top-level window with one tab per exercise."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: IGameController | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or AppSettings()
        self._controller = controller if controller is not None else GameController()
        self.setWindowTitle(self._settings.window_title)
        self._setup_ui()
        self._setup_menu()

    def _setup_ui(self) -> None:
        self._tabs = QTabWidget()
        self._game_widget = GameWidget(self._controller, self._settings)
        self._product_table = ProductTableWidget(SAMPLE_PRODUCTS)
        self._tabs.addTab(self._game_widget, "Tic-Tac-Toe")
        self._tabs.addTab(self._product_table, "Products")
        self._tabs.setCurrentIndex(_TAB_INDEX.get(self._settings.start_tab, 0))
        self.setCentralWidget(self._tabs)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        game_menu = menu_bar.addMenu("&Game")
        assert game_menu is not None

        self._act_new = QAction("&New game", self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self._on_new_game)
        game_menu.addAction(self._act_new)

        game_menu.addSeparator()
        act_quit = QAction("&Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        game_menu.addAction(act_quit)

    @property
    def game_widget(self) -> GameWidget:
        return self._game_widget

    @property
    def product_table(self) -> ProductTableWidget:
        return self._product_table

    @property
    def tabs(self) -> QTabWidget:
        return self._tabs

    def _on_new_game(self) -> None:
        self._controller.new_game()
