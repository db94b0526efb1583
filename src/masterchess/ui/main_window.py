"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from masterchess.core.move import Move
from masterchess.core.types import Square
from masterchess.game.controller import GameController
from masterchess.game.state import GameState
from masterchess.ui.board.board_view import BoardView
from masterchess.ui.i18n import LANGUAGES, t
from masterchess.ui.panels.captured_panel import CapturedPanel
from masterchess.ui.panels.move_panel import MovePanel
from masterchess.ui.panels.status_panel import StatusPanel, status_message
from masterchess.ui.settings import AppSettings, apply_settings
from masterchess.ui.styles.theme import THEMES

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window: one board, two players, one mouse."""

    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self.setMinimumSize(820, 600)
        self.resize(1040, 720)

        self._controller = controller if controller is not None else GameController()
        self._settings = AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()

        self._apply_settings()
        self._refresh(self._controller.state)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board column (status on top)
        left = QVBoxLayout()
        left.setSpacing(6)
        self._status_panel = StatusPanel()
        left.addWidget(self._status_panel)
        self._board_view = BoardView()
        left.addWidget(self._board_view, stretch=1)
        root.addLayout(left, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._captured_panel = CapturedPanel()
        right.addWidget(self._captured_panel)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        self._reset_button = QPushButton()
        right.addWidget(self._reset_button)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(300)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        s = t()

        # Game menu
        self._menu_game = menu_bar.addMenu(s.menu_game)
        assert self._menu_game is not None

        self._act_new_game = QAction(s.menu_new_game, self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._menu_game.addSeparator()

        self._act_quit = QAction(s.menu_quit, self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # Settings menu
        self._menu_settings = menu_bar.addMenu(s.menu_settings)
        assert self._menu_settings is not None

        self._act_coords = QAction(s.menu_show_coords, self)
        self._act_coords.setCheckable(True)
        self._act_coords.setChecked(self._settings.show_coordinates)
        self._act_coords.toggled.connect(self._on_toggle_coordinates)
        self._menu_settings.addAction(self._act_coords)

        self._act_legal = QAction(s.menu_show_legal, self)
        self._act_legal.setCheckable(True)
        self._act_legal.setChecked(self._settings.show_legal_moves)
        self._act_legal.toggled.connect(self._on_toggle_legal_moves)
        self._menu_settings.addAction(self._act_legal)

        self._menu_settings.addSeparator()

        self._menu_theme = self._menu_settings.addMenu(s.menu_theme)
        assert self._menu_theme is not None
        self._theme_group = QActionGroup(self)
        for name in THEMES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == self._settings.board_theme)
            act.triggered.connect(lambda _checked, n=name: self._on_theme(n))
            self._theme_group.addAction(act)
            self._menu_theme.addAction(act)

        self._menu_language = self._menu_settings.addMenu(s.menu_language)
        assert self._menu_language is not None
        self._language_group = QActionGroup(self)
        for name in LANGUAGES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == self._settings.language)
            act.triggered.connect(lambda _checked, n=name: self._on_language(n))
            self._language_group.addAction(act)
            self._menu_language.addAction(act)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._reset_button.clicked.connect(self._on_new_game)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_move, self._on_game_move)
        self._replace_callback(events.on_game_over, self._on_game_over)
        self._replace_callback(events.on_reset, self._on_game_reset)
        self._replace_callback(events.on_selection_changed, self._refresh)

    def _disconnect_game_events(self) -> None:
        """Detach this window from GameController callbacks."""
        events = self._controller.events
        self._remove_callback(events.on_move, self._on_game_move)
        self._remove_callback(events.on_game_over, self._on_game_over)
        self._remove_callback(events.on_reset, self._on_game_reset)
        self._remove_callback(events.on_selection_changed, self._refresh)

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── User actions ─────────────────────────────────────────────────────

    def _on_square_clicked(self, sq: Square) -> None:
        self._controller.click(sq)
        # Rejected clicks emit no event
        self._refresh(self._controller.state)

    def _on_new_game(self) -> None:
        self._controller.reset()

    def _on_toggle_coordinates(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._apply_settings()

    def _on_toggle_legal_moves(self, checked: bool) -> None:
        self._settings.show_legal_moves = checked
        self._apply_settings()

    def _on_theme(self, name: str) -> None:
        self._settings.board_theme = name
        self._apply_settings()

    def _on_language(self, name: str) -> None:
        self._settings.language = name
        self._apply_settings()

    def _apply_settings(self) -> None:
        apply_settings(self)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        s = t()
        self.setWindowTitle(f"{s.window_title} — {s.window_subtitle}")
        # Menu bar
        self._menu_game.setTitle(s.menu_game)
        self._act_new_game.setText(s.menu_new_game)
        self._act_quit.setText(s.menu_quit)
        self._menu_settings.setTitle(s.menu_settings)
        self._act_coords.setText(s.menu_show_coords)
        self._act_legal.setText(s.menu_show_legal)
        self._menu_theme.setTitle(s.menu_theme)
        self._menu_language.setTitle(s.menu_language)
        self._reset_button.setText(s.btn_reset)
        # Child widgets
        self._status_panel.retranslate_ui()
        self._captured_panel.retranslate_ui()
        self._move_panel.retranslate_ui()
        self._update_status(self._controller.state)

    # ── Game event callbacks ─────────────────────────────────────────────

    def _on_game_move(self, move: Move, state: GameState) -> None:
        _LOGGER.debug("Move %d: %s", state.ply_count, move.display)
        self._refresh(state)

    def _on_game_over(self, state: GameState) -> None:
        _LOGGER.info("Game over: %s", state.status.name.lower())
        self._refresh(state)

    def _on_game_reset(self, state: GameState) -> None:
        self._refresh(state)

    # ── Display sync ─────────────────────────────────────────────────────

    def _refresh(self, state: GameState) -> None:
        self._board_view.board_scene.set_state(state)
        self._status_panel.set_state(state)
        self._captured_panel.set_captured(state.captured_white, state.captured_black)
        self._move_panel.set_history(state.history)
        self._update_status(state)

    def _update_status(self, state: GameState) -> None:
        last = state.last_move
        message = status_message(state)
        if last is None:
            text = message or t().status_ready
        else:
            text = f"{(state.ply_count + 1) // 2}. {last.display}"
            if message:
                text = f"{text}  {message}"
        self._status_label.setText(text)

    # ── Window lifecycle ─────────────────────────────────────────────────

    def closeEvent(self, a0: QCloseEvent | None) -> None:
        self._disconnect_game_events()
        super().closeEvent(a0)
