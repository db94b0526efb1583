"""StatusPanel — whose turn it is and how the game stands."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from masterchess.core.enums import Color, GameStatus
from masterchess.game.state import GameState
from masterchess.ui.i18n import t

_ACTIVE_STYLE = "border: 1px solid #eab308; border-radius: 6px; background: #262626;"
_IDLE_STYLE = "border: 1px solid transparent; color: #737373;"


def status_message(state: GameState) -> str:
    """Centre banner text for *state*; empty while the game runs quietly."""
    s = t()
    status = state.status
    if status == GameStatus.CHECKMATE and state.winner is not None:
        return s.wins.format(color=s.color_name(state.winner))
    if status == GameStatus.STALEMATE:
        return s.stalemate
    if status == GameStatus.CHECK:
        return s.check_banner
    return ""


class _PlayerBadge(QWidget):
    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.color = color
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 4, 10, 4)
        self._name = QLabel()
        self._name.setFont(QFont("Helvetica Neue", 10, QFont.Weight.Bold))
        self._turn = QLabel()
        self._turn.setStyleSheet("color: #eab308;")
        layout.addWidget(self._name)
        layout.addWidget(self._turn)

    def update_badge(self, active: bool) -> None:
        s = t()
        self._name.setText(s.color_name(self.color))
        self._turn.setText(s.your_turn if active else "")
        self.setStyleSheet(_ACTIVE_STYLE if active else _IDLE_STYLE)


class StatusPanel(QWidget):
    """Black badge, centre message, white badge."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._state: GameState | None = None

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._black = _PlayerBadge(Color.BLACK)
        self._message = QLabel()
        self._message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._message.setFont(QFont("Helvetica Neue", 11, QFont.Weight.Bold))
        self._white = _PlayerBadge(Color.WHITE)

        layout.addWidget(self._black)
        layout.addWidget(self._message, 1)
        layout.addWidget(self._white)

    def set_state(self, state: GameState) -> None:
        self._state = state
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        state = self._state
        active = None if state is None or state.is_game_over else state.turn
        self._black.update_badge(active == Color.BLACK)
        self._white.update_badge(active == Color.WHITE)
        self._message.setText(status_message(state) if state is not None else "")
        if state is not None and state.status == GameStatus.CHECK:
            self._message.setStyleSheet("color: #ef4444;")
        else:
            self._message.setStyleSheet("color: #facc15;")

    def message(self) -> str:
        return self._message.text()
