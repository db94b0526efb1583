"""MovePanel — scrollable list of moves in coordinate notation."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from masterchess.core.move import Move
from masterchess.core.notation import move_pairs
from masterchess.ui.i18n import t


def _format_ply(move: Move | None) -> str:
    if move is None:
        return ""
    return f"{move.piece.symbol} {move.display}"


def format_row(number: int, first: Move, second: Move | None) -> str:
    """One history row, e.g. ``"1.  ♙ e2e4    ♟ e7e5"``."""
    return f"{number}.".ljust(4) + _format_ply(first).ljust(12) + _format_ply(second)


class MovePanel(QWidget):
    """Displays the game's move history as numbered white/black pairs."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._history: tuple[Move, ...] = ()
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Helvetica Neue", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._list.setFont(QFont("Consolas", 12))
        self._list.setVisible(False)
        layout.addWidget(self._list)

        self._empty = QLabel()
        self._empty.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty.setStyleSheet("color: #737373;")
        layout.addWidget(self._empty)

    def retranslate_ui(self) -> None:
        s = t()
        self._header.setText(s.moves_header)
        self._empty.setText(s.moves_empty)

    def set_history(self, history: Sequence[Move]) -> None:
        """Rebuild the list; a no-op when *history* is unchanged."""
        history = tuple(history)
        if history == self._history:
            return
        self._history = history
        self._list.clear()
        for number, first, second in move_pairs(history):
            self._list.addItem(format_row(number, first, second))
        self._empty.setVisible(not history)
        self._list.setVisible(bool(history))
        self._list.scrollToBottom()

    def row_count(self) -> int:
        return self._list.count()

    def row_text(self, row: int) -> str:
        item = self._list.item(row)
        return item.text() if item is not None else ""
