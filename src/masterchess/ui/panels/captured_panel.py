"""CapturedPanel — pieces each side has lost so far."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from masterchess.core.enums import Color, PieceType
from masterchess.core.piece import Piece
from masterchess.ui.i18n import t
from masterchess.ui.resources import piece_pixmap

_ICON_SIZE = 24


class _CapturedRow(QWidget):
    """Icons for one colour's captured pieces, or a placeholder text."""

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.color = color
        self._kinds: tuple[PieceType, ...] = ()
        self._icons: list[QLabel] = []

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(6, 4, 6, 4)
        self._layout.setSpacing(2)
        self._placeholder = QLabel()
        self._placeholder.setStyleSheet("color: #737373; font-style: italic;")
        self._layout.addWidget(self._placeholder)
        self._layout.addStretch()

    def set_placeholder(self, text: str) -> None:
        self._placeholder.setText(text)

    def set_kinds(self, kinds: Sequence[PieceType]) -> None:
        kinds = tuple(kinds)
        if kinds == self._kinds:
            return
        self._kinds = kinds
        for icon in self._icons:
            self._layout.removeWidget(icon)
            icon.deleteLater()
        self._icons.clear()

        for idx, kind in enumerate(kinds):
            icon = QLabel()
            icon.setPixmap(piece_pixmap(Piece(self.color, kind), _ICON_SIZE))
            self._layout.insertWidget(idx, icon)
            self._icons.append(icon)
        self._placeholder.setVisible(not kinds)

    @property
    def icon_count(self) -> int:
        return len(self._icons)


class CapturedPanel(QWidget):
    """Two rows of captured pieces: white's losses, then black's."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._header = QLabel()
        self._header.setFont(QFont("Helvetica Neue", 10, QFont.Weight.Bold))
        layout.addWidget(self._header)

        self._rows = {
            Color.WHITE: _CapturedRow(Color.WHITE),
            Color.BLACK: _CapturedRow(Color.BLACK),
        }
        layout.addWidget(self._rows[Color.WHITE])
        layout.addWidget(self._rows[Color.BLACK])
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._header.setText(s.captured_header.upper())
        self._rows[Color.WHITE].set_placeholder(s.no_white_captured)
        self._rows[Color.BLACK].set_placeholder(s.no_black_captured)

    def set_captured(
        self,
        captured_white: Sequence[PieceType],
        captured_black: Sequence[PieceType],
    ) -> None:
        self._rows[Color.WHITE].set_kinds(captured_white)
        self._rows[Color.BLACK].set_kinds(captured_black)

    def row(self, color: Color) -> _CapturedRow:
        return self._rows[color]
