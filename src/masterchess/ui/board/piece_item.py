"""PieceItem — one piece's SVG drawing placed on the board scene."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtSvgWidgets import QGraphicsSvgItem

from masterchess.core.piece import Piece
from masterchess.core.types import Square
from masterchess.ui.resources import piece_renderer


class PieceItem(QGraphicsSvgItem):
    """Display-only piece; clicks fall through to the scene."""

    PADDING = 0.04  # fraction of the tile left empty on each side

    def __init__(self, piece: Piece, square: Square) -> None:
        super().__init__()
        self.piece = piece
        self.square = square
        self.setSharedRenderer(piece_renderer(piece))
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setZValue(1)

    def fit_into(self, tile: QRectF) -> None:
        """Scale and move the drawing so it sits centred inside *tile*."""
        pad = tile.width() * self.PADDING
        target = tile.adjusted(pad, pad, -pad, -pad)
        natural = self.boundingRect()
        if natural.width() <= 0 or natural.height() <= 0:
            return
        scale = min(target.width() / natural.width(), target.height() / natural.height())
        self.setScale(scale)
        self.setPos(
            target.center().x() - natural.width() * scale / 2,
            target.center().y() - natural.height() * scale / 2,
        )
