"""Cached Qt renderers and pixmaps for the piece artwork."""

from __future__ import annotations

from functools import lru_cache

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QPainter, QPixmap
from PyQt6.QtSvg import QSvgRenderer

from masterchess.core.piece import Piece
from masterchess.runtime_assets import piece_svg_path

_renderers: dict[Piece, QSvgRenderer] = {}


def piece_renderer(piece: Piece) -> QSvgRenderer:
    """Shared :class:`QSvgRenderer` for *piece*, loaded on first use.

    Raises:
        FileNotFoundError: the SVG is missing or Qt cannot parse it.
    """
    renderer = _renderers.get(piece)
    if renderer is None:
        path = piece_svg_path(piece.color, piece.piece_type)
        renderer = QSvgRenderer(str(path))
        if not renderer.isValid():
            raise FileNotFoundError(f"Piece artwork missing or invalid: {path}")
        _renderers[piece] = renderer
    return renderer


@lru_cache(maxsize=64)
def piece_pixmap(piece: Piece, size: int) -> QPixmap:
    """*piece* drawn on a transparent ``size``×``size`` pixmap."""
    renderer = piece_renderer(piece)
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    renderer.render(painter, QRectF(0, 0, size, size))
    painter.end()
    return pixmap
