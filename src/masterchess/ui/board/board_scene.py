"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QAbstractGraphicsShapeItem,
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from masterchess.core.enums import PieceType
from masterchess.core.types import BOARD_SIZE, Square, all_squares
from masterchess.game.state import GameState
from masterchess.ui.board.piece_item import PieceItem
from masterchess.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders a :class:`GameState`: squares, coordinates, highlights, pieces.

    The scene holds no chess logic. Clicks are forwarded as squares and the
    owner decides what they mean.

    Signals:
        square_clicked(Square): Emitted when the user clicks a board square.
    """

    square_clicked = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state: GameState | None = None
        self._show_coordinates = True
        self._show_legal_moves = True

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QAbstractGraphicsShapeItem] = []
        self._legal_items: list[QAbstractGraphicsShapeItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(self, state: GameState) -> None:
        """Redraw pieces and highlights for *state*."""
        self._state = state
        self._sync_pieces()
        self._sync_highlights()

    def piece_item_at(self, sq: Square) -> PieceItem | None:
        return self._piece_items.get(sq)

    def legal_marker_count(self) -> int:
        return len(self._legal_items)

    def highlight_count(self) -> int:
        return len(self._highlight_items)

    def square_at(self, pos: QPointF) -> Square | None:
        """Board square under scene position *pos*, or ``None`` off the board."""
        return self._pos_to_square(pos)

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        if self._state is not None:
            self.set_state(self._state)

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-target markers."""
        self._show_legal_moves = visible
        if self._state is not None:
            self._sync_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8), QFont.Weight.Bold)

        for sq in all_squares():
            row, col = sq
            is_dark = (row + col) % 2 == 1
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_brush = QBrush(
                self._theme.coord_light if is_dark else self._theme.coord_dark
            )
            # Rank numbers (left edge)
            if col == 0:
                txt = QGraphicsSimpleTextItem(str(BOARD_SIZE - row))
                txt.setFont(font)
                txt.setBrush(text_brush)
                txt.setPos(2, row * t + 1)
                self._add_coord(txt)

            # File letters (bottom edge)
            if row == BOARD_SIZE - 1:
                txt = QGraphicsSimpleTextItem(chr(ord("a") + col))
                txt.setFont(font)
                txt.setBrush(text_brush)
                txt.setPos(col * t + t - 12, row * t + t - 16)
                self._add_coord(txt)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(self, item: QGraphicsSimpleTextItem) -> None:
        item.setZValue(0.3)
        item.setVisible(self._show_coordinates)
        self.addItem(item)
        self._coord_items.append(item)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current state."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._state is None:
            return

        for sq, piece in self._state.board.occupied():
            item = PieceItem(piece, sq)
            item.fit_into(self._square_rect(sq))
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_items)
        state = self._state
        if state is None:
            return

        last = state.last_move
        if last is not None:
            for sq in (last.from_sq, last.to_sq):
                self._highlight_items.append(
                    self._make_highlight(sq, self._theme.last_move, z=0.5)
                )

        if state.is_check:
            for sq, piece in state.board.occupied():
                if piece.piece_type == PieceType.KING and piece.color == state.turn:
                    self._highlight_items.append(
                        self._make_highlight(sq, self._theme.highlight_check, z=0.6)
                    )

        if state.selected is not None:
            self._highlight_items.append(
                self._make_highlight(state.selected, self._theme.highlight_from, z=0.7)
            )

        if self._show_legal_moves:
            for sq in state.possible_moves:
                if state.board.is_empty(sq):
                    self._legal_items.append(self._make_dot(sq))
                else:
                    self._legal_items.append(self._make_ring(sq))

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None and event.button() == Qt.MouseButton.LeftButton:
            sq = self._pos_to_square(event.scenePos())
            if sq is not None:
                self.square_clicked.emit(sq)
                event.accept()
                return
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Square(row, col)

    def _square_rect(self, sq: Square) -> QRectF:
        t = self.TILE
        return QRectF(sq.col * t, sq.row * t, t, t)

    def _make_highlight(
        self, sq: Square, color: QColor, *, z: float = 0.8
    ) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        rect = QGraphicsRectItem(self._square_rect(sq))
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        """Small centred dot marking a quiet legal target."""
        r = self._square_rect(sq)
        d = self.TILE * 0.22
        dot = QGraphicsEllipseItem(
            r.center().x() - d / 2, r.center().y() - d / 2, d, d
        )
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(2)
        self.addItem(dot)
        return dot

    def _make_ring(self, sq: Square) -> QGraphicsEllipseItem:
        """Ring around an opposing piece that can be captured."""
        width = self.TILE * 0.075
        r = self._square_rect(sq).adjusted(width / 2, width / 2, -width / 2, -width / 2)
        ring = QGraphicsEllipseItem(r)
        ring.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        pen = QPen(self._theme.highlight_capture)
        pen.setWidthF(width)
        ring.setPen(pen)
        ring.setZValue(2)
        self.addItem(ring)
        return ring
