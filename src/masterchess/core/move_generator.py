"""Pseudo-legal and legal move generation + check detection."""

from __future__ import annotations

import logging

from masterchess.core.board import Board
from masterchess.core.enums import Color, PieceType
from masterchess.core.piece import Piece
from masterchess.core.types import Square, is_on_board

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# [color] -> (row step, starting row, promotion row)
_PAWN_GEOMETRY: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (-1, 6, 0),
    Color.BLACK: (1, 1, 7),
}


def pawn_direction(color: Color) -> int:
    """Row step of a *color* pawn moving forward."""
    return _PAWN_GEOMETRY[color][0]


def promotion_row(color: Color) -> int:
    """Farthest row from *color*'s side of the board."""
    return _PAWN_GEOMETRY[color][2]


class MoveGenerator:
    """Generates moves for the pieces on a given :class:`Board`.

    Legality is checked by simulating each candidate on a copy of the
    board; the wrapped board is never modified.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def pseudo_moves(self, sq: Square) -> list[Square]:
        """Destinations for the piece on *sq*, ignoring self-check.

        Empty when *sq* holds no piece. Order is fixed by the offset and
        direction tables above.
        """
        sq = Square(*sq)
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Square] = []
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif pt == PieceType.KNIGHT:
            self._gen_offsets(sq, piece, KNIGHT_OFFSETS, moves)
        elif pt == PieceType.KING:
            self._gen_offsets(sq, piece, KING_OFFSETS, moves)
        else:
            self._gen_sliding(sq, piece, _SLIDER_DIRS[pt], moves)
        return moves

    def legal_moves(self, sq: Square) -> list[Square]:
        """Pseudo-legal destinations that do not leave the mover's king in check."""
        piece = self._board[sq]
        if piece is None:
            return []

        legal: list[Square] = []
        for to_sq in self.pseudo_moves(sq):
            trial = self._board.copy()
            trial.move_piece(sq, to_sq)
            if not MoveGenerator(trial).is_in_check(piece.color):
                legal.append(to_sq)
        return legal

    def all_legal_moves(self, color: Color) -> list[tuple[Square, Square]]:
        """Every legal ``(from, to)`` pair for *color*, rows then columns."""
        pairs: list[tuple[Square, Square]] = []
        for from_sq in self._board.pieces(color):
            pairs.extend((from_sq, to_sq) for to_sq in self.legal_moves(from_sq))
        return pairs

    def has_any_legal_moves(self, color: Color) -> bool:
        """Whether any piece of *color* has at least one legal move."""
        return any(self.legal_moves(sq) for sq in self._board.pieces(color))

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by any opposing piece?

        A board without a *color* king counts as check.
        """
        king_sq = self._board.find_king(color)
        if king_sq is None:
            _LOGGER.warning("No %s king on board; treating as check", color)
            return True

        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, target: Square, by_color: Color) -> bool:
        """Could any *by_color* piece capture on *target* next move?

        Pawns attack diagonally whether or not *target* is occupied.
        """
        target = Square(*target)
        for sq, piece in self._board.occupied():
            if piece.color != by_color:
                continue
            if piece.piece_type == PieceType.PAWN:
                if (
                    target.row - sq.row == pawn_direction(by_color)
                    and abs(target.col - sq.col) == 1
                ):
                    return True
            elif target in self.pseudo_moves(sq):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        step, start_row, _ = _PAWN_GEOMETRY[piece.color]

        one_step = sq.offset(step, 0)
        if is_on_board(one_step) and board.is_empty(one_step):
            moves.append(one_step)
            if sq.row == start_row:
                two_step = sq.offset(2 * step, 0)
                if board.is_empty(two_step):
                    moves.append(two_step)

        for d_col in (-1, 1):
            cap_sq = sq.offset(step, d_col)
            if not is_on_board(cap_sq):
                continue
            target = board[cap_sq]
            if target is not None and target.color != piece.color:
                moves.append(cap_sq)

    def _gen_offsets(
        self,
        sq: Square,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in offsets:
            to_sq = sq.offset(d_row, d_col)
            if not is_on_board(to_sq):
                continue
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in directions:
            to_sq = sq.offset(d_row, d_col)
            while is_on_board(to_sq):
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    to_sq = to_sq.offset(d_row, d_col)
                    continue
                if target.color != piece.color:
                    moves.append(to_sq)
                break


# -- Functional shortcuts ---------------------------------------------------


def pseudo_moves(board: Board, sq: Square) -> list[Square]:
    return MoveGenerator(board).pseudo_moves(sq)


def legal_moves(board: Board, sq: Square) -> list[Square]:
    return MoveGenerator(board).legal_moves(sq)


def is_in_check(board: Board, color: Color) -> bool:
    return MoveGenerator(board).is_in_check(color)


def has_any_legal_moves(board: Board, color: Color) -> bool:
    return MoveGenerator(board).has_any_legal_moves(color)
