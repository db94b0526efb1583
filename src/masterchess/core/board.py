"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from masterchess.core.enums import Color, PieceType
from masterchess.core.piece import Piece
from masterchess.core.types import BOARD_SIZE, Square, all_squares, is_on_board

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """8x8 grid of optional pieces.

    Cells hold either ``None`` (empty) or an immutable :class:`Piece`.
    Reading or writing a square off the board raises :class:`IndexError`,
    so an empty square is never confused with a failed lookup.

    A board is writable until :meth:`freeze` is called; after that every
    write raises :class:`TypeError`. :meth:`copy` always returns a
    writable board.
    """

    __slots__ = ("_rows", "_frozen")

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._frozen = False

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        if not is_on_board(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        row, col = sq
        return self._rows[row][col]

    def __setitem__(self, sq: tuple[int, int], piece: Piece | None) -> None:
        if self._frozen:
            raise TypeError("Board is read-only; copy() it to make changes")
        if not is_on_board(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        row, col = sq
        self._rows[row][col] = piece

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, rows then columns."""
        for sq in all_squares():
            piece = self._rows[sq.row][sq.col]
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def count(self, color: Color) -> int:
        return len(self.pieces(color))

    def find_king(self, color: Color) -> Square | None:
        """First *color* king scanning rows then columns, or ``None``."""
        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    def rows(self) -> list[list[Piece | None]]:
        """Row-major copy of the grid (row 0 = rank 8)."""
        return [row.copy() for row in self._rows]

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Move whatever stands on *from_sq* to *to_sq*; return the piece displaced."""
        captured = self[to_sq]
        self[to_sq] = self[from_sq]
        self[from_sq] = None
        return captured

    def copy(self) -> Board:
        # Pieces are immutable, so copying the rows is a full value copy.
        b = Board()
        b._rows = [row.copy() for row in self._rows]
        return b

    def freeze(self) -> Board:
        """Make this board read-only and return it."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (Black on rows 0-1, White on rows 6-7)."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self._rows):
            cells = [str(p) if p else "." for p in row]
            lines.append(f"{BOARD_SIZE - row_idx} {' '.join(cells)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)


def clone(board: Board) -> Board:
    """Deep-value copy of *board*."""
    return board.copy()
