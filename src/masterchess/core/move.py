"""Move record — one completed ply."""

from __future__ import annotations

from dataclasses import dataclass

from masterchess.core.enums import PieceType
from masterchess.core.piece import Piece
from masterchess.core.types import Square, square_name


def move_notation(from_sq: Square, to_sq: Square) -> str:
    """Coordinate notation, e.g. ``"e2e4"``."""
    return f"{square_name(from_sq)}{square_name(to_sq)}"


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable history entry.

    ``piece`` is the piece as it stood on ``from_sq``: a promoting pawn is
    recorded as a pawn, with ``promoted`` set.
    """

    piece: Piece
    from_sq: Square
    to_sq: Square
    captured: PieceType | None = None
    is_check: bool = False
    is_checkmate: bool = False
    promoted: bool = False

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def notation(self) -> str:
        return move_notation(self.from_sq, self.to_sq)

    @property
    def display(self) -> str:
        """Notation with ``#`` for mate or ``+`` for check."""
        if self.is_checkmate:
            return self.notation + "#"
        if self.is_check:
            return self.notation + "+"
        return self.notation

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        return self.notation
