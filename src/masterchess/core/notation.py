"""Text notation: board placement strings and move-history grouping."""

from __future__ import annotations

from collections.abc import Sequence

from masterchess.core.board import Board
from masterchess.core.move import Move, move_notation
from masterchess.core.piece import Piece
from masterchess.core.types import BOARD_SIZE, Square, parse_square, square_name

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

__all__ = [
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
    "move_notation",
    "move_pairs",
    "parse_square",
    "square_name",
]


def board_from_placement(placement: str) -> Board:
    """Parse the piece-placement field of a FEN string into a :class:`Board`.

    Only the first whitespace-separated field is read, so a full FEN is
    accepted too; side-to-move and the remaining fields are ignored.
    """
    fields = placement.split()
    if not fields:
        raise ValueError("Empty placement string")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board[Square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise *board* to a FEN piece-placement field."""
    rows: list[str] = []
    for cells in board.rows():
        empty = 0
        text = ""
        for piece in cells:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def move_pairs(history: Sequence[Move]) -> list[tuple[int, Move, Move | None]]:
    """Group plies into numbered ``(number, first, second)`` rows.

    Even indexes belong to the first mover, so the second slot of the
    last row is ``None`` while the reply is pending.
    """
    pairs: list[tuple[int, Move, Move | None]] = []
    for idx in range(0, len(history), 2):
        reply = history[idx + 1] if idx + 1 < len(history) else None
        pairs.append((idx // 2 + 1, history[idx], reply))
    return pairs
