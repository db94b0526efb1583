"""Square type and coordinate helpers.

Board layout (row-major, Black's back rank first):
    row 0 = rank 8 (a8 … h8)
    row 7 = rank 1 (a1 … h1)
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8

_FILES = "abcdefgh"


class Square(NamedTuple):
    """Zero-based ``(row, col)`` coordinate."""

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return square_name(self)


def is_on_board(sq: tuple[int, int]) -> bool:
    """True iff both coordinates are in ``[0, 8)``."""
    row, col = sq
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: tuple[int, int]) -> str:
    """Human-readable name, e.g. ``(0, 0)`` → 'a8', ``(7, 7)`` → 'h1'."""
    row, col = sq
    if not is_on_board(sq):
        raise ValueError(f"Square off the board: {sq!r}")
    return f"{_FILES[col]}{BOARD_SIZE - row}"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → Square(6, 4)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), _FILES.index(name[0]))


def all_squares() -> list[Square]:
    """Every square, scanning rows then columns."""
    return [Square(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Square(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Square(7, c) for c in range(8))
