"""Piece: the colour and kind of one chessman on the board."""

from __future__ import annotations

from dataclasses import dataclass

from masterchess.core.enums import Color, PieceType

# Letters used in placement strings such as "rnbqkbnr/pppppppp/...";
# White takes the uppercase form.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

# Unicode chessmen run king..pawn from U+2654 (White) and U+265A (Black).
_GLYPH_ORDER = (
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.PAWN,
)

_CHARS: dict[tuple[Color, PieceType], str] = {}
for _pt, _letter in _LETTERS.items():
    _CHARS[(Color.WHITE, _pt)] = _letter.upper()
    _CHARS[(Color.BLACK, _pt)] = _letter
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {v: k for k, v in _CHARS.items()}

_UNICODE: dict[tuple[Color, PieceType], str] = {}
for _i, _pt in enumerate(_GLYPH_ORDER):
    _UNICODE[(Color.WHITE, _pt)] = chr(0x2654 + _i)
    _UNICODE[(Color.BLACK, _pt)] = chr(0x265A + _i)


@dataclass(frozen=True, slots=True)
class Piece:
    """A chessman as the board stores it: just its colour and kind.

    Boards share instances freely. When a pawn reaches the last rank the
    board gets the queen from :meth:`promoted_to` in its place.
    """

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter used in placement strings and board dumps (White uppercase)."""
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a placement-string letter; ``ValueError`` for anything else."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Glyph shown beside each entry in the move history, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    def promoted_to(self, piece_type: PieceType) -> Piece:
        """Same-colour piece of *piece_type*."""
        return Piece(self.color, piece_type)
