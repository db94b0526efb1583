"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from masterchess.core import Board, MoveGenerator, parse_square

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.legal_moves(parse_square("g1")))
"""

from masterchess.core.board import Board, clone
from masterchess.core.enums import Color, GameStatus, PieceType
from masterchess.core.move import Move, move_notation
from masterchess.core.move_generator import (
    MoveGenerator,
    has_any_legal_moves,
    is_in_check,
    legal_moves,
    pseudo_moves,
)
from masterchess.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
    move_pairs,
)
from masterchess.core.piece import Piece
from masterchess.core.rules import Rules
from masterchess.core.types import (
    Square,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "clone",
    # Move functions
    "has_any_legal_moves",
    "is_in_check",
    "legal_moves",
    "pseudo_moves",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
    "move_notation",
    "move_pairs",
]
