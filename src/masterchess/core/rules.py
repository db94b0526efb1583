"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from masterchess.core.board import Board
from masterchess.core.enums import Color, GameStatus
from masterchess.core.move_generator import MoveGenerator


class Rules:
    """Static rule-checker that operates on a :class:`Board` and a side to move."""

    # Product policy: only checkmate and stalemate end the game.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def has_any_legal_moves(board: Board, color: Color) -> bool:
        return MoveGenerator(board).has_any_legal_moves(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        return gen.is_in_check(color) and not gen.has_any_legal_moves(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        return not gen.is_in_check(color) and not gen.has_any_legal_moves(color)

    @staticmethod
    def status(board: Board, color: Color) -> GameStatus:
        """Status of *color* as the side to move."""
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(color)
        if not gen.has_any_legal_moves(color):
            return GameStatus.CHECKMATE if in_check else GameStatus.STALEMATE
        return GameStatus.CHECK if in_check else GameStatus.ONGOING
