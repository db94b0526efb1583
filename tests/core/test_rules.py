"""Tests for Rules: check, checkmate, stalemate."""

from masterchess.core.board import Board
from masterchess.core.enums import Color, GameStatus
from masterchess.core.notation import STARTING_PLACEMENT, board_from_placement
from masterchess.core.rules import Rules

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        board = board_from_placement(STARTING_PLACEMENT)
        assert not Rules.is_in_check(board, Color.WHITE)
        assert Rules.status(board, Color.WHITE) == GameStatus.ONGOING

    def test_fools_mate_in_check(self) -> None:
        # After 1.f3 e5 2.g4 Qh4# white is in check
        board = board_from_placement(FOOLS_MATE)
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_in_check(board, Color.BLACK)

    def test_check_with_escape_is_check_status(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.status(board, Color.WHITE) == GameStatus.CHECK


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = board_from_placement(FOOLS_MATE)
        assert Rules.is_checkmate(board, Color.WHITE)
        assert Rules.status(board, Color.WHITE) == GameStatus.CHECKMATE

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        board = board_from_placement("R2k4/8/3K4/8/8/8/8/8")
        assert Rules.is_checkmate(board, Color.BLACK)
        assert Rules.status(board, Color.BLACK).is_terminal

    def test_not_checkmate_when_can_escape(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert not Rules.is_checkmate(board, Color.WHITE)

    def test_not_checkmate_when_check_can_be_blocked(self) -> None:
        # Rook a1 checks along the back rank; only Rb2-b1 interposes
        board = board_from_placement("7k/8/8/8/8/8/1R4PP/r6K")
        assert Rules.is_in_check(board, Color.WHITE)
        assert not Rules.is_checkmate(board, Color.WHITE)
        assert Rules.has_any_legal_moves(board, Color.WHITE)


class TestStalemate:
    def test_king_trapped(self) -> None:
        # Black king on h8, white K on f6, white Q on g6
        board = board_from_placement("7k/8/5KQ1/8/8/8/8/8")
        assert Rules.is_stalemate(board, Color.BLACK)
        assert not Rules.is_checkmate(board, Color.BLACK)
        assert Rules.status(board, Color.BLACK) == GameStatus.STALEMATE

    def test_not_stalemate_when_has_moves(self) -> None:
        board = board_from_placement("7k/8/5K2/8/8/8/8/8")
        assert not Rules.is_stalemate(board, Color.BLACK)

    def test_checkmate_is_not_stalemate(self) -> None:
        board = board_from_placement(FOOLS_MATE)
        assert not Rules.is_stalemate(board, Color.WHITE)


class TestMissingKing:
    def test_side_without_king_is_mated(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/8")
        assert Rules.is_in_check(board, Color.WHITE)
        assert Rules.status(board, Color.WHITE) == GameStatus.CHECKMATE

    def test_empty_board(self) -> None:
        board = Board()
        assert not Rules.has_any_legal_moves(board, Color.BLACK)
