"""Tests for GameState snapshots and the apply_move transition."""

import pytest

from masterchess.core.enums import Color, GameStatus, PieceType
from masterchess.core.move_generator import MoveGenerator
from masterchess.core.notation import board_from_placement
from masterchess.core.piece import Piece
from masterchess.core.types import A1, A7, A8, D5, E2, E4, E7, E5, H1, H2, parse_square
from masterchess.game.state import PROMOTION_PIECE, GameState, apply_move


class TestInitialState:
    def test_defaults(self) -> None:
        state = GameState.initial()
        assert state.turn == Color.WHITE
        assert state.selected is None
        assert state.possible_moves == ()
        assert state.history == ()
        assert state.captured_white == () and state.captured_black == ()
        assert state.winner is None
        assert state.status == GameStatus.ONGOING
        assert not state.is_game_over

    def test_move_counters(self) -> None:
        state = GameState.initial()
        assert state.ply_count == 0
        assert state.fullmove_number == 1
        assert state.last_move is None

    def test_equal_by_value(self) -> None:
        assert GameState.initial() == GameState.initial()
        assert GameState.initial() != apply_move(GameState.initial(), E2, E4)

    def test_not_hashable(self) -> None:
        with pytest.raises(TypeError):
            hash(GameState.initial())

    def test_constructor_freezes_a_private_copy(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/4K3")
        state = GameState(board=board)
        assert state.board.is_frozen
        assert not board.is_frozen
        board[E4] = Piece(Color.BLACK, PieceType.QUEEN)
        assert state.board[E4] is None


class TestApplyMove:
    def test_quiet_move(self) -> None:
        state = apply_move(GameState.initial(), E2, E4)
        assert state.turn == Color.BLACK
        assert state.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert state.board[E2] is None
        assert state.history[-1].notation == "e2e4"
        assert state.ply_count == 1

    def test_previous_snapshot_untouched(self) -> None:
        before = GameState.initial()
        apply_move(before, E2, E4)
        assert before.board[E2] == Piece(Color.WHITE, PieceType.PAWN)
        assert before.board[E4] is None
        assert before.history == ()

    def test_selection_cleared(self) -> None:
        state = GameState.initial().with_selection(E2, [parse_square("e3"), E4])
        after = apply_move(state, E2, E4)
        assert after.selected is None
        assert after.possible_moves == ()

    def test_fullmove_number_after_pair(self) -> None:
        state = apply_move(GameState.initial(), E2, E4)
        state = apply_move(state, E7, E5)
        assert state.fullmove_number == 2
        assert state.turn == Color.WHITE

    def test_capture_recorded_by_victim_color(self) -> None:
        start = GameState.from_board(board_from_placement("4k3/8/8/3p4/4P3/8/8/4K3"))
        state = apply_move(start, E4, D5)
        assert state.captured_black == (PieceType.PAWN,)
        assert state.captured_white == ()
        assert state.captured(Color.BLACK) == (PieceType.PAWN,)
        assert state.history[-1].captured == PieceType.PAWN

    def test_empty_origin_raises(self) -> None:
        with pytest.raises(ValueError):
            apply_move(GameState.initial(), E4, parse_square("e5"))


class TestPromotion:
    def test_white_pawn_becomes_queen(self) -> None:
        start = GameState.from_board(board_from_placement("4k3/P7/8/8/8/8/8/4K3"))
        state = apply_move(start, A7, A8)
        assert state.board[A8] == Piece(Color.WHITE, PROMOTION_PIECE)

    def test_record_keeps_pawn_and_flags_promotion(self) -> None:
        start = GameState.from_board(board_from_placement("4k3/P7/8/8/8/8/8/4K3"))
        move = apply_move(start, A7, A8).history[-1]
        assert move.piece == Piece(Color.WHITE, PieceType.PAWN)
        assert move.promoted
        assert move.notation == "a7a8"

    def test_new_queen_gives_check(self) -> None:
        start = GameState.from_board(board_from_placement("4k3/P7/8/8/8/8/8/4K3"))
        state = apply_move(start, A7, A8)
        assert state.is_check
        assert not state.is_checkmate
        assert state.history[-1].display == "a7a8+"

    def test_promoted_square_moves_like_a_queen(self) -> None:
        start = GameState.from_board(board_from_placement("4k3/P7/8/8/8/8/8/4K3"))
        state = apply_move(start, A7, A8)
        moves = MoveGenerator(state.board).pseudo_moves(A8)
        assert A1 in moves
        assert parse_square("h1") in moves

    def test_black_pawn_promotes_on_first_row(self) -> None:
        start = GameState.from_board(
            board_from_placement("4k3/8/8/8/8/8/7p/K7"), Color.BLACK
        )
        state = apply_move(start, H2, H1)
        assert state.board[H1] == Piece(Color.BLACK, PieceType.QUEEN)
        assert state.board[A1] == Piece(Color.WHITE, PieceType.KING)
        assert state.is_check


class TestTerminalStates:
    def test_from_board_detects_checkmate(self) -> None:
        board = board_from_placement("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")
        state = GameState.from_board(board)
        assert state.is_checkmate
        assert state.winner == Color.BLACK
        assert state.status == GameStatus.CHECKMATE
        assert state.is_game_over

    def test_move_into_stalemate(self) -> None:
        start = GameState.from_board(board_from_placement("7k/8/5K2/6Q1/8/8/8/8"))
        state = apply_move(start, parse_square("g5"), parse_square("g6"))
        assert state.turn == Color.BLACK
        assert state.is_stalemate
        assert not state.is_check
        assert state.winner is None
        assert state.status == GameStatus.STALEMATE
        assert state.is_game_over

    def test_from_board_copies_board(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/4K3")
        state = GameState.from_board(board)
        board[E4] = Piece(Color.BLACK, PieceType.QUEEN)
        assert state.board[E4] is None


class TestSelection:
    def test_with_and_cleared_selection(self) -> None:
        state = GameState.initial().with_selection(E2, [E4])
        assert state.selected == E2
        assert state.possible_moves == (E4,)
        cleared = state.cleared_selection()
        assert cleared.selected is None
        assert cleared.possible_moves == ()

    def test_clearing_nothing_returns_same_snapshot(self) -> None:
        state = GameState.initial()
        assert state.cleared_selection() is state
