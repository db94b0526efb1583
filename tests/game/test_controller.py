"""Tests for GameController — select, execute, click and reset."""

import logging

import pytest

from masterchess.core.enums import Color, GameStatus, PieceType
from masterchess.core.move import Move
from masterchess.core.notation import board_from_placement
from masterchess.core.piece import Piece
from masterchess.core.rules import Rules
from masterchess.core.types import A2, E1, E2, E3, E4, E5, E7, F3, G1, parse_square
from masterchess.game.controller import GameController
from masterchess.game.state import GameState


def _play(ctrl: GameController, from_name: str, to_name: str) -> GameState:
    from_sq, to_sq = parse_square(from_name), parse_square(to_name)
    assert to_sq in ctrl.select_square(from_sq)
    return ctrl.execute(from_sq, to_sq)


def _fools_mate(ctrl: GameController) -> GameState:
    _play(ctrl, "f2", "f3")
    _play(ctrl, "e7", "e5")
    _play(ctrl, "g2", "g4")
    return _play(ctrl, "d8", "h4")


class TestSelectSquare:
    def test_own_piece_returns_targets(self) -> None:
        ctrl = GameController()
        assert ctrl.select_square(E2) == [E3, E4]
        assert ctrl.state.selected == E2
        assert ctrl.state.possible_moves == (E3, E4)

    def test_empty_square_ignored(self) -> None:
        ctrl = GameController()
        assert ctrl.select_square(E4) == []
        assert ctrl.state.selected is None

    def test_opponent_piece_ignored(self) -> None:
        ctrl = GameController()
        ctrl.select_square(E2)
        assert ctrl.select_square(E7) == []
        assert ctrl.state.selected == E2

    def test_off_board_ignored(self) -> None:
        ctrl = GameController()
        assert ctrl.select_square((8, 8)) == []

    def test_clear_selection(self) -> None:
        ctrl = GameController()
        ctrl.select_square(G1)
        ctrl.clear_selection()
        assert ctrl.state.selected is None
        assert ctrl.state.possible_moves == ()


class TestExecute:
    def test_legal_move_accepted(self) -> None:
        ctrl = GameController()
        state = _play(ctrl, "e2", "e4")
        assert state.turn == Color.BLACK
        assert state.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert ctrl.state is state

    def test_without_selection_rejected(self) -> None:
        ctrl = GameController()
        before = ctrl.state
        assert ctrl.execute(E2, E4) is before

    def test_target_outside_selection_rejected(self) -> None:
        ctrl = GameController()
        ctrl.select_square(E2)
        before = ctrl.state
        assert ctrl.execute(E2, E5) is before

    def test_origin_must_match_selection(self) -> None:
        ctrl = GameController()
        ctrl.select_square(G1)
        before = ctrl.state
        assert ctrl.execute(E2, E4) is before

    def test_repeat_execute_is_noop(self) -> None:
        ctrl = GameController()
        after = _play(ctrl, "e2", "e4")
        assert ctrl.execute(E2, E4) is after
        assert len(ctrl.state.history) == 1

    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.DEBUG, logger="masterchess.game.controller"):
            ctrl.execute(E2, E4)
        assert "origin not selected" in caplog.text


class TestCaptures:
    def test_both_sides_capture_twice(self) -> None:
        ctrl = GameController()
        _play(ctrl, "e2", "e4")
        _play(ctrl, "d7", "d5")
        _play(ctrl, "e4", "d5")
        _play(ctrl, "d8", "d5")
        _play(ctrl, "b1", "c3")
        _play(ctrl, "d5", "a2")
        state = _play(ctrl, "a1", "a2")

        assert state.captured_black == (PieceType.PAWN, PieceType.QUEEN)
        assert state.captured_white == (PieceType.PAWN, PieceType.PAWN)
        assert [m.notation for m in state.history if m.is_capture] == [
            "e4d5",
            "d8d5",
            "d5a2",
            "a1a2",
        ]
        assert state.board[A2] == Piece(Color.WHITE, PieceType.ROOK)
        assert state.turn == Color.BLACK


class TestSnapshotBoard:
    def test_state_board_rejects_writes(self) -> None:
        ctrl = GameController()
        with pytest.raises(TypeError):
            ctrl.state.board[E1] = None
        assert ctrl.state.board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert E1 in ctrl.state.board.pieces(Color.WHITE)

    def test_state_board_rejects_move_piece(self) -> None:
        ctrl = GameController()
        with pytest.raises(TypeError):
            ctrl.state.board.move_piece(E2, E4)
        assert ctrl.select_square(E2) == [E3, E4]

    def test_board_frozen_after_move(self) -> None:
        ctrl = GameController()
        state = _play(ctrl, "e2", "e4")
        assert state.board.is_frozen
        with pytest.raises(TypeError):
            state.board[E4] = None

    def test_board_copy_is_writable(self) -> None:
        ctrl = GameController()
        board = ctrl.board()
        assert not board.is_frozen
        board[E1] = None
        assert ctrl.state.board[E1] == Piece(Color.WHITE, PieceType.KING)


class TestGameOver:
    def test_fools_mate(self) -> None:
        ctrl = GameController()
        state = _fools_mate(ctrl)
        assert state.is_checkmate
        assert state.winner == Color.BLACK
        assert state.status == GameStatus.CHECKMATE
        assert state.history[-1].display == "d8h4#"
        assert not Rules.has_any_legal_moves(state.board, Color.WHITE)

    def test_no_selection_after_mate(self) -> None:
        ctrl = GameController()
        _fools_mate(ctrl)
        assert ctrl.select_square(E2) == []

    def test_execute_after_mate_is_noop(self) -> None:
        ctrl = GameController()
        final = _fools_mate(ctrl)
        assert ctrl.execute(E2, E3) is final

    def test_load_stalemate_position(self) -> None:
        ctrl = GameController()
        state = ctrl.load(board_from_placement("7k/8/5KQ1/8/8/8/8/8"), Color.BLACK)
        assert state.is_stalemate
        assert state.is_game_over
        assert ctrl.select_square(parse_square("h8")) == []


class TestClick:
    def test_select_then_move(self) -> None:
        ctrl = GameController()
        ctrl.click(E2)
        assert ctrl.state.selected == E2
        state = ctrl.click(E4)
        assert state.turn == Color.BLACK
        assert state.history[-1].notation == "e2e4"

    def test_click_other_own_piece_reselects(self) -> None:
        ctrl = GameController()
        ctrl.click(E2)
        ctrl.click(G1)
        assert ctrl.state.selected == G1
        assert F3 in ctrl.state.possible_moves

    def test_click_non_target_clears(self) -> None:
        ctrl = GameController()
        ctrl.click(E2)
        ctrl.click(E5)
        assert ctrl.state.selected is None
        assert ctrl.state.history == ()

    def test_click_opponent_piece_without_selection(self) -> None:
        ctrl = GameController()
        before = ctrl.state
        assert ctrl.click(E7) is before


class TestResetAndEvents:
    def test_reset_restores_initial(self) -> None:
        ctrl = GameController()
        _play(ctrl, "e2", "e4")
        state = ctrl.reset()
        assert state == GameState.initial()
        assert ctrl.state.history == ()

    def test_board_is_a_copy(self) -> None:
        ctrl = GameController()
        board = ctrl.board()
        board[E4] = Piece(Color.BLACK, PieceType.QUEEN)
        assert ctrl.state.board[E4] is None

    def test_on_move_and_game_over(self) -> None:
        ctrl = GameController()
        moves: list[Move] = []
        overs: list[GameState] = []
        ctrl.events.on_move.append(lambda move, _state: moves.append(move))
        ctrl.events.on_game_over.append(overs.append)

        _fools_mate(ctrl)

        assert [m.notation for m in moves] == ["f2f3", "e7e5", "g2g4", "d8h4"]
        assert len(overs) == 1
        assert overs[0].winner == Color.BLACK

    def test_on_reset_and_selection(self) -> None:
        ctrl = GameController()
        resets: list[GameState] = []
        selections: list[GameState] = []
        ctrl.events.on_reset.append(resets.append)
        ctrl.events.on_selection_changed.append(selections.append)

        ctrl.select_square(E2)
        ctrl.clear_selection()
        ctrl.clear_selection()
        ctrl.reset()

        assert len(selections) == 2
        assert len(resets) == 1
