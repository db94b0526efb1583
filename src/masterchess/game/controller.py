"""GameController — owner of the single live :class:`GameState`.

All mutation goes through :meth:`select_square`, :meth:`execute`,
:meth:`click` and :meth:`reset`; each replaces the state wholesale.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from masterchess.core.board import Board
from masterchess.core.enums import Color
from masterchess.core.move import Move
from masterchess.core.move_generator import MoveGenerator
from masterchess.core.types import Square, is_on_board
from masterchess.game.state import GameState, apply_move

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]
StateCallback = Callable[[GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[StateCallback] = field(default_factory=list)
    on_reset: list[StateCallback] = field(default_factory=list)
    on_selection_changed: list[StateCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates user commands against the current snapshot and applies them.

    Thread-safety: single writer. Callers that accept commands from more
    than one source must serialise them before they reach the controller.
    """

    __slots__ = ("_state", "events")

    def __init__(self, state: GameState | None = None) -> None:
        self._state = state if state is not None else GameState.initial()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    def board(self) -> Board:
        """Copy of the current board; edits do not reach the game."""
        return self._state.board.copy()

    # ── Commands ─────────────────────────────────────────────────────────

    def reset(self) -> GameState:
        """Discard the game and start again from the initial position."""
        self._state = GameState.initial()
        _LOGGER.debug("Game reset")
        for cb in self.events.on_reset:
            cb(self._state)
        return self._state

    def load(self, board: Board, turn: Color = Color.WHITE) -> GameState:
        """Start a game from an arbitrary position (history and captures empty)."""
        self._state = GameState.from_board(board, turn)
        for cb in self.events.on_reset:
            cb(self._state)
        return self._state

    def select_square(self, sq: tuple[int, int]) -> list[Square]:
        """Select the side-to-move piece on *sq* and return its legal targets.

        Empty squares, opponent pieces and terminal games leave the
        selection untouched and yield an empty list.
        """
        state = self._state
        if state.is_game_over or not is_on_board(sq):
            return []
        sq = Square(*sq)
        piece = state.board[sq]
        if piece is None or piece.color != state.turn:
            return []

        moves = MoveGenerator(state.board).legal_moves(sq)
        self._state = state.with_selection(sq, moves)
        self._emit_selection()
        return moves

    def clear_selection(self) -> None:
        state = self._state
        self._state = state.cleared_selection()
        if self._state is not state:
            self._emit_selection()

    def execute(self, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> GameState:
        """Apply the selected move *from_sq* → *to_sq*.

        The move must come from the most recent :meth:`select_square`
        result; anything else is rejected and the state is returned as is.
        """
        state = self._state
        if state.is_game_over:
            _LOGGER.debug("Rejected %s->%s: game is over", from_sq, to_sq)
            return state
        if state.selected is None or tuple(from_sq) != state.selected:
            _LOGGER.debug("Rejected %s->%s: origin not selected", from_sq, to_sq)
            return state
        if tuple(to_sq) not in state.possible_moves:
            _LOGGER.debug("Rejected %s->%s: not a legal target", from_sq, to_sq)
            return state
        piece = state.board[state.selected]
        if piece is None or piece.color != state.turn:
            _LOGGER.debug("Rejected %s->%s: not the side to move", from_sq, to_sq)
            return state

        self._state = apply_move(state, state.selected, Square(*to_sq))
        move = self._state.history[-1]
        _LOGGER.debug("Applied %s", move.display)

        self._emit_move(move)
        if self._state.is_game_over:
            self._emit_game_over()
        return self._state

    def click(self, sq: tuple[int, int]) -> GameState:
        """Interpret a board click the way the board surface forwards it.

        Own piece → (re)select it. Selected piece and a legal target →
        move. Anything else → drop the selection.
        """
        state = self._state
        if state.is_game_over or not is_on_board(sq):
            return state

        piece = state.board[sq]
        if piece is not None and piece.color == state.turn:
            self.select_square(sq)
            return self._state

        if state.selected is not None:
            if tuple(sq) in state.possible_moves:
                return self.execute(state.selected, sq)
            self.clear_selection()
        return self._state

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_game_over(self) -> None:
        for cb in self.events.on_game_over:
            cb(self._state)

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._state)
