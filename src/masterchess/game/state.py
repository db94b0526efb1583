"""Game state snapshot and the pure move transition."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from masterchess.core.board import Board
from masterchess.core.enums import Color, GameStatus, PieceType
from masterchess.core.move import Move
from masterchess.core.move_generator import MoveGenerator, promotion_row
from masterchess.core.types import Square

# Pawns promote automatically to the strongest piece.
PROMOTION_PIECE = PieceType.QUEEN


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class GameState:
    """One immutable snapshot of a game.

    Every applied move produces a new snapshot. The board held here is
    frozen (see :meth:`Board.freeze`): writes through ``state.board``
    raise ``TypeError``; work on ``state.board.copy()`` instead. A board
    passed in writable is copied first, so the caller keeps its own.

    ``selected`` and ``possible_moves`` are transient UI-adjacent fields,
    cleared after each executed or aborted selection.

    Snapshots compare by value but are not hashable.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.WHITE
    selected: Square | None = None
    possible_moves: tuple[Square, ...] = ()
    is_check: bool = False
    is_checkmate: bool = False
    is_stalemate: bool = False
    winner: Color | None = None
    captured_white: tuple[PieceType, ...] = ()
    captured_black: tuple[PieceType, ...] = ()
    history: tuple[Move, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not self.board.is_frozen:
            object.__setattr__(self, "board", self.board.copy().freeze())

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position, White to move."""
        return cls()

    @classmethod
    def from_board(cls, board: Board, turn: Color = Color.WHITE) -> GameState:
        """Snapshot for an arbitrary *board* with flags derived for *turn*."""
        board = board.copy().freeze()
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(turn)
        has_moves = gen.has_any_legal_moves(turn)
        return cls(
            board=board,
            turn=turn,
            is_check=in_check,
            is_checkmate=in_check and not has_moves,
            is_stalemate=not in_check and not has_moves,
            winner=turn.opposite if in_check and not has_moves else None,
        )

    # ── Selection ────────────────────────────────────────────────────────

    def with_selection(self, sq: Square, moves: list[Square]) -> GameState:
        return replace(self, selected=sq, possible_moves=tuple(moves))

    def cleared_selection(self) -> GameState:
        if self.selected is None and not self.possible_moves:
            return self
        return replace(self, selected=None, possible_moves=())

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def status(self) -> GameStatus:
        if self.is_checkmate:
            return GameStatus.CHECKMATE
        if self.is_stalemate:
            return GameStatus.STALEMATE
        if self.is_check:
            return GameStatus.CHECK
        return GameStatus.ONGOING

    @property
    def is_game_over(self) -> bool:
        return self.is_checkmate or self.is_stalemate

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.history)

    @property
    def fullmove_number(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    @property
    def last_move(self) -> Move | None:
        return self.history[-1] if self.history else None

    def captured(self, color: Color) -> tuple[PieceType, ...]:
        """Kinds of *color*'s pieces taken so far, in capture order."""
        return self.captured_white if color == Color.WHITE else self.captured_black


def apply_move(state: GameState, from_sq: Square, to_sq: Square) -> GameState:
    """Return the successor of *state* after moving *from_sq* → *to_sq*.

    Caller is responsible for the legality check; this only commits the
    move and recomputes every derived flag.
    """
    from_sq, to_sq = Square(*from_sq), Square(*to_sq)
    board = state.board.copy()
    moving = board[from_sq]
    if moving is None:
        raise ValueError(f"No piece on {from_sq}")

    captured = board.move_piece(from_sq, to_sq)
    captured_white = state.captured_white
    captured_black = state.captured_black
    if captured is not None:
        if captured.color == Color.WHITE:
            captured_white += (captured.piece_type,)
        else:
            captured_black += (captured.piece_type,)

    promoted = (
        moving.piece_type == PieceType.PAWN
        and to_sq.row == promotion_row(moving.color)
    )
    if promoted:
        board[to_sq] = moving.promoted_to(PROMOTION_PIECE)

    next_turn = state.turn.opposite
    gen = MoveGenerator(board)
    next_in_check = gen.is_in_check(next_turn)
    next_has_moves = gen.has_any_legal_moves(next_turn)
    is_mate = next_in_check and not next_has_moves
    is_stale = not next_in_check and not next_has_moves

    record = Move(
        piece=moving,
        from_sq=from_sq,
        to_sq=to_sq,
        captured=captured.piece_type if captured is not None else None,
        is_check=next_in_check,
        is_checkmate=is_mate,
        promoted=promoted,
    )

    return GameState(
        board=board.freeze(),
        turn=next_turn,
        is_check=next_in_check,
        is_checkmate=is_mate,
        is_stalemate=is_stale,
        winner=state.turn if is_mate else None,
        captured_white=captured_white,
        captured_black=captured_black,
        history=state.history + (record,),
    )
