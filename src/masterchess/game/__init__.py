"""Game management layer — state snapshots and the controller that owns them.

Quick start::

    from masterchess.game import GameController
    from masterchess.core import parse_square

    ctrl = GameController()
    ctrl.select_square(parse_square("e2"))
    ctrl.execute(parse_square("e2"), parse_square("e4"))
"""

from masterchess.game.controller import GameController, GameEvents
from masterchess.game.state import PROMOTION_PIECE, GameState, apply_move

__all__ = [
    "GameController",
    "GameEvents",
    "GameState",
    "PROMOTION_PIECE",
    "apply_move",
]
