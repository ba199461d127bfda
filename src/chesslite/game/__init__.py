"""Game management layer — controller, state, settings.

Quick start::

    from chesslite.core import parse_square
    from chesslite.game import GameController

    ctrl = GameController()
    pawn = ctrl.piece_at(parse_square("e2"))
    result = ctrl.submit_move(pawn, parse_square("e4"))
"""

from chesslite.game.controller import GameController, GameEvents
from chesslite.game.interfaces import GamePhase, IGameController, PromotionProvider
from chesslite.game.settings import GameSettings
from chesslite.game.state import REJECTED, GameState, MoveResult

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "PromotionProvider",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "MoveResult",
    "REJECTED",
]
