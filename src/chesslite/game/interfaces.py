"""Abstract interfaces for the game layer.

The UI depends on :class:`IGameController`, not on the concrete
controller, so it can be driven by a stub in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece

if TYPE_CHECKING:
    from chesslite.core.types import Square
    from chesslite.game.settings import GameSettings
    from chesslite.game.state import MoveResult

# Asked synchronously when a pawn reaches its last rank; the answer is parsed
# leniently, see parse_promotion_choice().
PromotionProvider = Callable[[Piece], str | PieceType | None]


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator consumed by the UI."""

    @abstractmethod
    def new_game(self, settings: GameSettings | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def legal_moves(self, piece: Piece) -> list[Square]:
        """Destination squares to highlight for *piece*."""

    @abstractmethod
    def is_legal_move(self, piece: Piece, target: Square) -> bool:
        """Does *target* follow *piece*'s movement rule on this board?"""

    @abstractmethod
    def is_move_allowed(self, piece: Piece, target: Square) -> bool:
        """Check-aware gate, called before :meth:`apply_move`."""

    @abstractmethod
    def apply_move(
        self,
        piece: Piece,
        target: Square,
        promotion: str | PieceType | None = None,
    ) -> MoveResult:
        """Execute a legal move for the side to move."""

    @abstractmethod
    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked?"""

    @abstractmethod
    def is_checkmate(self, color: Color) -> bool:
        """Is *color* checkmated?"""
