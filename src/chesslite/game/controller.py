"""GameController — the rules engine's boundary towards the UI.

Coordinates: GameState, MoveGenerator, Rules.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslite.core.enums import Color, PieceType
from chesslite.core.move_generator import MoveGenerator
from chesslite.core.notation import parse_promotion_choice
from chesslite.core.piece import Piece
from chesslite.core.rules import Rules
from chesslite.core.types import Square
from chesslite.game.interfaces import IGameController, PromotionProvider
from chesslite.game.settings import GameSettings
from chesslite.game.state import REJECTED, GameState, MoveResult

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveResult], None]
CheckCallback = Callable[[Color], None]  # side now in check
CheckmateCallback = Callable[[Color], None]  # winner


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_checkmate: list[CheckmateCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs a hot-seat game: validates moves, applies them, keeps score,
    switches turns and reports check / checkmate.

    Illegal attempts never raise; they return ``False`` or a result with
    ``moved=False`` and leave the state untouched.

    Args:
        settings: Initial configuration; defaults to :class:`GameSettings`.
        promotion_provider: ``(pawn) -> choice`` asked when a promotion
            happens without an explicit choice.
    """

    __slots__ = ("_state", "_settings", "_promotion_provider", "events")

    def __init__(
        self,
        settings: GameSettings | None = None,
        promotion_provider: PromotionProvider | None = None,
    ) -> None:
        self._settings = settings or GameSettings()
        self._promotion_provider = promotion_provider
        self._state = GameState()
        self._state.setup(self._settings)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def current_player(self) -> Color:
        return self._state.current_player

    @property
    def opponent(self) -> Color:
        return self._state.opponent

    def piece_at(self, sq: Square) -> Piece | None:
        return self._state.board.piece_at(sq)

    def score(self, color: Color) -> int:
        return self._state.score(color)

    def set_promotion_provider(self, provider: PromotionProvider | None) -> None:
        self._promotion_provider = provider

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, settings: GameSettings | None = None) -> None:
        if settings is not None:
            self._settings = settings
        self._state = GameState()
        self._state.setup(self._settings)
        _LOGGER.debug("New game, %s to move", self._state.current_player)

    def legal_moves(self, piece: Piece) -> list[Square]:
        return MoveGenerator(self._state.board).legal_moves(piece)

    def is_legal_move(self, piece: Piece, target: Square) -> bool:
        return MoveGenerator(self._state.board).is_legal_move(piece, target)

    def is_move_allowed(self, piece: Piece, target: Square) -> bool:
        if piece not in self._state.board or not self._state.has_king(piece.color):
            return False
        return Rules.is_move_allowed(self._state.board, piece, target)

    def apply_move(
        self,
        piece: Piece,
        target: Square,
        promotion: str | PieceType | None = None,
    ) -> MoveResult:
        state = self._state
        board = state.board

        if state.is_game_over:
            _LOGGER.debug("Move %s-%s rejected: game is over", piece.position, target)
            return REJECTED
        if piece.color != state.current_player or piece not in board:
            _LOGGER.debug(
                "Move %s-%s rejected: not %s's turn", piece.position, target, piece.color
            )
            return REJECTED
        if not MoveGenerator(board).is_legal_move(piece, target):
            _LOGGER.debug(
                "Move %s-%s rejected: illegal for %s",
                piece.position,
                target,
                piece.piece_type,
            )
            return REJECTED

        mover = piece.color
        from_sq = piece.position
        captured = board.piece_at(target, mover.opposite)

        # Promotion swaps the pawn for a new piece at the same slot
        promoted = False
        placed = piece
        if piece.piece_type == PieceType.PAWN and target.rank == mover.promotion_rank:
            kind = self._resolve_promotion(piece, promotion)
            placed = Piece(mover, kind, target, promoted=True)
            board.replace(piece, placed)
            promoted = True
            _LOGGER.info("%s pawn promoted to %s on %s", mover, kind, target)
        else:
            piece.position = target

        if captured is not None:
            board.remove(captured)
            state.credit(mover, captured.points)
            _LOGGER.info(
                "%s captured %s on %s (+%d)",
                mover,
                captured.piece_type,
                target,
                captured.points,
            )

        state.switch_player()
        _LOGGER.debug("Applied %s %s-%s", placed.piece_type, from_sq, target)

        defender = mover.opposite
        check = False
        checkmate = False
        if not state.has_king(defender):
            # Only reachable through the approximate check rules.
            state.finish(mover)
            checkmate = True
            _LOGGER.info("%s king captured, %s wins", defender, mover)
        else:
            check = Rules.is_in_check(board, defender)
            checkmate = check and Rules.is_checkmate(board, defender)
            if checkmate:
                state.finish(mover)
                _LOGGER.info("Checkmate, %s wins", mover)
            elif check:
                _LOGGER.info("%s is in check", defender)

        result = MoveResult(
            moved=True,
            piece=placed,
            from_sq=from_sq,
            to_sq=target,
            captured=captured,
            promoted=promoted,
            check=check,
            checkmate=checkmate,
        )
        self._emit_move(result)
        if checkmate:
            self._emit_checkmate(mover)
        elif check:
            self._emit_check(defender)
        return result

    def is_in_check(self, color: Color) -> bool:
        if not self._state.has_king(color):
            return False
        return Rules.is_in_check(self._state.board, color)

    def is_checkmate(self, color: Color) -> bool:
        if not self._state.has_king(color):
            return False
        return Rules.is_checkmate(self._state.board, color)

    # ── Convenience ──────────────────────────────────────────────────────

    def submit_move(
        self,
        piece: Piece,
        target: Square,
        promotion: str | PieceType | None = None,
    ) -> MoveResult:
        """Validate with both gates, then apply."""
        if not self.is_legal_move(piece, target):
            _LOGGER.debug("Move %s-%s rejected: illegal", piece.position, target)
            return REJECTED
        if not self.is_move_allowed(piece, target):
            _LOGGER.debug("Move %s-%s rejected: king in check", piece.position, target)
            return REJECTED
        return self.apply_move(piece, target, promotion)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _resolve_promotion(
        self, pawn: Piece, promotion: str | PieceType | None
    ) -> PieceType:
        choice = promotion
        if choice is None and self._promotion_provider is not None:
            choice = self._promotion_provider(pawn)
        return parse_promotion_choice(choice, self._settings.default_promotion)

    def _emit_move(self, result: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(result)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)

    def _emit_checkmate(self, winner: Color) -> None:
        for cb in self.events.on_checkmate:
            cb(winner)
