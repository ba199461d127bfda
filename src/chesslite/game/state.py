"""Game state — board, turn, scores and phase in one explicit object."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.notation import board_from_fen
from chesslite.core.piece import Piece
from chesslite.core.types import Square
from chesslite.game.interfaces import GamePhase
from chesslite.game.settings import GameSettings


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a move attempt.

    ``moved`` is False when the attempt was rejected; every other field is
    then left at its default and the game state is unchanged.
    """

    moved: bool
    piece: Piece | None = None
    from_sq: Square | None = None
    to_sq: Square | None = None
    captured: Piece | None = None
    promoted: bool = False
    check: bool = False
    checkmate: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


REJECTED = MoveResult(moved=False)


def _zero_scores() -> dict[Color, int]:
    return {Color.WHITE: 0, Color.BLACK: 0}


@dataclass
class GameState:
    """Everything the rules engine mutates during a game.

    This is a pure data/logic class — no callbacks, no UI.
    """

    board: Board = field(default_factory=Board.initial)
    current_player: Color = Color.WHITE
    scores: dict[Color, int] = field(default_factory=_zero_scores)
    phase: GamePhase = GamePhase.NOT_STARTED
    winner: Color | None = None

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, settings: GameSettings | None = None) -> None:
        """Initialise (or reset) the game."""
        settings = settings or GameSettings()
        self.board = board_from_fen(settings.start_fen)
        self.current_player = settings.first_player
        self.scores = _zero_scores()
        self.phase = GamePhase.AWAITING_MOVE
        self.winner = None

    # ── Turn / score bookkeeping ─────────────────────────────────────────

    @property
    def opponent(self) -> Color:
        return self.current_player.opposite

    def switch_player(self) -> None:
        self.current_player = self.current_player.opposite

    def credit(self, color: Color, points: int) -> None:
        """Add capture *points* to *color*'s score."""
        if points < 0:
            raise ValueError(f"Score credit must be non-negative, got {points}")
        self.scores[color] += points

    def score(self, color: Color) -> int:
        return self.scores[color]

    # ── Game end ─────────────────────────────────────────────────────────

    def finish(self, winner: Color) -> None:
        self.winner = winner
        self.phase = GamePhase.GAME_OVER

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def has_king(self, color: Color) -> bool:
        return bool(self.board.pieces_of_type(color, PieceType.KING))
