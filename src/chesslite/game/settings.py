"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chesslite.core.enums import Color, PieceType
from chesslite.core.notation import STARTING_FEN


@dataclass
class GameSettings:
    """All user-configurable game settings."""

    # Side that makes the first move
    first_player: Color = Color.WHITE

    # Used when the promotion answer is missing or unrecognised
    default_promotion: PieceType = PieceType.QUEEN

    # FEN piece placement for the initial board
    start_fen: str = STARTING_FEN
