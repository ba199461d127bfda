"""FEN piece-placement I/O and promotion-choice parsing."""

from __future__ import annotations

import re

from chesslite.core.board import Board
from chesslite.core.enums import PROMOTION_TYPES, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_PROMOTION_PATTERNS: tuple[tuple[re.Pattern[str], PieceType], ...] = (
    (re.compile(r"^(queen|q)$", re.IGNORECASE), PieceType.QUEEN),
    (re.compile(r"^(rook|r)$", re.IGNORECASE), PieceType.ROOK),
    (re.compile(r"^(bishop|b)$", re.IGNORECASE), PieceType.BISHOP),
    # "k" is accepted for knight as well as the standard "n".
    (re.compile(r"^(knight|n|k)$", re.IGNORECASE), PieceType.KNIGHT),
)


def board_from_fen(fen: str) -> Board:
    """Parse the piece-placement field of a FEN string into a :class:`Board`.

    Only the first field is read; side to move, castling and the clocks are
    ignored if present.  Pieces are added rank 8 to rank 1, file a to h.
    """
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")
    placement = parts[0]

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board.add(Piece.from_char(ch, Square(file, rank)))
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    return board


def board_to_fen(board: Board) -> str:
    """Serialise the piece placement of *board* to a FEN placement field."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board.piece_at(Square(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def parse_promotion_choice(
    choice: str | PieceType | None,
    default: PieceType = PieceType.QUEEN,
) -> PieceType:
    """Map a user's promotion answer to a piece type.

    Unrecognised answers (including ``None``, non-string values and
    non-promotable types such as king or pawn) fall back to *default*.
    """
    if isinstance(choice, PieceType):
        if choice not in PROMOTION_TYPES:
            return default
        return choice
    if not isinstance(choice, str):
        return default
    text = choice.strip()
    for pattern, piece_type in _PROMOTION_PATTERNS:
        if pattern.match(text):
            return piece_type
    return default
