"""High-level chess rules: check, the check-aware move gate, checkmate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesslite.core.enums import Color
from chesslite.core.move_generator import KING_OFFSETS, MoveGenerator
from chesslite.core.types import Square, is_valid_square

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.piece import Piece


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Known simplifications kept on purpose:

    - While in check, a non-king piece may move to any square it can reach
      as long as some enemy piece attacks the king; the target is not
      required to lie between the checker and the king.
    - Checkmate only considers king moves.  Blocking or capturing the
      checking piece with another piece is not searched, and an escape
      square is judged by current enemy coverage alone, so a square behind
      the king on the checking line counts as free.
    - Outside of check every legal move is allowed, including ones that
      uncover the own king.
    """

    # -- Check engine ---------------------------------------------------------

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king on a square covered by an enemy piece?"""
        king = board.king(color)
        gen = MoveGenerator(board)
        return gen.is_square_covered(king.position, board.pieces(color.opposite))

    @staticmethod
    def checking_pieces(board: Board, color: Color) -> list[Piece]:
        """Enemy pieces whose legal moves include *color*'s king square."""
        king = board.king(color)
        gen = MoveGenerator(board)
        return gen.covering_pieces(king.position, board.pieces(color.opposite))

    # -- Legality filter ------------------------------------------------------

    @staticmethod
    def is_move_allowed(board: Board, piece: Piece, target: Square) -> bool:
        """Check-aware gate applied before executing an already legal move."""
        color = piece.color
        if not Rules.is_in_check(board, color):
            return True
        if piece.is_king:
            return Rules._is_king_step_safe(board, piece, target)
        return Rules.is_defending_piece(board, piece, target)

    @staticmethod
    def is_defending_piece(board: Board, piece: Piece, target: Square) -> bool:
        """May *piece* answer a check by moving to *target*?

        True when some enemy piece attacks the king and *piece* can reach
        *target*.  Whether *target* actually blocks or captures the checker
        is not verified.
        """
        if not Rules.checking_pieces(board, piece.color):
            return False
        return MoveGenerator(board).is_legal_move(piece, target)

    # -- Checkmate detector ---------------------------------------------------

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        """In check with no safe square next to the king."""
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.king_escape_squares(board, color)

    @staticmethod
    def king_escape_squares(board: Board, color: Color) -> list[Square]:
        """Adjacent squares no enemy piece covers on the current board."""
        king = board.king(color)
        gen = MoveGenerator(board)
        enemies = board.pieces(color.opposite)
        escapes: list[Square] = []
        for df, dr in KING_OFFSETS:
            sq = king.position.offset(df, dr)
            if not is_valid_square(sq):
                continue
            if board.piece_at(sq, color) is not None:
                continue
            if not gen.is_square_covered(sq, enemies):
                escapes.append(sq)
        return escapes

    # -- Internal -------------------------------------------------------------

    @staticmethod
    def _is_king_step_safe(board: Board, king: Piece, target: Square) -> bool:
        # Evaluated on a hypothetical copy; *board* is left untouched.
        hypothetical = board.with_move(king, target)
        if Rules.is_in_check(hypothetical, king.color):
            return False
        gen = MoveGenerator(board)
        return not gen.is_square_covered(target, board.pieces(king.color.opposite))
