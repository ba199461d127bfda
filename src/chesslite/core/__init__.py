"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesslite.core import Board, MoveGenerator, Rules, parse_square

    board = Board.initial()
    gen = MoveGenerator(board)
    pawn = board.piece_at(parse_square("e2"))
    print(gen.legal_moves(pawn))
"""

from chesslite.core.board import Board
from chesslite.core.enums import PROMOTION_TYPES, Color, PieceType
from chesslite.core.move_generator import MoveGenerator
from chesslite.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    parse_promotion_choice,
)
from chesslite.core.piece import Piece
from chesslite.core.rules import Rules
from chesslite.core.types import (
    Square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    "PROMOTION_TYPES",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "parse_promotion_choice",
]
