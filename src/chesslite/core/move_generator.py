"""Per-piece legal-move generation, path clearance and square coverage."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from chesslite.core.enums import PieceType
from chesslite.core.types import Square, is_valid_square

if TYPE_CHECKING:
    from chesslite.core.board import Board
    from chesslite.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (1, 2),
    (-2, 1),
    (-1, 2),
    (2, -1),
    (1, -2),
    (-2, -1),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_SLIDING_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.ROOK: ROOK_DIRS,
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# (|df|, |dr|) -> does the displacement match the piece's movement pattern?
_SHAPES: dict[PieceType, Callable[[int, int], bool]] = {
    PieceType.KNIGHT: lambda adf, adr: {adf, adr} == {1, 2},
    PieceType.BISHOP: lambda adf, adr: adf == adr,
    PieceType.ROOK: lambda adf, adr: adf == 0 or adr == 0,
    PieceType.QUEEN: lambda adf, adr: adf == adr or adf == 0 or adr == 0,
    PieceType.KING: lambda adf, adr: max(adf, adr) == 1,
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _ray(origin: Square, df: int, dr: int) -> list[Square]:
    """On-board squares from *origin* outward (exclusive) along one direction."""
    squares: list[Square] = []
    sq = origin.offset(df, dr)
    while is_valid_square(sq):
        squares.append(sq)
        sq = sq.offset(df, dr)
    return squares


class MoveGenerator:
    """Generates legal destination squares for pieces on a :class:`Board`.

    "Legal" here means allowed by the piece's movement rule and the current
    obstruction, without regard to whether the mover's king ends up in
    check; see :class:`~chesslite.core.rules.Rules` for the check-aware gate.
    The generator only reads the board.
    """

    __slots__ = ("_board", "_generators")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._generators: dict[PieceType, Callable[[Piece, Square], list[Square]]] = {
            PieceType.PAWN: self._gen_pawn,
            PieceType.KNIGHT: self._gen_knight,
            PieceType.BISHOP: self._gen_sliding,
            PieceType.ROOK: self._gen_sliding,
            PieceType.QUEEN: self._gen_sliding,
            PieceType.KING: self._gen_king,
        }

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, piece: Piece, position: Square | None = None) -> list[Square]:
        """Destination squares for *piece*.

        *position* probes the piece as if it stood on that square instead of
        its own; its real square is then treated as vacated.
        """
        origin = piece.position if position is None else position
        if not is_valid_square(origin):
            return []
        return self._generators[piece.piece_type](piece, origin)

    def is_legal_move(
        self, piece: Piece, target: Square, position: Square | None = None
    ) -> bool:
        return target in self.legal_moves(piece, position)

    def is_move_valid(
        self, piece: Piece, target: Square, position: Square | None = None
    ) -> bool:
        """Check a single target: bounds, movement shape, path and capture rule."""
        origin = piece.position if position is None else position
        if not is_valid_square(origin) or not is_valid_square(target):
            return False
        if target == origin:
            return False

        piece_type = piece.piece_type
        if piece_type == PieceType.PAWN:
            return target in self._gen_pawn(piece, origin)

        adf = abs(target.file - origin.file)
        adr = abs(target.rank - origin.rank)
        if not _SHAPES[piece_type](adf, adr):
            return False
        if piece_type in _SLIDING_DIRS and not self.is_path_clear(
            origin, target, ignore=piece
        ):
            return False
        return self._can_land(piece, target)

    def is_path_clear(
        self, from_sq: Square, to_sq: Square, ignore: Piece | None = None
    ) -> bool:
        """Are all squares strictly between *from_sq* and *to_sq* empty?

        Walks the straight line one step at a time; any piece of either
        color blocks.  *ignore* is treated as absent (the moving piece
        itself when it is probed from a hypothetical square).
        """
        df = to_sq.file - from_sq.file
        dr = to_sq.rank - from_sq.rank
        step_f, step_r = _sign(df), _sign(dr)
        for i in range(1, max(abs(df), abs(dr))):
            sq = Square(from_sq.file + i * step_f, from_sq.rank + i * step_r)
            if self._occupant(sq, ignore) is not None:
                return False
        return True

    # -- Coverage (used by the check engine) ---------------------------------

    def is_square_covered(self, sq: Square, pieces: Iterable[Piece]) -> bool:
        """Does any of *pieces* have *sq* among its legal moves?"""
        return any(sq in self.legal_moves(p) for p in pieces)

    def covering_pieces(self, sq: Square, pieces: Iterable[Piece]) -> list[Piece]:
        """Those of *pieces* whose legal moves include *sq*."""
        return [p for p in pieces if sq in self.legal_moves(p)]

    # -- Occupancy helpers ----------------------------------------------------

    def _occupant(self, sq: Square, mover: Piece | None) -> Piece | None:
        found = self._board.piece_at(sq)
        if found is mover:
            return None
        return found

    def _can_land(self, piece: Piece, target: Square) -> bool:
        """Empty, or holding an enemy piece (capture)."""
        occupant = self._occupant(target, piece)
        return occupant is None or occupant.color != piece.color

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece, origin: Square) -> list[Square]:
        moves: list[Square] = []
        direction = piece.color.direction

        one_step = origin.offset(0, direction)
        if is_valid_square(one_step) and self._occupant(one_step, piece) is None:
            moves.append(one_step)
            if origin.rank == piece.color.pawn_start_rank:
                two_step = origin.offset(0, 2 * direction)
                if is_valid_square(two_step) and self._occupant(two_step, piece) is None:
                    moves.append(two_step)

        for df in (-1, 1):
            cap_sq = origin.offset(df, direction)
            if not is_valid_square(cap_sq):
                continue
            target = self._occupant(cap_sq, piece)
            if target is not None and target.color != piece.color:
                moves.append(cap_sq)
        return moves

    def _gen_knight(self, piece: Piece, origin: Square) -> list[Square]:
        return self._gen_steps(piece, origin, KNIGHT_OFFSETS)

    def _gen_king(self, piece: Piece, origin: Square) -> list[Square]:
        return self._gen_steps(piece, origin, KING_OFFSETS)

    def _gen_steps(
        self,
        piece: Piece,
        origin: Square,
        offsets: tuple[tuple[int, int], ...],
    ) -> list[Square]:
        moves: list[Square] = []
        for df, dr in offsets:
            to_sq = origin.offset(df, dr)
            if is_valid_square(to_sq) and self._can_land(piece, to_sq):
                moves.append(to_sq)
        return moves

    def _gen_sliding(self, piece: Piece, origin: Square) -> list[Square]:
        moves: list[Square] = []
        for df, dr in _SLIDING_DIRS[piece.piece_type]:
            for to_sq in _ray(origin, df, dr):
                if self.is_move_valid(piece, to_sq, origin):
                    moves.append(to_sq)
        return moves
