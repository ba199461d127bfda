"""Board - two per-color piece collections on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

from chesslite.core.enums import Color, PieceType
from chesslite.core.piece import Piece
from chesslite.core.types import Square


class Board:
    """Mutable board made of one ordered piece list per color.

    The lists are the only board state: a square is occupied exactly when a
    live piece reports it as its position.  Capturing removes a piece from
    its list, promotion swaps a piece in place at the same index.
    """

    __slots__ = ("_pieces",)

    def __init__(
        self,
        white: list[Piece] | None = None,
        black: list[Piece] | None = None,
    ) -> None:
        self._pieces: tuple[list[Piece], list[Piece]] = (
            list(white or []),
            list(black or []),
        )

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Square, color: Color | None = None) -> Piece | None:
        """The piece on *sq*, optionally restricted to *color*'s collection."""
        for piece in self._candidates(color):
            if piece.position == sq:
                return piece
        return None

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.piece_at(sq)

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    def _candidates(self, color: Color | None) -> Iterator[Piece]:
        if color is not None:
            yield from self._pieces[int(color)]
            return
        yield from self._pieces[0]
        yield from self._pieces[1]

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Piece]:
        """Live collection of *color*'s pieces (the list itself, not a copy)."""
        return self._pieces[int(color)]

    def all_pieces(self) -> list[Piece]:
        """White pieces followed by black pieces."""
        return [*self._pieces[0], *self._pieces[1]]

    def pieces_of_type(self, color: Color, piece_type: PieceType) -> list[Piece]:
        return [p for p in self._pieces[int(color)] if p.piece_type == piece_type]

    def king(self, color: Color) -> Piece:
        """Return the single king for *color*."""
        for piece in self._pieces[int(color)]:
            if piece.piece_type == PieceType.KING:
                return piece
        raise ValueError(f"No {color.name} king on board")

    def index_of(self, piece: Piece) -> int:
        """Slot of *piece* in its color's collection, or -1 if not live."""
        for idx, live in enumerate(self._pieces[int(piece.color)]):
            if live is piece:
                return idx
        return -1

    def __contains__(self, piece: object) -> bool:
        return isinstance(piece, Piece) and self.index_of(piece) >= 0

    # -- Mutation -----------------------------------------------------------

    def add(self, piece: Piece) -> None:
        if self.piece_at(piece.position) is not None:
            raise ValueError(f"Square {piece.position} is already occupied")
        self._pieces[int(piece.color)].append(piece)

    def remove(self, piece: Piece) -> None:
        """Take *piece* off the board (capture)."""
        idx = self.index_of(piece)
        if idx < 0:
            raise ValueError(f"{piece!r} is not on the board")
        del self._pieces[int(piece.color)][idx]

    def replace(self, old: Piece, new: Piece) -> None:
        """Swap *old* for *new* at the same slot of the same collection."""
        if old.color != new.color:
            raise ValueError("Replacement piece must keep the same color")
        idx = self.index_of(old)
        if idx < 0:
            raise ValueError(f"{old!r} is not on the board")
        self._pieces[int(old.color)][idx] = new

    def clear(self) -> None:
        self._pieces = ([], [])

    # -- Copying / hypothetical boards ---------------------------------------

    def copy(self) -> Board:
        """Independent deep copy: every piece is a fresh object."""
        return Board(
            [replace(p) for p in self._pieces[0]],
            [replace(p) for p in self._pieces[1]],
        )

    def with_move(self, piece: Piece, target: Square) -> Board:
        """A copy of this board with *piece* standing on *target*.

        Any enemy piece on *target* is absent from the copy.  The receiver
        is never modified, so probing a move cannot leak a half-applied state.
        """
        idx = self.index_of(piece)
        if idx < 0:
            raise ValueError(f"{piece!r} is not on the board")
        hypothetical = self.copy()
        enemy = hypothetical.piece_at(target, piece.color.opposite)
        if enemy is not None:
            hypothetical.remove(enemy)
        hypothetical.pieces(piece.color)[idx].position = target
        return hypothetical

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        back_rank = [
            PieceType.ROOK,
            PieceType.KNIGHT,
            PieceType.BISHOP,
            PieceType.QUEEN,
            PieceType.KING,
            PieceType.BISHOP,
            PieceType.KNIGHT,
            PieceType.ROOK,
        ]
        b = cls()
        for color, home, pawn_rank in ((Color.WHITE, 0, 1), (Color.BLACK, 7, 6)):
            pieces = b.pieces(color)
            for f, pt in enumerate(back_rank):
                pieces.append(Piece(color, pt, Square(f, home)))
            for f in range(8):
                pieces.append(Piece(color, PieceType.PAWN, Square(f, pawn_rank)))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def _placement(self) -> dict[Square, tuple[Color, PieceType]]:
        return {p.position: (p.color, p.piece_type) for p in self.all_pieces()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._placement() == other._placement()

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.piece_at(Square(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
