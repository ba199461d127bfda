"""Tests for MoveGenerator: per-piece rules, path clearance, coverage."""

import pytest

from chesslite.core.board import Board
from chesslite.core.enums import Color, PieceType
from chesslite.core.move_generator import MoveGenerator
from chesslite.core.notation import STARTING_FEN, board_from_fen, board_to_fen
from chesslite.core.piece import Piece
from chesslite.core.types import (
    A1,
    A3,
    A4,
    A7,
    B1,
    B2,
    B3,
    B4,
    B5,
    B6,
    C1,
    C2,
    C3,
    C4,
    C5,
    C6,
    D1,
    D2,
    D3,
    D4,
    D5,
    D6,
    D7,
    E2,
    E3,
    E4,
    E5,
    E6,
    E7,
    E8,
    F2,
    F3,
    F4,
    F5,
    F6,
    G1,
    G4,
    G8,
    Square,
    is_valid_square,
)

BUSY_FEN = "r1bqk2r/pp3ppp/2n2n2/2bpp3/4P3/2NP1N2/PPP2PPP/R1BQKB1R"


def _setup(fen: str, sq: Square) -> tuple[MoveGenerator, Piece]:
    board = board_from_fen(fen)
    piece = board.piece_at(sq)
    assert piece is not None, f"No piece on {sq}"
    return MoveGenerator(board), piece


class TestPawn:
    def test_single_and_double_from_start(self) -> None:
        gen, pawn = _setup(STARTING_FEN, E2)
        assert gen.legal_moves(pawn) == [E3, E4]

    def test_black_pawn_moves_down(self) -> None:
        gen, pawn = _setup(STARTING_FEN, E7)
        assert gen.legal_moves(pawn) == [E6, E5]

    def test_blocked_directly(self) -> None:
        gen, pawn = _setup("8/8/8/8/8/4p3/4P3/8", E2)
        assert gen.legal_moves(pawn) == []

    def test_double_blocked_on_target(self) -> None:
        gen, pawn = _setup("8/8/8/8/4p3/8/4P3/8", E2)
        assert gen.legal_moves(pawn) == [E3]

    def test_no_double_off_start_rank(self) -> None:
        gen, pawn = _setup("8/8/8/8/8/4P3/8/8", E3)
        assert gen.legal_moves(pawn) == [E4]

    def test_diagonal_captures_enemy_only(self) -> None:
        gen, pawn = _setup("8/8/8/3p1p2/4P3/8/8/8", E4)
        assert gen.legal_moves(pawn) == [E5, D5, F5]

    def test_no_diagonal_onto_own_piece(self) -> None:
        gen, pawn = _setup("8/8/8/3P4/4P3/8/8/8", E4)
        assert gen.legal_moves(pawn) == [E5]

    def test_no_diagonal_onto_empty_square(self) -> None:
        gen, pawn = _setup("8/8/8/8/4P3/8/8/8", E4)
        assert D5 not in gen.legal_moves(pawn)
        assert F5 not in gen.legal_moves(pawn)

    def test_last_rank_has_no_moves(self) -> None:
        gen, pawn = _setup("8/4P3/8/8/8/8/8/8", E7)
        assert gen.legal_moves(pawn, E8) == []


class TestRook:
    def test_open_board(self) -> None:
        gen, rook = _setup("8/8/8/8/8/8/8/R7", A1)
        assert len(gen.legal_moves(rook)) == 14

    def test_stops_at_blockers(self) -> None:
        gen, rook = _setup("8/8/3P4/8/3R1p2/8/8/8", D4)
        moves = gen.legal_moves(rook)
        assert set(moves) == {E4, F4, C4, B4, A4, D5, D3, D2, D1}
        assert F4 in moves  # enemy blocker is a capture
        assert G4 not in moves
        assert D6 not in moves  # own blocker excluded
        assert D7 not in moves

    def test_boxed_in_at_start(self) -> None:
        gen, rook = _setup(STARTING_FEN, A1)
        assert gen.legal_moves(rook) == []


class TestBishop:
    def test_diagonals_with_blockers(self) -> None:
        gen, bishop = _setup("8/8/5p2/8/3B4/8/1P6/8", D4)
        moves = gen.legal_moves(bishop)
        assert set(moves) == {E5, F6, E3, F2, G1, C5, B6, A7, C3}
        assert B2 not in moves

    def test_boxed_in_at_start(self) -> None:
        gen, bishop = _setup(STARTING_FEN, C1)
        assert gen.legal_moves(bishop) == []


class TestQueen:
    def test_open_board(self) -> None:
        gen, queen = _setup("8/8/8/8/3Q4/8/8/8", D4)
        assert len(gen.legal_moves(queen)) == 27

    def test_union_of_rook_and_bishop(self) -> None:
        gen, queen = _setup("8/8/5p2/8/3Q1p2/8/1P6/8", D4)
        rook_gen, rook = _setup("8/8/5p2/8/3R1p2/8/1P6/8", D4)
        bishop_gen, bishop = _setup("8/8/5p2/8/3B1p2/8/1P6/8", D4)
        expected = set(rook_gen.legal_moves(rook)) | set(bishop_gen.legal_moves(bishop))
        assert set(gen.legal_moves(queen)) == expected

    def test_boxed_in_at_start(self) -> None:
        gen, queen = _setup(STARTING_FEN, D1)
        assert gen.legal_moves(queen) == []


class TestKnight:
    def test_from_start(self) -> None:
        gen, knight = _setup(STARTING_FEN, B1)
        assert set(gen.legal_moves(knight)) == {A3, C3}

    def test_jumps_over_surrounding_friends(self) -> None:
        # Knight on d4 ringed by its own pawns; f5 (a knight target) is also own.
        gen, knight = _setup("8/8/8/2PPPP2/2PNP3/2PPP3/8/8", D4)
        assert set(gen.legal_moves(knight)) == {E6, C6, B5, B3, C2, E2, F3}
        assert F5 not in gen.legal_moves(knight)

    def test_captures_enemy(self) -> None:
        gen, knight = _setup("8/8/4p3/8/3N4/8/8/8", D4)
        assert E6 in gen.legal_moves(knight)


class TestKing:
    def test_center(self) -> None:
        gen, king = _setup("8/8/8/8/3K4/8/8/8", D4)
        assert len(gen.legal_moves(king)) == 8

    def test_corner(self) -> None:
        gen, king = _setup("8/8/8/8/8/8/8/K7", A1)
        assert len(gen.legal_moves(king)) == 3

    def test_own_pieces_excluded(self) -> None:
        gen, king = _setup(STARTING_FEN, Square(4, 0))
        assert gen.legal_moves(king) == []


class TestHypotheticalPosition:
    def test_defaults_to_own_position(self) -> None:
        gen, rook = _setup("8/8/8/8/8/8/8/R7", A1)
        assert gen.legal_moves(rook) == gen.legal_moves(rook, A1)

    def test_probe_elsewhere_vacates_real_square(self) -> None:
        gen, rook = _setup("8/8/8/8/8/8/8/3R4", D1)
        moves = gen.legal_moves(rook, D4)
        assert D1 in moves
        assert D5 in moves
        assert rook.position == D1

    def test_off_board_probe_is_empty(self) -> None:
        gen, rook = _setup("8/8/8/8/8/8/8/3R4", D1)
        assert gen.legal_moves(rook, Square(9, 9)) == []


class TestPathClearance:
    def test_blocked_file(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert not gen.is_path_clear(A1, A3)

    def test_adjacent_has_no_intermediates(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.is_path_clear(A1, Square(0, 1))

    def test_open_stretch(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.is_path_clear(A3, Square(0, 5))

    def test_blocked_diagonal(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert not gen.is_path_clear(C1, E3)

    def test_enemy_also_blocks(self) -> None:
        gen = MoveGenerator(board_from_fen("8/8/8/8/8/8/p7/R7"))
        assert not gen.is_path_clear(A1, A3)


class TestMoveValidity:
    def test_shape_mismatch(self) -> None:
        gen, rook = _setup("8/8/8/8/8/8/8/R7", A1)
        assert not gen.is_move_valid(rook, B2)

    def test_off_board_target(self) -> None:
        gen, rook = _setup("8/8/8/8/8/8/8/R7", A1)
        assert not gen.is_move_valid(rook, Square(0, 8))

    def test_knight_onto_own_piece(self) -> None:
        gen, knight = _setup(STARTING_FEN, B1)
        assert gen.is_move_valid(knight, C3)
        assert not gen.is_move_valid(knight, D2)

    def test_is_legal_move(self) -> None:
        gen, pawn = _setup(STARTING_FEN, E2)
        assert gen.is_legal_move(pawn, E4)
        assert not gen.is_legal_move(pawn, E5)


class TestProperties:
    @pytest.mark.parametrize("fen", [STARTING_FEN, BUSY_FEN, "7k/8/8/8/8/8/8/Q6K"])
    def test_never_off_board(self, fen: str) -> None:
        board = board_from_fen(fen)
        gen = MoveGenerator(board)
        for piece in board.all_pieces():
            assert all(is_valid_square(sq) for sq in gen.legal_moves(piece))

    def test_sliders_never_pass_through_pieces(self) -> None:
        board = board_from_fen(BUSY_FEN)
        gen = MoveGenerator(board)
        sliders = (PieceType.ROOK, PieceType.BISHOP, PieceType.QUEEN)
        for piece in board.all_pieces():
            if piece.piece_type not in sliders:
                continue
            for sq in gen.legal_moves(piece):
                assert gen.is_path_clear(piece.position, sq), (piece, sq)

    def test_idempotent(self) -> None:
        board = board_from_fen(BUSY_FEN)
        gen = MoveGenerator(board)
        for piece in board.all_pieces():
            assert gen.legal_moves(piece) == gen.legal_moves(piece)

    def test_generation_does_not_mutate(self) -> None:
        board = board_from_fen(BUSY_FEN)
        gen = MoveGenerator(board)
        for piece in board.all_pieces():
            gen.legal_moves(piece)
            gen.legal_moves(piece, D4)
        assert board_to_fen(board) == BUSY_FEN


class TestCoverage:
    def test_square_covered(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        assert gen.is_square_covered(F3, board.pieces(Color.WHITE))

    def test_square_not_covered(self) -> None:
        board = Board.initial()
        gen = MoveGenerator(board)
        assert not gen.is_square_covered(E5, board.pieces(Color.WHITE))

    def test_covering_pieces(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4R2K")
        gen = MoveGenerator(board)
        covering = gen.covering_pieces(E8, board.pieces(Color.WHITE))
        assert [p.piece_type for p in covering] == [PieceType.ROOK]
        assert not gen.covering_pieces(G8, board.pieces(Color.WHITE))
