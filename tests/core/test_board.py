"""Tests for Board: initial setup, copying, raw make_move and validation."""

from collections.abc import Callable

import pytest

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, MoveFlag, PieceType
from gambit.core.errors import InvalidPlacement
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import (
    A1,
    A8,
    B1,
    C3,
    D4,
    E1,
    E2,
    E3,
    E4,
    E5,
    E6,
    E7,
    E8,
    F3,
    F6,
    G1,
    G8,
    H1,
)

BoardFactory = Callable[..., Board]


class TestInitial:
    def test_piece_count(self, initial: Board) -> None:
        assert sum(1 for _ in initial.occupied()) == 32
        assert len(initial.all_pieces(Color.WHITE)) == 16
        assert len(initial.pieces(Color.BLACK, PieceType.PAWN)) == 8

    def test_state(self, initial: Board) -> None:
        assert initial.side_to_move == Color.WHITE
        assert initial.castling == CastlingRights.ALL
        assert initial.has_castling_right(CastlingRights.BLACK_QUEENSIDE)
        assert initial.en_passant is None
        assert initial.halfmove_clock == 0
        assert initial.fullmove_number == 1
        assert initial.last_captured is None

    def test_kings(self, initial: Board) -> None:
        assert initial.king_square(Color.WHITE) == E1
        assert initial.king_square(Color.BLACK) == E8
        assert initial[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_occupied_is_ordered(self, initial: Board) -> None:
        squares = [sq for sq, _ in initial.occupied()]
        assert squares == sorted(squares, key=lambda sq: sq.index)
        assert squares[0] == A1


class TestCopy:
    def test_copy_is_equal(self, initial: Board) -> None:
        assert initial.copy() == initial

    def test_copy_is_independent(self, initial: Board) -> None:
        clone = initial.copy()
        clone.make_move(Move(G1, F3))
        assert initial == Board.initial()
        assert initial[G1] == Piece(Color.WHITE, PieceType.KNIGHT)
        assert clone[G1] is None

    def test_not_hashable(self, initial: Board) -> None:
        with pytest.raises(TypeError):
            hash(initial)


class TestMakeMove:
    def test_double_push_sets_en_passant(self, initial: Board) -> None:
        initial.make_move(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        assert initial.en_passant == E3
        initial.make_move(Move(G8, F6))
        assert initial.en_passant is None

    def test_clocks(self, initial: Board) -> None:
        initial.make_move(Move(G1, F3))
        assert initial.halfmove_clock == 1
        assert initial.fullmove_number == 1
        initial.make_move(Move(G8, F6))
        assert initial.halfmove_clock == 2
        assert initial.fullmove_number == 2
        initial.make_move(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        assert initial.halfmove_clock == 0

    def test_returns_captured(self, make_board: BoardFactory) -> None:
        board = make_board({E1: "K", E8: "k", D4: "N", E6: "p"})
        captured = board.make_move(Move(D4, E6, MoveFlag.CAPTURE))
        assert captured == Piece(Color.BLACK, PieceType.PAWN)
        assert board.last_captured == captured

    def test_empty_origin_raises(self, initial: Board) -> None:
        with pytest.raises(ValueError):
            initial.make_move(Move(E4, E5))


class TestFromPlacement:
    def test_minimal_position(self, make_board: BoardFactory) -> None:
        board = make_board({E1: "K", E8: "k"}, side_to_move=Color.BLACK)
        assert board.side_to_move == Color.BLACK
        assert board.king_square(Color.BLACK) == E8

    def test_missing_king(self) -> None:
        with pytest.raises(InvalidPlacement):
            Board.from_placement({E1: Piece(Color.WHITE, PieceType.KING)})

    def test_two_kings(self, make_board: BoardFactory) -> None:
        with pytest.raises(InvalidPlacement):
            make_board({E1: "K", H1: "K", E8: "k"})

    def test_pawn_on_back_rank(self, make_board: BoardFactory) -> None:
        with pytest.raises(InvalidPlacement):
            make_board({E1: "K", E8: "k", A8: "P"})

    def test_side_not_to_move_in_check(self, make_board: BoardFactory) -> None:
        with pytest.raises(InvalidPlacement):
            make_board({A1: "K", E1: "R", E8: "k"})

    def test_en_passant_wrong_rank(self, make_board: BoardFactory) -> None:
        with pytest.raises(InvalidPlacement):
            make_board({E1: "K", E8: "k", E5: "p"}, en_passant=E5)

    def test_en_passant_without_pawn(self, make_board: BoardFactory) -> None:
        with pytest.raises(InvalidPlacement):
            make_board({E1: "K", E8: "k"}, en_passant=E6)

    def test_en_passant_origin_occupied(self, make_board: BoardFactory) -> None:
        with pytest.raises(InvalidPlacement, match="origin"):
            make_board({E1: "K", E8: "k", E5: "p", E7: "b"}, en_passant=E6)

    def test_en_passant_accepted(self, make_board: BoardFactory) -> None:
        board = make_board({E1: "K", E8: "k", E5: "p"}, en_passant=E6)
        assert board.en_passant == E6

    def test_unreachable_castling_dropped(self, make_board: BoardFactory) -> None:
        board = make_board(
            {E1: "K", A1: "R", E8: "k", C3: "N", B1: "B"},
            castling=CastlingRights.ALL,
        )
        assert board.castling == CastlingRights.WHITE_QUEENSIDE

    def test_invalid_placement_is_value_error(self) -> None:
        assert issubclass(InvalidPlacement, ValueError)

    def test_equality_ignores_last_captured(self, make_board: BoardFactory) -> None:
        board = make_board({E1: "K", E8: "k", F6: "n"})
        other = board.copy()
        other.last_captured = Piece(Color.WHITE, PieceType.PAWN)
        assert board == other
