"""Tests for the value types: Square, Piece, Move and the enums."""

import pytest

from gambit.core.enums import CastlingRights, Color, GameState, MoveFlag, PieceType
from gambit.core.errors import ChessError, OutOfBounds
from gambit.core.move import Move
from gambit.core.piece import PIECE_VALUES, Piece
from gambit.core.types import A1, E2, E4, E7, E8, H1, H8, Square


class TestSquare:
    def test_valid_coordinates(self) -> None:
        sq = Square(4, 3)
        assert sq.file == 4
        assert sq.rank == 3
        assert sq == E4

    @pytest.mark.parametrize("file,rank", [(8, 0), (0, 8), (-1, 3), (3, -1)])
    def test_off_board_raises(self, file: int, rank: int) -> None:
        with pytest.raises(OutOfBounds) as exc_info:
            Square(file, rank)
        assert exc_info.value.file == file
        assert exc_info.value.rank == rank

    def test_out_of_bounds_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Square(9, 9)
        assert issubclass(OutOfBounds, ChessError)

    def test_index_round_trip(self) -> None:
        assert A1.index == 0
        assert H8.index == 63
        assert Square.from_index(12) == E2
        with pytest.raises(OutOfBounds):
            Square.from_index(64)

    def test_offset(self) -> None:
        assert E2.offset(0, 2) == E4
        assert E7.offset(0, 1) == E8
        with pytest.raises(OutOfBounds):
            H1.offset(1, 0)

    def test_square_color(self) -> None:
        assert not A1.is_light
        assert H1.is_light
        assert not H8.is_light

    def test_hashable_and_ordered(self) -> None:
        assert len({Square(0, 0), A1, Square(7, 7)}) == 2
        assert sorted([H8, E2, A1]) == [A1, E2, H8]


class TestPiece:
    def test_values(self) -> None:
        assert Piece(Color.WHITE, PieceType.QUEEN).value == 900
        assert Piece(Color.BLACK, PieceType.KING).value == 0
        assert PIECE_VALUES[PieceType.KNIGHT] < PIECE_VALUES[PieceType.BISHOP]

    def test_pawn_promotes(self) -> None:
        pawn = Piece(Color.BLACK, PieceType.PAWN)
        assert pawn.promoted(PieceType.KNIGHT) == Piece(Color.BLACK, PieceType.KNIGHT)

    def test_only_pawns_promote(self) -> None:
        with pytest.raises(ValueError):
            Piece(Color.WHITE, PieceType.ROOK).promoted(PieceType.QUEEN)

    def test_cannot_promote_to_king(self) -> None:
        with pytest.raises(ValueError):
            Piece(Color.WHITE, PieceType.PAWN).promoted(PieceType.KING)


class TestMove:
    def test_defaults(self) -> None:
        move = Move(E2, E4)
        assert move.flag == MoveFlag.NORMAL
        assert move.promotion is None
        assert not move.is_capture

    def test_key_ignores_flag(self) -> None:
        assert Move(E2, E4).key == Move(E2, E4, MoveFlag.DOUBLE_PAWN).key
        assert Move(E7, E8, promotion=PieceType.QUEEN).key != Move(E7, E8).key

    def test_classification(self) -> None:
        assert Move(E4, E2, MoveFlag.EN_PASSANT).is_capture
        assert Move(E7, E8, MoveFlag.PROMOTION_CAPTURE, PieceType.ROOK).is_capture
        assert Move(E7, E8, MoveFlag.PROMOTION, PieceType.ROOK).is_promotion
        assert Move(E8, Square(6, 7), MoveFlag.CASTLE_KINGSIDE).is_castle


class TestEnums:
    def test_color(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.forward == -1
        assert str(Color.WHITE) == "white"

    def test_castling_rights(self) -> None:
        assert CastlingRights.both(Color.BLACK) == (
            CastlingRights.BLACK_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )
        assert CastlingRights.kingside(Color.WHITE) & CastlingRights.ALL

    def test_terminal_states(self) -> None:
        assert GameState.CHECKMATE.is_terminal
        assert GameState.STALEMATE.is_terminal
        assert not GameState.CHECK.is_terminal
