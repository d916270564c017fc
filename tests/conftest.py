"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Mapping

import pytest

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square

# Upper case is White, lower case is Black.
_LETTERS: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

BoardFactory = Callable[..., Board]


def piece_from_letter(letter: str) -> Piece:
    color = Color.WHITE if letter.isupper() else Color.BLACK
    return Piece(color, _LETTERS[letter.lower()])


@pytest.fixture
def make_board() -> BoardFactory:
    """Build a validated board from a ``{square: letter}`` mapping."""

    def _make(
        placement: Mapping[Square, str],
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
    ) -> Board:
        return Board.from_placement(
            {sq: piece_from_letter(letter) for sq, letter in placement.items()},
            side_to_move=side_to_move,
            castling=castling,
            en_passant=en_passant,
        )

    return _make


@pytest.fixture
def initial() -> Board:
    return Board.initial()
