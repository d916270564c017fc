"""Fluent helper for assembling custom positions."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color
from gambit.core.piece import Piece
from gambit.core.types import BOARD_SIZE, Square


class BoardBuilder:
    """Collects a placement plus game state, then validates it on :meth:`build`.

    Example::

        board = (
            BoardBuilder()
            .piece(E1, Piece(Color.WHITE, PieceType.KING))
            .piece(E8, Piece(Color.BLACK, PieceType.KING))
            .row(1, Piece(Color.WHITE, PieceType.PAWN))
            .player_moving(Color.BLACK)
            .build()
        )
    """

    def __init__(self) -> None:
        self._placement: dict[Square, Piece] = {}
        self._side_to_move = Color.WHITE
        self._castling = CastlingRights.NONE
        self._en_passant: Square | None = None
        self._halfmove_clock = 0
        self._fullmove_number = 1

    @classmethod
    def from_board(cls, board: Board) -> BoardBuilder:
        """Start from an existing board's placement and state."""
        builder = cls()
        builder._placement = dict(board.occupied())
        builder._side_to_move = board.side_to_move
        builder._castling = board.castling
        builder._en_passant = board.en_passant
        builder._halfmove_clock = board.halfmove_clock
        builder._fullmove_number = board.fullmove_number
        return builder

    # -- Placement ----------------------------------------------------------

    def piece(self, sq: Square, piece: Piece) -> BoardBuilder:
        self._placement[sq] = piece
        return self

    def row(self, rank: int, piece: Piece) -> BoardBuilder:
        """Fill every square of *rank* with *piece*."""
        for file in range(BOARD_SIZE):
            self._placement[Square(file, rank)] = piece
        return self

    def column(self, file: int, piece: Piece) -> BoardBuilder:
        """Fill every square of *file* with *piece*."""
        for rank in range(BOARD_SIZE):
            self._placement[Square(file, rank)] = piece
        return self

    def remove(self, sq: Square) -> BoardBuilder:
        self._placement.pop(sq, None)
        return self

    # -- State --------------------------------------------------------------

    def enable_castling(
        self, rights: CastlingRights = CastlingRights.ALL
    ) -> BoardBuilder:
        self._castling |= rights
        return self

    def disable_castling(
        self, rights: CastlingRights = CastlingRights.ALL
    ) -> BoardBuilder:
        self._castling &= ~rights
        return self

    def player_moving(self, color: Color) -> BoardBuilder:
        self._side_to_move = color
        return self

    def en_passant(self, sq: Square | None) -> BoardBuilder:
        self._en_passant = sq
        return self

    def clocks(self, halfmove_clock: int, fullmove_number: int) -> BoardBuilder:
        self._halfmove_clock = halfmove_clock
        self._fullmove_number = fullmove_number
        return self

    def build(self) -> Board:
        """Validated :class:`Board`; raises ``InvalidPlacement`` on bad input."""
        return Board.from_placement(
            self._placement,
            side_to_move=self._side_to_move,
            castling=self._castling,
            en_passant=self._en_passant,
            halfmove_clock=self._halfmove_clock,
            fullmove_number=self._fullmove_number,
        )
