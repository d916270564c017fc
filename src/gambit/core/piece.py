"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, PieceType

# Centipawns. The king is never traded, so it carries no material.
PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 330,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 0,
}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    A piece carries no position: where it stands is implied by its slot on
    the :class:`~gambit.core.board.Board`.
    """

    color: Color
    piece_type: PieceType

    @property
    def value(self) -> int:
        """Material value in centipawns."""
        return PIECE_VALUES[self.piece_type]

    def promoted(self, piece_type: PieceType) -> Piece:
        """Same-colored piece of *piece_type*; only pawns promote."""
        if self.piece_type != PieceType.PAWN:
            raise ValueError(f"Only pawns promote, not {self.piece_type.name}")
        if piece_type not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {piece_type.name}")
        return Piece(self.color, piece_type)
