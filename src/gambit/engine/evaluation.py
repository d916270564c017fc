"""Static evaluation: material balance plus light piece-square weighting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.enums import Color, PieceType
from gambit.core.piece import PIECE_VALUES

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.types import Square

# Per kind: (centralisation weight, advancement weight).
_POSITIONAL_WEIGHTS: dict[PieceType, tuple[int, int]] = {
    PieceType.PAWN: (3, 8),
    PieceType.KNIGHT: (10, 0),
    PieceType.BISHOP: (6, 2),
    PieceType.ROOK: (0, 4),
    PieceType.QUEEN: (3, 0),
}


def evaluate(board: Board) -> int:
    """Score in centipawns from White's point of view.

    Positive favours White, negative favours Black, whoever is to move.
    """
    score = 0
    for sq, piece in board.occupied():
        val = PIECE_VALUES[piece.piece_type]
        val += piece_square_bonus(piece.piece_type, piece.color, sq)
        if piece.color == Color.WHITE:
            score += val
        else:
            score -= val
    return score


def material_balance(board: Board, color: Color) -> int:
    """Material of *color* minus the opponent's, positional terms excluded."""
    balance = 0
    for _, piece in board.occupied():
        if piece.color == color:
            balance += piece.value
        else:
            balance -= piece.value
    return balance


def piece_square_bonus(piece_type: PieceType, color: Color, sq: Square) -> int:
    """Positional tie-breaker, an order of magnitude below material.

    Pieces gain for standing near the centre and, where it matters, for
    advancing; the king gains for staying home near a corner.
    """
    # Ranks counted from the owner's back rank.
    advance = sq.rank if color == Color.WHITE else 7 - sq.rank
    file_ring = abs(2 * sq.file - 7) // 2

    if piece_type == PieceType.KING:
        return file_ring * 4 - advance * 12

    # 0 on the four centre squares, 3 on the edge.
    ring = max(file_ring, abs(2 * sq.rank - 7) // 2)
    central, forward = _POSITIONAL_WEIGHTS[piece_type]
    return (3 - ring) * central + advance * forward
