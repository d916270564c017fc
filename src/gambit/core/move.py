"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import MoveFlag, PieceType
from gambit.core.types import Square

_CAPTURE_FLAGS = frozenset(
    (MoveFlag.CAPTURE, MoveFlag.EN_PASSANT, MoveFlag.PROMOTION_CAPTURE)
)
_CASTLE_FLAGS = frozenset((MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE))


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    Moves produced by the generator carry their exact :class:`MoveFlag`.
    A consumer may build a bare ``Move(from_sq, to_sq)`` (plus ``promotion``
    for a pawn reaching the last rank); applying it resolves the flag from
    the board.
    """

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    @property
    def key(self) -> tuple[Square, Square, PieceType | None]:
        """Identity of the move request, independent of its flag."""
        return (self.from_sq, self.to_sq, self.promotion)

    @property
    def is_capture(self) -> bool:
        return self.flag in _CAPTURE_FLAGS

    @property
    def is_castle(self) -> bool:
        return self.flag in _CASTLE_FLAGS

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None
