"""Square value type and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

Files and ranks are zero-based: file 0 is the a-file, rank 0 is White's
back rank.
"""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.errors import OutOfBounds

BOARD_SIZE = 8


def is_on_board(file: int, rank: int) -> bool:
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable (file, rank) coordinate, validated on construction."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_on_board(self.file, self.rank):
            raise OutOfBounds(self.file, self.rank)

    @property
    def index(self) -> int:
        """Dense 0–63 index, a1 = 0, h8 = 63."""
        return self.rank * BOARD_SIZE + self.file

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not 0 <= index < BOARD_SIZE * BOARD_SIZE:
            raise OutOfBounds(index % BOARD_SIZE, index // BOARD_SIZE)
        return _SQUARES[index]

    def offset(self, file_delta: int, rank_delta: int) -> Square:
        """Square shifted by the given deltas; raises OutOfBounds off the board."""
        file = self.file + file_delta
        rank = self.rank + rank_delta
        if not is_on_board(file, rank):
            raise OutOfBounds(file, rank)
        return _SQUARES[rank * BOARD_SIZE + file]

    @property
    def is_light(self) -> bool:
        return (self.file + self.rank) % 2 == 1


_SQUARES: tuple[Square, ...] = tuple(
    Square(index % BOARD_SIZE, index // BOARD_SIZE)
    for index in range(BOARD_SIZE * BOARD_SIZE)
)

ALL_SQUARES = _SQUARES


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = _SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = _SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = _SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = _SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = _SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = _SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = _SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = _SQUARES[56:64]
