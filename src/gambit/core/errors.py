"""Exception hierarchy raised by the rules engine and the search."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gambit.core.enums import GameState
    from gambit.core.move import Move


class ChessError(Exception):
    """Base class for every error raised by gambit."""


class OutOfBounds(ChessError, ValueError):
    """A square coordinate, or the result of offsetting one, left the 8x8 grid."""

    def __init__(self, file: int, rank: int) -> None:
        super().__init__(f"Square ({file}, {rank}) is off the board")
        self.file = file
        self.rank = rank


class IllegalMove(ChessError):
    """The requested move is not in the legal set of the current board."""

    def __init__(self, move: Move, reason: str = "not a legal move") -> None:
        super().__init__(f"Illegal move {move!r}: {reason}")
        self.move = move
        self.reason = reason


class TerminalPosition(ChessError):
    """The board is already checkmate or stalemate."""

    def __init__(self, state: GameState) -> None:
        super().__init__(f"Position is terminal ({state.name.lower()})")
        self.state = state


class InvalidPlacement(ChessError, ValueError):
    """A supplied piece placement cannot describe a playable position."""
