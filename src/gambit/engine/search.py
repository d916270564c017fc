"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.move import Move

RatedMove: TypeAlias = "tuple[Move, int]"


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 3


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines that pick a move for the side to move."""

    def search(self, board: Board, limits: SearchLimits) -> SearchResult: ...
