"""gambit: an embeddable chess rules engine with a minimax searcher.

Quick start::

    import gambit

    board = gambit.Board.initial()
    move, score = gambit.best_move(board, depth=3)
    gambit.apply(board, move)
"""

from __future__ import annotations

import logging

from gambit.core import (
    PIECE_VALUES,
    PROMOTION_TYPES,
    Board,
    BoardBuilder,
    CastlingRights,
    ChessError,
    Color,
    GameState,
    IllegalMove,
    InvalidPlacement,
    Move,
    MoveFlag,
    MoveGenerator,
    OutOfBounds,
    Piece,
    PieceType,
    Rules,
    Square,
    TerminalPosition,
)
from gambit.engine import (
    MATE_SCORE,
    MinimaxSearchEngine,
    SearchLimits,
    SearchResult,
    evaluate,
    material_balance,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def legal_moves(board: Board) -> list[Move]:
    return Rules.legal_moves(board)


def is_in_check(board: Board) -> bool:
    return Rules.is_in_check(board)


def classify(board: Board) -> GameState:
    return Rules.classify(board)


def last_captured_piece(board: Board) -> Piece | None:
    """Piece removed by the move that produced *board*, if any."""
    return Rules.last_captured_piece(board)


def apply(board: Board, move: Move) -> Board:
    """Play a validated *move* on *board* in place; see :meth:`Rules.apply`."""
    return Rules.apply(board, move)


def best_move(board: Board, depth: int = 3) -> tuple[Move, int]:
    """Best move for the side to move and its score, searched to *depth* plies."""
    result = MinimaxSearchEngine().search(board, SearchLimits(max_depth=depth))
    return result.best_move, result.score


__all__ = [
    "Board",
    "BoardBuilder",
    "CastlingRights",
    "ChessError",
    "Color",
    "GameState",
    "IllegalMove",
    "InvalidPlacement",
    "MATE_SCORE",
    "MinimaxSearchEngine",
    "Move",
    "MoveFlag",
    "MoveGenerator",
    "OutOfBounds",
    "PIECE_VALUES",
    "PROMOTION_TYPES",
    "Piece",
    "PieceType",
    "Rules",
    "SearchLimits",
    "SearchResult",
    "Square",
    "TerminalPosition",
    "apply",
    "best_move",
    "classify",
    "evaluate",
    "is_in_check",
    "last_captured_piece",
    "legal_moves",
    "material_balance",
]
