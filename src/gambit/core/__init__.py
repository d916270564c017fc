"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from gambit.core import Board, MoveGenerator, Rules

    board = Board.initial()
    for move in MoveGenerator(board).generate_legal_moves():
        print(move)
    Rules.apply(board, move)
"""

from gambit.core.board import Board
from gambit.core.builder import BoardBuilder
from gambit.core.enums import CastlingRights, Color, GameState, MoveFlag, PieceType
from gambit.core.errors import (
    ChessError,
    IllegalMove,
    InvalidPlacement,
    OutOfBounds,
    TerminalPosition,
)
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.core.piece import PIECE_VALUES, PROMOTION_TYPES, Piece
from gambit.core.rules import Rules
from gambit.core.types import Square

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameState",
    "MoveFlag",
    "PieceType",
    # Errors
    "ChessError",
    "IllegalMove",
    "InvalidPlacement",
    "OutOfBounds",
    "TerminalPosition",
    # Types
    "Square",
    # Domain objects
    "Board",
    "BoardBuilder",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Constants
    "PIECE_VALUES",
    "PROMOTION_TYPES",
]
