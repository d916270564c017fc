"""High-level chess rules: move validation, check, checkmate, stalemate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gambit.core.enums import GameState, MoveFlag, PieceType
from gambit.core.errors import IllegalMove, TerminalPosition
from gambit.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.move import Move
    from gambit.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def legal_moves(board: Board) -> list[Move]:
        return MoveGenerator(board).generate_legal_moves()

    @staticmethod
    def is_in_check(board: Board) -> bool:
        return MoveGenerator(board).is_in_check(board.side_to_move)

    @staticmethod
    def is_checkmate(board: Board) -> bool:
        return Rules.classify(board) == GameState.CHECKMATE

    @staticmethod
    def is_stalemate(board: Board) -> bool:
        return Rules.classify(board) == GameState.STALEMATE

    @staticmethod
    def is_terminal(board: Board) -> bool:
        return Rules.classify(board).is_terminal

    @staticmethod
    def classify(board: Board) -> GameState:
        """Derive the state of the side to move; never cached."""
        gen = MoveGenerator(board)
        in_check = gen.is_in_check(board.side_to_move)
        if gen.generate_legal_moves():
            return GameState.CHECK if in_check else GameState.IN_PROGRESS
        return GameState.CHECKMATE if in_check else GameState.STALEMATE

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        remaining = [
            (sq, piece)
            for sq, piece in board.occupied()
            if piece.piece_type != PieceType.KING
        ]

        # K vs K
        if not remaining:
            return True

        # K+minor vs K
        if len(remaining) == 1:
            _, piece = remaining[0]
            return piece.piece_type in (PieceType.KNIGHT, PieceType.BISHOP)

        # K+B vs K+B with same-colour bishops
        if len(remaining) == 2:
            (sq_a, a), (sq_b, b) = remaining
            return (
                a.piece_type == PieceType.BISHOP
                and b.piece_type == PieceType.BISHOP
                and a.color != b.color
                and sq_a.is_light == sq_b.is_light
            )

        return False

    @staticmethod
    def last_captured_piece(board: Board) -> Piece | None:
        return board.last_captured

    @staticmethod
    def resolve(board: Board, move: Move) -> Move:
        """Return the generated legal move matching the request *move*.

        The request is matched on origin, destination and promotion kind.
        A request that names a flag must name the same flag the generator
        assigns.
        """
        legal = MoveGenerator(board).generate_legal_moves()
        if not legal:
            raise TerminalPosition(Rules.classify(board))

        for candidate in legal:
            if candidate.key != move.key:
                continue
            if move.flag not in (MoveFlag.NORMAL, candidate.flag):
                raise IllegalMove(move, f"expected flag {candidate.flag.name}")
            return candidate

        if move.promotion is None and any(
            candidate.from_sq == move.from_sq
            and candidate.to_sq == move.to_sq
            and candidate.is_promotion
            for candidate in legal
        ):
            raise IllegalMove(move, "a promotion piece type is required")
        raise IllegalMove(move)

    @staticmethod
    def apply(board: Board, move: Move) -> Board:
        """Validate *move* against the legal set and play it on *board*.

        The board is mutated in place and returned. Raises
        :class:`IllegalMove` for anything outside the legal set and
        :class:`TerminalPosition` when the side to move has no moves at all.
        """
        try:
            resolved = Rules.resolve(board, move)
        except IllegalMove as exc:
            _LOGGER.debug("Rejected move %r: %s", move, exc.reason)
            raise
        board.make_move(resolved)
        return board
