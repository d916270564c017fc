"""Fixed-depth minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gambit.core.enums import Color
from gambit.core.errors import TerminalPosition
from gambit.core.move_generator import MoveGenerator
from gambit.core.rules import Rules
from gambit.engine.evaluation import evaluate
from gambit.engine.search import IEngine, RatedMove, SearchLimits, SearchResult

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.move import Move

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000
# Dominates any reachable material score; remaining depth is added on top.
MATE_SCORE = 100_000


class MinimaxSearchEngine(IEngine):
    """Depth-first minimax: White maximizes, Black minimizes.

    Every child node is searched on its own copy of the board, so the
    caller's board is never touched. Among equally scored moves the first
    generated one wins, which keeps results reproducible.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes = 0

    @property
    def nodes(self) -> int:
        """Nodes visited by the most recent search."""
        return self._nodes

    def search(self, board: Board, limits: SearchLimits) -> SearchResult:
        _check_depth(limits.max_depth)
        self._nodes = 0
        root_moves = self._root_moves(board)

        maximizing = board.side_to_move == Color.WHITE
        best_move = root_moves[0]
        best_score = -_INF_SCORE if maximizing else _INF_SCORE
        alpha = -_INF_SCORE
        beta = _INF_SCORE

        for move in root_moves:
            score = self._minimax(
                _child(board, move), limits.max_depth - 1, alpha, beta
            )
            if maximizing:
                if score > best_score:
                    best_score = score
                    best_move = move
                alpha = max(alpha, score)
            else:
                if score < best_score:
                    best_score = score
                    best_move = move
                beta = min(beta, score)

        _LOGGER.debug(
            "Searched depth %d: %d nodes, best %r scored %d",
            limits.max_depth,
            self._nodes,
            best_move,
            best_score,
        )
        return SearchResult(best_move, best_score, limits.max_depth, self._nodes)

    def rate_moves(self, board: Board, depth: int) -> list[RatedMove]:
        """Every legal move paired with its exact minimax score.

        No pruning happens across root moves, so each score is exact rather
        than a bound.
        """
        _check_depth(depth)
        self._nodes = 0
        rated: list[RatedMove] = []
        for move in self._root_moves(board):
            score = self._minimax(
                _child(board, move), depth - 1, -_INF_SCORE, _INF_SCORE
            )
            rated.append((move, score))
        return rated

    def worst_move(self, board: Board, depth: int) -> RatedMove:
        """The move with the worst outcome for the side to move."""
        rated = self.rate_moves(board, depth)
        if board.side_to_move == Color.WHITE:
            return min(rated, key=lambda item: item[1])
        return max(rated, key=lambda item: item[1])

    # -- Internals ----------------------------------------------------------

    def _root_moves(self, board: Board) -> list[Move]:
        moves = MoveGenerator(board).generate_legal_moves()
        if not moves:
            raise TerminalPosition(Rules.classify(board))
        return moves

    def _minimax(self, board: Board, depth: int, alpha: int, beta: int) -> int:
        self._nodes += 1
        gen = MoveGenerator(board)

        if depth <= 0:
            if gen.has_legal_move():
                return evaluate(board)
            return _terminal_score(board, gen, depth)

        legal = gen.generate_legal_moves()
        if not legal:
            return _terminal_score(board, gen, depth)

        if board.side_to_move == Color.WHITE:
            best_score = -_INF_SCORE
            for move in legal:
                score = self._minimax(_child(board, move), depth - 1, alpha, beta)
                best_score = max(best_score, score)
                alpha = max(alpha, best_score)
                if alpha >= beta:
                    break
            return best_score

        best_score = _INF_SCORE
        for move in legal:
            score = self._minimax(_child(board, move), depth - 1, alpha, beta)
            best_score = min(best_score, score)
            beta = min(beta, best_score)
            if alpha >= beta:
                break
        return best_score


def _check_depth(depth: int) -> None:
    if depth <= 0:
        raise ValueError("Search depth must be >= 1")


def _child(board: Board, move: Move) -> Board:
    child = board.copy()
    child.make_move(move)
    return child


def _terminal_score(board: Board, gen: MoveGenerator, depth: int) -> int:
    """Score for a side with no legal moves; *depth* is what remained."""
    if not gen.is_in_check(board.side_to_move):
        return 0
    mate = MATE_SCORE + depth
    # The side to move is mated.
    return -mate if board.side_to_move == Color.WHITE else mate
