"""Legal and pseudo-legal move generation + attack detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.enums import CastlingRights, Color, MoveFlag, PieceType
from gambit.core.errors import OutOfBounds
from gambit.core.move import Move
from gambit.core.piece import PROMOTION_TYPES, Piece
from gambit.core.types import ALL_SQUARES, E1, E8, Square

if TYPE_CHECKING:
    from gambit.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_KING_HOMES: dict[Color, Square] = {Color.WHITE: E1, Color.BLACK: E8}
_START_RANKS: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
_LAST_RANKS: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
# Up-left and up-right, relative to the pawn's own direction of travel.
_PAWN_CAPTURE_FILES: tuple[int, int] = (-1, 1)


def _shift(sq: Square, file_delta: int, rank_delta: int) -> Square | None:
    try:
        return sq.offset(file_delta, rank_delta)
    except OutOfBounds:
        return None


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        moves: list[Square] = []
        for df, dr in offsets:
            to_sq = _shift(sq, df, dr)
            if to_sq is not None:
                moves.append(to_sq)
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            to_sq = _shift(sq, df, dr)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = _shift(to_sq, df, dr)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Generates moves for a given :class:`Board`.

    Legality is decided by playing every pseudo-legal move on a scratch copy
    of the board and rejecting those that leave the mover's king attacked.
    The wrapped board is never modified.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All strictly legal moves for *color* (default: the side to move)."""
        if color is None:
            color = self._board.side_to_move
        return [
            move
            for move in self.generate_pseudo_legal_moves(color)
            if self._is_legal(move, color)
        ]

    def has_legal_move(self, color: Color | None = None) -> bool:
        """Whether *color* has at least one legal move; stops at the first."""
        if color is None:
            color = self._board.side_to_move
        return any(
            self._is_legal(move, color)
            for move in self.generate_pseudo_legal_moves(color)
        )

    def generate_moves_from(self, sq: Square) -> list[Move]:
        """Legal moves of the piece standing on *sq* (empty if there is none)."""
        piece = self._board[sq]
        if piece is None:
            return []
        moves: list[Move] = []
        self._gen_piece(sq, piece, moves)
        return [move for move in moves if self._is_legal(move, piece.color)]

    def generate_pseudo_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        if color is None:
            color = self._board.side_to_move
        board = self._board
        moves: list[Move] = []
        for sq in board.all_pieces(color):
            self._gen_piece(sq, board[sq], moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color | None = None) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        if color is None:
            color = self._board.side_to_move
        king_sq = self._board.king_square(color)
        return self.is_square_attacked(king_sq, color.opposite)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?

        Looks outward from *sq* with each piece's pattern, so it never needs
        the legality filter and cannot recurse.
        """
        board = self._board

        pawn = Piece(by_color, PieceType.PAWN)
        for file_delta in _PAWN_CAPTURE_FILES:
            from_sq = _shift(sq, file_delta, -by_color.forward)
            if from_sq is not None and board[from_sq] == pawn:
                return True

        knight = Piece(by_color, PieceType.KNIGHT)
        if any(board[from_sq] == knight for from_sq in _KNIGHT_TARGETS[sq.index]):
            return True

        king = Piece(by_color, PieceType.KING)
        if any(board[from_sq] == king for from_sq in _KING_TARGETS[sq.index]):
            return True

        if self._ray_attacked(sq, by_color, _BISHOP_RAYS, PieceType.BISHOP):
            return True
        return self._ray_attacked(sq, by_color, _ROOK_RAYS, PieceType.ROOK)

    def _ray_attacked(
        self,
        sq: Square,
        by_color: Color,
        rays: tuple[tuple[tuple[Square, ...], ...], ...],
        slider: PieceType,
    ) -> bool:
        board = self._board
        for ray in rays[sq.index]:
            for from_sq in ray:
                piece = board[from_sq]
                if piece is None:
                    continue
                if piece.color == by_color and piece.piece_type in (
                    slider,
                    PieceType.QUEEN,
                ):
                    return True
                break
        return False

    # -- Legality filter ---------------------------------------------------

    def _is_legal(self, move: Move, color: Color) -> bool:
        scratch = self._board.copy()
        scratch.make_move(move)
        return not MoveGenerator(scratch).is_in_check(color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_piece(self, sq: Square, piece: Piece, moves: list[Move]) -> None:
        piece_type = piece.piece_type
        if piece_type == PieceType.PAWN:
            self._gen_pawn(sq, piece.color, moves)
        elif piece_type == PieceType.KNIGHT:
            self._gen_step(sq, piece.color, _KNIGHT_TARGETS[sq.index], moves)
        elif piece_type == PieceType.BISHOP:
            self._gen_sliding(sq, piece.color, _BISHOP_RAYS[sq.index], moves)
        elif piece_type == PieceType.ROOK:
            self._gen_sliding(sq, piece.color, _ROOK_RAYS[sq.index], moves)
        elif piece_type == PieceType.QUEEN:
            self._gen_sliding(sq, piece.color, _QUEEN_RAYS[sq.index], moves)
        elif piece_type == PieceType.KING:
            self._gen_step(sq, piece.color, _KING_TARGETS[sq.index], moves)
            self._gen_castling(sq, piece.color, moves)
        else:
            raise AssertionError(f"Unhandled piece type {piece_type!r}")

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        forward = color.forward
        last_rank = _LAST_RANKS[color]

        one_step = _shift(sq, 0, forward)
        if one_step is not None and board.is_empty(one_step):
            if one_step.rank == last_rank:
                self._add_promotions(sq, one_step, MoveFlag.PROMOTION, moves)
            else:
                moves.append(Move(sq, one_step))
                if sq.rank == _START_RANKS[color]:
                    two_step = one_step.offset(0, forward)
                    if board.is_empty(two_step):
                        moves.append(Move(sq, two_step, MoveFlag.DOUBLE_PAWN))

        # Each diagonal is examined on its own; neither shadows the other.
        for file_delta in _PAWN_CAPTURE_FILES:
            cap_sq = _shift(sq, file_delta, forward)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color == color:
                    continue
                if cap_sq.rank == last_rank:
                    self._add_promotions(
                        sq, cap_sq, MoveFlag.PROMOTION_CAPTURE, moves
                    )
                else:
                    moves.append(Move(sq, cap_sq, MoveFlag.CAPTURE))
            elif cap_sq == board.en_passant and color == board.side_to_move:
                moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))

    @staticmethod
    def _add_promotions(
        from_sq: Square, to_sq: Square, flag: MoveFlag, moves: list[Move]
    ) -> None:
        for pt in PROMOTION_TYPES:
            moves.append(Move(from_sq, to_sq, flag, pt))

    def _gen_step(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq))
            elif target.color != color:
                moves.append(Move(sq, to_sq, MoveFlag.CAPTURE))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq, MoveFlag.CAPTURE))
                break

    def _gen_castling(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        if king_sq != _KING_HOMES[color]:
            return
        if not board.has_castling_right(CastlingRights.both(color)):
            return
        if self.is_in_check(color):
            return

        opponent = color.opposite
        rank = king_sq.rank
        rook = Piece(color, PieceType.ROOK)

        if board.has_castling_right(CastlingRights.kingside(color)):
            f_sq = Square(5, rank)
            g_sq = Square(6, rank)
            if (
                board[Square(7, rank)] == rook
                and board.is_empty(f_sq)
                and board.is_empty(g_sq)
                and not self.is_square_attacked(f_sq, opponent)
                and not self.is_square_attacked(g_sq, opponent)
            ):
                moves.append(Move(king_sq, g_sq, MoveFlag.CASTLE_KINGSIDE))

        if board.has_castling_right(CastlingRights.queenside(color)):
            b_sq = Square(1, rank)
            c_sq = Square(2, rank)
            d_sq = Square(3, rank)
            if (
                board[Square(0, rank)] == rook
                and board.is_empty(b_sq)
                and board.is_empty(c_sq)
                and board.is_empty(d_sq)
                and not self.is_square_attacked(d_sq, opponent)
                and not self.is_square_attacked(c_sq, opponent)
            ):
                moves.append(Move(king_sq, c_sq, MoveFlag.CASTLE_QUEENSIDE))
