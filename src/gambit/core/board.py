"""Board: complete game state, i.e. placement, side to move, rights and clocks."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from gambit.core.enums import CastlingRights, Color, MoveFlag, PieceType
from gambit.core.errors import InvalidPlacement
from gambit.core.move import Move
from gambit.core.piece import Piece
from gambit.core.types import A1, A8, E1, E8, H1, H8, Square

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# Corner square -> the right lost when anything moves from or onto it.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}
_KING_HOMES: dict[Color, Square] = {Color.WHITE: E1, Color.BLACK: E8}


def castling_rook_squares(move: Move) -> tuple[Square, Square]:
    """(rook origin, rook destination) for a castling *move*."""
    rank = move.from_sq.rank
    if move.flag == MoveFlag.CASTLE_KINGSIDE:
        return Square(7, rank), Square(5, rank)
    return Square(0, rank), Square(3, rank)


class Board:
    """Mutable 64-square board together with all per-game state.

    The board is a fixed-size list, so :meth:`copy` is cheap and produces a
    fully independent value. Move legality is not checked here; go through
    :meth:`gambit.core.rules.Rules.apply` to play a validated move.
    """

    __slots__ = (
        "_squares",
        "_king_squares",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "last_captured",
    )

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None, None]
        self.side_to_move = Color.WHITE
        self.castling = CastlingRights.NONE
        self.en_passant: Square | None = None
        self.halfmove_clock = 0
        self.fullmove_number = 1
        self.last_captured: Piece | None = None

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    def _place(self, sq: Square, piece: Piece | None) -> None:
        old_piece = self._squares[sq.index]
        if old_piece is not None and old_piece.piece_type == PieceType.KING:
            if self._king_squares[int(old_piece.color)] == sq:
                self._king_squares[int(old_piece.color)] = None

        self._squares[sq.index] = piece
        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = sq

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) pairs in a1 → h8 order."""
        for index, piece in enumerate(self._squares):
            if piece is not None:
                yield Square.from_index(index), piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self.occupied() if piece == target]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise InvalidPlacement(f"No {color.name} king on board")
        return sq

    def has_castling_right(self, right: CastlingRights) -> bool:
        return bool(self.castling & right)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        b.side_to_move = self.side_to_move
        b.castling = self.castling
        b.en_passant = self.en_passant
        b.halfmove_clock = self.halfmove_clock
        b.fullmove_number = self.fullmove_number
        b.last_captured = self.last_captured
        return b

    def make_move(self, move: Move) -> Piece | None:
        """Play *move* without any legality check and return the captured piece."""
        piece = self._squares[move.from_sq.index]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq!r}")

        # En passant: the captured pawn sits beside the origin, not on the target
        capture_sq = move.to_sq
        if move.flag == MoveFlag.EN_PASSANT:
            capture_sq = Square(move.to_sq.file, move.from_sq.rank)
        captured = self._squares[capture_sq.index]

        self._place(move.from_sq, None)
        if captured is not None:
            self._place(capture_sq, None)

        placed_piece = piece
        if move.promotion is not None:
            placed_piece = piece.promoted(move.promotion)
        self._place(move.to_sq, placed_piece)

        if move.is_castle:
            rook_from, rook_to = castling_rook_squares(move)
            self._place(rook_to, self._squares[rook_from.index])
            self._place(rook_from, None)

        # En passant target for the opponent, valid for one move only
        self.en_passant = None
        if move.flag == MoveFlag.DOUBLE_PAWN:
            self.en_passant = Square(
                move.from_sq.file, (move.from_sq.rank + move.to_sq.rank) // 2
            )

        self._update_castling(move, piece)

        if piece.piece_type == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1

        self.side_to_move = self.side_to_move.opposite
        self.last_captured = captured
        return captured

    def _update_castling(self, move: Move, piece: Piece) -> None:
        if piece.piece_type == PieceType.KING:
            self.castling &= ~CastlingRights.both(piece.color)

        for sq in (move.from_sq, move.to_sq):
            if sq in _ROOK_CORNERS:
                self.castling &= ~_ROOK_CORNERS[sq]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b._place(Square(f, 1), Piece(Color.WHITE, PieceType.PAWN))
            b._place(Square(f, 6), Piece(Color.BLACK, PieceType.PAWN))

        for f, pt in enumerate(_BACK_RANK):
            b._place(Square(f, 0), Piece(Color.WHITE, pt))
            b._place(Square(f, 7), Piece(Color.BLACK, pt))
        b.castling = CastlingRights.ALL
        return b

    @classmethod
    def from_placement(
        cls,
        placement: Mapping[Square, Piece],
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> Board:
        """Build a board from an externally supplied placement.

        Raises :class:`InvalidPlacement` unless each side has exactly one
        king, no pawn stands on a back rank, the en passant target fits the
        side to move, and the side that just moved is not left in check.
        Castling rights whose king or rook is not on its home square are
        dropped.
        """
        b = cls()
        for sq, piece in placement.items():
            b._place(sq, piece)
        b.side_to_move = side_to_move
        b.en_passant = en_passant
        b.halfmove_clock = halfmove_clock
        b.fullmove_number = fullmove_number

        b._validate_placement()
        b.castling = b._reachable_castling(castling)
        b._validate_en_passant()

        # Local import: the generator only depends on Board for typing.
        from gambit.core.move_generator import MoveGenerator

        if MoveGenerator(b).is_in_check(side_to_move.opposite):
            raise InvalidPlacement(
                f"{side_to_move.opposite.name} is in check but it is "
                f"{side_to_move.name}'s turn"
            )
        return b

    def _validate_placement(self) -> None:
        for color in Color:
            kings = self.pieces(color, PieceType.KING)
            if len(kings) != 1:
                raise InvalidPlacement(
                    f"Expected exactly one {color.name} king, found {len(kings)}"
                )

        for sq, piece in self.occupied():
            if piece.piece_type == PieceType.PAWN and sq.rank in (0, 7):
                raise InvalidPlacement(f"Pawn on back rank at {sq!r}")

    def _reachable_castling(self, castling: CastlingRights) -> CastlingRights:
        rights = castling
        for corner, right in _ROOK_CORNERS.items():
            if not rights & right:
                continue
            color = Color.WHITE if corner.rank == 0 else Color.BLACK
            king_home = self[_KING_HOMES[color]] == Piece(color, PieceType.KING)
            rook_home = self[corner] == Piece(color, PieceType.ROOK)
            if not (king_home and rook_home):
                _LOGGER.debug("Dropping castling right %s: pieces not home", right)
                rights &= ~right
        return rights

    def _validate_en_passant(self) -> None:
        ep = self.en_passant
        if ep is None:
            return
        # The pawn that just double-pushed belongs to the side not to move.
        pusher = self.side_to_move.opposite
        expected_rank = 2 if pusher == Color.WHITE else 5
        if ep.rank != expected_rank or not self.is_empty(ep):
            raise InvalidPlacement(f"Impossible en passant target {ep!r}")
        if not self.is_empty(ep.offset(0, -pusher.forward)):
            raise InvalidPlacement(f"Double-push origin for {ep!r} is occupied")
        pawn_sq = ep.offset(0, pusher.forward)
        if self[pawn_sq] != Piece(pusher, PieceType.PAWN):
            raise InvalidPlacement(f"No double-pushed pawn behind {ep!r}")

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Board(side_to_move={self.side_to_move}, "
            f"pieces={sum(1 for _ in self.occupied())}, "
            f"castling={self.castling!r}, en_passant={self.en_passant!r})"
        )
