"""Pseudo-legal and legal move generation."""

from __future__ import annotations

from collections.abc import Callable

from gambit.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_CAPTURES,
    QUEEN_RAYS,
    ROOK_RAYS,
    Rays,
    is_in_check,
    is_square_attacked,
)
from gambit.core.enums import CastlingRights, CastlingSide, Color, PieceType
from gambit.core.move import Move
from gambit.core.move_applier import apply_move
from gambit.core.piece import Piece
from gambit.core.position import Position
from gambit.core.types import (
    Square,
    check_square,
    file_of,
    is_valid_square,
    make_square,
    rank_of,
)

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_KING_FILE = 4

# side -> (rook file, files that must be empty, files the king stands on/crosses/lands on)
_CASTLING_LAYOUT: dict[CastlingSide, tuple[int, tuple[int, ...], tuple[int, ...]]] = {
    CastlingSide.KINGSIDE: (7, (5, 6), (4, 5, 6)),
    CastlingSide.QUEENSIDE: (0, (1, 2, 3), (4, 3, 2)),
}


def is_promotion_move(position: Position, from_sq: Square, to_sq: Square) -> bool:
    """Would moving the piece on *from_sq* to *to_sq* promote a pawn?"""
    piece = position.board[from_sq]
    if piece is None or piece.piece_type != PieceType.PAWN:
        return False
    return rank_of(to_sq) == piece.color.opposite.home_rank


# -- Piece-specific generators ------------------------------------------------


def _pawn_targets(position: Position, sq: Square, piece: Piece) -> list[Square]:
    board = position.board
    color = piece.color
    targets: list[Square] = []

    ahead = rank_of(sq) + color.forward
    if 0 <= ahead < 8:
        one_step = make_square(file_of(sq), ahead)
        if board.is_empty(one_step):
            targets.append(one_step)
            start_rank = color.home_rank + color.forward
            if rank_of(sq) == start_rank:
                two_step = make_square(file_of(sq), ahead + color.forward)
                if board.is_empty(two_step):
                    targets.append(two_step)

    for cap_sq in PAWN_CAPTURES[color][sq]:
        target = board[cap_sq]
        if target is not None:
            if target.color != color:
                targets.append(cap_sq)
        elif cap_sq == position.en_passant and color == position.side_to_move:
            targets.append(cap_sq)
    return targets


def _step_targets(
    position: Position, table: tuple[tuple[Square, ...], ...], sq: Square, color: Color
) -> list[Square]:
    board = position.board
    targets: list[Square] = []
    for to_sq in table[sq]:
        target = board[to_sq]
        if target is None or target.color != color:
            targets.append(to_sq)
    return targets


def _sliding_targets(position: Position, rays: Rays, color: Color) -> list[Square]:
    board = position.board
    targets: list[Square] = []
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                targets.append(to_sq)
                continue
            if target.color != color:
                targets.append(to_sq)
            break
    return targets


def _castling_targets(position: Position, sq: Square, color: Color) -> list[Square]:
    board = position.board
    rank = color.home_rank
    if sq != make_square(_KING_FILE, rank) or is_in_check(board, color):
        return []

    opponent = color.opposite
    rook = Piece(color, PieceType.ROOK)
    targets: list[Square] = []
    for side, (rook_file, between, king_path) in _CASTLING_LAYOUT.items():
        if not position.castling & CastlingRights.for_side(color, side):
            continue
        if board[make_square(rook_file, rank)] != rook:
            continue
        if any(not board.is_empty(make_square(f, rank)) for f in between):
            continue
        if any(
            is_square_attacked(make_square(f, rank), opponent, board)
            for f in king_path
        ):
            continue
        targets.append(make_square(king_path[-1], rank))
    return targets


def _knight_targets(position: Position, sq: Square, piece: Piece) -> list[Square]:
    return _step_targets(position, KNIGHT_TARGETS, sq, piece.color)


def _bishop_targets(position: Position, sq: Square, piece: Piece) -> list[Square]:
    return _sliding_targets(position, BISHOP_RAYS[sq], piece.color)


def _rook_targets(position: Position, sq: Square, piece: Piece) -> list[Square]:
    return _sliding_targets(position, ROOK_RAYS[sq], piece.color)


def _queen_targets(position: Position, sq: Square, piece: Piece) -> list[Square]:
    return _sliding_targets(position, QUEEN_RAYS[sq], piece.color)


def _king_targets(position: Position, sq: Square, piece: Piece) -> list[Square]:
    targets = _step_targets(position, KING_TARGETS, sq, piece.color)
    targets.extend(_castling_targets(position, sq, piece.color))
    return targets


TargetGenerator = Callable[[Position, Square, Piece], list[Square]]

# One entry per PieceType; tests assert the table stays exhaustive.
TARGET_GENERATORS: dict[PieceType, TargetGenerator] = {
    PieceType.PAWN: _pawn_targets,
    PieceType.KNIGHT: _knight_targets,
    PieceType.BISHOP: _bishop_targets,
    PieceType.ROOK: _rook_targets,
    PieceType.QUEEN: _queen_targets,
    PieceType.KING: _king_targets,
}


class MoveGenerator:
    """Generates pseudo-legal and legal moves for a given :class:`Position`.

    Legality is enforced only by simulation: each candidate is applied to a
    copy of the position and dropped if it leaves the mover's king attacked.
    The position passed in is never modified.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_targets(self, sq: Square) -> list[Square]:
        """Candidate destinations for the piece on *sq*, king safety unchecked."""
        piece = self._pos.board[check_square(sq)]
        if piece is None:
            return []
        return TARGET_GENERATORS[piece.piece_type](self._pos, sq, piece)

    def legal_targets(self, sq: Square) -> list[Square]:
        """Destinations the side to move may legally reach from *sq*.

        Empty when *sq* is empty or holds an opponent piece. Raises
        FormatError when *sq* is off the board.
        """
        piece = self._pos.board[check_square(sq)]
        if piece is None or piece.color != self._pos.side_to_move:
            return []

        legal: list[Square] = []
        for to_sq in self.pseudo_legal_targets(sq):
            applied = apply_move(self._pos, sq, to_sq)
            if not is_in_check(applied.position.board, piece.color):
                legal.append(to_sq)
        return legal

    def generate_legal_moves(self, underpromotions: bool = True) -> list[Move]:
        """All strictly legal moves for the side to move.

        Pawn moves onto the last rank are expanded into one move per
        promotion piece, or a single queen promotion when *underpromotions*
        is False.
        """
        moves: list[Move] = []
        pos = self._pos
        promotion_types = PROMOTION_TYPES if underpromotions else PROMOTION_TYPES[:1]
        for from_sq in pos.board.all_pieces(pos.side_to_move):
            for to_sq in self.legal_targets(from_sq):
                if is_promotion_move(pos, from_sq, to_sq):
                    moves.extend(Move(from_sq, to_sq, pt) for pt in promotion_types)
                else:
                    moves.append(Move(from_sq, to_sq))
        return moves

    def has_legal_move(self) -> bool:
        """Whether any piece of the side to move has a legal destination."""
        pos = self._pos
        return any(
            self.legal_targets(sq) for sq in pos.board.all_pieces(pos.side_to_move)
        )

    def is_legal(self, move: Move) -> bool:
        """Is *move* legal here (promotion piece included)?"""
        if not (is_valid_square(move.from_sq) and is_valid_square(move.to_sq)):
            return False
        if move.to_sq not in self.legal_targets(move.from_sq):
            return False
        if is_promotion_move(self._pos, move.from_sq, move.to_sq):
            return move.promotion is None or move.promotion in PROMOTION_TYPES
        return move.promotion is None


def legal_moves(position: Position, sq: Square) -> list[Square]:
    """Legal destination squares for the piece on *sq*."""
    return MoveGenerator(position).legal_targets(sq)


def pseudo_legal_targets(position: Position, sq: Square) -> list[Square]:
    """Candidate destinations for the piece on *sq*, king safety unchecked."""
    return MoveGenerator(position).pseudo_legal_targets(sq)


def generate_legal_moves(position: Position, underpromotions: bool = True) -> list[Move]:
    """All legal moves for the side to move in *position*."""
    return MoveGenerator(position).generate_legal_moves(underpromotions)
