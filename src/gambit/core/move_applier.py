"""Applying a move to a position, producing the next position."""

from __future__ import annotations

from gambit.core.enums import CastlingRights, CastlingSide, Color, PieceType
from gambit.core.errors import IllegalStateError
from gambit.core.move import AppliedMove, Move
from gambit.core.piece import Piece
from gambit.core.position import Position
from gambit.core.types import (
    Square,
    check_square,
    file_of,
    make_square,
    rank_of,
    square_name,
)

DEFAULT_PROMOTION = PieceType.QUEEN

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
    make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
    make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
}

# side -> (rook from-file, rook to-file)
_ROOK_SLIDES: dict[CastlingSide, tuple[int, int]] = {
    CastlingSide.KINGSIDE: (7, 5),
    CastlingSide.QUEENSIDE: (0, 3),
}


def apply_move(
    position: Position,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> AppliedMove:
    """Play *from_sq* → *to_sq* on a copy of *position*.

    The move is assumed legal; no rule checking happens here beyond what is
    needed to carry out en passant, castling and promotion. A pawn reaching
    its last rank without *promotion* becomes a queen.

    Raises:
        FormatError: either square is off the board.
        IllegalStateError: *from_sq* holds no piece.
    """
    check_square(from_sq)
    check_square(to_sq)
    board = position.board.copy()
    piece = board[from_sq]
    if piece is None:
        raise IllegalStateError(f"No piece on {square_name(from_sq)}")

    color = piece.color
    is_pawn = piece.piece_type == PieceType.PAWN
    captured = board[to_sq]

    # En passant: the captured pawn sits behind the destination square
    is_en_passant = (
        is_pawn
        and to_sq == position.en_passant
        and file_of(to_sq) != file_of(from_sq)
    )
    if is_en_passant:
        ep_capture_sq = make_square(file_of(to_sq), rank_of(to_sq) - color.forward)
        captured = board[ep_capture_sq]
        board[ep_capture_sq] = None

    board[from_sq] = None
    placed = piece
    promoted: PieceType | None = None
    if is_pawn and rank_of(to_sq) == color.opposite.home_rank:
        promoted = promotion or DEFAULT_PROMOTION
        placed = Piece(color, promoted)
    board[to_sq] = placed

    # Slide the rook for castling
    castling_side = CastlingSide.NONE
    if piece.piece_type == PieceType.KING and abs(file_of(to_sq) - file_of(from_sq)) == 2:
        castling_side = (
            CastlingSide.KINGSIDE
            if file_of(to_sq) > file_of(from_sq)
            else CastlingSide.QUEENSIDE
        )
        rook_from_file, rook_to_file = _ROOK_SLIDES[castling_side]
        rank = rank_of(from_sq)
        rook_from = make_square(rook_from_file, rank)
        board[make_square(rook_to_file, rank)] = board[rook_from]
        board[rook_from] = None

    # En passant target for the opponent
    next_en_passant: Square | None = None
    if is_pawn and abs(rank_of(to_sq) - rank_of(from_sq)) == 2:
        next_en_passant = make_square(file_of(from_sq), rank_of(from_sq) + color.forward)

    is_capture = captured is not None or is_en_passant
    next_position = Position(
        board=board,
        side_to_move=color.opposite,
        castling=_updated_castling(position.castling, piece, from_sq, to_sq),
        en_passant=next_en_passant,
        halfmove_clock=0 if is_pawn or is_capture else position.halfmove_clock + 1,
        fullmove_number=position.fullmove_number + (1 if color == Color.BLACK else 0),
    )

    return AppliedMove(
        move=Move(from_sq, to_sq, promoted),
        piece=piece,
        position=next_position,
        captured=captured,
        is_en_passant=is_en_passant,
        castling=castling_side,
        promotion=promoted,
    )


def apply(position: Position, move: Move) -> AppliedMove:
    """:func:`apply_move` for a :class:`Move` value."""
    return apply_move(position, move.from_sq, move.to_sq, move.promotion)


def _updated_castling(
    castling: CastlingRights, piece: Piece, from_sq: Square, to_sq: Square
) -> CastlingRights:
    if piece.piece_type == PieceType.KING:
        castling &= ~CastlingRights.for_color(piece.color)

    # A rook leaving its corner, or anything landing on one, ends that right
    for sq in (from_sq, to_sq):
        if sq in _ROOK_CORNERS:
            castling &= ~_ROOK_CORNERS[sq]
    return castling
