"""Move notation for completed moves (SAN without disambiguation)."""

from __future__ import annotations

from gambit.core.attacks import is_in_check
from gambit.core.enums import CastlingSide, GameStatus, PieceType
from gambit.core.move import AppliedMove
from gambit.core.piece import piece_type_letter
from gambit.core.rules import Rules
from gambit.core.types import FILES, file_of, square_name

_CASTLING_SAN: dict[CastlingSide, str] = {
    CastlingSide.KINGSIDE: "O-O",
    CastlingSide.QUEENSIDE: "O-O-O",
}


def check_suffix(applied: AppliedMove) -> str:
    """``#`` if the move mates, ``+`` if it checks, else empty."""
    after = applied.position
    if not is_in_check(after.board, after.side_to_move):
        return ""
    return "#" if Rules.status(after) == GameStatus.CHECKMATE else "+"


def move_to_notation(applied: AppliedMove) -> str:
    """Render a completed move, e.g. ``Nf3``, ``exd6``, ``e8=Q+``, ``O-O``.

    Two pieces of the same kind that could both reach the destination are
    not told apart: ``Rd1`` is written for either rook. Castling is always
    written bare, without a check suffix.
    """
    if applied.castling != CastlingSide.NONE:
        return _CASTLING_SAN[applied.castling]

    move = applied.move
    san = ""
    if applied.piece.piece_type == PieceType.PAWN:
        if applied.is_capture:
            san += FILES[file_of(move.from_sq)]
    else:
        san += piece_type_letter(applied.piece.piece_type).upper()

    if applied.is_capture:
        san += "x"

    san += square_name(move.to_sq)

    if applied.promotion is not None:
        san += "=" + piece_type_letter(applied.promotion).upper()

    return san + check_suffix(applied)
