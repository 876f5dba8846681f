"""Coordinate move input: ``<from><to>[promotion]``, e.g. ``e2e4``, ``e7e8q``."""

from __future__ import annotations

from gambit.core.enums import PieceType
from gambit.core.errors import FormatError
from gambit.core.move import Move
from gambit.core.piece import piece_type_from_letter
from gambit.core.types import parse_square

_PROMOTION_LETTERS = "nbrq"


def parse_coordinate_move(text: str) -> Move:
    """Parse coordinate notation into a :class:`Move`.

    The promotion letter is optional and case-insensitive. Whether the move
    is legal is not checked.

    Raises:
        FormatError: *text* is not four or five well-formed characters.
    """
    clean = text.strip()
    if len(clean) not in (4, 5):
        raise FormatError(f"Invalid coordinate move: {text!r}")

    from_sq = parse_square(clean[0:2])
    to_sq = parse_square(clean[2:4])

    promotion: PieceType | None = None
    if len(clean) == 5:
        letter = clean[4].lower()
        if letter not in _PROMOTION_LETTERS:
            raise FormatError(f"Invalid promotion piece in move: {text!r}")
        promotion = piece_type_from_letter(letter)

    if from_sq == to_sq:
        raise FormatError(f"Move does not go anywhere: {text!r}")
    return Move(from_sq, to_sq, promotion)
