"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Color, PieceType
from gambit.core.errors import FormatError

# Lowercase letter ↔ piece type; case carries the color in FEN.
_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_LETTER_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_LETTERS.items()}

_UNICODE: dict[Color, str] = {
    Color.WHITE: "♙♘♗♖♕♔",
    Color.BLACK: "♟♞♝♜♛♚",
}


def piece_type_letter(piece_type: PieceType) -> str:
    """Lowercase letter for *piece_type*, e.g. KNIGHT → 'n'."""
    return _TYPE_LETTERS[piece_type]


def piece_type_from_letter(letter: str) -> PieceType:
    """Piece type for a letter of either case, e.g. 'Q' → QUEEN."""
    try:
        return _LETTER_TYPES[letter.lower()]
    except KeyError:
        raise FormatError(f"Invalid piece letter: {letter!r}") from None


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = _TYPE_LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        if len(char) != 1 or char.lower() not in _LETTER_TYPES:
            raise FormatError(f"Invalid piece character: {char!r}")
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, _LETTER_TYPES[char.lower()])

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[self.color][int(self.piece_type) - 1]
