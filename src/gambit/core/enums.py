"""Core enumerations and flags for the rules engine."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank step of this side's pawns (+1 for white, -1 for black)."""
        return 1 if self == Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        """Rank index 0–7 of this side's back rank."""
        return 0 if self == Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingSide(IntEnum):
    """Which rook a castling move uses."""

    NONE = 0
    KINGSIDE = 1
    QUEENSIDE = 2


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, side: CastlingSide) -> CastlingRights:
        """The single flag for *color* castling on *side*."""
        if side == CastlingSide.KINGSIDE:
            return cls.WHITE_KINGSIDE if color == Color.WHITE else cls.BLACK_KINGSIDE
        if side == CastlingSide.QUEENSIDE:
            return cls.WHITE_QUEENSIDE if color == Color.WHITE else cls.BLACK_QUEENSIDE
        return cls.NONE

    @classmethod
    def for_color(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class GameStatus(IntEnum):
    """Classification of a position for the side to move."""

    ONGOING = 0
    CHECKMATE = 1
    STALEMATE = 2

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.ONGOING

    def __str__(self) -> str:
        return self.name.lower()
