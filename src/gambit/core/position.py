"""Position: complete game state (board plus metadata) as an immutable value."""

from __future__ import annotations

from dataclasses import dataclass, field

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color
from gambit.core.piece import Piece
from gambit.core.types import Square


@dataclass(frozen=True, slots=True)
class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Positions are never changed in place. Every transition
    (:func:`~gambit.core.move_applier.apply_move`, and the simulations the
    legality filter runs) builds a new instance around its own board copy,
    so a caller can keep any number of them as history.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    @classmethod
    def initial(cls) -> Position:
        """The standard starting position."""
        return cls()

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    def has_right(self, right: CastlingRights) -> bool:
        return bool(self.castling & right)
