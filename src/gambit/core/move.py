"""Move value objects: the requested move and the record of an applied one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gambit.core.enums import CastlingSide, PieceType
from gambit.core.piece import piece_type_letter
from gambit.core.types import Square, square_name

if TYPE_CHECKING:
    from gambit.core.piece import Piece
    from gambit.core.position import Position


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``promotion`` only matters for a pawn reaching its last rank; the move
    applier falls back to a queen when it is omitted there.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += piece_type_letter(self.promotion)
        return base

    @property
    def coordinate(self) -> str:
        """Coordinate (long algebraic) notation, e.g. ``e7e8q``."""
        return str(self)


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """Outcome of :func:`~gambit.core.move_applier.apply_move`.

    Carries what the move did (capture, castling, promotion) alongside the
    position it produced.
    """

    move: Move
    piece: Piece
    position: Position
    captured: Piece | None = None
    is_en_passant: bool = False
    castling: CastlingSide = CastlingSide.NONE
    promotion: PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None or self.is_en_passant

    @property
    def is_castling(self) -> bool:
        return self.castling != CastlingSide.NONE
