"""Notation package: FEN, move notation and coordinate move input."""

from gambit.core.notation.coordinate import parse_coordinate_move
from gambit.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from gambit.core.notation.san import check_suffix, move_to_notation

__all__ = [
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "move_to_notation",
    "check_suffix",
    "parse_coordinate_move",
]
