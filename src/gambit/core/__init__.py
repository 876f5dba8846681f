"""Core domain layer: pure chess rules with no external dependencies.

Quick start::

    from gambit.core import MoveGenerator, Rules, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos)
    for move in gen.generate_legal_moves():
        print(move)
    print(Rules.status(pos))
"""

from gambit.core.attacks import attacks_square, is_in_check, is_square_attacked
from gambit.core.board import Board
from gambit.core.enums import (
    CastlingRights,
    CastlingSide,
    Color,
    GameStatus,
    PieceType,
)
from gambit.core.errors import FormatError, IllegalStateError
from gambit.core.move import AppliedMove, Move
from gambit.core.move_applier import DEFAULT_PROMOTION, apply, apply_move
from gambit.core.move_generator import (
    MoveGenerator,
    generate_legal_moves,
    is_promotion_move,
    legal_moves,
    pseudo_legal_targets,
)
from gambit.core.notation import (
    STARTING_FEN,
    move_to_notation,
    parse_coordinate_move,
    position_from_fen,
    position_to_fen,
)
from gambit.core.piece import Piece
from gambit.core.position import Position
from gambit.core.rules import Rules
from gambit.core.types import (
    Square,
    coords_to_square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
    square_to_coords,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "CastlingSide",
    "Color",
    "GameStatus",
    "PieceType",
    # Errors
    "FormatError",
    "IllegalStateError",
    # Types / helpers
    "Square",
    "coords_to_square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    "square_to_coords",
    # Domain objects
    "AppliedMove",
    "Board",
    "Move",
    "Piece",
    "Position",
    # Rules engine
    "DEFAULT_PROMOTION",
    "MoveGenerator",
    "Rules",
    "apply",
    "apply_move",
    "attacks_square",
    "generate_legal_moves",
    "is_in_check",
    "is_promotion_move",
    "is_square_attacked",
    "legal_moves",
    "pseudo_legal_targets",
    # Notation
    "STARTING_FEN",
    "move_to_notation",
    "parse_coordinate_move",
    "position_from_fen",
    "position_to_fen",
]
