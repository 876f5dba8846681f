"""Attack detection: which squares a piece sees, and whether a square is hit.

Nothing here looks at whose turn it is, castling rights, or whether the
attacking piece is pinned. Board occupancy only matters for stopping
sliding pieces at the first blocker.
"""

from __future__ import annotations

from collections.abc import Callable

from gambit.core.board import Board
from gambit.core.enums import Color, PieceType
from gambit.core.piece import Piece
from gambit.core.types import Square, file_of, make_square, rank_of

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

Rays = tuple[tuple[Square, ...], ...]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        moves: list[Square] = []
        for df, dr in offsets:
            af = file_of(sq) + df
            ar = rank_of(sq) + dr
            if 0 <= af < 8 and 0 <= ar < 8:
                moves.append(make_square(af, ar))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(directions: tuple[tuple[int, int], ...]) -> tuple[Rays, ...]:
    rays_per_square: list[Rays] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            af = file_of(sq) + df
            ar = rank_of(sq) + dr
            ray: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                ray.append(make_square(af, ar))
                af += df
                ar += dr
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


def _build_pawn_captures(rank_step: int) -> tuple[tuple[Square, ...], ...]:
    return _build_targets(((-1, rank_step), (1, rank_step)))


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

# [color][sq] -> squares a pawn of that color on sq attacks.
PAWN_CAPTURES: tuple[tuple[tuple[Square, ...], ...], ...] = (
    _build_pawn_captures(Color.WHITE.forward),
    _build_pawn_captures(Color.BLACK.forward),
)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Per-piece geometry ------------------------------------------------------


def _ray_reaches(rays: Rays, target: Square, board: Board) -> bool:
    for ray in rays:
        for to_sq in ray:
            if to_sq == target:
                return True
            if board[to_sq] is not None:
                break
    return False


def _pawn_attacks(sq: Square, piece: Piece, target: Square, board: Board) -> bool:
    return target in PAWN_CAPTURES[piece.color][sq]


def _knight_attacks(sq: Square, piece: Piece, target: Square, board: Board) -> bool:
    return target in KNIGHT_TARGETS[sq]


def _bishop_attacks(sq: Square, piece: Piece, target: Square, board: Board) -> bool:
    return _ray_reaches(BISHOP_RAYS[sq], target, board)


def _rook_attacks(sq: Square, piece: Piece, target: Square, board: Board) -> bool:
    return _ray_reaches(ROOK_RAYS[sq], target, board)


def _queen_attacks(sq: Square, piece: Piece, target: Square, board: Board) -> bool:
    return _ray_reaches(QUEEN_RAYS[sq], target, board)


def _king_attacks(sq: Square, piece: Piece, target: Square, board: Board) -> bool:
    return target in KING_TARGETS[sq]


AttackTest = Callable[[Square, Piece, Square, Board], bool]

# One entry per PieceType; tests assert the table stays exhaustive.
ATTACK_TESTS: dict[PieceType, AttackTest] = {
    PieceType.PAWN: _pawn_attacks,
    PieceType.KNIGHT: _knight_attacks,
    PieceType.BISHOP: _bishop_attacks,
    PieceType.ROOK: _rook_attacks,
    PieceType.QUEEN: _queen_attacks,
    PieceType.KING: _king_attacks,
}


# -- Public API ---------------------------------------------------------------


def attacks_square(
    attacker_sq: Square, attacker: Piece, target: Square, board: Board
) -> bool:
    """Does *attacker* standing on *attacker_sq* attack *target*?

    Pawns attack only their two forward diagonals, never the square ahead.
    A piece never attacks the square it stands on.
    """
    if attacker_sq == target:
        return False
    return ATTACK_TESTS[attacker.piece_type](attacker_sq, attacker, target, board)


def is_square_attacked(sq: Square, by_color: Color, board: Board) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    for from_sq, piece in board.occupied():
        if piece.color == by_color and attacks_square(from_sq, piece, sq, board):
            return True
    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A board without a king for *color* is never in check.
    """
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(king_sq, color.opposite, board)
