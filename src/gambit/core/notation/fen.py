"""FEN parsing and serialization."""

from __future__ import annotations

from gambit.core.board import Board
from gambit.core.enums import CastlingRights, Color
from gambit.core.errors import FormatError
from gambit.core.piece import Piece
from gambit.core.position import Position
from gambit.core.types import Square, make_square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)
_SIDE_CHARS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}
_EMPTY_RUNS = "12345678"


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FormatError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _EMPTY_RUNS:
                file += int(ch)
            elif ch.isdigit():
                raise FormatError(f"Invalid FEN digit {ch!r}: {fen!r}")
            else:
                if file >= 8:
                    raise FormatError(f"Invalid FEN rank width: {fen!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise FormatError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise FormatError(f"Invalid FEN rank width: {fen!r}")
    return board


def _parse_castling(field: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if field == "-":
        return castling
    rights = dict(_CASTLING_CHARS)
    seen: set[str] = set()
    for ch in field:
        right = rights.get(ch)
        if right is None or ch in seen:
            raise FormatError(f"Invalid FEN castling field: {field!r}")
        seen.add(ch)
        castling |= right
    return castling


def _parse_en_passant(field: str, side: Color) -> Square | None:
    if field == "-":
        return None
    ep = parse_square(field)
    # The target sits behind a pawn the opponent has just pushed two squares
    expected_rank = 5 if side == Color.WHITE else 2
    if rank_of(ep) != expected_rank:
        raise FormatError(f"Invalid FEN en-passant square for side-to-move: {field!r}")
    return ep


def _parse_counter(field: str, name: str, minimum: int) -> int:
    # Plain ASCII digits only: no sign, underscores or other scripts
    if not (field.isascii() and field.isdigit()):
        raise FormatError(f"Invalid FEN {name}: {field!r}")
    value = int(field)
    if value < minimum:
        raise FormatError(f"Invalid FEN {name}: {field!r}")
    return value


def position_from_fen(fen: str) -> Position:
    """Parse a six-field FEN string into a :class:`Position`.

    Raises:
        FormatError: a field is missing, extra, or does not parse.
    """
    parts = fen.split()
    if len(parts) != 6:
        raise FormatError(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    board = _parse_placement(placement, fen)
    side = _SIDE_CHARS.get(side_part)
    if side is None:
        raise FormatError(f"Invalid FEN side-to-move field: {side_part!r}")

    return Position(
        board=board,
        side_to_move=side,
        castling=_parse_castling(castling_part),
        en_passant=_parse_en_passant(ep_part, side),
        halfmove_clock=_parse_counter(halfmove_part, "halfmove clock", 0),
        fullmove_number=_parse_counter(fullmove_part, "fullmove number", 1),
    )


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(ch for ch, right in _CASTLING_CHARS if pos.castling & right)

    # 4. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str or '-'} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
