"""Tests for square helpers and the Piece value object."""

import pytest

from gambit.core.enums import Color, PieceType
from gambit.core.errors import FormatError
from gambit.core.piece import Piece
from gambit.core.types import (
    A1, A8, E4, H1, H8,
    check_square,
    coords_to_square,
    parse_square,
    square_name,
    square_to_coords,
)


class TestSquareNames:
    def test_corners(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"
        assert parse_square("e4") == E4

    def test_all_names_roundtrip(self) -> None:
        for sq in range(64):
            assert parse_square(square_name(sq)) == sq

    @pytest.mark.parametrize("text", ["", "e", "e9", "i1", "E4", "e44", "4e"])
    def test_invalid_name_raises(self, text: str) -> None:
        with pytest.raises(FormatError, match="square"):
            parse_square(text)

    @pytest.mark.parametrize("sq", [-1, -57, 64])
    def test_check_square_rejects_off_board(self, sq: int) -> None:
        with pytest.raises(FormatError, match="square index"):
            check_square(sq)

    def test_check_square_passes_through(self) -> None:
        assert check_square(A1) == A1
        assert check_square(H8) == H8

    def test_format_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_square("z0")


class TestDisplayCoords:
    def test_top_left_is_a8(self) -> None:
        assert square_to_coords(A8) == (0, 0)
        assert coords_to_square(0, 0) == A8

    def test_bottom_right_is_h1(self) -> None:
        assert square_to_coords(H1) == (7, 7)
        assert coords_to_square(7, 7) == H1

    def test_all_squares_roundtrip(self) -> None:
        seen = set()
        for sq in range(64):
            row, col = square_to_coords(sq)
            seen.add((row, col))
            assert coords_to_square(row, col) == sq
        assert len(seen) == 64

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, 8), (8, 0), (3, -2)])
    def test_off_board_rejected(self, row: int, col: int) -> None:
        with pytest.raises(FormatError):
            coords_to_square(row, col)

    def test_invalid_index_rejected(self) -> None:
        with pytest.raises(FormatError):
            square_to_coords(64)


class TestPiece:
    def test_fen_chars(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_from_char(self) -> None:
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)
        assert Piece.from_char("P") == Piece(Color.WHITE, PieceType.PAWN)

    def test_invalid_char_raises(self) -> None:
        with pytest.raises(FormatError):
            Piece.from_char("x")

    def test_unicode_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"

    def test_hashable_value(self) -> None:
        pieces = {Piece(Color.WHITE, PieceType.ROOK), Piece(Color.WHITE, PieceType.ROOK)}
        assert len(pieces) == 1
