"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from gambit.core.move_applier import apply
from gambit.core.notation import STARTING_FEN, parse_coordinate_move, position_from_fen
from gambit.core.position import Position

PlayFn = Callable[..., Position]


@pytest.fixture()
def start() -> Position:
    """The standard starting position, decoded from FEN."""
    return position_from_fen(STARTING_FEN)


@pytest.fixture()
def play() -> PlayFn:
    """Apply coordinate moves in order: ``play(pos, "e2e4", "e7e5")``."""

    def _play(position: Position, *moves: str) -> Position:
        for text in moves:
            position = apply(position, parse_coordinate_move(text)).position
        return position

    return _play
