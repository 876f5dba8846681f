"""Concrete player implementations and the random-move policy."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import TYPE_CHECKING

from gambit.core.enums import Color
from gambit.core.move_generator import MoveGenerator
from gambit.game.interfaces import IPlayer

if TYPE_CHECKING:
    from gambit.core.move import Move
    from gambit.core.position import Position

_LOGGER = logging.getLogger(__name__)


def choose_random_move(moves: Sequence[Move], rng: random.Random) -> Move | None:
    """Pick one of *moves* uniformly using *rng*; None when there are none."""
    if not moves:
        return None
    return moves[rng.randrange(len(moves))]


class HumanPlayer(IPlayer):
    """A human participant whose moves come from the caller.

    ``choose_move`` always returns None because humans select moves
    interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, position: Position) -> Move | None:
        return None


class RandomPlayer(IPlayer):
    """Computer opponent that plays a uniformly random legal move.

    Args:
        color: Side the player plays.
        name: Display name.
        rng: Source of randomness; pass a seeded ``random.Random`` for
            reproducible games.
    """

    __slots__ = ("_color", "_name", "_rng")

    def __init__(
        self,
        color: Color,
        name: str = "Random",
        rng: random.Random | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._rng = rng if rng is not None else random.Random()

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def choose_move(self, position: Position) -> Move | None:
        if position.side_to_move != self._color:
            return None
        # One candidate per (from, to) pair; pawns reaching the last rank queen
        moves = MoveGenerator(position).generate_legal_moves(underpromotions=False)
        move = choose_random_move(moves, self._rng)
        if move is None:
            _LOGGER.warning("%s has no legal move to play", self._name)
        return move
