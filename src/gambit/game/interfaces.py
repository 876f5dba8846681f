"""Abstract interfaces for the game layer.

The :class:`~gambit.game.state.GameState` talks to participants only through
:class:`IPlayer`, so a human seat and a computer seat are interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from gambit.core.enums import Color

if TYPE_CHECKING:
    from gambit.core.move import Move
    from gambit.core.position import Position


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class IPlayer(ABC):
    """Interface for a game participant (human or computer)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, position: Position) -> Move | None:
        """Pick a move for *position*, or None if this player cannot.

        Humans return None: their moves arrive through
        :meth:`GameState.submit_move`.
        """
