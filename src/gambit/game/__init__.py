"""Game management layer: state, players and the random-move policy.

Quick start::

    import random

    from gambit.core import Color
    from gambit.game import GameState, RandomPlayer

    game = GameState()
    game.setup()
    game.play("e2e4")
    game.play_turn(RandomPlayer(Color.BLACK, rng=random.Random(7)))
"""

from gambit.game.interfaces import GamePhase, IPlayer
from gambit.game.player import HumanPlayer, RandomPlayer, choose_random_move
from gambit.game.state import GameState, GameSummary, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "GameState",
    "GameSummary",
    "HumanPlayer",
    "MoveRecord",
    "RandomPlayer",
    "choose_random_move",
]
