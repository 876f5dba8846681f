"""Chess rules engine: legal moves, move application, game status and notation."""

__version__ = "0.1.0"
