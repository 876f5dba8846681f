"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from gambit.core.attacks import is_in_check
from gambit.core.enums import Color, GameStatus
from gambit.core.move_generator import MoveGenerator
from gambit.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Draws by repetition, the fifty-move rule or material are not judged.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check(position.board, position.side_to_move)

    @staticmethod
    def status(position: Position) -> GameStatus:
        """Classify *position* for the side to move."""
        if MoveGenerator(position).has_legal_move():
            return GameStatus.ONGOING
        if Rules.is_in_check(position):
            return GameStatus.CHECKMATE
        return GameStatus.STALEMATE

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.status(position) == GameStatus.CHECKMATE

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return Rules.status(position) == GameStatus.STALEMATE

    @staticmethod
    def winner(position: Position) -> Color | None:
        """The side that delivered mate, or None if nobody has won."""
        if Rules.is_checkmate(position):
            return position.side_to_move.opposite
        return None
