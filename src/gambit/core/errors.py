"""Exceptions raised by the rules engine."""

from __future__ import annotations


class FormatError(ValueError):
    """Malformed external text: FEN, square name, coordinates or move input."""


class IllegalStateError(RuntimeError):
    """An engine call made against a position that cannot support it.

    Signals a caller bug (e.g. moving from an empty square), never a
    game-rule violation.
    """
