"""Game state: one game's position lineage, move records and status."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gambit.core.enums import CastlingRights, Color, GameStatus
from gambit.core.move import Move
from gambit.core.move_applier import apply
from gambit.core.move_generator import MoveGenerator
from gambit.core.notation import (
    STARTING_FEN,
    move_to_notation,
    parse_coordinate_move,
    position_from_fen,
    position_to_fen,
)
from gambit.core.position import Position
from gambit.core.rules import Rules
from gambit.core.types import Square, is_valid_square, square_name
from gambit.game.interfaces import GamePhase, IPlayer

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    notation: str
    fen_after: str
    was_check: bool = False
    was_capture: bool = False


@dataclass(frozen=True)
class GameSummary:
    """Snapshot of a game handed to display, storage or advisory collaborators."""

    fen: str
    side_to_move: Color
    castling: CastlingRights
    en_passant: str | None
    halfmove_clock: int
    fullmove_number: int
    is_check: bool
    status: GameStatus
    winner: Color | None
    moves: tuple[str, ...]

    @property
    def is_checkmate(self) -> bool:
        return self.status == GameStatus.CHECKMATE

    @property
    def is_stalemate(self) -> bool:
        return self.status == GameStatus.STALEMATE


@dataclass
class GameState:
    """Manages one game: current position, history, and terminal status.

    This is a pure data/logic class with no threading and no UI. Every move
    replaces :attr:`position` with the new immutable position; earlier ones
    stay reachable through :attr:`positions`.
    """

    position: Position = field(default_factory=Position.initial, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    status: GameStatus = field(default=GameStatus.ONGOING, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    positions: list[Position] = field(default_factory=list, init=False)
    start_fen: str = field(default=STARTING_FEN, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game, optionally from *fen*."""
        self.start_fen = fen if fen is not None else STARTING_FEN
        self.position = position_from_fen(self.start_fen)
        self.positions = [self.position]
        self.move_history.clear()
        self.status = Rules.status(self.position)
        self.phase = (
            GamePhase.GAME_OVER if self.status.is_terminal else GamePhase.AWAITING_MOVE
        )

    # ── Move application ─────────────────────────────────────────────────

    def submit_move(self, move: Move) -> MoveRecord | None:
        """Play *move* if it is legal; return its record, or None if rejected."""
        if not (is_valid_square(move.from_sq) and is_valid_square(move.to_sq)):
            _LOGGER.warning("Off-board move %r rejected", move)
            return None
        if self.phase != GamePhase.AWAITING_MOVE:
            _LOGGER.warning("Move %s rejected: game is not awaiting a move", move)
            return None
        if not MoveGenerator(self.position).is_legal(move):
            _LOGGER.warning("Illegal move %s rejected", move)
            return None

        applied = apply(self.position, move)
        self.position = applied.position
        self.positions.append(self.position)

        record = MoveRecord(
            move=applied.move,
            notation=move_to_notation(applied),
            fen_after=position_to_fen(self.position),
            was_check=Rules.is_in_check(self.position),
            was_capture=applied.is_capture,
        )
        self.move_history.append(record)
        _LOGGER.debug("Played %s (%s)", record.notation, record.move)

        self._check_game_over()
        return record

    def play(self, text: str) -> MoveRecord | None:
        """Submit a move given in coordinate notation, e.g. ``e7e8q``.

        Raises:
            FormatError: *text* is not coordinate notation.
        """
        return self.submit_move(parse_coordinate_move(text))

    def play_turn(self, player: IPlayer) -> MoveRecord | None:
        """Ask *player* for a move in the current position and submit it."""
        if player.color != self.side_to_move:
            return None
        move = player.choose_move(self.position)
        if move is None:
            return None
        return self.submit_move(move)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def winner(self) -> Color | None:
        if self.status == GameStatus.CHECKMATE:
            return self.side_to_move.opposite
        return None

    @property
    def fen(self) -> str:
        return position_to_fen(self.position)

    def legal_moves(self) -> list[Move]:
        """Legal moves in the current position."""
        return MoveGenerator(self.position).generate_legal_moves()

    def legal_targets(self, sq: Square) -> list[Square]:
        """Legal destinations for the piece on *sq* (for move highlighting)."""
        return MoveGenerator(self.position).legal_targets(sq)

    def summary(self) -> GameSummary:
        pos = self.position
        return GameSummary(
            fen=self.fen,
            side_to_move=pos.side_to_move,
            castling=pos.castling,
            en_passant=square_name(pos.en_passant) if pos.en_passant is not None else None,
            halfmove_clock=pos.halfmove_clock,
            fullmove_number=pos.fullmove_number,
            is_check=Rules.is_in_check(pos),
            status=self.status,
            winner=self.winner,
            moves=tuple(record.notation for record in self.move_history),
        )

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        self.status = Rules.status(self.position)
        if self.status.is_terminal:
            self.phase = GamePhase.GAME_OVER
            _LOGGER.info(
                "Game over after %d plies: %s (%s to move)",
                self.ply_count,
                self.status,
                self.side_to_move,
            )
