"""Tests for GameState."""

import logging
import random

import pytest

from gambit.core.enums import CastlingRights, Color, GameStatus, PieceType
from gambit.core.errors import FormatError
from gambit.core.move import Move
from gambit.core.move_generator import MoveGenerator
from gambit.core.notation import STARTING_FEN, position_from_fen
from gambit.core.types import E2, E3, E4, parse_square
from gambit.game.interfaces import GamePhase
from gambit.game.player import HumanPlayer, RandomPlayer
from gambit.game.state import GameState

STALEMATE = "8/8/8/8/8/kq6/8/K7 w - - 0 1"


@pytest.fixture()
def game() -> GameState:
    gs = GameState()
    gs.setup()
    return gs


def _fools_mate(gs: GameState) -> None:
    for text in ("f2f3", "e7e5", "g2g4", "d8h4"):
        assert gs.play(text) is not None


class TestGameStateSetup:
    def test_position_is_available_before_setup(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.NOT_STARTED
        assert gs.side_to_move == Color.WHITE

    def test_moves_rejected_before_setup(self) -> None:
        gs = GameState()
        assert gs.submit_move(Move(E2, E4)) is None
        assert gs.ply_count == 0

    def test_setup_default(self, game: GameState) -> None:
        assert game.phase == GamePhase.AWAITING_MOVE
        assert game.status == GameStatus.ONGOING
        assert game.side_to_move == Color.WHITE
        assert game.ply_count == 0
        assert game.fen == STARTING_FEN

    def test_setup_custom_fen(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        gs = GameState()
        gs.setup(fen)
        assert gs.side_to_move == Color.BLACK
        assert gs.start_fen == fen
        assert gs.fen == fen

    def test_setup_bad_fen_raises(self) -> None:
        with pytest.raises(FormatError):
            GameState().setup("not a fen")

    def test_setup_empty_fen_raises(self) -> None:
        with pytest.raises(FormatError):
            GameState().setup("")

    def test_setup_resets(self, game: GameState) -> None:
        game.play("e2e4")
        assert game.ply_count == 1
        game.setup()
        assert game.ply_count == 0
        assert game.positions == [game.position]
        assert game.side_to_move == Color.WHITE

    def test_setup_in_terminal_position(self) -> None:
        gs = GameState()
        gs.setup(STALEMATE)
        assert gs.status == GameStatus.STALEMATE
        assert gs.is_game_over
        assert gs.play("a1b1") is None


class TestGameStateMoves:
    def test_play_records(self, game: GameState) -> None:
        record = game.play("e2e4")
        assert record is not None
        assert record.notation == "e4"
        assert record.move == Move(E2, E4)
        assert record.fen_after == game.fen
        assert not record.was_check
        assert not record.was_capture
        assert game.side_to_move == Color.BLACK
        assert game.ply_count == 1

    def test_positions_keep_lineage(self, game: GameState) -> None:
        start = game.position
        game.play("e2e4")
        game.play("e7e5")
        assert len(game.positions) == 3
        assert game.positions[0] is start
        assert game.positions[0] == position_from_fen(STARTING_FEN)
        assert game.positions[-1] is game.position

    def test_illegal_move_rejected(self, game: GameState, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="gambit.game.state"):
            assert game.play("e2e5") is None
        assert "Illegal move e2e5" in caplog.text
        assert game.fen == STARTING_FEN
        assert game.ply_count == 0

    def test_moving_opponent_piece_rejected(self, game: GameState) -> None:
        assert game.play("e7e5") is None
        assert game.side_to_move == Color.WHITE

    def test_malformed_text_raises(self, game: GameState) -> None:
        with pytest.raises(FormatError):
            game.play("e2-e4")

    def test_promotion_letter_on_ordinary_move_rejected(self, game: GameState) -> None:
        assert game.play("e2e4q") is None

    def test_capture_flagged(self, game: GameState) -> None:
        for text in ("e2e4", "d7d5"):
            game.play(text)
        record = game.play("e4d5")
        assert record is not None
        assert record.was_capture
        assert record.notation == "exd5"

    def test_en_passant_capture_flagged(self) -> None:
        gs = GameState()
        gs.setup("8/8/8/3pP3/8/8/8/4K2k w - d6 0 1")
        record = gs.play("e5d6")
        assert record is not None
        assert record.was_capture
        assert record.notation == "exd6"

    def test_promotion_defaults_to_queen(self) -> None:
        gs = GameState()
        gs.setup("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        record = gs.play("a7a8")
        assert record is not None
        assert record.move.promotion == PieceType.QUEEN
        assert record.notation == "a8=Q+"
        assert record.was_check

    def test_underpromotion(self) -> None:
        gs = GameState()
        gs.setup("4k3/P7/8/8/8/8/8/4K3 w - - 0 1")
        record = gs.play("a7a8n")
        assert record is not None
        assert record.notation == "a8=N"

    def test_castling_recorded(self) -> None:
        gs = GameState()
        gs.setup("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        record = gs.play("e1g1")
        assert record is not None
        assert record.notation == "O-O"
        assert gs.position.castling == CastlingRights.BLACK_BOTH

    @pytest.mark.parametrize("sq", [-1, -57, 64])
    def test_off_board_move_rejected(
        self, sq: int, caplog: pytest.LogCaptureFixture
    ) -> None:
        gs = GameState()
        gs.setup("4k3/8/8/8/8/8/8/4K2R w K - 0 1")
        with caplog.at_level(logging.WARNING, logger="gambit.game.state"):
            assert gs.submit_move(Move(sq, parse_square("h5"))) is None
        assert "Off-board move" in caplog.text
        assert gs.fen == "4k3/8/8/8/8/8/8/4K2R w K - 0 1"
        assert gs.ply_count == 0

    def test_off_board_targets_raise(self, game: GameState) -> None:
        with pytest.raises(FormatError):
            game.legal_targets(64)

    def test_legal_moves_and_targets(self, game: GameState) -> None:
        assert len(game.legal_moves()) == 20
        assert set(game.legal_targets(E2)) == {E3, E4}
        assert game.legal_targets(parse_square("e7")) == []


class TestGameStateTermination:
    def test_fools_mate_detected(self, game: GameState) -> None:
        _fools_mate(game)
        assert game.status == GameStatus.CHECKMATE
        assert game.is_game_over
        assert game.winner == Color.BLACK
        assert [r.notation for r in game.move_history] == ["f3", "e5", "g4", "Qh4#"]
        assert game.move_history[-1].was_check

    def test_moves_after_game_over_rejected(self, game: GameState, caplog: pytest.LogCaptureFixture) -> None:
        _fools_mate(game)
        with caplog.at_level(logging.WARNING, logger="gambit.game.state"):
            assert game.play("a2a3") is None
        assert "not awaiting a move" in caplog.text
        assert game.ply_count == 4

    def test_game_over_logged(self, game: GameState, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="gambit.game.state"):
            _fools_mate(game)
        assert "Game over after 4 plies" in caplog.text

    def test_stalemate_reached(self) -> None:
        gs = GameState()
        gs.setup("8/8/8/8/8/k7/2q5/K7 b - - 0 1")
        assert gs.status == GameStatus.ONGOING
        record = gs.play("c2b3")
        assert record is not None
        assert gs.status == GameStatus.STALEMATE
        assert gs.winner is None
        assert gs.is_game_over


class TestGameSummary:
    def test_initial_summary(self, game: GameState) -> None:
        summary = game.summary()
        assert summary.fen == STARTING_FEN
        assert summary.side_to_move == Color.WHITE
        assert summary.castling == CastlingRights.ALL
        assert summary.en_passant is None
        assert summary.halfmove_clock == 0
        assert summary.fullmove_number == 1
        assert summary.is_check is False
        assert summary.status == GameStatus.ONGOING
        assert summary.winner is None
        assert summary.moves == ()

    def test_summary_after_double_push(self, game: GameState) -> None:
        game.play("e2e4")
        summary = game.summary()
        assert summary.en_passant == "e3"
        assert summary.side_to_move == Color.BLACK
        assert summary.moves == ("e4",)

    def test_summary_after_mate(self, game: GameState) -> None:
        _fools_mate(game)
        summary = game.summary()
        assert summary.is_checkmate
        assert not summary.is_stalemate
        assert summary.is_check
        assert summary.winner == Color.BLACK
        assert summary.fullmove_number == 3


class TestPlayTurn:
    def test_random_player_moves(self, game: GameState) -> None:
        record = game.play_turn(RandomPlayer(Color.WHITE, rng=random.Random(5)))
        assert record is not None
        assert game.side_to_move == Color.BLACK

    def test_wrong_color_is_ignored(self, game: GameState) -> None:
        assert game.play_turn(RandomPlayer(Color.BLACK, rng=random.Random(5))) is None
        assert game.ply_count == 0

    def test_human_player_yields_nothing(self, game: GameState) -> None:
        assert game.play_turn(HumanPlayer(Color.WHITE)) is None

    def test_random_self_play_stays_legal(self, game: GameState) -> None:
        players = {
            Color.WHITE: RandomPlayer(Color.WHITE, rng=random.Random(11)),
            Color.BLACK: RandomPlayer(Color.BLACK, rng=random.Random(12)),
        }
        for _ in range(120):
            if game.is_game_over:
                break
            before = game.position
            record = game.play_turn(players[game.side_to_move])
            assert record is not None
            assert MoveGenerator(before).is_legal(record.move)
        assert len(game.positions) == game.ply_count + 1
