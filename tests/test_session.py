"""
Tests for session configuration, level mapping and snapshots.
"""

import pytest

from errors import ConfigurationError
from grid import Direction
from session import GameMode, GameState, Session, SessionConfig, Snapshot, Theme, level_for_score


class TestSessionConfig:
    def test_defaults(self):
        config = SessionConfig()
        assert config.mode is GameMode.CLASSIC
        assert config.level == 1
        assert config.theme is Theme.MAGENTA

    def test_accepts_strings(self):
        config = SessionConfig("timetrial", "4", "rainbow")
        assert config.mode is GameMode.TIME_TRIAL
        assert config.level == 4
        assert config.theme is Theme.RAINBOW

    @pytest.mark.parametrize("level", [0, 11, -1, "fast", None])
    def test_invalid_level(self, level):
        with pytest.raises(ConfigurationError):
            SessionConfig(level=level)

    def test_invalid_mode(self):
        with pytest.raises(ConfigurationError):
            SessionConfig(mode="battle")

    def test_invalid_theme(self):
        with pytest.raises(ConfigurationError):
            SessionConfig(theme="plaid")


class TestLevelForScore:
    def test_one_level_per_fifty_points(self):
        assert level_for_score(1, 0) == 1
        assert level_for_score(1, 40) == 1
        assert level_for_score(1, 50) == 2
        assert level_for_score(3, 120) == 5

    def test_capped_at_ten(self):
        assert level_for_score(9, 500) == 10
        assert level_for_score(10, 0) == 10


class TestSnapshot:
    def test_copies_session(self):
        session = Session(SessionConfig(), [(100, 100), (80, 100), (60, 100)])
        session.food = (200, 200)
        snap = Snapshot(GameState.PLAYING, session, cell_size=20, best_score=70)

        assert snap.snake == ((100, 100), (80, 100), (60, 100))
        assert snap.head == (100, 100)
        assert snap.heading == (20, 0)
        assert snap.best_score == 70

        session.snake.insert(0, (120, 100))
        assert len(snap.snake) == 3

    def test_read_only(self):
        snap = Snapshot(GameState.MENU)
        with pytest.raises(AttributeError):
            snap.score = 10

    def test_low_time(self):
        session = Session(SessionConfig(mode="timetrial"), [(100, 100)])
        session.remaining_seconds = 10
        assert Snapshot(GameState.PLAYING, session).low_time
        session.remaining_seconds = 11
        assert not Snapshot(GameState.PLAYING, session).low_time

    def test_new_session_heads_right(self):
        session = Session(SessionConfig(), [(100, 100)])
        assert session.direction is Direction.RIGHT
        assert session.score == 0
