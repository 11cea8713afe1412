"""
Tests for the command line entry point (no window is opened).
"""

from config import INITIAL_SNAKE
from play import game_summary, main, parse_args
from session import GameState, Session, SessionConfig, Snapshot


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.mode is None
        assert args.level == 1
        assert args.theme == "magenta"
        assert args.verbose is False

    def test_flags(self):
        args = parse_args(["--mode", "obstacle", "--level", "7", "--theme", "cyan",
                           "--seed", "3", "-v"])
        assert args.mode == "obstacle"
        assert args.level == 7
        assert args.theme == "cyan"
        assert args.seed == 3
        assert args.verbose is True


class TestMain:
    def test_invalid_level_is_rejected_before_start(self, capsys):
        assert main(["--level", "42"]) == 2
        assert "Invalid settings" in capsys.readouterr().out


class TestGameSummary:
    def test_includes_session_duration(self):
        session = Session(SessionConfig("classic", 2), INITIAL_SNAKE)
        session.score = 30
        session.started_at -= 12.5
        snap = Snapshot(GameState.GAME_OVER, session, 20)

        line = game_summary(1, snap, session.duration())
        assert line.startswith("Game 1: Score 30 (level 2, 12.")
        assert line.endswith("s)")
