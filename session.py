"""
Сессия игры: выбор игрока, изменяемое состояние и снимки для отрисовки.

Session принадлежит движку и меняется только им. Правила режимов,
проверки столкновений и размещение получают её по ссылке.
"""
import time
import uuid
from enum import Enum

from config import MIN_LEVEL, MAX_LEVEL, POINTS_PER_LEVEL, LOW_TIME_WARNING
from errors import ConfigurationError
from grid import Direction


class GameMode(Enum):
    CLASSIC = "classic"
    TIME_TRIAL = "timetrial"
    OBSTACLE = "obstacle"


class GameState(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


class Theme(Enum):
    MAGENTA = "magenta"
    WHITE = "white"
    CYAN = "cyan"
    AMBER = "amber"
    GREEN = "green"
    PURPLE = "purple"
    BLUE = "blue"
    RED = "red"
    YELLOW = "yellow"
    ORANGE = "orange"
    PINK = "pink"
    LIME = "lime"
    RAINBOW = "rainbow"


def _parse_enum(enum_cls, value, what):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(item.value for item in enum_cls)
        raise ConfigurationError(f"invalid {what} {value!r}, expected one of: {choices}") from None


class SessionConfig:
    """Выбор игрока. Читается один раз в start_game"""

    def __init__(self, mode=GameMode.CLASSIC, level=1, theme=Theme.MAGENTA):
        self.mode = _parse_enum(GameMode, mode, "mode")
        self.theme = _parse_enum(Theme, theme, "theme")
        try:
            level = int(level)
        except (TypeError, ValueError):
            raise ConfigurationError(f"invalid level {level!r}") from None
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise ConfigurationError(
                f"level must be in [{MIN_LEVEL}, {MAX_LEVEL}], got {level}")
        self.level = level

    def __repr__(self):
        return (f"<SessionConfig mode={self.mode.value} level={self.level} "
                f"theme={self.theme.value}>")


def level_for_score(selected_level, score):
    """+1 уровень каждые 50 очков, не выше 10"""
    return min(selected_level + score // POINTS_PER_LEVEL, MAX_LEVEL)


class Session:
    def __init__(self, config, snake):
        self.id = uuid.uuid4().hex[:12]
        self.mode = config.mode
        self.theme = config.theme
        self.selected_level = config.level
        self.level = config.level
        self.score = 0

        self.snake = list(snake)
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.direction_changed = False

        self.food = None
        self.obstacles = frozenset()
        self.remaining_seconds = None

        self.move_count = 0
        self.food_eaten = 0
        self.started_at = time.time()

    @property
    def head(self):
        return self.snake[0]

    @property
    def is_obstacle_mode(self):
        return self.mode is GameMode.OBSTACLE

    def duration(self):
        return time.time() - self.started_at

    def __repr__(self):
        return (f"<Session {self.id} mode={self.mode.value} level={self.level} "
                f"score={self.score} length={len(self.snake)}>")


class Snapshot:
    """Неизменяемый вид сессии на момент после хода"""

    __slots__ = ("state", "mode", "theme", "snake", "food", "obstacles", "score",
                 "level", "best_score", "heading", "remaining_seconds",
                 "move_count", "food_eaten", "events")

    def __init__(self, state, session=None, cell_size=0, best_score=0, events=()):
        object.__setattr__(self, "state", state)
        object.__setattr__(self, "best_score", best_score)
        object.__setattr__(self, "events", tuple(events))
        if session is None:
            values = dict(mode=None, theme=None, snake=(), food=None,
                          obstacles=frozenset(), score=0, level=0, heading=(0, 0),
                          remaining_seconds=None, move_count=0, food_eaten=0)
        else:
            direction = session.direction
            values = dict(
                mode=session.mode,
                theme=session.theme,
                snake=tuple(session.snake),
                food=session.food,
                obstacles=session.obstacles,
                score=session.score,
                level=session.level,
                heading=(direction.dx * cell_size, direction.dy * cell_size),
                remaining_seconds=session.remaining_seconds,
                move_count=session.move_count,
                food_eaten=session.food_eaten,
            )
        for name, value in values.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError("Snapshot is read-only")

    @property
    def head(self):
        return self.snake[0] if self.snake else None

    @property
    def low_time(self):
        return (self.remaining_seconds is not None and
                self.remaining_seconds <= LOW_TIME_WARNING)

    def has_event(self, name):
        return any(event[0] == name for event in self.events)

    def __repr__(self):
        return (f"<Snapshot state={self.state.value} score={self.score} "
                f"level={self.level} length={len(self.snake)}>")
