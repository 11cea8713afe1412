"""
Движок симуляции: состояние игры и ход за ходом.

Состояния: menu -> playing <-> paused -> gameOver -> menu | playing.
Ходы идут только в playing. Каждый ход:
  1. снова разрешаем смену направления
  2. голова = голова + направление, с переходом через край
  3. голову вперёд, хвост убираем (если не съели еду)
  4. столкновения (с собой и препятствиями) -> gameOver
  5. еда: +10 очков, правила режима, уровень, новая еда
  6. снимок слушателям (отрисовка)
"""
import logging

from config import BOARD_SIZE, CELL_SIZE, SCORE_FOR_FOOD, SPEED_TABLE, INITIAL_SNAKE
from collision import hits_self, hits_obstacle
from database import MemoryScoreStore
from errors import ConfigurationError
from grid import Direction, validate_board, wrap, step
from modes import rules_for
from scheduler import Scheduler
from scores import ScoreTracker
from session import GameState, Session, SessionConfig, Snapshot, level_for_score
from spawn import SpawnAllocator

logger = logging.getLogger(__name__)


class SimulationEngine:
    def __init__(self, board_size=BOARD_SIZE, cell_size=CELL_SIZE, scheduler=None,
                 allocator=None, scores=None, initial_snake=None):
        validate_board(board_size, cell_size)
        self.board_size = board_size
        self.cell_size = cell_size

        self.initial_snake = list(initial_snake or INITIAL_SNAKE)
        for x, y in self.initial_snake:
            if (not (0 <= x < board_size and 0 <= y < board_size) or
                    x % cell_size or y % cell_size):
                raise ConfigurationError(f"initial snake segment {(x, y)} is off the grid")

        self.scheduler = scheduler or Scheduler()
        self.allocator = allocator or SpawnAllocator(board_size, cell_size)
        self.scores = scores or ScoreTracker(MemoryScoreStore())

        self.state = GameState.MENU
        self.session = None
        self.rules = None
        self.config = None
        self.new_best = False

        self._move_task = None
        self._listeners = []
        self._events = []

    # --- слушатели ---

    def subscribe(self, listener):
        """listener(snapshot) после каждого хода. Возвращает функцию отписки"""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def snapshot(self, events=()):
        best = 0
        if self.session is not None:
            best = self.scores.shown_best(self.session.mode)
        return Snapshot(self.state, self.session, self.cell_size, best, events)

    def _emit(self):
        events, self._events = self._events, []
        snap = self.snapshot(events)
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:
                # Ошибка отрисовки не должна ломать игру
                logger.exception("Snapshot listener %r failed", listener)
        return snap

    # --- сессия ---

    def start_game(self, config=None):
        """Новая сессия. Старая (если была) просто сбрасывается"""
        if config is None:
            config = self.config or SessionConfig()
        elif not isinstance(config, SessionConfig):
            raise ConfigurationError(f"expected SessionConfig, got {type(config).__name__}")

        self._stop_loop()
        if self.rules is not None and self.session is not None:
            self.rules.on_end(self.session)

        self.config = config
        self.session = session = Session(config, self.initial_snake)
        self.rules = rules_for(config.mode, self.scheduler, self.allocator,
                               on_expire=self._on_time_up)
        self.new_best = False
        self._events = []

        self.rules.on_start(session)
        session.food = self.allocator.place_food(session.snake, session.obstacles)
        self.scores.begin(session.mode)

        self.state = GameState.PLAYING
        logger.info("Session %s started: %r", session.id, config)
        self._schedule_move()
        return self._emit()

    def restart_game(self):
        return self.start_game(self.config)

    def return_to_menu(self):
        self._stop_loop()
        if self.rules is not None and self.session is not None:
            self.rules.on_end(self.session)
        self.state = GameState.MENU
        self.session = None
        self.rules = None
        return self._emit()

    def end_game(self, reason="collision"):
        if self.state not in (GameState.PLAYING, GameState.PAUSED):
            return None
        session = self.session
        self._stop_loop()
        self.rules.on_end(session)
        self.state = GameState.GAME_OVER

        self.new_best = self.scores.record_score(session.mode, session.score)
        self._events.append(("game_over", reason))
        if self.new_best:
            self._events.append(("new_best", session.score))
        logger.info("Session %s over (%s): score %d, level %d, %d moves",
                    session.id, reason, session.score, session.level, session.move_count)
        return self._emit()

    def _on_time_up(self):
        self.end_game("time")

    # --- пауза ---

    def pause_game(self):
        if self.state is not GameState.PLAYING:
            return False
        self.state = GameState.PAUSED
        self._stop_loop()
        self.rules.on_pause(self.session)
        self._emit()
        return True

    def resume_game(self):
        if self.state is not GameState.PAUSED:
            return False
        self.state = GameState.PLAYING
        self.rules.on_resume(self.session)
        # Пропущенные ходы не догоняем
        self._schedule_move()
        self._emit()
        return True

    def toggle_pause(self):
        if self.state is GameState.PAUSED:
            return self.resume_game()
        return self.pause_game()

    # --- управление ---

    def change_direction(self, direction):
        """
        Не больше одной смены за ход. Разворот на 180 (при длине > 1)
        и то же направление игнорируются и попытку не тратят.
        """
        if self.state is not GameState.PLAYING:
            return False
        session = self.session
        if session.direction_changed or direction is Direction.NEUTRAL:
            return False

        current = session.direction
        if direction is current:
            return False
        if direction is current.opposite and len(session.snake) > 1:
            return False

        session.pending_direction = direction
        session.direction_changed = True
        return True

    def handle_intent(self, intent):
        """Намерение от ввода: Direction или "pause" """
        if isinstance(intent, Direction):
            return self.change_direction(intent)
        if intent == "pause":
            return self.toggle_pause()
        logger.debug("Ignored intent %r", intent)
        return False

    # --- ход ---

    def tick(self):
        if self.state is not GameState.PLAYING:
            return None
        session = self.session

        session.direction_changed = False
        session.direction = session.pending_direction

        head = wrap(step(session.head, session.direction, self.cell_size),
                    self.board_size, self.cell_size)
        session.snake.insert(0, head)
        ate = head == session.food
        if not ate:
            session.snake.pop()
        session.move_count += 1

        # Тело после хода: если съели еду, хвост остался на месте
        if hits_self(head, session.snake):
            return self.end_game("self")
        if hits_obstacle(head, session.obstacles, session.is_obstacle_mode):
            return self.end_game("obstacle")

        if ate:
            self._eat(session)

        self.rules.on_tick(session)
        return self._emit()

    def _eat(self, session):
        session.score += SCORE_FOR_FOOD
        session.food_eaten += 1
        self._events.append(("food_eaten", session.head))
        self._events.extend(self.rules.on_food_eaten(session, SCORE_FOR_FOOD))

        new_level = level_for_score(session.selected_level, session.score)
        if new_level > session.level:
            session.level = new_level
            self._events.append(("level_up", new_level))

        session.food = self.allocator.place_food(session.snake, session.obstacles)
        self.scores.observe(session.mode, session.score)

    # --- таймер хода ---

    def tick_interval(self):
        level = self.session.level if self.session is not None else 1
        return SPEED_TABLE[level]

    def _schedule_move(self):
        self._stop_loop()
        self._move_task = self.scheduler.call_later(self.tick_interval(), self._on_move_timer)

    def _on_move_timer(self):
        self._move_task = None
        self.tick()
        if self.state is GameState.PLAYING:
            self._schedule_move()

    def _stop_loop(self):
        if self._move_task is not None:
            self._move_task.cancel()
            self._move_task = None
