"""
Игра в окне pygame: меню, игра, пауза, конец игры.

Использование:
    python play.py                                  # меню
    python play.py --mode timetrial --level 3       # сразу в игру
    python play.py --theme rainbow --db scores.db
"""
import argparse
import logging
import sys

import pygame

from config import BOARD_SIZE, CELL_SIZE, BLACK, DEFAULT_DB_PATH, MIN_LEVEL, MAX_LEVEL
from controls import PAUSE, RESTART, QUIT, intents_from_events
from database import SQLiteScoreStore
from engine import SimulationEngine
from errors import ConfigurationError
from grid import Direction
from render import Renderer
from scheduler import Scheduler
from scores import ScoreTracker
from session import GameMode, GameState, SessionConfig, Theme
from spawn import SpawnAllocator

logger = logging.getLogger(__name__)

MODE_KEYS = {
    pygame.K_1: GameMode.CLASSIC,
    pygame.K_2: GameMode.TIME_TRIAL,
    pygame.K_3: GameMode.OBSTACLE,
}


def game_summary(number, snapshot, seconds):
    """Строка итога партии для консоли"""
    return f"Game {number}: Score {snapshot.score} (level {snapshot.level}, {seconds:.1f}s)"


class SnakeApp:
    def __init__(self, mode=GameMode.CLASSIC, level=1, theme=Theme.MAGENTA,
                 db_path=DEFAULT_DB_PATH, seed=None):
        pygame.init()

        self.renderer = Renderer(BOARD_SIZE, CELL_SIZE)
        self.screen = pygame.display.set_mode(self.renderer.size)
        pygame.display.set_caption('Vapor Snake')
        self.clock = pygame.time.Clock()

        self.store = SQLiteScoreStore(db_path)
        logger.debug("High scores: %s", db_path)
        self.scores = ScoreTracker(self.store)
        self.scheduler = Scheduler(pygame.time.get_ticks())
        self.engine = SimulationEngine(
            BOARD_SIZE, CELL_SIZE,
            scheduler=self.scheduler,
            allocator=SpawnAllocator(BOARD_SIZE, CELL_SIZE, seed=seed),
            scores=self.scores,
        )
        self.engine.subscribe(self.on_snapshot)

        # Выбор в меню
        self.mode = mode
        self.level = level
        self.theme = theme

        self.fps = 60
        self.games = 0
        self.total_score = 0
        self.total_time = 0.0
        self.best = 0
        self.snapshot = None

    def on_snapshot(self, snapshot):
        """Один кадр на ход"""
        self.snapshot = snapshot
        self.renderer.render(self.screen, snapshot)
        if snapshot.has_event("game_over"):
            seconds = self.engine.session.duration()
            self.games += 1
            self.total_score += snapshot.score
            self.total_time += seconds
            self.best = max(self.best, snapshot.score)
            print(game_summary(self.games, snapshot, seconds))

    def start(self):
        config = SessionConfig(self.mode, self.level, self.theme)
        self.engine.start_game(config)

    def cycle_theme(self):
        themes = list(Theme)
        self.theme = themes[(themes.index(self.theme) + 1) % len(themes)]

    def handle_menu_key(self, key):
        if key in MODE_KEYS:
            self.mode = MODE_KEYS[key]
        elif key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_RIGHT):
            self.level = min(MAX_LEVEL, self.level + 1)
        elif key in (pygame.K_MINUS, pygame.K_LEFT):
            self.level = max(MIN_LEVEL, self.level - 1)
        elif key == pygame.K_t:
            self.cycle_theme()
        elif key in (pygame.K_RETURN, pygame.K_SPACE):
            self.start()
        elif key == pygame.K_ESCAPE:
            return False
        return True

    def handle_events(self):
        events = pygame.event.get()
        state = self.engine.state

        if state in (GameState.MENU, GameState.GAME_OVER):
            for event in events:
                if event.type == pygame.QUIT:
                    return False
                if event.type != pygame.KEYDOWN:
                    continue
                if state is GameState.GAME_OVER:
                    if event.key in (pygame.K_r, pygame.K_RETURN):
                        self.engine.restart_game()
                    elif event.key == pygame.K_m:
                        self.engine.return_to_menu()
                    elif event.key == pygame.K_ESCAPE:
                        return False
                elif not self.handle_menu_key(event.key):
                    return False
            return True

        for intent in intents_from_events(events):
            if intent == QUIT:
                return False
            if intent == RESTART:
                self.engine.restart_game()
            elif intent == PAUSE or isinstance(intent, Direction):
                self.engine.handle_intent(intent)
        return True

    def draw_menu(self):
        best = self.scores.best(self.mode)
        self.screen.fill(BLACK)
        self.renderer.draw_overlay(self.screen, "VAPOR SNAKE", [
            f"Mode: {self.mode.value}  (1 classic, 2 timetrial, 3 obstacle)",
            f"Level: {self.level}  (+/-)",
            f"Theme: {self.theme.value}  (T)",
            f"Best: {best}",
            "",
            "ENTER to start, ESC to quit",
        ])

    def draw(self):
        state = self.engine.state
        if state is GameState.MENU:
            self.draw_menu()
        elif self.snapshot is not None and state is not GameState.PLAYING:
            # Последний кадр + затемнение поверх
            self.renderer.render(self.screen, self.snapshot)
            if state is GameState.PAUSED:
                self.renderer.draw_overlay(self.screen, "PAUSED", ["Space to resume"])
            elif state is GameState.GAME_OVER:
                lines = [f"Score: {self.snapshot.score}"]
                if self.engine.new_best:
                    lines.append("NEW BEST!")
                lines += ["", "R restart, M menu, ESC quit"]
                self.renderer.draw_overlay(self.screen, "GAME OVER", lines)
        pygame.display.flip()

    def run(self, autostart=False):
        if autostart:
            self.start()

        running = True
        while running:
            running = self.handle_events()
            # Таймеры: ход змейки и отсчёт времени
            self.scheduler.advance_to(pygame.time.get_ticks())
            self.draw()
            self.clock.tick(self.fps)

        self.engine.return_to_menu()
        self.store.close()
        pygame.quit()

        if self.games > 0:
            print(f"\nResults: {self.games} games")
            print(f"Avg: {self.total_score / self.games:.1f}")
            print(f"Best: {self.best}")
            print(f"Time: {self.total_time:.0f}s")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Vapor Snake")
    parser.add_argument("--mode", choices=[m.value for m in GameMode], default=None,
                        help="start a session right away in this mode")
    parser.add_argument("--level", type=int, default=1)
    parser.add_argument("--theme", choices=[t.value for t in Theme], default=Theme.MAGENTA.value)
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="high score database")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SessionConfig(args.mode or GameMode.CLASSIC, args.level, args.theme)
    except ConfigurationError as e:
        print(f"Invalid settings: {e}")
        return 2

    app = SnakeApp(config.mode, config.level, config.theme, db_path=args.db, seed=args.seed)
    app.run(autostart=args.mode is not None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
