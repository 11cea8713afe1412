"""
Правила режимов: classic, time trial, obstacle.

Общий интерфейс on_start / on_tick / on_food_eaten / on_end
плюс on_pause / on_resume, чтобы пауза останавливала и таймер.
"""
import logging

from config import (TIME_TRIAL_SECONDS, TIME_PER_FOOD, TIME_BONUS, TIME_BONUS_EVERY,
                    COUNTDOWN_INTERVAL_MS)
from session import GameMode

logger = logging.getLogger(__name__)


class ModeRules:
    mode = None

    def __init__(self, scheduler, allocator, on_expire=None):
        self.scheduler = scheduler
        self.allocator = allocator
        self.on_expire = on_expire

    def on_start(self, session):
        pass

    def on_tick(self, session):
        pass

    def on_food_eaten(self, session, points):
        """Возвращает список событий для снимка"""
        return []

    def on_end(self, session):
        pass

    def on_pause(self, session):
        pass

    def on_resume(self, session):
        pass


class ClassicRules(ModeRules):
    # Никаких таймеров, конец только от столкновения
    mode = GameMode.CLASSIC


class TimeTrialRules(ModeRules):
    mode = GameMode.TIME_TRIAL

    def __init__(self, scheduler, allocator, on_expire=None):
        super().__init__(scheduler, allocator, on_expire)
        self.countdown = None
        self.session = None

    def on_start(self, session):
        self.session = session
        session.remaining_seconds = TIME_TRIAL_SECONDS
        self._start_countdown()

    def _start_countdown(self):
        self._stop_countdown()
        self.countdown = self.scheduler.call_every(COUNTDOWN_INTERVAL_MS, self.on_timer)

    def _stop_countdown(self):
        if self.countdown is not None:
            self.countdown.cancel()
            self.countdown = None

    def on_timer(self):
        """Раз в секунду, независимо от хода змейки"""
        session = self.session
        session.remaining_seconds = max(0, session.remaining_seconds - 1)
        if session.remaining_seconds <= 0:
            self._stop_countdown()
            logger.info("Time is up: session %s, score %d", session.id, session.score)
            if self.on_expire is not None:
                self.on_expire()

    def on_food_eaten(self, session, points):
        session.remaining_seconds += TIME_PER_FOOD
        events = []
        # Бонус каждые 50 набранных очков
        if session.score > 0 and session.score % TIME_BONUS_EVERY == 0:
            session.remaining_seconds += TIME_BONUS
            events.append(("time_bonus", TIME_BONUS))
        return events

    def on_end(self, session):
        self._stop_countdown()

    def on_pause(self, session):
        self._stop_countdown()

    def on_resume(self, session):
        if session.remaining_seconds and session.remaining_seconds > 0:
            self._start_countdown()

    @property
    def running(self):
        return self.countdown is not None and not self.countdown.cancelled


class ObstacleRules(ModeRules):
    mode = GameMode.OBSTACLE

    def on_start(self, session):
        # Препятствия ставятся один раз и живут всю сессию
        session.obstacles = self.allocator.place_obstacles(session.snake)
        logger.debug("Session %s: %d obstacles", session.id, len(session.obstacles))


RULES = {
    GameMode.CLASSIC: ClassicRules,
    GameMode.TIME_TRIAL: TimeTrialRules,
    GameMode.OBSTACLE: ObstacleRules,
}


def rules_for(mode, scheduler, allocator, on_expire=None):
    return RULES[mode](scheduler, allocator, on_expire)
