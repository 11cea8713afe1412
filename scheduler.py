"""
Общий цикл таймеров на одном потоке.

Ход змейки и обратный отсчёт time trial - две независимые задачи
на общих часах. Часы двигает внешний цикл (pygame.time.get_ticks()
в игре, ручное время в тестах). Колбэки выполняются по одному до конца.
"""
import heapq
import itertools


class ScheduledTask:
    """Отменяемая задача: разовая (interval=None) или повторяющаяся"""

    def __init__(self, due, callback, interval=None):
        self.due = due
        self.callback = callback
        self.interval = interval
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    @property
    def repeating(self):
        return self.interval is not None


class Scheduler:
    def __init__(self, now=0):
        self.now = now
        # Время кадра, до которого идёт advance_to
        self._frame = now
        self._queue = []
        self._counter = itertools.count()

    def _push(self, task):
        # При равном времени - в порядке постановки
        heapq.heappush(self._queue, (task.due, next(self._counter), task))
        return task

    def _base(self):
        # Задачи из колбэка отсчитываются от кадра, а не от просроченного срока:
        # после задержки кадра пропущенные ходы не выполняются пачкой
        return max(self.now, self._frame)

    def call_later(self, delay, callback):
        """Выполнить callback один раз через delay мс"""
        return self._push(ScheduledTask(self._base() + delay, callback))

    def call_every(self, interval, callback):
        """Выполнять callback каждые interval мс, пока задачу не отменят"""
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        return self._push(ScheduledTask(self._base() + interval, callback, interval))

    def advance_to(self, now):
        """Выполнить все задачи со сроком <= now. Возвращает число запусков"""
        self._frame = max(self._frame, now)
        fired = 0
        while self._queue and self._queue[0][0] <= now:
            due, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            self.now = max(self.now, due)
            task.callback()
            fired += 1
            # Отсчёт времени идёт по своему шагу, без сдвига на кадр
            if task.repeating and not task.cancelled:
                task.due = due + task.interval
                self._push(task)
        self.now = max(self.now, now)
        return fired

    def advance(self, delta):
        return self.advance_to(self.now + delta)

    def pending(self):
        """Количество активных задач"""
        return sum(1 for _, _, task in self._queue if not task.cancelled)
