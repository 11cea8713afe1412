"""
Счёт и рекорды по режимам.

Хранилище внешнее (database.py). Во время игры рекорд на экране
растёт вместе со счётом, а сохраняется один раз - в конце сессии.
"""
import logging

from session import GameMode

logger = logging.getLogger(__name__)


class ScoreTracker:
    def __init__(self, store):
        self.store = store
        self.display_best = {}
        # Последний рекорд, прочитанный из хранилища без ошибок
        self.stored_best = {}

    def _read(self, mode):
        try:
            value = int(self.store.get(mode))
        except Exception:
            logger.exception("Score store read failed for %s", mode.value)
            return None
        self.stored_best[mode] = max(self.stored_best.get(mode, 0), value)
        return value

    def best(self, mode):
        """Сохранённый рекорд режима (0, если хранилище недоступно)"""
        value = self._read(mode)
        return 0 if value is None else value

    def begin(self, mode):
        """Начало сессии: рекорд на экране = сохранённый"""
        self.display_best[mode] = self.best(mode)
        return self.display_best[mode]

    def observe(self, mode, score):
        """Обновить рекорд на экране без записи в хранилище"""
        current = self.display_best.get(mode)
        if current is None:
            current = self.best(mode)
        self.display_best[mode] = max(current, score)
        return self.display_best[mode]

    def shown_best(self, mode):
        if mode not in self.display_best:
            return self.best(mode)
        return self.display_best[mode]

    def record_score(self, mode, score):
        """
        Сравнить с сохранённым рекордом и записать, если больше.
        True - новый рекорд, и он записан. Если рекорд не прочитать
        или не записать, возвращает False и хранилище не трогает.
        """
        stored = self._read(mode)
        if stored is None:
            logger.warning("Best score for %s is unknown, not saving %d", mode.value, score)
            return False
        # Хранилище может вернуть 0 вместо ошибки, рекорд из begin() не теряем
        if score <= max(stored, self.stored_best.get(mode, 0)):
            return False
        try:
            saved = self.store.set(mode, score)
        except Exception:
            logger.exception("Score store write failed for %s", mode.value)
            saved = False
        if not saved:
            logger.warning("Best score for %s was not saved", mode.value)
            return False
        logger.info("New best for %s: %d", mode.value, score)
        self.stored_best[mode] = score
        self.display_best[mode] = max(self.display_best.get(mode, 0), score)
        return True

    def reset(self, mode=None):
        modes = [mode] if mode is not None else list(GameMode)
        for item in modes:
            try:
                self.store.delete(item)
            except Exception:
                logger.exception("Score store reset failed for %s", item.value)
            self.display_best.pop(item, None)
            self.stored_best.pop(item, None)
