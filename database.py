"""
Хранилища рекордов по режимам.

SQLite для игры, словарь в памяти для тестов.
Сбои чтения/записи не фатальны: пишем в лог и возвращаем 0 / False.
"""
import logging
import sqlite3

from config import DEFAULT_DB_PATH

logger = logging.getLogger(__name__)


def _mode_key(mode):
    return getattr(mode, "value", mode)


class MemoryScoreStore:
    def __init__(self, scores=None):
        self.scores = dict(scores or {})

    def get(self, mode):
        return self.scores.get(_mode_key(mode), 0)

    def set(self, mode, score):
        self.scores[_mode_key(mode)] = int(score)
        return True

    def delete(self, mode):
        self.scores.pop(_mode_key(mode), None)
        return True

    def close(self):
        pass


class SQLiteScoreStore:
    def __init__(self, db_path=DEFAULT_DB_PATH):
        self.db_path = db_path
        self.conn = None
        self._init_db()

    def _init_db(self):
        """Инициализация базы данных"""
        try:
            self.conn = sqlite3.connect(self.db_path)
            cursor = self.conn.cursor()

            # Таблица рекордов (один на режим)
            cursor.execute('''
                CREATE TABLE IF NOT EXISTS high_scores (
                    mode TEXT PRIMARY KEY,
                    score INTEGER NOT NULL DEFAULT 0,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            ''')
            self.conn.commit()
        except sqlite3.Error as e:
            logger.error("Failed to open score database %s: %s", self.db_path, e)
            self.conn = None

    def get(self, mode):
        """Рекорд режима или 0"""
        if self.conn is None:
            return 0
        try:
            cursor = self.conn.cursor()
            cursor.execute('''
                SELECT score FROM high_scores WHERE mode = ?
            ''', (_mode_key(mode),))
            row = cursor.fetchone()
        except sqlite3.Error as e:
            logger.error("Failed to load high score for %s: %s", _mode_key(mode), e)
            return 0
        return row[0] if row else 0

    def set(self, mode, score):
        """Сохранить рекорд режима"""
        if self.conn is None:
            return False
        try:
            cursor = self.conn.cursor()
            cursor.execute('''
                INSERT INTO high_scores (mode, score, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(mode) DO UPDATE SET
                    score = excluded.score,
                    updated_at = excluded.updated_at
            ''', (_mode_key(mode), int(score)))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.error("Failed to save high score for %s: %s", _mode_key(mode), e)
            return False
        return True

    def delete(self, mode):
        """Сбросить рекорд режима"""
        if self.conn is None:
            return False
        try:
            cursor = self.conn.cursor()
            cursor.execute('''
                DELETE FROM high_scores WHERE mode = ?
            ''', (_mode_key(mode),))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.error("Failed to reset high score for %s: %s", _mode_key(mode), e)
            return False
        return True

    def get_all(self):
        """Все рекорды: {mode: score}"""
        if self.conn is None:
            return {}
        try:
            cursor = self.conn.cursor()
            cursor.execute('''
                SELECT mode, score FROM high_scores ORDER BY mode
            ''')
            return dict(cursor.fetchall())
        except sqlite3.Error as e:
            logger.error("Failed to load high scores: %s", e)
            return {}

    def close(self):
        """Закрыть соединение"""
        if self.conn:
            self.conn.close()
            self.conn = None
