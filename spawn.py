"""
Размещение еды и препятствий выборкой с отклонением.

Случайная клетка тянется заново, пока не окажется свободной.
Занятая часть поля всегда мала, поэтому для еды попыток не ограничиваем.
"""
import logging

import numpy as np

from config import (BOARD_SIZE, CELL_SIZE, MIN_OBSTACLES, MAX_OBSTACLES,
                    OBSTACLE_ATTEMPTS, SPAWN_EXCLUSION)

logger = logging.getLogger(__name__)


class SpawnAllocator:
    def __init__(self, board_size=BOARD_SIZE, cell_size=CELL_SIZE, rng=None, seed=None):
        self.board_size = board_size
        self.cell_size = cell_size
        self.cells = board_size // cell_size
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def random_cell(self):
        """Случайная клетка, выровненная по сетке"""
        x, y = self.rng.integers(0, self.cells, size=2)
        return (int(x) * self.cell_size, int(y) * self.cell_size)

    def place_food(self, snake, obstacles=()):
        """Позиция еды вне змейки и препятствий"""
        occupied = set(snake)
        occupied.update(obstacles)
        while True:
            candidate = self.random_cell()
            if candidate not in occupied:
                return candidate

    def obstacle_count(self):
        """Целевое число препятствий, равномерно из [5, 12]"""
        return int(self.rng.integers(MIN_OBSTACLES, MAX_OBSTACLES + 1))

    def in_spawn_zone(self, position, anchor):
        """Зона 3x2 клетки вокруг старта змейки"""
        zone_x, zone_y = SPAWN_EXCLUSION
        return (abs(position[0] - anchor[0]) < self.cell_size * zone_x and
                abs(position[1] - anchor[1]) < self.cell_size * zone_y)

    def place_obstacles(self, snake, count=None, anchor=None):
        """
        Препятствия на сессию. На каждое - до 50 попыток; если все
        неудачны, препятствие пропускается (их может стать меньше count).
        """
        if count is None:
            count = self.obstacle_count()
        if anchor is None:
            anchor = snake[0]

        body = set(snake)
        placed = set()
        for i in range(count):
            for _ in range(OBSTACLE_ATTEMPTS):
                candidate = self.random_cell()
                if (candidate in body or candidate in placed or
                        self.in_spawn_zone(candidate, anchor)):
                    continue
                placed.add(candidate)
                break
            else:
                logger.debug("Obstacle %d skipped after %d attempts", i, OBSTACLE_ATTEMPTS)

        if len(placed) < count:
            logger.info("Placed %d of %d obstacles", len(placed), count)
        return frozenset(placed)
