import os
import sys

import numpy as np
import pytest

# Тестам окно не нужно
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import MemoryScoreStore
from engine import SimulationEngine
from scheduler import Scheduler
from scores import ScoreTracker
from spawn import SpawnAllocator


class QueueAllocator(SpawnAllocator):
    """Еда из заранее заданной очереди, дальше - обычная случайная"""

    def __init__(self, foods=(), **kwargs):
        super().__init__(**kwargs)
        self.foods = list(foods)

    def place_food(self, snake, obstacles=()):
        if self.foods:
            return self.foods.pop(0)
        return super().place_food(snake, obstacles)


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def make_engine(scheduler, store):
    def factory(foods=((300, 300),), initial_snake=None, board_size=600, cell_size=20, seed=7):
        allocator = QueueAllocator(foods, board_size=board_size, cell_size=cell_size,
                                   rng=np.random.default_rng(seed))
        return SimulationEngine(board_size, cell_size, scheduler=scheduler,
                                allocator=allocator, scores=ScoreTracker(store),
                                initial_snake=initial_snake)
    return factory
