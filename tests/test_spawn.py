"""
Tests for food and obstacle placement.
"""

import numpy as np

from config import MIN_OBSTACLES, MAX_OBSTACLES
from spawn import SpawnAllocator


SNAKE = [(100, 100), (80, 100), (60, 100)]


def make_allocator(board_size=600, cell_size=20, seed=42):
    return SpawnAllocator(board_size, cell_size, rng=np.random.default_rng(seed))


class TestPlaceFood:
    def test_food_is_grid_aligned_and_on_board(self):
        allocator = make_allocator()
        for _ in range(200):
            x, y = allocator.place_food(SNAKE)
            assert x % 20 == 0 and y % 20 == 0
            assert 0 <= x < 600 and 0 <= y < 600

    def test_food_never_on_snake_or_obstacle(self):
        allocator = make_allocator(board_size=100)
        snake = [(0, 0), (20, 0), (40, 0), (60, 0), (80, 0)]
        obstacles = {(0, 20), (20, 20), (40, 20), (60, 20), (80, 20)}
        for _ in range(300):
            food = allocator.place_food(snake, obstacles)
            assert food not in snake
            assert food not in obstacles

    def test_single_free_cell_is_found(self):
        """3x3 board with eight cells taken leaves exactly one choice."""
        allocator = make_allocator(board_size=60)
        taken = [(x, y) for y in (0, 20, 40) for x in (0, 20, 40) if (x, y) != (40, 40)]
        assert allocator.place_food(taken[:5], taken[5:]) == (40, 40)

    def test_seeded_allocators_agree(self):
        a = make_allocator(seed=3)
        b = make_allocator(seed=3)
        assert [a.place_food(SNAKE) for _ in range(10)] == [b.place_food(SNAKE) for _ in range(10)]


class TestPlaceObstacles:
    def test_sampled_count_within_range(self):
        allocator = make_allocator()
        for _ in range(50):
            assert MIN_OBSTACLES <= allocator.obstacle_count() <= MAX_OBSTACLES

    def test_obstacles_avoid_snake_and_spawn_zone(self):
        allocator = make_allocator()
        for _ in range(20):
            obstacles = allocator.place_obstacles(SNAKE)
            assert len(obstacles) <= MAX_OBSTACLES
            for obstacle in obstacles:
                assert obstacle not in SNAKE
                assert not allocator.in_spawn_zone(obstacle, SNAKE[0])

    def test_spawn_zone_is_three_by_two_cells(self):
        allocator = make_allocator()
        anchor = (100, 100)
        assert allocator.in_spawn_zone((140, 120), anchor)
        assert not allocator.in_spawn_zone((160, 100), anchor)
        assert not allocator.in_spawn_zone((100, 140), anchor)

    def test_exhausted_attempts_skip_obstacles(self):
        """Every cell of a 3x3 board is inside the spawn zone: nothing fits."""
        allocator = make_allocator(board_size=60)
        obstacles = allocator.place_obstacles([(20, 20), (0, 20)], count=5)
        assert obstacles == frozenset()

    def test_count_never_exceeds_target(self):
        allocator = make_allocator(board_size=200)
        for target in (5, 8, 12):
            assert len(allocator.place_obstacles(SNAKE, count=target)) <= target

    def test_result_is_frozenset(self):
        assert isinstance(make_allocator().place_obstacles(SNAKE, count=5), frozenset)
