"""
Координаты поля и переход через границы.

Позиция - пара (x, y) в пикселях, всегда кратная размеру клетки.
Поле квадратное, выход за край возвращает змейку с другой стороны.
"""
from enum import Enum

from errors import ConfigurationError


class Direction(Enum):
    # Значение - единичный сдвиг (dx, dy) в клетках
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    NEUTRAL = (0, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return Direction((-self.dx, -self.dy))


def validate_board(board_size, cell_size):
    """Поле должно делиться на клетки без остатка"""
    if cell_size <= 0 or board_size <= 0:
        raise ConfigurationError(
            f"board and cell size must be positive, got {board_size}/{cell_size}")
    if board_size % cell_size != 0:
        raise ConfigurationError(
            f"board size {board_size} is not a multiple of cell size {cell_size}")


def wrap(position, board_size, cell_size):
    """
    Переход через границу: отрицательная координата -> последняя клетка,
    координата >= board_size -> 0. Больше ничего не нормализуем.
    """
    x, y = position
    if x < 0:
        x = board_size - cell_size
    elif x >= board_size:
        x = 0
    if y < 0:
        y = board_size - cell_size
    elif y >= board_size:
        y = 0
    return (x, y)


def step(position, direction, cell_size):
    """Соседняя клетка в направлении direction (без переноса)"""
    x, y = position
    return (x + direction.dx * cell_size, y + direction.dy * cell_size)
