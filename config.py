# Настройки игры
# Поле 600x600 пикселей, клетка 20 -> 30x30 клеток
BOARD_SIZE = 600
CELL_SIZE = 20
PANEL_WIDTH = 200  # Панель статистики справа от поля

# Цвета
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BACKGROUND = (15, 5, 20)
BACKGROUND_EDGE = (10, 2, 8)
GRID = (45, 10, 30)
PANEL = (40, 40, 40)
FOOD = (255, 190, 11)
FOOD_EDGE = (255, 107, 0)
OBSTACLE = (131, 56, 236)
OBSTACLE_BORDER = (183, 148, 246)
TEXT_COLOR = WHITE
DIM_TEXT = (150, 150, 150)
WARNING = (255, 60, 60)
BONUS = (255, 255, 0)
OVERLAY = (0, 0, 0, 160)

# Скорость: интервал между ходами (мс) по уровню, 1 - медленно, 10 - быстро
SPEED_TABLE = {
    1: 200, 2: 180, 3: 160, 4: 140, 5: 120,
    6: 100, 7: 80, 8: 60, 9: 40, 10: 20,
}
MIN_LEVEL = 1
MAX_LEVEL = 10

# Начальная змейка (голова первая), 3 сегмента, движение вправо
INITIAL_SNAKE = [(100, 100), (80, 100), (60, 100)]

# Очки
SCORE_FOR_FOOD = 10
POINTS_PER_LEVEL = 50  # +1 уровень каждые 50 очков

# Time trial
TIME_TRIAL_SECONDS = 30
TIME_PER_FOOD = 5
TIME_BONUS = 20
TIME_BONUS_EVERY = 50  # бонус каждые 50 очков
LOW_TIME_WARNING = 10
COUNTDOWN_INTERVAL_MS = 1000

# Препятствия
MIN_OBSTACLES = 5
MAX_OBSTACLES = 12
OBSTACLE_ATTEMPTS = 50
# Зона вокруг старта змейки без препятствий (в клетках)
SPAWN_EXCLUSION = (3, 2)

# Рекорды
DEFAULT_DB_PATH = "vaporsnake_scores.db"
