"""
Отрисовка снимка игры на pygame-поверхность.

Только рисует, состояние игры не меняет. Тема змейки - Theme,
цвет берётся из таблицы один раз на кадр.
"""
import colorsys

import numpy as np
import pygame

from config import (BOARD_SIZE, CELL_SIZE, PANEL_WIDTH, BACKGROUND, BACKGROUND_EDGE, GRID,
                    PANEL, FOOD, FOOD_EDGE, OBSTACLE, OBSTACLE_BORDER, TEXT_COLOR, DIM_TEXT,
                    WARNING, BONUS, OVERLAY)
from session import GameState, Theme

THEME_COLORS = {
    Theme.MAGENTA: (255, 0, 110),
    Theme.WHITE: (255, 255, 255),
    Theme.CYAN: (0, 245, 255),
    Theme.AMBER: (255, 190, 11),
    Theme.GREEN: (0, 255, 65),
    Theme.PURPLE: (131, 56, 236),
    Theme.BLUE: (0, 150, 255),
    Theme.RED: (255, 0, 0),
    Theme.YELLOW: (255, 255, 0),
    Theme.ORANGE: (255, 149, 0),
    Theme.PINK: (255, 105, 180),
    Theme.LIME: (0, 255, 0),
    Theme.RAINBOW: (255, 0, 110),
}


def darken(color, factor=0.5):
    """Затемнить цвет, factor в [0, 1]"""
    return tuple(int(c) for c in (np.array(color[:3]) * factor).astype(np.int32))


def theme_color(theme):
    return THEME_COLORS.get(theme, THEME_COLORS[Theme.MAGENTA])


def rainbow_color(hue, index):
    h = ((hue + index * 10) % 360) / 360.0
    r, g, b = colorsys.hsv_to_rgb(h, 1.0, 1.0)
    return (int(r * 255), int(g * 255), int(b * 255))


class Renderer:
    def __init__(self, board_size=BOARD_SIZE, cell_size=CELL_SIZE, panel_width=PANEL_WIDTH):
        self.board_size = board_size
        self.cell_size = cell_size
        self.panel_width = panel_width
        self.rainbow_hue = 0
        self.bonus_frames = 0
        self._font = None
        self._big_font = None
        self._background = None

    @property
    def size(self):
        return (self.board_size + self.panel_width, self.board_size)

    def font(self, big=False):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont('arial', 18)
            self._big_font = pygame.font.SysFont('arial', 32, bold=True)
        return self._big_font if big else self._font

    def cell_rect(self, position, inset=1):
        x, y = position
        return pygame.Rect(x + inset, y + inset,
                           self.cell_size - 2 * inset, self.cell_size - 2 * inset)

    def _build_background(self):
        """Градиент фона + сетка, строится один раз (numpy)"""
        size = self.board_size
        t = np.linspace(0.0, 1.0, size)[:, None]
        ramp = (t + t.T) / 2.0
        start = np.array(BACKGROUND, dtype=np.float32)
        end = np.array(BACKGROUND_EDGE, dtype=np.float32)
        pixels = start + (end - start) * ramp[..., None]
        surface = pygame.surfarray.make_surface(pixels.astype(np.uint8))
        for i in range(0, size + 1, self.cell_size):
            pygame.draw.line(surface, GRID, (i, 0), (i, size))
            pygame.draw.line(surface, GRID, (0, i), (size, i))
        return surface

    def clear_board(self, surface):
        if self._background is None:
            self._background = self._build_background()
        surface.blit(self._background, (0, 0))

    def draw_obstacles(self, surface, obstacles):
        for obstacle in obstacles:
            rect = self.cell_rect(obstacle)
            pygame.draw.rect(surface, OBSTACLE, rect)
            pygame.draw.rect(surface, OBSTACLE_BORDER, rect, 2)

    def draw_food(self, surface, food):
        if food is None:
            return
        x, y = food
        center = (x + self.cell_size // 2, y + self.cell_size // 2)
        radius = self.cell_size // 2 - 2
        pygame.draw.circle(surface, FOOD_EDGE, center, radius)
        pygame.draw.circle(surface, FOOD, center, max(1, radius - 2))

    def draw_snake(self, surface, snake, theme):
        base = theme_color(theme)
        for i, segment in enumerate(snake):
            if theme is Theme.RAINBOW:
                color = rainbow_color(self.rainbow_hue, i)
            else:
                # Голова ярче, тело темнее
                color = base if i == 0 else darken(base, 0.7)
            pygame.draw.rect(surface, color, self.cell_rect(segment))
        if snake and theme is not Theme.RAINBOW:
            pygame.draw.rect(surface, darken(base), self.cell_rect(snake[0]), 2)

    def draw_stats(self, surface, snapshot):
        """Панель статистики справа"""
        panel = pygame.Rect(self.board_size, 0, self.panel_width, self.board_size)
        pygame.draw.rect(surface, PANEL, panel)

        mode = snapshot.mode.value if snapshot.mode else "-"
        stats = [
            (f"Mode: {mode}", TEXT_COLOR),
            (f"Score: {snapshot.score}", TEXT_COLOR),
            (f"Level: {snapshot.level}", TEXT_COLOR),
            (f"Best: {snapshot.best_score}", TEXT_COLOR),
            (f"Length: {len(snapshot.snake)}", TEXT_COLOR),
        ]
        if snapshot.remaining_seconds is not None:
            color = WARNING if snapshot.low_time else TEXT_COLOR
            stats.append((f"Time: {snapshot.remaining_seconds}", color))
        stats += [
            ("", TEXT_COLOR),
            ("Controls:", DIM_TEXT),
            ("Arrows/WASD Move", DIM_TEXT),
            ("Space Pause", DIM_TEXT),
            ("R Restart", DIM_TEXT),
        ]

        font = self.font()
        for i, (text, color) in enumerate(stats):
            if text:
                surf = font.render(text, True, color)
                surface.blit(surf, (self.board_size + 10, 20 + i * 25))

        if snapshot.has_event("time_bonus"):
            self.bonus_frames = 10
        if self.bonus_frames > 0:
            self.bonus_frames -= 1
            surf = self.font(big=True).render("+20 BONUS!", True, BONUS)
            surface.blit(surf, surf.get_rect(center=(self.board_size // 2, self.board_size // 2)))

    def render(self, surface, snapshot):
        """Полный кадр по снимку"""
        self.clear_board(surface)
        self.draw_obstacles(surface, snapshot.obstacles)
        self.draw_food(surface, snapshot.food)
        self.draw_snake(surface, snapshot.snake, snapshot.theme)
        self.draw_stats(surface, snapshot)
        if snapshot.state is GameState.PLAYING:
            self.rainbow_hue = (self.rainbow_hue + 2) % 360

    def draw_overlay(self, surface, title, lines=()):
        """Затемнение поля и текст (пауза, конец игры, меню)"""
        shade = pygame.Surface((self.board_size, self.board_size), pygame.SRCALPHA)
        shade.fill(OVERLAY)
        surface.blit(shade, (0, 0))

        title_surf = self.font(big=True).render(title, True, TEXT_COLOR)
        center_x = self.board_size // 2
        y = self.board_size // 3
        surface.blit(title_surf, title_surf.get_rect(center=(center_x, y)))
        for i, line in enumerate(lines):
            surf = self.font().render(line, True, TEXT_COLOR)
            surface.blit(surf, surf.get_rect(center=(center_x, y + 50 + i * 26)))
