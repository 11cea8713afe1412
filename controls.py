"""
Клавиатура -> намерения для движка.

Стрелки и WASD - направление, пробел / Esc / P - пауза, R - рестарт.
"""
import pygame

from grid import Direction

PAUSE = "pause"
RESTART = "restart"
QUIT = "quit"

KEY_BINDINGS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_SPACE: PAUSE,
    pygame.K_ESCAPE: PAUSE,
    pygame.K_p: PAUSE,
    pygame.K_r: RESTART,
}


def intent_for_key(key):
    """Намерение для клавиши или None"""
    return KEY_BINDINGS.get(key)


def intents_from_events(events):
    """Намерения из очереди событий pygame, по порядку"""
    intents = []
    for event in events:
        if event.type == pygame.QUIT:
            intents.append(QUIT)
        elif event.type == pygame.KEYDOWN:
            intent = intent_for_key(event.key)
            if intent is not None:
                intents.append(intent)
    return intents
