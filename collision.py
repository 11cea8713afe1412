"""
Проверки столкновений. Чистые функции, состояние не меняют.
"""


def hits_self(head, body):
    """
    Голова совпала с сегментом тела (индекс >= 1).
    body - змейка после обновления хода: голова вставлена,
    хвост убран, если еда не съедена.
    """
    for segment in body[1:]:
        if segment == head:
            return True
    return False


def hits_obstacle(head, obstacles, mode_is_obstacle):
    """Препятствия считаются только в режиме obstacle"""
    if not mode_is_obstacle:
        return False
    return head in obstacles
