"""
Ошибки игры.

Ошибки конфигурации фатальны и не дают начать сессию.
Всё остальное (нехватка места для препятствий, сбои хранилища рекордов,
столкновения) решается на месте и в виде исключений наружу не выходит.
"""


class ConfigurationError(ValueError):
    """Неверная конфигурация: размер поля, уровень, режим или тема"""
