"""
utils/error_handling.py

Исключения движка и проверки входных данных.
"""

from typing import Callable, Any
from functools import wraps

from .logging import get_logger


class EngineError(Exception):
    """Базовое исключение движка."""
    pass


class InvalidConfigurationError(EngineError):
    """Недопустимое количество рядов."""
    pass


class InvalidPositionError(EngineError):
    """Позиция вне доски."""

    def __init__(self, position: Any, max_pos: int):
        self.position = position
        self.max_pos = max_pos
        super().__init__(f"Позиция {position!r} вне доски (1..{max_pos})")


class IllegalMoveError(EngineError):
    """Ход не входит в список допустимых ходов."""

    def __init__(self, from_pos: int, to_pos: int):
        self.from_pos = from_pos
        self.to_pos = to_pos
        super().__init__(f"Недопустимый ход: {from_pos} → {to_pos}")


def validate_rows(rows: Any) -> int:
    """
    Проверяет количество рядов доски.

    Args:
        rows: количество рядов

    Returns:
        rows

    Raises:
        InvalidConfigurationError: если rows не целое число >= 1
    """
    if isinstance(rows, bool) or not isinstance(rows, int):
        raise InvalidConfigurationError(f"Количество рядов должно быть целым числом, получено {rows!r}")

    if rows < 1:
        raise InvalidConfigurationError(f"Доска должна содержать хотя бы один ряд, получено {rows}")

    return rows


def log_engine_errors(func: Callable) -> Callable:
    """
    Декоратор: логирует ошибки движка и пробрасывает их дальше.

    Адаптеры решают сами, как показать ошибку пользователю.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except EngineError as e:
            get_logger().debug(f"{func.__name__}: {e}")
            raise
    return wrapper
