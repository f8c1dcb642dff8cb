"""
core/triangular.py

Треугольные числа и геометрия рядов треугольной доски.

Позиции нумеруются с 1 построчно: ряд n занимает позиции
row_end(n - 1) + 1 .. row_end(n).
"""

from itertools import accumulate, count, takewhile
from typing import Iterator


def triangular_sequence() -> Iterator[int]:
    """
    Ленивая бесконечная последовательность треугольных чисел: 1, 3, 6, 10, ...

    Каждый вызов возвращает новый независимый генератор с начала.
    """
    return accumulate(count(1))


def is_triangular(n: int) -> bool:
    """True, если n треугольное число (1, 3, 6, 10, 15, ...)."""
    last = 0
    for last in takewhile(lambda t: t <= n, triangular_sequence()):
        pass
    return last == n and n > 0


def row_end(n: int) -> int:
    """Последняя позиция ряда n. row_end(0) == 0."""
    return n * (n + 1) // 2


def row_of(position: int) -> int:
    """Номер ряда, в котором находится позиция."""
    return 1 + sum(1 for _ in takewhile(lambda t: t < position, triangular_sequence()))


def is_row_boundary(position: int) -> bool:
    """Позиция замыкает свой ряд: прыжок вправо через неё ушёл бы в следующий ряд."""
    return is_triangular(position)


def row_positions(row: int) -> range:
    """Все позиции ряда row."""
    return range(row_end(row - 1) + 1, row_end(row) + 1)
