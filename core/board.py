"""
core/board.py

Треугольная доска: клетки, граф прыжков и построение доски.

Доска иммутабельна: занятость хранится плотным кортежем (позиция p → индекс p - 1),
граф прыжков строится один раз на размер доски и разделяется всеми досками
этого размера.
"""

from collections import abc
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from utils.error_handling import (
    InvalidConfigurationError, InvalidPositionError, log_engine_errors, validate_rows
)
from utils.logging import get_logger
from .triangular import is_row_boundary, row_end, row_of

# destination → jumped
Connections = Mapping[int, int]
Graph = Dict[int, Dict[int, int]]


class Cell:
    """Клетка доски: занятость и исходящие прыжки."""
    __slots__ = ('position', 'pegged', 'connections')

    def __init__(self, position: int, pegged: bool, connections: Connections):
        self.position = position
        self.pegged = pegged
        self.connections = connections

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return False
        return (
            self.position == other.position and
            self.pegged == other.pegged and
            dict(self.connections) == dict(other.connections)
        )

    def __repr__(self) -> str:
        return f"Cell({self.position}, pegged={self.pegged}, connections={dict(self.connections)})"


# =====================================================
# Граф прыжков
# =====================================================

def connect(graph: Graph, max_pos: int, pos: int, neighbor: int, destination: int) -> None:
    """Взаимная связь pos ↔ destination через neighbor, если destination на доске."""
    if destination <= max_pos:
        graph[pos][destination] = neighbor
        graph[destination][pos] = neighbor


def connect_right(graph: Graph, max_pos: int, pos: int) -> None:
    neighbor = pos + 1
    destination = neighbor + 1
    # Не перепрыгиваем через конец ряда
    if not (is_row_boundary(pos) or is_row_boundary(neighbor)):
        connect(graph, max_pos, pos, neighbor, destination)


def connect_down_left(graph: Graph, max_pos: int, pos: int) -> None:
    row = row_of(pos)
    neighbor = pos + row
    destination = neighbor + row + 1
    connect(graph, max_pos, pos, neighbor, destination)


def connect_down_right(graph: Graph, max_pos: int, pos: int) -> None:
    row = row_of(pos)
    neighbor = pos + row + 1
    destination = neighbor + row + 2
    connect(graph, max_pos, pos, neighbor, destination)


CONNECTORS = (connect_right, connect_down_left, connect_down_right)


# Сколько графов последних размеров досок держит кэш
GRAPH_CACHE_SIZE = 32


@lru_cache(maxsize=GRAPH_CACHE_SIZE)
def connection_graph(rows: int) -> Tuple[Connections, ...]:
    """
    Граф прыжков доски из rows рядов.

    Returns:
        Кортеж из row_end(rows) неизменяемых словарей {destination: jumped},
        элемент i описывает позицию i + 1.
    """
    validate_rows(rows)
    max_pos = row_end(rows)
    graph: Graph = {pos: {} for pos in range(1, max_pos + 1)}

    for pos in range(1, max_pos + 1):
        for connector in CONNECTORS:
            connector(graph, max_pos, pos)

    return tuple(MappingProxyType(graph[pos]) for pos in range(1, max_pos + 1))


# =====================================================
# Доска
# =====================================================

class Board(abc.Mapping):
    """
    Иммутабельная треугольная доска.

    Ведёт себя как отображение позиция → Cell. Любое изменение занятости
    возвращает новую доску, старая остаётся валидной.
    Атрибуты после создания не переприсваиваются.
    """
    __slots__ = ('rows', 'max_pos', '_pegged', '_connections', '_hash')

    def __init__(self, rows: int, pegged: Iterable[bool]):
        connections = connection_graph(validate_rows(rows))
        max_pos = row_end(rows)
        pegged = tuple(bool(p) for p in pegged)
        if len(pegged) != max_pos:
            raise InvalidConfigurationError(
                f"Доска из {rows} рядов содержит {max_pos} позиций, получено {len(pegged)}"
            )
        object.__setattr__(self, "_connections", connections)
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "max_pos", max_pos)
        object.__setattr__(self, "_pegged", pegged)
        object.__setattr__(self, "_hash", hash((rows, pegged)))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Board неизменяема: нельзя присвоить {name}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Board неизменяема: нельзя удалить {name}")

    @classmethod
    def from_pegs(cls, rows: int, pegs: Iterable[int]) -> 'Board':
        """Создаёт доску, в которой заняты только позиции pegs."""
        max_pos = row_end(validate_rows(rows))
        pegged = [False] * max_pos
        for pos in pegs:
            if not _is_position(pos, max_pos):
                raise InvalidPositionError(pos, max_pos)
            pegged[pos - 1] = True
        return cls(rows, pegged)

    def check_position(self, pos: int) -> int:
        """Возвращает pos или бросает InvalidPositionError."""
        if not _is_position(pos, self.max_pos):
            raise InvalidPositionError(pos, self.max_pos)
        return pos

    def is_pegged(self, pos: int) -> bool:
        return self._pegged[self.check_position(pos) - 1]

    def connections(self, pos: int) -> Connections:
        """Все геометрически возможные прыжки из pos: {destination: jumped}."""
        return self._connections[self.check_position(pos) - 1]

    def positions(self) -> range:
        return range(1, self.max_pos + 1)

    def pegged_positions(self) -> List[int]:
        return [pos for pos, pegged in enumerate(self._pegged, 1) if pegged]

    def peg_count(self) -> int:
        return sum(self._pegged)

    def with_pegs(self, changes: Mapping[int, bool]) -> 'Board':
        """Новая доска, в которой занятость позиций из changes заменена."""
        pegged = list(self._pegged)
        for pos, value in changes.items():
            pegged[self.check_position(pos) - 1] = value
        return Board(self.rows, pegged)

    def __getitem__(self, pos: int) -> Cell:
        return Cell(pos, self.is_pegged(pos), self.connections(pos))

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions())

    def __len__(self) -> int:
        return self.max_pos

    def __contains__(self, pos: object) -> bool:
        return _is_position(pos, self.max_pos)

    def get(self, pos: object, default=None):
        """Клетка в позиции или default, если позиции нет на доске."""
        if pos not in self:
            return default
        return self[pos]

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.rows == other.rows and self._pegged == other._pegged

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, {self.peg_count()}/{self.max_pos} pegs)"


def _is_position(pos: object, max_pos: int) -> bool:
    return isinstance(pos, int) and not isinstance(pos, bool) and 1 <= pos <= max_pos


@log_engine_errors
def build_board(rows: int) -> Board:
    """
    Строит доску из rows рядов, все позиции заняты.

    Raises:
        InvalidConfigurationError: rows < 1
    """
    board = Board(rows, [True] * row_end(validate_rows(rows)))
    get_logger().debug(f"Построена доска: {rows} рядов, {board.max_pos} позиций")
    return board
