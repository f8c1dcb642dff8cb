"""
peg_io/notation.py

Буквенные метки позиций: 1 → a, 26 → z, 27 → aa, ...
Движок работает только с номерами позиций, метками занимаются адаптеры.
"""

import re
from typing import List, Tuple

from core.board import Board

ALPHA_START = ord('a')
ALPHABET_SIZE = 26

# Первая пустая клетка по умолчанию
DEFAULT_EMPTY = 'e'

_LABEL_RE = re.compile(r'^[a-z]+$')
_SEPARATORS_RE = re.compile(r'[\s,;\-→>]+')


def pos_to_label(pos: int) -> str:
    """Номер позиции → буквенная метка."""
    if pos < 1:
        raise ValueError(f"Позиция должна быть >= 1, получено {pos}")
    label = ""
    n = pos
    while n > 0:
        n, rem = divmod(n - 1, ALPHABET_SIZE)
        label = chr(ALPHA_START + rem) + label
    return label


def label_to_pos(label: str) -> int:
    """Буквенная метка → номер позиции."""
    label = label.strip().lower()
    if not _LABEL_RE.match(label):
        raise ValueError(f"Некорректная метка позиции: {label!r}")
    pos = 0
    for ch in label:
        pos = pos * ALPHABET_SIZE + (ord(ch) - ALPHA_START + 1)
    return pos


def board_labels(board: Board) -> List[str]:
    """Метки всех позиций доски по порядку."""
    return [pos_to_label(pos) for pos in board.positions()]


def default_empty_label(board: Board) -> str:
    """Метка клетки, которую освобождают по умолчанию: e, а на маленьких досках a."""
    if board.max_pos >= label_to_pos(DEFAULT_EMPTY):
        return DEFAULT_EMPTY
    return pos_to_label(1)


def parse_position(text: str, board: Board) -> int:
    """
    Парсит одну метку и проверяет, что позиция есть на доске.

    Raises:
        ValueError: метка не распознана
        InvalidPositionError: позиции нет на доске
    """
    return board.check_position(label_to_pos(text))


def parse_move(text: str, board: Board) -> Tuple[int, int]:
    """
    Парсит ход из двух меток: "da", "d a", "d-a", "ab, c".

    Слитная запись допустима, только если все метки доски однобуквенные.

    Returns:
        (from, to)
    """
    tokens = [t for t in _SEPARATORS_RE.split(text.strip().lower()) if t]

    if len(tokens) == 1 and board.max_pos <= ALPHABET_SIZE:
        tokens = list(tokens[0])

    if len(tokens) != 2:
        raise ValueError(f"Ожидаются две метки позиций, получено: {text!r}")

    return parse_position(tokens[0], board), parse_position(tokens[1], board)
