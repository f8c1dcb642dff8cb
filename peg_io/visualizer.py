"""
peg_io/visualizer.py

Текстовая визуализация треугольной доски.
"""

from typing import Dict

from core.board import Board
from core.triangular import row_positions
from .notation import pos_to_label

# Ширина одной позиции: метка + символ + пробел
POS_CHARS = 3

PEG = '0'
HOLE = '-'

ANSI_STYLES: Dict[str, str] = {
    'red': '[31m',
    'green': '[32m',
    'blue': '[34m',
    'reset': '[0m',
}


def ansi(style: str) -> str:
    """Escape-последовательность ANSI для стиля."""
    return '\u001b' + ANSI_STYLES[style]


def colorize(text: str, color: str) -> str:
    return f"{ansi(color)}{text}{ansi('reset')}"


def render_pos(board: Board, pos: int, color: bool = True) -> str:
    """Метка позиции и её состояние: колышек (синий) или дырка (красная)."""
    if board.is_pegged(pos):
        mark = colorize(PEG, 'blue') if color else PEG
    else:
        mark = colorize(HOLE, 'red') if color else HOLE
    return pos_to_label(pos) + mark


def row_padding(row: int, rows: int) -> str:
    """Отступ слева, центрирующий ряд."""
    pad_length = -(-(rows - row) * POS_CHARS // 2)
    return " " * pad_length


def render_row(board: Board, row: int, color: bool = True) -> str:
    return row_padding(row, board.rows) + " ".join(
        render_pos(board, pos, color) for pos in row_positions(row)
    )


def render_board(board: Board, color: bool = True) -> str:
    """
    Доска целиком, по ряду на строку.

    Args:
        board: доска
        color: раскрашивать ли ANSI-цветами

    Returns:
        Строка для вывода
    """
    return "\n".join(render_row(board, row, color) for row in range(1, board.rows + 1))


def format_game_over(board: Board, color: bool = True) -> str:
    """Итог партии: сколько колышков осталось и финальная доска."""
    remaining = board.peg_count()
    headline = f"Игра окончена! Осталось колышков: {remaining}"
    if remaining == 1 and color:
        headline = colorize(headline, 'green')
    return f"{headline}\n{render_board(board, color)}"
