"""
peg_io - Ввод/вывод для треугольного Peg Solitaire

Экспортирует:
- Буквенные метки позиций и парсинг ходов
- Визуализация доски
"""

from .notation import (
    pos_to_label, label_to_pos, board_labels, default_empty_label, parse_position, parse_move
)
from .visualizer import render_board, render_row, render_pos, colorize, format_game_over

__all__ = [
    'pos_to_label',
    'label_to_pos',
    'board_labels',
    'default_empty_label',
    'parse_position',
    'parse_move',
    'render_board',
    'render_row',
    'render_pos',
    'colorize',
    'format_game_over'
]
