"""
core - Ядро треугольного Peg Solitaire

Геометрия доски, построение доски и правила ходов.
"""

from .triangular import (
    triangular_sequence, is_triangular, row_end, row_of,
    is_row_boundary, row_positions
)
from .board import Board, Cell, build_board, connection_graph
from .moves import (
    Move, is_pegged, remove_peg, place_peg, move_peg,
    legal_moves, validate_move, apply_move, has_any_move, all_moves
)

__all__ = [
    'triangular_sequence', 'is_triangular', 'row_end', 'row_of',
    'is_row_boundary', 'row_positions',
    'Board', 'Cell', 'build_board', 'connection_graph',
    'Move', 'is_pegged', 'remove_peg', 'place_peg', 'move_peg',
    'legal_moves', 'validate_move', 'apply_move', 'has_any_move', 'all_moves'
]
