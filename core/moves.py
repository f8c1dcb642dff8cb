"""
core/moves.py

Правила ходов: чистые функции над иммутабельной доской.
"""

from typing import Dict, List, Optional, Tuple

from utils.error_handling import IllegalMoveError, log_engine_errors
from utils.logging import get_logger
from .board import Board

Move = Tuple[int, int, int]


def is_pegged(board: Board, pos: int) -> bool:
    """Есть ли колышек в позиции?"""
    return board.is_pegged(pos)


def remove_peg(board: Board, pos: int) -> Board:
    """Вынимает колышек из позиции."""
    return board.with_pegs({pos: False})


def place_peg(board: Board, pos: int) -> Board:
    """Ставит колышек в позицию."""
    return board.with_pegs({pos: True})


def move_peg(board: Board, p1: int, p2: int) -> Board:
    """Переставляет колышек из p1 в p2 без проверки правил."""
    return place_peg(remove_peg(board, p1), p2)


def legal_moves(board: Board, pos: int) -> Dict[int, int]:
    """
    Допустимые ходы из позиции.

    Returns:
        {destination: jumped}: destination пустая, jumped занята.
        Пустой словарь, если в pos нет колышка.
    """
    connections = board.connections(pos)
    if not board.is_pegged(pos):
        return {}
    return {
        destination: jumped
        for destination, jumped in connections.items()
        if not board.is_pegged(destination) and board.is_pegged(jumped)
    }


def validate_move(board: Board, from_pos: int, to_pos: int) -> Optional[int]:
    """Возвращает перепрыгнутую позицию, если ход from_pos → to_pos допустим, иначе None."""
    board.check_position(to_pos)
    return legal_moves(board, from_pos).get(to_pos)


@log_engine_errors
def apply_move(board: Board, from_pos: int, to_pos: int) -> Board:
    """
    Выполняет ход: from_pos и перепрыгнутая позиция освобождаются, to_pos занимается.

    Raises:
        IllegalMoveError: ход недопустим, исходная доска не меняется
        InvalidPositionError: позиция вне доски
    """
    jumped = validate_move(board, from_pos, to_pos)
    if jumped is None:
        raise IllegalMoveError(from_pos, to_pos)

    get_logger().debug(f"Ход {from_pos} → {to_pos} через {jumped}")
    return board.with_pegs({from_pos: False, jumped: False, to_pos: True})


def has_any_move(board: Board) -> bool:
    """Есть ли хоть один допустимый ход на доске?"""
    return any(legal_moves(board, pos) for pos in board.pegged_positions())


def all_moves(board: Board) -> List[Move]:
    """Все допустимые ходы: (from, jumped, to)."""
    moves: List[Move] = []
    for pos in board.pegged_positions():
        for destination, jumped in sorted(legal_moves(board, pos).items()):
            moves.append((pos, jumped, destination))
    return moves
