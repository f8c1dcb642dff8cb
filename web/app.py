"""
web/app.py

Flask JSON API для треугольного Peg Solitaire.

Сервер не хранит партий: клиент каждый раз присылает размер доски
и список занятых позиций, сервер отвечает новым состоянием.
"""

import os
import sys
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import Board, build_board, remove_peg, apply_move, legal_moves, has_any_move, all_moves
from peg_io import board_labels, default_empty_label, parse_position, render_board
from utils.error_handling import EngineError, InvalidConfigurationError, validate_rows
from utils.logging import get_logger

app = Flask(__name__)
logger = get_logger()

# Наибольшая доска, которую строит API
MAX_ROWS = 50
DEFAULT_ROWS = 5


def board_state(board: Board) -> Dict[str, Any]:
    """Состояние доски для клиента."""
    return {
        'rows': board.rows,
        'pegs': board.pegged_positions(),
        'labels': board_labels(board),
        'peg_count': board.peg_count(),
        'has_moves': has_any_move(board),
        'moves': [list(m) for m in all_moves(board)],
        'text': render_board(board, color=False),
    }


def error_response(message: str, status: int = 400) -> Tuple[Any, int]:
    return jsonify({'error': message}), status


def _read_position(value: Any, board: Board) -> int:
    """Позиция из JSON: номер или буквенная метка."""
    if isinstance(value, str):
        return parse_position(value, board)
    return board.check_position(value)


def _read_rows(value: Any) -> int:
    """Количество рядов из запроса: целое число в 1..MAX_ROWS."""
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise InvalidConfigurationError(f"Количество рядов должно быть целым числом, получено {value!r}")
    rows = validate_rows(value)
    if rows > MAX_ROWS:
        raise InvalidConfigurationError(f"Слишком много рядов (максимум {MAX_ROWS}), получено {rows}")
    return rows


def _read_payload() -> Dict[str, Any]:
    """Тело запроса: JSON-объект."""
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Тело запроса должно быть JSON-объектом")
    return data


def _board_from_payload(data: Dict[str, Any]) -> Board:
    rows = _read_rows(data.get('rows'))
    pegs = data.get('pegs')
    if not isinstance(pegs, list):
        raise ValueError("Поле 'pegs' должно быть списком позиций")
    return Board.from_pegs(rows, pegs)


@app.errorhandler(EngineError)
def handle_engine_error(e: EngineError):
    logger.info(f"{request.path}: {e}")
    return error_response(str(e))


@app.errorhandler(ValueError)
def handle_value_error(e: ValueError):
    logger.info(f"{request.path}: {e}")
    return error_response(str(e))


@app.route('/api/board', methods=['GET'])
def new_board():
    """Новая партия: ?rows=5&empty=e"""
    rows = _read_rows(request.args.get('rows', default=str(DEFAULT_ROWS)))
    board = build_board(rows)
    empty = request.args.get('empty', default=default_empty_label(board))
    board = remove_peg(board, parse_position(empty, board))
    return jsonify(board_state(board))


@app.route('/api/moves', methods=['POST'])
def moves_from():
    """Допустимые ходы из одной позиции."""
    data = _read_payload()
    board = _board_from_payload(data)
    pos = _read_position(data.get('position'), board)
    moves = legal_moves(board, pos)
    return jsonify({
        'position': pos,
        'moves': [{'to': dest, 'jumped': jumped} for dest, jumped in sorted(moves.items())],
    })


@app.route('/api/move', methods=['POST'])
def make_move():
    """Выполняет ход и возвращает новое состояние."""
    data = _read_payload()
    board = _board_from_payload(data)
    from_pos = _read_position(data.get('from'), board)
    to_pos = _read_position(data.get('to'), board)
    board = apply_move(board, from_pos, to_pos)
    return jsonify(board_state(board))


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=False)
