#!/usr/bin/env python3
"""
main.py

Точка входа: треугольный Peg Solitaire в терминале.

Использование:
    python main.py                       # размер доски спросит игра
    python main.py --rows 5 --empty e    # без вопросов на старте
    python main.py --no-color -v         # без цветов, с отладочным логом
"""

import sys
import argparse
import logging
from typing import Callable, Optional

from core import Board, build_board, remove_peg, apply_move, has_any_move
from peg_io import render_board, format_game_over, parse_position, parse_move, default_empty_label
from peg_io.notation import DEFAULT_EMPTY
from utils.error_handling import EngineError, validate_rows
from utils.logging import get_logger, setup_file_logging

DEFAULT_ROWS = 5

ReadLine = Callable[[], str]


def get_input(read_line: ReadLine, default: Optional[str] = None) -> Optional[str]:
    """Читает строку и чистит её; пустой ввод → default."""
    text = read_line().strip()
    if not text:
        return default
    return text.lower()


def prompt_rows(read_line: ReadLine) -> Board:
    """Спрашивает количество рядов, пока не получит допустимое."""
    while True:
        print(f"Сколько рядов? [{DEFAULT_ROWS}]")
        answer = get_input(read_line, str(DEFAULT_ROWS))
        try:
            return build_board(int(answer))
        except ValueError:
            print(f"\n!!! Нужно целое число, получено {answer!r}\n")
        except EngineError as e:
            print(f"\n!!! {e}\n")


def prompt_empty_peg(board: Board, read_line: ReadLine, color: bool = True,
                     empty: Optional[str] = None) -> Board:
    """Убирает первый колышек; empty: метка из командной строки."""
    while True:
        if empty is None:
            print("Ваша доска:")
            print(render_board(board, color))
            label = default_empty_label(board)
            print(f"Какой колышек убрать? [{label}]")
            empty = get_input(read_line, label)
        try:
            return remove_peg(board, parse_position(empty, board))
        except (ValueError, EngineError) as e:
            print(f"\n!!! {e}\n")
            empty = None


def play_game(board: Board, read_line: ReadLine, color: bool = True) -> Board:
    """
    Цикл ходов до тупика.

    Returns:
        Финальная доска, на которой нет допустимых ходов
    """
    logger = get_logger()

    while has_any_move(board):
        print("\nВаша доска:")
        print(render_board(board, color))
        print("Откуда и куда? Введите две буквы:")
        text = get_input(read_line, "")
        try:
            from_pos, to_pos = parse_move(text, board)
            board = apply_move(board, from_pos, to_pos)
        except (ValueError, EngineError) as e:
            logger.info(f"Ход отклонён: {e}")
            print("\n!!! Недопустимый ход :(\n")

    return board


def prompt_play_again(read_line: ReadLine) -> bool:
    print("Сыграть ещё? y/n [y]")
    return get_input(read_line, "y") == "y"


def run(rows: Optional[int] = None, empty: Optional[str] = None, color: bool = True,
        read_line: Optional[ReadLine] = None) -> int:
    """
    Партии подряд, пока игрок не откажется от следующей.

    Текущая доска живёт только в локальных переменных этой функции.
    """
    read_line = read_line or input
    logger = get_logger()

    while True:
        board = build_board(rows) if rows is not None else prompt_rows(read_line)
        board = prompt_empty_peg(board, read_line, color, empty)
        logger.info(f"Новая партия: {board.rows} рядов")

        board = play_game(board, read_line, color)
        logger.info(f"Партия окончена, осталось {board.peg_count()} колышков")
        print(format_game_over(board, color))

        if not prompt_play_again(read_line):
            print("Пока!")
            return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Треугольный Peg Solitaire',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                     # спросить размер доски
  python main.py --rows 6            # доска из 6 рядов
  python main.py -r 5 -e a           # убрать колышек a и сразу играть
        """
    )
    parser.add_argument(
        '--rows', '-r', type=int,
        help=f'Количество рядов (по умолчанию спросить, [{DEFAULT_ROWS}])'
    )
    parser.add_argument(
        '--empty', '-e',
        help=f'Метка колышка, который убрать первым (по умолчанию спросить, [{DEFAULT_EMPTY}])'
    )
    parser.add_argument(
        '--no-color', action='store_true',
        help='Без ANSI-цветов'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Отладочный лог'
    )
    parser.add_argument(
        '--log-file',
        help='Дополнительно писать лог в файл'
    )

    args = parser.parse_args(argv)

    if args.rows is not None:
        try:
            validate_rows(args.rows)
        except EngineError as e:
            parser.error(str(e))

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file)

    try:
        return run(args.rows, args.empty, not args.no_color)
    except (EOFError, KeyboardInterrupt):
        print("\nПока!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
