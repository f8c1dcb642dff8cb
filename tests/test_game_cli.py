"""
tests/test_game_cli.py

Тесты терминальной игры на заранее записанном вводе.
"""

from typing import Callable, List

import pytest

import main
from core.board import Board, build_board


def scripted(lines: List[str]) -> Callable[[], str]:
    """read_line, возвращающий строки по очереди."""
    it = iter(lines)
    return lambda: next(it)


# Доска из 3 рядов без колышка a: d→a, f→d, a→f оставляют 2 колышка
FULL_GAME = ["a", "da", "fd", "af"]


def test_get_input_defaults_and_lowercases():
    assert main.get_input(scripted(["  "]), "y") == "y"
    assert main.get_input(scripted([" DA "])) == "da"


def test_prompt_rows_retries_until_valid(capsys):
    board = main.prompt_rows(scripted(["0", "abc", "4"]))

    assert board == build_board(4)
    out = capsys.readouterr().out
    assert "Нужно целое число" in out
    assert "хотя бы один ряд" in out


def test_prompt_rows_default():
    assert main.prompt_rows(scripted([""])) == build_board(main.DEFAULT_ROWS)


def test_prompt_empty_peg_default_and_retry(capsys):
    board = build_board(5)

    assert main.prompt_empty_peg(board, scripted([""]), color=False).pegged_positions() == \
        [p for p in range(1, 16) if p != 5]
    assert not main.prompt_empty_peg(board, scripted(["z", "a"]), color=False).is_pegged(1)
    assert "вне доски" in capsys.readouterr().out


def test_prompt_empty_peg_small_board_defaults_to_a():
    board = main.prompt_empty_peg(build_board(2), scripted([""]), color=False)
    assert board.pegged_positions() == [2, 3]


def test_play_game_reports_invalid_move(capsys):
    board = Board.from_pegs(3, [2, 3, 4, 5, 6])
    final = main.play_game(board, scripted(["xx", "dd", "da", "fd", "af"]), color=False)

    assert final.pegged_positions() == [4, 6]
    assert capsys.readouterr().out.count("Недопустимый ход") == 2


def test_run_single_game(capsys):
    code = main.run(read_line=scripted(["3"] + FULL_GAME + ["n"]), color=False)

    assert code == 0
    out = capsys.readouterr().out
    assert "Осталось колышков: 2" in out
    assert out.rstrip().endswith("Пока!")


def test_run_play_again(capsys):
    script = FULL_GAME + ["y"] + FULL_GAME + ["n"]
    assert main.run(rows=3, read_line=scripted(script), color=False) == 0
    assert capsys.readouterr().out.count("Игра окончена!") == 2


def test_run_with_empty_from_command_line(capsys):
    script = ["da", "fd", "af", "n"]
    assert main.run(rows=3, empty="a", read_line=scripted(script), color=False) == 0
    assert "Осталось колышков: 2" in capsys.readouterr().out


def test_main_uses_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted(FULL_GAME + ["n"]))

    assert main.main(["--rows", "3", "--no-color"]) == 0
    assert "Осталось колышков: 2" in capsys.readouterr().out


def test_main_exits_cleanly_on_eof(monkeypatch, capsys):
    def eof():
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)

    assert main.main(["--no-color"]) == 0
    assert "Пока!" in capsys.readouterr().out


def test_main_rejects_invalid_rows():
    with pytest.raises(SystemExit) as exc_info:
        main.main(["--rows", "0"])
    assert exc_info.value.code == 2
