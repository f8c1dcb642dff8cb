"""
tests/test_web_api.py

Тесты Flask API.
"""

import pytest

from core.board import connection_graph
from web.app import app, MAX_ROWS


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


ALL_BUT_TOP = list(range(2, 16))


def test_new_board_default(client):
    response = client.get('/api/board')
    data = response.get_json()

    assert response.status_code == 200
    assert data['rows'] == 5
    assert data['pegs'] == [p for p in range(1, 16) if p != 5]
    assert data['peg_count'] == 14
    assert data['has_moves'] is True
    assert data['labels'][:3] == ['a', 'b', 'c']


def test_new_board_with_empty_top(client):
    data = client.get('/api/board?rows=5&empty=a').get_json()

    assert data['pegs'] == ALL_BUT_TOP
    assert data['moves'] == [[4, 2, 1], [6, 3, 1]]
    assert data['text'].splitlines()[0] == "      a-"


def test_new_board_small(client):
    data = client.get('/api/board?rows=1').get_json()

    assert data['pegs'] == []
    assert data['has_moves'] is False


def test_new_board_invalid_rows(client):
    response = client.get('/api/board?rows=0')

    assert response.status_code == 400
    assert 'error' in response.get_json()


@pytest.mark.parametrize("rows", ["abc", "5.5", ""])
def test_new_board_rows_not_integer(client, rows):
    """Нечисловой rows не подменяется размером по умолчанию."""
    response = client.get(f'/api/board?rows={rows}')

    assert response.status_code == 400
    assert 'целым числом' in response.get_json()['error']


def test_new_board_rows_above_limit(client):
    misses = connection_graph.cache_info().misses
    response = client.get(f'/api/board?rows={MAX_ROWS + 1}')

    assert response.status_code == 400
    assert 'максимум' in response.get_json()['error']
    # Граф для слишком большой доски не строился
    assert connection_graph.cache_info().misses == misses


def test_new_board_rows_at_limit(client):
    response = client.get(f'/api/board?rows={MAX_ROWS}')

    assert response.status_code == 200
    assert response.get_json()['rows'] == MAX_ROWS


def test_moves_from_position(client):
    response = client.post('/api/moves', json={'rows': 5, 'pegs': ALL_BUT_TOP, 'position': 'd'})

    assert response.status_code == 200
    assert response.get_json() == {'position': 4, 'moves': [{'to': 1, 'jumped': 2}]}


def test_make_move(client):
    response = client.post('/api/move', json={'rows': 5, 'pegs': ALL_BUT_TOP, 'from': 'd', 'to': 'a'})
    data = response.get_json()

    assert response.status_code == 200
    assert data['pegs'] == [1, 3] + list(range(5, 16))
    assert data['peg_count'] == 13


def test_make_move_with_numbers(client):
    response = client.post('/api/move', json={'rows': 5, 'pegs': ALL_BUT_TOP, 'from': 6, 'to': 1})
    assert response.get_json()['pegs'] == [1, 2, 4, 5] + list(range(7, 16))


def test_illegal_move(client):
    response = client.post('/api/move', json={'rows': 5, 'pegs': list(range(1, 16)), 'from': 4, 'to': 1})

    assert response.status_code == 400
    assert 'Недопустимый ход' in response.get_json()['error']


@pytest.mark.parametrize("payload", [
    {'rows': 5, 'pegs': ALL_BUT_TOP, 'from': 'd', 'to': 'z'},
    {'rows': 5, 'pegs': ALL_BUT_TOP, 'from': 'd1', 'to': 'a'},
    {'rows': 5, 'pegs': [99], 'from': 4, 'to': 1},
    {'rows': 0, 'pegs': [], 'from': 4, 'to': 1},
    {'rows': MAX_ROWS + 1, 'pegs': [], 'from': 4, 'to': 1},
    {'rows': 'five', 'pegs': [], 'from': 4, 'to': 1},
    {'rows': 5, 'pegs': 'all', 'from': 4, 'to': 1},
    {},
    [1, 2],
    7,
    "move",
])
def test_bad_payloads(client, payload):
    response = client.post('/api/move', json=payload)

    assert response.status_code == 400
    assert 'error' in response.get_json()


@pytest.mark.parametrize("payload", [[1, 2], 7, None])
def test_moves_rejects_non_object_body(client, payload):
    response = client.post('/api/moves', json=payload)

    assert response.status_code == 400
    assert 'error' in response.get_json()
