import io

import pytest

from solong.game import (
    KEY_A,
    KEY_D,
    KEY_ESCAPE,
    KEY_S,
    KEY_W,
    OPEN_EXIT,
    Direction,
    Game,
)
from solong.game_map import parse_map

SIMPLE = "111111\n1P0C01\n100E01\n111111\n"
BLOCKED = "11111\n1PE01\n1C001\n11111\n"
TWO_EXITS = "1111111\n1PC0E01\n10000E1\n1111111\n"


def _game(text):
    out = io.StringIO()
    return Game(parse_map(text), out), out


def _player(game):
    for y, row in enumerate(game.rows()):
        if "P" in row:
            return row.index("P"), y
    raise AssertionError("no player")


def test_rows_match_map():
    game, _ = _game(SIMPLE)
    assert game.rows() == ["111111", "1P0C01", "100E01", "111111"]


def test_move_right_counts_and_prints():
    game, out = _game(SIMPLE)
    x, y = _player(game)
    assert game.move(Direction.RIGHT) is True
    assert _player(game) == (x + 1, y)
    assert game.rows()[y][x] == "0"
    assert game.moves == 1
    assert out.getvalue() == "1\n"


def test_move_into_wall_is_blocked():
    game, out = _game(SIMPLE)
    before = game.cells
    assert game.move(Direction.UP) is False
    assert game.cells == before
    assert game.moves == 0
    assert out.getvalue() == ""
    assert game.facing is Direction.UP


def test_closed_exit_blocks():
    game, _ = _game(BLOCKED)
    before = game.cells
    assert game.move(Direction.RIGHT) is False
    assert game.cells == before


def test_keys_map_to_directions():
    game, _ = _game(SIMPLE)
    x, y = _player(game)
    assert game.key_press(KEY_D) is True
    assert _player(game) == (x + 1, y)
    assert game.facing is Direction.RIGHT
    assert game.key_press(KEY_A) is True
    assert _player(game) == (x + 1, y + 1)
    assert game.facing is Direction.DOWN
    assert game.key_press(KEY_S) is True
    assert _player(game) == (x, y + 1)
    assert game.facing is Direction.LEFT
    assert game.key_press(KEY_W) is True
    assert _player(game) == (x, y)
    assert game.facing is Direction.UP
    assert game.moves == 4
    assert out_lines(game) == ["1", "2", "3", "4"]


def out_lines(game):
    return game.out.getvalue().splitlines()


def test_unlock_waits_for_collectibles():
    game, _ = _game(SIMPLE)
    game.unlock_exits()
    assert "E" in game.cells
    assert game.exits == 0


def test_collect_then_unlock():
    game, _ = _game(SIMPLE)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert "C" not in game.cells
    game.unlock_exits()
    assert "E" not in game.cells
    assert game.cells.count(OPEN_EXIT) == game.exits == 1
    assert game.is_finished() is False


def test_full_game_is_won():
    game, _ = _game(SIMPLE)
    assert game.key_press(KEY_D) is True
    assert game.key_press(KEY_D) is True
    assert game.key_press(KEY_A) is False
    assert game.is_finished() is True
    assert OPEN_EXIT not in game.cells


def test_escape_ends_game():
    game, _ = _game(SIMPLE)
    before = game.cells
    assert game.key_press(KEY_ESCAPE) is False
    assert game.cells == before


def test_unknown_key_changes_nothing():
    game, out = _game(SIMPLE)
    before = game.cells
    assert game.key_press(0) is True
    assert game.cells == before
    assert out.getvalue() == ""


def test_two_exits_one_reached_finishes():
    game, _ = _game(TWO_EXITS)
    game.move(Direction.RIGHT)
    game.unlock_exits()
    assert game.exits == 2
    assert game.is_finished() is False
    assert game.key_press(KEY_D) is True
    assert game.key_press(KEY_D) is False
    assert game.cells.count(OPEN_EXIT) == game.exits - 1


@pytest.mark.parametrize("direction", list(Direction))
def test_player_count_invariant(direction):
    game, _ = _game(SIMPLE)
    game.move(direction)
    assert game.cells.count("P") == 1
    assert len(game.cells) == len(parse_map(SIMPLE).cells)