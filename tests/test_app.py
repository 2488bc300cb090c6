import pygame
import pytest

from solong.app import keysym_for, main
from solong.game import KEY_A, KEY_D, KEY_ESCAPE, KEY_S, KEY_W


def test_escape_maps_to_x_keysym():
    assert keysym_for(pygame.K_ESCAPE) == KEY_ESCAPE


@pytest.mark.parametrize(
    "key, expected",
    [(pygame.K_a, KEY_A), (pygame.K_w, KEY_W), (pygame.K_d, KEY_D), (pygame.K_s, KEY_S)],
)
def test_letters_map_to_game_keys(key, expected):
    assert keysym_for(key) == expected


def test_wrong_argument_count(capsys):
    assert main([]) == 0
    assert "Invalid number of argument" in capsys.readouterr().err


def test_argument_without_dot(capsys):
    assert main(["mapfile"]) == 0
    assert "invalid argument" in capsys.readouterr().err


def test_wrong_suffix(capsys):
    assert main(["map.txt"]) == 0
    assert '"<name>.ber"' in capsys.readouterr().err


def test_unreadable_map(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 0
    assert "file cannot be read" in capsys.readouterr().err


def test_map_without_top_wall(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("10001\n1PCE1\n11111\n")
    assert main([str(path)]) == 1
    assert "map is not surrounded by walls" in capsys.readouterr().err


def test_missing_textures(tmp_path, monkeypatch, capsys):
    path = tmp_path / "good.ber"
    path.write_text("11111\n1PCE1\n11111\n")
    monkeypatch.chdir(tmp_path)
    assert main(["good.ber"]) == 1
    assert "Can't load texture" in capsys.readouterr().err