"""Loading tile textures and drawing a game onto an image."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from solong.game import OPEN_EXIT, Direction, Game
from solong.game_map import COLLECTIBLE, EXIT, PLAYER, WALL
from solong.image import TILE_SIZE, Image
from solong.xpm import XpmError, read_xpm

GROUND_FILE = "ground.xpm"
TREE_FILE = "tree.xpm"
COLLECTIBLE_FILE = "key.xpm"
EXIT_FILE = "tent.xpm"
PLAYER_FILES: Mapping[Direction, str] = {
    Direction.DOWN: "link1.xpm",
    Direction.UP: "link_up.xpm",
    Direction.RIGHT: "link_right.xpm",
    Direction.LEFT: "link_left.xpm",
}


@dataclass(frozen=True)
class Textures:
    """The tile images a map is drawn with."""

    ground: Image
    tree: Image
    collectible: Image
    exit: Image
    players: Mapping[Direction, Image]

    def player_for(self, direction: Direction) -> Image:
        """The player's image when facing ``direction``."""
        return self.players[direction]


def _load(directory: str | os.PathLike[str], name: str) -> Image:
    path = os.path.join(directory, name)
    try:
        return read_xpm(path)
    except (OSError, XpmError) as error:
        raise XpmError(f"Error\nCan't load texture: {path}") from error


def load_textures(directory: str | os.PathLike[str]) -> Textures:
    """Read every tile texture from the XPM files in ``directory``."""
    return Textures(
        ground=_load(directory, GROUND_FILE),
        tree=_load(directory, TREE_FILE),
        collectible=_load(directory, COLLECTIBLE_FILE),
        exit=_load(directory, EXIT_FILE),
        players={
            direction: _load(directory, name)
            for direction, name in PLAYER_FILES.items()
        },
    )


def draw_map(game: Game, canvas: Image, textures: Textures) -> Image:
    """Draw every shown tile of ``game`` onto ``canvas`` and return it.

    Walls are trees; every other tile is ground, with the player, a
    collectible or an exit drawn over it.
    """
    overlays = {
        PLAYER: textures.player_for(game.facing),
        COLLECTIBLE: textures.collectible,
        EXIT: textures.exit,
        OPEN_EXIT: textures.exit,
    }
    for row, line in enumerate(game.rows()):
        y = row * TILE_SIZE
        for column, cell in enumerate(line):
            x = column * TILE_SIZE
            if cell == WALL:
                canvas.draw_square(textures.tree, x, y)
                continue
            canvas.draw_square(textures.ground, x, y)
            overlay = overlays.get(cell)
            if overlay is not None:
                canvas.draw_square(overlay, x, y)
    return canvas