"""Reading and validating ``.ber`` map files."""

from __future__ import annotations

import os
from dataclasses import dataclass

from solong.image import TILE_SIZE

WALL = "1"
FLOOR = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
MAP_CHARACTERS = frozenset(WALL + FLOOR + EXIT + PLAYER + COLLECTIBLE)
MAP_SUFFIX = ".ber"


class MapError(ValueError):
    """Raised when a map file cannot be read or is not a valid map.

    ``status`` is the exit status the program ends with on this error.
    """

    def __init__(self, message: str, status: int = 0) -> None:
        super().__init__(message)
        self.status = status


class ArgumentError(ValueError):
    """Raised when the command line does not name exactly one ``.ber`` file."""

    status = 0


@dataclass(frozen=True)
class GameMap:
    """A validated map as a flat, row-major string of tiles.

    ``height`` rows of ``width`` tiles are shown. ``cells`` may run past
    them into a partial last row when the file lacks a final newline.
    """

    cells: str
    width: int
    height: int

    def pixel_width(self) -> int:
        """Width of the window that shows the map, in pixels."""
        return self.width * TILE_SIZE

    def pixel_height(self) -> int:
        """Height of the window that shows the map, in pixels."""
        return self.height * TILE_SIZE


def check_arguments(argv: list[str]) -> str:
    """Check the command-line arguments and return the map path they name."""
    if len(argv) != 1:
        raise ArgumentError("Error\nInvalid number of argument")
    name = argv[0]
    if len(name) < 4 or "." not in name:
        raise ArgumentError("Error\ninvalid argument")
    if name[name.rfind("."):] != MAP_SUFFIX:
        raise ArgumentError('Error\nfile must be of type "<name>.ber"')
    return name


def check_walls(line: str) -> None:
    """Raise MapError unless every character of ``line`` is a wall."""
    if any(char != WALL for char in line):
        raise MapError("map is not surrounded by walls", status=1)


def check_map_elements(chars: str) -> None:
    """Raise MapError on an unknown tile or on more than one player."""
    players = 0
    for char in chars:
        if char == PLAYER:
            players += 1
        if char not in MAP_CHARACTERS:
            raise MapError(
                "Error\nFile contains different character than 1, 0, P, E or C",
                status=1,
            )
    if players > 1:
        raise MapError("only one player should be on the map")


def split_lines(text: str) -> list[str]:
    """Split ``text`` at newlines; the last item is what follows the last one."""
    return text.split("\n")


def parse_map(text: str) -> GameMap:
    """Validate the text of a map file and build a :class:`GameMap`."""
    lines = split_lines(text)
    first = lines[0]
    check_walls(first)
    width = len(first)

    collected: list[str] = []
    line_count = 0
    if len(lines) > 1:
        last_index = len(lines) - 1
        for index, line in enumerate(lines[:-1]):
            line_count += 1
            if not line or line[0] != WALL or line[-1] != WALL:
                raise MapError("Error\nWall missing in the border")
            collected.append(line)
            following = lines[index + 1]
            if index + 1 != last_index and len(following) != width:
                raise MapError("Error\nmap has a problem")
        last = lines[-1]
        line_count += 1
        check_walls(last)
        collected.append(last)

    chars = "".join(collected)
    if PLAYER not in chars or EXIT not in chars or COLLECTIBLE not in chars:
        raise MapError("Error\nMissing one player, one collectible or one exit")
    if line_count - 1 == width:
        raise MapError("Error\nMap is square!")
    check_map_elements(chars)
    cells = chars[: max(line_count * width - 1, 0)]
    return GameMap(cells=cells, width=width, height=line_count - 1)


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read a map file and validate it."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError:
        raise MapError("Error\nfile cannot be read") from None
    return parse_map(text)