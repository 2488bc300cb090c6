"""The game window: start-up, event loop and key handling."""

from __future__ import annotations

import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import KEY_ESCAPE, Game  # noqa: E402
from solong.game_map import ArgumentError, MapError, check_arguments, load_map  # noqa: E402
from solong.image import Image  # noqa: E402
from solong.render import draw_map, load_textures  # noqa: E402
from solong.xpm import XpmError  # noqa: E402

TITLE = "SO_LONG_EDJ"
TEXTURE_DIRECTORY = "img"
EXIT_STATUS = 1


def keysym_for(pygame_key: int) -> int:
    """Turn a pygame key code into the keysym the game understands."""
    if pygame_key == pygame.K_ESCAPE:
        return KEY_ESCAPE
    return pygame_key


def _to_surface(image: Image) -> pygame.Surface:
    data = image.data
    rgb = bytearray(image.width * image.height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return pygame.image.frombuffer(bytes(rgb), (image.width, image.height), "RGB")


def main(argv: list[str] | None = None) -> int:
    """Run the game on the map named on the command line; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path = check_arguments(argv)
    except ArgumentError as error:
        print(error, file=sys.stderr)
        return error.status
    try:
        game_map = load_map(path)
    except MapError as error:
        print(error, file=sys.stderr)
        return error.status
    try:
        textures = load_textures(TEXTURE_DIRECTORY)
    except XpmError as error:
        print(error, file=sys.stderr)
        return EXIT_STATUS

    game = Game(game_map)
    canvas = Image(game_map.pixel_width(), game_map.pixel_height())
    redraw_events = {pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED}

    pygame.init()
    try:
        screen = pygame.display.set_mode((canvas.width, canvas.height))
        pygame.display.set_caption(TITLE)

        def present() -> None:
            draw_map(game, canvas, textures)
            screen.blit(_to_surface(canvas), (0, 0))
            pygame.display.flip()

        present()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYUP:
                if not game.key_press(keysym_for(event.key)):
                    break
                present()
            elif event.type in redraw_events:
                present()
    finally:
        pygame.quit()
    return EXIT_STATUS


if __name__ == "__main__":
    sys.exit(main())