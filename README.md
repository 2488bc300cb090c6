# solong

A small top-down tile puzzle game. You walk a character around a walled map
and pick up every collectible. Once none are left, the exits open on the next
key press; step onto an open exit and the game ends. Each successful step
prints the running move count, one number per line, to standard output.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument: a map file whose name ends in `.ber`.
Anything else is rejected with a message on standard error.

Controls (acted on when the key is released):

| Key    | Action      |
|--------|-------------|
| `w`    | move up     |
| `s`    | move left   |
| `a`    | move down   |
| `d`    | move right  |
| Escape | quit        |

Walls and exits that are still closed block a step. Closing the window also
quits.

Exit status: a bad argument or a rejected map ends the program with status 0
or 1, depending on the error; a texture that cannot be loaded, and any game
that ran, end with status 1.

### Tile images

The game does not ship any tile images. It reads them as XPM files from an
`img/` directory in the directory it is started from: `link1.xpm`,
`link_up.xpm`, `link_left.xpm`, `link_right.xpm` (the player facing down, up,
left and right), `tent.xpm` (exit), `key.xpm` (collectible), `tree.xpm` (wall)
and `ground.xpm` (floor). If any one of them is missing or cannot be parsed,
the game stops before the window opens. Tiles are 40×40 pixels, and pure white
pixels (`#FFFFFF`) are left out when a tile is drawn, so the ground shows
through.

## Map format

A map is plain text, one row per line, built from these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

The checks a map must pass:

- the first line is made only of walls;
- every line that ends with a newline starts and ends with a wall, and every
  such line after the first has the first line's length;
- whatever follows the last newline is made only of walls (nothing at all
  also passes, so ending the file with a newline is fine);
- there is exactly one `P`, and at least one `C` and one `E`;
- no other characters appear;
- the number of newline-terminated lines does not equal the row length
  (the map is not square).

The window shows the newline-terminated lines; text after the last newline is
checked but not drawn. A valid example, ending with a newline:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

## Using it as a library

- `solong.game_map`: `load_map(path)` and `parse_map(text)` return a
  `GameMap` (`cells`, `width`, `height`, `pixel_width()`, `pixel_height()`)
  or raise `MapError`; `check_arguments(argv)` checks a command line and
  raises `ArgumentError`. `check_walls`, `check_map_elements` and
  `split_lines` are the individual checks.
- `solong.game`: `Game(game_map, out=None)` holds a running game with
  `move(direction)`, `key_press(keycode)`, `unlock_exits()`,
  `is_finished()`, `rows()`, and the `moves`, `facing` and `cells`
  attributes. `Direction` lists the four steps.
- `solong.image`: `Image(width, height)`, a 32-bit pixel buffer with
  `get_pixel`, `put_pixel` and `draw_square`; `rgb_to_int` and `good_color`
  pack and convert colours.
- `solong.xpm`: `read_xpm(path)` and `parse_xpm(lines)` decode XPM images
  into an `Image`, raising `XpmError`; `extract_strings`, `strip_comments`,
  `split_words`, `find_unquoted` and `text_to_rgb` are the parsing steps.
- `solong.colors`: `lookup_color(name)` resolves X11 colour names such as
  `"ghost white"` or `"gray50"`, case-insensitively.
- `solong.render`: `load_textures(directory)` returns the `Textures`, and
  `draw_map(game, canvas, textures)` paints the board onto an `Image`.
- `solong.app`: `main(argv=None)` runs the game window; `keysym_for` turns a
  pygame key into the key code `Game.key_press` expects.