"""Reading XPM images into :class:`~solong.image.Image` objects."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence

from solong.colors import lookup_color
from solong.image import Image

NONE_PIXEL = 0xFF000000
"""Pixel value stored for the transparent colour ``None``."""

_MAX_NAME = 63
_WORD_SPLIT = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_HEX = re.compile(r"[0-9a-fA-F]*")
_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the first index of ``needle`` outside double quotes, or -1."""
    inside = False
    for index in range(len(text) - len(needle) + 1):
        if text[index] == '"':
            inside = not inside
        if not inside and text.startswith(needle, index):
            return index
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments found outside quotes, keeping the text's length.

    A comment with no end runs to the end of the text.
    """
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (begin := find_unquoted(text, opener)) != -1:
            end = text.find(closer, begin + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def text_to_rgb(name: str, suffix: str | None = None) -> int:
    """Turn an XPM colour specification into a 0xRRGGBB value.

    ``#rrggbb`` is read as hexadecimal; other names are looked up in the
    colour table, joined with ``suffix`` if one is given. ``None`` gives -1
    and an unknown name gives 0.
    """
    if name.startswith("#"):
        digits = _HEX.match(name, 1).group()
        return _to_int32(int(digits, 16)) if digits else 0
    if suffix is not None:
        name = f"{name} {suffix}"[:_MAX_NAME]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    digits = _INT.match(word).group(1)
    try:
        return int(digits)
    except ValueError:
        return 0


def parse_xpm(lines: Sequence[str]) -> Image:
    """Build an image from the quoted strings of an XPM file, in order."""
    rows = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError(f"XPM data ends before {what}") from None

    header = split_words(next_line("the header"))
    values = [_atoi(word) for word in header[:4]]
    if len(values) < 4 or not all(values):
        raise XpmError(f"invalid XPM header: {' '.join(header)!r}")
    width, height, ncolors, cpp = values
    if min(values) < 0:
        raise XpmError(f"invalid XPM header: {' '.join(header)!r}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("the end of the colour table")
        words = split_words(line[cpp:])
        try:
            position = words.index("c") + 1
            spec = words[position]
        except (ValueError, IndexError):
            raise XpmError(f"colour line without a 'c' colour: {line!r}") from None
        suffix = words[position + 1] if position + 1 < len(words) else None
        color = text_to_rgb(spec, suffix)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        line = next_line(f"pixel row {y}")
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            image.put_pixel(x, y, NONE_PIXEL if color == -1 else color)
    return image


def extract_strings(text: str) -> list[str]:
    """Return the contents of each double-quoted string in ``text``."""
    return _QUOTED.findall(text)


def read_xpm(path: str | os.PathLike[str]) -> Image:
    """Read and parse an XPM file."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(extract_strings(strip_comments(text)))