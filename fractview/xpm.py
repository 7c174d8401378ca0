"""Reading XPM pixmaps into images."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from fractview.colornames import lookup_color
from fractview.image import Image

_TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _blank_outside_quotes(text: str, opener: str, closer: str) -> str:
    chars = list(text)
    length = len(text)
    in_quote = False
    i = 0
    while i < length - 1:
        if chars[i] == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            stop = length if end == -1 else end + len(closer)
            chars[i:stop] = " " * (stop - i)
            i = stop
            continue
        i += 1
    return "".join(chars)


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    Block comments are removed first, then line comments together with the
    newline ending them. The result has the same length as ``text``.
    """
    text = _blank_outside_quotes(text, "/*", "*/")
    return _blank_outside_quotes(text, "//", "\n")


def quoted_lines(text: str) -> Iterator[str]:
    """Yield, in order, every string enclosed in a pair of double quotes."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    if not match or not match.group(2):
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def parse_color(name: str, extra: str | None = None) -> int:
    """Return the RGB value of an XPM colour specification.

    ``#RRGGBB`` is read as hexadecimal. Otherwise, when ``extra`` is given it
    is joined to ``name`` with a space, and the result is looked up among the
    colour names ignoring case. "None" gives -1; an unknown name gives 0.
    """
    if name.startswith("#"):
        return _leading_hex(name[1:])
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: header, colour lines, then pixel rows.

    Pixels drawn with the colour "None" are stored as 0xFF000000.
    """
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"XPM data ends before the {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError(f"XPM header needs four values, got {len(header)}")
    width, height, ncolors, cpp = (_leading_int(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(
            f"invalid XPM header: width={width} height={height} "
            f"colors={ncolors} chars_per_pixel={cpp}"
        )

    # With one or two characters per pixel a later definition of the same key
    # replaces an earlier one; with more, the first definition is kept.
    first_wins = cpp > 2
    table: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour table")
        if len(line) < cpp:
            raise XpmError(f"colour line too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        extra = words[index + 2] if index + 2 < len(words) else None
        value = parse_color(words[index + 1], extra)
        key = line[:cpp]
        if first_wins:
            table.setdefault(key, value)
        else:
            table[key] = value

    image = Image(width, height)
    for y in range(height):
        line = next_line("pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width * cpp} characters")
        for x in range(width):
            color = table.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def read_xpm_file(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file into an image. Errors opening the file propagate."""
    text = Path(path).read_text(encoding="latin-1")
    return xpm_to_image(quoted_lines(strip_comments(text)))