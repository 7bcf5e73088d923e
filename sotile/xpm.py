"""Reading XPM images into plain pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from sotile.colors import lookup_color

TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; each pixel is 0xRRGGBB or TRANSPARENT."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def to_bytes(self, bytes_per_pixel: int = 4, big_endian: bool = False) -> bytes:
        """Pack the pixels row by row, with no padding between rows."""
        if bytes_per_pixel < 1:
            raise ValueError("bytes_per_pixel must be at least 1")
        mask = (1 << (8 * bytes_per_pixel)) - 1
        order = "big" if big_endian else "little"
        return b"".join(
            (pixel & mask).to_bytes(bytes_per_pixel, order)
            for row in self.pixels
            for pixel in row
        )


def split_words(text: str) -> list[str]:
    """Split on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_unquoted(text: str, needle: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside double quotes.

    Comments are replaced by spaces of the same length, the newline ending
    a line comment included.
    """
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (start := _find_unquoted(text, opener)) != -1:
            end = text.find(closer, start + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def quoted_lines(text: str) -> list[str]:
    """Return the contents of each double-quoted string, in order."""
    return _QUOTED.findall(text)


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad values line: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad values line: {line!r}")
    return values  # type: ignore[return-value]


def _color_of(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a colour: {line!r}")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return lookup_color(words[index], suffix)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM from its quoted strings: values, colours, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "values line"))
    # Short keys keep the last definition, longer ones the first.
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour line")
        key = line[:cpp]
        color = _color_of(line, cpp)
        if last_wins:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            row.append(TRANSPARENT if color == -1 else color)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def read_xpm_file(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))