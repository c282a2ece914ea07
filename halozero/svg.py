"""Extract polygon vertices from the path elements of simple SVG documents.

Only straight-line path commands are understood (M, L, H, V, Z and their
relative forms). The y axis is flipped against the view box when reading a
file, so that the origin ends up at the bottom-left corner.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterator
from pathlib import Path

from halozero.structs import Point2f, Rectf

_PATH_COMMANDS = "mMZzLlHhVvCcSsQqTtAa"
_WHITESPACE = " \t\n\v\f\r"
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class SvgError(ValueError):
    """Raised when an SVG document or its path data cannot be used."""


class _Reader:
    """Character cursor over a string with stream-like extraction rules."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.eof = False

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._pos += 1

    def read_char(self) -> str | None:
        """Next non-blank character, or None once the text is exhausted."""
        if self.eof:
            return None
        self._skip_whitespace()
        if self._pos >= len(self._text):
            self.eof = True
            return None
        char = self._text[self._pos]
        self._pos += 1
        return char

    def putback(self) -> None:
        self._pos -= 1

    def scan_number(self) -> float | None:
        """Read a number; 0.0 at the end of the text, None if none is there."""
        if self.eof:
            return 0.0
        self._skip_whitespace()
        if self._pos >= len(self._text):
            self.eof = True
            return 0.0
        match = _NUMBER.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        if self._pos >= len(self._text):
            self.eof = True
        return float(match.group())

    def read_number(self) -> float:
        number = self.scan_number()
        if number is None:
            raise SvgError(f"expected a number at position {self._pos} of path data")
        return number

    def skip_separator(self) -> None:
        """Skip blanks and at most one comma."""
        while not self.eof:
            if self._pos >= len(self._text):
                self.eof = True
                return
            char = self._text[self._pos]
            self._pos += 1
            if char == ",":
                return
            if char not in _WHITESPACE:
                self._pos -= 1
                return


def _read_point(reader: _Reader, cursor: Point2f, cmd: str) -> Point2f:
    x = reader.read_number()
    reader.skip_separator()
    y = reader.read_number()
    reader.skip_separator()
    if cmd.islower():
        return Point2f(cursor.x + x, cursor.y + y)
    return Point2f(x, y)


def vertices_from_path_data(path_data: str) -> list[Point2f]:
    """Return the vertices described by the ``d`` attribute of a path.

    Raises ``SvgError`` for curves, unsupported commands and malformed data.
    """
    reader = _Reader(path_data)
    vertices: list[Point2f] = []
    cmd = ""
    cursor = Point2f()
    is_open = True

    char = reader.read_char()
    while not reader.eof:
        is_command = char in _PATH_COMMANDS
        if is_command:
            cmd = char
        else:
            reader.putback()

        match cmd:
            case "Z" | "z":
                if not is_command:
                    raise SvgError(f"unexpected {char!r} after a closepath command")
                is_open = True
            case "M" | "m" if is_open:
                cursor = _read_point(reader, cursor, cmd)
                vertices.append(cursor)
                is_open = False
            case "M" | "m" | "L" | "l":
                cursor = _read_point(reader, cursor, cmd)
                vertices.append(cursor)
            case "H" | "h":
                value = reader.read_number()
                x = cursor.x + value if cmd == "h" else value
                cursor = Point2f(x, cursor.y)
                vertices.append(cursor)
            case "V" | "v":
                value = reader.read_number()
                y = cursor.y + value if cmd == "v" else value
                cursor = Point2f(cursor.x, y)
                vertices.append(cursor)
            case "C" | "c":
                raise SvgError(
                    "beziers are not supported; convert all nodes to straight lines"
                )
            case _:
                raise SvgError(f"{cmd or char!r} is not a supported SVG path command")

        char = reader.read_char()

    return vertices


def _remove_spaces(text: str) -> str:
    for pattern, replacement in ((" =", "="), ("= ", "="), (" >", ">"), ("< ", "<")):
        while pattern in text:
            text = text.replace(pattern, replacement)
    return text


def _element_contents(text: str, name: str) -> Iterator[str]:
    """Yield the text inside each element with the given name."""
    position = 0
    while True:
        open_tag = f"<{name}>"
        start = text.find(open_tag, position)
        if start != -1:
            start += len(open_tag)
            end = text.find(f"<{name}/>")
        else:
            open_tag = f"<{name}"
            start = text.find(open_tag, position)
            if start == -1:
                return
            start += len(open_tag)
            end = text.find("/>")
        if end == -1:
            return
        yield text[start:end] if end >= start else text[start:]
        position = start


def _attribute_value(text: str, name: str) -> str | None:
    at = text.find(name + "=")
    if at == -1:
        return None
    opening = text.find('"', at)
    if opening == -1:
        return None
    closing = text.find('"', opening + 1)
    if closing == -1:
        return None
    return text[opening + 1 : closing]


def _parse_view_box(value: str) -> Rectf:
    reader = _Reader(value)
    fields: list[float] = []
    for _ in range(4):
        number = reader.scan_number()
        if number is None:
            break
        fields.append(number)
    fields.extend([0.0] * (4 - len(fields)))
    return Rectf(*fields)


def vertices_from_svg_string(text: str) -> list[list[Point2f]]:
    """Return the vertices of every path element in an SVG document.

    Coordinates are returned as written, without flipping the y axis.
    """
    text = _remove_spaces(text)
    polygons: list[list[Point2f]] = []
    for content in _element_contents(text, "path"):
        path_data = _attribute_value(content, " d")
        if path_data is None:
            raise SvgError("path element doesn't contain a d-attribute")
        vertices = vertices_from_path_data(path_data)
        if not vertices:
            raise SvgError("no vertices found in the path element")
        polygons.append(vertices)
    if not polygons:
        raise SvgError("no path element(s) found")
    return polygons


def vertices_from_svg_file(path: str | os.PathLike[str]) -> list[list[Point2f]]:
    """Load the path vertices of an SVG file with the y axis pointing up.

    Raises ``OSError`` if the file cannot be read and ``SvgError`` if its
    content is malformed, unsupported or has no view box.
    """
    text = Path(path).read_text(encoding="utf-8").replace("\n", "")
    text = _remove_spaces(text)
    polygons = vertices_from_svg_string(text)

    view_box_value = _attribute_value(text, "viewBox")
    if view_box_value is None:
        raise SvgError(f"no viewbox information found in {path}")
    height = _parse_view_box(view_box_value).height

    return [[Point2f(p.x, height - p.y) for p in polygon] for polygon in polygons]