"""Geometry for the on-screen debug overlay: a panel, FPS bar and position bars."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from typing import Optional, Protocol

Color = tuple[float, float, float, float]

_VERTEX_FORMAT = struct.Struct("<2f4f")

_WHITE: Color = (1.0, 1.0, 1.0, 1.0)
_PANEL: Color = (0.1, 0.1, 0.1, 0.8)
_GREEN: Color = (0.0, 1.0, 0.0, 1.0)
_YELLOW: Color = (1.0, 1.0, 0.0, 1.0)
_RED: Color = (1.0, 0.0, 0.0, 1.0)
_AXIS_X: Color = (1.0, 0.3, 0.3, 1.0)
_AXIS_Y: Color = (0.3, 1.0, 0.3, 1.0)
_AXIS_Z: Color = (0.3, 0.3, 1.0, 1.0)

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

# Letter glyphs: 5 rows of 4 columns.
_LETTERS: dict[str, tuple[str, ...]] = {
    "F": ("1111", "1000", "1110", "1000", "1000"),
    "P": ("1111", "1001", "1111", "1000", "1000"),
    "S": ("0111", "1000", "0110", "0001", "1110"),
    "O": ("0110", "1001", "1001", "1001", "0110"),
    ":": ("0000", "0100", "0000", "0100", "0000"),
}

# Digit glyphs: 5 rows of 3 columns.
_DIGITS: dict[str, tuple[str, ...]] = {
    "0": ("111", "101", "101", "101", "111"),
    "1": ("010", "110", "010", "010", "111"),
    "2": ("111", "001", "111", "100", "111"),
    "3": ("111", "001", "111", "001", "111"),
    "4": ("101", "101", "111", "001", "001"),
    "5": ("111", "100", "111", "001", "111"),
    "6": ("111", "100", "111", "101", "111"),
    "7": ("111", "001", "001", "001", "001"),
    "8": ("111", "101", "111", "101", "111"),
    "9": ("111", "101", "111", "001", "111"),
    "-": ("000", "000", "111", "000", "000"),
}


class _Point3(Protocol):
    x: float
    y: float
    z: float


def _lit_pixels(glyph: tuple[str, ...]):
    for row, line in enumerate(glyph):
        for col, pixel in enumerate(line):
            if pixel == "1":
                yield row, col


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _to_i32(value: float) -> int:
    """Truncate toward zero, saturating at the 32-bit range; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(math.trunc(value))


@dataclass(frozen=True)
class OverlayVertex:
    """A vertex in normalised device coordinates with an RGBA colour."""

    position: tuple[float, float]
    color: Color


@dataclass
class OverlayMesh:
    """A triangle list built in screen pixels and stored in device coordinates."""

    screen_width: float
    screen_height: float
    vertices: list[OverlayVertex] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.vertices)

    def add_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        """Add a filled rectangle as two triangles."""
        x1 = (x / self.screen_width) * 2.0 - 1.0
        y1 = -((y / self.screen_height) * 2.0 - 1.0)
        x2 = ((x + width) / self.screen_width) * 2.0 - 1.0
        y2 = -(((y + height) / self.screen_height) * 2.0 - 1.0)
        color = tuple(color)
        self.vertices.extend(
            OverlayVertex(corner, color)
            for corner in ((x1, y1), (x2, y1), (x1, y2), (x2, y1), (x2, y2), (x1, y2))
        )

    def add_text(self, x: float, y: float, text: str, color: Color) -> None:
        """Add a string of bitmap letters, 8 pixels apart."""
        for index, ch in enumerate(text):
            self.add_char(x + index * 8.0, y, ch, color)

    def add_char(self, x: float, y: float, ch: str, color: Color) -> None:
        """Add one bitmap letter; characters without a glyph draw nothing."""
        glyph = _LETTERS.get(ch)
        if glyph is None:
            return
        for row, col in _lit_pixels(glyph):
            self.add_rect(x + col * 1.5, y + row * 2.0, 1.2, 1.8, color)

    def add_number(self, x: float, y: float, num: int, color: Color) -> None:
        """Add an integer as digit blocks, 10 pixels apart."""
        for index, ch in enumerate(str(int(num))):
            glyph = _DIGITS.get(ch)
            if glyph is None:
                continue
            cursor_x = x + index * 10.0
            for row, col in _lit_pixels(glyph):
                self.add_rect(cursor_x + col * 2.0, y + row * 2.0, 1.5, 1.5, color)

    def to_bytes(self) -> bytes:
        """Pack the vertices as little-endian 32-bit floats: x, y, r, g, b, a."""
        return b"".join(
            _VERTEX_FORMAT.pack(*vertex.position, *vertex.color) for vertex in self.vertices
        )


def _fps_color(fps: float) -> Color:
    if fps > 50.0:
        return _GREEN
    if fps > 30.0:
        return _YELLOW
    return _RED


def _axis_bar_width(value: float) -> float:
    return _fmax(_fmin(abs(value) / 100.0, 1.0) * 50.0, 2.0)


def build_overlay(
    fps: float,
    position: Optional[_Point3],
    screen_width: float,
    screen_height: float,
) -> OverlayMesh:
    """Build the overlay panel showing FPS and, if given, the player position."""
    mesh = OverlayMesh(screen_width, screen_height)

    panel_x, panel_y = 10.0, 10.0
    mesh.add_rect(panel_x, panel_y, 300.0, 100.0, _PANEL)

    text_x = panel_x + 10.0
    text_y = panel_y + 20.0

    mesh.add_text(text_x, text_y, "FPS:", _WHITE)
    fps_bar_width = _fmin(fps / 144.0 * 200.0, 200.0)
    mesh.add_rect(text_x + 60.0, text_y, fps_bar_width, 15.0, _fps_color(fps))
    mesh.add_number(text_x + 60.0, text_y + 20.0, _to_i32(fps), _WHITE)

    if position is not None:
        pos_y = text_y + 40.0
        mesh.add_text(text_x, pos_y, "POS:", _WHITE)
        axes = (
            (position.x, 60.0, _AXIS_X),
            (position.y, 120.0, _AXIS_Y),
            (position.z, 180.0, _AXIS_Z),
        )
        for value, offset, color in axes:
            mesh.add_rect(text_x + offset, pos_y, _axis_bar_width(value), 12.0, color)
        for value, offset, color in axes:
            mesh.add_number(text_x + offset, pos_y + 15.0, _to_i32(value), color)

    return mesh