"""A drawing surface with clipped views and basic shape primitives."""

from __future__ import annotations

import math
from itertools import product
from typing import Optional, Sequence, Tuple

from PIL import Image

from .geometry import Color, Size
from .text import TextPainter

RED: Color = (255, 0, 0, 255)
GREEN: Color = (0, 255, 0, 255)
BLUE: Color = (0, 0, 255, 255)
BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)
YELLOW: Color = (255, 255, 0, 255)
PURPLE: Color = (128, 0, 128, 255)
ORANGE: Color = (255, 165, 0, 255)
BROWN: Color = (165, 42, 42, 255)
GRAY: Color = (128, 128, 128, 255)
LIGHT_GRAY: Color = (211, 211, 211, 255)
DARK_GRAY: Color = (169, 169, 169, 255)
LIGHT_BLUE: Color = (173, 216, 230, 255)
LIGHT_GREEN: Color = (144, 238, 144, 255)

_TRANSPARENT: Color = (0, 0, 0, 0)

Point = Tuple[int, int]


class OutOfBoundsError(IndexError):
    """Raised when something is painted outside a canvas that forbids it."""

    def __init__(self, message: str = "object is trying to be painted out of bounds"):
        super().__init__(message)


def _round_half_away(value: float) -> int:
    magnitude = math.floor(abs(value) + 0.5)
    return magnitude if value >= 0 else -magnitude


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Canvas:
    """An RGBA image, or a rectangular view into one, to draw on."""

    def __init__(self, size: Size, allow_out_of_bounds: bool = False):
        self.image = Image.new("RGBA", (size.width, size.height), _TRANSPARENT)
        self._pixels = self.image.load()
        self.size = size
        self._offset: Point = (0, 0)
        self.allow_out_of_bounds = allow_out_of_bounds

    @classmethod
    def _view(cls, parent: "Canvas", offset: Point, size: Size, allow: bool) -> "Canvas":
        view = cls.__new__(cls)
        view.image = parent.image
        view._pixels = parent._pixels
        view.size = size
        view._offset = offset
        view.allow_out_of_bounds = allow
        return view

    @property
    def offset(self) -> Point:
        """Position of this canvas's origin in the underlying image."""
        return self._offset

    def sub_canvas(
        self, x: int, y: int, size: Size, allow_out_of_bounds: Optional[bool] = None
    ) -> "Canvas":
        """Return a view of ``size`` at (x, y) sharing this canvas's image."""
        if allow_out_of_bounds is None:
            allow_out_of_bounds = self.allow_out_of_bounds
        offset = (self._offset[0] + x, self._offset[1] + y)
        return Canvas._view(self, offset, size, allow_out_of_bounds)

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside this canvas."""
        return 0 <= x < self.size.width and 0 <= y < self.size.height

    def _check(self, x: int, y: int) -> None:
        if not self.allow_out_of_bounds and not self.in_bounds(x, y):
            raise OutOfBoundsError()

    def _absolute(self, x: int, y: int) -> Optional[Point]:
        ax, ay = self._offset[0] + x, self._offset[1] + y
        if 0 <= ax < self.image.width and 0 <= ay < self.image.height:
            return ax, ay
        return None

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set one pixel; outside the canvas it raises or is skipped."""
        if not self.in_bounds(x, y):
            if not self.allow_out_of_bounds:
                raise OutOfBoundsError()
            return
        point = self._absolute(x, y)
        if point is not None:
            self._pixels[point] = tuple(color)

    def get_pixel(self, x: int, y: int) -> Color:
        """Return one pixel; points outside the image read as transparent."""
        self._check(x, y)
        point = self._absolute(x, y)
        if point is None:
            return _TRANSPARENT
        return tuple(self._pixels[point])

    def draw_canvas(self, other: "Canvas", x: int, y: int) -> None:
        """Copy an already rendered canvas onto this one at (x, y)."""
        self._check(x, y)
        self._check(x + other.size.width - 1, y + other.size.height - 1)
        for i, j in product(range(other.size.width), range(other.size.height)):
            self.set_pixel(x + i, y + j, other.get_pixel(i, j))

    def circle(self, x: int, y: int, r: int, color: Color, fill: bool) -> None:
        """Draw a circle of radius ``r`` centred at (x, y)."""
        if fill:
            for dy in range(-r, r + 1):
                dx = int(math.sqrt(r * r - dy * dy))
                for i in range(-dx, dx + 1):
                    self.set_pixel(x + i, y + dy, color)
        else:
            for degree in range(360):
                angle = degree * math.pi / 180
                self.set_pixel(
                    x + int(r * math.cos(angle)), y + int(r * math.sin(angle)), color
                )

    def line(self, x1: int, y1: int, x2: int, y2: int, color: Color, width: int) -> None:
        """Draw a line from (x1, y1) to (x2, y2) of the given width."""
        if x1 == x2 and y1 == y2:
            self.circle(x1, y1, width, color, True)
        elif width <= 1:
            self._draw_line(x1, y1, x2, y2, color)
        else:
            self._draw_thick_line(x1, y1, x2, y2, color, width)

    def _draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        sx = -1 if x1 > x2 else 1
        sy = -1 if y1 > y2 else 1
        err = dx - dy
        while True:
            self.set_pixel(x1, y1, color)
            if x1 == x2 and y1 == y2:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x1 += sx
            if e2 < dx:
                err += dx
                y1 += sy

    def _draw_thick_line(
        self, x1: int, y1: int, x2: int, y2: int, color: Color, width: int
    ) -> None:
        dx, dy = float(x2 - x1), float(y2 - y1)
        length = math.sqrt(dx * dx + dy * dy)
        if length == 0:
            self.circle(x1, y1, width // 2, color, True)
            return
        half = width / 2
        px = _round_half_away(-dy / length * half)
        py = _round_half_away(dx / length * half)
        corners = [
            (x1 + px, y1 + py),
            (x1 - px, y1 - py),
            (x2 - px, y2 - py),
            (x2 + px, y2 + py),
        ]
        self.polygon(corners, color, True)
        self.circle(x1, y1, width // 2, color, True)
        self.circle(x2, y2, width // 2, color, True)

    def polygon(self, points: Sequence[Point], color: Color, filled: bool) -> None:
        """Draw a polygon through ``points``; fewer than three draw nothing."""
        points = [tuple(p) for p in points]
        if len(points) < 3:
            return

        if not filled:
            for (ax, ay), (bx, by) in zip(points, points[1:] + points[:1]):
                self._draw_line(ax, ay, bx, by, color)
            return

        edges = list(zip(points, [points[-1], *points[:-1]]))
        ys = [p[1] for p in points]
        for y in range(min(ys), max(ys) + 1):
            crossings = sorted(
                ax + _trunc_div((y - ay) * (bx - ax), by - ay)
                for (ax, ay), (bx, by) in edges
                if (ay > y) != (by > y)
            )
            for start, end in zip(crossings[::2], crossings[1::2]):
                for x in range(start, end + 1):
                    self.set_pixel(x, y, color)

    def rectangle(
        self, x: int, y: int, w: int, h: int, color: Color, fill: bool
    ) -> None:
        """Draw a ``w`` by ``h`` rectangle with its top-left at (x, y)."""
        if not fill:
            for i in range(x, x + w):
                self.set_pixel(i, y, color)
                self.set_pixel(i, y + h - 1, color)
            for j in range(y + 1, y + h - 1):
                self.set_pixel(x, j, color)
                self.set_pixel(x + w - 1, j, color)
            return

        if w <= 0 or h <= 0:
            return
        self._check(x, y)
        self._check(x + w - 1, y + h - 1)
        left = max(x, 0) + self._offset[0]
        top = max(y, 0) + self._offset[1]
        right = min(x + w, self.size.width) + self._offset[0]
        bottom = min(y + h, self.size.height) + self._offset[1]
        left, top = max(left, 0), max(top, 0)
        right, bottom = min(right, self.image.width), min(bottom, self.image.height)
        if left < right and top < bottom:
            self.image.paste(tuple(color), (left, top, right, bottom))

    def draw_text(
        self, text: str, x: int, y: int, painter: Optional[TextPainter] = None
    ) -> None:
        """Draw ``text`` with its box's top-left at (x, y), clipped to the canvas."""
        painter = painter or TextPainter()
        ox, oy = self._offset
        clip = (ox, oy, ox + self.size.width, oy + self.size.height)
        painter.draw(self.image, text, ox + x, oy + y, clip)

    def measure_text(self, text: str, painter: Optional[TextPainter] = None) -> Size:
        """Return the size ``text`` takes with ``painter``."""
        return (painter or TextPainter()).measure(text)

    def save(self, path) -> None:
        """Write the whole underlying image to ``path`` as PNG."""
        self.image.save(path, format="PNG")