"""Render objects that position, frame or layer other render objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .canvas import Canvas
from .geometry import Color, Size
from .objects import RenderObject


def _half(n: int) -> int:
    """Halve ``n``, rounding toward zero."""
    return -((-n) // 2) if n < 0 else n // 2


class AlignType(str, Enum):
    """Where a child is placed inside its parent."""

    TOP_LEFT = "topLeft"
    TOP_CENTER = "topCenter"
    TOP_RIGHT = "topRight"
    LEFT_CENTER = "leftCenter"
    RIGHT_CENTER = "rightCenter"
    BOTTOM_LEFT = "bottomLeft"
    BOTTOM_CENTER = "bottomCenter"
    BOTTOM_RIGHT = "bottomRight"
    CENTER = "center"


# 0 = start, 1 = centre, 2 = end, for the horizontal and vertical axis.
_ANCHORS = {
    AlignType.TOP_LEFT: (0, 0),
    AlignType.TOP_CENTER: (1, 0),
    AlignType.TOP_RIGHT: (2, 0),
    AlignType.LEFT_CENTER: (0, 1),
    AlignType.RIGHT_CENTER: (2, 1),
    AlignType.BOTTOM_LEFT: (0, 2),
    AlignType.BOTTOM_CENTER: (1, 2),
    AlignType.BOTTOM_RIGHT: (2, 2),
    AlignType.CENTER: (1, 1),
}


def _place(free: int, anchor: int) -> int:
    if anchor == 1:
        return _half(free)
    if anchor == 2:
        return free
    return 0


@dataclass
class Align(RenderObject):
    """Places its child at one of nine positions of the canvas."""

    child: RenderObject
    align: AlignType = AlignType.TOP_LEFT

    def _position(self, canvas_size: Size, child_size: Size) -> Tuple[int, int]:
        ax, ay = _ANCHORS.get(self.align, (0, 0))
        return (
            _place(canvas_size.width - child_size.width, ax),
            _place(canvas_size.height - child_size.height, ay),
        )

    def paint(self, canvas: Canvas) -> None:
        child_size = self.child.size(canvas.size)
        x, y = self._position(canvas.size, child_size)
        self.child.paint(canvas.sub_canvas(x, y, child_size))

    def size(self, parent_size: Size) -> Size:
        return self.child.size(parent_size)


@dataclass
class Border(RenderObject):
    """Paints its child, then a frame of ``width`` pixels inside the canvas edges."""

    child: RenderObject
    width: int
    color: Color

    def paint(self, canvas: Canvas) -> None:
        w, h = canvas.size.width, canvas.size.height
        b = self.width
        self.child.paint(canvas)
        canvas.rectangle(0, 0, w, b, self.color, True)
        canvas.rectangle(0, h - b, w, b, self.color, True)
        canvas.rectangle(0, b, b, h - 2 * b, self.color, True)
        canvas.rectangle(w - b, b, b, h - 2 * b, self.color, True)

    def size(self, parent_size: Size) -> Size:
        return self.child.size(parent_size)


@dataclass
class Padding(RenderObject):
    """Adds empty space around its child."""

    child: RenderObject
    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def uniform(cls, child: RenderObject, padding: int) -> "Padding":
        """Padding with the same amount on every side."""
        return cls(child, padding, padding, padding, padding)

    def _inner(self, outer: Size) -> Size:
        return Size(
            outer.width - self.left - self.right,
            outer.height - self.top - self.bottom,
        )

    def paint(self, canvas: Canvas) -> None:
        child_canvas = canvas.sub_canvas(self.left, self.top, self._inner(canvas.size))
        self.child.paint(child_canvas)

    def size(self, parent_size: Size) -> Size:
        actual = self.child.size(self._inner(parent_size))
        return Size(
            actual.width + self.left + self.right,
            actual.height + self.top + self.bottom,
        )


@dataclass
class Stack(RenderObject):
    """Paints its children on top of each other from the top-left corner.

    The size is computed once and then reused.
    """

    children: List[RenderObject] = field(default_factory=list)
    _cached_size: Optional[Size] = field(
        default=None, init=False, repr=False, compare=False
    )

    def paint(self, canvas: Canvas) -> None:
        for child in self.children:
            child_size = child.size(canvas.size)
            child.paint(canvas.sub_canvas(0, 0, child_size))

    def size(self, parent_size: Size) -> Size:
        if self._cached_size is None:
            sizes = [child.size(parent_size) for child in self.children]
            self._cached_size = Size(
                max((s.width for s in sizes), default=0),
                max((s.height for s in sizes), default=0),
            )
        return self._cached_size