"""Row and column layouts that place children along a main axis."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .canvas import Canvas
from .geometry import MainAxisAlignment, MainAxisSize, Size
from .objects import RenderObject


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero; dividing by zero raises."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _main_axis_offsets(
    alignment: MainAxisAlignment, extents: Sequence[int], available: int
) -> List[int]:
    """Return the start of each child along the main axis."""
    count = len(extents)
    if alignment is MainAxisAlignment.END:
        start, gap = available, 0
    elif alignment is MainAxisAlignment.CENTER:
        start, gap = _trunc_div(available, 2), 0
    elif alignment is MainAxisAlignment.SPACE_BETWEEN:
        if count <= 1:
            return [_trunc_div(available, 2)] * count
        start, gap = 0, _trunc_div(available, count - 1)
    elif alignment is MainAxisAlignment.SPACE_AROUND:
        gap = _trunc_div(available, count)
        start = _trunc_div(gap, 2)
    elif alignment is MainAxisAlignment.SPACE_EVENLY:
        gap = _trunc_div(available, count + 1)
        start = gap
    else:
        start, gap = 0, 0

    offsets = []
    position = start
    for extent in extents:
        offsets.append(position)
        position += extent + gap
    return offsets


@dataclass
class _Flex(RenderObject):
    children: List[RenderObject] = field(default_factory=list)
    alignment: MainAxisAlignment = MainAxisAlignment.START
    sizing: MainAxisSize = MainAxisSize.MIN
    _cached_size: Optional[Size] = field(
        default=None, init=False, repr=False, compare=False
    )
    _last_parent_size: Optional[Size] = field(
        default=None, init=False, repr=False, compare=False
    )

    @staticmethod
    def _main(size: Size) -> int:
        raise NotImplementedError

    @staticmethod
    def _cross(size: Size) -> int:
        raise NotImplementedError

    @staticmethod
    def _compose(main: int, cross: int) -> Size:
        raise NotImplementedError

    @staticmethod
    def _child_canvas(canvas: Canvas, offset: int, size: Size) -> Canvas:
        raise NotImplementedError

    def paint(self, canvas: Canvas) -> None:
        sizes = [child.size(canvas.size) for child in self.children]
        extents = [self._main(s) for s in sizes]
        available = self._main(canvas.size) - sum(extents)
        offsets = _main_axis_offsets(self.alignment, extents, available)
        for child, offset, child_size in zip(self.children, offsets, sizes):
            child.paint(self._child_canvas(canvas, offset, child_size))

    def size(self, parent_size: Size) -> Size:
        if self._cached_size is not None and self._last_parent_size == parent_size:
            return self._cached_size

        sizes = [child.size(parent_size) for child in self.children]
        main = sum(self._main(s) for s in sizes)
        cross = max((self._cross(s) for s in sizes), default=0)
        if self.sizing == MainAxisSize.MAX:
            main = self._main(parent_size)

        result = self._compose(main, cross)
        self._cached_size = result
        self._last_parent_size = parent_size
        return result


@dataclass
class Row(_Flex):
    """Lays its children out left to right.

    The size is cached for the most recent parent size.
    """

    @staticmethod
    def _main(size: Size) -> int:
        return size.width

    @staticmethod
    def _cross(size: Size) -> int:
        return size.height

    @staticmethod
    def _compose(main: int, cross: int) -> Size:
        return Size(main, cross)

    @staticmethod
    def _child_canvas(canvas: Canvas, offset: int, size: Size) -> Canvas:
        return canvas.sub_canvas(offset, 0, size)

    def paint(self, canvas: Canvas) -> None:
        """Paint the children side by side according to the alignment."""
        super().paint(canvas)

    def size(self, parent_size: Size) -> Size:
        """Total child width (or the parent width) by the tallest child."""
        return super().size(parent_size)


@dataclass
class Column(_Flex):
    """Lays its children out top to bottom.

    The size is cached for the most recent parent size.
    """

    @staticmethod
    def _main(size: Size) -> int:
        return size.height

    @staticmethod
    def _cross(size: Size) -> int:
        return size.width

    @staticmethod
    def _compose(main: int, cross: int) -> Size:
        return Size(cross, main)

    @staticmethod
    def _child_canvas(canvas: Canvas, offset: int, size: Size) -> Canvas:
        return canvas.sub_canvas(0, offset, size)

    def paint(self, canvas: Canvas) -> None:
        """Paint the children one below another according to the alignment."""
        super().paint(canvas)

    def size(self, parent_size: Size) -> Size:
        """The widest child by total child height (or the parent height)."""
        return super().size(parent_size)