"""The render object protocol and the leaf objects that paint content."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from .canvas import BLACK, Canvas
from .geometry import Color, Size
from .text import TextPainter


class RenderObject(ABC):
    """Something that reports a size and paints itself onto a canvas."""

    @abstractmethod
    def paint(self, canvas: Canvas) -> None:
        """Paint onto ``canvas``, whose origin is this object's top-left corner."""

    @abstractmethod
    def size(self, parent_size: Size) -> Size:
        """Return the size this object wants inside ``parent_size``."""


@dataclass
class ColoredBox(RenderObject):
    """A filled rectangle of a fixed size."""

    color: Color
    width: int
    height: int

    def paint(self, canvas: Canvas) -> None:
        canvas.rectangle(0, 0, self.width, self.height, self.color, True)

    def size(self, parent_size: Size) -> Size:
        return Size(self.width, self.height)


@dataclass
class Painter(RenderObject):
    """A fixed-size object whose painting is done by a callable."""

    painter: Callable[[Canvas], None]
    width: int
    height: int

    def paint(self, canvas: Canvas) -> None:
        self.painter(canvas)

    def size(self, parent_size: Size) -> Size:
        return Size(self.width, self.height)


class Text(RenderObject):
    """A single line of text in the default font.

    ``font_name`` is kept for reference; only the default font is used.
    """

    def __init__(
        self,
        text: str,
        color: Color = BLACK,
        font_size: float = 12,
        font_name: str = "default",
    ):
        self.text = text
        self.color = color
        self.font_size = font_size
        self.font_name = font_name
        self._size = Size()

    def _painter(self) -> TextPainter:
        return TextPainter(font_size=self.font_size, text_color=self.color)

    def paint(self, canvas: Canvas) -> None:
        canvas.draw_text(self.text, 0, 0, self._painter())

    def size(self, parent_size: Size) -> Size:
        if self._size.width == 0 or self._size.height == 0:
            self._size = self._painter().measure(self.text)
        return self._size

    def __repr__(self) -> str:
        return (
            f"Text({self.text!r}, color={self.color!r}, "
            f"font_size={self.font_size!r}, font_name={self.font_name!r})"
        )