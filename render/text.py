"""Text drawing and measurement."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .geometry import Color, Size

_BLACK: Color = (0, 0, 0, 255)
_PADDING = 4

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


@lru_cache(maxsize=64)
def _load_font(path: Optional[str], size: float) -> Font:
    if path is None:
        return ImageFont.load_default(size=size)
    return ImageFont.truetype(path, size)


@dataclass
class TextPainter:
    """Font settings used to draw and measure text."""

    font_size: float = 12.0
    text_color: Color = _BLACK
    font_path: Optional[str] = None

    @property
    def font(self) -> Font:
        """The font object for the current path and size."""
        return _load_font(self.font_path, self.font_size)

    def draw(
        self,
        image: Image.Image,
        text: str,
        x: int,
        y: int,
        clip: Tuple[int, int, int, int],
    ) -> None:
        """Draw ``text`` on an RGBA image with its box's top-left at (x, y).

        Nothing is drawn outside ``clip`` (left, top, right, bottom).
        """
        left, top, right, bottom = clip
        left, top = max(left, 0), max(top, 0)
        right, bottom = min(right, image.width), min(bottom, image.height)
        if left >= right or top >= bottom or not text:
            return

        layer = Image.new("RGBA", (right - left, bottom - top), (0, 0, 0, 0))
        pen = ImageDraw.Draw(layer)
        font = self.font
        fill = tuple(self.text_color)
        if isinstance(font, ImageFont.FreeTypeFont):
            baseline = y + int(self.font_size)
            pen.text((x - left, baseline - top), text, fill=fill, font=font, anchor="ls")
        else:
            pen.text((x - left, y - top), text, fill=fill, font=font)
        image.alpha_composite(layer, dest=(left, top))

    def measure(self, text: str) -> Size:
        """Return the padded size ``text`` takes when drawn."""
        advance = self.font.getlength(text)
        return Size(
            width=math.floor(advance + 0.5) + _PADDING,
            height=int(self.font_size) + _PADDING,
        )