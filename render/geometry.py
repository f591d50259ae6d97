"""Basic value types shared by the canvas and the layout objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

Color = Tuple[int, int, int, int]
"""An RGBA colour with 8-bit channels."""


@dataclass(frozen=True)
class Size:
    """A width and height in pixels."""

    width: int = 0
    height: int = 0


class MainAxisAlignment(IntEnum):
    """How children are placed along the main axis of a row or column."""

    START = 0
    CENTER = 1
    END = 2
    SPACE_BETWEEN = 3
    SPACE_AROUND = 4
    SPACE_EVENLY = 5


class MainAxisSize(IntEnum):
    """How much of the main axis a row or column takes."""

    MIN = 0  # just enough for the children
    MAX = 1  # the whole parent extent