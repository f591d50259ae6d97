"""Command that renders one of the built-in demo scenes to a PNG file."""

from __future__ import annotations

import argparse
from typing import Callable, Dict, Optional, Sequence, Tuple

from .canvas import BLUE, GRAY, GREEN, PURPLE, RED, WHITE, YELLOW, Canvas
from .decorators import Align, AlignType
from .flex import Column, Row
from .geometry import MainAxisAlignment, MainAxisSize, Size
from .objects import ColoredBox, Painter, Text

CANVAS_SIZE = Size(800, 600)


def hello_world(canvas: Canvas) -> None:
    """Draw a purple greeting centred on the canvas."""
    text = Text("Hello, World!", PURPLE, 36, "default")
    Align(child=text, align=AlignType.CENTER).paint(canvas)


def basic_shapes(canvas: Canvas) -> None:
    """Draw circles, a square and a thick diagonal line."""
    canvas.circle(400, 300, 100, RED, True)
    canvas.circle(400, 300, 120, BLUE, False)
    canvas.rectangle(200, 200, 100, 100, GREEN, True)
    canvas.line(3, 3, 796, 596, YELLOW, 5)


def _pattern(canvas: Canvas) -> None:
    for i in range(5):
        for j in range(5):
            color = BLUE if (i + j) % 2 == 0 else RED
            canvas.circle(i * 100 + 100, j * 100 + 100, 40, color, True)


def custom_pattern(canvas: Canvas) -> None:
    """Draw a checkerboard of circles through a painter object."""
    Painter(painter=_pattern, width=800, height=600).paint(canvas)


def layout_composition(canvas: Canvas) -> None:
    """Draw a centred column holding a title and a row of three boxes."""
    row = Row(
        children=[
            ColoredBox(color=RED, width=100, height=100),
            ColoredBox(color=BLUE, width=100, height=100),
            ColoredBox(color=GREEN, width=100, height=100),
        ],
        alignment=MainAxisAlignment.SPACE_BETWEEN,
        sizing=MainAxisSize.MAX,
    )
    column = Column(children=[Text("Layout Example", WHITE, 24, "default"), row])
    Align(child=column, align=AlignType.CENTER).paint(canvas)


def text_rendering(canvas: Canvas) -> None:
    """Draw three lines of text in different sizes and colours, centred."""
    column = Column(
        children=[
            Text("Hello, Render!", RED, 48, "default"),
            Text("A Simple Text Example", BLUE, 24, "default"),
            Text("This demonstrates different text styles and colors", GRAY, 18, "default"),
        ]
    )
    Align(child=column, align=AlignType.CENTER).paint(canvas)


SCENES: Dict[str, Tuple[Callable[[Canvas], None], str]] = {
    "hello": (hello_world, "result.png"),
    "basic-shapes": (basic_shapes, "basic_shapes.png"),
    "custom-rendering": (custom_pattern, "custom_rendering.png"),
    "layout-composition": (layout_composition, "layout_composition.png"),
    "text-rendering": (text_rendering, "text_rendering.png"),
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the chosen scene onto an 800x600 canvas and save it as PNG."""
    parser = argparse.ArgumentParser(description="Render a demo scene to a PNG file.")
    parser.add_argument("scene", nargs="?", default="hello", choices=sorted(SCENES))
    parser.add_argument("-o", "--output", help="output file (default depends on scene)")
    args = parser.parse_args(argv)

    draw, default_output = SCENES[args.scene]
    canvas = Canvas(CANVAS_SIZE, False)
    draw(canvas)
    canvas.save(args.output or default_output)
    return 0