# render

`render` is a small raster drawing library built on Pillow. It has two
layers:

- a `Canvas` (in `render.canvas`) that holds an RGBA image and draws
  pixels, rectangles, circles, lines, polygons and text onto it;
- a tree of render objects that measure themselves and lay out content on
  a canvas, much like a widget tree.

Every drawing operation works in the canvas's own coordinates. A
sub-canvas is a window onto the same image, with its own origin and size.

## Installation

```
pip install .
```

The only runtime dependency is Pillow.

## Drawing on a canvas

```python
from render.canvas import BLUE, GREEN, RED, YELLOW, Canvas
from render.geometry import Size

canvas = Canvas(Size(800, 600), False)
canvas.circle(400, 300, 100, RED, True)        # filled circle
canvas.circle(400, 300, 120, BLUE, False)      # outline
canvas.rectangle(200, 200, 100, 100, GREEN, True)
canvas.line(3, 3, 796, 596, YELLOW, 5)
canvas.save("basic_shapes.png")
```

Colours are `(r, g, b, a)` tuples with 8-bit channels. `render.canvas`
provides named ones: `RED`, `GREEN`, `BLUE`, `BLACK`, `WHITE`, `YELLOW`,
`PURPLE`, `ORANGE`, `BROWN`, `GRAY`, `LIGHT_GRAY`, `DARK_GRAY`,
`LIGHT_BLUE` and `LIGHT_GREEN`.

The `Canvas` methods:

| Method | What it does |
| --- | --- |
| `set_pixel(x, y, color)` / `get_pixel(x, y)` | write or read one pixel |
| `in_bounds(x, y)` | whether the point lies inside the canvas |
| `rectangle(x, y, w, h, color, fill)` | filled rectangle or a one-pixel outline |
| `circle(x, y, r, color, fill)` | filled disc, or an outline of 360 sampled points |
| `line(x1, y1, x2, y2, color, width)` | a Bresenham line for width 1, otherwise a filled quadrilateral with round end caps; a zero-length line draws a filled circle of radius `width` |
| `polygon(points, color, filled)` | scan-line filled polygon or its outline; fewer than three points draw nothing |
| `draw_canvas(other, x, y)` | copy another canvas's pixels onto this one |
| `draw_text(text, x, y, painter)` / `measure_text(text, painter)` | text, see below |
| `sub_canvas(x, y, size, allow_out_of_bounds)` | a view onto the same image |
| `save(path)` | write the whole underlying image as PNG |

`canvas.image` is the underlying Pillow image and `canvas.offset` the
position of the canvas's origin in it.

### Bounds

A canvas made with `allow_out_of_bounds=False` (the default) raises
`OutOfBoundsError`, a subclass of `IndexError`, when a drawing operation
writes a pixel outside it. A canvas made with `allow_out_of_bounds=True`
clips instead: pixels that fall outside are skipped. `sub_canvas` inherits
the parent's setting when `allow_out_of_bounds` is `None`.

### Text

`draw_text(text, x, y, painter)` draws a line of text with its baseline
`font_size` pixels below `y`, clipped to the canvas.
`measure_text(text, painter)` returns a `Size` of the text's advance width
plus 4 pixels by the font size plus 4 pixels. Both take a `TextPainter`
from `render.text`, or `None` for the defaults: Pillow's default font at
size 12, black. A `TextPainter` has `font_size`, `text_color` and an
optional `font_path` to a TrueType file.

## Layout with render objects

Each render object has `size(parent_size)` and `paint(canvas)`, and
derives from `RenderObject` in `render.objects`. Layout objects ask their
children for their sizes and paint each child on a sub-canvas placed where
it belongs.

| Object | Module | What it does |
| --- | --- | --- |
| `ColoredBox` | `render.objects` | a filled rectangle of fixed size |
| `Painter` | `render.objects` | fixed size; calls your own function with the canvas |
| `Text` | `render.objects` | a line of text; `font_name` is kept but only the default font is used |
| `Align` | `render.decorators` | places its child at one of nine positions given by an `AlignType` |
| `Border` | `render.decorators` | paints its child, then a frame of `width` pixels along the edges of the canvas |
| `Padding` | `render.decorators` | adds space around its child; `Padding.uniform(child, n)` pads every side by `n` |
| `Stack` | `render.decorators` | paints its children on top of each other from the top-left corner |
| `Row`, `Column` | `render.flex` | place children side by side or one below another |

`Row` and `Column` take a `MainAxisAlignment` from `render.geometry`:
`START`, `CENTER`, `END`, `SPACE_BETWEEN`, `SPACE_AROUND` or
`SPACE_EVENLY`. They also take a `MainAxisSize`: `MIN` fits the children,
and `MAX` fills the parent along the main axis. Their size is cached for
the most recent parent size; a `Stack` computes its size once and reuses
it, and a `Text` measures itself once.

```python
from render.canvas import BLUE, GREEN, RED, WHITE, Canvas
from render.decorators import Align, AlignType
from render.flex import Column, Row
from render.geometry import MainAxisAlignment, MainAxisSize, Size
from render.objects import ColoredBox, Text

canvas = Canvas(Size(800, 600), False)

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
canvas.save("layout_composition.png")
```

## Command line

The `render` command draws one of the built-in scenes onto an 800×600
canvas and writes it as a PNG:

```
render [SCENE] [-o OUTPUT]
```

| Scene | Default output |
| --- | --- |
| `hello` (the default) | `result.png` |
| `basic-shapes` | `basic_shapes.png` |
| `custom-rendering` | `custom_rendering.png` |
| `layout-composition` | `layout_composition.png` |
| `text-rendering` | `text_rendering.png` |

`-o`/`--output` sets another output path. The same scenes are available
as functions in `render.cli` (`hello_world`, `basic_shapes`,
`custom_pattern`, `layout_composition`, `text_rendering`), each taking the
canvas to draw on.

## What it does not do

The package only draws onto new, transparent canvases and writes PNG
files; it does not load existing images. Text uses a single font per
`TextPainter` with no font lookup by name, and shapes are drawn without
anti-aliasing.