import pytest

from render.canvas import BLUE, GREEN, RED, Canvas
from render.flex import Column, Row
from render.geometry import MainAxisAlignment, MainAxisSize, Size
from render.objects import ColoredBox

TRANSPARENT = (0, 0, 0, 0)


def _region_is(canvas, xs, ys, color):
    return all(canvas.get_pixel(x, y) == color for x in xs for y in ys)


def test_row_start_max():
    canvas = Canvas(Size(300, 100), False)
    box1 = ColoredBox(color=RED, width=50, height=30)
    box2 = ColoredBox(color=BLUE, width=50, height=30)
    row = Row(
        children=[box1, box2],
        alignment=MainAxisAlignment.START,
        sizing=MainAxisSize.MAX,
    )

    assert row.size(canvas.size) == Size(300, 30)

    row.paint(canvas)
    assert _region_is(canvas, range(0, 50), range(0, 30), RED)
    assert _region_is(canvas, range(50, 100), range(0, 30), BLUE)


def test_column_start_max():
    canvas = Canvas(Size(100, 300), False)
    box1 = ColoredBox(color=RED, width=50, height=30)
    box2 = ColoredBox(color=BLUE, width=50, height=30)
    column = Column(
        children=[box1, box2],
        alignment=MainAxisAlignment.START,
        sizing=MainAxisSize.MAX,
    )

    assert column.size(canvas.size) == Size(50, 300)

    column.paint(canvas)
    assert _region_is(canvas, range(0, 50), range(0, 30), RED)
    assert _region_is(canvas, range(0, 50), range(30, 60), BLUE)


def test_min_sizing_uses_children_extent():
    boxes = [ColoredBox(RED, 50, 30), ColoredBox(BLUE, 40, 20)]
    assert Row(children=list(boxes)).size(Size(300, 100)) == Size(90, 30)
    assert Column(children=list(boxes)).size(Size(300, 100)) == Size(50, 50)


def test_empty_layouts_have_zero_size():
    assert Row().size(Size(300, 100)) == Size(0, 0)
    assert Column().size(Size(300, 100)) == Size(0, 0)


@pytest.mark.parametrize(
    "alignment, first, second",
    [
        (MainAxisAlignment.START, 0, 50),
        (MainAxisAlignment.END, 200, 250),
        (MainAxisAlignment.CENTER, 100, 150),
        (MainAxisAlignment.SPACE_BETWEEN, 0, 250),
        (MainAxisAlignment.SPACE_AROUND, 50, 200),
        (MainAxisAlignment.SPACE_EVENLY, 66, 182),
    ],
)
def test_row_alignment_offsets(alignment, first, second):
    canvas = Canvas(Size(300, 100), False)
    row = Row(
        children=[ColoredBox(RED, 50, 30), ColoredBox(BLUE, 50, 30)],
        alignment=alignment,
    )
    row.paint(canvas)
    assert _region_is(canvas, range(first, first + 50), range(0, 30), RED)
    assert _region_is(canvas, range(second, second + 50), range(0, 30), BLUE)
    if first > 0:
        assert canvas.get_pixel(first - 1, 0) == TRANSPARENT


@pytest.mark.parametrize(
    "alignment, first, second",
    [
        (MainAxisAlignment.END, 200, 250),
        (MainAxisAlignment.CENTER, 100, 150),
        (MainAxisAlignment.SPACE_BETWEEN, 0, 250),
        (MainAxisAlignment.SPACE_AROUND, 50, 200),
        (MainAxisAlignment.SPACE_EVENLY, 66, 182),
    ],
)
def test_column_alignment_offsets(alignment, first, second):
    canvas = Canvas(Size(100, 300), False)
    column = Column(
        children=[ColoredBox(RED, 30, 50), ColoredBox(BLUE, 30, 50)],
        alignment=alignment,
    )
    column.paint(canvas)
    assert canvas.get_pixel(0, first) == RED
    assert canvas.get_pixel(29, first + 49) == RED
    assert canvas.get_pixel(0, second) == BLUE
    assert canvas.get_pixel(29, second + 49) == BLUE
    assert canvas.get_pixel(30, first) == TRANSPARENT
    assert _region_is(canvas, range(0, 30), range(first, first + 50), RED)
    assert _region_is(canvas, range(0, 30), range(second, second + 50), BLUE)


def test_space_between_single_child_is_centred():
    canvas = Canvas(Size(300, 100), False)
    row = Row(
        children=[ColoredBox(GREEN, 50, 30)],
        alignment=MainAxisAlignment.SPACE_BETWEEN,
    )
    row.paint(canvas)
    assert _region_is(canvas, range(125, 175), range(0, 30), GREEN)
    assert canvas.get_pixel(124, 0) == TRANSPARENT
    assert canvas.get_pixel(175, 0) == TRANSPARENT


def test_space_around_without_children_raises():
    canvas = Canvas(Size(300, 100), False)
    with pytest.raises(ZeroDivisionError):
        Row(alignment=MainAxisAlignment.SPACE_AROUND).paint(canvas)


def test_size_cache_follows_parent_size():
    column = Column(children=[ColoredBox(RED, 50, 30)], sizing=MainAxisSize.MAX)
    assert column.size(Size(100, 300)) == Size(50, 300)
    assert column.size(Size(100, 200)) == Size(50, 200)
    assert column.size(Size(100, 300)) == Size(50, 300)


def test_size_cache_reused_for_same_parent():
    children = [ColoredBox(RED, 50, 30)]
    row = Row(children=children)
    assert row.size(Size(300, 100)) == Size(50, 30)
    children.append(ColoredBox(BLUE, 50, 60))
    assert row.size(Size(300, 100)) == Size(50, 30)
    assert row.size(Size(301, 100)) == Size(100, 60)