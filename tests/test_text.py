import pytest
from PIL import Image

from render.geometry import Size
from render.text import TextPainter

RED = (255, 0, 0, 255)


def test_default_painter():
    painter = TextPainter()
    assert painter.font_size == 12
    assert painter.text_color == (0, 0, 0, 255)
    assert painter.font.getlength("Hello") > 0


def test_draw_text_paints_pixels():
    image = Image.new("RGBA", (200, 100), (0, 0, 0, 0))
    painter = TextPainter(font_size=24, text_color=RED)
    painter.draw(image, "Hello", 10, 30, (0, 0, 200, 100))
    assert any(pixel == RED for pixel in image.getdata())


def test_measure_text():
    painter = TextPainter(font_size=24)
    size = painter.measure("Hello")
    assert size.width > 0 and size.height > 0

    longer = painter.measure("Hello, World!")
    assert longer.width > size.width

    painter.font_size = 36
    larger = painter.measure("Hello")
    assert larger.width > size.width
    assert larger.height > size.height


def test_measure_height_is_font_size_plus_padding():
    assert TextPainter(font_size=24).measure("Hello").height == 28


def test_measure_empty_text_is_padding_only():
    assert TextPainter().measure("") == Size(4, 16)


def test_draw_text_is_clipped():
    image = Image.new("RGBA", (200, 100), (0, 0, 0, 0))
    TextPainter().draw(
        image,
        "This is a very long text that should be clipped",
        90,
        50,
        (0, 0, 100, 100),
    )
    assert image.crop((100, 0, 200, 100)).getbbox() is None
    assert image.crop((0, 0, 100, 100)).getbbox() is not None


def test_draw_with_clip_outside_image_changes_nothing():
    image = Image.new("RGBA", (50, 50), (0, 0, 0, 0))
    TextPainter(text_color=RED).draw(image, "Hello", 0, 0, (60, 60, 120, 120))
    assert image.getbbox() is None


def test_missing_font_file_raises():
    painter = TextPainter(font_path="no-such-font-file.ttf")
    with pytest.raises(OSError):
        painter.measure("Hello")