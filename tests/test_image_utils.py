import pytest
from PIL import Image

from chatbotkit.image_utils import collage

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)


def _tile(color, size=(4, 4)):
    return Image.new("RGB", size, color)


def test_single_image_fills_collage():
    result = collage([_tile(RED)], (4, 4), 3)
    assert result.size == (4, 4)
    assert result.getpixel((0, 0)) == RED
    assert result.getpixel((3, 3)) == RED


def test_grid_layout_and_gaps():
    result = collage([_tile(RED), _tile(GREEN), _tile(BLUE)], (4, 4), 1)
    assert result.size == (9, 9)
    assert result.mode == "RGB"
    assert result.getpixel((0, 0)) == RED
    assert result.getpixel((5, 0)) == GREEN
    assert result.getpixel((0, 5)) == BLUE
    assert result.getpixel((4, 0)) == BLACK
    assert result.getpixel((5, 5)) == BLACK


def test_opaque_rgba_image_is_copied():
    color = (10, 20, 30)
    rgba = Image.new("RGBA", (2, 2), color + (255,))
    result = collage([rgba], (2, 2), 0)
    assert result.getpixel((1, 1)) == color


def test_empty_collage_rejected():
    with pytest.raises(ValueError):
        collage([], (4, 4), 1)