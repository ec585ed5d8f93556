"""Image composition helpers."""

from __future__ import annotations

import math
from collections.abc import Sequence

from PIL import Image


def collage(images: Sequence[Image.Image], image_size: tuple[int, int], gap: int) -> Image.Image:
    """Lay ``images`` out in a near-square grid of cells of ``image_size``, ``gap`` apart."""
    if not images:
        raise ValueError("a collage needs at least one image")

    width, height = image_size
    count_x = math.ceil(math.sqrt(len(images)))
    count_y = math.ceil(len(images) / count_x)

    base = Image.new(
        "RGB",
        (count_x * width + (count_x - 1) * gap, count_y * height + (count_y - 1) * gap),
    )

    for index, image in enumerate(images):
        row, col = divmod(index, count_x)
        position = (col * (width + gap), row * (height + gap))
        layer = image.convert("RGBA")
        base.paste(layer, position, layer)

    return base