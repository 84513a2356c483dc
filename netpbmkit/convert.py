from __future__ import annotations

from typing import Optional, Sequence

from .image import BILEVEL, COLOR, DEFAULT_MAX_VALUE, GRAYSCALE, Image

LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def luma(pixel: Sequence[int], max_value: int = DEFAULT_MAX_VALUE) -> int:
    """Return the rounded luma of an RGB pixel on a 0-255 scale."""
    r, g, b = pixel
    value = LUMA_WEIGHTS[0] * r + LUMA_WEIGHTS[1] * g + LUMA_WEIGHTS[2] * b
    if max_value != DEFAULT_MAX_VALUE:
        value = value * DEFAULT_MAX_VALUE / max_value
    return min(DEFAULT_MAX_VALUE, int(value + 0.5))


def to_graymap(image: Image) -> Image:
    if image.family is not COLOR:
        raise ValueError(f"Grayscale conversion needs a color image, got {image.family.name}")
    rows = [[luma(pixel, image.max_value) for pixel in row] for row in image.rows()]
    return Image(GRAYSCALE, image.width, image.height, DEFAULT_MAX_VALUE, image.binary, rows)


def default_threshold(image: Image) -> int:
    if image.family is COLOR:
        return DEFAULT_MAX_VALUE // 2 + 1
    return image.max_value // 2 + 1


def to_bitmap(image: Image, threshold: Optional[int] = None) -> Image:
    """Threshold a gray or color image into a bitmap; bright pixels become 1."""
    if image.family is BILEVEL:
        raise ValueError("Image is already bilevel")
    if threshold is None:
        threshold = default_threshold(image)
    if image.family is COLOR:
        max_value = image.max_value
        rows = [[luma(pixel, max_value) >= threshold for pixel in row] for row in image.rows()]
    else:
        rows = [[value >= threshold for value in row] for row in image.rows()]
    return Image(BILEVEL, image.width, image.height, binary=image.binary, data=rows)
