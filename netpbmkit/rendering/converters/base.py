from __future__ import annotations

import os

from PIL import Image as PILImage
from PIL import ImageOps, UnidentifiedImageError

from ...codec import pack_row, row_byte_count, unpack_row
from ...errors import FormatError, ImageIOError
from ...image import BILEVEL, COLOR, DEFAULT_MAX_VALUE, GRAYSCALE, RGB, Image


class ImageConverter:
    def load(self, path: str) -> Image:
        raise NotImplementedError

    def save(self, image: Image, path: str) -> None:
        raise NotImplementedError


class RasterConverter(ImageConverter):
    @staticmethod
    def _load_image(path: str) -> PILImage.Image:
        try:
            with PILImage.open(path) as img:
                img = ImageOps.exif_transpose(img)
                return img.copy()
        except UnidentifiedImageError as exc:
            raise FormatError(f"Not a recognized image: {path}") from exc
        except OSError as exc:
            raise ImageIOError(f"Cannot read image {path}: {exc}") from exc

    @staticmethod
    def _normalize_image(img: PILImage.Image) -> PILImage.Image:
        if img.mode not in ("1", "L", "RGB"):
            return img.convert("RGB")
        return img


def from_pillow(img: PILImage.Image) -> Image:
    """Convert a Pillow image into a bilevel, gray or color Image."""
    img = RasterConverter._normalize_image(img)
    width, height = img.size
    if width == 0 or height == 0:
        family = {"1": BILEVEL, "L": GRAYSCALE}.get(img.mode, COLOR)
        return Image(family, width, height)
    raw = img.tobytes()
    if img.mode == "1":
        # Pillow stores white as 1, Netpbm stores black as 1.
        stride = row_byte_count(width)
        rows = [
            [not bit for bit in unpack_row(raw[y * stride : (y + 1) * stride], width)]
            for y in range(height)
        ]
        return Image(BILEVEL, width, height, data=rows)
    if img.mode == "L":
        rows = [list(raw[y * width : (y + 1) * width]) for y in range(height)]
        return Image(GRAYSCALE, width, height, DEFAULT_MAX_VALUE, data=rows)
    stride = width * 3
    rows = [
        [RGB(raw[i], raw[i + 1], raw[i + 2]) for i in range(y * stride, (y + 1) * stride, 3)]
        for y in range(height)
    ]
    return Image(COLOR, width, height, DEFAULT_MAX_VALUE, data=rows)


def to_pillow(image: Image) -> PILImage.Image:
    """Convert an Image into a Pillow image in mode 1, L or RGB."""
    if image.family is BILEVEL:
        mode = "1"
    elif image.family is GRAYSCALE:
        mode = "L"
    else:
        mode = "RGB"
    if image.width == 0 or image.height == 0:
        return PILImage.new(mode, image.size)
    if image.family is BILEVEL:
        data = b"".join(pack_row([not bit for bit in row]) for row in image.rows())
        return PILImage.frombytes(mode, image.size, data)
    source = image
    if image.max_value != DEFAULT_MAX_VALUE:
        source = image.copy()
        source.set_max_value(DEFAULT_MAX_VALUE)
    if image.family is GRAYSCALE:
        data = bytes(source.pixels())
    else:
        data = bytes(channel for pixel in source.pixels() for channel in pixel)
    return PILImage.frombytes(mode, image.size, data)


def ensure_file(path: str) -> None:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File not found: {path}")
