from __future__ import annotations

from ...codec import read_file, write_file
from ...image import Image
from .base import ImageConverter, ensure_file


class NetpbmConverter(ImageConverter):
    def load(self, path: str) -> Image:
        ensure_file(path)
        return read_file(path)

    def save(self, image: Image, path: str) -> None:
        write_file(image, path)
