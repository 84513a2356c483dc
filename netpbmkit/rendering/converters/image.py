from __future__ import annotations

from ...errors import ImageIOError
from ...image import Image
from .base import RasterConverter, ensure_file, from_pillow, to_pillow


class PillowConverter(RasterConverter):
    def load(self, path: str) -> Image:
        ensure_file(path)
        return from_pillow(self._load_image(path))

    def save(self, image: Image, path: str) -> None:
        try:
            to_pillow(image).save(path)
        except OSError as exc:
            raise ImageIOError(f"Cannot write image {path}: {exc}") from exc
