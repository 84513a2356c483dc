from __future__ import annotations

import os
from typing import Dict, Optional, Set

from ...image import Image
from .base import ImageConverter, from_pillow, to_pillow
from .image import PillowConverter
from .netpbm import NetpbmConverter

NETPBM_EXTENSIONS: Set[str] = {".pbm", ".pgm", ".ppm", ".pnm"}
PILLOW_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff"}
SUPPORTED_EXTENSIONS: Set[str] = NETPBM_EXTENSIONS | PILLOW_EXTENSIONS


class ImageLoader:
    def __init__(self, converters: Optional[Dict[str, ImageConverter]] = None) -> None:
        if converters is None:
            converters = {}
            netpbm_converter = NetpbmConverter()
            for ext in NETPBM_EXTENSIONS:
                converters[ext] = netpbm_converter
            pillow_converter = PillowConverter()
            for ext in PILLOW_EXTENSIONS:
                converters[ext] = pillow_converter
        self._converters = converters

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._converters.keys())

    def converter_for(self, path: str) -> ImageConverter:
        ext = os.path.splitext(path)[1].lower()
        converter = self._converters.get(ext)
        if not converter:
            raise ValueError(f"Unsupported file extension: {ext}")
        return converter

    def load(self, path: str) -> Image:
        return self.converter_for(path).load(path)

    def save(self, image: Image, path: str) -> None:
        self.converter_for(path).save(image, path)


def load_image(path: str) -> Image:
    return ImageLoader().load(path)


def save_image(image: Image, path: str) -> None:
    ImageLoader().save(image, path)


__all__ = [
    "from_pillow",
    "ImageConverter",
    "ImageLoader",
    "load_image",
    "NETPBM_EXTENSIONS",
    "PILLOW_EXTENSIONS",
    "save_image",
    "SUPPORTED_EXTENSIONS",
    "to_pillow",
]
