from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .convert import to_bitmap, to_graymap
from .image import BILEVEL, COLOR, Image
from .rendering.converters import SUPPORTED_EXTENSIONS, ImageLoader

logger = logging.getLogger(__name__)


@dataclass
class ConversionSettings:
    invert: bool = False
    flip_horizontal: bool = False
    flip_vertical: bool = False
    rotate: int = 0
    resize: Optional[Tuple[int, int]] = None
    grayscale: bool = False
    threshold: Optional[int] = None
    binary: Optional[bool] = None
    max_value: Optional[int] = None


class ConversionJob:
    def __init__(self, settings: Optional[ConversionSettings] = None, loader: Optional[ImageLoader] = None) -> None:
        self.settings = settings or ConversionSettings()
        self.loader = loader or ImageLoader()

    def run(self, source: str, destination: str) -> Image:
        self._validate_extension(source)
        self._validate_extension(destination)
        image = self.loader.load(source)
        logger.debug("Loaded %s: %r", source, image)
        image = self.apply(image)
        self.loader.save(image, destination)
        logger.debug("Saved %s: %r", destination, image)
        return image

    def apply(self, image: Image) -> Image:
        """Apply the configured steps in order and return the resulting image."""
        settings = self.settings
        if settings.max_value is not None and image.family is not BILEVEL:
            image.set_max_value(settings.max_value)
            logger.debug("Max value set to %d", settings.max_value)
        for _ in range(settings.rotate % 4):
            image.rotate_90_cw()
        if settings.resize is not None:
            image.resample_nearest(*settings.resize)
            logger.debug("Resampled to %dx%d", *settings.resize)
        if settings.flip_horizontal:
            image.flip_horizontal()
        if settings.flip_vertical:
            image.flip_vertical()
        if settings.grayscale and image.family is COLOR:
            image = to_graymap(image)
            logger.debug("Converted to grayscale")
        if settings.threshold is not None and image.family is not BILEVEL:
            image = to_bitmap(image, settings.threshold)
            logger.debug("Thresholded at %d", settings.threshold)
        if settings.invert:
            image.invert()
        if settings.binary is not None:
            image.set_binary(settings.binary)
        return image

    @staticmethod
    def _validate_extension(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
