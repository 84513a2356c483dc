from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..image import BILEVEL, COLOR, GRAYSCALE, PixelFamily

MAX_BINARY_VALUE = 255


@dataclass(frozen=True)
class PixelFormat:
    magic: str
    family: PixelFamily
    binary: bool


FORMATS: Dict[str, PixelFormat] = {
    "P1": PixelFormat("P1", BILEVEL, binary=False),
    "P2": PixelFormat("P2", GRAYSCALE, binary=False),
    "P3": PixelFormat("P3", COLOR, binary=False),
    "P4": PixelFormat("P4", BILEVEL, binary=True),
    "P5": PixelFormat("P5", GRAYSCALE, binary=True),
    "P6": PixelFormat("P6", COLOR, binary=True),
}


@dataclass(frozen=True)
class Header:
    """Parsed Netpbm preamble."""

    magic: str
    width: int
    height: int
    max_value: Optional[int] = None

    @property
    def format(self) -> PixelFormat:
        return FORMATS[self.magic]

    @property
    def family(self) -> PixelFamily:
        return FORMATS[self.magic].family

    @property
    def binary(self) -> bool:
        return FORMATS[self.magic].binary

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def to_bytes(self) -> bytes:
        """Serialize the header the way the encoder writes it."""
        text = f"{self.magic}\n{self.width} {self.height}\n"
        if self.max_value is not None:
            text += f"{self.max_value}\n"
        return text.encode("ascii")
