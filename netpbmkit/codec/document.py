from __future__ import annotations

import io
import os
from typing import BinaryIO, Union

from ..errors import ImageIOError
from ..image import Image
from .encoding import decode_payload, encode_payload
from .header import read_header
from .types import Header

PathLike = Union[str, "os.PathLike[str]"]


def decode_stream(stream: BinaryIO) -> Image:
    """Decode one image from stream, leaving it positioned after the image."""
    header = read_header(stream)
    rows = decode_payload(header, stream)
    return Image(
        header.family,
        header.width,
        header.height,
        max_value=header.max_value,
        binary=header.binary,
        data=rows,
    )


def decode(data: bytes) -> Image:
    """Decode a complete Netpbm file held in memory."""
    return decode_stream(io.BytesIO(data))


def image_header(image: Image) -> Header:
    return Header(image.magic_number, image.width, image.height, image.max_value)


def encode(image: Image) -> bytes:
    """Serialize image using its current magic number."""
    return image_header(image).to_bytes() + encode_payload(image)


def read_file(path: PathLike) -> Image:
    try:
        with open(path, "rb") as handle:
            return decode_stream(handle)
    except OSError as exc:
        raise ImageIOError(f"Cannot read image {os.fspath(path)}: {exc}") from exc


def write_file(image: Image, path: PathLike) -> None:
    data = encode(image)
    try:
        with open(path, "wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise ImageIOError(f"Cannot write image {os.fspath(path)}: {exc}") from exc
