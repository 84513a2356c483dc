from __future__ import annotations

import io
import re
from typing import Any, BinaryIO, Callable, Dict, List, Pattern, Sequence

from ..errors import FormatError, TruncatedDataError
from ..image import COLOR, RGB, Image
from .types import MAX_BINARY_VALUE, Header

ASCII_CHUNK_SIZE = 1 << 16

# Plain bitmaps may run bits together ("0110"), so every bit is its own token.
_BIT_TOKEN_RE = re.compile(rb"#[^\r\n]*|[01]|[^\s#01]+")
_SAMPLE_TOKEN_RE = re.compile(rb"#[^\r\n]*|[^\s#]+")

Rows = List[List[Any]]


def pack_row(row: Sequence[bool]) -> bytes:
    """Pack a row of bits into bytes, most significant bit first."""
    out = bytearray()
    for i in range(0, len(row), 8):
        value = 0
        for bit, pix in enumerate(row[i : i + 8]):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def unpack_row(data: bytes, width: int) -> List[bool]:
    """Inverse of pack_row; padding bits past width are ignored."""
    return [bool((data[x >> 3] >> (7 - (x & 7))) & 1) for x in range(width)]


def row_byte_count(width: int) -> int:
    return (width + 7) // 8


def read_ascii_tokens(stream: BinaryIO, count: int, pattern: Pattern[bytes]) -> List[bytes]:
    """Read up to count tokens, skipping comments.

    Bytes read past the last token are pushed back when the stream can seek,
    so a following image in the same stream stays readable.
    """
    tokens: List[bytes] = []
    buf = b""
    eof = False
    while len(tokens) < count and not eof:
        chunk = stream.read(ASCII_CHUNK_SIZE)
        eof = not chunk
        buf += chunk
        pos = 0
        for match in pattern.finditer(buf):
            if match.end() == len(buf) and not eof:
                break
            pos = match.end()
            token = match.group()
            if token.startswith(b"#"):
                continue
            tokens.append(token)
            if len(tokens) == count:
                break
        buf = buf[pos:]
    if buf and stream.seekable():
        stream.seek(-len(buf), io.SEEK_CUR)
    return tokens


def _parse_sample(token: bytes, max_value: int) -> int:
    if not token.isdigit():
        raise FormatError(f"Invalid sample: {token!r}")
    value = int(token)
    if value > max_value:
        raise FormatError(f"Sample {value} exceeds max value {max_value}")
    return value


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) < count:
        raise TruncatedDataError(f"Expected {count} bytes of pixel data, got {len(data)}")
    return data


def _group_rows(values: Sequence[Any], width: int, height: int) -> Rows:
    return [list(values[y * width : (y + 1) * width]) for y in range(height)]


def _group_pixels(samples: Sequence[int], channels: int) -> List[Any]:
    if channels == 1:
        return list(samples)
    return [RGB(samples[i], samples[i + 1], samples[i + 2]) for i in range(0, len(samples), 3)]


def decode_bits_ascii(header: Header, stream: BinaryIO) -> Rows:
    count = header.pixel_count
    tokens = read_ascii_tokens(stream, count, _BIT_TOKEN_RE)
    if len(tokens) < count:
        raise TruncatedDataError(f"Expected {count} bits, found {len(tokens)}")
    bits = []
    for token in tokens:
        if token not in (b"0", b"1"):
            raise FormatError(f"Invalid bit: {token!r}")
        bits.append(token == b"1")
    return _group_rows(bits, header.width, header.height)


def decode_bits_binary(header: Header, stream: BinaryIO) -> Rows:
    stride = row_byte_count(header.width)
    data = _read_exact(stream, stride * header.height)
    return [unpack_row(data[y * stride : (y + 1) * stride], header.width) for y in range(header.height)]


def _decode_samples_ascii(header: Header, stream: BinaryIO, channels: int) -> Rows:
    count = header.pixel_count * channels
    tokens = read_ascii_tokens(stream, count, _SAMPLE_TOKEN_RE)
    if len(tokens) < count:
        raise TruncatedDataError(f"Expected {count} samples, found {len(tokens)}")
    samples = [_parse_sample(token, header.max_value) for token in tokens]
    return _group_rows(_group_pixels(samples, channels), header.width, header.height)


def _decode_samples_binary(header: Header, stream: BinaryIO, channels: int) -> Rows:
    data = _read_exact(stream, header.pixel_count * channels)
    if data and max(data) > header.max_value:
        raise FormatError(f"Sample {max(data)} exceeds max value {header.max_value}")
    return _group_rows(_group_pixels(data, channels), header.width, header.height)


def decode_gray_ascii(header: Header, stream: BinaryIO) -> Rows:
    return _decode_samples_ascii(header, stream, 1)


def decode_gray_binary(header: Header, stream: BinaryIO) -> Rows:
    return _decode_samples_binary(header, stream, 1)


def decode_color_ascii(header: Header, stream: BinaryIO) -> Rows:
    return _decode_samples_ascii(header, stream, 3)


def decode_color_binary(header: Header, stream: BinaryIO) -> Rows:
    return _decode_samples_binary(header, stream, 3)


_DECODERS: Dict[str, Callable[[Header, BinaryIO], Rows]] = {
    "P1": decode_bits_ascii,
    "P2": decode_gray_ascii,
    "P3": decode_color_ascii,
    "P4": decode_bits_binary,
    "P5": decode_gray_binary,
    "P6": decode_color_binary,
}


def decode_payload(header: Header, stream: BinaryIO) -> Rows:
    """Decode the pixel payload that follows header in stream."""
    return _DECODERS[header.magic](header, stream)


def encode_bits_ascii(image: Image) -> bytes:
    lines = [" ".join("1" if value else "0" for value in row) + "\n" for row in image.rows()]
    return "".join(lines).encode("ascii")


def encode_bits_binary(image: Image) -> bytes:
    return b"".join(pack_row(row) for row in image.rows())


def encode_gray_ascii(image: Image) -> bytes:
    lines = [" ".join(str(value) for value in row) + "\n" for row in image.rows()]
    return "".join(lines).encode("ascii")


def encode_color_ascii(image: Image) -> bytes:
    lines = [" ".join(f"{r} {g} {b}" for r, g, b in row) + "\n" for row in image.rows()]
    return "".join(lines).encode("ascii")


def encode_gray_binary(image: Image) -> bytes:
    _require_byte_samples(image)
    return bytes(image.pixels())


def encode_color_binary(image: Image) -> bytes:
    _require_byte_samples(image)
    return bytes(channel for pixel in image.pixels() for channel in pixel)


def _require_byte_samples(image: Image) -> None:
    if image.max_value > MAX_BINARY_VALUE:
        raise ValueError(
            f"Max value {image.max_value} needs 16-bit samples; only 8-bit {image.magic_number} output is supported"
        )


def _require_samples_in_range(image: Image) -> None:
    max_value = image.max_value
    color = image.family is COLOR
    for y in range(image.height):
        for x, pixel in enumerate(image.row(y)):
            for sample in pixel if color else (pixel,):
                if not 0 <= sample <= max_value:
                    raise ValueError(f"Sample {sample} at ({x}, {y}) is outside 0..{max_value}")


_ENCODERS: Dict[str, Callable[[Image], bytes]] = {
    "P1": encode_bits_ascii,
    "P2": encode_gray_ascii,
    "P3": encode_color_ascii,
    "P4": encode_bits_binary,
    "P5": encode_gray_binary,
    "P6": encode_color_binary,
}


def encode_payload(image: Image) -> bytes:
    """Encode the pixels of image in its current encoding.

    Gray and color samples must lie within 0..max_value; ValueError otherwise.
    """
    if image.family.has_max_value:
        _require_samples_in_range(image)
    return _ENCODERS[image.magic_number](image)
