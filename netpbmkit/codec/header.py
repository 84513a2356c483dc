from __future__ import annotations

from typing import BinaryIO

from ..errors import FormatError
from ..image import MAX_SAMPLE_VALUE
from .types import FORMATS, MAX_BINARY_VALUE, Header

WHITESPACE = b" \t\n\v\f\r"
COMMENT = b"#"


class HeaderReader:
    """Reads a Netpbm header and stops on the first payload byte.

    Exactly one whitespace byte is consumed after the last header token; raw
    payloads may legitimately start with bytes that look like whitespace.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read(self) -> Header:
        magic = self._next_token("magic number")
        pixel_format = FORMATS.get(magic)
        if pixel_format is None:
            raise FormatError(f"Unrecognized magic number: {magic!r}")
        width = self._next_int("width")
        height = self._next_int("height")
        max_value = None
        if pixel_format.family.has_max_value:
            max_value = self._next_int("max value")
            if not 1 <= max_value <= MAX_SAMPLE_VALUE:
                raise FormatError(f"Max value out of range: {max_value}")
            if pixel_format.binary and max_value > MAX_BINARY_VALUE:
                raise FormatError(f"Only 8-bit samples are supported in {magic} files (max value {max_value})")
        return Header(magic, width, height, max_value)

    def _next_int(self, what: str) -> int:
        token = self._next_token(what)
        if not token.isdigit():
            raise FormatError(f"Invalid {what}: {token!r}")
        return int(token)

    def _next_token(self, what: str) -> str:
        token = bytearray()
        while True:
            ch = self._stream.read(1)
            if not ch:
                break
            if ch == COMMENT:
                # The comment's line ending is the separator after a token.
                self._stream.readline()
                if token:
                    break
                continue
            if ch in WHITESPACE:
                if token:
                    break
                continue
            token += ch
        if not token:
            raise FormatError(f"Missing {what}")
        return token.decode("ascii", errors="replace")


def read_header(stream: BinaryIO) -> Header:
    return HeaderReader(stream).read()
