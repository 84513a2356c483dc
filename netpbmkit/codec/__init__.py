from .document import decode, decode_stream, encode, image_header, read_file, write_file
from .encoding import decode_payload, encode_payload, pack_row, row_byte_count, unpack_row
from .header import HeaderReader, read_header
from .types import FORMATS, MAX_BINARY_VALUE, Header, PixelFormat

__all__ = [
    "decode",
    "decode_payload",
    "decode_stream",
    "encode",
    "encode_payload",
    "FORMATS",
    "Header",
    "HeaderReader",
    "image_header",
    "MAX_BINARY_VALUE",
    "pack_row",
    "PixelFormat",
    "read_file",
    "read_header",
    "row_byte_count",
    "unpack_row",
    "write_file",
]
