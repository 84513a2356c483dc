from .codec import decode, decode_stream, encode, read_file, write_file
from .convert import luma, to_bitmap, to_graymap
from .errors import FormatError, ImageIOError, NetpbmError, TruncatedDataError
from .image import (
    BILEVEL,
    COLOR,
    GRAYSCALE,
    RGB,
    Image,
    PixelFamily,
    new_bitmap,
    new_graymap,
    new_pixmap,
)
from .rendering import (
    NoiseSettings,
    Point,
    draw_circle,
    draw_filled_circle,
    draw_filled_polygon,
    draw_filled_rectangle,
    draw_filled_triangle,
    draw_koch_curve,
    draw_koch_snowflake,
    draw_line,
    draw_polygon,
    draw_rectangle,
    draw_sierpinski_triangle,
    draw_triangle,
    fill_noise,
)

__version__ = "0.1.0"

__all__ = [
    "BILEVEL",
    "COLOR",
    "decode",
    "decode_stream",
    "draw_circle",
    "draw_filled_circle",
    "draw_filled_polygon",
    "draw_filled_rectangle",
    "draw_filled_triangle",
    "draw_koch_curve",
    "draw_koch_snowflake",
    "draw_line",
    "draw_polygon",
    "draw_rectangle",
    "draw_sierpinski_triangle",
    "draw_triangle",
    "encode",
    "fill_noise",
    "FormatError",
    "GRAYSCALE",
    "Image",
    "ImageIOError",
    "luma",
    "NetpbmError",
    "new_bitmap",
    "new_graymap",
    "new_pixmap",
    "NoiseSettings",
    "PixelFamily",
    "Point",
    "read_file",
    "RGB",
    "to_bitmap",
    "to_graymap",
    "TruncatedDataError",
    "write_file",
]
