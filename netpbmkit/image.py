from __future__ import annotations

from typing import Any, Iterator, List, NamedTuple, Optional, Sequence, Tuple

DEFAULT_MAX_VALUE = 255
MAX_SAMPLE_VALUE = 65535


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class PixelFamily:
    """One pixel variant: element type, default value and magic numbers."""

    name = ""
    ascii_magic = ""
    binary_magic = ""
    has_max_value = True
    default: Any = None

    @property
    def magics(self) -> Tuple[str, str]:
        return (self.ascii_magic, self.binary_magic)

    def magic(self, binary: bool) -> str:
        return self.binary_magic if binary else self.ascii_magic

    def invert(self, value: Any, max_value: Optional[int]) -> Any:
        raise NotImplementedError

    def mix(self, first: Any, second: Any, t: float) -> Any:
        """Blend two values, t=0 gives first and t=1 gives second."""
        raise NotImplementedError

    def rescale(self, value: Any, old_max: int, new_max: int) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<PixelFamily {self.name}>"


class BilevelFamily(PixelFamily):
    name = "bilevel"
    ascii_magic = "P1"
    binary_magic = "P4"
    has_max_value = False
    default = False

    def invert(self, value: bool, max_value: Optional[int]) -> bool:
        return not value

    def mix(self, first: bool, second: bool, t: float) -> bool:
        return second if t >= 0.5 else first

    def rescale(self, value: bool, old_max: int, new_max: int) -> bool:
        raise ValueError("Bilevel images have no max value")


class GrayFamily(PixelFamily):
    name = "grayscale"
    ascii_magic = "P2"
    binary_magic = "P5"
    default = 0

    def invert(self, value: int, max_value: Optional[int]) -> int:
        return max_value - value

    def mix(self, first: int, second: int, t: float) -> int:
        return int(first * (1 - t) + second * t)

    def rescale(self, value: int, old_max: int, new_max: int) -> int:
        return _rescale_sample(value, old_max, new_max)


class ColorFamily(PixelFamily):
    name = "color"
    ascii_magic = "P3"
    binary_magic = "P6"
    default = RGB(0, 0, 0)

    def invert(self, value: RGB, max_value: Optional[int]) -> RGB:
        r, g, b = value
        return RGB(max_value - r, max_value - g, max_value - b)

    def mix(self, first: RGB, second: RGB, t: float) -> RGB:
        return RGB(
            int(first[0] * (1 - t) + second[0] * t),
            int(first[1] * (1 - t) + second[1] * t),
            int(first[2] * (1 - t) + second[2] * t),
        )

    def rescale(self, value: RGB, old_max: int, new_max: int) -> RGB:
        return RGB(*(_rescale_sample(channel, old_max, new_max) for channel in value))


def _rescale_sample(value: int, old_max: int, new_max: int) -> int:
    return (value * new_max + old_max // 2) // old_max


BILEVEL = BilevelFamily()
GRAYSCALE = GrayFamily()
COLOR = ColorFamily()


class Image:
    """Row-major pixel grid of a single family.

    Reads outside the grid return the family default and writes outside it
    are dropped, so drawing code can clip by simply calling ``set``.
    """

    def __init__(
        self,
        family: PixelFamily,
        width: int,
        height: int,
        max_value: Optional[int] = None,
        binary: bool = False,
        data: Optional[Sequence[Sequence[Any]]] = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("Image dimensions must not be negative")
        if family.has_max_value:
            if max_value is None:
                max_value = DEFAULT_MAX_VALUE
            _validate_max_value(max_value)
        else:
            max_value = None
        if data is None:
            rows = [[family.default] * width for _ in range(height)]
        else:
            if len(data) != height:
                raise ValueError("Row count does not match image height")
            rows = []
            for row in data:
                if len(row) != width:
                    raise ValueError("Row length does not match image width")
                rows.append(list(row))
        self.family = family
        self.width = width
        self.height = height
        self.max_value = max_value
        self.binary = binary
        self._data: List[List[Any]] = rows

    @classmethod
    def blank(
        cls,
        family: PixelFamily,
        width: int,
        height: int,
        max_value: Optional[int] = None,
        binary: bool = False,
    ) -> "Image":
        return cls(family, width, height, max_value=max_value, binary=binary)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def magic_number(self) -> str:
        return self.family.magic(self.binary)

    def set_magic_number(self, magic: str) -> None:
        """Switch between the plain and raw encoding of this image's family."""
        if magic not in self.family.magics:
            raise ValueError(f"Magic number {magic!r} does not belong to the {self.family.name} family")
        self.binary = magic == self.family.binary_magic

    def set_binary(self, binary: bool) -> None:
        self.binary = bool(binary)

    def set_max_value(self, max_value: int) -> None:
        """Change the max value, rescaling every sample to the new range."""
        if not self.family.has_max_value:
            raise ValueError("Bilevel images have no max value")
        _validate_max_value(max_value)
        old_max = self.max_value
        if max_value == old_max:
            return
        rescale = self.family.rescale
        self._data = [[rescale(value, old_max, max_value) for value in row] for row in self._data]
        self.max_value = max_value

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> Any:
        if self.in_bounds(x, y):
            return self._data[y][x]
        return self.family.default

    def set(self, x: int, y: int, value: Any) -> None:
        if self.in_bounds(x, y):
            self._data[y][x] = value

    def fill(self, value: Any) -> None:
        self._data = [[value] * self.width for _ in range(self.height)]

    def row(self, y: int) -> List[Any]:
        return list(self._data[y])

    def rows(self) -> List[List[Any]]:
        return [list(row) for row in self._data]

    def pixels(self) -> Iterator[Any]:
        for row in self._data:
            yield from row

    def copy(self) -> "Image":
        return Image(self.family, self.width, self.height, self.max_value, self.binary, self._data)

    def invert(self) -> None:
        invert = self.family.invert
        max_value = self.max_value
        self._data = [[invert(value, max_value) for value in row] for row in self._data]

    def flip_horizontal(self) -> None:
        for row in self._data:
            row.reverse()

    def flip_vertical(self) -> None:
        self._data.reverse()

    def rotate_90_cw(self) -> None:
        height = self.height
        old = self._data
        rotated = [[old[height - 1 - j][x] for j in range(height)] for x in range(self.width)]
        self.width, self.height, self._data = height, self.width, rotated

    def resample_nearest(self, new_width: int, new_height: int) -> None:
        if new_width <= 0 or new_height <= 0:
            raise ValueError("Target dimensions must be greater than zero")
        if self.width == 0 or self.height == 0:
            raise ValueError("Cannot resample an image without pixels")
        xs = [min(x * self.width // new_width, self.width - 1) for x in range(new_width)]
        ys = [min(y * self.height // new_height, self.height - 1) for y in range(new_height)]
        old = self._data
        resized = [[old[sy][sx] for sx in xs] for sy in ys]
        self.width, self.height, self._data = new_width, new_height, resized

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.family is other.family
            and self.width == other.width
            and self.height == other.height
            and self.max_value == other.max_value
            and self.binary == other.binary
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Image({self.magic_number}, {self.width}x{self.height}, max_value={self.max_value})"


def _validate_max_value(max_value: int) -> None:
    if not 1 <= max_value <= MAX_SAMPLE_VALUE:
        raise ValueError(f"Max value must be between 1 and {MAX_SAMPLE_VALUE}")


def new_bitmap(width: int, height: int, binary: bool = False) -> Image:
    return Image(BILEVEL, width, height, binary=binary)


def new_graymap(width: int, height: int, max_value: int = DEFAULT_MAX_VALUE, binary: bool = False) -> Image:
    return Image(GRAYSCALE, width, height, max_value=max_value, binary=binary)


def new_pixmap(width: int, height: int, max_value: int = DEFAULT_MAX_VALUE, binary: bool = False) -> Image:
    return Image(COLOR, width, height, max_value=max_value, binary=binary)
