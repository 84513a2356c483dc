from __future__ import annotations

import logging
import math
from typing import Any, Iterator, List, NamedTuple, Sequence, Tuple

from ..image import Image

logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: int
    y: int


def iter_line(start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[Tuple[int, int]]:
    """Yield the Bresenham pixels from start to end, both endpoints included."""
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _span(image: Image, x0: int, x1: int, y: int, value: Any) -> None:
    if x0 > x1:
        x0, x1 = x1, x0
    for x in range(x0, x1 + 1):
        image.set(x, y, value)


def draw_line(image: Image, start: Tuple[int, int], end: Tuple[int, int], value: Any) -> bool:
    for x, y in iter_line(start, end):
        image.set(x, y, value)
    return True


def _rectangle_fits(image: Image, origin: Tuple[int, int], width: int, height: int) -> bool:
    if width <= 0 or height <= 0:
        logger.warning("Rectangle skipped: invalid dimensions %dx%d", width, height)
        return False
    x2 = origin[0] + width - 1
    y2 = origin[1] + height - 1
    if x2 >= image.width or y2 >= image.height:
        logger.warning("Rectangle skipped: corner (%d, %d) is outside the %dx%d image", x2, y2, image.width, image.height)
        return False
    return True


def draw_rectangle(image: Image, origin: Tuple[int, int], width: int, height: int, value: Any) -> bool:
    """Stroke the border of a width x height box whose top-left is origin."""
    if not _rectangle_fits(image, origin, width, height):
        return False
    x1, y1 = origin
    x2, y2 = x1 + width - 1, y1 + height - 1
    _span(image, x1, x2, y1, value)
    _span(image, x1, x2, y2, value)
    for y in range(y1 + 1, y2):
        image.set(x1, y, value)
        image.set(x2, y, value)
    return True


def draw_filled_rectangle(image: Image, origin: Tuple[int, int], width: int, height: int, value: Any) -> bool:
    if not _rectangle_fits(image, origin, width, height):
        return False
    x1, y1 = origin
    for y in range(y1, y1 + height):
        _span(image, x1, x1 + width - 1, y, value)
    return True


def _circle_octants(radius: int) -> Iterator[Tuple[int, int]]:
    # Midpoint walk over one octant; callers mirror (x, y) into the other seven.
    x = radius
    y = 0
    err = 0
    while x >= y:
        yield x, y
        if err <= 0:
            y += 1
            err += 2 * y + 1
        if err > 0:
            x -= 1
            err -= 2 * x + 1


def _valid_radius(radius: int) -> bool:
    if radius <= 0:
        logger.warning("Circle skipped: radius must be positive, got %d", radius)
        return False
    return True


def draw_circle(image: Image, center: Tuple[int, int], radius: int, value: Any) -> bool:
    if not _valid_radius(radius):
        return False
    cx, cy = center
    for x, y in _circle_octants(radius):
        image.set(cx + x, cy - y, value)
        image.set(cx + y, cy - x, value)
        image.set(cx - y, cy - x, value)
        image.set(cx - x, cy - y, value)
        image.set(cx - x, cy + y, value)
        image.set(cx - y, cy + x, value)
        image.set(cx + y, cy + x, value)
        image.set(cx + x, cy + y, value)
    return True


def draw_filled_circle(image: Image, center: Tuple[int, int], radius: int, value: Any) -> bool:
    if not _valid_radius(radius):
        return False
    cx, cy = center
    for x, y in _circle_octants(radius):
        _span(image, cx - x, cx + x, cy + y, value)
        _span(image, cx - x, cx + x, cy - y, value)
        _span(image, cx - y, cx + y, cy + x, value)
        _span(image, cx - y, cx + y, cy - x, value)
    return True


def draw_triangle(
    image: Image, p1: Tuple[int, int], p2: Tuple[int, int], p3: Tuple[int, int], value: Any
) -> bool:
    draw_line(image, p1, p2, value)
    draw_line(image, p2, p3, value)
    draw_line(image, p3, p1, value)
    return True


def _inverse_slope(a: Tuple[int, int], b: Tuple[int, int]) -> float:
    dy = b[1] - a[1]
    if dy == 0:
        return 0.0
    return (b[0] - a[0]) / dy


def draw_filled_triangle(
    image: Image, p1: Tuple[int, int], p2: Tuple[int, int], p3: Tuple[int, int], value: Any
) -> bool:
    """Scanline-fill a triangle, top to bottom."""
    top, mid, bottom = sorted((p1, p2, p3), key=lambda point: point[1])
    if top[1] == bottom[1]:
        xs = (top[0], mid[0], bottom[0])
        _span(image, min(xs), max(xs), top[1], value)
        return True
    long_slope = _inverse_slope(top, bottom)
    upper_slope = _inverse_slope(top, mid)
    lower_slope = _inverse_slope(mid, bottom)
    long_x = float(top[0])
    short_x = float(top[0])
    for y in range(top[1], bottom[1] + 1):
        if y == mid[1]:
            short_x = float(mid[0])
        lo, hi = sorted((long_x, short_x))
        _span(image, math.ceil(lo - 0.5), math.floor(hi + 0.5), y, value)
        long_x += long_slope
        short_x += upper_slope if y < mid[1] else lower_slope
    return True


def _enough_vertices(points: Sequence[Tuple[int, int]]) -> bool:
    if len(points) < 3:
        logger.warning("Polygon skipped: at least 3 vertices required, got %d", len(points))
        return False
    return True


def draw_polygon(image: Image, points: Sequence[Tuple[int, int]], value: Any) -> bool:
    if not _enough_vertices(points):
        return False
    for i, current in enumerate(points):
        draw_line(image, current, points[(i + 1) % len(points)], value)
    return True


def draw_filled_polygon(image: Image, points: Sequence[Tuple[int, int]], value: Any) -> bool:
    """Fill a polygon from per-scanline left/right bounds traced along its edges."""
    if not _enough_vertices(points):
        return False
    min_y = min(point[1] for point in points)
    max_y = max(point[1] for point in points)
    rows = max_y - min_y + 1
    left: List[int] = [image.width] * rows
    right: List[int] = [0] * rows
    # Rightmost traced x per row; the table's right=0 start hides rows left of the image.
    reach: List[int] = [-1] * rows
    for i, current in enumerate(points):
        for x, y in iter_line(current, points[(i + 1) % len(points)]):
            row = y - min_y
            if x < left[row]:
                left[row] = x
            if x > right[row]:
                right[row] = x
            if x > reach[row]:
                reach[row] = x
    for row in range(rows):
        if reach[row] < 0:
            continue
        _span(image, max(left[row], 0), right[row], min_y + row, value)
    return True
