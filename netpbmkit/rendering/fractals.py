from __future__ import annotations

import math
from typing import Any, Tuple

from ..image import Image
from .primitives import draw_line

SQRT3 = math.sqrt(3)

FloatPoint = Tuple[float, float]


def _snap(point: FloatPoint) -> Tuple[int, int]:
    return int(math.floor(point[0] + 0.5)), int(math.floor(point[1] + 0.5))


def _koch(image: Image, depth: int, a: FloatPoint, b: FloatPoint, value: Any) -> None:
    if depth <= 0:
        draw_line(image, _snap(a), _snap(b), value)
        return
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    first = (a[0] + dx / 3, a[1] + dy / 3)
    second = (a[0] + 2 * dx / 3, a[1] + 2 * dy / 3)
    # (dy, -dx) is the left-hand normal in image space, where y grows downward.
    apex = (
        a[0] + dx / 2 + dy * SQRT3 / 6,
        a[1] + dy / 2 - dx * SQRT3 / 6,
    )
    _koch(image, depth - 1, a, first, value)
    _koch(image, depth - 1, first, apex, value)
    _koch(image, depth - 1, apex, second, value)
    _koch(image, depth - 1, second, b, value)


def draw_koch_curve(image: Image, depth: int, start: Tuple[int, int], end: Tuple[int, int], value: Any) -> None:
    """Draw a Koch curve from start to end, bumps on the left of the direction of travel."""
    _koch(image, depth, (float(start[0]), float(start[1])), (float(end[0]), float(end[1])), value)


def draw_koch_snowflake(image: Image, depth: int, start: Tuple[int, int], length: int, value: Any) -> None:
    """Draw a Koch snowflake on the triangle whose top-left corner is start.

    The base runs right from start and the third vertex sits below it, so
    walking the edges in that order keeps every bump on the outside.
    """
    a = (float(start[0]), float(start[1]))
    b = (a[0] + length, a[1])
    c = (a[0] + length / 2, a[1] + length * SQRT3 / 2)
    _koch(image, depth, a, b, value)
    _koch(image, depth, b, c, value)
    _koch(image, depth, c, a, value)


def _sierpinski(image: Image, depth: int, origin: FloatPoint, width: float, value: Any) -> None:
    height = width * SQRT3 / 2
    if depth <= 0:
        left = _snap(origin)
        right = _snap((origin[0] + width, origin[1]))
        top = _snap((origin[0] + width / 2, origin[1] - height))
        draw_line(image, left, right, value)
        draw_line(image, right, top, value)
        draw_line(image, top, left, value)
        return
    half = width / 2
    _sierpinski(image, depth - 1, origin, half, value)
    _sierpinski(image, depth - 1, (origin[0] + half, origin[1]), half, value)
    _sierpinski(image, depth - 1, (origin[0] + half / 2, origin[1] - height / 2), half, value)


def draw_sierpinski_triangle(image: Image, depth: int, start: Tuple[int, int], width: int, value: Any) -> None:
    """Draw a Sierpinski triangle whose bottom-left corner is start."""
    _sierpinski(image, depth, (float(start[0]), float(start[1])), float(width), value)
