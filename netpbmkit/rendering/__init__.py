from .fractals import draw_koch_curve, draw_koch_snowflake, draw_sierpinski_triangle
from .noise import NoiseSettings, PerlinNoise, fill_noise
from .primitives import (
    Point,
    draw_circle,
    draw_filled_circle,
    draw_filled_polygon,
    draw_filled_rectangle,
    draw_filled_triangle,
    draw_line,
    draw_polygon,
    draw_rectangle,
    draw_triangle,
    iter_line,
)

__all__ = [
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
    "fill_noise",
    "iter_line",
    "NoiseSettings",
    "PerlinNoise",
    "Point",
]
