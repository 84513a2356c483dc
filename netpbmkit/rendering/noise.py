from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

import perlin_noise

from ..image import Image

DEFAULT_NOISE_SCALE = 50.0
DEFAULT_NOISE_ALPHA = 3.0
DEFAULT_NOISE_BETA = 3.0
DEFAULT_NOISE_OCTAVES = 1
DEFAULT_NOISE_SEED = 42


@dataclass
class NoiseSettings:
    scale: float = DEFAULT_NOISE_SCALE
    alpha: float = DEFAULT_NOISE_ALPHA
    beta: float = DEFAULT_NOISE_BETA
    octaves: int = DEFAULT_NOISE_OCTAVES
    seed: int = DEFAULT_NOISE_SEED


class PerlinNoise:
    """Two-dimensional Perlin noise summed over octaves.

    Each octave samples ``beta`` times the frequency of the previous one and
    contributes ``1 / alpha`` of its weight. A given seed always produces the
    same field; seeds must be positive.
    """

    def __init__(
        self,
        alpha: float = DEFAULT_NOISE_ALPHA,
        beta: float = DEFAULT_NOISE_BETA,
        octaves: int = DEFAULT_NOISE_OCTAVES,
        seed: int = DEFAULT_NOISE_SEED,
    ) -> None:
        if octaves < 1:
            raise ValueError("Noise needs at least one octave")
        if alpha <= 0 or beta <= 0:
            raise ValueError("Noise alpha and beta must be positive")
        # perlin_noise treats a zero seed as "pick one at random".
        if seed <= 0:
            raise ValueError(f"Noise seed must be positive, got {seed}")
        self.alpha = alpha
        self.beta = beta
        self.octaves = octaves
        self.seed = seed
        self._layers: List[perlin_noise.PerlinNoise] = [
            perlin_noise.PerlinNoise(octaves=beta ** octave, seed=seed) for octave in range(octaves)
        ]

    def noise2d(self, x: float, y: float) -> float:
        total = 0.0
        weight = 1.0
        for layer in self._layers:
            total += layer([x, y]) / weight
            weight *= self.alpha
        return total


def fill_noise(image: Image, first: Any, second: Any, settings: Optional[NoiseSettings] = None) -> None:
    """Paint every pixel with a blend of first and second driven by Perlin noise."""
    settings = settings or NoiseSettings()
    noise = PerlinNoise(settings.alpha, settings.beta, settings.octaves, settings.seed)
    mix = image.family.mix
    for y in range(image.height):
        for x in range(image.width):
            t = noise.noise2d(x / settings.scale, y / settings.scale)
            t = max(0.0, min(1.0, t))
            image.set(x, y, mix(first, second, t))
