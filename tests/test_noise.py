import pytest

from netpbmkit import RGB, NoiseSettings, fill_noise, new_graymap, new_pixmap
from netpbmkit.rendering import PerlinNoise


def test_noise_vanishes_on_lattice_points():
    noise = PerlinNoise(octaves=3)
    for x in range(-3, 4):
        for y in range(-3, 4):
            assert noise.noise2d(x, y) == 0.0


def test_single_octave_noise_stays_in_range():
    noise = PerlinNoise()
    samples = [noise.noise2d(x / 7.3, y / 5.1) for x in range(40) for y in range(40)]
    assert all(-1.0 <= value <= 1.0 for value in samples)
    assert any(value != 0.0 for value in samples)


def test_seed_makes_noise_reproducible():
    points = [(x / 3.7, y / 2.9) for x in range(10) for y in range(10)]
    first = [PerlinNoise(seed=7).noise2d(x, y) for x, y in points]
    again = [PerlinNoise(seed=7).noise2d(x, y) for x, y in points]
    other = [PerlinNoise(seed=8).noise2d(x, y) for x, y in points]
    assert first == again
    assert first != other


def test_unit_scale_samples_only_lattice_points():
    image = new_pixmap(6, 4)
    fill_noise(image, RGB(10, 20, 30), RGB(200, 200, 200), NoiseSettings(scale=1))
    assert set(image.pixels()) == {RGB(10, 20, 30)}


def test_fill_noise_blends_between_the_two_values():
    image = new_graymap(32, 32)
    fill_noise(image, 40, 200, NoiseSettings(scale=9.5, octaves=2, seed=3))
    values = list(image.pixels())
    assert all(40 <= value <= 200 for value in values)


@pytest.mark.parametrize("kwargs", [{"seed": 0}, {"seed": -4}, {"octaves": 0}, {"alpha": 0}])
def test_invalid_noise_parameters(kwargs):
    with pytest.raises(ValueError):
        PerlinNoise(**kwargs)


def test_extra_octaves_add_detail():
    base = PerlinNoise(octaves=1, seed=5)
    detailed = PerlinNoise(octaves=3, seed=5)
    points = [(x / 4.3, y / 3.1) for x in range(8) for y in range(8)]
    assert [base.noise2d(x, y) for x, y in points] != [detailed.noise2d(x, y) for x, y in points]


def test_default_settings():
    settings = NoiseSettings()
    assert (settings.scale, settings.alpha, settings.beta, settings.octaves, settings.seed) == (
        pytest.approx(50.0),
        pytest.approx(3.0),
        pytest.approx(3.0),
        1,
        42,
    )
