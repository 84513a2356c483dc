import pytest

from netpbmkit import RGB, decode, encode, new_pixmap, read_file, write_file
from netpbmkit.job import ConversionJob, ConversionSettings


def _gradient(width, height):
    image = new_pixmap(width, height)
    for y in range(height):
        for x in range(width):
            image.set(x, y, RGB(x * 40, y * 40, 0))
    return image


def test_default_settings_change_nothing():
    image = _gradient(3, 2)
    assert ConversionJob().apply(image.copy()) == image


def test_steps_run_in_order():
    image = _gradient(4, 2)
    settings = ConversionSettings(rotate=1, resize=(4, 8), flip_horizontal=True, grayscale=True, threshold=30)
    result = ConversionJob(settings).apply(image)
    assert result.family.name == "bilevel"
    assert result.size == (4, 8)


def test_rotation_counts_quarter_turns():
    image = _gradient(3, 2)
    turned = ConversionJob(ConversionSettings(rotate=5)).apply(image.copy())
    expected = image.copy()
    expected.rotate_90_cw()
    assert turned == expected


def test_encoding_and_max_value():
    image = _gradient(2, 2)
    result = ConversionJob(ConversionSettings(binary=True, max_value=15)).apply(image)
    assert result.magic_number == "P6"
    assert result.max_value == 15
    assert result.at(1, 1) == RGB(2, 2, 0)


def test_threshold_then_invert():
    image = decode(b"P2\n3 1\n255\n0 100 255\n")
    result = ConversionJob(ConversionSettings(threshold=100, invert=True)).apply(image)
    assert result.row(0) == [True, False, False]


def test_run_reads_and_writes_files(tmp_path):
    source = tmp_path / "in.ppm"
    destination = tmp_path / "out.pgm"
    write_file(_gradient(3, 3), source)
    job = ConversionJob(ConversionSettings(grayscale=True, binary=True, flip_vertical=True))
    result = job.run(str(source), str(destination))
    assert destination.read_bytes() == encode(result)
    assert read_file(destination).magic_number == "P5"


def test_run_rejects_unknown_extensions(tmp_path):
    with pytest.raises(ValueError) as info:
        ConversionJob().run(str(tmp_path / "in.ppm"), str(tmp_path / "out.webp"))
    assert ".pbm" in str(info.value)
