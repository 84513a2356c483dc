import pytest

from netpbmkit import RGB, decode, luma, new_bitmap, new_graymap, new_pixmap, to_bitmap, to_graymap
from netpbmkit.convert import default_threshold


@pytest.mark.parametrize(
    "pixel, expected",
    [(RGB(255, 0, 0), 76), (RGB(0, 255, 0), 150), (RGB(0, 0, 255), 29), (RGB(255, 255, 255), 255), (RGB(0, 0, 0), 0)],
)
def test_luma(pixel, expected):
    assert luma(pixel) == expected


def test_luma_is_scaled_to_eight_bits():
    assert luma(RGB(15, 15, 15), max_value=15) == 255
    assert luma(RGB(1000, 0, 0), max_value=1000) == 76


def test_to_graymap():
    image = new_pixmap(2, 1, binary=True)
    image.set(0, 0, RGB(255, 0, 0))
    image.set(1, 0, RGB(255, 255, 255))
    gray = to_graymap(image)
    assert gray.magic_number == "P5"
    assert gray.max_value == 255
    assert gray.row(0) == [76, 255]
    assert image.at(0, 0) == RGB(255, 0, 0)


def test_to_graymap_needs_color():
    with pytest.raises(ValueError):
        to_graymap(new_graymap(1, 1))


def test_default_thresholds():
    assert default_threshold(new_pixmap(1, 1)) == 128
    assert default_threshold(new_pixmap(1, 1, max_value=15)) == 128
    assert default_threshold(new_graymap(1, 1, max_value=15)) == 8


def test_gray_to_bitmap():
    image = decode(b"P2\n4 1\n15\n0 7 8 15\n")
    bits = to_bitmap(image)
    assert bits.magic_number == "P1"
    assert bits.max_value is None
    assert bits.row(0) == [False, False, True, True]
    assert to_bitmap(image, threshold=1).row(0) == [False, True, True, True]


def test_color_to_bitmap_uses_luma():
    image = new_pixmap(3, 1, binary=True)
    image.set(0, 0, RGB(255, 0, 0))
    image.set(1, 0, RGB(0, 255, 0))
    image.set(2, 0, RGB(255, 255, 255))
    bits = to_bitmap(image)
    assert bits.magic_number == "P4"
    assert bits.row(0) == [False, True, True]


def test_bitmap_cannot_be_thresholded_again():
    with pytest.raises(ValueError):
        to_bitmap(new_bitmap(1, 1))
