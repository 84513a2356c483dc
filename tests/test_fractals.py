from netpbmkit import (
    draw_koch_curve,
    draw_koch_snowflake,
    draw_line,
    draw_sierpinski_triangle,
    new_bitmap,
)


def test_koch_depth_zero_is_a_straight_line():
    curve = new_bitmap(40, 40)
    line = new_bitmap(40, 40)
    draw_koch_curve(curve, 0, (1, 5), (30, 22), True)
    draw_line(line, (1, 5), (30, 22), True)
    assert curve == line


def test_koch_depth_one_raises_a_bump_on_the_middle_third():
    image = new_bitmap(30, 30)
    draw_koch_curve(image, 1, (0, 20), (27, 20), True)
    assert image.at(0, 20) and image.at(9, 20)
    assert image.at(18, 20) and image.at(27, 20)
    assert image.at(14, 12)
    assert not image.at(13, 20)


def test_negative_depth_behaves_like_zero():
    curve = new_bitmap(20, 20)
    line = new_bitmap(20, 20)
    draw_koch_curve(curve, -2, (0, 0), (19, 19), True)
    draw_line(line, (0, 0), (19, 19), True)
    assert curve == line


def test_koch_snowflake_bumps_point_outward():
    image = new_bitmap(100, 100)
    draw_koch_snowflake(image, 1, (20, 30), 54, True)
    assert image.at(20, 30) and image.at(74, 30)
    assert image.at(47, 14)
    assert not image.at(47, 40)


def test_sierpinski_depth_zero_is_one_triangle():
    image = new_bitmap(60, 60)
    draw_sierpinski_triangle(image, 0, (10, 50), 40, True)
    assert image.at(10, 50) and image.at(50, 50) and image.at(30, 15)
    assert not image.at(30, 40)


def test_sierpinski_depth_one_adds_the_inner_vertices():
    image = new_bitmap(60, 60)
    draw_sierpinski_triangle(image, 1, (10, 50), 40, True)
    assert image.at(10, 50) and image.at(30, 50) and image.at(50, 50)
    assert image.at(20, 33) and image.at(40, 33)
    assert image.at(30, 15)
