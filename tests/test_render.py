import pytest

from wirefdf.geometry import Grid
from wirefdf.image import Image
from wirefdf.mapfile import Point
from wirefdf.render import clear, color_gradient, draw_frame, draw_grid, draw_line


def _point(px, py, color=0xFF):
    p = Point(x=0, y=0, z=0, color=color)
    p.px, p.py = px, py
    return p


def test_gradient_same_colors():
    assert color_gradient(0x123456, 0x123456, 10, 3) == 0x123456


def test_gradient_endpoints():
    assert color_gradient(0xFF0000, 0x0000FF, 8, 0) == 0xFF0000
    assert color_gradient(0xFF0000, 0x0000FF, 8, 8) == 0x0000FF


def test_gradient_midpoint_truncates():
    assert color_gradient(0x000000, 0x0000FF, 2, 1) == 127


def test_gradient_channels_stay_between_endpoints():
    start, end = 0x204080, 0x80FF10
    for step in range(11):
        c = color_gradient(start, end, 10, step)
        for shift in (16, 8, 0):
            a, b, v = (start >> shift) & 0xFF, (end >> shift) & 0xFF, (c >> shift) & 0xFF
            assert min(a, b) <= v <= max(a, b)


def test_horizontal_line_stops_before_end():
    image = Image(10, 10)
    draw_line(image, _point(1, 5), _point(5, 5))
    assert [image.get_pixel(x, 5) for x in range(1, 5)] == [0xFF] * 4
    assert image.get_pixel(5, 5) == 0
    assert image.get_pixel(0, 5) == 0


def test_vertical_line_upwards():
    image = Image(10, 10)
    draw_line(image, _point(3, 8), _point(3, 2))
    assert all(image.get_pixel(3, y) == 0xFF for y in range(3, 9))
    assert image.get_pixel(3, 2) == 0


def test_line_out_of_bounds_draws_nothing():
    image = Image(10, 10)
    draw_line(image, _point(-3, 5), _point(5, 5))
    assert image.data == bytearray(len(image.data))


def test_clear_blacks_out_image():
    image = Image(4, 3)
    image.fill(0xABCDEF)
    clear(image)
    assert all(image.get_pixel(x, y) == 0 for x in range(4) for y in range(3))


def test_draw_grid_plots_point():
    grid = Grid([[Point(x=0, y=0, z=0, color=0x112233)]], 10, 10)
    grid.points[0][0].px, grid.points[0][0].py = 4, 6
    image = Image(10, 10)
    draw_grid(image, grid)
    assert image.get_pixel(4, 6) == 0x112233


def test_draw_frame_single_point_at_center():
    grid = Grid([[Point(x=0, y=0, z=0)]], 20, 10)
    image = Image(20, 10)
    image.fill(0xFFFFFF)
    result = draw_frame(image, grid)
    assert result is image
    assert image.get_pixel(10, 5) == 0x33FF33
    assert image.get_pixel(0, 0) == 0


def test_draw_frame_connects_neighbours():
    grid = Grid([[Point(x=j, y=0, z=0) for j in range(2)]], 40, 40)
    grid.flatten()
    image = Image(40, 40)
    draw_frame(image, grid)
    a, b = grid.points[0]
    row = round(a.py)
    lit = [x for x in range(40) if image.get_pixel(x, row)]
    assert lit[0] == round(a.px)
    assert lit[-1] == round(b.px)
    assert len(lit) == lit[-1] - lit[0] + 1


def test_gradient_zero_length_raises():
    with pytest.raises(ZeroDivisionError):
        color_gradient(0x000000, 0xFFFFFF, 0, 0)