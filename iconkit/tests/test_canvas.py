"""Tests for render/canvas: pixel buffer, masks, circles, lines."""

import pytest

from iconkit.render.canvas import (
    Canvas,
    draw_circle,
    draw_line,
    fill_gradient,
    gradient_color,
    in_circle,
    in_rounded_rect,
    lerp,
    line_points,
    round_half_up,
)

RED = (255, 0, 0)
TOP = (11, 18, 32)
BOTTOM = (17, 24, 39)


def test_canvas_starts_transparent():
    c = Canvas(4, 3)
    assert len(c.pixels) == 4 * 3 * 4
    assert all(b == 0 for b in c.pixels)


def test_canvas_rejects_non_positive_size():
    with pytest.raises(ValueError):
        Canvas(0, 4)
    with pytest.raises(ValueError):
        Canvas(4, -1)


def test_set_pixel_writes_opaque_rgba():
    c = Canvas(4, 4)
    c.set_pixel(1, 2, RED)
    assert c.get_pixel(1, 2) == (255, 0, 0, 255)
    assert c.get_pixel(2, 1) == (0, 0, 0, 0)


def test_set_pixel_out_of_bounds_is_clipped():
    c = Canvas(4, 4)
    for x, y in [(-1, 0), (0, -1), (4, 0), (0, 4), (100, 100)]:
        c.set_pixel(x, y, RED)
    assert len(c.pixels) == 64
    assert all(b == 0 for b in c.pixels)


def test_get_pixel_out_of_bounds_raises():
    with pytest.raises(IndexError):
        Canvas(2, 2).get_pixel(2, 0)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(10.5) == 11
    assert round_half_up(0.4) == 0
    assert round_half_up(7.04) == 7


def test_lerp_endpoints_exact():
    assert lerp(11, 17, 0) == 11
    assert lerp(11, 17, 1) == 17
    assert gradient_color(TOP, BOTTOM, 0.0) == TOP
    assert gradient_color(TOP, BOTTOM, 1.0) == BOTTOM


def test_gradient_monotonic_and_bounded():
    prev = TOP
    for y in range(32):
        color = gradient_color(TOP, BOTTOM, y / 31)
        for ch in range(3):
            assert TOP[ch] <= color[ch] <= BOTTOM[ch]
            assert color[ch] >= prev[ch]
        prev = color


def test_in_rounded_rect_corners_and_bands():
    assert in_rounded_rect(0, 0, 32, 7) is False
    assert in_rounded_rect(31, 31, 32, 7) is False
    assert in_rounded_rect(16, 0, 32, 7) is True
    assert in_rounded_rect(0, 16, 32, 7) is True
    assert in_rounded_rect(7, 7, 32, 7) is True
    # corner circle centered at (7, 7): (2, 2) is 5*sqrt(2) > 7 away
    assert in_rounded_rect(2, 2, 32, 7) is False
    assert in_rounded_rect(3, 3, 32, 7) is True


def test_in_circle_symmetric_and_reflexive():
    assert in_circle(0, 0, 0)
    assert in_circle(0, 0, 3)
    for r in (1, 2, 3, 5):
        for dx in range(-6, 7):
            for dy in range(-6, 7):
                assert in_circle(dx, dy, r) == in_circle(-dx, -dy, r)


def test_draw_circle_pixels():
    c = Canvas(11, 11)
    draw_circle(c, 5, 5, 2, RED)
    assert c.get_pixel(5, 5)[3] == 255
    assert c.get_pixel(5, 3)[3] == 255
    assert c.get_pixel(7, 5)[3] == 255
    assert c.get_pixel(6, 6)[3] == 255
    assert c.get_pixel(5, 2)[3] == 0
    assert c.get_pixel(7, 7)[3] == 0


def test_draw_circle_clips_at_edges():
    c = Canvas(4, 4)
    draw_circle(c, 0, 0, 3, RED)
    assert c.get_pixel(0, 0) == (255, 0, 0, 255)
    assert len(c.pixels) == 64


def test_line_points_horizontal_and_diagonal():
    assert line_points(0, 0, 3, 0) == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert line_points(0, 0, 2, 2) == [(0, 0), (1, 1), (2, 2)]
    assert line_points(2, 2, 0, 0) == [(2, 2), (1, 1), (0, 0)]
    assert line_points(3, 3, 3, 3) == [(3, 3)]


def test_line_points_reach_endpoint_steep():
    pts = line_points(1, 0, 3, 7)
    assert pts[0] == (1, 0)
    assert pts[-1] == (3, 7)
    assert len(pts) == 8


def test_draw_line_is_idempotent():
    c = Canvas(16, 16)
    draw_line(c, 2, 3, 12, 9, 3, RED)
    once = bytes(c.pixels)
    draw_line(c, 2, 3, 12, 9, 3, RED)
    assert bytes(c.pixels) == once


def test_draw_line_thin_radius_floors_at_one():
    c = Canvas(8, 8)
    draw_line(c, 4, 4, 4, 4, 1, RED)
    # radius 1 stamp: center plus 4-neighbours
    assert c.get_pixel(4, 4)[3] == 255
    assert c.get_pixel(4, 3)[3] == 255
    assert c.get_pixel(5, 4)[3] == 255
    assert c.get_pixel(5, 5)[3] == 0


def test_fill_gradient_masks_corners():
    c = Canvas(32, 32)
    fill_gradient(c, TOP, BOTTOM, 7)
    assert c.get_pixel(0, 0) == (0, 0, 0, 0)
    assert c.get_pixel(16, 0) == TOP + (255,)
    assert c.get_pixel(16, 31) == BOTTOM + (255,)


def test_fill_gradient_single_pixel():
    c = Canvas(1, 1)
    fill_gradient(c, TOP, BOTTOM, 0)
    assert c.get_pixel(0, 0) == TOP + (255,)
