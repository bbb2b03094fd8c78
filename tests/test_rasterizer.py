import pytest

from wireframe_ppm.canvas import Canvas
from wireframe_ppm.color import Color, WHITE, RED, BLUE
import numpy as np

from wireframe_ppm.rasterizer import (
    interpolate, interpolate_f32, round_half_away, draw_line, draw_wireframe_triangle,
)


def painted(canvas, color=RED):
    return {(x, y) for y in range(canvas.h) for x in range(canvas.w)
            if canvas.get_pixel(x, y) == color}


class RecordingCanvas(Canvas):
    """Canvas that also logs every set_pixel call, in order."""
    __slots__ = ['writes']

    def __init__(self, w, h):
        super().__init__(w, h)
        self.writes = []

    def set_pixel(self, x, y, color):
        self.writes.append((x, y, color))
        super().set_pixel(x, y, color)


def test_interpolate_single_sample():
    assert interpolate(4, 2.5, 4, 99.0) == [2.5]


def test_interpolate_length_and_endpoints():
    vals = interpolate(0, 0.0, 10, 5.0)
    assert len(vals) == 11
    assert vals[0] == 0.0
    assert vals[-1] == pytest.approx(5.0)
    assert vals[5] == 2.5


def test_interpolate_decreasing_is_monotonic():
    vals = interpolate(3, 10.0, 9, -2.0)
    assert len(vals) == 7
    assert all(b < a for a, b in zip(vals, vals[1:]))
    assert vals[-1] == pytest.approx(-2.0)


def test_interpolate_constant():
    assert interpolate(0, 7, 3, 7) == [7, 7, 7, 7]


def test_interpolate_empty_when_reversed():
    assert interpolate(5, 0.0, 2, 1.0) == []


def test_round_half_away_from_zero():
    assert round_half_away(0.5) == 1
    assert round_half_away(2.5) == 3
    assert round_half_away(-0.5) == -1
    assert round_half_away(-2.5) == -3
    assert round_half_away(1.49) == 1
    assert round_half_away(-1.49) == -1
    assert round_half_away(3.0) == 3


def test_round_half_away_just_below_half():
    assert round_half_away(0.49999999999999994) == 0
    assert round_half_away(-0.49999999999999994) == 0
    assert round_half_away(2.4999999999999996) == 2


def test_interpolate_f32_accumulates_in_single_precision():
    vals = interpolate_f32(0, 0, 3, 1)
    assert len(vals) == 4
    assert vals[0] == 0.0
    assert all(v == float(np.float32(v)) for v in vals)
    assert vals[-1] == pytest.approx(1.0, abs=1e-6)
    assert interpolate_f32(2, 7, 2, 9) == [7.0]
    assert interpolate_f32(5, 0, 2, 1) == []


def test_horizontal_line_no_gaps():
    canvas = Canvas(20, 20)
    draw_line(canvas, (0, 0), (10, 0), RED)
    assert painted(canvas) == {(x, 0) for x in range(11)}


def test_vertical_line_no_gaps():
    canvas = Canvas(20, 20)
    draw_line(canvas, (0, 0), (0, 10), RED)
    assert painted(canvas) == {(0, y) for y in range(11)}


def test_steep_line_one_write_per_row():
    canvas = RecordingCanvas(20, 20)
    draw_line(canvas, (0, 0), (5, 10), RED)
    assert len(canvas.writes) == 11
    assert [y for _, y, _ in canvas.writes] == list(range(11))
    # x(1) = 0.5 and x(5) = 2.5 must round up, not to even
    assert (1, 1, RED) in canvas.writes
    assert (3, 5, RED) in canvas.writes
    assert canvas.writes[-1] == (5, 10, RED)


def test_reversed_endpoints_draw_same_pixels():
    a = Canvas(30, 30)
    b = Canvas(30, 30)
    draw_line(a, (2, 3), (25, 17), RED)
    draw_line(b, (25, 17), (2, 3), RED)
    assert painted(a) == painted(b)

    a.clear()
    b.clear()
    draw_line(a, (4, 1), (9, 28), RED)
    draw_line(b, (9, 28), (4, 1), RED)
    assert painted(a) == painted(b)


def test_diagonal_steps_along_x():
    canvas = RecordingCanvas(10, 10)
    draw_line(canvas, (0, 0), (4, 4), RED)
    assert [(x, y) for x, y, _ in canvas.writes] == [(i, i) for i in range(5)]


def test_degenerate_line_is_single_pixel():
    canvas = RecordingCanvas(10, 10)
    draw_line(canvas, (3, 3), (3, 3), RED)
    assert canvas.writes == [(3, 3, RED)]


def test_line_partially_off_canvas_is_clipped():
    canvas = Canvas(10, 10)
    draw_line(canvas, (-5, 2), (15, 2), RED)
    assert painted(canvas) == {(x, 2) for x in range(10)}


def test_wireframe_triangle_edge_order():
    canvas = RecordingCanvas(20, 20)
    draw_wireframe_triangle(canvas, (0, 0), (10, 0), (0, 10), BLUE)
    pts = [(x, y) for x, y, _ in canvas.writes]
    # p0->p1 horizontal, then p1->p2 diagonal, then p2->p0 vertical (drawn upward-sorted)
    assert pts[:11] == [(x, 0) for x in range(11)]
    assert pts[11] == (0, 10)
    assert pts[-11:] == [(0, y) for y in range(11)]
    assert len(pts) == 33


def test_wireframe_triangle_is_not_filled():
    canvas = Canvas(20, 20)
    draw_wireframe_triangle(canvas, (0, 0), (12, 0), (0, 12), BLUE)
    assert canvas.get_pixel(3, 3) == WHITE
