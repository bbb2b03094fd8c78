#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

import numpy as np

from .canvas import Canvas


def interpolate(i0: int, d0: float, i1: int, d1: float) -> list:
    """
    Linearly interpolates a dependent value d over the integer range [i0, i1].

    Returns one float per integer step, so len == i1 - i0 + 1.
    i0 == i1 yields [d0]; i1 < i0 yields an empty list.
    """
    if i0 == i1:
        return [float(d0)]
    n = i1 - i0
    # Multiply before dividing so the last element lands exactly on d1
    return [d0 + (k * (d1 - d0)) / n for k in range(n + 1)]


def interpolate_f32(i0: int, d0: float, i1: int, d1: float) -> list:
    """
    Single-precision variant of interpolate() used for rasterization.

    The value starts at d0 and a float32 step is added once per integer
    sample, with every intermediate held in float32. Ties at .5 therefore
    land exactly where a float-accumulating C rasterizer puts them.
    """
    if i0 == i1:
        return [float(d0)]
    if i1 < i0:
        return []
    step = (np.float32(d1) - np.float32(d0)) / np.float32(i1 - i0)
    val = np.float32(d0)
    values = []
    for _ in range(i1 - i0 + 1):
        values.append(float(val))
        val = np.float32(val + step)
    return values


def round_half_away(value: float) -> int:
    """Round to nearest int, halves away from zero (C round(), not banker's)."""
    a = abs(value)
    f = math.floor(a)
    # a - f is exact, so 0.49999999999999994 stays below the tie
    if a - f >= 0.5:
        f += 1
    return int(math.copysign(f, value))


def draw_line(canvas: Canvas, p0, p1, color):
    """
    Draws a line between two pixel points by interpolating along the
    dominant axis. Every integer step on that axis gets exactly one pixel.
    """
    x0, y0 = p0
    x1, y1 = p1

    dx = x1 - x0
    dy = y1 - y0

    if abs(dx) >= abs(dy):
        # Mostly horizontal (or exact 45°): step along x
        if x0 > x1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        ys = interpolate_f32(x0, y0, x1, y1)
        for x in range(x0, x1 + 1):
            canvas.set_pixel(x, round_half_away(ys[x - x0]), color)
    else:
        # Steep: step along y
        if y0 > y1:
            x0, y0, x1, y1 = x1, y1, x0, y0
        xs = interpolate_f32(y0, x0, y1, x1)
        for y in range(y0, y1 + 1):
            canvas.set_pixel(round_half_away(xs[y - y0]), y, color)


def draw_wireframe_triangle(canvas: Canvas, p0, p1, p2, color):
    """Outlines a triangle: edges p0-p1, p1-p2, p2-p0, in that order."""
    draw_line(canvas, p0, p1, color)
    draw_line(canvas, p1, p2, color)
    draw_line(canvas, p2, p0, color)
