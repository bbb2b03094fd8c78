#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/ppm.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .canvas import Canvas
from .color import Color

logger = logging.getLogger(__name__)

MAGIC = "P3"
MAXVAL = 255


def format_ppm(canvas: Canvas) -> str:
    """
    Serialize a canvas as plain-text PPM:
      P3 / "<w> <h>" / 255, then one "r g b" line per pixel, row-major.
    """
    lines = [MAGIC, f"{canvas.w} {canvas.h}", str(MAXVAL)]
    for row in canvas.grid:
        lines.extend(f"{c.r} {c.g} {c.b}" for c in row)
    return "\n".join(lines) + "\n"


def write_ppm(canvas: Canvas, path) -> str:
    """Write the canvas to `path`. OSError from open/write propagates."""
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(format_ppm(canvas))
    logger.info("Wrote %dx%d image to %s", canvas.w, canvas.h, path)
    return str(path)


def read_ppm(path) -> Canvas:
    """
    Load a plain-text PPM back into a Canvas.
    Only the subset written by write_ppm is supported (no comments, maxval 255).
    """
    with open(path, "r", encoding="utf-8") as f:
        tokens = f.read().split()

    if not tokens or tokens[0] != MAGIC:
        raise ValueError(f"{path}: not a P3 file")
    try:
        w, h, maxval = int(tokens[1]), int(tokens[2]), int(tokens[3])
    except (IndexError, ValueError):
        raise ValueError(f"{path}: malformed header") from None
    if maxval != MAXVAL:
        raise ValueError(f"{path}: unsupported maxval {maxval}")

    values = tokens[4:]
    if len(values) != w * h * 3:
        raise ValueError(
            f"{path}: expected {w * h} pixels, found {len(values) / 3:g}")

    canvas = Canvas(w, h)
    it = iter(int(v) for v in values)
    for y in range(h):
        row = canvas.grid[y]
        for x in range(w):
            row[x] = Color(next(it), next(it), next(it))
    return canvas
