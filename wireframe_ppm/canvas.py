#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .color import Color, WHITE


class Canvas:
    """
    Fixed-size RGB frame buffer.

    Cells are stored row-major, origin top-left: grid[y][x].
    set_pixel() is the only write path and silently drops writes that
    fall outside the grid.
    """
    __slots__ = ['w', 'h', 'background', 'grid']

    def __init__(self, w: int, h: int, background: Color = WHITE):
        if w <= 0 or h <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {w}x{h}")
        self.w, self.h = w, h
        self.background = background
        self.grid = []
        self.clear()

    @property
    def width(self) -> int:
        return self.w

    @property
    def height(self) -> int:
        return self.h

    def clear(self, background: Color = None):
        """Refill every cell with the background color."""
        if background is not None:
            self.background = background
        bg = self.background
        self.grid = [[bg] * self.w for _ in range(self.h)]

    def set_pixel(self, x: int, y: int, color: Color):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        self.grid[y][x] = color

    def get_pixel(self, x: int, y: int) -> Color:
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            raise IndexError(f"Pixel ({x}, {y}) outside {self.w}x{self.h} canvas")
        return self.grid[y][x]

    def rows(self):
        """Yield rows top to bottom, each a tuple of Colors."""
        for row in self.grid:
            yield tuple(row)

    def colors(self) -> set:
        """Distinct colors currently present on the canvas."""
        found = set()
        for row in self.grid:
            found.update(row)
        return found
