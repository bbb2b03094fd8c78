#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass
from typing import Tuple

from .canvas import Canvas
from .camera import Camera
from .color import Color, WHITE


@dataclass
class RenderConfig:
    """Fixed parameters of the demo render."""
    canvas_width: int = 400
    canvas_height: int = 400
    viewport_width: float = 2.0
    viewport_height: float = 2.0
    distance: float = 1.0
    translation: Tuple[float, float, float] = (-1.5, 0.0, 7.0)
    background: Color = WHITE
    output: str = "output.ppm"

    def __post_init__(self):
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.canvas_width}x{self.canvas_height}")
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ValueError(
                f"Viewport size must be positive, got {self.viewport_width}x{self.viewport_height}")
        if self.distance <= 0:
            raise ValueError(f"Camera distance must be positive, got {self.distance}")
        if len(self.translation) != 3:
            raise ValueError(f"Translation must be (x, y, z), got {self.translation!r}")

    def make_canvas(self) -> Canvas:
        return Canvas(self.canvas_width, self.canvas_height, self.background)

    def make_camera(self) -> Camera:
        return Camera(translation=self.translation,
                      distance=self.distance,
                      viewport_width=self.viewport_width,
                      viewport_height=self.viewport_height)
