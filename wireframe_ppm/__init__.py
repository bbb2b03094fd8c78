#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3
from .color import Color
from .config import RenderConfig
from .canvas import Canvas
from .mesh import Mesh, Triangle
from .camera import Camera
from .scene import Scene
from .renderer import Renderer
from .rasterizer import interpolate, draw_line, draw_wireframe_triangle
from .ppm import format_ppm, write_ppm, read_ppm
