#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .canvas import Canvas
from .camera import Camera
from .mesh import Mesh
from .scene import Scene
from .rasterizer import draw_wireframe_triangle

logger = logging.getLogger(__name__)


class Renderer:
    """
    Wireframe object renderer.

    render(canvas, scene) draws every mesh of the scene into the canvas.
    The only state held between calls is the camera.

    Pipeline per object:
      1. Project each vertex once into pixel space (cached by index)
      2. Outline each triangle from the cached points in its face color
    """

    def __init__(self, camera: Camera = None):
        self.camera = camera if camera is not None else Camera()

    def render_object(self, canvas: Canvas, vertices, triangles):
        camera = self.camera
        w, h = canvas.w, canvas.h

        # One projection per vertex, indexed like `vertices`
        proj_v = [camera.project_vertex(v, w, h) for v in vertices]

        for tri in triangles:
            i0, i1, i2 = tri.v
            draw_wireframe_triangle(canvas, proj_v[i0], proj_v[i1], proj_v[i2], tri.color)

        logger.debug("Rendered object: %d vertices, %d triangles",
                     len(vertices), len(triangles))

    def render_mesh(self, canvas: Canvas, mesh: Mesh):
        self.render_object(canvas, mesh.vertices, mesh.triangles)

    def render(self, canvas: Canvas, scene: Scene):
        """Composite every mesh of the scene, in order, into the canvas."""
        for mesh in scene:
            self.render_mesh(canvas, mesh)
