#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3


class Camera:
    """
    Fixed pinhole camera for the PPM renderer.

    Stores the world offset applied to every vertex, the distance from the
    eye to the projection plane, and the viewport size on that plane (in
    world units).

    Projection is: translate -> perspective divide by z -> map viewport to
    canvas pixels. The canvas mapping truncates toward zero and flips y so
    that rows grow downward. Nothing guards against z == 0; geometry must
    stay in front of the camera.
    """
    __slots__ = ('translation', 'distance', 'viewport_width', 'viewport_height')

    def __init__(self, translation=(-1.5, 0.0, 7.0), distance: float = 1.0,
                 viewport_width: float = 2.0, viewport_height: float = 2.0):
        self.translation = Vec3.of(translation)  # Offset added to each vertex
        self.distance = float(distance)          # Eye to projection plane
        self.viewport_width = float(viewport_width)
        self.viewport_height = float(viewport_height)

    def translate(self, v: Vec3) -> Vec3:
        return Vec3.of(v) + self.translation

    def project_to_viewport(self, v: Vec3):
        """Perspective-divide a vertex into viewport coordinates (px, py)."""
        vt = self.translate(v)
        d = self.distance
        return vt.x * d / vt.z, vt.y * d / vt.z

    def viewport_to_canvas(self, px: float, py: float, canvas_width: int, canvas_height: int):
        vw, vh = self.viewport_width, self.viewport_height
        cx = int((px + vw / 2) * (canvas_width / vw))
        cy = int((vh / 2 - py) * (canvas_height / vh))  # y axis flipped
        return cx, cy

    def project_vertex(self, v: Vec3, canvas_width: int, canvas_height: int):
        """Project a vertex straight to an integer (x, y) pixel point. No clamping."""
        px, py = self.project_to_viewport(v)
        return self.viewport_to_canvas(px, py, canvas_width, canvas_height)
