#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import NamedTuple, Tuple

from .color import Color, RED, GREEN, BLUE, YELLOW, PURPLE, CYAN
from .math_utils import Vec3


class Triangle(NamedTuple):
    """Three indices into a mesh's vertex list plus the edge color."""
    v: Tuple[int, int, int]
    color: Color


# Unit cube, vertex order matters: triangles below index into it
CUBE_VERTICES = [
    ( 1,  1,  1),  # 0
    (-1,  1,  1),  # 1
    (-1, -1,  1),  # 2
    ( 1, -1,  1),  # 3
    ( 1,  1, -1),  # 4
    (-1,  1, -1),  # 5
    (-1, -1, -1),  # 6
    ( 1, -1, -1),  # 7
]

# Two triangles per face, one color per face
CUBE_TRIANGLES = [
    ((0, 1, 2), RED),
    ((0, 2, 3), RED),
    ((4, 0, 3), GREEN),
    ((4, 3, 7), GREEN),
    ((5, 4, 7), BLUE),
    ((5, 7, 6), BLUE),
    ((1, 5, 6), YELLOW),
    ((1, 6, 2), YELLOW),
    ((4, 5, 1), PURPLE),
    ((4, 1, 0), PURPLE),
    ((2, 6, 7), CYAN),
    ((2, 7, 3), CYAN),
]


class Mesh:
    def __init__(self, vertices=(), triangles=()):
        self.vertices = [Vec3.of(v) for v in vertices]
        self.triangles = [t if isinstance(t, Triangle) else Triangle(tuple(t[0]), t[1])
                          for t in triangles]
        self.validate()

    def validate(self):
        """Raise ValueError if any triangle references a missing vertex."""
        n = len(self.vertices)
        for i, tri in enumerate(self.triangles):
            if len(tri.v) != 3:
                raise ValueError(f"Triangle {i} has {len(tri.v)} indices, expected 3")
            for idx in tri.v:
                if not 0 <= idx < n:
                    raise ValueError(
                        f"Triangle {i} references vertex {idx}, mesh has {n} vertices")

    def translated(self, dx: float, dy: float, dz: float) -> 'Mesh':
        """New mesh with every vertex shifted; triangle topology is shared."""
        offset = Vec3(dx, dy, dz)
        return Mesh([v + offset for v in self.vertices], self.triangles)

    def scaled(self, factor: float) -> 'Mesh':
        """New mesh with every vertex scaled about the origin."""
        return Mesh([v * factor for v in self.vertices], self.triangles)

    def __repr__(self):
        return f"Mesh(vertices={len(self.vertices)}, triangles={len(self.triangles)})"

    @classmethod
    def cube(cls):
        """Factory method for the 2x2x2 demo cube with colored faces."""
        return cls(CUBE_VERTICES, CUBE_TRIANGLES)
