#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .mesh import Mesh


class Scene:
    """
    Ordered container of meshes.

    Meshes are rendered in insertion order into one canvas, so where
    edges overlap the later mesh wins.
    """

    def __init__(self, meshes=()):
        self.objects = list(meshes)  # list of Mesh

    def add(self, mesh: Mesh) -> Mesh:
        """Append a mesh and return it."""
        self.objects.append(mesh)
        return mesh

    def clear(self):
        """Remove all objects from the scene."""
        self.objects.clear()

    def __len__(self):
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)
