"""Orthogonal (parallel projection) camera.

Every primary ray starts on the screen itself and travels along the view
axis, so objects keep their size regardless of distance.
"""

from dataclasses import dataclass

from src.whitted.camera.base import Camera
from src.whitted.core.ray import Ray, make_ray


@dataclass(frozen=True, eq=False)
class OrthogonalCamera(Camera):
    """A camera whose rays are all parallel to the view axis."""

    kind = "orthogonal camera"

    def generate_ray(self, canvas_x: float, canvas_y: float) -> Ray:
        _, _, axis_z = self.basis
        return make_ray(self.screen_point(canvas_x, canvas_y), axis_z)
