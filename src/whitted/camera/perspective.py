"""Perspective camera.

All primary rays start at a single eye point behind the screen and pass
through the screen. The eye sits on the view axis at the distance where
the screen's height subtends twice the camera's half-angle:

    eye = screen_center - height / (2 * tan(angle)) * axis_z

Example:
    >>> from src.whitted.camera.perspective import PerspectiveCamera
    >>> from src.whitted.core.vector import vec3
    >>> camera = PerspectiveCamera(
    ...     screen_center=vec3(0.0, 10.0, -10.0),
    ...     look_at=vec3(0.0, 0.0, 30.0),
    ...     width=32.0,
    ...     height=18.0,
    ... )
    >>> ray = camera.generate_ray(0.5, 0.5)  # Ray through the screen center
"""

import math
from dataclasses import dataclass
from functools import cached_property

from src.whitted.camera.base import Camera
from src.whitted.core.ray import Ray, ray_from_to
from src.whitted.core.vector import Vec3, frozen


@dataclass(frozen=True, eq=False)
class PerspectiveCamera(Camera):
    """A pinhole camera with its eye behind the screen.

    Attributes:
        angle: Half-angle in degrees between the view axis and the top of
            the screen as seen from the eye, in (0, 90).
    """

    angle: float = 22.5

    kind = "perspective camera"

    @cached_property
    def eye(self) -> Vec3:
        """The common origin of all primary rays."""
        _, _, axis_z = self.basis
        distance = self.height / (2.0 * math.tan(math.radians(self.angle)))
        return frozen(self.screen_center - distance * axis_z)

    def validate(self) -> None:
        super().validate()
        if not 0.0 < self.angle < 90.0:
            raise ValueError(f"camera angle must be in (0, 90) degrees, got {self.angle}")

    def generate_ray(self, canvas_x: float, canvas_y: float) -> Ray:
        return ray_from_to(self.eye, self.screen_point(canvas_x, canvas_y))
