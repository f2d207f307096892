"""Screen geometry shared by all camera models.

A camera is described by a rectangular screen in world space: its center,
the point it looks at, its width and height, and an up hint. From these
the camera builds an orthonormal basis:
- axis_z: forward, from the screen center toward look_at
- axis_y: up, the up hint with its forward component removed
- axis_x: across the screen, cross(axis_y, axis_z)

Canvas coordinates are normalized to [0, 1]:
- canvas_x = 0: left edge, 1: right edge
- canvas_y = 0: top edge, 1: bottom edge

Subclasses decide where primary rays start and which way they travel.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import cached_property

from src.whitted.core.ray import Ray
from src.whitted.core.vector import (
    Vec3,
    cross,
    dot,
    frozen,
    near_zero,
    normalize,
    vec3,
)


@dataclass(frozen=True, eq=False)
class Camera(ABC):
    """Base class for cameras.

    Attributes:
        screen_center: Center of the screen rectangle in world space.
        look_at: Point the camera faces.
        width: Screen width in world units.
        height: Screen height in world units.
        up: Approximate up direction (default +Y).
        description: Label used in validation errors.
    """

    screen_center: Vec3
    look_at: Vec3
    width: float
    height: float
    up: Vec3 = field(default_factory=lambda: vec3(0.0, 1.0, 0.0))
    description: str = ""

    kind = "camera"

    def __post_init__(self):
        object.__setattr__(self, "screen_center", frozen(self.screen_center))
        object.__setattr__(self, "look_at", frozen(self.look_at))
        object.__setattr__(self, "up", frozen(self.up))

    @cached_property
    def basis(self) -> tuple[Vec3, Vec3, Vec3]:
        """The (axis_x, axis_y, axis_z) orthonormal basis of the screen."""
        axis_z = normalize(self.look_at - self.screen_center)
        # Gram-Schmidt: remove the forward component from the up hint
        axis_y = normalize(self.up - dot(self.up, axis_z) * axis_z)
        axis_x = cross(axis_y, axis_z)
        return frozen(axis_x), frozen(axis_y), frozen(axis_z)

    def validate(self) -> None:
        """Check the screen geometry.

        Raises:
            ValueError: With a short reason if the camera is degenerate.
        """
        if not self.width > 0.0:
            raise ValueError(f"camera width must be > 0, got {self.width}")
        if not self.height > 0.0:
            raise ValueError(f"camera height must be > 0, got {self.height}")
        if near_zero(self.look_at - self.screen_center):
            raise ValueError("camera look_at must differ from screen_center")
        forward = normalize(self.look_at - self.screen_center)
        if near_zero(self.up - dot(self.up, forward) * forward):
            raise ValueError("camera up must not be parallel to the view direction")

    def screen_point(self, canvas_x: float, canvas_y: float) -> Vec3:
        """Map normalized canvas coordinates to a point on the screen.

        Raises:
            ValueError: If either coordinate lies outside [0, 1].
        """
        if not (0.0 <= canvas_x <= 1.0 and 0.0 <= canvas_y <= 1.0):
            raise ValueError(
                f"canvas coordinates must be in [0, 1], got ({canvas_x}, {canvas_y})"
            )
        axis_x, axis_y, _ = self.basis
        top_left = self.screen_center - (self.width / 2.0) * axis_x + (self.height / 2.0) * axis_y
        return top_left + (canvas_x * self.width) * axis_x - (canvas_y * self.height) * axis_y

    @abstractmethod
    def generate_ray(self, canvas_x: float, canvas_y: float) -> Ray:
        """Produce the primary ray through a canvas position."""
