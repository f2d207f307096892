"""Sphere primitive with robust ray-sphere intersection.

This module provides a Sphere shape whose intersection uses the robust
quadratic formula from Ray Tracing Gems to avoid floating-point artifacts.

The robust quadratic formula avoids catastrophic cancellation when b^2 is
nearly equal to 4ac by using a reformulated calculation that maintains
numerical stability.

Example:
    >>> from src.whitted.core.ray import make_ray
    >>> from src.whitted.core.vector import vec3
    >>> from src.whitted.geometry.sphere import Sphere
    >>> sphere = Sphere(center=vec3(0.0, 0.0, 0.0), radius=1.0)
    >>> sphere.intersect(make_ray(vec3(0.0, 0.0, -2.0), vec3(0.0, 0.0, 1.0)))
    1.0
"""

import math
from dataclasses import dataclass

from src.whitted.core.ray import Ray
from src.whitted.core.vector import Vec3, dot, frozen
from src.whitted.geometry.shape import Shape


def _solve_quadratic_robust(h: float, a: float, c: float, sqrt_d: float) -> tuple[float, float]:
    """Solve quadratic equation using robust formula from Ray Tracing Gems.

    Solves a*t^2 + 2*h*t + c = 0 using a numerically stable method.

    Args:
        h: Half of the linear coefficient.
        a: Quadratic coefficient.
        c: Constant term.
        sqrt_d: Square root of discriminant (h^2 - a*c).

    Returns:
        Tuple of (t0, t1) where t0 <= t1.
    """
    # Robust quadratic formula: use sign of h to avoid catastrophic cancellation
    # q = -(h + sign(h) * sqrt(discriminant))
    sign_h = -1.0 if h < 0.0 else 1.0
    q = -(h + sign_h * sqrt_d)

    if abs(q) < 1e-10:
        # Fall back to standard formula for tangent rays
        t0 = (-h - sqrt_d) / a
        t1 = (-h + sqrt_d) / a
    else:
        t0 = q / a
        t1 = c / q

    if t0 > t1:
        t0, t1 = t1, t0
    return t0, t1


@dataclass(frozen=True, eq=False)
class Sphere(Shape):
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (must be positive).
    """

    center: Vec3
    radius: float

    kind = "sphere"

    def __post_init__(self):
        object.__setattr__(self, "center", frozen(self.center))

    def validate(self) -> None:
        if not self.radius > 0.0:
            raise ValueError(f"sphere radius must be > 0, got {self.radius}")

    def intersect(self, ray: Ray) -> float | None:
        """Test for ray-sphere intersection.

        The ray-sphere intersection is found by solving:
            |origin + t * direction - center|^2 = radius^2

        Expanding and rearranging gives the quadratic equation:
            a*t^2 + 2*h*t + c = 0

        where:
            a = dot(direction, direction)
            h = dot(direction, oc)  (half of traditional b)
            c = dot(oc, oc) - radius^2
            oc = origin - center

        Args:
            ray: The ray to test.

        Returns:
            The nearer root inside (t_min, t_max), the farther root when the
            ray starts inside the sphere, or None.
        """
        oc = ray.origin - self.center

        a = dot(ray.direction, ray.direction)
        h = dot(ray.direction, oc)
        c = dot(oc, oc) - self.radius * self.radius

        discriminant = h * h - a * c
        if discriminant < 0.0:
            return None

        t0, t1 = _solve_quadratic_robust(h, a, c, math.sqrt(discriminant))

        # First valid intersection in (t_min, t_max)
        if ray.contains(t0):
            return t0
        if ray.contains(t1):
            return t1
        return None

    def normal_at(self, point: Vec3) -> Vec3:
        # Outward normal: points from center to hit point
        return (point - self.center) / self.radius
