"""Ray data structure and secondary-ray construction.

A Ray is an origin, a unit direction and the parametric interval
[t_min, t_max] in which intersections count. Rays are immutable once
built: the constructor helpers normalize the direction and freeze both
arrays.

Secondary rays (shadow, reflection, refraction) start on a surface. To keep
them from re-intersecting the surface they leave, spawn_ray() pushes the
origin by RAY_EPSILON along the normal, on the side the ray travels toward,
and raises t_min by the same epsilon.

Example:
    >>> from src.whitted.core.ray import make_ray, ray_at
    >>> from src.whitted.core.vector import vec3
    >>> ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, 2.0))
    >>> ray_at(ray, 5.0)  # Point 5 units along the ray
    array([0., 0., 5.])
"""

import math
from dataclasses import dataclass

from src.whitted.core.vector import Vec3, dot, frozen, normalize

# Offset applied to secondary rays to avoid self-intersection
RAY_EPSILON = 1e-6

# Default far bound of the parametric interval
T_MAX = math.inf


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray with an origin point and a unit direction.

    Use make_ray(), ray_from_to() or spawn_ray() rather than the bare
    constructor: they normalize the direction and freeze the arrays.

    Attributes:
        origin: The starting point of the ray.
        direction: The unit direction of the ray.
        t_min: Intersections at t <= t_min are ignored.
        t_max: Intersections at t >= t_max are ignored.
    """

    origin: Vec3
    direction: Vec3
    t_min: float = 0.0
    t_max: float = T_MAX

    def contains(self, t: float) -> bool:
        """Check whether a parametric distance lies in the valid interval."""
        return self.t_min < t < self.t_max


def ray_at(ray: Ray, t: float) -> Vec3:
    """Compute the point along the ray at parameter t."""
    return ray.origin + t * ray.direction


def make_ray(origin: Vec3, direction: Vec3, t_min: float = 0.0, t_max: float = T_MAX) -> Ray:
    """Create a ray from an origin and a (not necessarily unit) direction.

    Raises:
        ValueError: If the direction has zero length.
    """
    return Ray(
        origin=frozen(origin),
        direction=frozen(normalize(direction)),
        t_min=t_min,
        t_max=t_max,
    )


def ray_from_to(source: Vec3, destination: Vec3) -> Ray:
    """Create a ray starting at source and aimed at destination."""
    return make_ray(source, destination - source)


def offset_origin(point: Vec3, normal: Vec3, direction: Vec3) -> Vec3:
    """Offset a surface point to avoid self-intersection.

    Pushes the point slightly along the normal in the direction the ray will
    travel (above the surface for reflection, below it for refraction).

    Args:
        point: The intersection point.
        normal: The surface normal at the point.
        direction: The direction of the ray leaving the surface.

    Returns:
        The offset origin point.
    """
    if dot(direction, normal) < 0.0:
        return point - RAY_EPSILON * normal
    return point + RAY_EPSILON * normal


def spawn_ray(point: Vec3, normal: Vec3, direction: Vec3, t_max: float = T_MAX) -> Ray:
    """Create a secondary ray leaving a surface.

    Args:
        point: The surface point the ray leaves from.
        normal: The surface normal at that point.
        direction: The ray direction (normalized here).
        t_max: Far bound, e.g. the distance to a light for shadow rays.

    Returns:
        A ray whose origin and t_min are both offset by RAY_EPSILON.
    """
    unit = normalize(direction)
    return make_ray(offset_origin(point, normal, unit), unit, RAY_EPSILON, t_max)
