"""Planar primitives: the bounded square Plane and the InfinitePlane.

Both shapes use the parametric plane test:
1. Find where the ray meets the plane through `center` with normal `normal`
2. For the bounded Plane, check that the hit point lies within the square

The square's in-plane axes come from an orthonormal basis built around its
normal, so a Plane is fully described by its center, its normal and the
length of one side.

Example:
    >>> from src.whitted.core.ray import make_ray
    >>> from src.whitted.core.vector import vec3
    >>> from src.whitted.geometry.plane import InfinitePlane
    >>> floor = InfinitePlane(center=vec3(0.0, -1.0, 0.0), normal=vec3(0.0, 1.0, 0.0))
    >>> floor.intersect(make_ray(vec3(0.0, 1.0, 0.0), vec3(0.0, -1.0, 0.0)))
    2.0
"""

from dataclasses import dataclass
from functools import cached_property

from src.whitted.core.ray import Ray
from src.whitted.core.vector import (
    Vec3,
    build_onb_from_normal,
    dot,
    frozen,
    near_zero,
    normalize,
)
from src.whitted.geometry.shape import Shape

# Below this |N . D| a ray is treated as parallel to the plane
PARALLEL_EPSILON = 1e-9


def _intersect_plane(ray: Ray, center: Vec3, normal: Vec3) -> float | None:
    """Compute the parametric distance to an unbounded plane.

    Solves dot(normal, origin + t * direction - center) = 0 for t.

    Returns:
        t inside the ray's interval, or None for a parallel or out-of-range hit.
    """
    denom = dot(normal, ray.direction)
    if abs(denom) < PARALLEL_EPSILON:
        return None
    t = dot(normal, center - ray.origin) / denom
    return t if ray.contains(t) else None


@dataclass(frozen=True, eq=False)
class InfinitePlane(Shape):
    """An unbounded plane through a point.

    Attributes:
        center: Any point on the plane.
        normal: The plane normal (normalized on use; must be non-zero).
    """

    center: Vec3
    normal: Vec3

    kind = "infinite plane"

    def __post_init__(self):
        object.__setattr__(self, "center", frozen(self.center))
        object.__setattr__(self, "normal", frozen(self.normal))

    @cached_property
    def unit_normal(self) -> Vec3:
        return frozen(normalize(self.normal))

    def validate(self) -> None:
        if near_zero(self.normal):
            raise ValueError("plane normal must be non-zero")

    def intersect(self, ray: Ray) -> float | None:
        return _intersect_plane(ray, self.center, self.unit_normal)

    def normal_at(self, point: Vec3) -> Vec3:
        return self.unit_normal


@dataclass(frozen=True, eq=False)
class Plane(Shape):
    """A square of side `width` centered on a point.

    Attributes:
        center: The center of the square.
        normal: The square's normal (normalized on use; must be non-zero).
        width: Side length of the square (must be positive).
    """

    center: Vec3
    normal: Vec3
    width: float

    kind = "plane"

    def __post_init__(self):
        object.__setattr__(self, "center", frozen(self.center))
        object.__setattr__(self, "normal", frozen(self.normal))

    @cached_property
    def unit_normal(self) -> Vec3:
        return frozen(normalize(self.normal))

    @cached_property
    def axes(self) -> tuple[Vec3, Vec3]:
        """In-plane (tangent, bitangent) axes of the square."""
        tangent, bitangent = build_onb_from_normal(self.unit_normal)
        return frozen(tangent), frozen(bitangent)

    def validate(self) -> None:
        if near_zero(self.normal):
            raise ValueError("plane normal must be non-zero")
        if not self.width > 0.0:
            raise ValueError(f"plane width must be > 0, got {self.width}")

    def intersect(self, ray: Ray) -> float | None:
        t = _intersect_plane(ray, self.center, self.unit_normal)
        if t is None:
            return None

        # Local coordinates of the hit point within the square
        local = ray.origin + t * ray.direction - self.center
        tangent, bitangent = self.axes
        half = self.width / 2.0
        if abs(dot(local, tangent)) > half or abs(dot(local, bitangent)) > half:
            return None
        return t

    def normal_at(self, point: Vec3) -> Vec3:
        return self.unit_normal
