"""Scene-level ray intersection testing.

This module finds the closest primitive a ray hits and answers shadow
queries. Every ray is tested against every primitive in declaration order.
A hit replaces the current best only when its distance is strictly
smaller, so exact ties keep the primitive declared first and results are
reproducible run to run.

Example:
    >>> from src.whitted.scene.intersection import find_closest_hit
    >>> hit = find_closest_hit(ray, scene)
    >>> if hit is not None:
    ...     print(hit.t, hit.primitive.description)
"""

from collections.abc import Iterable
from dataclasses import dataclass

from src.whitted.core.ray import Ray, ray_at
from src.whitted.core.vector import Vec3, dot
from src.whitted.scene.primitive import Primitive
from src.whitted.scene.scene import Scene


@dataclass(frozen=True, eq=False)
class HitRecord:
    """Record of a ray-scene intersection.

    Attributes:
        t: The parameter value along the ray where intersection occurred.
        point: The 3D point where the ray intersected the surface.
        normal: The unit surface normal at the point, oriented against the
            incoming ray (toward the ray origin).
        outward_normal: The unit normal pointing out of the primitive.
        front_face: True if the ray hit the outside of the surface.
        primitive: The primitive that was hit (texture and effects).
        index: Position of the primitive in the scene's primitive list.
    """

    t: float
    point: Vec3
    normal: Vec3
    outward_normal: Vec3
    front_face: bool
    primitive: Primitive
    index: int


def find_closest_hit(ray: Ray, scene: Scene) -> HitRecord | None:
    """Find the nearest intersection of a ray with the scene.

    Args:
        ray: The ray to trace; only hits inside its (t_min, t_max)
            interval count.
        scene: The scene to test against.

    Returns:
        The HitRecord of the closest hit, or None if nothing is hit.
    """
    closest_t = ray.t_max
    closest_index = -1
    for index, primitive in enumerate(scene.primitives):
        t = primitive.shape.intersect(ray)
        if t is not None and t < closest_t:
            closest_t = t
            closest_index = index

    if closest_index < 0:
        return None

    primitive = scene.primitives[closest_index]
    point = ray_at(ray, closest_t)
    outward_normal = primitive.shape.normal_at(point)

    # Front face: ray direction and outward normal point in opposite directions
    front_face = dot(ray.direction, outward_normal) < 0.0
    normal = outward_normal if front_face else -outward_normal

    return HitRecord(
        t=closest_t,
        point=point,
        normal=normal,
        outward_normal=outward_normal,
        front_face=front_face,
        primitive=primitive,
        index=closest_index,
    )


def is_occluded(ray: Ray, primitives: Iterable[Primitive]) -> bool:
    """Check whether any primitive blocks a shadow ray.

    Any hit inside the ray's interval counts, including hits on transparent
    primitives: shadows are binary.
    """
    return any(primitive.shape.intersect(ray) is not None for primitive in primitives)
