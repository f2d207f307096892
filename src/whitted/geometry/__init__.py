"""Geometry module for shape primitives.

Components:
    shape: Abstract Shape interface (intersect, normal_at, validate)
    sphere: Sphere with robust ray-sphere intersection
    plane: Bounded square Plane and InfinitePlane

Scenes are small, so every ray is tested against every shape; there is no
acceleration structure.
"""

from .plane import PARALLEL_EPSILON, InfinitePlane, Plane
from .shape import Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "Sphere",
    "Plane",
    "InfinitePlane",
    "PARALLEL_EPSILON",
]
