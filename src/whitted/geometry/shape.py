"""Shared interface for geometric shapes.

Every shape answers two questions: where along a ray it is first hit
(intersect) and which way its surface faces at a point (normal_at). The
intersection engine only ever talks to shapes through this interface, so
adding a new primitive means adding one subclass.
"""

from abc import ABC, abstractmethod

from src.whitted.core.ray import Ray
from src.whitted.core.vector import Vec3


class Shape(ABC):
    """Base class for ray-intersectable shapes."""

    kind: str = "shape"

    @abstractmethod
    def intersect(self, ray: Ray) -> float | None:
        """Return the smallest t inside the ray's interval, or None on a miss."""

    @abstractmethod
    def normal_at(self, point: Vec3) -> Vec3:
        """Return the outward unit normal at a point on the surface."""

    def validate(self) -> None:
        """Check the shape's parameters.

        Raises:
            ValueError: With a short reason if a parameter is out of range.
        """
