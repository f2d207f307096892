"""Light sources.

Lights are points in space that emit a color. A SpotLight additionally
restricts its emission to a cone: full color inside the inner angle, none
beyond the outer angle, and a linear falloff in between.

Lights never occlude themselves or anything else; only primitives cast
shadows.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from src.whitted.core.color import BLACK, WHITE, Color
from src.whitted.core.vector import Vec3, dot, frozen, near_zero, normalize


@dataclass(frozen=True, eq=False)
class Light(ABC):
    """Base class for lights.

    Attributes:
        source: Position of the light in world space.
        color: Emitted color.
        description: Label used in validation errors.
    """

    source: Vec3
    color: Color = field(default_factory=WHITE.copy)
    description: str = ""

    kind = "light"

    def __post_init__(self):
        object.__setattr__(self, "source", frozen(self.source))
        object.__setattr__(self, "color", frozen(self.color))

    @abstractmethod
    def color_toward(self, point: Vec3) -> Color:
        """Return the color this light sends toward a point."""

    def validate(self) -> None:
        """Raise ValueError with a reason if a parameter is out of range."""


@dataclass(frozen=True, eq=False)
class PointLight(Light):
    """An omnidirectional light."""

    kind = "point light"

    def color_toward(self, point: Vec3) -> Color:
        return self.color


@dataclass(frozen=True, eq=False)
class SpotLight(Light):
    """A cone-shaped light.

    Attributes:
        direction: Axis of the cone (must be non-zero).
        inner_angle_degree: Half-angle of the fully lit cone.
        outer_angle_degree: Half-angle beyond which nothing is lit.
    """

    direction: Vec3 = field(default_factory=lambda: frozen((0.0, -1.0, 0.0)))
    inner_angle_degree: float = 30.0
    outer_angle_degree: float = 45.0

    kind = "spot light"

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "direction", frozen(self.direction))

    def validate(self) -> None:
        if near_zero(self.direction):
            raise ValueError("spot light direction must be non-zero")
        if not 0.0 <= self.inner_angle_degree <= self.outer_angle_degree <= 180.0:
            raise ValueError(
                "spot light angles must satisfy 0 <= inner <= outer <= 180, got "
                f"inner={self.inner_angle_degree}, outer={self.outer_angle_degree}"
            )

    def color_toward(self, point: Vec3) -> Color:
        to_point = point - self.source
        if near_zero(to_point):
            return self.color
        cos_angle = dot(normalize(to_point), normalize(self.direction))
        angle = math.degrees(math.acos(max(-1.0, min(1.0, cos_angle))))

        if angle <= self.inner_angle_degree:
            return self.color
        if angle >= self.outer_angle_degree:
            return BLACK
        falloff = (self.outer_angle_degree - angle) / (
            self.outer_angle_degree - self.inner_angle_degree
        )
        return falloff * self.color
