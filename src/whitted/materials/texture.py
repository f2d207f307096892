"""Surface textures mapping a world-space point to a base color.

Two textures are provided:
    PlainColor: One color everywhere.
    CheckeredPattern: Alternating colors keyed on the parity of floored
        world coordinates along two axes.

Textures are evaluated in world space; there is no UV unwrapping and no
image sampling.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from src.whitted.core.color import Color, color
from src.whitted.core.vector import Vec3, frozen


class Texture(ABC):
    """Base class for textures."""

    @abstractmethod
    def color_at(self, point: Vec3) -> Color:
        """Return the base color of the surface at a world-space point."""

    def validate(self) -> None:
        """Raise ValueError with a reason if a parameter is out of range."""


@dataclass(frozen=True, eq=False)
class PlainColor(Texture):
    """A uniform color."""

    color: Color

    def __post_init__(self):
        object.__setattr__(self, "color", frozen(self.color))

    def color_at(self, point: Vec3) -> Color:
        return self.color


@dataclass(frozen=True, eq=False)
class CheckeredPattern(Texture):
    """A 3D checkerboard.

    A point's cell is floor(p[a] / size) + floor(p[b] / size) for the two
    axes (a, b); even cells take the primary color, odd cells the
    secondary one.

    Attributes:
        primary: Color of even cells.
        secondary: Color of odd cells.
        size: Edge length of one cell (must be positive).
        axes: Indices of the two world axes the pattern varies along. The
            default (0, 2) lays the checkerboard on the XZ ground plane.
    """

    primary: Color | None = None
    secondary: Color | None = None
    size: float = 1.0
    axes: tuple[int, int] = (0, 2)

    def __post_init__(self):
        primary = color(0.95, 0.95, 0.95) if self.primary is None else self.primary
        secondary = color(0.05, 0.05, 0.05) if self.secondary is None else self.secondary
        object.__setattr__(self, "primary", frozen(primary))
        object.__setattr__(self, "secondary", frozen(secondary))

    def validate(self) -> None:
        if not self.size > 0.0:
            raise ValueError(f"checker size must be > 0, got {self.size}")
        a, b = self.axes
        if a == b or not {a, b} <= {0, 1, 2}:
            raise ValueError(f"checker axes must be two distinct indices in 0..2, got {self.axes}")

    def color_at(self, point: Vec3) -> Color:
        a, b = self.axes
        cell = math.floor(point[a] / self.size) + math.floor(point[b] / self.size)
        return self.primary if cell % 2 == 0 else self.secondary
