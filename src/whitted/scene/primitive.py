"""Renderable primitives: a shape dressed with a texture and effects."""

from dataclasses import dataclass, field

from src.whitted.core.color import Color
from src.whitted.core.vector import Vec3
from src.whitted.geometry.shape import Shape
from src.whitted.materials.effects import Effects
from src.whitted.materials.texture import Texture


@dataclass(frozen=True, eq=False)
class Primitive:
    """A shape with its surface appearance.

    Attributes:
        shape: The geometry (Sphere, Plane or InfinitePlane).
        texture: The base-color texture.
        effects: Optional Phong, Mirror and Transparency effects.
        description: Label used in validation errors.
    """

    shape: Shape
    texture: Texture
    effects: Effects = field(default_factory=Effects)
    description: str = ""

    @property
    def kind(self) -> str:
        return self.shape.kind

    def color_at(self, point: Vec3) -> Color:
        return self.texture.color_at(point)

    def validate(self) -> None:
        """Validate shape, texture and effects, raising ValueError on the first problem."""
        self.shape.validate()
        self.texture.validate()
        self.effects.validate()
