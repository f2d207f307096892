"""The immutable scene graph and its validation.

A Scene bundles the camera, the ordered primitives, the lights and the
world settings (ambient light, background color, refractive index of the
surrounding medium). It is assembled once, validated once, and then only
read, which lets rendering workers share it without locks.

Validation walks every element in declaration order and stops at the
first problem, reporting it as a SceneValidationError that names the
element. Elements without a description are labelled from their kind and
index, e.g. "sphere #2" or "point light #0".

Example:
    >>> from src.whitted.scene.scene import Scene
    >>> scene = Scene(camera=camera, primitives=[ball], lights=[lamp])
    >>> scene.validate()  # Raises SceneValidationError on bad input
"""

import logging
from dataclasses import dataclass, field

from src.whitted.camera.base import Camera
from src.whitted.core.color import Color, color
from src.whitted.core.vector import frozen
from src.whitted.errors import SceneValidationError
from src.whitted.scene.light import Light
from src.whitted.scene.primitive import Primitive

logger = logging.getLogger(__name__)

DEFAULT_AMBIENT = (0.2, 0.2, 0.2)


def element_label(element, index: int | None = None) -> str:
    """Return the description of a scene element, or a synthesized label.

    Args:
        element: A primitive, light or camera.
        index: Position of the element in its scene collection.

    Returns:
        The element's description if it has one, otherwise its kind
        followed by its index.
    """
    if element.description:
        return element.description
    if index is None:
        return element.kind
    return f"{element.kind} #{index}"


@dataclass(frozen=True, eq=False)
class Scene:
    """Everything needed to render one image.

    Attributes:
        camera: The camera producing primary rays.
        primitives: Renderable objects, in declaration order.
        lights: Light sources (at least one is required).
        ambient_light: Color of the uniform ambient illumination.
        background: Color returned for rays that hit nothing.
        world_refractive_index: Index of refraction of the surrounding medium.
        description: Free-text label for the scene.
    """

    camera: Camera
    primitives: tuple[Primitive, ...] = ()
    lights: tuple[Light, ...] = ()
    ambient_light: Color = field(default_factory=lambda: color(*DEFAULT_AMBIENT))
    background: Color = field(default_factory=lambda: color(0.0, 0.0, 0.0))
    world_refractive_index: float = 1.0
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "primitives", tuple(self.primitives))
        object.__setattr__(self, "lights", tuple(self.lights))
        object.__setattr__(self, "ambient_light", frozen(self.ambient_light))
        object.__setattr__(self, "background", frozen(self.background))

    def validate(self) -> None:
        """Check every element of the scene.

        Raises:
            SceneValidationError: For the first element violating its
                invariants, naming that element.
        """
        self._check(element_label(self.camera), self.camera.validate)

        for index, primitive in enumerate(self.primitives):
            self._check(element_label(primitive, index), primitive.validate)

        if not self.lights:
            self._fail(self.description or "scene", "scene has no lights")
        for index, light in enumerate(self.lights):
            self._check(element_label(light, index), light.validate)

        if not self.world_refractive_index > 0.0:
            self._fail(
                self.description or "scene",
                f"world refractive index must be > 0, got {self.world_refractive_index}",
            )

    @staticmethod
    def _check(label: str, validate) -> None:
        try:
            validate()
        except ValueError as exc:
            Scene._fail(label, str(exc), cause=exc)

    @staticmethod
    def _fail(label: str, reason: str, cause: Exception | None = None) -> None:
        logger.warning("Scene validation failed for %s: %s", label, reason)
        raise SceneValidationError(label, reason) from cause
