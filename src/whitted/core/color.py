"""RGB color helpers.

Colors share the vector representation (float64 arrays of shape (3,)) so
they can be added, scaled and multiplied component-wise with plain NumPy
arithmetic. Channel values are linear and unbounded while shading; they are
clamped to [0, 1] only when a final pixel is produced.
"""

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from src.whitted.core.vector import Vec3, as_vec3, vec3

Color = Vec3

BLACK = vec3(0.0, 0.0, 0.0)
WHITE = vec3(1.0, 1.0, 1.0)
RED = vec3(1.0, 0.0, 0.0)
GREEN = vec3(0.0, 1.0, 0.0)
BLUE = vec3(0.0, 0.0, 1.0)
YELLOW = vec3(1.0, 1.0, 0.0)
CYAN = vec3(0.0, 1.0, 1.0)
MAGENTA = vec3(1.0, 0.0, 1.0)

for _constant in (BLACK, WHITE, RED, GREEN, BLUE, YELLOW, CYAN, MAGENTA):
    _constant.setflags(write=False)

NAMED_COLORS: dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "yellow": YELLOW,
    "cyan": CYAN,
    "magenta": MAGENTA,
}


def color(red: float, green: float, blue: float) -> Color:
    """Create a color from its channels."""
    return vec3(red, green, blue)


def color_from_name(name: str) -> Color:
    """Look up a named color (case-insensitive).

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return NAMED_COLORS[name.strip().lower()].copy()
    except KeyError:
        raise ValueError(f"Unknown color name: {name!r}") from None


def as_color(value: str | Sequence[float] | Color) -> Color:
    """Convert a color name or an RGB triple into a color array."""
    if isinstance(value, str):
        return color_from_name(value)
    return as_vec3(value)


def clamp_color(c: Color) -> Color:
    """Clamp every channel to the displayable [0, 1] range."""
    return np.clip(c, 0.0, 1.0)


def color_to_rgb8(c: Color) -> npt.NDArray[np.uint8]:
    """Convert a linear color to 8-bit channels after clamping."""
    return (clamp_color(c) * 255).astype(np.uint8)
