"""Materials module: textures, optical effects and refraction.

Components:
    texture: PlainColor and CheckeredPattern base-color textures
    effects: Phong, Mirror, Transparency and the Effects bundle
    dielectric: Snell's-law refraction with total internal reflection
"""

from .dielectric import refracted_direction
from .effects import LAMBERT, Effects, Mirror, Phong, Transparency
from .texture import CheckeredPattern, PlainColor, Texture

__all__ = [
    "Texture",
    "PlainColor",
    "CheckeredPattern",
    "Effects",
    "Phong",
    "Mirror",
    "Transparency",
    "LAMBERT",
    "refracted_direction",
]
