"""Scene module: primitives, lights, validation and intersection queries.

Components:
    primitive: A shape dressed with a texture and optical effects
    light: PointLight and cone-shaped SpotLight
    scene: The immutable Scene and its validation
    intersection: Closest-hit search and shadow-ray occlusion
    sample: The built-in demonstration scene
"""

from .intersection import HitRecord, find_closest_hit, is_occluded
from .light import Light, PointLight, SpotLight
from .primitive import Primitive
from .sample import create_sample_scene
from .scene import Scene, element_label

__all__ = [
    "Primitive",
    "Light",
    "PointLight",
    "SpotLight",
    "Scene",
    "element_label",
    "HitRecord",
    "find_closest_hit",
    "is_occluded",
    "create_sample_scene",
]
