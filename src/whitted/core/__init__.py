"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Vector math on float64 NumPy triples
    color: Color constants and 8-bit conversion
    ray: Ray data structure and secondary-ray construction
    integrator: Recursive Whitted-style shading
    strategy: Anti-aliasing strategies
    config: Render configuration
    framebuffer: 8-bit RGB/RGBA pixel storage
    scheduler: Row-band partitioning for parallel workers
    engine: The render engine (full, progressive, parallel, cancellable)
"""

from .color import BLACK, WHITE, Color, color, color_from_name, color_to_rgb8
from .ray import RAY_EPSILON, T_MAX, Ray, make_ray, ray_at, ray_from_to, spawn_ray
from .vector import (
    Vec3,
    build_onb_from_normal,
    cross,
    distance,
    dot,
    length,
    length_squared,
    near_zero,
    normalize,
    reflect,
    vec3,
)

# Note: integrator, strategy, config and engine are NOT imported here to avoid
# circular imports with the scene package. Import them directly, e.g.
#   from src.whitted.core.engine import Engine

__all__ = [
    "Vec3",
    "vec3",
    "dot",
    "cross",
    "length",
    "length_squared",
    "distance",
    "near_zero",
    "normalize",
    "reflect",
    "build_onb_from_normal",
    "Color",
    "color",
    "color_from_name",
    "color_to_rgb8",
    "BLACK",
    "WHITE",
    "Ray",
    "make_ray",
    "ray_from_to",
    "ray_at",
    "spawn_ray",
    "RAY_EPSILON",
    "T_MAX",
]
