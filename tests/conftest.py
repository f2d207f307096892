"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules: small scenes
that render quickly and a matching render configuration.
"""

import pytest

from src.whitted.camera.orthogonal import OrthogonalCamera
from src.whitted.core.color import BLACK, RED, WHITE, color
from src.whitted.core.config import RenderConfig
from src.whitted.core.vector import vec3
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.effects import Effects, Phong
from src.whitted.materials.texture import PlainColor
from src.whitted.scene.light import PointLight
from src.whitted.scene.primitive import Primitive
from src.whitted.scene.scene import Scene


def make_ortho_camera(width: float = 4.0, height: float = 3.0) -> OrthogonalCamera:
    """Orthogonal camera at z=-10 looking down +Z; canvas (0, 0) is (-w/2, +h/2)."""
    return OrthogonalCamera(
        screen_center=vec3(0.0, 0.0, -10.0),
        look_at=vec3(0.0, 0.0, 0.0),
        width=width,
        height=height,
    )


def make_sphere(center=(0.0, 0.0, 0.0), radius=1.0, base=RED, effects=None, description=""):
    """A sphere primitive with a plain color."""
    return Primitive(
        shape=Sphere(center=vec3(*center), radius=radius),
        texture=PlainColor(base),
        effects=effects if effects is not None else Effects(),
        description=description,
    )


@pytest.fixture
def simple_scene() -> Scene:
    """A red Phong sphere at the origin lit from the camera side."""
    return Scene(
        camera=make_ortho_camera(),
        primitives=[make_sphere(effects=Effects(phong=Phong()), description="red ball")],
        lights=[PointLight(source=vec3(2.0, 3.0, -10.0), color=WHITE, description="lamp")],
        ambient_light=color(0.2, 0.2, 0.2),
        description="simple scene",
    )


@pytest.fixture
def flat_scene() -> Scene:
    """An ambient-only scene: a 0.5 grey disk on black, piecewise constant."""
    return Scene(
        camera=make_ortho_camera(),
        primitives=[make_sphere(base=WHITE)],
        lights=[PointLight(source=vec3(0.0, 0.0, -10.0), color=BLACK)],
        ambient_light=color(0.5, 0.5, 0.5),
    )


@pytest.fixture
def small_config() -> RenderConfig:
    """An 8x6 RGBA sequential render."""
    return RenderConfig(width=8, height=6)
