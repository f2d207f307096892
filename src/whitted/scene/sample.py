"""Built-in demonstration scene.

Five primitives over a mirrored checkerboard floor, lit by a grey key
light and a red fill light:
    - a checkered sphere at the origin
    - a red mirror sphere on the left
    - a green glass sphere on the right
    - a large yellow glass sphere in the back
    - an infinite checkered floor with a 0.8 mirror

Example:
    >>> from src.whitted.scene.sample import create_sample_scene
    >>> scene = create_sample_scene()
    >>> len(scene.primitives)
    5
"""

import math

from src.whitted.camera.perspective import PerspectiveCamera
from src.whitted.core.color import GREEN, RED, YELLOW, color
from src.whitted.core.vector import vec3
from src.whitted.geometry.plane import InfinitePlane
from src.whitted.geometry.sphere import Sphere
from src.whitted.materials.effects import Effects, Mirror, Phong, Transparency
from src.whitted.materials.texture import CheckeredPattern, PlainColor
from src.whitted.scene.light import PointLight
from src.whitted.scene.primitive import Primitive
from src.whitted.scene.scene import Scene

GLASS_INDEX = 1.3


def create_sample_scene() -> Scene:
    """Build the demonstration scene.

    Returns:
        A Scene ready to be passed to an Engine.
    """
    camera = PerspectiveCamera(
        screen_center=vec3(0.0, 10.0, -10.0),
        look_at=vec3(0.0, 0.0, 30.0),
        width=32.0,
        height=18.0,
        angle=math.degrees(math.pi / 8.0),
        description="main camera",
    )

    primitives = [
        Primitive(
            shape=Sphere(center=vec3(0.0, 0.0, 0.0), radius=5.0),
            texture=CheckeredPattern(),
            effects=Effects(phong=Phong()),
            description="checkered sphere",
        ),
        Primitive(
            shape=Sphere(center=vec3(-10.0, 3.0, 10.0), radius=8.0),
            texture=PlainColor(RED),
            effects=Effects(phong=Phong(), mirror=Mirror(1.0)),
            description="red mirror sphere",
        ),
        Primitive(
            shape=Sphere(center=vec3(10.0, 3.0, 10.0), radius=8.0),
            texture=PlainColor(GREEN),
            effects=Effects(phong=Phong(), transparency=Transparency(GLASS_INDEX)),
            description="green glass sphere",
        ),
        Primitive(
            shape=Sphere(center=vec3(0.0, 10.0, 35.0), radius=15.0),
            texture=PlainColor(YELLOW),
            effects=Effects(phong=Phong(), transparency=Transparency(GLASS_INDEX)),
            description="yellow glass sphere",
        ),
        Primitive(
            shape=InfinitePlane(center=vec3(0.0, -5.0, 0.0), normal=vec3(0.0, 1.0, 0.0)),
            texture=CheckeredPattern(),
            effects=Effects(mirror=Mirror(0.8)),
            description="floor",
        ),
    ]

    lights = [
        PointLight(
            source=vec3(50.0, 100.0, -50.0),
            color=color(0.8, 0.8, 0.8),
            description="key light",
        ),
        PointLight(
            source=vec3(-50.0, 20.0, -20.0),
            color=color(0.8, 0.0, 0.0),
            description="red fill light",
        ),
    ]

    return Scene(
        camera=camera,
        primitives=primitives,
        lights=lights,
        ambient_light=color(0.0, 0.0, 0.2),
        description="sample scene",
    )
