"""Camera module for primary ray generation.

Components:
    base: Screen geometry and canvas mapping shared by all cameras
    perspective: Pinhole camera with an eye point behind the screen
    orthogonal: Parallel projection camera

Ray generation uses normalized canvas coordinates:
    canvas_x in [0, 1]: left to right across the image
    canvas_y in [0, 1]: top to bottom across the image
"""

from .base import Camera
from .orthogonal import OrthogonalCamera
from .perspective import PerspectiveCamera

__all__ = [
    "Camera",
    "PerspectiveCamera",
    "OrthogonalCamera",
]
