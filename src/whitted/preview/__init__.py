"""Preview module for exporting rendered images.

Components:
    export: PNG export through Pillow
"""

from .export import save_png

__all__ = [
    "save_png",
]
