"""Render configuration.

A RenderConfig is supplied once when an engine is built and never changes
during a render. The defaults match a 16:9 canvas with two bounces of
reflection and refraction, no anti-aliasing and sequential rendering.
"""

from dataclasses import dataclass, field

from src.whitted.core.strategy import AntiAliasing, NoAntiAliasing

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 576
DEFAULT_MAX_DEPTH = 2
DEFAULT_WORKERS = 4


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for a render.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        anti_aliasing: Strategy producing each pixel's color.
        max_depth: Maximum number of reflection/refraction bounces.
        parallel: Render with a pool of worker threads.
        workers: Number of worker threads when parallel.
        channels: Bytes per pixel in the frame buffer, 3 (RGB) or 4 (RGBA).
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    anti_aliasing: AntiAliasing = field(default_factory=NoAntiAliasing)
    max_depth: int = DEFAULT_MAX_DEPTH
    parallel: bool = False
    workers: int = DEFAULT_WORKERS
    channels: int = 4

    def validate(self) -> None:
        """Check the configuration.

        Raises:
            ValueError: If any setting is out of range.
        """
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be at least 1x1, got {self.width}x{self.height}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.channels not in (3, 4):
            raise ValueError(f"channels must be 3 or 4, got {self.channels}")
        self.anti_aliasing.validate()
