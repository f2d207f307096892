"""Anti-aliasing strategies.

A strategy turns a pixel coordinate into a color by casting one or more
primary rays through the pixel and averaging what they see:
    NoAntiAliasing: one ray through the pixel center.
    RandomAntiAliasing: n rays through uniformly jittered sub-pixel
        positions.

Jitter is reproducible. Each pixel draws its offsets from its own NumPy
generator seeded by (seed, y, x), so a pixel's color does not depend on
which thread renders it or in what order.

Example:
    >>> from src.whitted.core.strategy import RandomAntiAliasing
    >>> strategy = RandomAntiAliasing(rays_per_pixel=8, seed=42)
    >>> color = strategy.render_pixel(scene, x=10, y=20, width=64, height=48, max_depth=2)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from src.whitted.core.color import Color
from src.whitted.core.integrator import trace_primary
from src.whitted.scene.scene import Scene


class AntiAliasing(ABC):
    """Base class for anti-aliasing strategies."""

    @property
    @abstractmethod
    def samples_per_pixel(self) -> int:
        """Number of primary rays cast per pixel."""

    def validate(self) -> None:
        """Raise ValueError if the strategy is misconfigured."""

    @abstractmethod
    def render_pixel(
        self, scene: Scene, x: int, y: int, width: int, height: int, max_depth: int
    ) -> Color:
        """Compute the unclamped color of pixel (x, y) on a width x height canvas."""


@dataclass(frozen=True)
class NoAntiAliasing(AntiAliasing):
    """A single ray through the pixel center."""

    @property
    def samples_per_pixel(self) -> int:
        return 1

    def render_pixel(
        self, scene: Scene, x: int, y: int, width: int, height: int, max_depth: int
    ) -> Color:
        ray = scene.camera.generate_ray((x + 0.5) / width, (y + 0.5) / height)
        return trace_primary(ray, scene, max_depth)


@dataclass(frozen=True)
class RandomAntiAliasing(AntiAliasing):
    """Average of randomly jittered rays.

    Attributes:
        rays_per_pixel: Number of rays per pixel (must be >= 1).
        seed: Base seed of the per-pixel random generators.
    """

    rays_per_pixel: int
    seed: int = 0

    @property
    def samples_per_pixel(self) -> int:
        return self.rays_per_pixel

    def validate(self) -> None:
        if self.rays_per_pixel < 1:
            raise ValueError(f"rays_per_pixel must be >= 1, got {self.rays_per_pixel}")
        if self.seed < 0:
            raise ValueError(f"seed must be >= 0, got {self.seed}")

    def render_pixel(
        self, scene: Scene, x: int, y: int, width: int, height: int, max_depth: int
    ) -> Color:
        rng = np.random.default_rng((self.seed, y, x))
        offsets = rng.random((self.rays_per_pixel, 2))

        total = np.zeros(3, dtype=np.float64)
        for u, v in offsets:
            ray = scene.camera.generate_ray((x + u) / width, (y + v) / height)
            total += trace_primary(ray, scene, max_depth)
        return total / self.rays_per_pixel
