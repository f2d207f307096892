"""Frame buffer holding the rendered pixels.

The buffer is a contiguous uint8 NumPy array of shape
(height, width, channels): row-major, top-to-bottom, left-to-right, with 3
(RGB) or 4 (RGBA) channels per pixel. Every cell starts at zero. Writing a
pixel stores its clamped 8-bit color and, for RGBA, an alpha of 255, so
the alpha channel also records which cells have been written.

Rendering workers write disjoint cells and need no locking; readers other
than the writer must wait for the render to join before looking.
"""

import numpy as np
import numpy.typing as npt
from PIL import Image

from src.whitted.core.color import Color, color_to_rgb8

OPAQUE = 255


class FrameBuffer:
    """A width x height grid of 8-bit pixels.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        channels: 3 for RGB, 4 for RGBA.
    """

    def __init__(self, width: int, height: int, channels: int = 4) -> None:
        if channels not in (3, 4):
            raise ValueError(f"channels must be 3 or 4, got {channels}")
        self.width = width
        self.height = height
        self.channels = channels
        self._pixels = np.zeros((height, width, channels), dtype=np.uint8)

    def __repr__(self) -> str:
        return f"FrameBuffer(width={self.width}, height={self.height}, channels={self.channels})"

    def write(self, x: int, y: int, color: Color) -> tuple[int, int, int]:
        """Store the clamped color of pixel (x, y).

        Returns:
            The 8-bit (r, g, b) triple that was written.
        """
        rgb = color_to_rgb8(color)
        self._pixels[y, x, :3] = rgb
        if self.channels == 4:
            self._pixels[y, x, 3] = OPAQUE
        return int(rgb[0]), int(rgb[1]), int(rgb[2])

    def write_rgb8(self, x: int, y: int, rgb: tuple[int, int, int]) -> None:
        """Store an already-quantized pixel."""
        self._pixels[y, x, :3] = rgb
        if self.channels == 4:
            self._pixels[y, x, 3] = OPAQUE

    def color_at(self, x: int, y: int) -> tuple[int, ...]:
        """Return the stored channels of pixel (x, y)."""
        return tuple(int(c) for c in self._pixels[y, x])

    @property
    def nbytes(self) -> int:
        """Size of the pixel data: width * height * channels."""
        return self._pixels.nbytes

    @property
    def buffer(self) -> memoryview:
        """Zero-copy read-only view of the pixel bytes, for direct blitting."""
        view = self._pixels.view()
        view.setflags(write=False)
        return memoryview(view).cast("B")

    def as_bytes(self) -> bytes:
        """Copy of the pixel bytes in row-major order."""
        return self._pixels.tobytes()

    def to_numpy(self) -> npt.NDArray[np.uint8]:
        """Copy of the pixels as a (height, width, channels) array."""
        return self._pixels.copy()

    def to_image(self) -> Image.Image:
        """Convert the buffer to a Pillow image (RGB or RGBA by channel count)."""
        return Image.fromarray(self.to_numpy())
