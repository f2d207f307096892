"""Image export utilities for rendered images.

This module provides functions for saving rendered frame buffers to
files.

Supported formats:
    - PNG (8-bit RGB or RGBA via Pillow)

Example:
    >>> from src.whitted.core.engine import Engine
    >>> from src.whitted.preview.export import save_png
    >>>
    >>> engine = Engine(scene, config)
    >>> save_png(engine.render_all(), "output.png")
"""

from __future__ import annotations

from pathlib import Path

from src.whitted.core.framebuffer import FrameBuffer


def save_png(framebuffer: FrameBuffer, filepath: str | Path, *, include_alpha: bool = True) -> None:
    """Save a frame buffer as a PNG file.

    Args:
        framebuffer: The rendered pixels.
        filepath: Output file path (should end in .png).
        include_alpha: Keep the alpha channel of an RGBA buffer. When
            False, the image is saved as plain RGB.
    """
    pil_image = framebuffer.to_image()
    if not include_alpha and pil_image.mode == "RGBA":
        pil_image = pil_image.convert("RGB")
    pil_image.save(filepath)
