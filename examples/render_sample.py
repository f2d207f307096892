#!/usr/bin/env python3
"""Render the built-in sample scene.

This script demonstrates end-to-end rendering with the Whitted ray tracer:
it builds the sample scene, configures the engine, renders progressively
while reporting progress, and saves a PNG.

Usage:
    python -m examples.render_sample [options]

Options:
    --width WIDTH       Image width in pixels (default: 320)
    --height HEIGHT     Image height in pixels (default: 180)
    --samples SAMPLES   Random anti-aliasing rays per pixel; 1 disables
                        anti-aliasing (default: 1)
    --depth DEPTH       Maximum reflection/refraction bounces (default: 2)
    --output OUTPUT     Output file path (default: sample.png)
    --parallel          Render with worker threads
    --workers WORKERS   Number of worker threads (default: 4)
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.render_sample --width 640 --height 360 --samples 4 --parallel
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from src.whitted.core.config import RenderConfig
from src.whitted.core.engine import Engine
from src.whitted.core.strategy import NoAntiAliasing, RandomAntiAliasing
from src.whitted.errors import RaytracerError
from src.whitted.logging_config import setup_logging
from src.whitted.preview.export import save_png
from src.whitted.scene.sample import create_sample_scene

# Pixels rendered between progress updates
PROGRESS_INTERVAL = 1000


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the sample scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=320,
        help="Image width in pixels (default: 320)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=180,
        help="Image height in pixels (default: 180)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=1,
        help="Random anti-aliasing rays per pixel, 1 disables it (default: 1)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=2,
        help="Maximum reflection/refraction bounces (default: 2)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="sample.png",
        help="Output file path (default: sample.png)",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Render with worker threads",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=4,
        help="Number of worker threads (default: 4)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def render_sample(
    width: int = 320,
    height: int = 180,
    samples: int = 1,
    max_depth: int = 2,
    output_path: str = "sample.png",
    parallel: bool = False,
    workers: int = 4,
    quiet: bool = False,
) -> Path:
    """Render the sample scene and save it to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        samples: Anti-aliasing rays per pixel (1 for none).
        max_depth: Maximum reflection/refraction bounces.
        output_path: Output file path (PNG).
        parallel: Render with worker threads.
        workers: Number of worker threads.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    anti_aliasing = NoAntiAliasing() if samples <= 1 else RandomAntiAliasing(samples)
    config = RenderConfig(
        width=width,
        height=height,
        anti_aliasing=anti_aliasing,
        max_depth=max_depth,
        parallel=parallel,
        workers=workers,
    )
    engine = Engine(create_sample_scene(), config)

    start_time = time.time()
    try:
        for count, _ in enumerate(engine.pixels(), start=1):
            if not quiet and count % PROGRESS_INTERVAL == 0:
                elapsed = time.time() - start_time
                pixels_per_sec = count / elapsed if elapsed > 0 else 0
                print(
                    f"\r  Progress: {count}/{engine.total_pixels} pixels "
                    f"({engine.progress * 100:.1f}%) - {pixels_per_sec:.0f} px/s",
                    end="",
                    flush=True,
                )
    except KeyboardInterrupt:
        engine.stop()
        # Settles the state to cancelled
        engine.next_pixel()

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    save_png(engine.framebuffer, output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()} ({engine.state.value})")
        print(f"Total time: {time.time() - start_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.verbose:
        setup_logging(logging.DEBUG)
    elif not args.quiet:
        setup_logging(logging.INFO)

    try:
        render_sample(
            width=args.width,
            height=args.height,
            samples=args.samples,
            max_depth=args.depth,
            output_path=args.output,
            parallel=args.parallel,
            workers=args.workers,
            quiet=args.quiet,
        )
        return 0
    except (RaytracerError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
