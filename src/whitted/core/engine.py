"""Render engine driving the pixel loop.

The Engine owns a validated scene, a render configuration and the frame
buffer, and produces pixels in one of two ways:

- render_all() computes every pixel and returns the finished FrameBuffer.
- next_pixel() computes (or collects) one pixel per call and returns it,
  returning None once the render is complete or cancelled. This lets a
  display loop interleave rendering with UI refreshes.

Either way can run sequentially on the calling thread or on a pool of
worker threads, each rendering a contiguous band of rows. The scene is
never mutated, so workers share it without locks.

The engine moves through an explicit state machine:

    PENDING -> RUNNING -> COMPLETE
                       -> CANCELLED   (stop() before every pixel is done)
    PENDING -> CANCELLED              (stop() before rendering starts)

stop() may be called from any thread. It takes effect at the next pixel
boundary; a pixel already being shaded is always finished first.

Example:
    >>> from src.whitted.core.config import RenderConfig
    >>> from src.whitted.core.engine import Engine
    >>> from src.whitted.scene.sample import create_sample_scene
    >>>
    >>> engine = Engine(create_sample_scene(), RenderConfig(width=160, height=90))
    >>> for pixel in engine.pixels():
    ...     draw(pixel.x, pixel.y, pixel.color)  # e.g. blit to a canvas
    >>> engine.framebuffer.to_image().save("sample.png")
"""

import logging
import queue
import threading
import time
from collections.abc import Iterator
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from typing import NamedTuple

from src.whitted.core.color import Color, color_to_rgb8
from src.whitted.core.config import RenderConfig
from src.whitted.core.framebuffer import FrameBuffer
from src.whitted.core.scheduler import partition_rows, scan_order
from src.whitted.scene.scene import Scene

logger = logging.getLogger(__name__)


class RenderState(Enum):
    """Lifecycle of a render."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


class Pixel(NamedTuple):
    """A finished pixel: its coordinates and 8-bit (r, g, b) color."""

    x: int
    y: int
    color: tuple[int, int, int]


class _BandDone(NamedTuple):
    """Marker pushed by a progressive worker when its band ends."""

    index: int


# =============================================================================
# Engine
# =============================================================================


class Engine:
    """Renders a scene into a frame buffer.

    Construction validates the configuration and the scene, so an Engine
    that exists can always render; nothing fails mid-render except through
    explicit cancellation.

    Attributes:
        scene: The scene being rendered.
        config: The render configuration.
        framebuffer: The output pixels.
    """

    def __init__(self, scene: Scene, config: RenderConfig | None = None) -> None:
        """Validate inputs and allocate the frame buffer.

        Args:
            scene: The scene to render.
            config: Render settings; defaults to RenderConfig().

        Raises:
            ValueError: If the configuration is out of range.
            SceneValidationError: If a scene element is invalid.
        """
        config = config if config is not None else RenderConfig()
        try:
            config.validate()
        except ValueError as exc:
            logger.warning("Invalid render configuration: %s", exc)
            raise
        scene.validate()

        self._scene = scene
        self._config = config
        self._framebuffer = FrameBuffer(config.width, config.height, config.channels)

        self._state = RenderState.PENDING
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._started_at = 0.0

        # Pixels finished by the driving thread, and by each band worker of
        # a parallel render_all (one writer per slot)
        self._rendered = 0
        self._band_counts: list[int] = []

        # Progressive state
        self._cursor: Iterator[tuple[int, int]] | None = None
        self._executor: ThreadPoolExecutor | None = None
        self._futures: list[Future] = []
        self._results: queue.Queue | None = None
        self._active_bands = 0

    def __repr__(self) -> str:
        return (
            f"Engine({self.width}x{self.height}, state={self.state.value}, "
            f"rendered={self.rendered_pixels}/{self.total_pixels})"
        )

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def width(self) -> int:
        return self._config.width

    @property
    def height(self) -> int:
        return self._config.height

    @property
    def framebuffer(self) -> FrameBuffer:
        """The output buffer. Only complete once the render has finished."""
        return self._framebuffer

    @property
    def state(self) -> RenderState:
        with self._lock:
            return self._state

    @property
    def total_pixels(self) -> int:
        return self.width * self.height

    @property
    def rendered_pixels(self) -> int:
        """Number of pixels written to the frame buffer so far."""
        return self._rendered + sum(self._band_counts)

    @property
    def progress(self) -> float:
        """Fraction of pixels rendered, in [0, 1]."""
        return self.rendered_pixels / self.total_pixels

    # -------------------------------------------------------------------------
    # Pixel evaluation
    # -------------------------------------------------------------------------

    def render_pixel(self, x: int, y: int) -> Color:
        """Compute the unclamped color of pixel (x, y) without storing it."""
        return self._config.anti_aliasing.render_pixel(
            self._scene, x, y, self.width, self.height, self._config.max_depth
        )

    def _quantized(self, x: int, y: int) -> tuple[int, int, int]:
        rgb = color_to_rgb8(self.render_pixel(x, y))
        return int(rgb[0]), int(rgb[1]), int(rgb[2])

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    def _begin(self) -> bool:
        """Move PENDING to RUNNING. Returns True if this call started the render."""
        with self._lock:
            if self._state is not RenderState.PENDING:
                return False
            self._state = RenderState.RUNNING
        self._started_at = time.perf_counter()
        logger.info(
            "Rendering %dx%d: %d primitives, %d lights, %d samples/pixel, max depth %d, %s",
            self.width,
            self.height,
            len(self._scene.primitives),
            len(self._scene.lights),
            self._config.anti_aliasing.samples_per_pixel,
            self._config.max_depth,
            f"{self._config.workers} workers" if self._config.parallel else "sequential",
        )
        return True

    def _settle(self) -> None:
        """Move RUNNING to COMPLETE or CANCELLED and release worker threads."""
        with self._lock:
            if self._state is not RenderState.RUNNING:
                return
            complete = self.rendered_pixels == self.total_pixels
            self._state = RenderState.COMPLETE if complete else RenderState.CANCELLED

        if self._executor is not None:
            if not complete:
                self._stop_event.set()
            # Workers finish at most their current pixel, and the unbounded
            # results queue never blocks them
            self._executor.shutdown(wait=True, cancel_futures=not complete)
            self._executor = None

        elapsed = time.perf_counter() - self._started_at
        if complete:
            logger.info("Render complete in %.2fs", elapsed)
        else:
            logger.info(
                "Render cancelled after %d of %d pixels (%.2fs)",
                self.rendered_pixels,
                self.total_pixels,
                elapsed,
            )

    def stop(self) -> None:
        """Request cancellation.

        Idempotent and safe to call from any thread. A render that has not
        started is cancelled at once; a running render stops at the next
        pixel boundary.
        """
        with self._lock:
            if self._stop_event.is_set():
                return
            self._stop_event.set()
            state = self._state
            if state is RenderState.PENDING:
                self._state = RenderState.CANCELLED
        logger.debug("Stop requested while %s", state.value)

    # -------------------------------------------------------------------------
    # Synchronous rendering
    # -------------------------------------------------------------------------

    def render_all(self) -> FrameBuffer:
        """Render every remaining pixel and return the frame buffer.

        From PENDING this performs the whole render. If a progressive render
        is already running, the remaining pixels are drained through
        next_pixel(). A complete or cancelled engine returns its buffer
        as is.

        Returns:
            The frame buffer, fully written unless the render was cancelled.
        """
        if self._begin():
            try:
                if self._config.parallel:
                    self._render_parallel()
                else:
                    self._render_sequential()
            finally:
                self._settle()
        elif self.state is RenderState.RUNNING:
            for _ in self.pixels():
                pass
        return self._framebuffer

    def _render_sequential(self) -> None:
        for x, y in scan_order(self.width, range(self.height)):
            if self._stop_event.is_set():
                return
            self._framebuffer.write(x, y, self.render_pixel(x, y))
            self._rendered += 1

    def _render_band(self, index: int, rows: range) -> None:
        for x, y in scan_order(self.width, rows):
            if self._stop_event.is_set():
                return
            self._framebuffer.write(x, y, self.render_pixel(x, y))
            self._band_counts[index] += 1

    def _render_parallel(self) -> None:
        bands = partition_rows(self.height, self._config.workers)
        self._band_counts = [0] * len(bands)
        logger.debug("Partitioned %d rows into %d bands", self.height, len(bands))

        with ThreadPoolExecutor(
            max_workers=len(bands), thread_name_prefix="whitted-render"
        ) as executor:
            futures = [
                executor.submit(self._render_band, index, rows)
                for index, rows in enumerate(bands)
            ]
            try:
                # Joining every worker publishes its rows to the caller
                for future in futures:
                    future.result()
            except Exception:
                self._stop_event.set()
                raise

    # -------------------------------------------------------------------------
    # Progressive rendering
    # -------------------------------------------------------------------------

    def next_pixel(self) -> Pixel | None:
        """Produce the next finished pixel.

        The first call starts the render. Sequential renders compute one
        pixel per call in scan order; parallel renders start the band
        workers and return pixels as they arrive, in scan order within a
        band but in no particular order across bands. Every returned
        pixel has already been written to the frame buffer.

        Returns:
            The next Pixel, or None once the render is complete or
            cancelled (and on every call after that).
        """
        if self._begin():
            self._start_progressive()

        if self.state is not RenderState.RUNNING:
            return None
        if self._stop_event.is_set():
            self._settle()
            return None

        if self._config.parallel:
            return self._next_parallel()
        return self._next_sequential()

    def pixels(self) -> Iterator[Pixel]:
        """Iterate over pixels as next_pixel() produces them."""
        while (pixel := self.next_pixel()) is not None:
            yield pixel

    __iter__ = pixels

    def _start_progressive(self) -> None:
        if not self._config.parallel:
            self._cursor = scan_order(self.width, range(self.height))
            return

        bands = partition_rows(self.height, self._config.workers)
        logger.debug("Partitioned %d rows into %d progressive bands", self.height, len(bands))
        self._results = queue.Queue()
        self._active_bands = len(bands)
        self._executor = ThreadPoolExecutor(
            max_workers=len(bands), thread_name_prefix="whitted-progressive"
        )
        self._futures = [
            self._executor.submit(self._produce_band, index, rows)
            for index, rows in enumerate(bands)
        ]

    def _next_sequential(self) -> Pixel | None:
        x, y = next(self._cursor)
        rgb = self._framebuffer.write(x, y, self.render_pixel(x, y))
        self._rendered += 1
        if self._rendered == self.total_pixels:
            self._settle()
        return Pixel(x, y, rgb)

    def _produce_band(self, index: int, rows: range) -> None:
        """Worker body: render a band and push each pixel to the results queue."""
        try:
            for x, y in scan_order(self.width, rows):
                if self._stop_event.is_set():
                    return
                self._results.put(Pixel(x, y, self._quantized(x, y)))
        finally:
            self._results.put(_BandDone(index))

    def _next_parallel(self) -> Pixel | None:
        while True:
            item = self._results.get()
            if self._stop_event.is_set():
                self._settle()
                return None

            if isinstance(item, _BandDone):
                self._check_band(item.index)
                self._active_bands -= 1
                if self._active_bands == 0:
                    self._settle()
                    return None
                continue

            self._framebuffer.write_rgb8(item.x, item.y, item.color)
            self._rendered += 1
            if self._rendered == self.total_pixels:
                self._settle()
            return item

    def _check_band(self, index: int) -> None:
        """Re-raise the exception of a band worker that failed."""
        try:
            self._futures[index].result()
        except Exception:
            self._stop_event.set()
            self._settle()
            raise
