"""Tests for the render engine.

This module tests the Engine class including:
- Full renders, sequential and on worker threads
- Progressive next_pixel() rendering in both modes
- Identical output whatever the scheduling
- Cancellation before and during a render
- State transitions and progress reporting
- Validation of the scene and configuration at construction
"""

import logging
import threading

import numpy as np
import pytest
from conftest import make_ortho_camera, make_sphere

from src.whitted.core.config import RenderConfig
from src.whitted.core.engine import Engine, Pixel, RenderState
from src.whitted.core.scheduler import partition_rows, scan_order
from src.whitted.core.strategy import AntiAliasing, NoAntiAliasing, RandomAntiAliasing
from src.whitted.errors import SceneValidationError
from src.whitted.scene.scene import Scene


class HookedAntiAliasing(AntiAliasing):
    """Center-ray sampling that calls a hook before every pixel."""

    def __init__(self, hook):
        self.hook = hook
        self.calls = 0
        self._lock = threading.Lock()
        self._inner = NoAntiAliasing()

    @property
    def samples_per_pixel(self) -> int:
        return 1

    def render_pixel(self, scene, x, y, width, height, max_depth):
        with self._lock:
            self.calls += 1
            count = self.calls
        self.hook(count, x, y)
        return self._inner.render_pixel(scene, x, y, width, height, max_depth)


def _written(engine):
    """Number of frame buffer cells with alpha set."""
    return int(np.count_nonzero(engine.framebuffer.to_numpy()[:, :, 3] == 255))


# =============================================================================
# Full renders
# =============================================================================


class TestRenderAll:
    """Tests for render_all()."""

    def test_renders_every_pixel(self, flat_scene, small_config):
        """Test a complete sequential render."""
        engine = Engine(flat_scene, small_config)
        framebuffer = engine.render_all()

        assert framebuffer is engine.framebuffer
        assert engine.state is RenderState.COMPLETE
        assert engine.rendered_pixels == engine.total_pixels == 48
        assert engine.progress == 1.0
        assert _written(engine) == 48

    def test_image_content(self, flat_scene):
        """Test that the disk is drawn in the middle on black."""
        engine = Engine(flat_scene, RenderConfig(width=16, height=12))
        pixels = engine.render_all().to_numpy()

        assert tuple(pixels[6, 8]) == (127, 127, 127, 255)
        assert tuple(pixels[0, 0]) == (0, 0, 0, 255)

    def test_parallel_render_completes(self, simple_scene):
        """Test a complete render on worker threads."""
        engine = Engine(simple_scene, RenderConfig(width=10, height=7, parallel=True, workers=3))
        engine.render_all()

        assert engine.state is RenderState.COMPLETE
        assert _written(engine) == 70

    def test_more_workers_than_rows(self, flat_scene):
        """Test that a tiny image renders with a large pool."""
        engine = Engine(flat_scene, RenderConfig(width=3, height=2, parallel=True, workers=8))
        engine.render_all()
        assert engine.state is RenderState.COMPLETE

    def test_render_all_twice_returns_same_buffer(self, flat_scene, small_config):
        """Test that a finished engine does not render again."""
        engine = Engine(flat_scene, small_config)
        first = engine.render_all().as_bytes()
        assert engine.render_all().as_bytes() == first
        assert engine.state is RenderState.COMPLETE

    def test_rgb_framebuffer(self, flat_scene):
        """Test rendering into a three-channel buffer."""
        engine = Engine(flat_scene, RenderConfig(width=4, height=3, channels=3))
        assert engine.render_all().to_numpy().shape == (3, 4, 3)

    def test_logs_start_and_completion(self, flat_scene, small_config, caplog):
        """Test the INFO lines around a render."""
        caplog.set_level(logging.INFO, logger="src.whitted")
        Engine(flat_scene, small_config).render_all()

        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("Rendering 8x6") for message in messages)
        assert any("Render complete" in message for message in messages)


class TestDeterminism:
    """Tests that scheduling never changes the image."""

    @pytest.fixture
    def config_kwargs(self):
        return {
            "width": 12,
            "height": 9,
            "anti_aliasing": RandomAntiAliasing(rays_per_pixel=3, seed=11),
        }

    def test_all_modes_produce_identical_bytes(self, simple_scene, config_kwargs):
        """Test sequential, parallel and both progressive modes against each other."""
        sequential = Engine(simple_scene, RenderConfig(**config_kwargs)).render_all()
        parallel = Engine(
            simple_scene, RenderConfig(parallel=True, workers=3, **config_kwargs)
        ).render_all()

        progressive = Engine(simple_scene, RenderConfig(**config_kwargs))
        list(progressive.pixels())
        progressive_parallel = Engine(
            simple_scene, RenderConfig(parallel=True, workers=4, **config_kwargs)
        )
        list(progressive_parallel.pixels())

        expected = sequential.as_bytes()
        assert parallel.as_bytes() == expected
        assert progressive.framebuffer.as_bytes() == expected
        assert progressive_parallel.framebuffer.as_bytes() == expected

    def test_render_pixel_matches_buffer(self, simple_scene, config_kwargs):
        """Test that render_pixel computes what render_all stores."""
        engine = Engine(simple_scene, RenderConfig(**config_kwargs))
        engine.render_all()
        color = np.clip(engine.render_pixel(5, 4), 0.0, 1.0)
        expected = tuple(int(c) for c in (color * 255).astype(np.uint8))
        assert engine.framebuffer.color_at(5, 4)[:3] == expected


# =============================================================================
# Progressive rendering
# =============================================================================


class TestNextPixel:
    """Tests for sequential next_pixel()."""

    def test_scan_order(self, flat_scene, small_config):
        """Test that pixels arrive left to right, top to bottom."""
        engine = Engine(flat_scene, small_config)
        coords = [(pixel.x, pixel.y) for pixel in engine.pixels()]
        assert coords == list(scan_order(8, range(6)))

    def test_pixel_already_written(self, flat_scene, small_config):
        """Test that a returned pixel is in the frame buffer."""
        engine = Engine(flat_scene, small_config)
        pixel = engine.next_pixel()

        assert isinstance(pixel, Pixel)
        assert (pixel.x, pixel.y) == (0, 0)
        assert engine.framebuffer.color_at(0, 0) == (*pixel.color, 255)
        assert engine.state is RenderState.RUNNING
        assert engine.rendered_pixels == 1

    def test_none_after_completion(self, flat_scene):
        """Test that None is returned on every call once complete."""
        engine = Engine(flat_scene, RenderConfig(width=2, height=2))
        assert len(list(engine)) == 4
        assert engine.state is RenderState.COMPLETE
        assert engine.next_pixel() is None
        assert engine.next_pixel() is None

    def test_progress_advances(self, flat_scene, small_config):
        """Test that progress tracks the pixels returned so far."""
        engine = Engine(flat_scene, small_config)
        assert engine.progress == 0.0
        for _ in range(12):
            engine.next_pixel()
        assert engine.progress == pytest.approx(0.25)

    def test_render_all_drains_progressive_render(self, flat_scene, small_config):
        """Test finishing a progressive render with render_all()."""
        reference = Engine(flat_scene, small_config).render_all().as_bytes()

        engine = Engine(flat_scene, small_config)
        for _ in range(5):
            engine.next_pixel()
        engine.render_all()

        assert engine.state is RenderState.COMPLETE
        assert engine.framebuffer.as_bytes() == reference


class TestParallelNextPixel:
    """Tests for next_pixel() with worker threads."""

    def test_every_pixel_exactly_once(self, simple_scene):
        """Test that the pixels of all bands arrive, each once."""
        engine = Engine(simple_scene, RenderConfig(width=7, height=10, parallel=True, workers=3))
        coords = [(pixel.x, pixel.y) for pixel in engine.pixels()]

        assert len(coords) == 70
        assert set(coords) == set(scan_order(7, range(10)))
        assert engine.state is RenderState.COMPLETE

    def test_scan_order_within_each_band(self, simple_scene):
        """Test that each band's pixels arrive in scan order."""
        engine = Engine(simple_scene, RenderConfig(width=5, height=9, parallel=True, workers=3))
        coords = [(pixel.x, pixel.y) for pixel in engine.pixels()]

        for rows in partition_rows(9, 3):
            band = [coord for coord in coords if coord[1] in rows]
            assert band == list(scan_order(5, rows))

    def test_worker_failure_is_raised(self, flat_scene):
        """Test that an exception in a band worker reaches the caller."""

        def explode(count, x, y):
            if (x, y) == (1, 3):
                raise RuntimeError("shader failed")

        config = RenderConfig(
            width=4, height=4, parallel=True, workers=2, anti_aliasing=HookedAntiAliasing(explode)
        )
        engine = Engine(flat_scene, config)
        with pytest.raises(RuntimeError, match="shader failed"):
            list(engine.pixels())
        assert engine.state is RenderState.CANCELLED


# =============================================================================
# Cancellation
# =============================================================================


class TestCancellation:
    """Tests for stop()."""

    def test_stop_before_start(self, flat_scene, small_config):
        """Test that a render that never started is cancelled at once."""
        engine = Engine(flat_scene, small_config)
        engine.stop()

        assert engine.state is RenderState.CANCELLED
        assert engine.next_pixel() is None
        engine.render_all()
        assert engine.rendered_pixels == 0
        assert not engine.framebuffer.to_numpy().any()

    def test_stop_is_idempotent(self, flat_scene, small_config):
        """Test that repeated stops are harmless."""
        engine = Engine(flat_scene, small_config)
        engine.stop()
        engine.stop()
        assert engine.state is RenderState.CANCELLED

    def test_stop_after_completion_keeps_complete(self, flat_scene, small_config):
        """Test that stopping a finished render changes nothing."""
        engine = Engine(flat_scene, small_config)
        engine.render_all()
        engine.stop()
        assert engine.state is RenderState.COMPLETE

    def test_stop_during_progressive_render(self, flat_scene, small_config):
        """Test that only the pixels returned before stop() are written."""
        engine = Engine(flat_scene, small_config)
        for _ in range(10):
            engine.next_pixel()
        engine.stop()

        assert engine.next_pixel() is None
        assert engine.state is RenderState.CANCELLED
        alpha = engine.framebuffer.to_numpy()[:, :, 3].flatten()
        assert np.all(alpha[:10] == 255)
        assert not alpha[10:].any()

    def test_stop_during_parallel_progressive_render(self, simple_scene):
        """Test that no cell is written after the consumer stops."""
        engine = Engine(simple_scene, RenderConfig(width=16, height=12, parallel=True, workers=4))
        consumed = [engine.next_pixel() for _ in range(7)]
        engine.stop()

        assert all(pixel is not None for pixel in consumed)
        assert engine.next_pixel() is None
        assert engine.state is RenderState.CANCELLED
        assert engine.rendered_pixels == 7
        assert _written(engine) == 7

    def test_cancelled_parallel_render_joins_workers(self, simple_scene):
        """Test that no progressive worker thread outlives a cancelled render."""
        engine = Engine(simple_scene, RenderConfig(width=32, height=24, parallel=True, workers=4))
        engine.next_pixel()
        engine.stop()
        assert engine.next_pixel() is None

        workers = [t for t in threading.enumerate() if t.name.startswith("whitted-progressive")]
        assert workers == []

    def test_stop_from_inside_sequential_render(self, flat_scene, small_config):
        """Test that stop() takes effect at the next pixel boundary."""
        engine = None

        def stop_after_five(count, x, y):
            if count == 5:
                engine.stop()

        config = RenderConfig(width=8, height=6, anti_aliasing=HookedAntiAliasing(stop_after_five))
        engine = Engine(flat_scene, config)
        engine.render_all()

        # The fifth pixel is finished before the stop is seen
        assert engine.state is RenderState.CANCELLED
        assert engine.rendered_pixels == 5
        assert _written(engine) == 5

    def test_stop_from_inside_parallel_render(self, flat_scene):
        """Test cancelling a full render on worker threads."""
        engine = None

        def stop_after_five(count, x, y):
            if count == 5:
                engine.stop()

        config = RenderConfig(
            width=16,
            height=12,
            parallel=True,
            workers=4,
            anti_aliasing=HookedAntiAliasing(stop_after_five),
        )
        engine = Engine(flat_scene, config)
        engine.render_all()

        assert engine.state is RenderState.CANCELLED
        assert 5 <= engine.rendered_pixels < engine.total_pixels
        assert _written(engine) == engine.rendered_pixels

    def test_cancellation_is_logged(self, flat_scene, small_config, caplog):
        """Test the INFO line for a cancelled render."""
        caplog.set_level(logging.INFO, logger="src.whitted")
        engine = Engine(flat_scene, small_config)
        engine.next_pixel()
        engine.stop()
        engine.next_pixel()

        assert any("Render cancelled after 1 of 48" in r.getMessage() for r in caplog.records)


# =============================================================================
# Construction
# =============================================================================


class TestEngineConstruction:
    """Tests for Engine validation."""

    def test_default_config(self, flat_scene):
        """Test that the default configuration is used when none is given."""
        engine = Engine(flat_scene)
        assert (engine.width, engine.height) == (1024, 576)
        assert engine.state is RenderState.PENDING

    def test_invalid_config_rejected(self, flat_scene, caplog):
        """Test that a bad configuration raises ValueError and is logged."""
        caplog.set_level(logging.WARNING, logger="src.whitted")
        with pytest.raises(ValueError, match="max_depth"):
            Engine(flat_scene, RenderConfig(width=4, height=3, max_depth=-1))
        assert any("Invalid render configuration" in r.getMessage() for r in caplog.records)

    def test_invalid_scene_rejected(self, small_config):
        """Test that a bad scene raises SceneValidationError."""
        scene = Scene(camera=make_ortho_camera(), primitives=[make_sphere(radius=-2.0)])
        with pytest.raises(SceneValidationError):
            Engine(scene, small_config)

    def test_repr(self, flat_scene, small_config):
        """Test the engine summary."""
        assert repr(Engine(flat_scene, small_config)) == "Engine(8x6, state=pending, rendered=0/48)"
