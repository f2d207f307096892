"""Unit tests for the Ray type and secondary-ray construction."""

import math

import numpy as np
import pytest

from src.whitted.core.ray import (
    RAY_EPSILON,
    make_ray,
    offset_origin,
    ray_at,
    ray_from_to,
    spawn_ray,
)
from src.whitted.core.vector import length, vec3


class TestRayConstruction:
    """Tests for make_ray and ray_from_to."""

    def test_make_ray_normalizes_direction(self):
        """Test that the stored direction has unit length."""
        ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 3.0, 4.0))
        assert length(ray.direction) == pytest.approx(1.0)
        np.testing.assert_allclose(ray.direction, [0.0, 0.6, 0.8])

    def test_default_interval(self):
        """Test the default parametric interval."""
        ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(1.0, 0.0, 0.0))
        assert ray.t_min == 0.0
        assert ray.t_max == math.inf

    def test_ray_is_immutable(self):
        """Test that neither the fields nor the arrays can be changed."""
        ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(1.0, 0.0, 0.0))
        with pytest.raises(AttributeError):
            ray.t_min = 1.0
        with pytest.raises(ValueError):
            ray.origin[0] = 5.0

    def test_ray_does_not_alias_input(self):
        """Test that changing the input vector leaves the ray alone."""
        origin = vec3(1.0, 2.0, 3.0)
        ray = make_ray(origin, vec3(1.0, 0.0, 0.0))
        origin[0] = 100.0
        np.testing.assert_array_equal(ray.origin, [1.0, 2.0, 3.0])

    def test_zero_direction_raises(self):
        """Test that a degenerate direction is a contract violation."""
        with pytest.raises(ValueError):
            make_ray(vec3(0.0, 0.0, 0.0), vec3(0.0, 0.0, 0.0))

    def test_ray_from_to(self):
        """Test aiming a ray at a point."""
        ray = ray_from_to(vec3(1.0, 1.0, 1.0), vec3(1.0, 1.0, 5.0))
        np.testing.assert_allclose(ray.direction, [0.0, 0.0, 1.0])

    def test_ray_at(self):
        """Test evaluating a point along the ray."""
        ray = make_ray(vec3(1.0, 0.0, 0.0), vec3(0.0, 2.0, 0.0))
        np.testing.assert_allclose(ray_at(ray, 3.0), [1.0, 3.0, 0.0])

    def test_contains_is_exclusive(self):
        """Test that both interval ends are excluded."""
        ray = make_ray(vec3(0.0, 0.0, 0.0), vec3(1.0, 0.0, 0.0), t_min=1.0, t_max=2.0)
        assert ray.contains(1.5)
        assert not ray.contains(1.0)
        assert not ray.contains(2.0)


class TestSecondaryRays:
    """Tests for origin offsetting and spawn_ray."""

    def test_offset_above_surface_for_reflection(self):
        """Test that a ray leaving along the normal starts above the surface."""
        origin = offset_origin(vec3(0.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0), vec3(0.0, 1.0, 0.0))
        assert origin[1] == pytest.approx(RAY_EPSILON)

    def test_offset_below_surface_for_refraction(self):
        """Test that a ray entering the surface starts below it."""
        origin = offset_origin(vec3(0.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0), vec3(0.0, -1.0, 0.0))
        assert origin[1] == pytest.approx(-RAY_EPSILON)

    def test_spawn_ray_sets_interval(self):
        """Test that spawned rays skip the surface and honor t_max."""
        ray = spawn_ray(
            vec3(0.0, 0.0, 0.0), vec3(0.0, 1.0, 0.0), vec3(0.0, 2.0, 0.0), t_max=10.0
        )
        assert ray.t_min == RAY_EPSILON
        assert ray.t_max == 10.0
        np.testing.assert_allclose(ray.direction, [0.0, 1.0, 0.0])
