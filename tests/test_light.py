"""Unit tests for point and spot lights."""

import math

import numpy as np
import pytest

from src.whitted.core.color import BLACK, WHITE, color
from src.whitted.core.vector import vec3
from src.whitted.scene.light import PointLight, SpotLight


def _point_at_angle(degrees: float, distance: float = 5.0):
    """A point below the origin, tilted by an angle from the -Y axis."""
    theta = math.radians(degrees)
    return vec3(distance * math.sin(theta), -distance * math.cos(theta), 0.0)


class TestPointLight:
    """Tests for omnidirectional lights."""

    def test_constant_color(self):
        """Test that a point light sends the same color everywhere."""
        light = PointLight(source=vec3(0.0, 10.0, 0.0), color=color(0.8, 0.8, 0.8))
        for point in [(0.0, 0.0, 0.0), (100.0, -5.0, 3.0)]:
            np.testing.assert_allclose(light.color_toward(vec3(*point)), [0.8, 0.8, 0.8])

    def test_default_color_is_white(self):
        """Test the default emission."""
        light = PointLight(source=vec3(0.0, 0.0, 0.0))
        np.testing.assert_array_equal(light.color, WHITE)


class TestSpotLight:
    """Tests for cone falloff."""

    @pytest.fixture
    def spot(self):
        """A white spot at the origin pointing down, lit fully within 10 degrees."""
        return SpotLight(
            source=vec3(0.0, 0.0, 0.0),
            direction=vec3(0.0, -1.0, 0.0),
            inner_angle_degree=10.0,
            outer_angle_degree=30.0,
            color=WHITE,
        )

    def test_full_color_inside_inner_cone(self, spot):
        """Test a point on the axis."""
        np.testing.assert_allclose(spot.color_toward(_point_at_angle(5.0)), WHITE)

    def test_black_outside_outer_cone(self, spot):
        """Test a point outside the cone."""
        np.testing.assert_allclose(spot.color_toward(_point_at_angle(45.0)), BLACK)

    def test_linear_falloff_between_cones(self, spot):
        """Test that halfway between inner and outer gives half the color."""
        np.testing.assert_allclose(spot.color_toward(_point_at_angle(20.0)), [0.5, 0.5, 0.5])

    def test_inverted_angles_rejected(self):
        """Test that inner must not exceed outer."""
        spot = SpotLight(
            source=vec3(0.0, 0.0, 0.0),
            direction=vec3(0.0, -1.0, 0.0),
            inner_angle_degree=40.0,
            outer_angle_degree=20.0,
        )
        with pytest.raises(ValueError, match="angles"):
            spot.validate()

    def test_zero_direction_rejected(self):
        """Test that the cone needs an axis."""
        spot = SpotLight(source=vec3(0.0, 0.0, 0.0), direction=vec3(0.0, 0.0, 0.0))
        with pytest.raises(ValueError, match="direction"):
            spot.validate()

    def test_equal_angles_give_hard_edge(self):
        """Test a cone without a falloff band."""
        spot = SpotLight(
            source=vec3(0.0, 0.0, 0.0),
            direction=vec3(0.0, -1.0, 0.0),
            inner_angle_degree=15.0,
            outer_angle_degree=15.0,
        )
        spot.validate()
        np.testing.assert_allclose(spot.color_toward(_point_at_angle(14.0)), WHITE)
        np.testing.assert_allclose(spot.color_toward(_point_at_angle(16.0)), BLACK)
