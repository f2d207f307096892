"""Vector utilities for the ray tracing math kernel.

Vectors, points and colors are all represented as float64 NumPy arrays of
shape (3,). The helpers in this module are pure functions: they never mutate
their arguments and have no error conditions except normalizing a
zero-length vector, which is a contract violation and raises ValueError.

Example:
    >>> from src.whitted.core.vector import vec3, normalize, reflect
    >>> d = normalize(vec3(1.0, -1.0, 0.0))
    >>> reflect(d, vec3(0.0, 1.0, 0.0))
    array([0.70710678, 0.70710678, 0.        ])
"""

import math
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

# Type alias for 3D vectors, points and RGB colors
Vec3 = npt.NDArray[np.float64]

# Below this length a vector cannot be given a direction
ZERO_LENGTH = 1e-12


def vec3(x: float, y: float, z: float) -> Vec3:
    """Create a 3D vector from its components."""
    return np.array((x, y, z), dtype=np.float64)


def as_vec3(value: Sequence[float] | Vec3) -> Vec3:
    """Convert a 3-sequence to a fresh float64 vector.

    Args:
        value: Any sequence of three numbers, or an existing vector.

    Returns:
        A new array of shape (3,).

    Raises:
        ValueError: If the value does not hold exactly three components.
    """
    result = np.array(value, dtype=np.float64).reshape(-1)
    if result.shape != (3,):
        raise ValueError(f"Expected 3 components, got {len(result)}")
    return result


def frozen(v: Vec3) -> Vec3:
    """Return a read-only copy of a vector, for immutable value types."""
    result = np.array(v, dtype=np.float64)
    result.setflags(write=False)
    return result


# =============================================================================
# Vector Operations
# =============================================================================


def dot(a: Vec3, b: Vec3) -> float:
    """Compute the dot product a . b."""
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Compute the cross product a x b."""
    return vec3(
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length_squared(v: Vec3) -> float:
    """Compute the squared Euclidean length of a vector."""
    return dot(v, v)


def length(v: Vec3) -> float:
    """Compute the Euclidean length of a vector."""
    return math.sqrt(dot(v, v))


def distance(a: Vec3, b: Vec3) -> float:
    """Compute the distance between two points."""
    return length(b - a)


def near_zero(v: Vec3) -> bool:
    """Check whether a vector is too short to define a direction."""
    return length(v) < ZERO_LENGTH


def normalize(v: Vec3) -> Vec3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v.

    Raises:
        ValueError: If v has zero length. A degenerate direction means an
            upstream validation gap and is never silently clamped.
    """
    norm = length(v)
    if norm < ZERO_LENGTH:
        raise ValueError(f"Cannot normalize zero-length vector {tuple(v)}")
    return v / norm


def reflect(incident: Vec3, normal: Vec3) -> Vec3:
    """Reflect an incident vector about a normal.

    Computes R = D - 2(D . N)N. The normal should be unit length.

    Args:
        incident: The incoming direction (pointing toward the surface).
        normal: The surface normal.

    Returns:
        The reflected direction.
    """
    return incident - 2.0 * dot(incident, normal) * normal


def build_onb_from_normal(normal: Vec3) -> tuple[Vec3, Vec3]:
    """Build two tangent axes completing a unit normal into an orthonormal basis.

    Args:
        normal: A unit normal vector.

    Returns:
        A tuple (tangent, bitangent) such that (tangent, bitangent, normal)
        is orthonormal.
    """
    # Choose a helper axis not parallel to the normal
    helper = vec3(1.0, 0.0, 0.0)
    if abs(normal[0]) > 0.9:
        helper = vec3(0.0, 1.0, 0.0)
    tangent = normalize(cross(helper, normal))
    bitangent = cross(normal, tangent)
    return tangent, bitangent
