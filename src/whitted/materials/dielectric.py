"""Refraction through transparent media.

Key physics:
    - Snell's law for refraction: n1 * sin(theta1) = n2 * sin(theta2)
    - Total internal reflection when sin(theta_t) > 1

Whether the ray enters or leaves the medium is decided by the sign of
D . N against the surface's outward normal. Entering, light goes from the
world medium into the object; leaving, the indices swap and the normal is
flipped to face the ray.

Unlike a stochastic dielectric, this transmission is deterministic: a
transparent surface always refracts, falling back to mirror reflection
only under total internal reflection.
"""

import math

from src.whitted.core.vector import Vec3, dot, normalize


def refracted_direction(
    incident: Vec3,
    outward_normal: Vec3,
    refractive_index: float,
    world_index: float = 1.0,
) -> Vec3 | None:
    """Compute the refracted direction using Snell's law.

    Args:
        incident: The incoming unit ray direction.
        outward_normal: The unit surface normal pointing out of the object.
        refractive_index: Index of refraction of the object.
        world_index: Index of refraction of the surrounding medium.

    Returns:
        The unit refracted direction, or None under total internal
        reflection.
    """
    cos_i = dot(incident, outward_normal)
    if cos_i < 0.0:
        # Entering the object
        eta = world_index / refractive_index
        normal = outward_normal
        cos_i = -cos_i
    else:
        # Leaving the object
        eta = refractive_index / world_index
        normal = -outward_normal

    k = 1.0 - eta * eta * (1.0 - cos_i * cos_i)
    if k < 0.0:
        return None
    return normalize(eta * incident + (eta * cos_i - math.sqrt(k)) * normal)
