"""Whitted-style recursive shading integrator.

This module computes the color seen along a ray. The integrator is
deterministic: every surface contributes a local Phong term, and mirror
and transparent surfaces spawn exactly one secondary ray each.

Per hit, the color is:
    - the ambient term, ambient_light * base_color
    - for each light whose shadow ray is unobstructed, the diffuse term
      max(0, N . L) * light_color * base_color and the specular term
      max(0, R . V)^shininess * light_color
    - for a Mirror effect, coeff times the color of the reflected ray
    - for a Transparency effect, alpha times the color of the refracted ray
      (the reflected ray under total internal reflection)

Key features:
    - Explicit depth parameter bounding the recursion
    - Binary shadows: any primitive, transparent or not, blocks a light
    - Self-intersection avoidance with ray offset on every secondary ray
    - Unclamped accumulation; clamping happens only when a pixel is written

Example:
    >>> from src.whitted.core.integrator import color_for_ray
    >>> from src.whitted.scene.sample import create_sample_scene
    >>> scene = create_sample_scene()
    >>> ray = scene.camera.generate_ray(0.5, 0.5)
    >>> color = color_for_ray(ray, scene, depth=3)
"""

from src.whitted.core.color import BLACK, Color
from src.whitted.core.ray import Ray, spawn_ray
from src.whitted.core.vector import distance, dot, reflect
from src.whitted.materials.dielectric import refracted_direction
from src.whitted.scene.intersection import HitRecord, find_closest_hit, is_occluded
from src.whitted.scene.scene import Scene

# =============================================================================
# Local Illumination
# =============================================================================


def _local_illumination(ray: Ray, hit: HitRecord, scene: Scene) -> Color:
    """Compute the ambient, diffuse and specular terms at a hit point.

    Args:
        ray: The incoming ray.
        hit: The intersection being shaded.
        scene: The scene providing lights and occluders.

    Returns:
        The local Phong color.
    """
    phong = hit.primitive.effects.shading
    base_color = hit.primitive.color_at(hit.point)

    result = phong.ambient * scene.ambient_light * base_color

    for light in scene.lights:
        to_light = light.source - hit.point
        light_distance = distance(hit.point, light.source)
        if light_distance == 0.0:
            continue

        # Shadow ray stops at the light so primitives behind it do not count
        shadow_ray = spawn_ray(hit.point, hit.normal, to_light, t_max=light_distance)
        if is_occluded(shadow_ray, scene.primitives):
            continue

        light_color = light.color_toward(hit.point)
        light_dir = shadow_ray.direction

        # Diffuse only from the lit side; specular is gated separately
        n_dot_l = dot(hit.normal, light_dir)
        if n_dot_l > 0.0:
            result = result + phong.diffuse * n_dot_l * light_color * base_color

        if phong.specular > 0.0:
            # Reflected view direction against the light direction
            r_dot_l = dot(reflect(ray.direction, hit.normal), light_dir)
            if r_dot_l > 0.0:
                result = result + phong.specular * (r_dot_l**phong.shininess) * light_color

    return result


# =============================================================================
# Recursive Ray Color
# =============================================================================


def color_for_ray(ray: Ray, scene: Scene, depth: int) -> Color:
    """Compute the color seen along a ray.

    Args:
        ray: The ray to trace.
        scene: The scene to render.
        depth: Remaining recursion budget. Primary rays start with
            max_depth + 1, so max_depth counts reflection/refraction
            bounces; at depth 0 the ray contributes black.

    Returns:
        The unclamped linear color along the ray.
    """
    if depth <= 0:
        return BLACK.copy()

    hit = find_closest_hit(ray, scene)
    if hit is None:
        return scene.background.copy()

    result = _local_illumination(ray, hit, scene)

    effects = hit.primitive.effects
    if effects.mirror is not None and effects.mirror.coeff > 0.0:
        reflected = spawn_ray(hit.point, hit.normal, reflect(ray.direction, hit.normal))
        result = result + effects.mirror.coeff * color_for_ray(reflected, scene, depth - 1)

    if effects.transparency is not None and effects.transparency.alpha > 0.0:
        direction = refracted_direction(
            ray.direction,
            hit.outward_normal,
            effects.transparency.refractive_index,
            scene.world_refractive_index,
        )
        if direction is None:
            # Total internal reflection
            direction = reflect(ray.direction, hit.normal)
        transmitted = spawn_ray(hit.point, hit.normal, direction)
        result = result + effects.transparency.alpha * color_for_ray(transmitted, scene, depth - 1)

    return result


def trace_primary(ray: Ray, scene: Scene, max_depth: int) -> Color:
    """Trace a camera ray allowing max_depth secondary bounces."""
    return color_for_ray(ray, scene, max_depth + 1)
