"""Whitted-style recursive ray tracer.

This package renders a scene of geometric primitives, lights and a camera
into a raster image by casting rays through each pixel and recursively
evaluating intersections, shading, shadows, reflection and refraction.

Subpackages:
    core: Vectors, colors, rays, shading integrator, render engine
    geometry: Shape primitives and ray-shape intersection
    materials: Textures and optical effects (Phong, mirror, transparency)
    camera: Perspective and orthogonal cameras with ray generation
    scene: Primitives, lights, scene validation and closest-hit queries
    preview: Frame buffer export utilities
"""

__version__ = "0.1.0"
