"""
Phong local illumination with hard shadows.

color[c] = ambient[c] + diffuse[c] + specular[c] where

    ambient  = La * ka                       (always)
    diffuse  = Ld * kd * (l·n)               if l·n > 0
    specular = Ls * ks * (r·v)^alpha         if r·v > 0

and diffuse/specular are dropped entirely for shadowed points. Results
are linear and unclamped.
"""

from __future__ import annotations
import logging

from .vec3 import Vec3, Point3, Color
from .materials import Material
from .lights import PointLight
from .shapes import SphereList

logger = logging.getLogger(__name__)


def reflect_about(light_direction: Vec3, normal: Vec3) -> Vec3:
    """Mirror the light direction about the normal (unit result)."""
    return (normal * (2.0 * light_direction.dot(normal)) - light_direction).normalize()


def phong(
    material: Material,
    light: PointLight,
    light_direction: Vec3,
    normal: Vec3,
    view_direction: Vec3,
    in_shadow: bool = False
) -> Color:
    """Combine the three Phong terms for one surface point.

    Args:
        material: Surface material
        light: The light (its material holds the intensities)
        light_direction: Unit vector from the point to the light
        normal: Unit surface normal
        view_direction: Unit vector from the point to the viewer
        in_shadow: Suppress diffuse and specular contributions

    Returns:
        Linear color, one value per channel
    """
    intensity = light.material

    if in_shadow:
        diffuse_component = 0.0
        reflection_component = 0.0
    else:
        diffuse_component = light_direction.dot(normal)
        reflection = reflect_about(light_direction, normal)
        reflection_component = reflection.dot(view_direction)

    channels = []
    for c in range(3):
        specular = 0.0
        diffuse = 0.0
        if reflection_component > 0.0:
            specular = (intensity.specular[c] * material.specular[c]
                        * reflection_component ** material.alpha)
        if diffuse_component > 0.0:
            diffuse = intensity.diffuse[c] * material.diffuse[c] * diffuse_component
        ambient = intensity.ambient[c] * material.ambient[c]
        channels.append(ambient + diffuse + specular)

    return Color(*channels)


def shade(
    spheres: SphereList,
    index: int,
    light: PointLight,
    point: Point3,
    view_direction: Vec3,
    shadows: bool = True
) -> Color:
    """Shade a hit on sphere `index` at `point`.

    Runs the shadow query towards the light, excluding the hit sphere.

    Args:
        spheres: All spheres of the scene (used for the shadow query)
        index: Index of the hit sphere
        light: The scene's light
        point: Hit point on the sphere's surface
        view_direction: Unit vector from the point to the viewer
        shadows: Set False to skip the shadow query

    Returns:
        The unclamped color of the point
    """
    sphere = spheres[index]
    normal = sphere.normal_at(point)
    light_direction = light.direction_from(point)

    in_shadow = shadows and spheres.occluded(point, light.position, exclude=index)
    if in_shadow:
        logger.debug("Point %s on sphere %d is shadowed", point, index)

    return phong(sphere.material, light, light_direction, normal, view_direction, in_shadow)
