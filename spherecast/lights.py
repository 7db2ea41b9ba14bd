"""
Point light source.

The scene has exactly one light. Its material coefficients are read as
intensities: `material.diffuse` scales the diffuse term, and so on.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .vec3 import Vec3, Point3
from .materials import Material, white_light


@dataclass(frozen=True)
class PointLight:
    """A point light with per-term intensities.

    Point lights emit light equally in all directions from a single point
    and produce hard shadows.
    """
    position: Point3
    material: Material = field(default_factory=white_light)

    def direction_from(self, point: Point3) -> Vec3:
        """Unit direction from `point` towards the light."""
        return (self.position - point).normalize()


def make_white_light(position: Point3 = None) -> PointLight:
    """Create a unit-intensity white light.

    Args:
        position: Light position (defaults to (-10, 15, 0))
    """
    if position is None:
        position = Point3(-10, 15, 0)
    return PointLight(position, white_light())
