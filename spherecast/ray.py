"""
Ray class for representing rays in 3D space.

Ray(t) = origin + t * normalize(direction)

Producers are free to hand over an unnormalized direction (camera rays and
shadow feelers both do); the intersection code normalizes before solving,
so `t` is always a distance along the ray.
"""

from __future__ import annotations
from .vec3 import Vec3, Point3


class Ray:
    """A ray with origin and (possibly unnormalized) direction."""

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point3, direction: Vec3):
        self.origin = origin
        self.direction = direction

    def unit_direction(self) -> Vec3:
        """Return the normalized direction.

        The direction must not be the zero vector.
        """
        return self.direction.normalize()

    def at(self, t: float) -> Point3:
        """Get the point at distance t along the ray.

        Args:
            t: Distance from the origin (measured along the unit direction)

        Returns:
            The point at origin + t * normalize(direction)
        """
        return self.origin + self.unit_direction() * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
