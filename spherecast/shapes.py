"""
Spheres and the intersection engine.

A sphere's identity within a render is its index in the scene's
SphereList. Closest-hit and shadow queries both scan the list in
ascending index order and can exclude one index.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional
import math

from .vec3 import Vec3, Point3
from .ray import Ray
from .materials import Material

# Upper end of the parametric range; anything further counts as a miss
T_MAX = 10000.0


@dataclass
class HitRecord:
    """Nearest accepted intersection of a closest-hit query.

    Attributes:
        index: Position of the hit sphere in the SphereList
        t: Distance along the normalized ray direction
        sphere: The hit sphere
    """
    index: int
    t: float
    sphere: Sphere


class Sphere:
    """A sphere defined by center, radius and material."""

    def __init__(self, center: Point3, radius: float, material: Optional[Material] = None):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere (> 0)
            material: Phong material for shading
        """
        self.center = center
        self.radius = radius
        self.material = material if material is not None else Material()

    def normal_at(self, point: Point3) -> Vec3:
        """Outward unit normal at a point on the surface."""
        return (point - self.center).normalize()

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


def intersect_sphere(ray: Ray, sphere: Sphere, t0: float, t1: float) -> Optional[float]:
    """Solve the ray-sphere quadratic and select a root.

    Substituting P(t) = e + t*d into (P-c)·(P-c) = r² gives a quadratic
    whose discriminant is (d·(e-c))² - (d·d)((e-c)·(e-c) - r²). The near
    root is used when it lies past t0, otherwise the far root. The chosen
    root counts only if t0 < root < t1.

    Returns:
        The selected root, or None for a miss
    """
    d = ray.unit_direction()
    oc = ray.origin - sphere.center

    d_oc = d.dot(oc)
    dd = d.length_squared()
    discriminant = d_oc * d_oc - dd * (oc.length_squared() - sphere.radius * sphere.radius)
    if discriminant < 0:
        return None

    sqrtd = math.sqrt(discriminant)
    negative_root = (-d_oc - sqrtd) / dd
    positive_root = (-d_oc + sqrtd) / dd

    # Far root whenever the near one is not past t0 (e.g. origin inside)
    root = negative_root if negative_root > t0 else positive_root
    if t0 < root < t1:
        return root
    return None


class SphereList:
    """Ordered, unbounded collection of spheres."""

    def __init__(self, spheres: Optional[list[Sphere]] = None):
        self.spheres: list[Sphere] = list(spheres) if spheres is not None else []

    def add(self, sphere: Sphere) -> int:
        """Append a sphere and return its index."""
        self.spheres.append(sphere)
        return len(self.spheres) - 1

    def closest_hit(
        self,
        ray: Ray,
        t0: float = 0.0,
        t1: float = T_MAX,
        exclude: Optional[int] = None
    ) -> Optional[HitRecord]:
        """Find the nearest sphere hit within (t0, t1).

        Args:
            ray: The ray to test
            t0: Lower bound of the parametric range (exclusive)
            t1: Upper bound of the parametric range (exclusive)
            exclude: Index of a sphere to skip, if any

        Returns:
            HitRecord for the nearest hit, None if nothing was hit
        """
        closest_hit: Optional[HitRecord] = None
        closest_t = t1

        for index, sphere in enumerate(self.spheres):
            if index == exclude:
                continue
            t = intersect_sphere(ray, sphere, t0, closest_t)
            if t is not None:
                closest_hit = HitRecord(index, t, sphere)
                closest_t = t

        return closest_hit

    def occluded(
        self,
        point: Point3,
        light_position: Point3,
        exclude: Optional[int] = None,
        t_max: float = T_MAX
    ) -> bool:
        """Shadow query: is anything between `point` and the light?

        The feeler ray starts at `point` and heads towards the light.
        The sphere being shaded is passed as `exclude` so grazing
        self-hits near t = 0 do not darken it.
        """
        feeler = Ray(point, light_position - point)
        return self.closest_hit(feeler, 0.0, t_max, exclude) is not None

    def __len__(self) -> int:
        return len(self.spheres)

    def __iter__(self) -> Iterator[Sphere]:
        return iter(self.spheres)

    def __getitem__(self, index: int) -> Sphere:
        return self.spheres[index]
