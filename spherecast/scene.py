"""
Scene container and built-in scenes.

A Scene owns the ordered spheres, the single light and the single camera.
It is built once and only read while rendering.
"""

from __future__ import annotations
from typing import Optional
import math

from .vec3 import Vec3, Point3
from .camera import Camera
from .lights import PointLight, make_white_light
from .materials import Material, diffuse_red, specular_blue, ambient_purple
from .shapes import Sphere, SphereList


class Scene:
    """Spheres, one point light and one camera."""

    def __init__(self, camera: Camera, light: PointLight, spheres: Optional[SphereList] = None):
        self.camera = camera
        self.light = light
        self.spheres = spheres if spheres is not None else SphereList()

    def add_sphere(self, center: Point3, radius: float, material: Material) -> int:
        """Add a sphere and return its index."""
        return self.spheres.add(Sphere(center, radius, material))

    def __len__(self) -> int:
        return len(self.spheres)

    def __repr__(self) -> str:
        return f"Scene(spheres={len(self.spheres)}, light={self.light.position}, camera={self.camera})"


def create_demo_scene() -> Scene:
    """Three spheres clustered around z=25, lit from above."""
    camera = Camera(
        position=Point3(0, 0, 0),
        look_at=Point3(0, 5, 25),
        up=Vec3(0, 1, 0)
    )
    scene = Scene(camera, make_white_light(Point3(0, 5, 10)))

    scene.add_sphere(Point3(.5, 0, 25), 0.6, diffuse_red())
    scene.add_sphere(Point3(0, .5, 23), 0.1, specular_blue())
    scene.add_sphere(Point3(-.5, -.5, 25), 0.4, ambient_purple())
    return scene


def create_original_scene() -> Scene:
    """The first test scene: same materials, light up and to the left."""
    camera = Camera(
        position=Point3(0, 0, 0),
        look_at=Point3(0, 0, 1),
        up=Vec3(0, 1, 0),
        vfov=math.degrees(2 * math.atan(0.5))  # view plane spans [-.5, .5]
    )
    scene = Scene(camera, make_white_light())

    scene.add_sphere(Point3(.5, 0, 25), 0.6, diffuse_red())
    scene.add_sphere(Point3(0, .5, 25), 0.3, specular_blue())
    scene.add_sphere(Point3(-.5, -.5, 25), 0.4, ambient_purple())
    return scene
